"""Josa selection — pick the surface form for a word and append it."""

from __future__ import annotations

from josa.errors import UndeterminedJosa
from josa.hangul import Coda, classify, ends_with_rieul
from josa.particles import Josa


def select(text: str, josa: Josa) -> str:
    """Select the correct form of ``josa`` for ``text``.

    Useful when the word is wrapped in markup, e.g. ``<b>고양이</b>``:
    select against the bare word, then format the markup yourself.

    >>> select("고양이", Josa.I_GA)
    '가'
    >>> select("사냥꾼", Josa.EUN_NEUN)
    '은'

    Raises EmptyInput for an empty ``text`` and UndeterminedJosa when the
    last character is not a Hangul syllable and ``josa`` has no fallback.
    """
    coda = classify(text)
    if coda is Coda.HAS_CODA:
        if josa.rieul_is_open and ends_with_rieul(text):
            return josa.no_coda_form
        return josa.coda_form
    if coda is Coda.NO_CODA:
        return josa.no_coda_form
    if josa.fallback_form is None:
        raise UndeterminedJosa(text[-1], josa)
    return josa.fallback_form


def append(text: str, josa: Josa) -> str:
    """Return ``text`` with the selected josa appended."""
    return text + select(text, josa)


class JosaBuffer:
    """Growable text buffer that josa can be pushed onto in place.

    A failed push leaves the buffer exactly as it was.
    """

    def __init__(self, text: str = "") -> None:
        self._parts: list[str] = [text] if text else []
        self._last = text[-1:] if text else ""

    @property
    def value(self) -> str:
        return "".join(self._parts)

    def push(self, text: str) -> JosaBuffer:
        if text:
            self._parts.append(text)
            self._last = text[-1]
        return self

    def push_josa(self, josa: Josa) -> JosaBuffer:
        # only the last character decides the form
        form = select(self._last, josa)
        return self.push(form)

    def __str__(self) -> str:
        return self.value

    def __len__(self) -> int:
        return sum(len(part) for part in self._parts)

    def __repr__(self) -> str:
        return f"JosaBuffer({self.value!r})"
