"""Hangul syllable decomposition and coda (받침) classification."""

from __future__ import annotations

from enum import Enum

from josa.errors import EmptyInput

# Unicode Hangul syllable block: U+AC00..U+D7A3
HANGUL_BASE = 0xAC00
HANGUL_END = 0xD7A3

CHOSEONG_COUNT = 19
JUNGSEONG_COUNT = 21
JONGSEONG_COUNT = 28  # number of final consonants (0 = no batchim)

JONGSEONG_RIEUL = 8  # ㄹ


class Coda(Enum):
    """Shape of the last character of a word."""

    HAS_CODA = "has_coda"
    NO_CODA = "no_coda"
    NOT_HANGUL = "not_hangul"


def is_syllable(char: str) -> bool:
    """Check if a single character is a precomposed Hangul syllable."""
    return len(char) == 1 and HANGUL_BASE <= ord(char) <= HANGUL_END


def decompose(char: str) -> tuple[int, int, int]:
    """Split a syllable into (choseong, jungseong, jongseong) indexes.

    >>> decompose("한")
    (18, 0, 4)
    """
    if not is_syllable(char):
        raise ValueError(f"{char!r} is not a Hangul syllable")
    index = ord(char) - HANGUL_BASE
    jong = index % JONGSEONG_COUNT
    jung = (index // JONGSEONG_COUNT) % JUNGSEONG_COUNT
    cho = index // (JUNGSEONG_COUNT * JONGSEONG_COUNT)
    return cho, jung, jong


def jongseong_index(char: str) -> int | None:
    """Coda index of a syllable, or None for anything else."""
    if not is_syllable(char):
        return None
    return (ord(char) - HANGUL_BASE) % JONGSEONG_COUNT


def _last(text: str) -> str:
    if not text:
        raise EmptyInput()
    return text[-1]


def classify(text: str) -> Coda:
    """Classify the last codepoint of ``text``.

    Only the literal last codepoint is looked at: a trailing combining mark
    or zero-width joiner makes the result NOT_HANGUL.
    """
    jong = jongseong_index(_last(text))
    if jong is None:
        return Coda.NOT_HANGUL
    if jong == 0:
        return Coda.NO_CODA
    return Coda.HAS_CODA


def has_batchim(text: str) -> bool:
    """Check if the last character of ``text`` is a syllable with a final consonant."""
    return classify(text) is Coda.HAS_CODA


def ends_with_rieul(text: str) -> bool:
    """Check if the last syllable ends in ㄹ (서울, 연필)."""
    return jongseong_index(_last(text)) == JONGSEONG_RIEUL
