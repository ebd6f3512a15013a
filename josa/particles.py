"""Josa table — the closed set of coda-sensitive particle pairs."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType


class Josa(Enum):
    """Particle pairs: (with_batchim, without_batchim, fallback, marker).

    The fallback is used when the word does not end in a Hangul syllable.
    It is the neutral written form, so a reader sees both options instead
    of a guess. A pair without a fallback cannot be resolved for such words.

    The marker is what templates spell after a word. It equals the fallback
    except for the copula, whose templates are written "이다(다)" while the
    neutral form is "(이)다".
    """

    EUN_NEUN = ("은", "는", "은(는)", "은(는)")        # topic
    I_GA = ("이", "가", "이(가)", "이(가)")              # subject
    EUL_REUL = ("을", "를", "을(를)", "을(를)")          # object
    GWA_WA = ("과", "와", "과(와)", "과(와)")            # and
    EURO_RO = ("으로", "로", "(으)로", "(으)로")         # direction, instrument
    IRANG_RANG = ("이랑", "랑", "(이)랑", "(이)랑")      # with
    IDA_DA = ("이다", "다", "(이)다", "이다(다)")        # copula
    A_YA = ("아", "야", None, "아(야)")                  # vocative

    def __init__(
        self, coda_form: str, no_coda_form: str, fallback_form: str | None, marker: str,
    ) -> None:
        self.coda_form = coda_form
        self.no_coda_form = no_coda_form
        self.fallback_form = fallback_form
        self.marker = marker

    @property
    def label(self) -> str:
        return f"{self.coda_form}/{self.no_coda_form}"

    @property
    def rieul_is_open(self) -> bool:
        """ㄹ batchim takes the no-coda form (서울로, not 서울으로)."""
        return self is Josa.EURO_RO

    @classmethod
    def from_label(cls, label: str) -> Josa:
        """Look up a pair by "이/가", "이가", "이(가)" or member name."""
        try:
            return PARTICLES[label]
        except KeyError:
            pass
        try:
            return cls[label.upper()]
        except KeyError:
            raise KeyError(f"unknown josa: {label!r}") from None


def _build_index() -> dict[str, Josa]:
    index: dict[str, Josa] = {}
    for josa in Josa:
        index[josa.label] = josa
        index[josa.coda_form + josa.no_coda_form] = josa
        index[josa.marker] = josa
        if josa.fallback_form:
            index[josa.fallback_form] = josa
    return index


PARTICLES = MappingProxyType(_build_index())
