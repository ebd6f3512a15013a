"""Korean josa (postposition) selection.

>>> from josa import Josa, append
>>> f"{append('유진', Josa.EUN_NEUN)} {append('고등어', Josa.I_GA)} 먹고싶다"
'유진은 고등어가 먹고싶다'
"""

from josa.errors import ConfigError, EmptyInput, JosaError, UndeterminedJosa
from josa.hangul import Coda, classify, decompose, has_batchim, is_syllable, jongseong_index
from josa.particles import PARTICLES, Josa
from josa.selector import JosaBuffer, append, select
from josa.template import particle, render_message

__all__ = [
    "PARTICLES",
    "Coda",
    "ConfigError",
    "EmptyInput",
    "Josa",
    "JosaBuffer",
    "JosaError",
    "UndeterminedJosa",
    "append",
    "classify",
    "decompose",
    "has_batchim",
    "is_syllable",
    "jongseong_index",
    "particle",
    "render_message",
    "select",
]
