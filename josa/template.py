"""Message templates with automatic Korean particles."""

from __future__ import annotations

import logging
import re

from josa.errors import JosaError
from josa.particles import Josa
from josa.selector import select

log = logging.getLogger(__name__)

# Pattern: word + marker like 이(가), 을(를), (으)로, 이다(다)
_MARKER_PATTERNS = [
    (re.compile(r"(\S+?)" + re.escape(josa.marker)), josa) for josa in Josa
]


def particle(word: str, particle_type: str) -> str:
    """Select correct particle for the given word.

    particle_type is a label such as "이/가" or "(으)로". An unknown label
    is returned unchanged.
    """
    try:
        josa = Josa.from_label(particle_type)
    except KeyError:
        return particle_type
    return select(word, josa)


def render_message(template: str, **kwargs: str) -> str:
    """Render a message template with automatic Korean particles.

    Template format: "{name}이(가) 왔습니다"
    Supports: 은(는), 이(가), 을(를), 과(와), (으)로, (이)랑, 이다(다), 아(야)

    A word whose particle cannot be decided keeps the marker as written.
    """
    # First pass: substitute variables
    result = template
    for key, value in kwargs.items():
        result = result.replace(f"{{{key}}}", value)

    # Second pass: resolve particles
    for pattern, josa in _MARKER_PATTERNS:
        def _replace(m: re.Match, j: Josa = josa) -> str:
            word = m.group(1)
            try:
                return word + select(word, j)
            except JosaError as exc:
                log.debug("Leaving %s unresolved: %s", j.marker, exc)
                return m.group(0)
        result = re.sub(pattern, _replace, result)

    return result
