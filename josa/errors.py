"""Error types raised by josa selection."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from josa.particles import Josa


class JosaError(Exception):
    """Base exception for all josa errors."""


class EmptyInput(JosaError, ValueError):
    """Raised when there is no last character to inspect."""

    def __init__(self) -> None:
        super().__init__("Empty string given to josa selector")


class UndeterminedJosa(JosaError, ValueError):
    """Raised when the last character is not a Hangul syllable and the josa has no fallback."""

    def __init__(self, char: str, josa: Josa) -> None:
        self.char = char
        self.josa = josa
        super().__init__(f"{char!r} is not a Hangul syllable (josa {josa.label})")


class ConfigError(JosaError):
    """Raised when the config file cannot be used."""
