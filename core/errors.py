"""
errors.py

Exception taxonomy for the drill engine. Generation and calculation failures
are caught inside the engine and turned into safe fallbacks; only
`PersistenceFailure` is meant to reach presentation code.
"""

from __future__ import annotations


class EngineError(Exception):
    """Base class for every error raised by the engine."""


class ConfigNotFound(EngineError, LookupError):
    """Unknown grade, or a level that no band covers."""

    def __init__(self, grade: str, level: int):
        super().__init__(f"No level band for grade {grade!r} at level {level}.")
        self.grade = grade
        self.level = level


class InvalidArithmeticResult(EngineError, ArithmeticError):
    """A question shape computed NaN, infinity, or a non-integer answer."""


class ChoiceGenerationExhausted(EngineError):
    """Distractor generation was asked for something it can never satisfy."""


class SessionStateError(EngineError):
    """An operation was attempted in a session state that does not allow it."""


class PersistenceFailure(EngineError):
    """
    The profile store rejected the end-of-session commit.

    The session stays in memory and the caller may retry.
    """


class ConfigurationError(EngineError, ValueError):
    """Settings loaded from the environment are malformed."""
