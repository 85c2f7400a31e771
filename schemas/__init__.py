"""
Boundary schemas shared between the generators, the session controller and
the profile store.
"""

from .question import (
    CHOICE_COUNT,
    QUESTION_CATEGORIES,
    LevelBand,
    NumericRange,
    Question,
    QuestionCategory,
)
from .results import (
    AnswerRecord,
    ExpBreakdown,
    ExpGain,
    LevelDirection,
    ProgressionResult,
    ScoreDifference,
    SessionResult,
    StreakUpdate,
)
from .profile import ProfileUpdate, ScoreLedgerEntry, UserProfile

__all__ = [
    "CHOICE_COUNT",
    "QUESTION_CATEGORIES",
    "LevelBand",
    "NumericRange",
    "Question",
    "QuestionCategory",
    "AnswerRecord",
    "ExpBreakdown",
    "ExpGain",
    "LevelDirection",
    "ProgressionResult",
    "ScoreDifference",
    "SessionResult",
    "StreakUpdate",
    "ProfileUpdate",
    "ScoreLedgerEntry",
    "UserProfile",
]
