from __future__ import annotations

from typing import FrozenSet, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

QuestionCategory = Literal[
    "addition",
    "subtraction",
    "multiplication",
    "division",
    "mixed",
    "word_problem",
]

QUESTION_CATEGORIES = (
    "addition",
    "subtraction",
    "multiplication",
    "division",
    "mixed",
    "word_problem",
)

CHOICE_COUNT = 4


# =============================================================================
# LEVEL BAND SCHEMAS
# =============================================================================

class NumericRange(BaseModel):
    """Operand range a band is built around."""

    model_config = ConfigDict(frozen=True)

    min: int
    max: int


class LevelBand(BaseModel):
    """A contiguous run of in-grade levels sharing one skill description."""

    model_config = ConfigDict(frozen=True)

    min_level: int = Field(..., ge=1, le=100, description="First level covered by the band.")
    max_level: int = Field(..., ge=1, le=100, description="Last level covered by the band.")
    description: str = Field(..., description="Skill practised inside the band.")
    question_categories: FrozenSet[QuestionCategory] = Field(
        ..., description="Categories of question the band offers."
    )
    numeric_range: NumericRange
    features: FrozenSet[str] = Field(default_factory=frozenset)

    @model_validator(mode="after")
    def _check_bounds(self) -> "LevelBand":
        if self.min_level > self.max_level:
            raise ValueError(
                f"min_level {self.min_level} is above max_level {self.max_level}"
            )
        return self

    def contains(self, level: int) -> bool:
        return self.min_level <= level <= self.max_level


# =============================================================================
# QUESTION SCHEMAS
# =============================================================================

class Question(BaseModel):
    """One generated round. Immutable once returned to the session."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    grade: str = Field(..., description="Grade tag the question was generated for.")
    prompt: str = Field(..., min_length=1, description="Text shown to the player.")
    answer: int = Field(..., strict=True, description="Exact integer answer.")
    choices: Optional[List[int]] = Field(
        None, description="Multiple-choice options; includes the answer exactly once."
    )
    category: QuestionCategory
    difficulty_level: int = Field(..., ge=1, le=100)
    skill: Optional[str] = Field(None, description="Band or topic the question practises.")

    @model_validator(mode="after")
    def _check_choices(self) -> "Question":
        if self.choices is None:
            return self
        if len(self.choices) != CHOICE_COUNT:
            raise ValueError(f"expected {CHOICE_COUNT} choices, got {len(self.choices)}")
        if len(set(self.choices)) != len(self.choices):
            raise ValueError("choices must be unique")
        if self.answer not in self.choices:
            raise ValueError("choices must contain the answer")
        return self
