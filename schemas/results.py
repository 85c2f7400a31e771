from __future__ import annotations

from datetime import datetime
from typing import List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from schemas.question import Question

LevelDirection = Literal["increase", "maintain", "decrease"]


class ScoreDifference(BaseModel):
    """How much of a session's score counts toward the lifetime total."""

    model_config = ConfigDict(frozen=True)

    score_diff: int = Field(..., ge=0)
    is_new_high_score: bool
    old_high_score: int = Field(..., ge=0)


class ProgressionResult(BaseModel):
    """Level (and possibly grade) the player lands on after a session."""

    model_config = ConfigDict(frozen=True)

    direction: LevelDirection
    new_level: int = Field(..., ge=1, le=100)
    new_grade: str
    grade_changed: bool = False
    applied: bool = Field(
        True, description="False for practice sessions, which only report the result."
    )


class StreakUpdate(BaseModel):
    model_config = ConfigDict(frozen=True)

    play_streak: int = Field(..., ge=1)
    is_first_today: bool


class ExpBreakdown(BaseModel):
    """Itemised EXP award. Only `total` is ever persisted."""

    model_config = ConfigDict(frozen=True)

    exp_per_correct: int
    base: int
    completion_bonus: int
    first_daily_bonus: int
    streak_bonus: int
    repeat_penalty_applied: bool
    repeat_penalty: int = Field(0, description="EXP removed by halving base and completion.")
    total: int

    def items(self) -> List[Tuple[str, int]]:
        """(label, amount) rows for display, skipping zero rows."""

        rows = [
            ("Correct answers", self.base),
            ("Completion bonus", self.completion_bonus),
            ("First session today", self.first_daily_bonus),
            ("Play streak", self.streak_bonus),
            ("Repeat play penalty", -self.repeat_penalty),
        ]
        return [(label, amount) for label, amount in rows if amount]


class ExpGain(BaseModel):
    model_config = ConfigDict(frozen=True)

    total: int = Field(..., ge=0)
    breakdown: ExpBreakdown


class AnswerRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    question: Question
    user_answer: Optional[Union[int, str]] = None
    is_correct: bool
    time_spent_seconds: float = Field(0.0, ge=0)


class SessionResult(BaseModel):
    """Everything the end-of-session screen shows."""

    model_config = ConfigDict(frozen=True)

    grade: str
    level: int
    is_practice: bool
    score: int
    total_questions: int
    percentage: int = Field(..., ge=0, le=100)
    score_difference: ScoreDifference
    progression: ProgressionResult
    streak: StreakUpdate
    exp: ExpGain
    boost_multiplier: float = 1.0
    exp_awarded: int = Field(..., ge=0, description="EXP after the boost multiplier.")
    answers: List[AnswerRecord] = Field(default_factory=list)
    started_at: datetime
    finished_at: datetime
