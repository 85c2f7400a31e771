"""
progression.py

Turns a session's score percentage into a level move, and walks the grade
ladder when a move runs off either end of a grade. Everything here is pure;
whether the result is applied to the stored profile is the session's call.
"""

from __future__ import annotations

from typing import Optional

from core.levels import GRADE_ORDER
from schemas.results import LevelDirection, ProgressionResult

DECREASE_THRESHOLD = 50  # below this the level drops
INCREASE_THRESHOLD = 84  # above this the level rises

MIN_LEVEL = 1
MAX_LEVEL = 100


def calculate_level_change(score_percentage: float) -> LevelDirection:
    if score_percentage < DECREASE_THRESHOLD:
        return "decrease"
    if score_percentage > INCREASE_THRESHOLD:
        return "increase"
    return "maintain"


# --------------------------------------------------------------------------- #
# Grade ladder
# --------------------------------------------------------------------------- #

def get_next_grade(grade: str) -> Optional[str]:
    """The grade after `grade`, or None at M6 or for an unknown grade."""

    if grade not in GRADE_ORDER:
        return None
    index = GRADE_ORDER.index(grade)
    if index + 1 >= len(GRADE_ORDER):
        return None
    return GRADE_ORDER[index + 1]


def get_previous_grade(grade: str) -> Optional[str]:
    if grade not in GRADE_ORDER:
        return None
    index = GRADE_ORDER.index(grade)
    if index == 0:
        return None
    return GRADE_ORDER[index - 1]


def can_upgrade_grade(level: int) -> bool:
    return level == MAX_LEVEL


def can_downgrade_grade(level: int) -> bool:
    return level == MIN_LEVEL


def calculate_grade_progression(
    grade: str,
    level: int,
    direction: LevelDirection,
) -> ProgressionResult:
    """
    Applies `direction` to (grade, level).

    Rising past level 100 moves to level 1 of the next grade and falling
    below level 1 moves to level 100 of the previous one. The ladder's ends
    hold: M6 stays at 100 and K1 stays at 1.
    """

    level = max(MIN_LEVEL, min(MAX_LEVEL, level))

    if direction == "increase":
        if can_upgrade_grade(level):
            next_grade = get_next_grade(grade)
            if next_grade is None:
                return ProgressionResult(direction=direction, new_level=level, new_grade=grade)
            return ProgressionResult(
                direction=direction, new_level=MIN_LEVEL, new_grade=next_grade, grade_changed=True
            )
        return ProgressionResult(direction=direction, new_level=level + 1, new_grade=grade)

    if direction == "decrease":
        if can_downgrade_grade(level):
            previous_grade = get_previous_grade(grade)
            if previous_grade is None:
                return ProgressionResult(direction=direction, new_level=level, new_grade=grade)
            return ProgressionResult(
                direction=direction, new_level=MAX_LEVEL, new_grade=previous_grade, grade_changed=True
            )
        return ProgressionResult(direction=direction, new_level=level - 1, new_grade=grade)

    return ProgressionResult(direction=direction, new_level=level, new_grade=grade)


def evaluate_session(grade: str, level: int, score_percentage: float) -> ProgressionResult:
    """Classifies the percentage and applies the move in one step."""

    return calculate_grade_progression(grade, level, calculate_level_change(score_percentage))
