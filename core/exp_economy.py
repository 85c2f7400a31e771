"""
exp_economy.py

EXP awarded for a finished session.

    per correct answer   10 + level // 10          (10 at level 1, 20 at 100)
    completion bonus     by percentage tier        (100 for a perfect score)
    first session today  50
    play streak          10 per day, capped at 100
    repeat play          base + completion halved once a level has been
                         played more than REPEAT_PLAY_LIMIT times

Boost items multiply the total afterwards, in `apply_boost`; the calculator
itself never sees them.
"""

from __future__ import annotations

import math
from typing import Iterable, Tuple

from schemas.results import ExpBreakdown, ExpGain

BASE_EXP_PER_CORRECT = 10
LEVELS_PER_BONUS_POINT = 10
FIRST_DAILY_BONUS = 50
STREAK_EXP_PER_DAY = 10
MAX_STREAK_BONUS = 100
REPEAT_PLAY_LIMIT = 3

# (minimum percentage, bonus), checked top down.
COMPLETION_TIERS: Tuple[Tuple[int, int], ...] = (
    (100, 100),
    (95, 80),
    (90, 60),
    (85, 40),
    (80, 30),
    (70, 20),
)


def exp_per_correct(level: int) -> int:
    level = max(1, min(100, level))
    return BASE_EXP_PER_CORRECT + level // LEVELS_PER_BONUS_POINT


def completion_bonus(percentage: int) -> int:
    for minimum, bonus in COMPLETION_TIERS:
        if percentage >= minimum:
            return bonus
    return 0


def streak_bonus(play_streak_days: int) -> int:
    return min(max(0, play_streak_days) * STREAK_EXP_PER_DAY, MAX_STREAK_BONUS)


def calculate_exp_gained(
    score: int,
    total_questions: int,
    percentage: int,
    level: int,
    play_streak_days: int,
    is_first_session_today: bool,
    play_count_for_level: int,
) -> ExpGain:
    """
    Pure EXP calculation. `play_count_for_level` counts the session being
    scored, so the fourth play of a level is the first one penalised.
    """

    score = max(0, min(score, total_questions)) if total_questions > 0 else 0
    per_correct = exp_per_correct(level)
    base = score * per_correct
    completion = completion_bonus(percentage)
    daily = FIRST_DAILY_BONUS if is_first_session_today else 0
    streak = streak_bonus(play_streak_days)

    penalised = play_count_for_level > REPEAT_PLAY_LIMIT
    kept = base + completion
    if penalised:
        kept = (base + completion) // 2
    penalty = base + completion - kept

    total = kept + daily + streak
    breakdown = ExpBreakdown(
        exp_per_correct=per_correct,
        base=base,
        completion_bonus=completion,
        first_daily_bonus=daily,
        streak_bonus=streak,
        repeat_penalty_applied=penalised,
        repeat_penalty=penalty,
        total=total,
    )
    return ExpGain(total=total, breakdown=breakdown)


def apply_boost(total: int, multipliers: Iterable[float] = ()) -> int:
    """Boosts do not stack: the strongest active multiplier wins."""

    strongest = max(multipliers, default=1.0)
    if strongest <= 0 or not math.isfinite(strongest):
        strongest = 1.0
    return max(0, math.floor(total * strongest))
