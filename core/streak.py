"""
streak.py

Daily play streak. Days are compared as calendar dates in the timezone of
the datetimes passed in; callers should pass both in the same zone.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from schemas.results import StreakUpdate


def update_play_streak(
    last_played_at: Optional[datetime],
    current_streak: int,
    now: datetime,
) -> StreakUpdate:
    if last_played_at is None:
        return StreakUpdate(play_streak=1, is_first_today=True)

    if last_played_at.tzinfo is not None and now.tzinfo is not None:
        last_played_at = last_played_at.astimezone(now.tzinfo)

    days = (now.date() - last_played_at.date()).days
    streak = max(1, current_streak)

    if days <= 0:
        # Already played today (or the clock moved backwards).
        return StreakUpdate(play_streak=streak, is_first_today=False)
    if days == 1:
        return StreakUpdate(play_streak=streak + 1, is_first_today=True)
    return StreakUpdate(play_streak=1, is_first_today=True)
