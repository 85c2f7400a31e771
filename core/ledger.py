"""
ledger.py

Score ledger rules. Only the part of a session's score that beats the
player's best on that level is added to the lifetime total, so replaying a
mastered level cannot farm points.
"""

from __future__ import annotations

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from schemas.profile import ScoreLedgerEntry
from schemas.results import ScoreDifference


def ledger_key(grade: str, level: int) -> str:
    return f"{grade}-{level}"


def calculate_score_difference(prior_high_score: int, session_score: int) -> ScoreDifference:
    prior_high_score = max(0, prior_high_score)
    return ScoreDifference(
        score_diff=max(0, session_score - prior_high_score),
        is_new_high_score=session_score > prior_high_score,
        old_high_score=prior_high_score,
    )


def update_ledger_entry(
    entry: Optional[ScoreLedgerEntry],
    session_score: int,
    played_at: datetime,
) -> ScoreLedgerEntry:
    """Returns a new entry; the one passed in is left untouched."""

    entry = entry or ScoreLedgerEntry()
    return ScoreLedgerEntry(
        high_score=max(entry.high_score, session_score),
        last_played_at=played_at,
        play_count=entry.play_count + 1,
    )


def score_percentage(score: int, total: int) -> int:
    """Whole-number percentage, rounding .5 up. An empty session scores 0."""

    if total <= 0:
        return 0
    exact = Decimal(score * 100) / Decimal(total)
    percentage = int(exact.quantize(Decimal(1), rounding=ROUND_HALF_UP))
    return max(0, min(100, percentage))
