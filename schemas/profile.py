from __future__ import annotations

from datetime import datetime
from typing import Dict, Optional

from pydantic import BaseModel, Field


class ScoreLedgerEntry(BaseModel):
    """Best score and play count for one (player, grade, level)."""

    high_score: int = Field(0, ge=0)
    last_played_at: Optional[datetime] = None
    play_count: int = Field(0, ge=0)


class UserProfile(BaseModel):
    """Snapshot of the player record owned by the profile store."""

    user_id: str
    grade: str = "K1"
    level: int = Field(1, ge=1, le=100)
    experience: int = Field(0, ge=0)
    total_score: int = Field(0, ge=0)
    level_scores: Dict[str, ScoreLedgerEntry] = Field(default_factory=dict)
    play_streak: int = Field(0, ge=0)
    last_played_at: Optional[datetime] = None


class ProfileUpdate(BaseModel):
    """
    Patch produced by a finished session. The store applies it in one
    transaction; nothing counts as committed until it does.
    """

    experience_gained: int = Field(0, ge=0)
    score_gained: int = Field(0, ge=0)
    ledger_key: str
    ledger_entry: ScoreLedgerEntry
    play_streak: int = Field(..., ge=1)
    last_played_at: datetime
    grade: Optional[str] = Field(None, description="New grade, when progression applies.")
    level: Optional[int] = Field(None, ge=1, le=100)
