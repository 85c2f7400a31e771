"""
Tests for core.ledger

Test Coverage:
- calculate_score_difference() only counts improvement
- update_ledger_entry() keeps the best score and counts plays
- score_percentage() rounding
"""

from datetime import datetime, timezone

import pytest

from core.ledger import calculate_score_difference, ledger_key, score_percentage, update_ledger_entry
from schemas.profile import ScoreLedgerEntry

PLAYED_AT = datetime(2026, 3, 2, 9, 30, tzinfo=timezone.utc)


def test_lower_score_adds_nothing():
    result = calculate_score_difference(15, 10)

    assert result.score_diff == 0
    assert result.is_new_high_score is False
    assert result.old_high_score == 15


def test_higher_score_adds_the_difference():
    result = calculate_score_difference(15, 20)

    assert result.score_diff == 5
    assert result.is_new_high_score is True
    assert result.old_high_score == 15


def test_equal_score_is_not_a_new_high_score():
    result = calculate_score_difference(12, 12)

    assert result.score_diff == 0
    assert result.is_new_high_score is False


def test_first_play_counts_the_whole_score():
    result = calculate_score_difference(0, 8)

    assert result.score_diff == 8
    assert result.is_new_high_score is True


def test_update_ledger_entry_from_nothing():
    entry = update_ledger_entry(None, 7, PLAYED_AT)

    assert entry == ScoreLedgerEntry(high_score=7, last_played_at=PLAYED_AT, play_count=1)


def test_update_ledger_entry_keeps_best_score():
    previous = ScoreLedgerEntry(high_score=18, play_count=3)

    entry = update_ledger_entry(previous, 12, PLAYED_AT)

    assert entry.high_score == 18
    assert entry.play_count == 4
    assert entry.last_played_at == PLAYED_AT
    assert previous.play_count == 3


def test_ledger_key():
    assert ledger_key("P2", 45) == "P2-45"


@pytest.mark.parametrize(
    "score, total, expected",
    [(17, 20, 85), (10, 10, 100), (1, 8, 13), (2, 3, 67), (1, 3, 33), (0, 20, 0), (0, 0, 0)],
)
def test_score_percentage(score, total, expected):
    assert score_percentage(score, total) == expected
