"""Tests for core.streak.update_play_streak."""

from datetime import datetime, timedelta, timezone

from core.streak import update_play_streak

NOW = datetime(2026, 3, 10, 8, 0, tzinfo=timezone.utc)


def test_first_ever_session():
    result = update_play_streak(None, 0, NOW)

    assert (result.play_streak, result.is_first_today) == (1, True)


def test_same_day_keeps_streak():
    result = update_play_streak(NOW - timedelta(hours=2), 4, NOW)

    assert (result.play_streak, result.is_first_today) == (4, False)


def test_next_day_extends_streak():
    result = update_play_streak(datetime(2026, 3, 9, 23, 30, tzinfo=timezone.utc), 4, NOW)

    assert (result.play_streak, result.is_first_today) == (5, True)


def test_gap_resets_streak():
    result = update_play_streak(NOW - timedelta(days=3), 9, NOW)

    assert (result.play_streak, result.is_first_today) == (1, True)


def test_missing_streak_counts_as_one():
    result = update_play_streak(NOW - timedelta(days=1), 0, NOW)

    assert result.play_streak == 2
