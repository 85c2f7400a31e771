"""
Tests for core.exp_economy

Test Coverage:
- per-correct EXP scaling with level
- completion tiers, daily and streak bonuses
- repeat-play penalty halves base + completion only
- apply_boost()
"""

import pytest

from core.exp_economy import (
    MAX_STREAK_BONUS,
    apply_boost,
    calculate_exp_gained,
    completion_bonus,
    exp_per_correct,
    streak_bonus,
)


def _exp(play_count=1, **overrides):
    arguments = dict(
        score=18,
        total_questions=20,
        percentage=90,
        level=45,
        play_streak_days=3,
        is_first_session_today=False,
    )
    arguments.update(overrides)
    return calculate_exp_gained(play_count_for_level=play_count, **arguments)


@pytest.mark.parametrize("level, expected", [(1, 10), (9, 10), (10, 11), (45, 14), (99, 19), (100, 20)])
def test_exp_per_correct_scales_from_ten_to_twenty(level, expected):
    assert exp_per_correct(level) == expected


@pytest.mark.parametrize(
    "percentage, bonus",
    [(100, 100), (99, 80), (95, 80), (90, 60), (85, 40), (80, 30), (70, 20), (69, 0), (0, 0)],
)
def test_completion_bonus_tiers(percentage, bonus):
    assert completion_bonus(percentage) == bonus


@pytest.mark.parametrize("days, bonus", [(0, 0), (1, 10), (5, 50), (10, 100), (40, MAX_STREAK_BONUS)])
def test_streak_bonus_is_capped(days, bonus):
    assert streak_bonus(days) == bonus


def test_breakdown_itemises_every_component():
    gain = _exp(is_first_session_today=True)
    breakdown = gain.breakdown

    assert breakdown.exp_per_correct == 14
    assert breakdown.base == 18 * 14
    assert breakdown.completion_bonus == 60
    assert breakdown.first_daily_bonus == 50
    assert breakdown.streak_bonus == 30
    assert breakdown.repeat_penalty_applied is False
    assert gain.total == breakdown.total == 252 + 60 + 50 + 30


def test_repeat_penalty_lowers_total():
    regular = _exp(play_count=2)
    repeated = _exp(play_count=4)

    assert repeated.total < regular.total
    assert regular.total == 252 + 60 + 30
    assert repeated.total == (252 + 60) // 2 + 30


def test_repeat_penalty_spares_streak_and_daily_bonus():
    repeated = _exp(play_count=4, is_first_session_today=True).breakdown

    assert repeated.repeat_penalty_applied is True
    assert repeated.repeat_penalty == 156
    assert repeated.streak_bonus == 30
    assert repeated.first_daily_bonus == 50
    assert repeated.total == 156 + 50 + 30


def test_third_play_is_not_penalised():
    assert _exp(play_count=3).breakdown.repeat_penalty_applied is False


def test_perfect_score_at_top_level():
    gain = calculate_exp_gained(20, 20, 100, 100, 1, True, 1)

    assert gain.total == 20 * 20 + 100 + 50 + 10


def test_breakdown_items_skip_zero_rows():
    labels = [label for label, _ in _exp(play_count=4).breakdown.items()]

    assert "First session today" not in labels
    assert "Repeat play penalty" in labels


@pytest.mark.parametrize(
    "total, multipliers, expected",
    [(100, (), 100), (100, (2.0,), 200), (101, (1.5,), 151), (100, (1.5, 2.0), 200), (100, (0,), 100)],
)
def test_apply_boost(total, multipliers, expected):
    assert apply_boost(total, multipliers) == expected
