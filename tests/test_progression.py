"""
Tests for core.progression

Test Coverage:
- calculate_level_change() threshold edges
- grade ladder navigation
- calculate_grade_progression() across grade boundaries
"""

import pytest

from core.progression import (
    calculate_grade_progression,
    calculate_level_change,
    can_downgrade_grade,
    can_upgrade_grade,
    evaluate_session,
    get_next_grade,
    get_previous_grade,
)


@pytest.mark.parametrize(
    "percentage, direction",
    [
        (0, "decrease"),
        (49, "decrease"),
        (50, "maintain"),
        (80, "maintain"),
        (84, "maintain"),
        (85, "increase"),
        (100, "increase"),
    ],
)
def test_level_change_thresholds(percentage, direction):
    assert calculate_level_change(percentage) == direction


@pytest.mark.parametrize(
    "grade, expected",
    [("K1", "K2"), ("K3", "P1"), ("P6", "M1"), ("M6", None), ("Z9", None)],
)
def test_next_grade(grade, expected):
    assert get_next_grade(grade) == expected


@pytest.mark.parametrize(
    "grade, expected",
    [("K1", None), ("P1", "K3"), ("M1", "P6"), ("M6", "M5"), ("Z9", None)],
)
def test_previous_grade(grade, expected):
    assert get_previous_grade(grade) == expected


def test_grade_change_only_at_level_edges():
    assert can_upgrade_grade(100)
    assert not can_upgrade_grade(99)
    assert can_downgrade_grade(1)
    assert not can_downgrade_grade(2)


class TestGradeProgression:
    """Moves within and across grades."""

    def test_increase_within_grade(self):
        result = calculate_grade_progression("P3", 50, "increase")

        assert (result.new_grade, result.new_level, result.grade_changed) == ("P3", 51, False)

    def test_decrease_within_grade(self):
        result = calculate_grade_progression("P3", 50, "decrease")

        assert (result.new_grade, result.new_level) == ("P3", 49)

    def test_maintain_keeps_position(self):
        result = calculate_grade_progression("M2", 37, "maintain")

        assert (result.new_grade, result.new_level, result.grade_changed) == ("M2", 37, False)

    def test_increase_at_level_100_moves_to_next_grade(self):
        result = calculate_grade_progression("K3", 100, "increase")

        assert (result.new_grade, result.new_level, result.grade_changed) == ("P1", 1, True)

    def test_decrease_at_level_1_moves_to_previous_grade(self):
        result = calculate_grade_progression("M1", 1, "decrease")

        assert (result.new_grade, result.new_level, result.grade_changed) == ("P6", 100, True)

    def test_top_of_ladder_holds(self):
        result = calculate_grade_progression("M6", 100, "increase")

        assert (result.new_grade, result.new_level, result.grade_changed) == ("M6", 100, False)

    def test_bottom_of_ladder_holds(self):
        result = calculate_grade_progression("K1", 1, "decrease")

        assert (result.new_grade, result.new_level, result.grade_changed) == ("K1", 1, False)

    def test_results_are_applied_by_default(self):
        assert calculate_grade_progression("P1", 5, "increase").applied


def test_evaluate_session_combines_both_steps():
    result = evaluate_session("P2", 10, 90)

    assert result.direction == "increase"
    assert result.new_level == 11
