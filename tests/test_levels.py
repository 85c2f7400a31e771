"""
Tests for core.levels

Test Coverage:
- every grade's bands cover levels 1-100 exactly once
- get_level_config / require_level_config lookups
- question counts per grade
"""

import pytest

from core.errors import ConfigNotFound
from core.levels import (
    DEFAULT_QUESTION_COUNT,
    GRADE_CONFIGS,
    GRADE_ORDER,
    band_coverage_problems,
    get_grade_bands,
    get_level_config,
    get_question_count,
    require_level_config,
)


def test_all_fifteen_grades_have_bands():
    assert len(GRADE_ORDER) == 15
    assert set(GRADE_CONFIGS) == set(GRADE_ORDER)


@pytest.mark.parametrize("grade", GRADE_ORDER)
def test_bands_cover_every_level_once(grade):
    assert band_coverage_problems(grade) == []


@pytest.mark.parametrize("grade", GRADE_ORDER)
def test_every_level_resolves_to_a_containing_band(grade):
    for level in range(1, 101):
        band = get_level_config(grade, level)
        assert band is not None
        assert band.min_level <= level <= band.max_level


def test_unknown_grade_returns_none():
    assert get_level_config("Z9", 10) is None
    assert get_grade_bands("Z9") == ()


def test_level_outside_range_returns_none():
    assert get_level_config("P1", 0) is None
    assert get_level_config("P1", 101) is None


def test_require_level_config_raises_config_not_found():
    with pytest.raises(ConfigNotFound) as excinfo:
        require_level_config("Z9", 3)

    assert excinfo.value.grade == "Z9"
    assert excinfo.value.level == 3
    assert isinstance(excinfo.value, LookupError)


def test_coverage_problems_reports_unknown_grade():
    assert band_coverage_problems("Z9") == ["Z9: no bands"]


def test_p2_times_table_band():
    band = get_level_config("P2", 45)

    assert band.question_categories == frozenset({"multiplication"})
    assert "tables_2_5_10" in band.features
    assert band.numeric_range.min == 1
    assert band.numeric_range.max == 10


@pytest.mark.parametrize(
    "grade, expected",
    [("K1", 10), ("K3", 10), ("P1", 20), ("P6", 20), ("M1", 20), ("M6", 20), ("Z9", DEFAULT_QUESTION_COUNT)],
)
def test_question_count(grade, expected):
    assert get_question_count(grade) == expected
