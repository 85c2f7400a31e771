"""
Tests for generators.registry

Test Coverage:
- grade metadata (category, display name, support)
- fallbacks for unknown grades and unavailable categories
- validated generation retries
"""

import logging
import random

import pytest

import generators.registry as registry
from generators.registry import (
    VALIDATION_ATTEMPTS,
    generate_question,
    generate_question_of_type,
    generate_validated_question,
    get_available_question_types,
    get_grade_category,
    get_grade_display_name,
    is_supported_grade,
)


@pytest.mark.parametrize(
    "grade, category",
    [
        ("K1", "kindergarten"),
        ("K3", "kindergarten"),
        ("P4", "elementary"),
        ("M6", "secondary"),
        ("X1", "unknown"),
        ("", "unknown"),
    ],
)
def test_grade_category(grade, category):
    assert get_grade_category(grade) == category


@pytest.mark.parametrize(
    "grade, name",
    [("K1", "Kindergarten 1"), ("P2", "Primary 2"), ("M6", "Secondary 6"), ("Z9", "Z9")],
)
def test_grade_display_name(grade, name):
    assert get_grade_display_name(grade) == name


def test_supported_grades():
    assert is_supported_grade("P3")
    assert not is_supported_grade("P7")


def test_unknown_grade_gets_fallback_question(caplog):
    caplog.set_level(logging.WARNING)

    question = generate_question("P7", 10, random.Random(1))

    assert question.category == "addition"
    assert 2 <= question.answer <= 40
    assert any("P7" in record.getMessage() for record in caplog.records)


def test_out_of_range_level_is_clamped(caplog):
    caplog.set_level(logging.WARNING)

    question = generate_question("P1", 250, random.Random(1))

    assert question.difficulty_level == 100
    assert caplog.records == []


def test_available_question_types_for_unknown_grade():
    assert get_available_question_types("Z9", 1) == ["addition"]


def test_question_of_available_type():
    rng = random.Random(4)
    for category in get_available_question_types("P3", 90):
        question = generate_question_of_type("P3", 90, category, rng)
        assert question.category == category


def test_question_of_unavailable_type_falls_back_to_any(caplog):
    caplog.set_level(logging.WARNING)

    question = generate_question_of_type("K1", 1, "division", random.Random(2))

    assert question.grade == "K1"
    assert question.category != "division"
    assert any("division" in record.getMessage() for record in caplog.records)


def test_validated_question_passes_through_valid_questions():
    question = generate_validated_question("M3", 20, random.Random(8))

    assert question.grade == "M3"
    assert question.skill != "Addition review"


def test_validated_question_gives_up_after_attempts(caplog, monkeypatch):
    monkeypatch.setattr(registry, "validate_question", lambda question: ["always wrong"])
    caplog.set_level(logging.WARNING)

    question = generate_validated_question("P5", 30, random.Random(8))

    assert question.skill == "Addition review"
    attempts = [record for record in caplog.records if "always wrong" in record.getMessage()]
    assert len(attempts) == VALIDATION_ATTEMPTS
