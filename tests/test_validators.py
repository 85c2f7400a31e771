"""
Tests for validators.answer_validator and validators.question_validator
"""

from decimal import Decimal

import pytest
from sympy import Integer

from schemas.question import Question
from validators.answer_validator import AnswerValidator, validate_answer
from validators.question_validator import MAX_ABS_ANSWER, is_valid_question, validate_question


@pytest.fixture
def validator() -> AnswerValidator:
    return AnswerValidator()


class TestAnswerValidator:
    """Player responses against integer answers."""

    @pytest.mark.parametrize(
        "expected, actual",
        [
            (4, 4),
            (4, "4"),
            (-7, " -7 "),
            (4, "12/3"),
            (10, "(2 + 3) * 2"),
            (4, 4.0),
            (4, Decimal("4.00")),
            (4, Integer(4)),
        ],
    )
    def test_equivalent_answers_are_correct(self, validator, expected, actual):
        assert validator.is_correct(expected, actual)

    @pytest.mark.parametrize(
        "expected, actual",
        [
            (4, 5),
            (4, "5"),
            (0, "0.5"),
            (7, "seven"),
            (7, ""),
            (7, None),
            (1, True),
            (2, "x + 1"),
            (5, "2**99999"),
            (5, "1/0"),
            (5, "__import__('os')"),
            (5, [5]),
            (0, "()"),
            (0, "(())"),
            (1, "(1"),
            (3, "1 + + 2 ("),
            (0, "0/0"),
        ],
    )
    def test_wrong_or_unparseable_answers_are_incorrect(self, validator, expected, actual):
        assert not validator.is_correct(expected, actual)

    def test_result_carries_a_message(self, validator):
        result = validator.validate(7, "seven")

        assert result.correct is False
        assert "seven" in result.message

    def test_convenience_function(self):
        assert validate_answer(-3, "-6/2").correct


def _question(**overrides) -> Question:
    fields = dict(
        id="P1-5-abc",
        grade="P1",
        prompt="2 + 3 = ?",
        answer=5,
        choices=[3, 5, 6, 8],
        category="addition",
        difficulty_level=5,
        skill="Adding one-digit numbers",
    )
    fields.update(overrides)
    return Question.model_construct(**fields)


class TestQuestionValidator:
    """Structural checks on generated questions."""

    def test_valid_question_has_no_errors(self):
        assert validate_question(_question()) == []
        assert is_valid_question(_question())

    def test_question_without_choices_is_valid(self):
        assert validate_question(_question(choices=None)) == []

    @pytest.mark.parametrize(
        "overrides, fragment",
        [
            ({"id": " "}, "id"),
            ({"prompt": ""}, "prompt"),
            ({"answer": 2.5}, "not an integer"),
            ({"answer": MAX_ABS_ANSWER + 1}, "outside"),
            ({"choices": [5, 6, 7]}, "expected 4 choices"),
            ({"choices": [5, 5, 6, 7]}, "not unique"),
            ({"choices": [1, 2, 3, 4]}, "exactly once"),
            ({"category": "geometry"}, "unknown category"),
        ],
    )
    def test_invalid_questions_are_reported(self, overrides, fragment):
        errors = validate_question(_question(**overrides))

        assert any(fragment in error for error in errors), errors
