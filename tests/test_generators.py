"""
Tests for the grade strategies and the shared generator helpers.

Verifies:
1. Every grade's sub-range table is contiguous, monotone and well sized
2. Every shape keeps its answers integral and within its sub-range ceiling,
   and each sub-range really reaches a fair share of that ceiling
3. The whole grade/level grid yields valid questions without fallbacks
4. Distractor generation is total, including tiny spreads and negatives
5. Concrete curricula: P2 times tables and K1 counting
6. Kindergarten shapes keep to the operand range of the level band
"""

import logging
import math
import random
from fractions import Fraction

import pytest
from sympy import Eq, Integer, Rational, Symbol, solve, sqrt

from core.errors import ChoiceGenerationExhausted, InvalidArithmeticResult
from core.levels import GRADE_ORDER
from generators.registry import STRATEGIES, generate_question
from generators.strategy import GradeStrategy, Problem, Shape, SubRange, safe_fallback_question
from generators.utils import ensure_integer, generate_choices
from schemas.question import LevelBand, NumericRange
from validators.question_validator import validate_question

SAMPLES_PER_SHAPE = 8
REACH_SAMPLES_PER_SHAPE = 40
CEILING_REACH = 4


# --------------------------------------------------------------------------- #
# Strategy tables
# --------------------------------------------------------------------------- #

def test_one_strategy_per_grade():
    assert set(STRATEGIES) == set(GRADE_ORDER)


@pytest.mark.parametrize("grade", GRADE_ORDER)
def test_sub_range_layout_is_sound(grade):
    assert STRATEGIES[grade].layout_problems() == []


@pytest.mark.parametrize("grade", GRADE_ORDER)
def test_supports_exactly_levels_one_to_hundred(grade):
    strategy = STRATEGIES[grade]

    assert all(strategy.supports_level(level) for level in range(1, 101))
    assert not strategy.supports_level(0)
    assert not strategy.supports_level(101)


@pytest.mark.parametrize("grade", GRADE_ORDER)
def test_shape_answers_stay_within_ceiling(grade):
    rng = random.Random(f"ceiling-{grade}")
    for sub_range, item in STRATEGIES[grade].shapes():
        for _ in range(SAMPLES_PER_SHAPE):
            level = rng.randint(sub_range.min_level, sub_range.max_level)
            problem = item(rng, level)
            answer = ensure_integer(problem.answer)
            assert abs(answer) <= sub_range.ceiling, (
                f"{grade} {item.name} at level {level}: {problem.prompt} -> {answer}"
            )
            assert problem.prompt


@pytest.mark.parametrize("grade", GRADE_ORDER)
def test_sub_ranges_reach_their_ceiling(grade):
    """
    The largest answer a sub-range produces is at least a quarter of its
    ceiling, so a non-decreasing ceiling means growing answers.
    """

    rng = random.Random(f"reach-{grade}")
    for sub_range in STRATEGIES[grade].sub_ranges:
        largest = 0
        for item in sub_range.shapes:
            for _ in range(REACH_SAMPLES_PER_SHAPE):
                level = rng.randint(sub_range.min_level, sub_range.max_level)
                largest = max(largest, abs(ensure_integer(item(rng, level).answer)))
        assert largest * CEILING_REACH >= sub_range.ceiling, (
            f"{grade} {sub_range.topic!r}: largest answer {largest}, ceiling {sub_range.ceiling}"
        )


# --------------------------------------------------------------------------- #
# Full grid
# --------------------------------------------------------------------------- #

@pytest.mark.parametrize("grade", GRADE_ORDER)
def test_grid_produces_valid_questions_without_fallback(grade, caplog):
    rng = random.Random(f"grid-{grade}")
    caplog.set_level(logging.WARNING)

    for level in range(1, 101):
        question = generate_question(grade, level, rng)

        assert validate_question(question) == []
        assert question.grade == grade
        assert question.difficulty_level == level
        assert isinstance(question.answer, int)
        assert len(question.choices) == 4
        assert question.choices.count(question.answer) == 1
        assert len(set(question.choices)) == 4

    warnings = [record for record in caplog.records if record.levelno >= logging.WARNING]
    assert warnings == []


def test_same_seed_generates_same_question():
    first = generate_question("M2", 40, random.Random(99))
    second = generate_question("M2", 40, random.Random(99))

    assert first == second


# --------------------------------------------------------------------------- #
# Concrete curricula
# --------------------------------------------------------------------------- #

def test_p2_level_45_is_times_tables_of_two_five_and_ten():
    rng = random.Random(45)
    products = {m * n for m in (2, 5, 10) for n in range(1, 11)}

    for _ in range(200):
        question = generate_question("P2", 45, rng)
        assert question.answer in products
        assert question.category in ("multiplication", "word_problem")


def test_k1_level_5_counts_to_five():
    rng = random.Random(5)

    for _ in range(200):
        question = generate_question("K1", 5, rng)
        assert 1 <= question.answer <= 5


def test_k1_shapes_keep_to_band_numbers():
    band = LevelBand(
        min_level=31,
        max_level=60,
        description="Adding within 3",
        question_categories=frozenset({"addition"}),
        numeric_range=NumericRange(min=1, max=3),
    )
    strategy = STRATEGIES["K1"]
    rng = random.Random(40)

    bounded = [strategy.generate_question(40, band, rng).answer for _ in range(200)]
    unbounded = [strategy.generate_question(40, rng=rng).answer for _ in range(200)]

    assert max(bounded) <= 3
    assert max(unbounded) > 3


def test_word_problem_request_returns_word_problem_where_offered():
    strategy = STRATEGIES["P2"]
    question = strategy.generate_word_problem(45, rng=random.Random(1))

    assert question.category == "word_problem"


def test_failing_shape_falls_back_with_warning(caplog):
    def explode(rng, level):
        raise ZeroDivisionError("division by zero")

    def half(rng, level):
        return Problem("1 ÷ 2 = ?", Fraction(1, 2))

    strategy = GradeStrategy("P1", (
        SubRange(1, 100, "Broken", 10, (
            Shape(name="explode", category="addition", build=explode),
            Shape(name="half", category="division", build=half),
        )),
    ))
    caplog.set_level(logging.WARNING)

    for category in ("addition", "division"):
        question = strategy.generate_of_category(10, category, rng=random.Random(3))
        assert question.skill == "Addition review"
        assert validate_question(question) == []

    messages = [record.getMessage() for record in caplog.records]
    assert any("explode" in message for message in messages)
    assert any("half" in message for message in messages)


def test_empty_solution_set_falls_back(caplog):
    x = Symbol("x")

    def no_solution(rng, level):
        return Problem("x = x + 1", solve(Eq(x, x + 1), x)[0])

    def lookup(rng, level):
        return Problem("? = 3", {}["missing"])

    strategy = GradeStrategy("M1", (
        SubRange(1, 100, "Unsolvable", 10, (
            Shape(name="no_solution", category="mixed", build=no_solution),
            Shape(name="lookup", category="mixed", build=lookup),
        )),
    ))
    caplog.set_level(logging.WARNING)
    rng = random.Random(11)

    for _ in range(6):
        question = strategy.generate_question(5, rng=rng)
        assert question.category == "addition"
        assert validate_question(question) == []

    messages = [record.getMessage() for record in caplog.records]
    assert any("no_solution" in message for message in messages)
    assert any("lookup" in message for message in messages)


# --------------------------------------------------------------------------- #
# Fallback question
# --------------------------------------------------------------------------- #

@pytest.mark.parametrize("level, limit", [(1, 2), (3, 6), (25, 50), (100, 50)])
def test_safe_fallback_operands_scale_with_level(level, limit):
    rng = random.Random(level)
    for _ in range(50):
        question = safe_fallback_question("P1", level, rng)
        assert 2 <= question.answer <= 2 * limit
        assert question.category == "addition"
        assert validate_question(question) == []


# --------------------------------------------------------------------------- #
# Distractors
# --------------------------------------------------------------------------- #

@pytest.mark.parametrize("count", range(1, 11))
@pytest.mark.parametrize("answer", [0, 1, -7, 250, -10_000])
def test_generate_choices_is_total_for_tiny_spread(count, answer):
    choices = generate_choices(answer, count, 1, random.Random(count))

    assert len(choices) == count
    assert len(set(choices)) == count
    assert choices.count(answer) == 1


def test_generate_choices_allows_negative_distractors():
    rng = random.Random(0)
    seen_negative = False
    for _ in range(50):
        choices = generate_choices(1, 4, 5, rng)
        seen_negative = seen_negative or any(choice < 0 for choice in choices)

    assert seen_negative


@pytest.mark.parametrize("count, spread", [(0, 3), (4, 0), (-1, 5)])
def test_generate_choices_rejects_impossible_requests(count, spread):
    with pytest.raises(ChoiceGenerationExhausted):
        generate_choices(5, count, spread, random.Random(0))


# --------------------------------------------------------------------------- #
# Integer guard
# --------------------------------------------------------------------------- #

@pytest.mark.parametrize(
    "value, expected",
    [
        (7, 7),
        (Fraction(8, 2), 4),
        (Integer(-12), -12),
        (Rational(9, 3), 3),
        (3.0000000000001, 3),
    ],
)
def test_ensure_integer_accepts_integral_values(value, expected):
    assert ensure_integer(value) == expected


@pytest.mark.parametrize(
    "value",
    [Fraction(1, 2), 2.5, math.nan, math.inf, sqrt(2), True],
)
def test_ensure_integer_rejects_non_integers(value):
    with pytest.raises(InvalidArithmeticResult):
        ensure_integer(value)
