"""
k1.py

Kindergarten 1: counting to five, then adding and taking away within ten.
Counting and adding shapes never use numbers above the level band's range.
"""

from __future__ import annotations

import random

from generators.strategy import GradeStrategy, Problem, SubRange, shape
from generators.utils import draw_objects, pick_fruit, pick_name, pick_toy, rand_int


# --------------------------------------------------------------------------- #
# Counting
# --------------------------------------------------------------------------- #

@shape("mixed", bounded=True)
def _count_to_five(rng: random.Random, level: int, top: int = 5) -> Problem:
    count = rand_int(rng, 1, min(top, 5))
    return Problem(f"How many? {draw_objects(rng, count)}", count, spread=2)


@shape("mixed", bounded=True)
def _count_to_ten(rng: random.Random, level: int, top: int = 10) -> Problem:
    count = rand_int(rng, 1, min(top, 10))
    return Problem(f"How many? {draw_objects(rng, count)}", count, spread=3)


@shape("mixed")
def _number_after_within_five(rng: random.Random, level: int) -> Problem:
    n = rand_int(rng, 1, 4)
    return Problem(f"What number comes after {n}?", n + 1, spread=2)


@shape("mixed")
def _number_before_within_five(rng: random.Random, level: int) -> Problem:
    n = rand_int(rng, 2, 5)
    return Problem(f"What number comes before {n}?", n - 1, spread=2)


@shape("word_problem")
def _counting_story(rng: random.Random, level: int) -> Problem:
    count = rand_int(rng, 1, 5)
    name, fruit = pick_name(rng), pick_fruit(rng)
    return Problem(
        f"{name} has {draw_objects(rng, count)} {fruit}. How many {fruit} does {name} have?",
        count,
        spread=2,
    )


# --------------------------------------------------------------------------- #
# Adding and taking away
# --------------------------------------------------------------------------- #

@shape("addition", bounded=True)
def _add_within_five(rng: random.Random, level: int, top: int = 5) -> Problem:
    cap = min(top, 5)
    a = rand_int(rng, 1, cap - 1)
    b = rand_int(rng, 1, cap - a)
    return Problem(f"{a} + {b} = ?", a + b, spread=2)


@shape("addition", bounded=True)
def _add_pictures_within_five(rng: random.Random, level: int, top: int = 5) -> Problem:
    cap = min(top, 5)
    a = rand_int(rng, 1, cap - 1)
    b = rand_int(rng, 1, cap - a)
    return Problem(f"{draw_objects(rng, a)} and {draw_objects(rng, b)}. How many in all?", a + b, spread=2)


@shape("subtraction", bounded=True)
def _take_away_within_five(rng: random.Random, level: int, top: int = 5) -> Problem:
    a = rand_int(rng, 2, min(top, 5))
    b = rand_int(rng, 1, a - 1)
    return Problem(f"{a} - {b} = ?", a - b, spread=2)


@shape("word_problem", bounded=True)
def _adding_story_within_five(rng: random.Random, level: int, top: int = 5) -> Problem:
    cap = min(top, 5)
    a = rand_int(rng, 1, cap - 1)
    b = rand_int(rng, 1, cap - a)
    name, toy = pick_name(rng), pick_toy(rng)
    return Problem(f"{name} has {a} {toy} and gets {b} more. How many {toy} now?", a + b, spread=2)


@shape("word_problem")
def _take_away_story_within_five(rng: random.Random, level: int) -> Problem:
    a = rand_int(rng, 2, 5)
    b = rand_int(rng, 1, a - 1)
    name, fruit = pick_name(rng), pick_fruit(rng)
    return Problem(f"{name} has {a} {fruit} and eats {b}. How many are left?", a - b, spread=2)


@shape("addition", bounded=True)
def _add_within_ten(rng: random.Random, level: int, top: int = 10) -> Problem:
    cap = min(top, 10)
    a = rand_int(rng, 1, cap - 1)
    b = rand_int(rng, 1, cap - a)
    return Problem(f"{a} + {b} = ?", a + b, spread=3)


@shape("subtraction", bounded=True)
def _take_away_within_ten(rng: random.Random, level: int, top: int = 10) -> Problem:
    a = rand_int(rng, 2, min(top, 10))
    b = rand_int(rng, 1, a - 1)
    return Problem(f"{a} - {b} = ?", a - b, spread=3)


@shape("mixed")
def _number_after_within_ten(rng: random.Random, level: int) -> Problem:
    n = rand_int(rng, 1, 9)
    return Problem(f"What number comes after {n}?", n + 1, spread=3)


@shape("mixed")
def _counting_pattern(rng: random.Random, level: int) -> Problem:
    step = rand_int(rng, 1, 2)
    start = rand_int(rng, 1, 3)
    shown = [start + step * i for i in range(3)]
    return Problem(f"{', '.join(map(str, shown))}, ? What comes next?", start + step * 3, spread=3)


@shape("word_problem")
def _adding_story_within_ten(rng: random.Random, level: int) -> Problem:
    a = rand_int(rng, 1, 9)
    b = rand_int(rng, 1, 10 - a)
    name, fruit = pick_name(rng), pick_fruit(rng)
    return Problem(f"{name} picks {a} {fruit}, then {b} more. How many {fruit} in all?", a + b, spread=3)


@shape("word_problem")
def _take_away_story_within_ten(rng: random.Random, level: int) -> Problem:
    a = rand_int(rng, 2, 10)
    b = rand_int(rng, 1, a - 1)
    name, toy = pick_name(rng), pick_toy(rng)
    return Problem(f"{name} has {a} {toy} and gives away {b}. How many are left?", a - b, spread=3)


K1_SUB_RANGES = (
    SubRange(1, 30, "Counting 1-5", 5, (
        _count_to_five,
        _number_after_within_five,
        _number_before_within_five,
        _counting_story,
    )),
    SubRange(31, 45, "Adding within 5", 5, (
        _add_within_five,
        _add_pictures_within_five,
        _count_to_five,
        _adding_story_within_five,
    )),
    SubRange(46, 60, "Adding and taking away within 5", 5, (
        _add_within_five,
        _take_away_within_five,
        _adding_story_within_five,
        _take_away_story_within_five,
    )),
    SubRange(61, 80, "Adding within 10", 10, (
        _add_within_ten,
        _count_to_ten,
        _number_after_within_ten,
        _adding_story_within_ten,
    )),
    SubRange(81, 100, "Adding and taking away within 10", 10, (
        _add_within_ten,
        _take_away_within_ten,
        _counting_pattern,
        _adding_story_within_ten,
        _take_away_story_within_ten,
    )),
)

K1_STRATEGY = GradeStrategy("K1", K1_SUB_RANGES)
