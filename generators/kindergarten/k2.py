"""
k2.py

Kindergarten 2: adding within five and ten, taking away, then a mix of both
with missing numbers and equal groups.
Adding and taking-away shapes stay inside the level band's number range.
"""

from __future__ import annotations

import random

from generators.strategy import GradeStrategy, Problem, SubRange, shape
from generators.utils import draw_objects, pick_animal, pick_fruit, pick_name, pick_toy, rand_int


@shape("mixed")
def _count_objects(rng: random.Random, level: int) -> Problem:
    top = 5 if level <= 25 else 10
    count = rand_int(rng, 1, top)
    return Problem(f"Count them: {draw_objects(rng, count)}", count, spread=2)


@shape("addition", bounded=True)
def _add_within_five(rng: random.Random, level: int, top: int = 5) -> Problem:
    cap = min(top, 5)
    a = rand_int(rng, 1, cap - 1)
    b = rand_int(rng, 1, cap - a)
    return Problem(f"{a} + {b} = ?", a + b, spread=2)


@shape("word_problem", bounded=True)
def _adding_story_within_five(rng: random.Random, level: int, top: int = 5) -> Problem:
    cap = min(top, 5)
    a = rand_int(rng, 1, cap - 1)
    b = rand_int(rng, 1, cap - a)
    name, animal = pick_name(rng), pick_animal(rng)
    return Problem(f"{name} sees {a} {animal}. {b} more come. How many {animal} now?", a + b, spread=2)


@shape("addition", bounded=True)
def _add_within_ten(rng: random.Random, level: int, top: int = 10) -> Problem:
    cap = min(top, 10)
    a = rand_int(rng, 1, cap - 1)
    b = rand_int(rng, 1, cap - a)
    return Problem(f"{a} + {b} = ?", a + b, spread=3)


@shape("mixed")
def _number_after(rng: random.Random, level: int) -> Problem:
    n = rand_int(rng, 1, 9)
    return Problem(f"Which number is one more than {n}?", n + 1, spread=3)


@shape("word_problem", bounded=True)
def _adding_story_within_ten(rng: random.Random, level: int, top: int = 10) -> Problem:
    cap = min(top, 10)
    a = rand_int(rng, 1, cap - 1)
    b = rand_int(rng, 1, cap - a)
    name, fruit = pick_name(rng), pick_fruit(rng)
    return Problem(f"{name} has {a} {fruit}. Mom gives {b} more. How many {fruit}?", a + b, spread=3)


@shape("subtraction", bounded=True)
def _subtract_within_ten(rng: random.Random, level: int, top: int = 10) -> Problem:
    a = rand_int(rng, 2, min(top, 10))
    b = rand_int(rng, 0, a - 1)
    return Problem(f"{a} - {b} = ?", a - b, spread=3)


@shape("subtraction")
def _cross_out(rng: random.Random, level: int) -> Problem:
    total = rand_int(rng, 3, 10)
    gone = rand_int(rng, 1, total - 1)
    return Problem(f"{draw_objects(rng, total)} Take away {gone}. How many are left?", total - gone, spread=3)


@shape("word_problem")
def _take_away_story(rng: random.Random, level: int) -> Problem:
    a = rand_int(rng, 2, 10)
    b = rand_int(rng, 1, a - 1)
    name, toy = pick_name(rng), pick_toy(rng)
    return Problem(f"{name} had {a} {toy}. {b} rolled away. How many are left?", a - b, spread=3)


@shape("addition")
def _missing_addend(rng: random.Random, level: int) -> Problem:
    total = rand_int(rng, 2, 10)
    part = rand_int(rng, 1, total - 1)
    return Problem(f"{part} + ? = {total}", total - part, spread=3)


@shape("mixed")
def _skip_pattern(rng: random.Random, level: int) -> Problem:
    step = rand_int(rng, 1, 2)
    start = rand_int(rng, 0, 10 - 4 * step)
    shown = [start + step * i for i in range(3)]
    return Problem(f"{', '.join(map(str, shown))}, ?", start + 3 * step, spread=3)


@shape("word_problem")
def _grouping_story(rng: random.Random, level: int) -> Problem:
    groups = rand_int(rng, 2, 3)
    each = rand_int(rng, 2, 3)
    name, fruit = pick_name(rng), pick_fruit(rng)
    return Problem(
        f"{name} has {groups} plates with {each} {fruit} on each. How many {fruit} altogether?",
        groups * each,
        spread=3,
    )


K2_SUB_RANGES = (
    SubRange(1, 25, "Adding within 5", 5, (
        _count_objects,
        _add_within_five,
        _adding_story_within_five,
    )),
    SubRange(26, 50, "Adding within 10", 10, (
        _add_within_ten,
        _count_objects,
        _number_after,
        _adding_story_within_ten,
    )),
    SubRange(51, 75, "Taking away within 10", 10, (
        _subtract_within_ten,
        _cross_out,
        _take_away_story,
    )),
    SubRange(76, 100, "Adding and taking away within 10", 10, (
        _add_within_ten,
        _subtract_within_ten,
        _missing_addend,
        _skip_pattern,
        _grouping_story,
    )),
)

K2_STRATEGY = GradeStrategy("K2", K2_SUB_RANGES)
