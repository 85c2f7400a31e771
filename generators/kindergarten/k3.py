"""
k3.py

Kindergarten 3: number bonds to ten, taking away, adding past ten, and a
mixed review within twenty with first steps into equal groups and sharing.
Adding and taking-away shapes stay inside the level band's number range.
"""

from __future__ import annotations

import random

from generators.strategy import GradeStrategy, Problem, SubRange, shape
from generators.utils import draw_objects, pick, pick_fruit, pick_name, pick_toy, rand_int


@shape("addition", bounded=True)
def _add_within_ten(rng: random.Random, level: int, top: int = 10) -> Problem:
    cap = min(top, 10)
    a = rand_int(rng, 1, cap - 1)
    b = rand_int(rng, 1, cap - a)
    return Problem(f"{a} + {b} = ?", a + b, spread=3)


@shape("mixed")
def _number_bond(rng: random.Random, level: int) -> Problem:
    total = rand_int(rng, 5, 10)
    part = rand_int(rng, 1, total - 1)
    return Problem(f"{part} and ? make {total}", total - part, spread=3)


@shape("word_problem")
def _adding_story(rng: random.Random, level: int) -> Problem:
    a = rand_int(rng, 1, 9)
    b = rand_int(rng, 1, 10 - a)
    name, toy = pick_name(rng), pick_toy(rng)
    return Problem(f"{name} has {a} {toy} and buys {b} more. How many {toy}?", a + b, spread=3)


@shape("subtraction", bounded=True)
def _subtract_within_ten(rng: random.Random, level: int, top: int = 10) -> Problem:
    a = rand_int(rng, 2, min(top, 10))
    b = rand_int(rng, 0, a - 1)
    return Problem(f"{a} - {b} = ?", a - b, spread=3)


@shape("subtraction")
def _how_many_hidden(rng: random.Random, level: int) -> Problem:
    total = rand_int(rng, 3, 10)
    shown = rand_int(rng, 1, total - 1)
    return Problem(
        f"There are {total} stars. You can see {draw_objects(rng, shown)}. How many are hiding?",
        total - shown,
        spread=3,
    )


@shape("word_problem")
def _take_away_story(rng: random.Random, level: int) -> Problem:
    a = rand_int(rng, 2, 10)
    b = rand_int(rng, 1, a - 1)
    name, fruit = pick_name(rng), pick_fruit(rng)
    return Problem(f"{name} had {a} {fruit} and shared {b}. How many are left?", a - b, spread=3)


@shape("addition", bounded=True)
def _add_past_ten(rng: random.Random, level: int, top: int = 10) -> Problem:
    cap = max(5, min(top, 10))
    a = rand_int(rng, 5, cap)
    b = rand_int(rng, 5, cap)
    return Problem(f"{a} + {b} = ?", a + b, spread=4)


@shape("addition")
def _doubles(rng: random.Random, level: int) -> Problem:
    n = rand_int(rng, 5, 10)
    return Problem(f"Double {n} is ?", n + n, spread=4)


@shape("word_problem")
def _adding_past_ten_story(rng: random.Random, level: int) -> Problem:
    a = rand_int(rng, 5, 10)
    b = rand_int(rng, 5, 10)
    name, fruit = pick_name(rng), pick_fruit(rng)
    return Problem(f"{name} picks {a} {fruit} in the morning and {b} after lunch. How many {fruit}?", a + b, spread=4)


@shape("addition", bounded=True)
def _add_within_twenty(rng: random.Random, level: int, top: int = 20) -> Problem:
    cap = min(top, 19)
    a = rand_int(rng, 1, cap)
    b = rand_int(rng, 1, min(cap, 20 - a))
    return Problem(f"{a} + {b} = ?", a + b, spread=4)


@shape("subtraction", bounded=True)
def _subtract_within_twenty(rng: random.Random, level: int, top: int = 20) -> Problem:
    a = rand_int(rng, 11, max(11, min(top, 20)))
    b = rand_int(rng, 1, 10)
    return Problem(f"{a} - {b} = ?", a - b, spread=4)


@shape("multiplication")
def _equal_groups(rng: random.Random, level: int) -> Problem:
    groups = rand_int(rng, 2, 4)
    each = rand_int(rng, 2, 5)
    return Problem(f"{groups} groups of {each} is ?", groups * each, spread=4)


@shape("mixed")
def _skip_count(rng: random.Random, level: int) -> Problem:
    step = pick(rng, (2, 5))
    k = rand_int(rng, 0, 20 // step - 3)
    shown = [(k + i) * step for i in range(3)]
    return Problem(f"Skip count: {', '.join(map(str, shown))}, ?", (k + 3) * step, spread=4)


@shape("word_problem")
def _sharing_story(rng: random.Random, level: int) -> Problem:
    friends = rand_int(rng, 2, 4)
    each = rand_int(rng, 1, 5)
    name, fruit = pick_name(rng), pick_fruit(rng)
    return Problem(
        f"{name} shares {friends * each} {fruit} equally with {friends} friends. How many does each friend get?",
        each,
        spread=2,
    )


@shape("word_problem")
def _clock_story(rng: random.Random, level: int) -> Problem:
    hour = rand_int(rng, 1, 9)
    later = rand_int(rng, 1, 3)
    name = pick_name(rng)
    return Problem(
        f"{name} starts playing at {hour} o'clock and plays for {later} hours. What o'clock is it now?",
        hour + later,
        spread=2,
    )


K3_SUB_RANGES = (
    SubRange(1, 25, "Adding within 10", 10, (
        _add_within_ten,
        _number_bond,
        _adding_story,
    )),
    SubRange(26, 50, "Taking away within 10", 10, (
        _subtract_within_ten,
        _how_many_hidden,
        _take_away_story,
    )),
    SubRange(51, 75, "Adding past 10", 20, (
        _add_past_ten,
        _doubles,
        _adding_past_ten_story,
    )),
    SubRange(76, 100, "Adding and taking away within 20", 20, (
        _add_within_twenty,
        _subtract_within_twenty,
        _equal_groups,
        _skip_count,
        _sharing_story,
        _clock_story,
    )),
)

K3_STRATEGY = GradeStrategy("K3", K3_SUB_RANGES)
