"""
p1.py

Primary 1: counting to ten, single-digit facts, two-digit plus one-digit
without carrying, and missing addends up to twenty.
"""

from __future__ import annotations

import random

from generators.strategy import GradeStrategy, Problem, SubRange, shape
from generators.utils import draw_objects, pick_fruit, pick_name, pick_toy, rand_int


# --------------------------------------------------------------------------- #
# Counting to ten
# --------------------------------------------------------------------------- #

@shape("mixed")
def _count_to_ten(rng: random.Random, level: int) -> Problem:
    count = rand_int(rng, 1, 10)
    return Problem(f"How many? {draw_objects(rng, count)}", count, spread=3)


@shape("mixed")
def _number_before(rng: random.Random, level: int) -> Problem:
    n = rand_int(rng, 2, 10)
    return Problem(f"What number comes just before {n}?", n - 1, spread=3)


@shape("mixed")
def _largest_of_three(rng: random.Random, level: int) -> Problem:
    numbers = rng.sample(range(1, 11), 3)
    return Problem(f"Which is the biggest: {numbers[0]}, {numbers[1]}, {numbers[2]}?", max(numbers), spread=3)


# --------------------------------------------------------------------------- #
# Single-digit facts
# --------------------------------------------------------------------------- #

@shape("addition")
def _add_single_digits(rng: random.Random, level: int) -> Problem:
    a = rand_int(rng, 1, 9)
    b = rand_int(rng, 1, 9)
    return Problem(f"{a} + {b} = ?", a + b, spread=4)


@shape("addition")
def _more_than(rng: random.Random, level: int) -> Problem:
    n = rand_int(rng, 1, 9)
    more = rand_int(rng, 1, 3)
    return Problem(f"What is {more} more than {n}?", n + more, spread=3)


@shape("word_problem")
def _adding_story(rng: random.Random, level: int) -> Problem:
    a = rand_int(rng, 1, 9)
    b = rand_int(rng, 1, 9)
    name, toy = pick_name(rng), pick_toy(rng)
    return Problem(f"{name} has {a} {toy}. A friend gives {b} more. How many {toy} now?", a + b, spread=4)


@shape("subtraction")
def _subtract_single_digits(rng: random.Random, level: int) -> Problem:
    a = rand_int(rng, 2, 9)
    b = rand_int(rng, 1, a - 1)
    return Problem(f"{a} - {b} = ?", a - b, spread=3)


@shape("subtraction")
def _subtract_from_teen(rng: random.Random, level: int) -> Problem:
    a = rand_int(rng, 10, 18)
    b = rand_int(rng, a - 9, 9)
    return Problem(f"{a} - {b} = ?", a - b, spread=3)


@shape("word_problem")
def _how_many_fewer(rng: random.Random, level: int) -> Problem:
    a = rand_int(rng, 3, 9)
    b = rand_int(rng, 1, a - 1)
    first, second = pick_name(rng), pick_name(rng)
    fruit = pick_fruit(rng)
    return Problem(
        f"{first} has {a} {fruit}. {second} has {b} {fruit}. How many fewer does {second} have?",
        a - b,
        spread=3,
    )


@shape("subtraction")
def _missing_whole(rng: random.Random, level: int) -> Problem:
    taken = rand_int(rng, 1, 9)
    left = rand_int(rng, 1, 9)
    return Problem(f"? - {taken} = {left}", taken + left, spread=4)


# --------------------------------------------------------------------------- #
# Two-digit and one-digit
# --------------------------------------------------------------------------- #

@shape("addition")
def _teen_plus_one_digit(rng: random.Random, level: int) -> Problem:
    ones = rand_int(rng, 0, 8)
    b = rand_int(rng, 1, 9 - ones)
    a = 10 + ones
    return Problem(f"{a} + {b} = ?", a + b, spread=4)


@shape("subtraction")
def _teen_minus_one_digit(rng: random.Random, level: int) -> Problem:
    a = rand_int(rng, 11, 19)
    b = rand_int(rng, 1, a - 10)
    return Problem(f"{a} - {b} = ?", a - b, spread=4)


@shape("mixed")
def _tens_and_ones(rng: random.Random, level: int) -> Problem:
    ones = rand_int(rng, 0, 9)
    return Problem(f"1 ten and {ones} ones make ?", 10 + ones, spread=4)


@shape("word_problem")
def _shopping_story(rng: random.Random, level: int) -> Problem:
    ones = rand_int(rng, 0, 8)
    price = 10 + ones
    extra = rand_int(rng, 1, 9 - ones)
    name = pick_name(rng)
    return Problem(
        f"A pencil box costs {price} coins and a pencil costs {extra} coins. "
        f"How many coins does {name} pay for both?",
        price + extra,
        spread=4,
    )


# --------------------------------------------------------------------------- #
# Within twenty
# --------------------------------------------------------------------------- #

@shape("addition")
def _add_within_twenty(rng: random.Random, level: int) -> Problem:
    a = rand_int(rng, 2, 18)
    b = rand_int(rng, 1, 20 - a)
    return Problem(f"{a} + {b} = ?", a + b, spread=4)


@shape("subtraction")
def _subtract_within_twenty(rng: random.Random, level: int) -> Problem:
    a = rand_int(rng, 5, 20)
    b = rand_int(rng, 1, a - 1)
    return Problem(f"{a} - {b} = ?", a - b, spread=4)


@shape("mixed")
def _difference(rng: random.Random, level: int) -> Problem:
    a = rand_int(rng, 5, 20)
    b = rand_int(rng, 1, a - 1)
    return Problem(f"How many more is {a} than {b}?", a - b, spread=4)


@shape("word_problem")
def _bus_story(rng: random.Random, level: int) -> Problem:
    on_bus = rand_int(rng, 5, 15)
    get_on = rand_int(rng, 1, 20 - on_bus)
    return Problem(
        f"There are {on_bus} children on a bus. {get_on} more get on. How many children are on the bus?",
        on_bus + get_on,
        spread=4,
    )


@shape("addition")
def _missing_addend(rng: random.Random, level: int) -> Problem:
    total = rand_int(rng, 11, 20)
    part = rand_int(rng, 1, total - 1)
    return Problem(f"{part} + ? = {total}", total - part, spread=4)


@shape("subtraction")
def _missing_minuend(rng: random.Random, level: int) -> Problem:
    taken = rand_int(rng, 1, 10)
    left = rand_int(rng, 1, 10)
    return Problem(f"? - {taken} = {left}", taken + left, spread=4)


@shape("addition")
def _missing_first_addend(rng: random.Random, level: int) -> Problem:
    total = rand_int(rng, 11, 20)
    part = rand_int(rng, 1, total - 1)
    return Problem(f"? + {part} = {total}", total - part, spread=4)


@shape("word_problem")
def _sticker_story(rng: random.Random, level: int) -> Problem:
    needed = rand_int(rng, 11, 20)
    have = rand_int(rng, 1, needed - 1)
    name = pick_name(rng)
    return Problem(
        f"{name} needs {needed} stickers to fill a page and has {have}. How many more stickers are needed?",
        needed - have,
        spread=4,
    )


P1_SUB_RANGES = (
    SubRange(1, 10, "Counting to 10", 10, (
        _count_to_ten,
        _number_before,
        _largest_of_three,
    )),
    SubRange(11, 25, "Single-digit addition", 18, (
        _add_single_digits,
        _more_than,
        _adding_story,
    )),
    SubRange(26, 50, "Single-digit subtraction", 18, (
        _subtract_single_digits,
        _subtract_from_teen,
        _how_many_fewer,
        _missing_whole,
    )),
    SubRange(51, 75, "Two-digit and one-digit numbers", 19, (
        _teen_plus_one_digit,
        _teen_minus_one_digit,
        _tens_and_ones,
        _shopping_story,
    )),
    SubRange(76, 90, "Adding and subtracting within 20", 20, (
        _add_within_twenty,
        _subtract_within_twenty,
        _difference,
        _bus_story,
    )),
    SubRange(91, 100, "Missing numbers within 20", 20, (
        _missing_addend,
        _missing_minuend,
        _missing_first_addend,
        _sticker_story,
    )),
)

P1_STRATEGY = GradeStrategy("P1", P1_SUB_RANGES)
