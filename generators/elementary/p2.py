"""
p2.py

Primary 2: two-digit addition and subtraction without regrouping, the 2, 5
and 10 times tables, the 3 and 4 tables with their division facts, and
finally regrouping.

Levels 41-60 only ever ask `m × n` with m in {2, 5, 10} and n in 1..10.
"""

from __future__ import annotations

import random

from generators.strategy import GradeStrategy, Problem, SubRange, shape
from generators.utils import pick, pick_fruit, pick_name, pick_toy, rand_int

EASY_TABLES = (2, 5, 10)
MIDDLE_TABLES = (3, 4)


def _no_carry_pair(rng: random.Random, max_tens: int):
    """Two two-digit numbers whose ones and tens digits both sum below 10."""

    a_tens = rand_int(rng, 1, max_tens - 1)
    b_tens = rand_int(rng, 1, max_tens - a_tens)
    a_ones = rand_int(rng, 0, 9)
    b_ones = rand_int(rng, 0, 9 - a_ones)
    return a_tens * 10 + a_ones, b_tens * 10 + b_ones


# --------------------------------------------------------------------------- #
# Adding and subtracting without regrouping
# --------------------------------------------------------------------------- #

@shape("addition")
def _add_no_carry(rng: random.Random, level: int) -> Problem:
    a, b = _no_carry_pair(rng, 5)
    return Problem(f"{a} + {b} = ?", a + b, spread=10)


@shape("mixed")
def _tens_and_ones(rng: random.Random, level: int) -> Problem:
    tens = rand_int(rng, 1, 5)
    ones = rand_int(rng, 0, 9)
    return Problem(f"{tens} tens and {ones} ones = ?", tens * 10 + ones, spread=10)


@shape("word_problem")
def _marble_story(rng: random.Random, level: int) -> Problem:
    a, b = _no_carry_pair(rng, 5)
    first, second = pick_name(rng), pick_name(rng)
    return Problem(
        f"{first} has {a} marbles and {second} has {b}. How many marbles do they have together?",
        a + b,
        spread=10,
    )


@shape("subtraction")
def _subtract_no_borrow(rng: random.Random, level: int) -> Problem:
    a_tens = rand_int(rng, 2, 7)
    b_tens = rand_int(rng, 1, a_tens - 1)
    a_ones = rand_int(rng, 0, 9)
    b_ones = rand_int(rng, 0, a_ones)
    a, b = a_tens * 10 + a_ones, b_tens * 10 + b_ones
    return Problem(f"{a} - {b} = ?", a - b, spread=10)


@shape("subtraction")
def _take_ten(rng: random.Random, level: int) -> Problem:
    a = rand_int(rng, 20, 79)
    return Problem(f"{a} - 10 = ?", a - 10, spread=10)


@shape("word_problem")
def _sold_story(rng: random.Random, level: int) -> Problem:
    a_tens = rand_int(rng, 2, 7)
    b_tens = rand_int(rng, 1, a_tens - 1)
    a_ones = rand_int(rng, 0, 9)
    b_ones = rand_int(rng, 0, a_ones)
    a, b = a_tens * 10 + a_ones, b_tens * 10 + b_ones
    fruit = pick_fruit(rng)
    return Problem(f"A shop had {a} {fruit} and sold {b}. How many {fruit} are left?", a - b, spread=10)


# --------------------------------------------------------------------------- #
# Times tables of 2, 5 and 10
# --------------------------------------------------------------------------- #

@shape("multiplication")
def _easy_table(rng: random.Random, level: int) -> Problem:
    m = pick(rng, EASY_TABLES)
    n = rand_int(rng, 1, 10)
    return Problem(f"{m} × {n} = ?", m * n, spread=max(3, m))


@shape("multiplication")
def _easy_table_turned(rng: random.Random, level: int) -> Problem:
    m = pick(rng, EASY_TABLES)
    n = rand_int(rng, 1, 10)
    return Problem(f"{n} × {m} = ?", m * n, spread=max(3, m))


@shape("multiplication")
def _repeated_addition(rng: random.Random, level: int) -> Problem:
    m = pick(rng, EASY_TABLES)
    n = rand_int(rng, 1, 10)
    return Problem(f"{' + '.join([str(m)] * n)} = ?", m * n, spread=max(3, m))


@shape("word_problem")
def _bags_story(rng: random.Random, level: int) -> Problem:
    m = pick(rng, EASY_TABLES)
    n = rand_int(rng, 1, 10)
    name, toy = pick_name(rng), pick_toy(rng)
    return Problem(
        f"{name} has {n} bags with {m} {toy} in each bag. How many {toy} in all?",
        m * n,
        spread=max(3, m),
    )


# --------------------------------------------------------------------------- #
# Times tables of 3 and 4
# --------------------------------------------------------------------------- #

@shape("multiplication")
def _middle_table(rng: random.Random, level: int) -> Problem:
    m = pick(rng, MIDDLE_TABLES)
    n = rand_int(rng, 1, 10)
    return Problem(f"{m} × {n} = ?", m * n, spread=m)


@shape("division")
def _middle_division(rng: random.Random, level: int) -> Problem:
    m = pick(rng, MIDDLE_TABLES)
    n = rand_int(rng, 1, 10)
    return Problem(f"{m * n} ÷ {m} = ?", n, spread=3)


@shape("multiplication")
def _missing_factor(rng: random.Random, level: int) -> Problem:
    m = pick(rng, MIDDLE_TABLES)
    n = rand_int(rng, 1, 10)
    return Problem(f"{m} × ? = {m * n}", n, spread=3)


@shape("multiplication")
def _table_by_tens(rng: random.Random, level: int) -> Problem:
    m = pick(rng, MIDDLE_TABLES)
    tens = pick(rng, (10, 20, 30))
    return Problem(f"{m} × {tens} = ?", m * tens, spread=10)


@shape("word_problem")
def _tricycle_story(rng: random.Random, level: int) -> Problem:
    m = pick(rng, MIDDLE_TABLES)
    n = rand_int(rng, 2, 10)
    thing = "tricycles" if m == 3 else "cars"
    return Problem(f"Each of {n} {thing} has {m} wheels. How many wheels altogether?", m * n, spread=m)


# --------------------------------------------------------------------------- #
# Regrouping
# --------------------------------------------------------------------------- #

@shape("addition")
def _add_with_carry(rng: random.Random, level: int) -> Problem:
    a_ones = rand_int(rng, 1, 9)
    b_ones = rand_int(rng, 10 - a_ones, 9)
    a = rand_int(rng, 1, 8) * 10 + a_ones
    b = rand_int(rng, 1, 8) * 10 + b_ones
    return Problem(f"{a} + {b} = ?", a + b, spread=10)


@shape("subtraction")
def _subtract_with_borrow(rng: random.Random, level: int) -> Problem:
    a_ones = rand_int(rng, 0, 8)
    b_ones = rand_int(rng, a_ones + 1, 9)
    a_tens = rand_int(rng, 3, 9)
    b_tens = rand_int(rng, 1, a_tens - 1)
    a, b = a_tens * 10 + a_ones, b_tens * 10 + b_ones
    return Problem(f"{a} - {b} = ?", a - b, spread=10)


@shape("word_problem")
def _money_story(rng: random.Random, level: int) -> Problem:
    price = rand_int(rng, 15, 49)
    paid = pick(rng, (50, 60, 70, 80, 90, 100))
    name = pick_name(rng)
    return Problem(
        f"{name} buys a book for {price} coins and pays with {paid} coins. How much change?",
        paid - price,
        spread=10,
    )


@shape("word_problem")
def _time_story(rng: random.Random, level: int) -> Problem:
    start = rand_int(rng, 5, 35)
    length = rand_int(rng, 15, 59 - start)
    name = pick_name(rng)
    return Problem(
        f"{name} starts reading at 4:{start:02d} and reads for {length} minutes. "
        f"At how many minutes past 4 does {name} stop?",
        start + length,
        spread=10,
    )


P2_SUB_RANGES = (
    SubRange(1, 20, "Two-digit addition without carrying", 59, (
        _add_no_carry,
        _tens_and_ones,
        _marble_story,
    )),
    SubRange(21, 40, "Two-digit subtraction without borrowing", 69, (
        _subtract_no_borrow,
        _take_ten,
        _sold_story,
    )),
    SubRange(41, 60, "Times tables of 2, 5 and 10", 100, (
        _easy_table,
        _easy_table_turned,
        _repeated_addition,
        _bags_story,
    )),
    SubRange(61, 80, "Times tables of 3 and 4", 120, (
        _middle_table,
        _middle_division,
        _missing_factor,
        _table_by_tens,
        _tricycle_story,
    )),
    SubRange(81, 100, "Two-digit addition and subtraction with regrouping", 178, (
        _add_with_carry,
        _subtract_with_borrow,
        _money_story,
        _time_story,
    )),
)

P2_STRATEGY = GradeStrategy("P2", P2_SUB_RANGES)
