"""
p3.py

Primary 3: the full times tables up to 12, division with and without
remainders and simple fractions, then three-digit addition and subtraction,
multiplying by one digit, measurement, and four-digit sums last.
"""

from __future__ import annotations

import random

from generators.strategy import GradeStrategy, Problem, SubRange, shape
from generators.utils import divisible_pair, pick, pick_fruit, pick_name, rand_int


# --------------------------------------------------------------------------- #
# Place value: hundreds and thousands
# --------------------------------------------------------------------------- #

@shape("addition")
def _add_hundreds(rng: random.Random, level: int) -> Problem:
    a = rand_int(rng, 50, 300)
    b = rand_int(rng, 50, 300)
    return Problem(f"{a} + {b} = ?", a + b, spread=20)


@shape("subtraction")
def _subtract_hundreds(rng: random.Random, level: int) -> Problem:
    a = rand_int(rng, 150, 300)
    b = rand_int(rng, 50, a - 1)
    return Problem(f"{a} - {b} = ?", a - b, spread=20)


@shape("word_problem")
def _library_story(rng: random.Random, level: int) -> Problem:
    fiction = rand_int(rng, 100, 300)
    other = rand_int(rng, 50, 300)
    return Problem(
        f"A library has {fiction} story books and {other} science books. How many books is that?",
        fiction + other,
        spread=20,
    )


@shape("addition")
def _add_thousands(rng: random.Random, level: int) -> Problem:
    a = rand_int(rng, 1000, 4999)
    b = rand_int(rng, 1000, 4999)
    return Problem(f"{a:,} + {b:,} = ?", a + b, spread=100)


@shape("subtraction")
def _subtract_thousands(rng: random.Random, level: int) -> Problem:
    a = rand_int(rng, 3000, 9999)
    b = rand_int(rng, 1000, a - 1)
    return Problem(f"{a:,} - {b:,} = ?", a - b, spread=100)


@shape("mixed")
def _round_to_ten(rng: random.Random, level: int) -> Problem:
    n = rand_int(rng, 101, 9994)
    return Problem(f"Round {n:,} to the nearest ten.", (n + 5) // 10 * 10, spread=10)


# --------------------------------------------------------------------------- #
# Times tables and multiplication
# --------------------------------------------------------------------------- #

def _table_shapes(low: int, high: int):
    @shape("multiplication")
    def table_fact(rng: random.Random, level: int) -> Problem:
        m = rand_int(rng, low, high)
        n = rand_int(rng, 1, 12)
        return Problem(f"{m} × {n} = ?", m * n, spread=m)

    @shape("multiplication")
    def missing_factor(rng: random.Random, level: int) -> Problem:
        m = rand_int(rng, low, high)
        n = rand_int(rng, 1, 12)
        return Problem(f"{m} × ? = {m * n}", n, spread=3)

    @shape("word_problem")
    def rows_story(rng: random.Random, level: int) -> Problem:
        m = rand_int(rng, low, high)
        n = rand_int(rng, 2, 12)
        return Problem(f"A hall has {n} rows of {m} chairs. How many chairs are there?", m * n, spread=m)

    return table_fact, missing_factor, rows_story


@shape("multiplication")
def _times_two_digit(rng: random.Random, level: int) -> Problem:
    a = rand_int(rng, 2, 9)
    b = rand_int(rng, 10, 99)
    return Problem(f"{b} × {a} = ?", a * b, spread=20)


@shape("multiplication")
def _times_three_digit(rng: random.Random, level: int) -> Problem:
    a = rand_int(rng, 2, 9)
    b = rand_int(rng, 100, 999)
    return Problem(f"{b} × {a} = ?", a * b, spread=100)


@shape("word_problem")
def _boxes_story(rng: random.Random, level: int) -> Problem:
    boxes = rand_int(rng, 2, 9)
    each = rand_int(rng, 12, 99)
    fruit = pick_fruit(rng)
    return Problem(f"There are {boxes} boxes with {each} {fruit} each. How many {fruit}?", boxes * each, spread=20)


# --------------------------------------------------------------------------- #
# Division
# --------------------------------------------------------------------------- #

@shape("division")
def _exact_division(rng: random.Random, level: int) -> Problem:
    dividend, divisor, quotient = divisible_pair(rng, (2, 12), (2, 12))
    return Problem(f"{dividend} ÷ {divisor} = ?", quotient, spread=3)


@shape("division")
def _missing_dividend(rng: random.Random, level: int) -> Problem:
    dividend, divisor, quotient = divisible_pair(rng, (2, 12), (2, 12))
    return Problem(f"? ÷ {divisor} = {quotient}", dividend, spread=8)


@shape("word_problem")
def _sharing_story(rng: random.Random, level: int) -> Problem:
    dividend, divisor, quotient = divisible_pair(rng, (2, 12), (2, 12))
    name = pick_name(rng)
    return Problem(
        f"{name} shares {dividend} cookies equally among {divisor} friends. How many does each get?",
        quotient,
        spread=3,
    )


@shape("division")
def _remainder(rng: random.Random, level: int) -> Problem:
    divisor = rand_int(rng, 3, 9)
    quotient = rand_int(rng, 2, 12)
    remainder = rand_int(rng, 1, divisor - 1)
    dividend = divisor * quotient + remainder
    return Problem(f"What is the remainder of {dividend} ÷ {divisor}?", remainder, spread=3)


@shape("division")
def _quotient_with_remainder(rng: random.Random, level: int) -> Problem:
    divisor = rand_int(rng, 3, 9)
    quotient = rand_int(rng, 2, 12)
    remainder = rand_int(rng, 1, divisor - 1)
    dividend = divisor * quotient + remainder
    return Problem(f"{dividend} ÷ {divisor} = ? remainder {remainder}", quotient, spread=3)


@shape("division")
def _find_dividend(rng: random.Random, level: int) -> Problem:
    divisor = rand_int(rng, 3, 12)
    quotient = rand_int(rng, 2, 12)
    remainder = rand_int(rng, 1, divisor - 1)
    return Problem(
        f"? ÷ {divisor} = {quotient} remainder {remainder}",
        divisor * quotient + remainder,
        spread=8,
    )


@shape("word_problem")
def _full_boxes_story(rng: random.Random, level: int) -> Problem:
    per_box = rand_int(rng, 4, 9)
    full = rand_int(rng, 2, 10)
    extra = rand_int(rng, 1, per_box - 1)
    eggs = per_box * full + extra
    return Problem(
        f"{eggs} eggs are packed {per_box} to a box. How many boxes can be filled completely?",
        full,
        spread=3,
    )


# --------------------------------------------------------------------------- #
# Fractions
# --------------------------------------------------------------------------- #

@shape("mixed")
def _fraction_of_amount(rng: random.Random, level: int) -> Problem:
    denominator = rand_int(rng, 2, 5)
    numerator = rand_int(rng, 1, denominator - 1)
    whole = denominator * rand_int(rng, 2, 40)
    return Problem(f"{numerator}/{denominator} of {whole} = ?", whole // denominator * numerator, spread=4)


@shape("addition")
def _same_denominator_sum(rng: random.Random, level: int) -> Problem:
    denominator = rand_int(rng, 5, 12)
    a = rand_int(rng, 1, denominator - 2)
    b = rand_int(rng, 1, denominator - 1 - a)
    return Problem(f"{a}/{denominator} + {b}/{denominator} = ?/{denominator}", a + b, spread=3)


@shape("mixed")
def _parts_in_wholes(rng: random.Random, level: int) -> Problem:
    denominator = rand_int(rng, 2, 10)
    wholes = rand_int(rng, 1, 20)
    return Problem(f"How many 1/{denominator} pieces make {wholes} whole(s)?", wholes * denominator, spread=4)


@shape("word_problem")
def _pizza_story(rng: random.Random, level: int) -> Problem:
    slices = pick(rng, (4, 6, 8))
    eaten = rand_int(rng, 1, slices - 1)
    name = pick_name(rng)
    return Problem(
        f"A pizza is cut into {slices} equal slices. {name} eats {eaten}. "
        f"How many slices are left?",
        slices - eaten,
        spread=3,
    )


# --------------------------------------------------------------------------- #
# Measurement
# --------------------------------------------------------------------------- #

UNIT_CONVERSIONS = (
    ("m", "cm", 100),
    ("kg", "g", 1000),
    ("L", "mL", 1000),
    ("km", "m", 1000),
    ("hours", "minutes", 60),
)


@shape("mixed")
def _convert_units(rng: random.Random, level: int) -> Problem:
    big, small, factor = pick(rng, UNIT_CONVERSIONS)
    amount = rand_int(rng, 1, 9)
    return Problem(f"{amount} {big} = ? {small}", amount * factor, spread=factor // 2)


@shape("mixed")
def _mixed_units(rng: random.Random, level: int) -> Problem:
    metres = rand_int(rng, 1, 9)
    centimetres = rand_int(rng, 1, 99)
    return Problem(f"{metres} m {centimetres} cm = ? cm", metres * 100 + centimetres, spread=20)


@shape("word_problem")
def _two_step_story(rng: random.Random, level: int) -> Problem:
    packs = rand_int(rng, 3, 9)
    per_pack = rand_int(rng, 6, 12)
    given = rand_int(rng, 1, packs * per_pack - 1)
    name = pick_name(rng)
    return Problem(
        f"{name} buys {packs} packs of {per_pack} stickers and gives away {given}. "
        f"How many stickers are left?",
        packs * per_pack - given,
        spread=10,
    )


@shape("word_problem")
def _ribbon_story(rng: random.Random, level: int) -> Problem:
    metres = rand_int(rng, 2, 9)
    cut = rand_int(rng, 10, 90)
    return Problem(
        f"A ribbon is {metres} m long. {cut} cm is cut off. How many centimetres are left?",
        metres * 100 - cut,
        spread=20,
    )


_LOW_TABLES = _table_shapes(2, 5)
_MID_TABLES = _table_shapes(6, 9)
_HIGH_TABLES = _table_shapes(10, 12)

P3_SUB_RANGES = (
    SubRange(1, 10, "Times tables of 2 to 5", 60, _LOW_TABLES),
    SubRange(11, 20, "Times tables of 6 to 9", 108, _MID_TABLES),
    SubRange(21, 30, "Times tables of 10 to 12", 144, _HIGH_TABLES),
    SubRange(31, 40, "Division without remainders", 144, (
        _exact_division,
        _missing_dividend,
        _sharing_story,
    )),
    SubRange(41, 50, "Division with remainders", 155, (
        _remainder,
        _quotient_with_remainder,
        _find_dividend,
        _full_boxes_story,
    )),
    SubRange(51, 60, "Simple fractions", 200, (
        _fraction_of_amount,
        _same_denominator_sum,
        _parts_in_wholes,
        _pizza_story,
    )),
    SubRange(61, 70, "Adding and subtracting hundreds", 600, (
        _add_hundreds,
        _subtract_hundreds,
        _library_story,
    )),
    SubRange(71, 80, "Multiplying by one digit", 8991, (
        _times_two_digit,
        _times_three_digit,
        _boxes_story,
    )),
    SubRange(81, 90, "Measurement and two-step problems", 9000, (
        _convert_units,
        _mixed_units,
        _two_step_story,
        _ribbon_story,
    )),
    SubRange(91, 100, "Adding and subtracting thousands", 9998, (
        _add_thousands,
        _subtract_thousands,
        _round_to_ten,
    )),
)

P3_STRATEGY = GradeStrategy("P3", P3_SUB_RANGES)
