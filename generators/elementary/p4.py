"""
p4.py

Primary 4: long division, fractions, order of operations, angles and area,
two-digit multiplication, perimeter, decimals, and large-number word problems,
ordered so answers grow with the level.
Decimal prompts are built from integer tenths and hundredths so answers stay
exact.
"""

from __future__ import annotations

import random
from fractions import Fraction

from generators.strategy import GradeStrategy, Problem, SubRange, shape
from generators.utils import divisible_pair, pick, rand_int


def _tenths(value: int) -> str:
    return f"{value // 10}.{value % 10}"


# --------------------------------------------------------------------------- #
# Multiplication
# --------------------------------------------------------------------------- #

@shape("multiplication")
def _two_by_two(rng: random.Random, level: int) -> Problem:
    a = rand_int(rng, 10, 25)
    b = rand_int(rng, 10, 25)
    return Problem(f"{a} × {b} = ?", a * b, spread=30)


@shape("multiplication")
def _times_eleven(rng: random.Random, level: int) -> Problem:
    a = rand_int(rng, 11, 25)
    return Problem(f"{a} × 11 = ?", a * 11, spread=22)


@shape("word_problem")
def _garden_story(rng: random.Random, level: int) -> Problem:
    length = rand_int(rng, 10, 25)
    width = rand_int(rng, 10, 25)
    return Problem(
        f"A garden has {length} rows with {width} plants in each row. How many plants?",
        length * width,
        spread=30,
    )


@shape("multiplication")
def _times_ten_or_hundred(rng: random.Random, level: int) -> Problem:
    a = rand_int(rng, 10, 99)
    factor = pick(rng, (10, 100))
    return Problem(f"{a} × {factor} = ?", a * factor, spread=factor)


@shape("multiplication")
def _three_by_two(rng: random.Random, level: int) -> Problem:
    a = rand_int(rng, 100, 999)
    b = rand_int(rng, 10, 99)
    return Problem(f"{a} × {b} = ?", a * b, spread=500)


@shape("word_problem")
def _crates_story(rng: random.Random, level: int) -> Problem:
    crates = rand_int(rng, 12, 48)
    bottles = rand_int(rng, 12, 24)
    return Problem(
        f"A truck carries {crates} crates with {bottles} bottles in each. How many bottles?",
        crates * bottles,
        spread=40,
    )


# --------------------------------------------------------------------------- #
# Division
# --------------------------------------------------------------------------- #

@shape("division")
def _division_facts(rng: random.Random, level: int) -> Problem:
    dividend, divisor, quotient = divisible_pair(rng, (2, 12), (10, 99))
    return Problem(f"{dividend} ÷ {divisor} = ?", quotient, spread=8)


@shape("division")
def _long_division(rng: random.Random, level: int) -> Problem:
    dividend, divisor, quotient = divisible_pair(rng, (11, 25), (10, 50))
    return Problem(f"{dividend} ÷ {divisor} = ?", quotient, spread=6)


@shape("word_problem")
def _buses_story(rng: random.Random, level: int) -> Problem:
    dividend, divisor, quotient = divisible_pair(rng, (20, 45), (3, 12))
    return Problem(
        f"{dividend} students ride buses that hold {divisor} students each. "
        f"How many full buses are needed?",
        quotient,
        spread=3,
    )


# --------------------------------------------------------------------------- #
# Fractions
# --------------------------------------------------------------------------- #

@shape("addition")
def _like_fractions(rng: random.Random, level: int) -> Problem:
    denominator = rand_int(rng, 5, 15)
    a = rand_int(rng, 1, denominator - 2)
    b = rand_int(rng, 1, denominator - 1 - a)
    return Problem(f"{a}/{denominator} + {b}/{denominator} = ?/{denominator}", a + b, spread=3)


@shape("addition")
def _unlike_fractions(rng: random.Random, level: int) -> Problem:
    small = pick(rng, (2, 3, 4, 5))
    large = small * rand_int(rng, 2, 3)
    a = rand_int(rng, 1, small - 1)
    b = rand_int(rng, 1, large - 1)
    total = Fraction(a, small) + Fraction(b, large)
    numerator = total * large
    return Problem(f"{a}/{small} + {b}/{large} = ?/{large}", numerator, spread=3)


@shape("multiplication")
def _fraction_of_whole(rng: random.Random, level: int) -> Problem:
    denominator = rand_int(rng, 2, 9)
    numerator = rand_int(rng, 1, denominator - 1)
    whole = denominator * rand_int(rng, 2, 15)
    return Problem(f"{numerator}/{denominator} × {whole} = ?", Fraction(numerator, denominator) * whole, spread=5)


@shape("division")
def _divide_by_unit_fraction(rng: random.Random, level: int) -> Problem:
    whole = rand_int(rng, 2, 12)
    denominator = rand_int(rng, 2, 8)
    return Problem(f"{whole} ÷ 1/{denominator} = ?", whole / Fraction(1, denominator), spread=6)


@shape("word_problem")
def _cake_story(rng: random.Random, level: int) -> Problem:
    denominator = pick(rng, (3, 4, 5, 6))
    numerator = rand_int(rng, 1, denominator - 1)
    guests = denominator * rand_int(rng, 3, 10)
    return Problem(
        f"{numerator}/{denominator} of the {guests} guests at a party want cake. How many guests want cake?",
        guests // denominator * numerator,
        spread=4,
    )


# --------------------------------------------------------------------------- #
# Order of operations
# --------------------------------------------------------------------------- #

@shape("mixed")
def _add_then_multiply(rng: random.Random, level: int) -> Problem:
    a, b, c = rand_int(rng, 5, 50), rand_int(rng, 2, 12), rand_int(rng, 2, 12)
    return Problem(f"{a} + {b} × {c} = ?", a + b * c, spread=10)


@shape("mixed")
def _bracket_first(rng: random.Random, level: int) -> Problem:
    a, b, c = rand_int(rng, 5, 30), rand_int(rng, 2, 20), rand_int(rng, 2, 9)
    return Problem(f"({a} + {b}) × {c} = ?", (a + b) * c, spread=15)


@shape("mixed")
def _multiply_then_subtract(rng: random.Random, level: int) -> Problem:
    a, b = rand_int(rng, 3, 12), rand_int(rng, 3, 12)
    c = rand_int(rng, 1, a * b - 1)
    return Problem(f"{a} × {b} - {c} = ?", a * b - c, spread=10)


@shape("mixed")
def _divide_inside_sum(rng: random.Random, level: int) -> Problem:
    dividend, divisor, quotient = divisible_pair(rng, (2, 9), (2, 12))
    extra = rand_int(rng, 5, 50)
    return Problem(f"{extra} + {dividend} ÷ {divisor} = ?", extra + quotient, spread=6)


# --------------------------------------------------------------------------- #
# Decimals
# --------------------------------------------------------------------------- #

@shape("multiplication")
def _decimal_times_ten(rng: random.Random, level: int) -> Problem:
    tenths = rand_int(rng, 11, 999)
    return Problem(f"{_tenths(tenths)} × 10 = ?", tenths, spread=10)


@shape("multiplication")
def _hundredths_times_hundred(rng: random.Random, level: int) -> Problem:
    hundredths = rand_int(rng, 101, 9999)
    text = f"{hundredths // 100}.{hundredths % 100:02d}"
    return Problem(f"{text} × 100 = ?", hundredths, spread=50)


@shape("addition")
def _decimals_to_whole(rng: random.Random, level: int) -> Problem:
    a_whole, b_whole = rand_int(rng, 1, 40), rand_int(rng, 1, 40)
    a_tenth = rand_int(rng, 1, 9)
    a, b = a_whole * 10 + a_tenth, b_whole * 10 + (10 - a_tenth)
    return Problem(f"{_tenths(a)} + {_tenths(b)} = ?", Fraction(a + b, 10), spread=5)


@shape("word_problem")
def _juice_story(rng: random.Random, level: int) -> Problem:
    litres = Fraction(rand_int(rng, 1, 9), 2)
    bottles = 2 * rand_int(rng, 1, 5)
    return Problem(
        f"Each bottle holds {float(litres):g} L of juice. How many litres do {bottles} bottles hold?",
        litres * bottles,
        spread=3,
    )


# --------------------------------------------------------------------------- #
# Angles and area
# --------------------------------------------------------------------------- #

@shape("mixed")
def _straight_line_angle(rng: random.Random, level: int) -> Problem:
    angle = rand_int(rng, 10, 170)
    return Problem(f"Two angles on a straight line. One is {angle}°. The other is ?°", 180 - angle, spread=15)


@shape("mixed")
def _triangle_angle(rng: random.Random, level: int) -> Problem:
    a = rand_int(rng, 20, 100)
    b = rand_int(rng, 20, 160 - a)
    return Problem(f"A triangle has angles {a}° and {b}°. The third angle is ?°", 180 - a - b, spread=15)


@shape("mixed")
def _rectangle_area(rng: random.Random, level: int) -> Problem:
    length, width = rand_int(rng, 3, 30), rand_int(rng, 2, 20)
    return Problem(f"Area of a {length} cm by {width} cm rectangle = ? cm²", length * width, spread=20)


@shape("mixed")
def _triangle_area(rng: random.Random, level: int) -> Problem:
    base = 2 * rand_int(rng, 2, 15)
    height = rand_int(rng, 3, 20)
    return Problem(f"Area of a triangle with base {base} cm and height {height} cm = ? cm²", base * height // 2, spread=15)


# --------------------------------------------------------------------------- #
# Perimeter and large numbers
# --------------------------------------------------------------------------- #

@shape("mixed")
def _rectangle_perimeter(rng: random.Random, level: int) -> Problem:
    length, width = rand_int(rng, 5, 60), rand_int(rng, 3, 40)
    return Problem(f"Perimeter of a {length} m by {width} m rectangle = ? m", 2 * (length + width), spread=10)


@shape("mixed")
def _missing_side(rng: random.Random, level: int) -> Problem:
    length, width = rand_int(rng, 5, 60), rand_int(rng, 3, 40)
    return Problem(
        f"A rectangle has perimeter {2 * (length + width)} m and length {length} m. Its width is ? m",
        width,
        spread=6,
    )


@shape("word_problem")
def _fence_story(rng: random.Random, level: int) -> Problem:
    side = rand_int(rng, 8, 90)
    price = pick(rng, (2, 5, 10))
    return Problem(
        f"A square field has sides of {side} m. Fencing costs {price} coins per metre. "
        f"How much does fencing the whole field cost?",
        4 * side * price,
        spread=40,
    )


@shape("addition")
def _add_millions(rng: random.Random, level: int) -> Problem:
    a = rand_int(rng, 1_000_000, 4_999_999)
    b = rand_int(rng, 100_000, 4_999_999)
    return Problem(f"{a:,} + {b:,} = ?", a + b, spread=10_000)


@shape("mixed")
def _place_value(rng: random.Random, level: int) -> Problem:
    number = rand_int(rng, 1_000_000, 9_999_999)
    places = (("thousands", 1_000), ("ten thousands", 10_000), ("hundred thousands", 100_000))
    label, unit = pick(rng, places)
    digit = number // unit % 10
    return Problem(f"In {number:,}, what is the value of the {label} digit?", digit * unit, spread=unit)


@shape("word_problem")
def _fundraiser_story(rng: random.Random, level: int) -> Problem:
    days = rand_int(rng, 3, 7)
    per_day = rand_int(rng, 50, 500)
    spent = rand_int(rng, 50, days * per_day - 1)
    return Problem(
        f"A school collects {per_day} coins a day for {days} days and spends {spent} coins. "
        f"How many coins are left?",
        days * per_day - spent,
        spread=50,
    )


P4_SUB_RANGES = (
    SubRange(1, 12, "Division and long division", 99, (
        _division_facts,
        _long_division,
        _buses_story,
    )),
    SubRange(13, 25, "Fractions", 120, (
        _like_fractions,
        _unlike_fractions,
        _fraction_of_whole,
        _divide_by_unit_fraction,
        _cake_story,
    )),
    SubRange(26, 37, "Order of operations", 450, (
        _add_then_multiply,
        _bracket_first,
        _multiply_then_subtract,
        _divide_inside_sum,
    )),
    SubRange(38, 50, "Angles and area", 600, (
        _straight_line_angle,
        _triangle_angle,
        _rectangle_area,
        _triangle_area,
    )),
    SubRange(51, 62, "Two-digit multiplication", 625, (
        _two_by_two,
        _times_eleven,
        _garden_story,
    )),
    SubRange(63, 75, "Perimeter", 3600, (
        _rectangle_perimeter,
        _missing_side,
        _fence_story,
    )),
    SubRange(76, 85, "Decimals", 9999, (
        _decimal_times_ten,
        _hundredths_times_hundred,
        _decimals_to_whole,
        _juice_story,
    )),
    SubRange(86, 92, "Multiplying larger numbers", 98_901, (
        _times_ten_or_hundred,
        _three_by_two,
        _crates_story,
    )),
    SubRange(93, 100, "Large numbers and word problems", 9_999_998, (
        _add_millions,
        _place_value,
        _fundraiser_story,
    )),
)

P4_STRATEGY = GradeStrategy("P4", P4_SUB_RANGES)
