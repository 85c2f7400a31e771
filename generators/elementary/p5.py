"""
p5.py

Primary 5: mixed numbers, factors and primes, long division and fraction
operations first, then area, percentages, decimals, three-digit
multiplication, and volume and multi-step problems with large numbers.
"""

from __future__ import annotations

import random
from fractions import Fraction

from generators.strategy import GradeStrategy, Problem, SubRange, shape
from generators.utils import (
    divisible_pair,
    get_factors,
    is_prime,
    pick,
    pick_name,
    primes_between,
    rand_int,
)


# --------------------------------------------------------------------------- #
# Multiplication
# --------------------------------------------------------------------------- #

@shape("multiplication")
def _three_by_one(rng: random.Random, level: int) -> Problem:
    a = rand_int(rng, 100, 300)
    b = rand_int(rng, 2, 9)
    return Problem(f"{a} × {b} = ?", a * b, spread=40)


@shape("multiplication")
def _three_by_two(rng: random.Random, level: int) -> Problem:
    a = rand_int(rng, 100, 300)
    b = rand_int(rng, 11, 99)
    return Problem(f"{a} × {b} = ?", a * b, spread=300)


@shape("word_problem")
def _ticket_story(rng: random.Random, level: int) -> Problem:
    tickets = rand_int(rng, 100, 300)
    price = rand_int(rng, 12, 45)
    return Problem(
        f"A concert sells {tickets} tickets at {price} coins each. How many coins does it collect?",
        tickets * price,
        spread=200,
    )


# --------------------------------------------------------------------------- #
# Factors and primes
# --------------------------------------------------------------------------- #

@shape("mixed")
def _count_factors(rng: random.Random, level: int) -> Problem:
    n = pick(rng, (12, 16, 18, 20, 24, 28, 30, 36, 40, 42, 48, 60))
    return Problem(f"How many factors does {n} have?", len(get_factors(n)), spread=3)


@shape("mixed")
def _largest_prime_factor(rng: random.Random, level: int) -> Problem:
    n = rand_int(rng, 12, 99)
    largest = max(p for p in get_factors(n) if is_prime(p))
    return Problem(f"What is the largest prime factor of {n}?", largest, spread=5)


@shape("mixed")
def _next_prime(rng: random.Random, level: int) -> Problem:
    n = rand_int(rng, 10, 90)
    candidate = n + 1
    while not is_prime(candidate):
        candidate += 1
    return Problem(f"What is the first prime number after {n}?", candidate, spread=4)


@shape("mixed")
def _count_primes(rng: random.Random, level: int) -> Problem:
    low = rand_int(rng, 1, 40)
    high = low + rand_int(rng, 10, 20)
    return Problem(
        f"How many prime numbers are between {low} and {high} (inclusive)?",
        len(primes_between(low, high)),
        spread=3,
    )


# --------------------------------------------------------------------------- #
# Long division
# --------------------------------------------------------------------------- #

@shape("division")
def _two_digit_divisor(rng: random.Random, level: int) -> Problem:
    dividend, divisor, quotient = divisible_pair(rng, (10, 50), (10, 99))
    return Problem(f"{dividend:,} ÷ {divisor} = ?", quotient, spread=8)


@shape("division")
def _long_division_quotient(rng: random.Random, level: int) -> Problem:
    divisor = rand_int(rng, 10, 50)
    quotient = rand_int(rng, 10, 99)
    remainder = rand_int(rng, 1, divisor - 1)
    dividend = divisor * quotient + remainder
    return Problem(f"{dividend:,} ÷ {divisor} = ? remainder {remainder}", quotient, spread=8)


@shape("word_problem")
def _packing_story(rng: random.Random, level: int) -> Problem:
    dividend, divisor, quotient = divisible_pair(rng, (12, 48), (10, 60))
    return Problem(
        f"A factory packs {dividend:,} pencils into boxes of {divisor}. How many boxes are filled?",
        quotient,
        spread=6,
    )


# --------------------------------------------------------------------------- #
# Mixed numbers and fractions
# --------------------------------------------------------------------------- #

@shape("mixed")
def _mixed_to_improper(rng: random.Random, level: int) -> Problem:
    whole = rand_int(rng, 1, 9)
    denominator = rand_int(rng, 2, 9)
    numerator = rand_int(rng, 1, denominator - 1)
    return Problem(
        f"{whole} {numerator}/{denominator} = ?/{denominator}",
        whole * denominator + numerator,
        spread=6,
    )


@shape("mixed")
def _improper_whole_part(rng: random.Random, level: int) -> Problem:
    denominator = rand_int(rng, 2, 9)
    whole = rand_int(rng, 1, 9)
    numerator = whole * denominator + rand_int(rng, 1, denominator - 1)
    return Problem(f"How many whole ones are in {numerator}/{denominator}?", whole, spread=3)


@shape("mixed")
def _improper_remainder(rng: random.Random, level: int) -> Problem:
    denominator = rand_int(rng, 3, 9)
    whole = rand_int(rng, 1, 9)
    part = rand_int(rng, 1, denominator - 1)
    numerator = whole * denominator + part
    return Problem(f"{numerator}/{denominator} = {whole} ?/{denominator}", part, spread=3)


@shape("addition")
def _unlike_denominators(rng: random.Random, level: int) -> Problem:
    a_den, b_den = rng.sample((2, 3, 4, 5, 6), 2)
    common = a_den * b_den
    a = rand_int(rng, 1, a_den - 1)
    b = rand_int(rng, 1, b_den - 1)
    total = Fraction(a, a_den) + Fraction(b, b_den)
    return Problem(f"{a}/{a_den} + {b}/{b_den} = ?/{common}", total * common, spread=4)


@shape("subtraction")
def _subtract_fractions(rng: random.Random, level: int) -> Problem:
    den = pick(rng, (4, 6, 8, 10, 12))
    half_den = den // 2
    a = rand_int(rng, 1, half_den - 1)
    b = rand_int(rng, 1, den - 2 * a)
    difference = Fraction(a, half_den) - Fraction(b, den)
    return Problem(f"{a}/{half_den} - {b}/{den} = ?/{den}", difference * den, spread=3)


@shape("word_problem")
def _fraction_amount_story(rng: random.Random, level: int) -> Problem:
    den = pick(rng, (3, 4, 5, 8))
    num = rand_int(rng, 1, den - 1)
    total = den * rand_int(rng, 5, 30)
    name = pick_name(rng)
    return Problem(
        f"{name} saved {total} coins and spent {num}/{den} of them. How many coins did {name} spend?",
        Fraction(num, den) * total,
        spread=10,
    )


# --------------------------------------------------------------------------- #
# Decimals
# --------------------------------------------------------------------------- #

@shape("multiplication")
def _quarters_times(rng: random.Random, level: int) -> Problem:
    whole = rand_int(rng, 0, 9)
    quarter = pick(rng, (25, 50, 75))
    factor = pick(rng, (4, 8, 12))
    value = Fraction(whole * 100 + quarter, 100)
    return Problem(f"{whole}.{quarter} × {factor} = ?", value * factor, spread=5)


@shape("division")
def _divide_by_decimal(rng: random.Random, level: int) -> Problem:
    divisor_tenths = rand_int(rng, 2, 9)
    quotient = rand_int(rng, 2, 12)
    dividend_tenths = divisor_tenths * quotient
    dividend = f"{dividend_tenths // 10}.{dividend_tenths % 10}"
    return Problem(f"{dividend} ÷ 0.{divisor_tenths} = ?", Fraction(dividend_tenths, divisor_tenths), spread=3)


@shape("multiplication")
def _thousandths_times_thousand(rng: random.Random, level: int) -> Problem:
    thousandths = rand_int(rng, 1001, 9999)
    text = f"{thousandths // 1000}.{thousandths % 1000:03d}"
    return Problem(f"{text} × 1000 = ?", thousandths, spread=100)


# --------------------------------------------------------------------------- #
# Percentages
# --------------------------------------------------------------------------- #

@shape("mixed")
def _percent_of(rng: random.Random, level: int) -> Problem:
    percent = pick(rng, (10, 20, 25, 30, 40, 50, 60, 75, 80))
    base = 20 * rand_int(rng, 1, 50)
    return Problem(f"{percent}% of {base} = ?", Fraction(percent * base, 100), spread=20)


@shape("mixed")
def _what_percent(rng: random.Random, level: int) -> Problem:
    whole = pick(rng, (20, 25, 50))
    part = rand_int(rng, 1, whole)
    return Problem(f"{part} out of {whole} is ?%", Fraction(part * 100, whole), spread=10)


@shape("word_problem")
def _discount_story(rng: random.Random, level: int) -> Problem:
    price = 100 * rand_int(rng, 2, 20)
    discount = pick(rng, (10, 15, 20, 25, 30, 50))
    return Problem(
        f"A bike costs {price} coins. It is {discount}% off. What is the sale price?",
        price - price * discount // 100,
        spread=50,
    )


# --------------------------------------------------------------------------- #
# Area
# --------------------------------------------------------------------------- #

@shape("mixed")
def _parallelogram_area(rng: random.Random, level: int) -> Problem:
    base, height = rand_int(rng, 4, 30), rand_int(rng, 3, 20)
    return Problem(f"Area of a parallelogram with base {base} m and height {height} m = ? m²", base * height, spread=20)


@shape("mixed")
def _trapezium_area(rng: random.Random, level: int) -> Problem:
    a, b = rand_int(rng, 3, 20), rand_int(rng, 3, 20)
    height = 2 * rand_int(rng, 1, 10)
    return Problem(
        f"A trapezium has parallel sides {a} cm and {b} cm and height {height} cm. Its area is ? cm²",
        (a + b) * height // 2,
        spread=15,
    )


@shape("mixed")
def _triangle_area(rng: random.Random, level: int) -> Problem:
    base = 2 * rand_int(rng, 2, 20)
    height = rand_int(rng, 3, 25)
    return Problem(f"Area of a triangle with base {base} cm and height {height} cm = ? cm²", base * height // 2, spread=15)


# --------------------------------------------------------------------------- #
# Volume and multi-step problems
# --------------------------------------------------------------------------- #

@shape("multiplication")
def _box_volume(rng: random.Random, level: int) -> Problem:
    length, width, height = rand_int(rng, 2, 20), rand_int(rng, 2, 20), rand_int(rng, 2, 20)
    return Problem(
        f"Volume of a box {length} cm × {width} cm × {height} cm = ? cm³",
        length * width * height,
        spread=50,
    )


@shape("addition")
def _add_large(rng: random.Random, level: int) -> Problem:
    a = 1000 * rand_int(rng, 1000, 4999)
    b = 250 * rand_int(rng, 400, 19_999)
    return Problem(f"{a:,} + {b:,} = ?", a + b, spread=100_000)


@shape("word_problem")
def _warehouse_story(rng: random.Random, level: int) -> Problem:
    trucks = rand_int(rng, 3, 12)
    boxes = rand_int(rng, 100, 1000)
    sold = rand_int(rng, 100, trucks * boxes - 1)
    return Problem(
        f"{trucks} trucks each bring {boxes} boxes to a warehouse. Then {sold} boxes are sold. "
        f"How many boxes remain?",
        trucks * boxes - sold,
        spread=100,
    )


@shape("word_problem")
def _tank_story(rng: random.Random, level: int) -> Problem:
    length, width, height = rand_int(rng, 10, 60), rand_int(rng, 10, 40), rand_int(rng, 10, 40)
    return Problem(
        f"A fish tank is {length} cm long, {width} cm wide and {height} cm high. "
        f"How many cm³ of water fill it?",
        length * width * height,
        spread=500,
    )


P5_SUB_RANGES = (
    SubRange(1, 12, "Mixed numbers", 89, (
        _mixed_to_improper,
        _improper_whole_part,
        _improper_remainder,
    )),
    SubRange(13, 25, "Factors and primes", 97, (
        _count_factors,
        _largest_prime_factor,
        _next_prime,
        _count_primes,
    )),
    SubRange(26, 37, "Long division", 99, (
        _two_digit_divisor,
        _long_division_quotient,
        _packing_story,
    )),
    SubRange(38, 50, "Fraction operations", 210, (
        _unlike_denominators,
        _subtract_fractions,
        _fraction_amount_story,
    )),
    SubRange(51, 62, "Area of plane figures", 600, (
        _parallelogram_area,
        _trapezium_area,
        _triangle_area,
    )),
    SubRange(63, 75, "Percentages", 1800, (
        _percent_of,
        _what_percent,
        _discount_story,
    )),
    SubRange(76, 85, "Decimals", 9999, (
        _quarters_times,
        _divide_by_decimal,
        _thousandths_times_thousand,
    )),
    SubRange(86, 92, "Three-digit multiplication", 29_700, (
        _three_by_one,
        _three_by_two,
        _ticket_story,
    )),
    SubRange(93, 100, "Volume and multi-step problems", 9_998_750, (
        _box_volume,
        _add_large,
        _warehouse_story,
        _tank_story,
    )),
)

P5_STRATEGY = GradeStrategy("P5", P5_SUB_RANGES)
