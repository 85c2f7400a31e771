"""
p6.py

Primary 6: greatest common factor, fraction operations, least common
multiple, decimal operations, ratio, percentages, circles (π taken as 22/7)
and solid figures.
"""

from __future__ import annotations

import math
import random
from fractions import Fraction

from generators.strategy import GradeStrategy, Problem, SubRange, shape
from generators.utils import lcm, pick, pick_name, rand_int

PI_APPROX = Fraction(22, 7)


def _coprime_pair(rng: random.Random, low: int, high: int):
    while True:
        m, n = rng.sample(range(low, high + 1), 2)
        if math.gcd(m, n) == 1:
            return m, n


# --------------------------------------------------------------------------- #
# GCF and LCM
# --------------------------------------------------------------------------- #

@shape("mixed")
def _gcf(rng: random.Random, level: int) -> Problem:
    g = rand_int(rng, 2, 30)
    m, n = _coprime_pair(rng, 1, 9)
    a, b = g * m, g * n
    return Problem(f"GCF of {a} and {b} = ?", math.gcd(a, b), spread=4)


@shape("mixed")
def _gcf_of_three(rng: random.Random, level: int) -> Problem:
    g = rand_int(rng, 2, 12)
    multipliers = rng.sample(range(1, 8), 3)
    numbers = [g * m for m in multipliers]
    return Problem(
        f"GCF of {numbers[0]}, {numbers[1]} and {numbers[2]} = ?",
        math.gcd(math.gcd(numbers[0], numbers[1]), numbers[2]),
        spread=4,
    )


@shape("word_problem")
def _ribbon_cut_story(rng: random.Random, level: int) -> Problem:
    g = rand_int(rng, 3, 30)
    m, n = _coprime_pair(rng, 2, 9)
    a, b = g * m, g * n
    return Problem(
        f"Two ribbons are {a} cm and {b} cm long. They are cut into equal pieces as long as possible "
        f"with nothing left over. How long is each piece in cm?",
        math.gcd(a, b),
        spread=4,
    )


@shape("mixed")
def _lcm(rng: random.Random, level: int) -> Problem:
    a, b = rng.sample(range(2, 13), 2)
    return Problem(f"LCM of {a} and {b} = ?", lcm(a, b), spread=10)


@shape("addition")
def _common_denominator(rng: random.Random, level: int) -> Problem:
    a, b = rng.sample(range(2, 13), 2)
    return Problem(f"Lowest common denominator of 1/{a} and 1/{b} = ?", lcm(a, b), spread=10)


@shape("word_problem")
def _bus_timetable_story(rng: random.Random, level: int) -> Problem:
    a, b = rng.sample((6, 8, 9, 10, 12, 15, 20), 2)
    return Problem(
        f"Bus A leaves every {a} minutes and bus B every {b} minutes. They leave together now. "
        f"In how many minutes do they next leave together?",
        lcm(a, b),
        spread=10,
    )


# --------------------------------------------------------------------------- #
# Fractions
# --------------------------------------------------------------------------- #

@shape("multiplication")
def _fraction_product(rng: random.Random, level: int) -> Problem:
    b = rand_int(rng, 2, 9)
    a = rand_int(rng, 1, b - 1)
    k = rand_int(rng, 1, 9)
    c = b * k
    return Problem(f"{a}/{b} × {c}/{a} = ?", Fraction(a, b) * Fraction(c, a), spread=3)


@shape("division")
def _fraction_quotient(rng: random.Random, level: int) -> Problem:
    x = rand_int(rng, 1, 9)
    y = rand_int(rng, 2, 9)
    k = rand_int(rng, 2, 9)
    return Problem(f"{x}/{y} ÷ {x}/{y * k} = ?", Fraction(x, y) / Fraction(x, y * k), spread=3)


@shape("mixed")
def _fraction_sum_scaled(rng: random.Random, level: int) -> Problem:
    den = rand_int(rng, 3, 12)
    a = rand_int(rng, 1, den - 1)
    b = rand_int(rng, 1, den - 1)
    k = rand_int(rng, 1, 5)
    total = (Fraction(a, den) + Fraction(b, den)) * den * k
    return Problem(f"({a}/{den} + {b}/{den}) × {den * k} = ?", total, spread=5)


@shape("word_problem")
def _flour_story(rng: random.Random, level: int) -> Problem:
    den = pick(rng, (2, 3, 4))
    portions = rand_int(rng, 2, 20) * den
    return Problem(
        f"A baker has {portions // den} kg of flour. Each cake uses 1/{den} kg. How many cakes can be baked?",
        Fraction(portions // den) / Fraction(1, den),
        spread=4,
    )


# --------------------------------------------------------------------------- #
# Decimals
# --------------------------------------------------------------------------- #

@shape("multiplication")
def _decimal_product(rng: random.Random, level: int) -> Problem:
    tenths = 2 * rand_int(rng, 1, 199)
    text = f"{tenths // 10}.{tenths % 10}"
    return Problem(f"{text} × 5 = ?", Fraction(tenths * 5, 10), spread=5)


@shape("division")
def _decimal_quotient(rng: random.Random, level: int) -> Problem:
    divisor_tenths = rand_int(rng, 2, 9)
    quotient = rand_int(rng, 2, 20)
    dividend_tenths = divisor_tenths * quotient
    text = f"{dividend_tenths // 10}.{dividend_tenths % 10}"
    return Problem(f"{text} ÷ 0.{divisor_tenths} = ?", Fraction(dividend_tenths, divisor_tenths), spread=4)


@shape("addition")
def _decimal_sum_to_whole(rng: random.Random, level: int) -> Problem:
    hundredths = rand_int(rng, 1, 99)
    first = rand_int(rng, 1, 50) * 100 + hundredths
    second = rand_int(rng, 1, 50) * 100 + (100 - hundredths)
    text_a = f"{first // 100}.{first % 100:02d}"
    text_b = f"{second // 100}.{second % 100:02d}"
    return Problem(f"{text_a} + {text_b} = ?", Fraction(first + second, 100), spread=5)


# --------------------------------------------------------------------------- #
# Ratio and proportion
# --------------------------------------------------------------------------- #

@shape("mixed")
def _equivalent_ratio(rng: random.Random, level: int) -> Problem:
    a, b = rand_int(rng, 1, 9), rand_int(rng, 1, 9)
    k = rand_int(rng, 2, 12)
    return Problem(f"{a} : {b} = {a * k} : ?", b * k, spread=6)


@shape("mixed")
def _share_in_ratio(rng: random.Random, level: int) -> Problem:
    a, b = rng.sample(range(1, 8), 2)
    unit = rand_int(rng, 2, 30)
    total = (a + b) * unit
    return Problem(f"Share {total} in the ratio {a} : {b}. The larger share is ?", max(a, b) * unit, spread=10)


@shape("word_problem")
def _map_scale_story(rng: random.Random, level: int) -> Problem:
    scale = pick(rng, (2, 5, 10, 20, 25, 50))
    distance = rand_int(rng, 2, 18)
    return Problem(
        f"On a map 1 cm stands for {scale} km. Two towns are {distance} cm apart on the map. "
        f"How many km apart are they?",
        scale * distance,
        spread=20,
    )


# --------------------------------------------------------------------------- #
# Percentages
# --------------------------------------------------------------------------- #

@shape("mixed")
def _percent_increase(rng: random.Random, level: int) -> Problem:
    base = 20 * rand_int(rng, 1, 30)
    percent = pick(rng, (5, 10, 15, 20, 25, 50))
    return Problem(f"Increase {base} by {percent}%.", Fraction(base * (100 + percent), 100), spread=20)


@shape("mixed")
def _percent_of_what(rng: random.Random, level: int) -> Problem:
    percent = pick(rng, (10, 20, 25, 50))
    whole = 20 * rand_int(rng, 1, 40)
    part = whole * percent // 100
    return Problem(f"{part} is {percent}% of ?", whole, spread=20)


@shape("word_problem")
def _test_score_story(rng: random.Random, level: int) -> Problem:
    questions = pick(rng, (20, 25, 50))
    correct = rand_int(rng, questions // 2, questions)
    name = pick_name(rng)
    return Problem(
        f"{name} answers {correct} of {questions} questions correctly. What percentage is that?",
        Fraction(correct * 100, questions),
        spread=8,
    )


# --------------------------------------------------------------------------- #
# Circles (π = 22/7)
# --------------------------------------------------------------------------- #

@shape("mixed")
def _circle_area(rng: random.Random, level: int) -> Problem:
    radius = pick(rng, (7, 14, 21))
    return Problem(f"Area of a circle with radius {radius} cm (π = 22/7) = ? cm²", PI_APPROX * radius ** 2, spread=60)


@shape("mixed")
def _circumference(rng: random.Random, level: int) -> Problem:
    diameter = 7 * rand_int(rng, 1, 10)
    return Problem(f"Circumference of a circle with diameter {diameter} cm (π = 22/7) = ? cm", PI_APPROX * diameter, spread=20)


@shape("word_problem")
def _wheel_story(rng: random.Random, level: int) -> Problem:
    radius = pick(rng, (7, 14, 21))
    turns = rand_int(rng, 2, 10)
    return Problem(
        f"A wheel has radius {radius} cm (π = 22/7). How many cm does it roll in {turns} full turns?",
        2 * PI_APPROX * radius * turns,
        spread=100,
    )


# --------------------------------------------------------------------------- #
# Solid figures
# --------------------------------------------------------------------------- #

@shape("multiplication")
def _cube_volume(rng: random.Random, level: int) -> Problem:
    side = rand_int(rng, 2, 12)
    return Problem(f"Volume of a cube with side {side} cm = ? cm³", side ** 3, spread=40)


@shape("mixed")
def _cuboid_surface(rng: random.Random, level: int) -> Problem:
    length, width, height = rand_int(rng, 2, 12), rand_int(rng, 2, 12), rand_int(rng, 2, 12)
    return Problem(
        f"Surface area of a {length} × {width} × {height} cm box = ? cm²",
        2 * (length * width + length * height + width * height),
        spread=30,
    )


@shape("mixed")
def _cylinder_volume(rng: random.Random, level: int) -> Problem:
    radius = pick(rng, (7, 14))
    height = rand_int(rng, 1, 10)
    return Problem(
        f"Volume of a cylinder with radius {radius} cm and height {height} cm (π = 22/7) = ? cm³",
        PI_APPROX * radius ** 2 * height,
        spread=150,
    )


@shape("word_problem")
def _aquarium_story(rng: random.Random, level: int) -> Problem:
    length, width = 10 * rand_int(rng, 3, 8), 10 * rand_int(rng, 2, 5)
    depth = 10 * rand_int(rng, 2, 5)
    return Problem(
        f"An aquarium is {length} cm long and {width} cm wide, filled to {depth} cm. "
        f"How many litres of water does it hold? (1 L = 1000 cm³)",
        Fraction(length * width * depth, 1000),
        spread=10,
    )


P6_SUB_RANGES = (
    SubRange(1, 12, "Greatest common factor", 30, (
        _gcf,
        _gcf_of_three,
        _ribbon_cut_story,
    )),
    SubRange(13, 25, "Fraction operations", 110, (
        _fraction_product,
        _fraction_quotient,
        _fraction_sum_scaled,
        _flour_story,
    )),
    SubRange(26, 37, "Least common multiple", 180, (
        _lcm,
        _common_denominator,
        _bus_timetable_story,
    )),
    SubRange(38, 50, "Decimal operations", 199, (
        _decimal_product,
        _decimal_quotient,
        _decimal_sum_to_whole,
    )),
    SubRange(51, 62, "Ratio and proportion", 900, (
        _equivalent_ratio,
        _share_in_ratio,
        _map_scale_story,
    )),
    SubRange(63, 75, "Percentages", 900, (
        _percent_increase,
        _percent_of_what,
        _test_score_story,
    )),
    SubRange(76, 87, "Circles", 1386, (
        _circle_area,
        _circumference,
        _wheel_story,
    )),
    SubRange(88, 100, "Solid figures", 6160, (
        _cube_volume,
        _cuboid_surface,
        _cylinder_volume,
        _aquarium_story,
    )),
)

P6_STRATEGY = GradeStrategy("P6", P6_SUB_RANGES)
