"""
m2.py

Secondary 2: simultaneous linear equations, factoring, descriptive
statistics, Pythagoras, polynomials, linear functions, probability (as a
whole percentage) and integer exponents with larger values.
"""

from __future__ import annotations

import random
from fractions import Fraction
from statistics import median, mode

from sympy import Eq, Symbol, expand, solve

from generators.strategy import GradeStrategy, Problem, SubRange, shape
from generators.utils import format_expr, pick, pick_name, rand_int, rand_nonzero, term

x = Symbol("x")
y = Symbol("y")

PYTHAGOREAN_TRIPLES = ((3, 4, 5), (5, 12, 13), (8, 15, 17), (7, 24, 25))


# --------------------------------------------------------------------------- #
# Exponents
# --------------------------------------------------------------------------- #

@shape("mixed")
def _negative_exponent(rng: random.Random, level: int) -> Problem:
    base = rand_int(rng, 2, 5)
    exponent = rand_int(rng, 1, 4)
    return Problem(f"{base}^-{exponent} = 1/?", base ** exponent, spread=max(3, base ** exponent // 4))


@shape("multiplication")
def _scientific_notation(rng: random.Random, level: int) -> Problem:
    tenths = rand_int(rng, 11, 99)
    exponent = rand_int(rng, 1, 2)
    return Problem(
        f"{tenths // 10}.{tenths % 10} × 10^{exponent} = ?",
        Fraction(tenths * 10 ** exponent, 10),
        spread=10 ** exponent,
    )


@shape("division")
def _power_quotient_value(rng: random.Random, level: int) -> Problem:
    base = rand_int(rng, 2, 3)
    difference = rand_int(rng, 1, 9 if base == 2 else 6)
    n = rand_int(rng, 1, 6)
    return Problem(
        f"{base}^{n + difference} ÷ {base}^{n} = ?",
        base ** difference,
        spread=max(3, base ** difference // 4),
    )


# --------------------------------------------------------------------------- #
# Polynomials and factoring
# --------------------------------------------------------------------------- #

@shape("mixed")
def _evaluate_polynomial(rng: random.Random, level: int) -> Problem:
    a = rand_nonzero(rng, -3, 3)
    b, c = rand_int(rng, -9, 9), rand_int(rng, -9, 9)
    value = rand_int(rng, -5, 5)
    poly = a * x ** 2 + b * x + c
    return Problem(f"p(x) = {format_expr(poly)}. p({value}) = ?", poly.subs(x, value), spread=10)


@shape("mixed")
def _product_coefficient(rng: random.Random, level: int) -> Problem:
    a, b = rand_nonzero(rng, -9, 9), rand_nonzero(rng, -9, 9)
    product = expand((x + a) * (x + b))
    return Problem(
        f"(x{term(a, '')})(x{term(b, '')}) = x² + ?x{term(a * b, '')}",
        product.coeff(x, 1),
        spread=4,
    )


@shape("multiplication")
def _constant_term(rng: random.Random, level: int) -> Problem:
    a, c = rand_int(rng, 1, 5), rand_int(rng, 1, 5)
    b, d = rand_nonzero(rng, -9, 9), rand_nonzero(rng, -9, 9)
    product = expand((a * x + b) * (c * x + d))
    return Problem(
        f"What is the constant term of ({term(a, 'x', first=True)}{term(b, '')})({term(c, 'x', first=True)}{term(d, '')})?",
        product.coeff(x, 0),
        spread=8,
    )


@shape("mixed")
def _factor_missing(rng: random.Random, level: int) -> Problem:
    a, b = rand_nonzero(rng, -9, 9), rand_nonzero(rng, -9, 9)
    poly = expand((x + a) * (x + b))
    return Problem(f"{format_expr(poly)} = (x{term(a, '')})(x + ?)", b, spread=4)


@shape("mixed")
def _difference_of_squares(rng: random.Random, level: int) -> Problem:
    n = rand_int(rng, 2, 30)
    return Problem(f"x² - {n * n} = (x - {n})(x + ?)", n, spread=4)


@shape("multiplication")
def _common_factor(rng: random.Random, level: int) -> Problem:
    k = rand_int(rng, 2, 9)
    a, b = rand_int(rng, 1, 9), rand_nonzero(rng, -20, 20)
    return Problem(f"{k * a}x{term(k * b, '')} = {k}({term(a, 'x', first=True)} + ?)", b, spread=5)


# --------------------------------------------------------------------------- #
# Simultaneous equations
# --------------------------------------------------------------------------- #

@shape("mixed")
def _sum_and_difference(rng: random.Random, level: int) -> Problem:
    xv, yv = rand_int(rng, -20, 20), rand_int(rng, -20, 20)
    solution = solve((Eq(x + y, xv + yv), Eq(x - y, xv - yv)), (x, y))
    return Problem(f"x + y = {xv + yv} and x - y = {xv - yv}. x = ?", solution[x], spread=5)


@shape("mixed")
def _elimination(rng: random.Random, level: int) -> Problem:
    xv, yv = rand_int(rng, -10, 10), rand_int(rng, -10, 10)
    a, b, d, e = (rand_nonzero(rng, -5, 5) for _ in range(4))
    if a * e == b * d:
        e += 1 if e != -1 else 2
    c, f = a * xv + b * yv, d * xv + e * yv
    solution = solve((Eq(a * x + b * y, c), Eq(d * x + e * y, f)), (x, y))
    return Problem(
        f"{term(a, 'x', first=True)}{term(b, 'y')} = {c} and {term(d, 'x', first=True)}{term(e, 'y')} = {f}. y = ?",
        solution[y],
        spread=5,
    )


@shape("word_problem")
def _tickets_story(rng: random.Random, level: int) -> Problem:
    adults, children = rand_int(rng, 1, 30), rand_int(rng, 1, 30)
    adult_price, child_price = rand_int(rng, 8, 20), rand_int(rng, 3, 7)
    total = adults * adult_price + children * child_price
    solution = solve(
        (Eq(x + y, adults + children), Eq(adult_price * x + child_price * y, total)),
        (x, y),
    )
    return Problem(
        f"{adults + children} people went to a show. Adult tickets cost {adult_price} and child "
        f"tickets cost {child_price}. They paid {total} in all. How many adults went?",
        solution[x],
        spread=5,
    )


# --------------------------------------------------------------------------- #
# Linear functions
# --------------------------------------------------------------------------- #

@shape("mixed")
def _slope(rng: random.Random, level: int) -> Problem:
    m = rand_nonzero(rng, -9, 9)
    x1 = rand_int(rng, -10, 10)
    x2 = x1 + rand_nonzero(rng, -6, 6)
    c = rand_int(rng, -10, 10)
    y1, y2 = m * x1 + c, m * x2 + c
    return Problem(
        f"Slope of the line through ({x1}, {y1}) and ({x2}, {y2}) = ?",
        Fraction(y2 - y1, x2 - x1),
        spread=3,
    )


@shape("mixed")
def _y_intercept(rng: random.Random, level: int) -> Problem:
    m = rand_nonzero(rng, -6, 6)
    c = rand_int(rng, -20, 20)
    x0 = rand_int(rng, -8, 8)
    return Problem(
        f"A line with slope {m} passes through ({x0}, {m * x0 + c}). Its y-intercept = ?",
        c,
        spread=5,
    )


@shape("mixed")
def _evaluate_linear(rng: random.Random, level: int) -> Problem:
    m = rand_nonzero(rng, -9, 9)
    c = rand_int(rng, -20, 20)
    value = rand_int(rng, -20, 20)
    return Problem(f"f(x) = {m}x{term(c, '')}. f({value}) = ?", m * value + c, spread=10)


@shape("word_problem")
def _taxi_fare_story(rng: random.Random, level: int) -> Problem:
    base = rand_int(rng, 20, 50)
    rate = rand_int(rng, 5, 15)
    km = rand_int(rng, 1, 30)
    return Problem(
        f"A taxi charges {base} coins plus {rate} coins per km. What is the fare for {km} km?",
        base + rate * km,
        spread=20,
    )


# --------------------------------------------------------------------------- #
# Pythagoras
# --------------------------------------------------------------------------- #

@shape("mixed")
def _hypotenuse(rng: random.Random, level: int) -> Problem:
    a, b, c = pick(rng, PYTHAGOREAN_TRIPLES)
    k = rand_int(rng, 1, 5)
    return Problem(f"A right triangle has legs {a * k} and {b * k}. Hypotenuse = ?", c * k, spread=5)


@shape("mixed")
def _missing_leg(rng: random.Random, level: int) -> Problem:
    a, b, c = pick(rng, PYTHAGOREAN_TRIPLES)
    k = rand_int(rng, 1, 5)
    return Problem(f"A right triangle has hypotenuse {c * k} and one leg {a * k}. Other leg = ?", b * k, spread=5)


@shape("word_problem")
def _ladder_story(rng: random.Random, level: int) -> Problem:
    a, b, c = pick(rng, PYTHAGOREAN_TRIPLES)
    k = rand_int(rng, 1, 3)
    return Problem(
        f"A {c * k} m ladder leans on a wall with its foot {a * k} m from the wall. "
        f"How high up the wall does it reach?",
        b * k,
        spread=5,
    )


# --------------------------------------------------------------------------- #
# Probability
# --------------------------------------------------------------------------- #

@shape("mixed")
def _bag_probability(rng: random.Random, level: int) -> Problem:
    total = pick(rng, (4, 5, 10, 20, 25, 50))
    red = rand_int(rng, 1, total - 1)
    return Problem(
        f"A bag has {red} red and {total - red} blue marbles. "
        f"What is the probability of drawing red, as a percentage?",
        Fraction(red * 100, total),
        spread=10,
    )


@shape("mixed")
def _coin_probability(rng: random.Random, level: int) -> Problem:
    prompt, percent = pick(rng, (
        ("Two coins are tossed. P(two heads) as a percentage = ?", 25),
        ("Two coins are tossed. P(at least one head) as a percentage = ?", 75),
        ("Two coins are tossed. P(one head and one tail) as a percentage = ?", 50),
        ("A die is rolled. P(an even number) as a percentage = ?", 50),
        ("A die is rolled. P(a number greater than 0) as a percentage = ?", 100),
    ))
    return Problem(prompt, percent, spread=10)


@shape("multiplication")
def _expected_count(rng: random.Random, level: int) -> Problem:
    tenths = rand_int(rng, 1, 9)
    trials = 10 * rand_int(rng, 1, 100)
    return Problem(
        f"An event has probability 0.{tenths}. How many times is it expected in {trials} trials?",
        Fraction(tenths * trials, 10),
        spread=10,
    )


@shape("word_problem")
def _spinner_story(rng: random.Random, level: int) -> Problem:
    sections = pick(rng, (2, 4, 5, 10, 20))
    marked = rand_int(rng, 1, sections)
    name = pick_name(rng)
    return Problem(
        f"{name}'s spinner has {sections} equal sections and {marked} of them are gold. "
        f"What is the chance of landing on gold, as a percentage?",
        Fraction(marked * 100, sections),
        spread=10,
    )


# --------------------------------------------------------------------------- #
# Statistics
# --------------------------------------------------------------------------- #

def _data_set(rng: random.Random, size: int):
    return [rand_int(rng, 1, 100) for _ in range(size)]


@shape("mixed")
def _mean(rng: random.Random, level: int) -> Problem:
    values = _data_set(rng, rand_int(rng, 3, 6))
    values[-1] += (-sum(values)) % len(values)
    return Problem(f"Mean of {', '.join(map(str, values))} = ?", Fraction(sum(values), len(values)), spread=8)


@shape("mixed")
def _median(rng: random.Random, level: int) -> Problem:
    values = _data_set(rng, pick(rng, (3, 5, 7)))
    return Problem(f"Median of {', '.join(map(str, values))} = ?", median(values), spread=8)


@shape("mixed")
def _mode(rng: random.Random, level: int) -> Problem:
    values = rng.sample(range(1, 51), 4)
    repeated = values[0]
    values.extend([repeated, repeated])
    rng.shuffle(values)
    return Problem(f"Mode of {', '.join(map(str, values))} = ?", mode(values), spread=8)


@shape("mixed")
def _range(rng: random.Random, level: int) -> Problem:
    values = _data_set(rng, rand_int(rng, 4, 7))
    return Problem(f"Range of {', '.join(map(str, values))} = ?", max(values) - min(values), spread=8)


@shape("word_problem")
def _test_average_story(rng: random.Random, level: int) -> Problem:
    name = pick_name(rng)
    target = rand_int(rng, 60, 85)
    needed = rand_int(rng, target - 5, target + 5)
    scores = [rand_int(rng, target - 5, target + 5) for _ in range(2)]
    scores.append(4 * target - needed - sum(scores))
    return Problem(
        f"{name} scored {', '.join(map(str, scores))} on three tests. "
        f"What score on the fourth test gives a mean of {target}?",
        needed,
        spread=8,
    )


M2_SUB_RANGES = (
    SubRange(1, 12, "Simultaneous linear equations", 30, (
        _sum_and_difference,
        _elimination,
        _tickets_story,
    )),
    SubRange(13, 25, "Factoring", 30, (
        _factor_missing,
        _difference_of_squares,
        _common_factor,
    )),
    SubRange(26, 37, "Statistics", 100, (
        _mean,
        _median,
        _mode,
        _range,
        _test_average_story,
    )),
    SubRange(38, 50, "Pythagoras' theorem", 125, (
        _hypotenuse,
        _missing_leg,
        _ladder_story,
    )),
    SubRange(51, 62, "Polynomials", 129, (
        _evaluate_polynomial,
        _product_coefficient,
        _constant_term,
    )),
    SubRange(63, 75, "Linear functions", 500, (
        _slope,
        _y_intercept,
        _evaluate_linear,
        _taxi_fare_story,
    )),
    SubRange(76, 87, "Probability", 900, (
        _bag_probability,
        _coin_probability,
        _expected_count,
        _spinner_story,
    )),
    SubRange(88, 100, "Integer exponents", 990, (
        _negative_exponent,
        _scientific_notation,
        _power_quotient_value,
    )),
)

M2_STRATEGY = GradeStrategy("M2", M2_SUB_RANGES)
