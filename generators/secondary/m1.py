"""
m1.py

Secondary 1: signed integers, powers and the laws of exponents, linear
equations in one variable, ratio and percentage, and algebra word problems.
Equations are solved with SymPy so the printed equation and its answer can
never drift apart.
"""

from __future__ import annotations

import random

from sympy import Eq, Rational, Symbol, solve

from generators.strategy import GradeStrategy, Problem, SubRange, shape
from generators.utils import get_factors, pick, pick_name, rand_int, rand_nonzero, signed, term

x = Symbol("x")

POWER_LIMITS = {2: 8, 3: 5, 4: 4, 5: 3}


def _solve_for_x(left, right):
    solutions = solve(Eq(left, right), x)
    return solutions[0]


# --------------------------------------------------------------------------- #
# Integers
# --------------------------------------------------------------------------- #

@shape("addition")
def _add_integers(rng: random.Random, level: int) -> Problem:
    a = rand_nonzero(rng, -50, 50)
    b = rand_nonzero(rng, -50, 50)
    return Problem(f"{a} + {signed(b)} = ?", a + b, spread=10)


@shape("subtraction")
def _subtract_integers(rng: random.Random, level: int) -> Problem:
    a = rand_nonzero(rng, -50, 50)
    b = rand_nonzero(rng, -50, 50)
    return Problem(f"{a} - {signed(b)} = ?", a - b, spread=10)


@shape("word_problem")
def _temperature_story(rng: random.Random, level: int) -> Problem:
    start = rand_int(rng, -20, 20)
    drop = rand_int(rng, 1, 30)
    return Problem(
        f"The temperature is {start}°C at noon and falls {drop} degrees by midnight. "
        f"What is the midnight temperature?",
        start - drop,
        spread=6,
    )


@shape("multiplication")
def _multiply_integers(rng: random.Random, level: int) -> Problem:
    a = rand_nonzero(rng, -12, 12)
    b = rand_nonzero(rng, -12, 12)
    return Problem(f"{a} × {signed(b)} = ?", a * b, spread=12)


@shape("division")
def _divide_integers(rng: random.Random, level: int) -> Problem:
    divisor = rand_nonzero(rng, -12, 12)
    quotient = rand_nonzero(rng, -12, 12)
    return Problem(f"{divisor * quotient} ÷ {signed(divisor)} = ?", quotient, spread=4)


@shape("multiplication")
def _product_of_three(rng: random.Random, level: int) -> Problem:
    a, b, c = (rand_nonzero(rng, -5, 5) for _ in range(3))
    return Problem(f"{a} × {signed(b)} × {signed(c)} = ?", a * b * c, spread=10)


@shape("word_problem")
def _diver_story(rng: random.Random, level: int) -> Problem:
    metres = rand_int(rng, 2, 9)
    times = rand_int(rng, 2, 12)
    name = pick_name(rng)
    return Problem(
        f"{name} dives {metres} m deeper {times} times, starting from sea level. "
        f"What is the final position in metres (below sea level is negative)?",
        -metres * times,
        spread=8,
    )


# --------------------------------------------------------------------------- #
# Powers
# --------------------------------------------------------------------------- #

@shape("multiplication")
def _square(rng: random.Random, level: int) -> Problem:
    n = rand_int(rng, 1, 16)
    return Problem(f"{n}² = ?", n * n, spread=20)


@shape("multiplication")
def _power(rng: random.Random, level: int) -> Problem:
    base = pick(rng, sorted(POWER_LIMITS))
    exponent = rand_int(rng, 1, POWER_LIMITS[base])
    return Problem(f"{base}^{exponent} = ?", base ** exponent, spread=max(3, base ** exponent // 4))


@shape("multiplication")
def _negative_base_power(rng: random.Random, level: int) -> Problem:
    base = rand_int(rng, 2, 4)
    exponent = rand_int(rng, 2, 4)
    return Problem(f"({-base})^{exponent} = ?", (-base) ** exponent, spread=max(3, base ** exponent // 4))


@shape("mixed")
def _square_root(rng: random.Random, level: int) -> Problem:
    n = rand_int(rng, 1, 30)
    return Problem(f"√{n * n} = ?", n, spread=4)


@shape("mixed")
def _product_rule(rng: random.Random, level: int) -> Problem:
    base = rand_int(rng, 2, 9)
    m, n = rand_int(rng, 2, 20), rand_int(rng, 2, 20)
    return Problem(f"{base}^{m} × {base}^{n} = {base}^?", m + n, spread=5)


@shape("mixed")
def _quotient_rule(rng: random.Random, level: int) -> Problem:
    base = rand_int(rng, 2, 9)
    m, n = rand_int(rng, 2, 15), rand_int(rng, 1, 15)
    return Problem(f"{base}^{m + n} ÷ {base}^{m} = {base}^?", n, spread=4)


@shape("mixed")
def _power_of_power(rng: random.Random, level: int) -> Problem:
    base = rand_int(rng, 2, 9)
    m, n = rand_int(rng, 2, 10), rand_int(rng, 2, 10)
    return Problem(f"({base}^{m})^{n} = {base}^?", m * n, spread=8)


@shape("multiplication")
def _evaluate_with_laws(rng: random.Random, level: int) -> Problem:
    m = rand_int(rng, 1, 7)
    n = rand_int(rng, 1, 8 - m)
    return Problem(f"2^{m} × 2^{n} = ?", 2 ** (m + n), spread=max(3, 2 ** (m + n) // 4))


# --------------------------------------------------------------------------- #
# Linear equations
# --------------------------------------------------------------------------- #

@shape("mixed")
def _one_step_equation(rng: random.Random, level: int) -> Problem:
    answer = rand_int(rng, -100, 100)
    a = rand_nonzero(rng, -30, 30)
    right = answer + a
    return Problem(f"x{term(a, '')} = {right}. x = ?", _solve_for_x(x + a, right), spread=6)


@shape("mixed")
def _two_step_equation(rng: random.Random, level: int) -> Problem:
    answer = rand_int(rng, -20, 20)
    a = rand_int(rng, 2, 9)
    b = rand_nonzero(rng, -30, 30)
    right = a * answer + b
    return Problem(f"{a}x{term(b, '')} = {right}. x = ?", _solve_for_x(a * x + b, right), spread=5)


@shape("mixed")
def _variables_both_sides(rng: random.Random, level: int) -> Problem:
    answer = rand_int(rng, -15, 15)
    a, c = rng.sample(range(2, 10), 2)
    b = rand_int(rng, -20, 20)
    d = (a - c) * answer + b
    return Problem(
        f"{a}x{term(b, '')} = {c}x{term(d, '')}. x = ?",
        _solve_for_x(a * x + b, c * x + d),
        spread=5,
    )


@shape("word_problem")
def _number_puzzle_story(rng: random.Random, level: int) -> Problem:
    answer = rand_int(rng, 1, 300)
    a = rand_int(rng, 2, 9)
    b = rand_int(rng, 1, 30)
    return Problem(
        f"I think of a number, multiply it by {a} and add {b}. The result is {a * answer + b}. "
        f"What is my number?",
        _solve_for_x(a * x + b, a * answer + b),
        spread=6,
    )


@shape("mixed")
def _bracket_equation(rng: random.Random, level: int) -> Problem:
    answer = rand_int(rng, -20, 20)
    a = rand_int(rng, 2, 9)
    b = rand_nonzero(rng, -10, 10)
    right = a * (answer + b)
    return Problem(f"{a}(x{term(b, '')}) = {right}. x = ?", _solve_for_x(a * (x + b), right), spread=5)


@shape("mixed")
def _fraction_equation(rng: random.Random, level: int) -> Problem:
    a = rand_int(rng, 2, 9)
    answer = a * rand_int(rng, -12, 12)
    b = rand_nonzero(rng, -20, 20)
    right = answer // a + b
    return Problem(
        f"x/{a}{term(b, '')} = {right}. x = ?",
        _solve_for_x(x * Rational(1, a) + b, right),
        spread=max(4, a),
    )


@shape("word_problem")
def _consecutive_story(rng: random.Random, level: int) -> Problem:
    smallest = rand_int(rng, 1, 300)
    total = 3 * smallest + 3
    return Problem(
        f"Three consecutive whole numbers add up to {total}. What is the smallest?",
        _solve_for_x(x + (x + 1) + (x + 2), total),
        spread=6,
    )


# --------------------------------------------------------------------------- #
# Ratio, proportion and percentages
# --------------------------------------------------------------------------- #

@shape("mixed")
def _proportion(rng: random.Random, level: int) -> Problem:
    a, b = rand_int(rng, 1, 12), rand_int(rng, 1, 12)
    k = rand_int(rng, 2, 12)
    return Problem(f"{a}/{b} = x/{b * k}. x = ?", a * k, spread=8)


@shape("multiplication")
def _unit_rate(rng: random.Random, level: int) -> Problem:
    price = rand_int(rng, 2, 20)
    bought = rand_int(rng, 2, 10)
    wanted = rand_int(rng, 1, 20)
    return Problem(
        f"{bought} pens cost {bought * price} coins. How much do {wanted} pens cost?",
        wanted * price,
        spread=10,
    )


@shape("word_problem")
def _workers_story(rng: random.Random, level: int) -> Problem:
    workers = rand_int(rng, 2, 12)
    days = rand_int(rng, 2, 20)
    work = workers * days
    others = pick(rng, [f for f in get_factors(work) if f not in (1, workers)] or [work])
    return Problem(
        f"{workers} workers build a wall in {days} days. How many days would {others} workers take "
        f"at the same rate?",
        work // others,
        spread=5,
    )


@shape("word_problem")
def _recipe_story(rng: random.Random, level: int) -> Problem:
    flour, sugar = rand_int(rng, 2, 9), rand_int(rng, 1, 6)
    k = rand_int(rng, 2, 15)
    return Problem(
        f"A recipe mixes flour and sugar in the ratio {flour} : {sugar}. "
        f"How many cups of sugar go with {flour * k} cups of flour?",
        sugar * k,
        spread=6,
    )


@shape("mixed")
def _percent_of_amount(rng: random.Random, level: int) -> Problem:
    amount = 20 * rand_int(rng, 1, 50)
    percent = pick(rng, (5, 10, 15, 20, 25, 50, 75))
    return Problem(f"{percent}% of {amount} = ?", Rational(percent * amount, 100), spread=20)


@shape("mixed")
def _percent_change(rng: random.Random, level: int) -> Problem:
    start = pick(rng, (20, 40, 60, 80, 100, 200))
    percent = rand_nonzero(rng, -10, 20) * 5
    end = start * (100 + percent) // 100
    return Problem(f"A value changes from {start} to {end}. What is the percentage change?", percent, spread=10)


@shape("multiplication")
def _decimal_scale(rng: random.Random, level: int) -> Problem:
    hundredths = rand_int(rng, 101, 999)
    text = f"{hundredths // 100}.{hundredths % 100:02d}"
    return Problem(f"{text} × 100 = ?", Rational(hundredths * 100, 100), spread=20)


@shape("word_problem")
def _discount_story(rng: random.Random, level: int) -> Problem:
    price = 20 * rand_int(rng, 1, 50)
    discount = pick(rng, (10, 20, 25, 50))
    return Problem(
        f"A jacket costs {price} coins. It is on sale for {discount}% off. What is the sale price?",
        Rational(price * (100 - discount), 100),
        spread=20,
    )


# --------------------------------------------------------------------------- #
# Algebra word problems
# --------------------------------------------------------------------------- #

@shape("word_problem")
def _age_story(rng: random.Random, level: int) -> Problem:
    young = rand_int(rng, 2, 15)
    k = rand_int(rng, 2, 5)
    first, second = pick_name(rng), pick_name(rng)
    total = young * (k + 1)
    return Problem(
        f"{first} is {k} times as old as {second}. Together they are {total} years old. "
        f"How old is {second}?",
        _solve_for_x(k * x + x, total),
        spread=4,
    )


@shape("word_problem")
def _perimeter_story(rng: random.Random, level: int) -> Problem:
    width = rand_int(rng, 2, 50)
    extra = rand_int(rng, 1, 20)
    perimeter = 2 * (width + width + extra)
    return Problem(
        f"A garden is {extra} m longer than it is wide. Its perimeter is {perimeter} m. "
        f"How wide is it?",
        _solve_for_x(2 * (x + x + extra), perimeter),
        spread=6,
    )


@shape("word_problem")
def _consecutive_even_story(rng: random.Random, level: int) -> Problem:
    smaller = 2 * rand_int(rng, 1, 500)
    return Problem(
        f"Two consecutive even numbers add up to {2 * smaller + 2}. What is the smaller one?",
        _solve_for_x(x + x + 2, 2 * smaller + 2),
        spread=6,
    )


@shape("mixed")
def _substitute_value(rng: random.Random, level: int) -> Problem:
    value = rand_int(rng, -5, 5)
    a, b, c = rand_int(rng, 1, 3), rand_int(rng, -5, 5), rand_int(rng, -9, 9)
    expression = a * x ** 2 + b * x + c
    return Problem(
        f"If x = {value}, what is {term(a, 'x²', first=True)}{term(b)}{term(c, '')}?",
        expression.subs(x, value),
        spread=8,
    )


M1_SUB_RANGES = (
    SubRange(1, 10, "Adding and subtracting integers", 100, (
        _add_integers,
        _subtract_integers,
        _temperature_story,
    )),
    SubRange(11, 20, "Multiplying and dividing integers", 144, (
        _multiply_integers,
        _divide_integers,
        _product_of_three,
        _diver_story,
    )),
    SubRange(21, 30, "Powers and roots", 256, (
        _square,
        _power,
        _negative_base_power,
        _square_root,
    )),
    SubRange(31, 40, "Laws of exponents", 256, (
        _product_rule,
        _quotient_rule,
        _power_of_power,
        _evaluate_with_laws,
    )),
    SubRange(41, 50, "Linear equations in one variable", 300, (
        _one_step_equation,
        _two_step_equation,
        _variables_both_sides,
        _number_puzzle_story,
    )),
    SubRange(51, 60, "Equations with brackets and fractions", 300, (
        _bracket_equation,
        _fraction_equation,
        _consecutive_story,
    )),
    SubRange(61, 70, "Ratio and proportion", 400, (
        _proportion,
        _unit_rate,
        _workers_story,
        _recipe_story,
    )),
    SubRange(71, 80, "Percentages and decimals", 999, (
        _percent_of_amount,
        _percent_change,
        _decimal_scale,
        _discount_story,
    )),
    SubRange(81, 100, "Algebra word problems", 1000, (
        _age_story,
        _perimeter_story,
        _consecutive_even_story,
        _substitute_value,
    )),
)

M1_STRATEGY = GradeStrategy("M1", M1_SUB_RANGES)
