"""
m5.py

Secondary 5: limits, derivatives and their applications, and the first
integrals. Every calculus answer is produced by SymPy (`limit`, `diff`,
`integrate`) on expressions built so the exact result is an integer.
"""

from __future__ import annotations

import random

from sympy import Symbol, diff, expand, integrate, limit, oo, sin, solve

from generators.strategy import GradeStrategy, Problem, SubRange, shape
from generators.utils import format_expr, rand_int, rand_nonzero, term

x = Symbol("x")
t = Symbol("t")


# --------------------------------------------------------------------------- #
# Limits
# --------------------------------------------------------------------------- #

@shape("mixed")
def _polynomial_limit(rng: random.Random, level: int) -> Problem:
    a = rand_int(rng, -5, 5)
    b, c = rand_int(rng, -5, 5), rand_int(rng, -9, 9)
    expr = x ** 2 + b * x + c
    return Problem(f"lim x→{a} ({format_expr(expr)}) = ?", limit(expr, x, a), spread=5)


@shape("mixed")
def _cancelling_limit(rng: random.Random, level: int) -> Problem:
    a = rand_nonzero(rng, -10, 10)
    expr = (x ** 2 - a ** 2) / (x - a)
    return Problem(f"lim x→{a} (x² - {a * a}) / (x{term(-a, '')}) = ?", limit(expr, x, a), spread=5)


@shape("mixed")
def _limit_at_infinity(rng: random.Random, level: int) -> Problem:
    r = rand_int(rng, 1, 5)
    k = rand_nonzero(rng, -9, 9)
    p, q, s = r * k, rand_int(rng, -9, 9), rand_int(rng, 1, 9)
    expr = (p * x ** 2 + q) / (r * x ** 2 + s)
    return Problem(f"lim x→∞ ({format_expr(p * x ** 2 + q)}) / ({format_expr(r * x ** 2 + s)}) = ?", limit(expr, x, oo), spread=4)


@shape("mixed")
def _sine_limit(rng: random.Random, level: int) -> Problem:
    k = rand_nonzero(rng, -9, 9)
    return Problem(f"lim x→0 sin({k}x) / x = ?", limit(sin(k * x) / x, x, 0), spread=4)


# --------------------------------------------------------------------------- #
# Derivatives
# --------------------------------------------------------------------------- #

@shape("mixed")
def _derivative_at_point(rng: random.Random, level: int) -> Problem:
    a, b, c = rand_nonzero(rng, -3, 3), rand_int(rng, -5, 5), rand_int(rng, -9, 9)
    point = rand_int(rng, -3, 3)
    expr = a * x ** 3 + b * x ** 2 + c * x
    return Problem(f"f(x) = {format_expr(expr)}. f'({point}) = ?", diff(expr, x).subs(x, point), spread=10)


@shape("multiplication")
def _power_rule(rng: random.Random, level: int) -> Problem:
    a = rand_nonzero(rng, -9, 9)
    n = rand_int(rng, 2, 9)
    derivative = diff(a * x ** n, x)
    power = f"x^{n - 1}" if n > 2 else "x"
    return Problem(f"d/dx ({format_expr(a * x ** n)}) = ?{power}", derivative.coeff(x, n - 1), spread=8)


@shape("mixed")
def _product_rule(rng: random.Random, level: int) -> Problem:
    k = rand_int(rng, -5, 5)
    point = rand_int(rng, -3, 3)
    expr = x ** 2 * (x + k)
    return Problem(
        f"f(x) = x²(x{term(k, '')}). f'({point}) = ?" if k else f"f(x) = x³. f'({point}) = ?",
        diff(expr, x).subs(x, point),
        spread=8,
    )


@shape("mixed")
def _chain_rule(rng: random.Random, level: int) -> Problem:
    a = rand_int(rng, 1, 3)
    n = rand_int(rng, 2, 3)
    inner = rand_int(rng, -3, 3)
    point = rand_int(rng, -3, 3)
    b = inner - a * point
    expr = (a * x + b) ** n
    return Problem(
        f"f(x) = ({term(a, 'x', first=True)}{term(b, '')})^{n}. f'({point}) = ?",
        diff(expr, x).subs(x, point),
        spread=8,
    )


@shape("word_problem")
def _velocity_story(rng: random.Random, level: int) -> Problem:
    a, b = rand_int(rng, 1, 5), rand_int(rng, 0, 20)
    moment = rand_int(rng, 1, 10)
    position = a * t ** 2 + b * t
    return Problem(
        f"A cart's position is s(t) = {format_expr(position)} metres. What is its speed in m/s at t = {moment}?",
        diff(position, t).subs(t, moment),
        spread=8,
    )


# --------------------------------------------------------------------------- #
# Applications of derivatives
# --------------------------------------------------------------------------- #

@shape("mixed")
def _stationary_point(rng: random.Random, level: int) -> Problem:
    h = rand_int(rng, -10, 10)
    c = rand_int(rng, -20, 20)
    expr = expand((x - h) ** 2 + c)
    return Problem(f"f(x) = {format_expr(expr)}. f'(x) = 0 at x = ?", solve(diff(expr, x), x)[0], spread=4)


@shape("mixed")
def _minimum_value(rng: random.Random, level: int) -> Problem:
    h = rand_int(rng, -10, 10)
    k = rand_int(rng, -50, 50)
    expr = expand((x - h) ** 2 + k)
    critical = solve(diff(expr, x), x)[0]
    return Problem(f"Minimum value of f(x) = {format_expr(expr)} is ?", expr.subs(x, critical), spread=8)


@shape("mixed")
def _tangent_intercept(rng: random.Random, level: int) -> Problem:
    a = rand_nonzero(rng, -10, 10)
    slope = diff(x ** 2, x).subs(x, a)
    intercept = a ** 2 - slope * a
    return Problem(f"The tangent to y = x² at x = {a} crosses the y-axis at y = ?", intercept, spread=8)


@shape("word_problem")
def _fence_story(rng: random.Random, level: int) -> Problem:
    quarter = rand_int(rng, 2, 14)
    fence = 4 * quarter
    width = Symbol("w")
    area = width * (2 * quarter - width)
    best = solve(diff(area, width), width)[0]
    return Problem(
        f"A farmer has {fence} m of fence for a rectangular pen. What is the largest area in m²?",
        area.subs(width, best),
        spread=10,
    )


@shape("word_problem")
def _growing_cube_story(rng: random.Random, level: int) -> Problem:
    side = rand_int(rng, 1, 5)
    rate = rand_int(rng, 1, 2)
    s = Symbol("s")
    return Problem(
        f"A cube's edge grows at {rate} cm/s. How fast is its volume growing in cm³/s "
        f"when the edge is {side} cm?",
        diff(s ** 3, s).subs(s, side) * rate,
        spread=10,
    )


# --------------------------------------------------------------------------- #
# Integrals
# --------------------------------------------------------------------------- #

@shape("mixed")
def _definite_linear(rng: random.Random, level: int) -> Problem:
    p, q = rand_int(rng, 1, 5), rand_int(rng, -9, 9)
    low = rand_int(rng, 0, 5)
    high = rand_int(rng, low + 1, 10)
    integrand = 2 * p * x + q
    return Problem(
        f"∫ from {low} to {high} of ({format_expr(integrand)}) dx = ?",
        integrate(integrand, (x, low, high)),
        spread=20,
    )


@shape("mixed")
def _definite_constant(rng: random.Random, level: int) -> Problem:
    k = rand_nonzero(rng, -20, 20)
    low = rand_int(rng, -10, 5)
    high = low + rand_int(rng, 1, 20)
    return Problem(f"∫ from {low} to {high} of {k} dx = ?", integrate(k, (x, low, high)), spread=20)


@shape("multiplication")
def _cubic_area(rng: random.Random, level: int) -> Problem:
    high = rand_int(rng, 1, 10)
    return Problem(f"∫ from 0 to {high} of 3x² dx = ?", integrate(3 * x ** 2, (x, 0, high)), spread=30)


@shape("mixed")
def _antiderivative_coefficient(rng: random.Random, level: int) -> Problem:
    n = rand_int(rng, 1, 6)
    k = rand_nonzero(rng, -9, 9)
    a = (n + 1) * k
    antiderivative = integrate(a * x ** n, x)
    return Problem(
        f"∫ {format_expr(a * x ** n)} dx = ?x^{n + 1} + C",
        antiderivative.coeff(x, n + 1),
        spread=5,
    )


@shape("word_problem")
def _distance_story(rng: random.Random, level: int) -> Problem:
    a = 2 * rand_int(rng, 1, 5)
    b = rand_int(rng, 0, 20)
    duration = rand_int(rng, 1, 10)
    velocity = a * t + b
    return Problem(
        f"A car's speed is v(t) = {format_expr(velocity)} m/s. How far does it travel in the first "
        f"{duration} seconds?",
        integrate(velocity, (t, 0, duration)),
        spread=20,
    )


M5_SUB_RANGES = (
    SubRange(1, 25, "Limits", 59, (
        _polynomial_limit,
        _cancelling_limit,
        _limit_at_infinity,
        _sine_limit,
    )),
    SubRange(26, 50, "Derivatives", 120, (
        _derivative_at_point,
        _power_rule,
        _product_rule,
        _chain_rule,
        _velocity_story,
    )),
    SubRange(51, 75, "Applications of derivatives", 196, (
        _stationary_point,
        _minimum_value,
        _tangent_intercept,
        _fence_story,
        _growing_cube_story,
    )),
    SubRange(76, 100, "Integrals", 1000, (
        _definite_linear,
        _definite_constant,
        _cubic_area,
        _antiderivative_coefficient,
        _distance_story,
    )),
)

M5_STRATEGY = GradeStrategy("M5", M5_SUB_RANGES)
