"""
m6.py

Secondary 6: integration techniques, areas and volumes of revolution,
first differential equations, and a comprehensive review mixing calculus,
logarithms, sequences and counting.
"""

from __future__ import annotations

import math
import random

from sympy import E, Eq, Function, Symbol, cos, diff, dsolve, exp, integrate, log, pi, sin

from generators.strategy import GradeStrategy, Problem, SubRange, shape
from generators.utils import format_expr, pick, pick_name, rand_int, rand_nonzero, term

x = Symbol("x")
t = Symbol("t")
f = Function("f")


# --------------------------------------------------------------------------- #
# Integration techniques
# --------------------------------------------------------------------------- #

@shape("mixed")
def _substitution_integral(rng: random.Random, level: int) -> Problem:
    high = rand_int(rng, 1, 5)
    shift = rand_int(rng, 0, 5)
    integrand = 3 * (x + shift) ** 2
    return Problem(
        f"∫ from 0 to {high} of 3(x{term(shift, '')})² dx = ?",
        integrate(integrand, (x, 0, high)),
        spread=30,
    )


@shape("mixed")
def _by_parts(rng: random.Random, level: int) -> Problem:
    k = rand_int(rng, 1, 20)
    return Problem(f"∫ from 0 to 1 of {k}x·eˣ dx = ?", integrate(k * x * exp(x), (x, 0, 1)), spread=4)


@shape("mixed")
def _odd_symmetry(rng: random.Random, level: int) -> Problem:
    a = rand_int(rng, 1, 10)
    odd = rand_nonzero(rng, -5, 5)
    c = rand_nonzero(rng, -20, 20)
    integrand = odd * x ** 3 + c
    return Problem(
        f"∫ from -{a} to {a} of ({format_expr(integrand)}) dx = ?",
        integrate(integrand, (x, -a, a)),
        spread=20,
    )


@shape("mixed")
def _reciprocal_integral(rng: random.Random, level: int) -> Problem:
    k = rand_int(rng, 1, 9)
    return Problem(f"∫ from 1 to e^{k} of 1/x dx = ?", integrate(1 / x, (x, 1, E ** k)), spread=3)


@shape("mixed")
def _trig_integral(rng: random.Random, level: int) -> Problem:
    k = rand_int(rng, 1, 20)
    if rng.random() < 0.5:
        return Problem(f"∫ from 0 to π/2 of {k}cos x dx = ?", integrate(k * cos(x), (x, 0, pi / 2)), spread=4)
    return Problem(f"∫ from 0 to π of {k}sin x dx = ?", integrate(k * sin(x), (x, 0, pi)), spread=6)


# --------------------------------------------------------------------------- #
# Areas and volumes
# --------------------------------------------------------------------------- #

@shape("mixed")
def _area_under_parabola_cap(rng: random.Random, level: int) -> Problem:
    k = pick(rng, (3, 6, 9))
    return Problem(
        f"Area between y = x² and y = {k * k} = ?",
        integrate(k * k - x ** 2, (x, -k, k)),
        spread=30,
    )


@shape("mixed")
def _area_under_line(rng: random.Random, level: int) -> Problem:
    m = 2 * rand_int(rng, 1, 5)
    c = rand_int(rng, 0, 20)
    high = rand_int(rng, 1, 10)
    line = m * x + c
    return Problem(
        f"Area under y = {format_expr(line)} from x = 0 to x = {high} = ?",
        integrate(line, (x, 0, high)),
        spread=20,
    )


@shape("multiplication")
def _cylinder_revolution(rng: random.Random, level: int) -> Problem:
    radius = rand_int(rng, 1, 10)
    height = rand_int(rng, 1, 10)
    volume = integrate(pi * radius ** 2, (x, 0, height))
    return Problem(
        f"y = {radius} is rotated about the x-axis for 0 ≤ x ≤ {height}. Volume = ?π",
        volume / pi,
        spread=20,
    )


@shape("multiplication")
def _cone_revolution(rng: random.Random, level: int) -> Problem:
    radius = rand_int(rng, 1, 10)
    height = pick(rng, (3, 6, 9))
    volume = integrate(pi * (radius * x / height) ** 2, (x, 0, height))
    return Problem(
        f"y = {radius}x/{height} is rotated about the x-axis for 0 ≤ x ≤ {height}. Volume = ?π",
        volume / pi,
        spread=20,
    )


@shape("word_problem")
def _tank_story(rng: random.Random, level: int) -> Problem:
    a = rand_int(rng, 1, 5)
    b = rand_int(rng, 0, 40)
    minutes = rand_int(rng, 1, 10)
    rate = 2 * a * t + b
    return Problem(
        f"Water flows into a tank at r(t) = {format_expr(rate)} litres per minute. "
        f"How many litres flow in during the first {minutes} minutes?",
        integrate(rate, (t, 0, minutes)),
        spread=20,
    )


# --------------------------------------------------------------------------- #
# Differential equations
# --------------------------------------------------------------------------- #

@shape("mixed")
def _exponential_growth(rng: random.Random, level: int) -> Problem:
    k = rand_int(rng, 1, 3)
    start = rand_int(rng, 1, 100)
    factor = rand_int(rng, 2, 10)
    solution = dsolve(Eq(f(x).diff(x), k * f(x)), f(x), ics={f(0): start}).rhs
    moment = log(factor) / k
    return Problem(
        f"y' = {k}y and y(0) = {start}. y(ln {factor}" + (f"/{k}" if k > 1 else "") + ") = ?",
        solution.subs(x, moment),
        spread=20,
    )


@shape("mixed")
def _separable_polynomial(rng: random.Random, level: int) -> Problem:
    a = rand_int(rng, 1, 5)
    b = rand_int(rng, -9, 9)
    c = rand_int(rng, -20, 20)
    point = rand_int(rng, -5, 5)
    slope = 2 * a * x + b
    solution = dsolve(Eq(f(x).diff(x), slope), f(x), ics={f(0): c}).rhs
    return Problem(
        f"dy/dx = {format_expr(slope)} and y(0) = {c}. y({point}) = ?",
        solution.subs(x, point),
        spread=10,
    )


@shape("mixed")
def _second_order(rng: random.Random, level: int) -> Problem:
    k = 2 * rand_int(rng, 1, 5)
    velocity = rand_int(rng, 0, 10)
    start = rand_int(rng, 0, 50)
    point = rand_int(rng, 1, 10)
    solution = dsolve(
        Eq(f(x).diff(x, 2), k),
        f(x),
        ics={f(0): start, f(x).diff(x).subs(x, 0): velocity},
    ).rhs
    return Problem(
        f"y'' = {k}, y(0) = {start} and y'(0) = {velocity}. y({point}) = ?",
        solution.subs(x, point),
        spread=20,
    )


@shape("word_problem")
def _half_life_story(rng: random.Random, level: int) -> Problem:
    remaining = rand_int(rng, 1, 50)
    lives = rand_int(rng, 1, 4)
    hours = rand_int(rng, 2, 8)
    initial = remaining * 2 ** lives
    mass = initial * exp(-log(2) * t / hours)
    return Problem(
        f"A sample of {initial} g decays with a half-life of {hours} hours. "
        f"How many grams remain after {lives * hours} hours?",
        mass.subs(t, lives * hours),
        spread=5,
    )


# --------------------------------------------------------------------------- #
# Comprehensive review
# --------------------------------------------------------------------------- #

@shape("mixed")
def _fundamental_theorem(rng: random.Random, level: int) -> Problem:
    c = rand_int(rng, -20, 20)
    point = rand_int(rng, -10, 10)
    accumulated = integrate(t ** 2 + c, (t, 0, x))
    return Problem(
        f"F(x) = ∫ from 0 to x of (t²{term(c, '')}) dt. F'({point}) = ?",
        diff(accumulated, x).subs(x, point),
        spread=10,
    )


@shape("mixed")
def _log_of_power(rng: random.Random, level: int) -> Problem:
    k = rand_int(rng, 1, 20)
    return Problem(f"log_2(8^{k}) = ?", log(8 ** k, 2), spread=5)


@shape("addition")
def _arithmetic_series(rng: random.Random, level: int) -> Problem:
    n = rand_int(rng, 5, 25)
    first = rand_int(rng, 1, 10)
    step = rand_int(rng, 1, 4)
    total = n * (2 * first + (n - 1) * step) // 2
    return Problem(
        f"Sum of the first {n} terms of {first}, {first + step}, {first + 2 * step}, ... = ?",
        total,
        spread=20,
    )


@shape("mixed")
def _geometric_series(rng: random.Random, level: int) -> Problem:
    first = rand_int(rng, 1, 5)
    ratio = rand_int(rng, 2, 3)
    n = rand_int(rng, 2, 5)
    return Problem(
        f"Sum of the first {n} terms of {first}, {first * ratio}, {first * ratio ** 2}, ... = ?",
        first * (ratio ** n - 1) // (ratio - 1),
        spread=20,
    )


@shape("mixed")
def _combinations(rng: random.Random, level: int) -> Problem:
    n = rand_int(rng, 4, 10)
    k = rand_int(rng, 1, n - 1)
    return Problem(f"How many ways to choose {k} from {n}? C({n}, {k}) = ?", math.comb(n, k), spread=10)


@shape("word_problem")
def _savings_story(rng: random.Random, level: int) -> Problem:
    name = pick_name(rng)
    first = rand_int(rng, 1, 10)
    step = rand_int(rng, 1, 4)
    weeks = rand_int(rng, 4, 20)
    return Problem(
        f"{name} saves {first} coins in week 1 and {step} more each week than the week before. "
        f"How many coins after {weeks} weeks?",
        weeks * (2 * first + (weeks - 1) * step) // 2,
        spread=20,
    )


M6_SUB_RANGES = (
    SubRange(1, 25, "Integration techniques", 875, (
        _substitution_integral,
        _by_parts,
        _odd_symmetry,
        _reciprocal_integral,
        _trig_integral,
    )),
    SubRange(26, 50, "Areas and volumes by integration", 1000, (
        _area_under_parabola_cap,
        _area_under_line,
        _cylinder_revolution,
        _cone_revolution,
        _tank_story,
    )),
    SubRange(51, 75, "Differential equations", 1000, (
        _exponential_growth,
        _separable_polynomial,
        _second_order,
        _half_life_story,
    )),
    SubRange(76, 100, "Comprehensive review", 1450, (
        _fundamental_theorem,
        _log_of_power,
        _arithmetic_series,
        _geometric_series,
        _combinations,
        _savings_story,
    )),
)

M6_STRATEGY = GradeStrategy("M6", M6_SUB_RANGES)
