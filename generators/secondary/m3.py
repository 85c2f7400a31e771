"""
m3.py

Secondary 3: linear inequalities, systems of equations, quadratic equations
and functions, similar figures, trigonometric ratios of special angles and
circle theorems.

Trigonometric answers are computed exactly with SymPy (`sin(pi/6)` is the
rational 1/2) and scaled by 100 so every ratio lands on an integer.
"""

from __future__ import annotations

import math
import random
from fractions import Fraction

from sympy import Eq, Rational, Symbol, asin, cos, expand, pi, sin, solve, sqrt, tan

from generators.strategy import GradeStrategy, Problem, SubRange, shape
from generators.utils import format_expr, pick, pick_name, rand_int, rand_nonzero, term

x = Symbol("x")
y = Symbol("y")

SINE_ANGLES = (0, 30, 90, 150, 180, 210, 270, 330, 360)
COSINE_ANGLES = (0, 60, 90, 120, 180, 240, 270, 300, 360)
TANGENT_ANGLES = (0, 45, 135, 180, 225, 315)
INVERSE_SINES = (
    ("1/2", Rational(1, 2)),
    ("√2/2", sqrt(2) / 2),
    ("√3/2", sqrt(3) / 2),
    ("1", 1),
)


def _radians(degrees: int):
    return pi * Rational(degrees, 180)


# --------------------------------------------------------------------------- #
# Inequalities
# --------------------------------------------------------------------------- #

@shape("mixed")
def _smallest_solution(rng: random.Random, level: int) -> Problem:
    a = rand_int(rng, 2, 9)
    b, c = rand_int(rng, -20, 20), rand_int(rng, -20, 20)
    bound = Fraction(c - b, a)
    return Problem(
        f"Smallest integer x with {a}x{term(b, '')} > {c} = ?",
        math.floor(bound) + 1,
        spread=4,
    )


@shape("mixed")
def _largest_solution(rng: random.Random, level: int) -> Problem:
    a = rand_int(rng, 2, 9)
    b, c = rand_int(rng, -20, 20), rand_int(rng, -20, 20)
    return Problem(
        f"Largest integer x with {a}x{term(b, '')} ≤ {c} = ?",
        math.floor(Fraction(c - b, a)),
        spread=4,
    )


@shape("mixed")
def _flipped_inequality(rng: random.Random, level: int) -> Problem:
    a = rand_int(rng, 2, 9)
    b, c = rand_int(rng, -20, 20), rand_int(rng, -20, 20)
    # -ax + b < c  <=>  x > (b - c) / a
    return Problem(
        f"Smallest integer x with -{a}x{term(b, '')} < {c} = ?",
        math.floor(Fraction(b - c, a)) + 1,
        spread=4,
    )


@shape("word_problem")
def _budget_story(rng: random.Random, level: int) -> Problem:
    price = rand_int(rng, 3, 15)
    spent = rand_int(rng, 5, 50)
    budget = spent + rand_int(rng, price, 95 * price // 10)
    name = pick_name(rng)
    return Problem(
        f"{name} has {budget} coins and has already spent {spent} on a ticket. "
        f"Snacks cost {price} coins each. What is the most snacks {name} can buy?",
        (budget - spent) // price,
        spread=3,
    )


# --------------------------------------------------------------------------- #
# Quadratic equations
# --------------------------------------------------------------------------- #

@shape("mixed")
def _square_equals(rng: random.Random, level: int) -> Problem:
    root = rand_int(rng, 1, 10)
    roots = solve(Eq(x ** 2, root * root), x)
    return Problem(f"x² = {root * root}, x > 0. x = ?", max(roots), spread=3)


@shape("mixed")
def _larger_root(rng: random.Random, level: int) -> Problem:
    r1, r2 = rng.sample(range(-10, 11), 2)
    poly = expand((x - r1) * (x - r2))
    return Problem(f"{format_expr(poly)} = 0. Larger root = ?", max(solve(poly, x)), spread=4)


@shape("addition")
def _sum_of_roots(rng: random.Random, level: int) -> Problem:
    r1, r2 = rng.sample(range(-10, 11), 2)
    poly = expand((x - r1) * (x - r2))
    return Problem(f"Sum of the roots of {format_expr(poly)} = 0 is ?", sum(solve(poly, x)), spread=4)


@shape("multiplication")
def _product_of_roots(rng: random.Random, level: int) -> Problem:
    r1, r2 = rng.sample(range(-10, 11), 2)
    poly = expand((x - r1) * (x - r2))
    return Problem(f"Product of the roots of {format_expr(poly)} = 0 is ?", r1 * r2, spread=8)


@shape("word_problem")
def _rectangle_area_story(rng: random.Random, level: int) -> Problem:
    width = rand_int(rng, 2, 10)
    extra = rand_int(rng, 1, 10)
    area = width * (width + extra)
    roots = solve(Eq(x * (x + extra), area), x)
    return Problem(
        f"A rectangle is {extra} cm longer than it is wide and its area is {area} cm². "
        f"How wide is it?",
        max(roots),
        spread=3,
    )


# --------------------------------------------------------------------------- #
# Quadratic functions
# --------------------------------------------------------------------------- #

def _vertex_form(rng: random.Random):
    h = rand_int(rng, -10, 10)
    k = rand_int(rng, -100, 100)
    return h, k, expand((x - h) ** 2 + k)


@shape("mixed")
def _vertex_x(rng: random.Random, level: int) -> Problem:
    h, k, poly = _vertex_form(rng)
    return Problem(f"y = {format_expr(poly)}. x-coordinate of the vertex = ?", h, spread=4)


@shape("mixed")
def _vertex_y(rng: random.Random, level: int) -> Problem:
    h, k, poly = _vertex_form(rng)
    return Problem(f"y = {format_expr(poly)}. Minimum value of y = ?", poly.subs(x, h), spread=8)


@shape("mixed")
def _evaluate_quadratic(rng: random.Random, level: int) -> Problem:
    b, c = rand_int(rng, -5, 5), rand_int(rng, -20, 20)
    value = rand_int(rng, -5, 5)
    poly = x ** 2 + b * x + c
    return Problem(f"f(x) = {format_expr(poly)}. f({value}) = ?", poly.subs(x, value), spread=8)


@shape("word_problem")
def _ball_height_story(rng: random.Random, level: int) -> Problem:
    speed = 10 * rand_int(rng, 1, 4)
    t = Symbol("t")
    height = speed * t - 5 * t ** 2
    peak_time = solve(height.diff(t), t)[0]
    return Problem(
        f"A ball's height is h = {speed}t - 5t² metres. What is its greatest height?",
        height.subs(t, peak_time),
        spread=10,
    )


# --------------------------------------------------------------------------- #
# Systems of equations
# --------------------------------------------------------------------------- #

@shape("mixed")
def _line_meets_parabola(rng: random.Random, level: int) -> Problem:
    k = rand_int(rng, 1, 10)
    roots = solve(Eq(x ** 2, k * x), x)
    return Problem(f"y = x² and y = {k}x meet at x = 0 and x = ?", max(roots), spread=3)


@shape("mixed")
def _elimination_pair(rng: random.Random, level: int) -> Problem:
    xv, yv = rand_int(rng, -10, 10), rand_int(rng, -10, 10)
    a, b = rand_int(rng, 1, 5), rand_int(rng, 1, 5)
    solution = solve((Eq(a * x + b * y, a * xv + b * yv), Eq(a * x - b * y, a * xv - b * yv)), (x, y))
    return Problem(
        f"{term(a, 'x', first=True)} + {term(b, 'y', first=True)} = {a * xv + b * yv} and "
        f"{term(a, 'x', first=True)} - {term(b, 'y', first=True)} = {a * xv - b * yv}. x = ?",
        solution[x],
        spread=4,
    )


@shape("mixed")
def _substitution(rng: random.Random, level: int) -> Problem:
    xv = rand_int(rng, -10, 10)
    m, c = rand_nonzero(rng, -4, 4), rand_int(rng, -10, 10)
    a = rand_int(rng, 1, 5)
    if a + m == 0:
        a += 1
    total = a * xv + m * xv + c
    solution = solve((Eq(y, m * x + c), Eq(a * x + y, total)), (x, y))
    return Problem(
        f"y = {term(m, 'x', first=True)}{term(c, '')} and {term(a, 'x', first=True)} + y = {total}. x = ?",
        solution[x],
        spread=4,
    )


@shape("word_problem")
def _coins_story(rng: random.Random, level: int) -> Problem:
    fives, tens = rand_int(rng, 1, 40), rand_int(rng, 1, 40)
    solution = solve((Eq(x + y, fives + tens), Eq(5 * x + 10 * y, 5 * fives + 10 * tens)), (x, y))
    return Problem(
        f"A jar holds {fives + tens} coins, all 5s and 10s, worth {5 * fives + 10 * tens} in total. "
        f"How many 5 coins are there?",
        solution[x],
        spread=4,
    )


# --------------------------------------------------------------------------- #
# Similarity
# --------------------------------------------------------------------------- #

@shape("multiplication")
def _similar_side(rng: random.Random, level: int) -> Problem:
    a, b = rand_int(rng, 2, 10), rand_int(rng, 2, 20)
    k = rand_int(rng, 2, 5)
    return Problem(
        f"Triangle ABC ~ triangle DEF. AB = {a}, BC = {b}, DE = {a * k}. EF = ?",
        b * k,
        spread=5,
    )


@shape("multiplication")
def _area_scale(rng: random.Random, level: int) -> Problem:
    k = rand_int(rng, 2, 10)
    return Problem(
        f"Two similar shapes have sides in the ratio 1 : {k}. Their areas are in the ratio 1 : ?",
        k * k,
        spread=8,
    )


@shape("word_problem")
def _shadow_story(rng: random.Random, level: int) -> Problem:
    stick, shadow = rand_int(rng, 1, 3), rand_int(rng, 1, 4)
    k = rand_int(rng, 2, 10)
    return Problem(
        f"A {stick} m stick casts a {shadow} m shadow. At the same time a tree casts a "
        f"{shadow * k} m shadow. How tall is the tree in metres?",
        Fraction(stick * shadow * k, shadow),
        spread=4,
    )


# --------------------------------------------------------------------------- #
# Circle theorems
# --------------------------------------------------------------------------- #

@shape("mixed")
def _inscribed_angle(rng: random.Random, level: int) -> Problem:
    angle = rand_int(rng, 10, 170)
    return Problem(
        f"A central angle is {2 * angle}°. The inscribed angle on the same arc = ?°",
        angle,
        spread=10,
    )


@shape("mixed")
def _central_angle(rng: random.Random, level: int) -> Problem:
    angle = rand_int(rng, 10, 170)
    return Problem(
        f"An inscribed angle is {angle}°. The central angle on the same arc = ?°",
        2 * angle,
        spread=20,
    )


@shape("mixed")
def _semicircle_angle(rng: random.Random, level: int) -> Problem:
    angle = rand_int(rng, 10, 80)
    return Problem(
        f"A triangle is drawn in a semicircle with the diameter as one side. "
        f"One acute angle is {angle}°. The other acute angle = ?°",
        90 - angle,
        spread=10,
    )


@shape("mixed")
def _cyclic_quadrilateral(rng: random.Random, level: int) -> Problem:
    angle = rand_int(rng, 40, 140)
    return Problem(
        f"In a cyclic quadrilateral one angle is {angle}°. The opposite angle = ?°",
        180 - angle,
        spread=10,
    )


@shape("word_problem")
def _tangent_story(rng: random.Random, level: int) -> Problem:
    radius, tangent, distance = pick(rng, ((3, 4, 5), (5, 12, 13), (8, 15, 17)))
    k = rand_int(rng, 1, 5)
    return Problem(
        f"A point is {distance * k} cm from the centre of a circle of radius {radius * k} cm. "
        f"How long is a tangent from the point to the circle?",
        tangent * k,
        spread=5,
    )


# --------------------------------------------------------------------------- #
# Trigonometry of special angles
# --------------------------------------------------------------------------- #

@shape("mixed")
def _sine_value(rng: random.Random, level: int) -> Problem:
    angle = pick(rng, SINE_ANGLES)
    return Problem(f"100 × sin {angle}° = ?", 100 * sin(_radians(angle)), spread=20)


@shape("mixed")
def _cosine_value(rng: random.Random, level: int) -> Problem:
    angle = pick(rng, COSINE_ANGLES)
    return Problem(f"100 × cos {angle}° = ?", 100 * cos(_radians(angle)), spread=20)


@shape("mixed")
def _tangent_value(rng: random.Random, level: int) -> Problem:
    angle = pick(rng, TANGENT_ANGLES)
    k = rand_int(rng, 2, 100)
    return Problem(f"{k} × tan {angle}° = ?", k * tan(_radians(angle)), spread=10)


@shape("mixed")
def _angle_from_sine(rng: random.Random, level: int) -> Problem:
    label, value = pick(rng, INVERSE_SINES)
    return Problem(
        f"sin θ = {label} and 0° < θ ≤ 90°. θ = ?°",
        asin(value) * 180 / pi,
        spread=15,
    )


@shape("word_problem")
def _ramp_story(rng: random.Random, level: int) -> Problem:
    length = 2 * rand_int(rng, 1, 50)
    return Problem(
        f"A ramp {length} m long rises at 30° to the ground. How high does it rise in metres?",
        length * sin(_radians(30)),
        spread=5,
    )


M3_SUB_RANGES = (
    SubRange(1, 12, "Linear inequalities", 21, (
        _smallest_solution,
        _largest_solution,
        _flipped_inequality,
        _budget_story,
    )),
    SubRange(13, 25, "Systems of equations", 40, (
        _line_meets_parabola,
        _elimination_pair,
        _substitution,
        _coins_story,
    )),
    SubRange(26, 37, "Quadratic equations", 100, (
        _square_equals,
        _larger_root,
        _sum_of_roots,
        _product_of_roots,
        _rectangle_area_story,
    )),
    SubRange(38, 50, "Quadratic functions", 100, (
        _vertex_x,
        _vertex_y,
        _evaluate_quadratic,
        _ball_height_story,
    )),
    SubRange(51, 62, "Similar figures", 100, (
        _similar_side,
        _area_scale,
        _shadow_story,
    )),
    SubRange(63, 75, "Trigonometric ratios of special angles", 100, (
        _sine_value,
        _cosine_value,
        _tangent_value,
        _angle_from_sine,
        _ramp_story,
    )),
    SubRange(76, 100, "Circle theorems", 340, (
        _inscribed_angle,
        _central_angle,
        _semicircle_angle,
        _cyclic_quadrilateral,
        _tangent_story,
    )),
)

M3_STRATEGY = GradeStrategy("M3", M3_SUB_RANGES)
