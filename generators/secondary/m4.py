"""
m4.py

Secondary 4: logarithms, 2×2 and 3×3 matrices, trigonometric identities and
vectors. Logarithms, determinants and magnitudes go through SymPy; a
result that does not simplify to an integer is rejected by the strategy's
integer guard.
"""

from __future__ import annotations

import random

from sympy import Matrix, Rational, cos, log, pi, sec, sqrt

from generators.strategy import GradeStrategy, Problem, SubRange, shape
from generators.utils import pick, rand_int, rand_nonzero

TAN_PAIRS = ((1, 2), (1, 3), (2, 3), (2, 1), (3, 1), (3, 2))
COS_SQUARED_ANGLES = (0, 30, 45, 60, 90, 120, 135, 150, 180)
SEC_ANGLES = (0, 60, 120, 180, 240, 300, 360)
SPACE_TRIPLES = ((1, 2, 2, 3), (2, 3, 6, 7), (1, 4, 8, 9), (2, 6, 9, 11))


def _radians(degrees: int):
    return pi * Rational(degrees, 180)


def _matrix_text(matrix: Matrix) -> str:
    rows = ["[" + " ".join(str(value) for value in matrix.row(i)) + "]" for i in range(matrix.rows)]
    return "[" + " ".join(rows) + "]"


def _vector_text(*components: int) -> str:
    return "(" + ", ".join(str(value) for value in components) + ")"


# --------------------------------------------------------------------------- #
# Logarithms
# --------------------------------------------------------------------------- #

@shape("mixed")
def _log_value(rng: random.Random, level: int) -> Problem:
    base = rand_int(rng, 2, 10)
    exponent = rand_int(rng, 1, 4)
    return Problem(f"log_{base}({base ** exponent}) = ?", log(base ** exponent, base), spread=2)


@shape("mixed")
def _log_of_reciprocal(rng: random.Random, level: int) -> Problem:
    base = rand_int(rng, 2, 10)
    exponent = rand_int(rng, 1, 3)
    return Problem(
        f"log_{base}(1/{base ** exponent}) = ?",
        log(Rational(1, base ** exponent), base),
        spread=2,
    )


@shape("addition")
def _log_sum(rng: random.Random, level: int) -> Problem:
    base = rand_int(rng, 2, 5)
    i, j = rand_int(rng, 1, 4), rand_int(rng, 1, 4)
    return Problem(
        f"log_{base}({base ** i}) + log_{base}({base ** j}) = ?",
        log(base ** i, base) + log(base ** j, base),
        spread=3,
    )


@shape("mixed")
def _missing_base(rng: random.Random, level: int) -> Problem:
    base = rand_int(rng, 2, 10)
    exponent = rand_int(rng, 2, 3)
    return Problem(f"log_?({base ** exponent}) = {exponent}", base, spread=2)


@shape("mixed")
def _change_of_base(rng: random.Random, level: int) -> Problem:
    base = rand_int(rng, 2, 3)
    exponent = rand_int(rng, 1, 5)
    return Problem(
        f"log_{base ** 2}({base ** (2 * exponent)}) = ?",
        log(base ** (2 * exponent)) / log(base ** 2),
        spread=2,
    )


# --------------------------------------------------------------------------- #
# Matrices
# --------------------------------------------------------------------------- #

@shape("multiplication")
def _determinant_2x2(rng: random.Random, level: int) -> Problem:
    matrix = Matrix(2, 2, [rand_int(rng, -7, 7) for _ in range(4)])
    return Problem(f"det {_matrix_text(matrix)} = ?", matrix.det(), spread=8)


@shape("multiplication")
def _triangular_determinant(rng: random.Random, level: int) -> Problem:
    diagonal = [rand_nonzero(rng, -4, 4) for _ in range(3)]
    matrix = Matrix.diag(*diagonal)
    matrix[0, 1], matrix[0, 2], matrix[1, 2] = (rand_int(rng, -9, 9) for _ in range(3))
    return Problem(f"det {_matrix_text(matrix)} = ?", matrix.det(), spread=8)


@shape("multiplication")
def _product_entry(rng: random.Random, level: int) -> Problem:
    left = Matrix(2, 2, [rand_int(rng, -5, 5) for _ in range(4)])
    right = Matrix(2, 2, [rand_int(rng, -5, 5) for _ in range(4)])
    row, column = rand_int(rng, 1, 2), rand_int(rng, 1, 2)
    return Problem(
        f"A = {_matrix_text(left)}, B = {_matrix_text(right)}. Entry ({row}, {column}) of AB = ?",
        (left * right)[row - 1, column - 1],
        spread=6,
    )


@shape("addition")
def _trace(rng: random.Random, level: int) -> Problem:
    matrix = Matrix(3, 3, [rand_int(rng, -9, 9) for _ in range(9)])
    return Problem(f"Trace of {_matrix_text(matrix)} = ?", matrix.trace(), spread=5)


@shape("multiplication")
def _scalar_multiple(rng: random.Random, level: int) -> Problem:
    k = rand_nonzero(rng, -9, 9)
    matrix = Matrix(2, 2, [rand_int(rng, -9, 9) for _ in range(4)])
    row, column = rand_int(rng, 1, 2), rand_int(rng, 1, 2)
    return Problem(
        f"A = {_matrix_text(matrix)}. Entry ({row}, {column}) of {k}A = ?",
        (k * matrix)[row - 1, column - 1],
        spread=8,
    )


# --------------------------------------------------------------------------- #
# Trigonometric identities
# --------------------------------------------------------------------------- #

@shape("mixed")
def _tan_sum(rng: random.Random, level: int) -> Problem:
    a, b = pick(rng, TAN_PAIRS)
    return Problem(
        f"tan α = {a} and tan β = {b}. tan(α + β) = ?",
        Rational(a + b, 1 - a * b),
        spread=3,
    )


@shape("mixed")
def _cos_squared(rng: random.Random, level: int) -> Problem:
    angle = pick(rng, COS_SQUARED_ANGLES)
    return Problem(f"100 × cos²{angle}° = ?", 100 * cos(_radians(angle)) ** 2, spread=20)


@shape("mixed")
def _secant(rng: random.Random, level: int) -> Problem:
    angle = pick(rng, SEC_ANGLES)
    return Problem(f"100 × sec {angle}° = ?", 100 * sec(_radians(angle)), spread=30)


@shape("mixed")
def _pythagorean_identity(rng: random.Random, level: int) -> Problem:
    opposite, adjacent = pick(rng, ((3, 4), (4, 3)))
    sine = Rational(opposite, 5)
    cosine = sqrt(1 - sine ** 2)
    return Problem(f"sin θ = {opposite}/5 and θ is acute. 100 × cos θ = ?", 100 * cosine, spread=10)


@shape("mixed")
def _double_angle(rng: random.Random, level: int) -> Problem:
    opposite, adjacent = pick(rng, ((3, 4), (4, 3)))
    sine, cosine = Rational(opposite, 5), Rational(adjacent, 5)
    if rng.random() < 0.5:
        return Problem(f"sin θ = {opposite}/5 and θ is acute. 100 × sin 2θ = ?", 100 * 2 * sine * cosine, spread=10)
    return Problem(f"sin θ = {opposite}/5 and θ is acute. 100 × cos 2θ = ?", 100 * (1 - 2 * sine ** 2), spread=10)


# --------------------------------------------------------------------------- #
# Vectors
# --------------------------------------------------------------------------- #

@shape("multiplication")
def _dot_product(rng: random.Random, level: int) -> Problem:
    u = Matrix([rand_int(rng, -9, 9) for _ in range(2)])
    v = Matrix([rand_int(rng, -9, 9) for _ in range(2)])
    return Problem(f"u = {_vector_text(*u)}, v = {_vector_text(*v)}. u · v = ?", u.dot(v), spread=10)


@shape("mixed")
def _magnitude(rng: random.Random, level: int) -> Problem:
    k = rand_int(rng, 1, 8)
    a, b = pick(rng, ((3, 4), (4, 3)))
    vector = Matrix([a * k * pick(rng, (1, -1)), b * k * pick(rng, (1, -1))])
    return Problem(f"|{_vector_text(*vector)}| = ?", vector.norm(), spread=5)


@shape("mixed")
def _space_magnitude(rng: random.Random, level: int) -> Problem:
    a, b, c, _ = pick(rng, SPACE_TRIPLES)
    k = rand_int(rng, 1, 5)
    vector = Matrix([a * k, -b * k, c * k])
    return Problem(f"|{_vector_text(*vector)}| = ?", vector.norm(), spread=5)


@shape("addition")
def _combination_component(rng: random.Random, level: int) -> Problem:
    u = [rand_int(rng, -9, 9) for _ in range(2)]
    v = [rand_int(rng, -9, 9) for _ in range(2)]
    k = rand_int(rng, 2, 5)
    return Problem(
        f"u = {_vector_text(*u)}, v = {_vector_text(*v)}. x-component of u + {k}v = ?",
        u[0] + k * v[0],
        spread=6,
    )


@shape("multiplication")
def _cross_product(rng: random.Random, level: int) -> Problem:
    u = Matrix([rand_int(rng, -9, 9), rand_int(rng, -9, 9), 0])
    v = Matrix([rand_int(rng, -9, 9), rand_int(rng, -9, 9), 0])
    return Problem(
        f"u = {_vector_text(*u)}, v = {_vector_text(*v)}. z-component of u × v = ?",
        u.cross(v)[2],
        spread=10,
    )


@shape("word_problem")
def _work_story(rng: random.Random, level: int) -> Problem:
    force = Matrix([rand_int(rng, 1, 20), rand_int(rng, 1, 20)])
    move = Matrix([rand_int(rng, 1, 9), rand_int(rng, -3, 9)])
    return Problem(
        f"A force {_vector_text(*force)} N moves a box by {_vector_text(*move)} m. "
        f"How much work is done in joules?",
        force.dot(move),
        spread=10,
    )


M4_SUB_RANGES = (
    SubRange(1, 25, "Logarithms", 10, (
        _log_value,
        _log_of_reciprocal,
        _log_sum,
        _missing_base,
        _change_of_base,
    )),
    SubRange(26, 50, "Matrices", 98, (
        _determinant_2x2,
        _triangular_determinant,
        _product_entry,
        _trace,
        _scalar_multiple,
    )),
    SubRange(51, 75, "Trigonometric identities", 200, (
        _tan_sum,
        _cos_squared,
        _secant,
        _pythagorean_identity,
        _double_angle,
    )),
    SubRange(76, 100, "Vectors", 360, (
        _dot_product,
        _magnitude,
        _space_magnitude,
        _combination_component,
        _cross_product,
        _work_story,
    )),
)

M4_STRATEGY = GradeStrategy("M4", M4_SUB_RANGES)
