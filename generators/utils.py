"""
utils.py

Primitive helpers shared by every grade curriculum: bounded sampling, the
multiple-choice distractor generator, integer guards for answers computed
with SymPy or floats, and small number-theory helpers.

Every helper that needs randomness takes an explicit `random.Random` so a
seeded source can be threaded through a whole session.
"""

from __future__ import annotations

import logging
import math
import random
from fractions import Fraction
from typing import Any, List, Optional, Sequence, Tuple, TypeVar

from sympy import Basic, sympify
from sympy.core.sympify import SympifyError

from core.errors import ChoiceGenerationExhausted, InvalidArithmeticResult

logger = logging.getLogger(__name__)

T = TypeVar("T")

INTEGER_TOLERANCE = 1e-9
FIXED_OFFSETS = (1, -1, 2, -2, 5, -5, 10, -10)

NAMES = ("Mia", "Leo", "Nina", "Sam", "Ava", "Ben", "Zoe", "Max", "Lily", "Tom")
FRUITS = ("apples", "oranges", "bananas", "mangoes", "pears", "plums")
ANIMALS = ("cats", "dogs", "ducks", "rabbits", "birds", "fish")
TOYS = ("balls", "blocks", "cars", "dolls", "kites", "marbles")
OBJECT_SYMBOLS = ("★", "●", "▲", "■", "♥")


# --------------------------------------------------------------------------- #
# Sampling
# --------------------------------------------------------------------------- #

def rand_int(rng: random.Random, low: int, high: int) -> int:
    """Inclusive on both ends, like the curriculum tables are written."""

    if low > high:
        low, high = high, low
    return rng.randint(low, high)


def pick(rng: random.Random, options: Sequence[T]) -> T:
    return rng.choice(options)


def rand_nonzero(rng: random.Random, low: int, high: int) -> int:
    value = 0
    while value == 0:
        value = rng.randint(low, high)
    return value


def pick_name(rng: random.Random) -> str:
    return rng.choice(NAMES)


def pick_fruit(rng: random.Random) -> str:
    return rng.choice(FRUITS)


def pick_animal(rng: random.Random) -> str:
    return rng.choice(ANIMALS)


def pick_toy(rng: random.Random) -> str:
    return rng.choice(TOYS)


def draw_objects(rng: random.Random, count: int) -> str:
    return rng.choice(OBJECT_SYMBOLS) * count


def signed(value: int) -> str:
    """Wrap negatives in brackets so `3 - (-4)` reads correctly."""

    return f"({value})" if value < 0 else str(value)


def term(coefficient: int, variable: str = "x", first: bool = False) -> str:
    """Format `coefficient·variable` as one term of a polynomial."""

    if coefficient == 0:
        return "" if not first else "0"
    sign = "-" if coefficient < 0 else "+"
    magnitude = abs(coefficient)
    body = variable if magnitude == 1 and variable else f"{magnitude}{variable}"
    if first:
        return f"-{body}" if coefficient < 0 else body
    return f" {sign} {body}"


def format_expr(expr: Any) -> str:
    """SymPy expression as prompt text: `3*x**2 - 4*x` becomes `3x^2 - 4x`."""

    return str(expr).replace("**", "^").replace("*", "")


# --------------------------------------------------------------------------- #
# Distractors
# --------------------------------------------------------------------------- #

def default_spread(answer: int) -> int:
    return max(3, abs(answer) // 5)


def generate_choices(
    correct_answer: int,
    count: int = 4,
    spread: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> List[int]:
    """
    Returns `count` distinct integers including `correct_answer`, shuffled.

    Sampling offsets in [-spread, spread] is tried first. If that budget runs
    out, fixed offsets (±1, ±2, ±5, ±10, ±spread) are added, and finally the
    window is doubled until enough values exist. Negative values are allowed.
    """

    rng = rng or random.Random()
    spread = default_spread(correct_answer) if spread is None else int(spread)
    if count < 1 or spread < 1:
        raise ChoiceGenerationExhausted(
            f"cannot build {count} choices with spread {spread}"
        )

    choices = [correct_answer]
    seen = {correct_answer}

    def add(candidate: int) -> None:
        if candidate not in seen and len(choices) < count:
            seen.add(candidate)
            choices.append(candidate)

    attempts = 0
    while len(choices) < count and attempts < count * 20:
        attempts += 1
        add(correct_answer + rng.randint(-spread, spread))

    if len(choices) < count:
        logger.debug(
            "Sampling exhausted for %s (spread %s); using fixed offsets.",
            correct_answer,
            spread,
        )
        for offset in FIXED_OFFSETS + (spread, -spread):
            add(correct_answer + offset)

    window = spread
    while len(choices) < count:
        window *= 2
        for _ in range(count * 20):
            add(correct_answer + rng.randint(-window, window))
            if len(choices) == count:
                break

    rng.shuffle(choices)
    return choices


# --------------------------------------------------------------------------- #
# Integer guards
# --------------------------------------------------------------------------- #

def ensure_integer(value: Any, *, tolerance: float = INTEGER_TOLERANCE) -> int:
    """
    Normalises an answer to `int`, raising InvalidArithmeticResult for NaN,
    infinity, complex values, or anything that is not integral within
    `tolerance`.
    """

    if isinstance(value, bool):
        raise InvalidArithmeticResult(f"boolean is not a numeric answer: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, Fraction):
        if value.denominator != 1:
            raise InvalidArithmeticResult(f"fractional answer {value}")
        return int(value)

    if isinstance(value, Basic):
        expr = value
    elif isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidArithmeticResult(f"non-finite answer {value!r}")
        expr = None
    else:
        try:
            expr = sympify(value)
        except (SympifyError, TypeError) as exc:
            raise InvalidArithmeticResult(f"unparseable answer {value!r}") from exc

    if expr is not None:
        if expr.is_finite is False or expr.free_symbols or expr.is_real is False:
            raise InvalidArithmeticResult(f"answer {expr} is not a finite real number")
        if expr.is_Integer:
            return int(expr)
        try:
            numeric = float(expr.evalf())
        except (TypeError, ValueError) as exc:
            raise InvalidArithmeticResult(f"answer {expr} did not evaluate") from exc
    else:
        numeric = value

    if not math.isfinite(numeric):
        raise InvalidArithmeticResult(f"non-finite answer {numeric!r}")
    rounded = round(numeric)
    if abs(numeric - rounded) > tolerance:
        raise InvalidArithmeticResult(f"non-integer answer {numeric!r}")
    return int(rounded)


# --------------------------------------------------------------------------- #
# Number helpers
# --------------------------------------------------------------------------- #

def divisible_pair(
    rng: random.Random,
    divisor_range: Tuple[int, int],
    quotient_range: Tuple[int, int],
) -> Tuple[int, int, int]:
    """Samples divisor and quotient first so the division is always exact."""

    divisor = rand_int(rng, *divisor_range)
    quotient = rand_int(rng, *quotient_range)
    return divisor * quotient, divisor, quotient


def get_factors(n: int) -> List[int]:
    n = abs(n)
    if n == 0:
        return []
    small = [d for d in range(1, math.isqrt(n) + 1) if n % d == 0]
    large = [n // d for d in reversed(small) if d * d != n]
    return small + large


def is_prime(n: int) -> bool:
    if n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0:
        return False
    for d in range(3, math.isqrt(n) + 1, 2):
        if n % d == 0:
            return False
    return True


def primes_between(low: int, high: int) -> List[int]:
    return [n for n in range(low, high + 1) if is_prime(n)]


def lcm(a: int, b: int) -> int:
    return abs(a * b) // math.gcd(a, b)
