"""
levels.py

The level band registry. For each of the fifteen grades it lists the
ordered bands that split levels 1-100 into skill descriptions, question
categories, a numeric range and feature flags. It is the knowledge
backbone shared by the generator registry and the session.

The table is static and read-only; every lookup is safe to share across
sessions.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from core.errors import ConfigNotFound
from schemas.question import LevelBand, NumericRange


GRADE_ORDER: Tuple[str, ...] = (
    "K1", "K2", "K3",
    "P1", "P2", "P3", "P4", "P5", "P6",
    "M1", "M2", "M3", "M4", "M5", "M6",
)

QUESTION_COUNT: Dict[str, int] = {
    "K1": 10, "K2": 10, "K3": 10,
    "P1": 20, "P2": 20, "P3": 20, "P4": 20, "P5": 20, "P6": 20,
    "M1": 20, "M2": 20, "M3": 20, "M4": 20, "M5": 20, "M6": 20,
}

DEFAULT_QUESTION_COUNT = 30


def _band(
    min_level: int,
    max_level: int,
    description: str,
    categories: Tuple[str, ...],
    numbers: Tuple[int, int],
    *features: str,
) -> LevelBand:
    return LevelBand(
        min_level=min_level,
        max_level=max_level,
        description=description,
        question_categories=frozenset(categories),
        numeric_range=NumericRange(min=numbers[0], max=numbers[1]),
        features=frozenset(features),
    )


ADD = ("addition",)
SUB = ("subtraction",)
ADD_SUB = ("addition", "subtraction")
MUL = ("multiplication",)
DIV = ("division",)
MIXED = ("mixed",)
WORD = ("word_problem",)


GRADE_CONFIGS: Dict[str, Tuple[LevelBand, ...]] = {
    # Kindergarten
    "K1": (
        _band(1, 30, "Counting 1-5", ADD, (1, 3), "countingObjects", "visualAids"),
        _band(31, 60, "Adding within 5", ADD, (1, 5)),
        _band(61, 100, "Adding within 10", ADD, (1, 10)),
    ),
    "K2": (
        _band(1, 25, "Adding within 5", ADD, (1, 5)),
        _band(26, 50, "Adding within 10", ADD, (1, 10)),
        _band(51, 75, "Simple subtraction with no negative results", SUB, (1, 10)),
        _band(76, 100, "Mixed adding and subtracting within 10", ADD_SUB, (1, 10)),
    ),
    "K3": (
        _band(1, 25, "Adding within 10", ADD, (1, 10)),
        _band(26, 50, "Subtracting within 10", SUB, (1, 10)),
        _band(51, 75, "Adding past 10", ADD, (5, 10)),
        _band(76, 100, "Mixed adding and subtracting up to 20", ADD_SUB, (1, 15)),
    ),

    # Elementary
    "P1": (
        _band(1, 25, "Adding one-digit numbers", ADD, (1, 9)),
        _band(26, 50, "Subtracting one-digit numbers", SUB, (1, 10)),
        _band(51, 75, "Adding a two-digit and a one-digit number", ADD, (10, 20), "twoDigitPlusOne"),
        _band(76, 100, "Mixed adding and subtracting within 20", ADD_SUB, (1, 20)),
    ),
    "P2": (
        _band(1, 20, "Two-digit addition without carrying", ADD, (10, 40), "noCarrying"),
        _band(21, 40, "Two-digit subtraction", SUB, (10, 50)),
        _band(41, 60, "Times tables of 2, 5 and 10", MUL, (1, 10), "multiplicationTables", "tables_2_5_10"),
        _band(61, 80, "Times tables of 3 and 4", MUL, (1, 10), "multiplicationTables", "tables_3_4"),
        _band(81, 100, "Two-digit adding and subtracting with regrouping", ADD_SUB, (15, 70), "carrying", "borrowing"),
    ),
    "P3": (
        _band(1, 20, "Three-digit adding and subtracting", ADD_SUB, (50, 300)),
        _band(21, 40, "Times tables of 2 to 5", MUL, (1, 12), "multiplicationTables", "tables_2_to_5"),
        _band(41, 60, "Times tables of 6 to 9", MUL, (1, 12), "multiplicationTables", "tables_6_to_9"),
        _band(61, 80, "Basic division", DIV, (2, 10), "basicDivision"),
        _band(81, 100, "Simple word problems", WORD, (5, 50), "simpleWordProblems"),
    ),
    "P4": (
        _band(1, 25, "Two-digit multiplication", MUL, (10, 25)),
        _band(26, 50, "Basic division", DIV, (2, 12)),
        _band(51, 75, "Mixed operations with brackets", MIXED, (5, 50), "parentheses", "orderOfOperations"),
        _band(76, 100, "Word problems", WORD, (50, 500)),
    ),
    "P5": (
        _band(1, 25, "Three-digit multiplication", MUL, (100, 300)),
        _band(26, 50, "Long division", DIV, (10, 50)),
        _band(51, 75, "Introductory fractions", MIXED, (1, 10), "fractions", "simpleFractions"),
        _band(76, 100, "Multi-step word problems", WORD, (100, 1000), "multiStepProblems"),
    ),
    "P6": (
        _band(1, 25, "Fraction calculations", MIXED, (1, 20), "fractions", "fractionOperations"),
        _band(26, 50, "Introductory decimals", MIXED, (1, 100), "decimals", "basicDecimals"),
        _band(51, 75, "Introductory percentages", MIXED, (1, 100), "percentages", "basicPercentages"),
        _band(76, 100, "Applied word problems", WORD, (1, 1000), "realWorldProblems", "multiConcepts"),
    ),

    # Secondary
    "M1": (
        _band(1, 20, "Positive and negative integers", MIXED, (-100, 100), "integers", "negativeNumbers"),
        _band(21, 40, "Powers", MIXED, (1, 10), "exponents", "basicPowers"),
        _band(41, 60, "Linear equations in one variable", MIXED, (1, 50), "algebra", "linearEquations"),
        _band(61, 80, "Ratio and proportion", MIXED, (1, 100), "ratios", "proportions"),
        _band(81, 100, "Algebra word problems", WORD, (1, 100), "algebraWordProblems"),
    ),
    "M2": (
        _band(1, 25, "Linear equations in two variables", MIXED, (-50, 50), "linearEquations", "twoVariables"),
        _band(26, 50, "Linear functions", MIXED, (-20, 20), "linearFunctions"),
        _band(51, 75, "Introductory probability", MIXED, (1, 10), "probability", "basicProbability"),
        _band(76, 100, "Introductory statistics", MIXED, (1, 100), "statistics", "meanMedianMode"),
    ),
    "M3": (
        _band(1, 25, "Quadratic equations", MIXED, (-10, 10), "quadraticEquations"),
        _band(26, 50, "Quadratic functions", MIXED, (-15, 15), "quadraticFunctions"),
        _band(51, 75, "Introductory geometry", MIXED, (1, 50), "geometry", "area", "perimeter"),
        _band(76, 100, "Introductory trigonometry", MIXED, (1, 90), "trigonometry", "basicTrig"),
    ),
    "M4": (
        _band(1, 25, "Logarithms", MIXED, (1, 100), "logarithms"),
        _band(26, 50, "Introductory matrices", MIXED, (-10, 10), "matrices"),
        _band(51, 75, "Advanced trigonometry", MIXED, (0, 360), "trigonometry", "advancedTrig"),
        _band(76, 100, "Introductory vectors", MIXED, (-20, 20), "vectors"),
    ),
    "M5": (
        _band(1, 25, "Introductory calculus: limits", MIXED, (-10, 10), "calculus", "limits"),
        _band(26, 50, "Derivatives", MIXED, (-5, 5), "calculus", "derivatives"),
        _band(51, 75, "Applications of derivatives", MIXED, (-20, 20), "calculus", "derivativeApplications"),
        _band(76, 100, "Introductory integrals", MIXED, (-10, 10), "calculus", "integrals"),
    ),
    "M6": (
        _band(1, 25, "Advanced integrals", MIXED, (-15, 15), "calculus", "advancedIntegrals"),
        _band(26, 50, "Applications of integrals", MIXED, (-25, 25), "calculus", "integralApplications"),
        _band(51, 75, "Introductory differential equations", MIXED, (-10, 10), "calculus", "differentialEquations"),
        _band(76, 100, "Comprehensive review", MIXED + WORD, (-50, 50), "comprehensiveMath", "examPrep"),
    ),
}


# --------------------------------------------------------------------------- #
# Public API
# --------------------------------------------------------------------------- #

def get_level_config(grade: str, level: int) -> Optional[LevelBand]:
    """
    Returns the band covering `level` in `grade`, or None when the grade is
    unknown or no band matches. Callers treat None as "use the fallback".
    """

    bands = GRADE_CONFIGS.get(grade)
    if not bands:
        return None
    for band in bands:
        if band.contains(level):
            return band
    return None


def require_level_config(grade: str, level: int) -> LevelBand:
    band = get_level_config(grade, level)
    if band is None:
        raise ConfigNotFound(grade, level)
    return band


def get_grade_bands(grade: str) -> Tuple[LevelBand, ...]:
    return GRADE_CONFIGS.get(grade, ())


def get_question_count(grade: str) -> int:
    return QUESTION_COUNT.get(grade, DEFAULT_QUESTION_COUNT)


def band_coverage_problems(grade: str) -> List[str]:
    """Gaps and overlaps in a grade's bands; an empty list means 1-100 is covered once."""

    problems: List[str] = []
    bands = sorted(get_grade_bands(grade), key=lambda band: band.min_level)
    if not bands:
        return [f"{grade}: no bands"]
    expected = 1
    for band in bands:
        if band.min_level > expected:
            problems.append(f"{grade}: levels {expected}-{band.min_level - 1} are not covered")
        elif band.min_level < expected:
            problems.append(f"{grade}: band {band.min_level}-{band.max_level} overlaps")
        expected = max(expected, band.max_level + 1)
    if expected != 101:
        problems.append(f"{grade}: levels {expected}-100 are not covered")
    return problems
