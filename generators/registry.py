"""
registry.py

Maps grade tags to their strategies and exposes the generation entry points
the session and presentation layers call. Every function here returns a
valid Question: unknown grades, uncovered levels and failed validation all
resolve to the safe fallback question with a logged warning.
"""

from __future__ import annotations

import logging
import random
from typing import Dict, List, Optional

from core.errors import ConfigNotFound
from core.levels import GRADE_ORDER, require_level_config
from generators.elementary.p1 import P1_STRATEGY
from generators.elementary.p2 import P2_STRATEGY
from generators.elementary.p3 import P3_STRATEGY
from generators.elementary.p4 import P4_STRATEGY
from generators.elementary.p5 import P5_STRATEGY
from generators.elementary.p6 import P6_STRATEGY
from generators.kindergarten.k1 import K1_STRATEGY
from generators.kindergarten.k2 import K2_STRATEGY
from generators.kindergarten.k3 import K3_STRATEGY
from generators.secondary.m1 import M1_STRATEGY
from generators.secondary.m2 import M2_STRATEGY
from generators.secondary.m3 import M3_STRATEGY
from generators.secondary.m4 import M4_STRATEGY
from generators.secondary.m5 import M5_STRATEGY
from generators.secondary.m6 import M6_STRATEGY
from generators.strategy import GradeStrategy, clamp_level, safe_fallback_question
from schemas.question import Question
from validators.question_validator import validate_question

logger = logging.getLogger(__name__)

VALIDATION_ATTEMPTS = 3

STRATEGIES: Dict[str, GradeStrategy] = {
    strategy.grade: strategy
    for strategy in (
        K1_STRATEGY, K2_STRATEGY, K3_STRATEGY,
        P1_STRATEGY, P2_STRATEGY, P3_STRATEGY, P4_STRATEGY, P5_STRATEGY, P6_STRATEGY,
        M1_STRATEGY, M2_STRATEGY, M3_STRATEGY, M4_STRATEGY, M5_STRATEGY, M6_STRATEGY,
    )
}

GRADE_CATEGORIES = {
    "K": "kindergarten",
    "P": "elementary",
    "M": "secondary",
}

DISPLAY_PREFIXES = {
    "K": "Kindergarten",
    "P": "Primary",
    "M": "Secondary",
}


# --------------------------------------------------------------------------- #
# Grade metadata
# --------------------------------------------------------------------------- #

def is_supported_grade(grade: str) -> bool:
    return grade in STRATEGIES


def get_strategy(grade: str) -> Optional[GradeStrategy]:
    return STRATEGIES.get(grade)


def get_grade_category(grade: str) -> str:
    """kindergarten, elementary, secondary, or unknown."""

    if not grade:
        return "unknown"
    return GRADE_CATEGORIES.get(grade[0].upper(), "unknown")


def get_grade_display_name(grade: str) -> str:
    if grade not in GRADE_ORDER:
        return grade
    return f"{DISPLAY_PREFIXES[grade[0]]} {grade[1:]}"


# --------------------------------------------------------------------------- #
# Generation
# --------------------------------------------------------------------------- #

def generate_question(grade: str, level: int, rng: Optional[random.Random] = None) -> Question:
    """Main entry point: one question for `grade` at `level`."""

    rng = rng or random.Random()
    level = clamp_level(level)
    strategy = get_strategy(grade)
    if strategy is None:
        logger.warning("No strategy for grade %r; using fallback question.", grade)
        return safe_fallback_question(grade, level, rng)
    try:
        band = require_level_config(grade, level)
    except ConfigNotFound as exc:
        logger.warning("%s; using fallback question.", exc)
        return safe_fallback_question(grade, level, rng)
    return strategy.generate_question(level, band, rng)


def generate_question_of_type(
    grade: str,
    level: int,
    category: str,
    rng: Optional[random.Random] = None,
) -> Question:
    rng = rng or random.Random()
    level = clamp_level(level)
    strategy = get_strategy(grade)
    if strategy is None:
        logger.warning("No strategy for grade %r; using fallback question.", grade)
        return safe_fallback_question(grade, level, rng)
    if category not in strategy.available_categories(level):
        logger.warning(
            "%s level %s has no %s questions; generating any question instead.",
            grade,
            level,
            category,
        )
        return generate_question(grade, level, rng)
    try:
        band = require_level_config(grade, level)
    except ConfigNotFound as exc:
        logger.warning("%s; using fallback question.", exc)
        return safe_fallback_question(grade, level, rng)
    return strategy.generate_of_category(level, category, band, rng)


def get_available_question_types(grade: str, level: int) -> List[str]:
    strategy = get_strategy(grade)
    if strategy is None:
        return ["addition"]
    return strategy.available_categories(clamp_level(level))


def generate_validated_question(
    grade: str,
    level: int,
    rng: Optional[random.Random] = None,
) -> Question:
    """
    Generates and validates up to VALIDATION_ATTEMPTS times, then gives up
    and returns the safe fallback question.
    """

    rng = rng or random.Random()
    for attempt in range(1, VALIDATION_ATTEMPTS + 1):
        question = generate_question(grade, level, rng)
        errors = validate_question(question)
        if not errors:
            return question
        logger.warning(
            "Attempt %s for %s level %s produced an invalid question: %s",
            attempt,
            grade,
            level,
            "; ".join(errors),
        )
    return safe_fallback_question(grade, level, rng)
