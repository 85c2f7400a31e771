"""
strategy.py

The grade strategy model. A grade is described as data: an ordered list of
`SubRange`s, each owning a handful of question `Shape`s. One generic
`GradeStrategy` turns that description into questions, so the fifteen
curricula share no base class and carry no generation logic of their own.

Typical usage:

    strategy = GradeStrategy("P2", P2_SUB_RANGES)
    question = strategy.generate_question(45, band, rng=random.Random(7))
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple

from generators.utils import default_spread, ensure_integer, generate_choices
from schemas.question import CHOICE_COUNT, LevelBand, Question

logger = logging.getLogger(__name__)

MIN_LEVEL = 1
MAX_LEVEL = 100
MIN_SHAPES_PER_RANGE = 2
MAX_SHAPES_PER_RANGE = 6


@dataclass(frozen=True)
class Problem:
    """
    Raw output of a shape. `answer` may be an int, a Fraction, a float or a
    SymPy expression; the strategy normalises it before building a Question.
    """

    prompt: str
    answer: Any
    spread: Optional[int] = None


ShapeBuilder = Callable[..., Problem]


@dataclass(frozen=True)
class Shape:
    """
    A named question builder. A `bounded` shape also takes `top`, the largest
    operand the level band allows, and keeps its numbers at or below it.
    """

    name: str
    category: str
    build: ShapeBuilder
    bounded: bool = False

    def __call__(self, rng: random.Random, level: int, top: Optional[int] = None) -> Problem:
        if self.bounded and top is not None:
            return self.build(rng, level, top)
        return self.build(rng, level)


def shape(category: str, *, bounded: bool = False) -> Callable[[ShapeBuilder], Shape]:
    """Decorator turning `build(rng, level) -> Problem` into a named Shape."""

    def wrap(build: ShapeBuilder) -> Shape:
        return Shape(
            name=build.__name__.lstrip("_"),
            category=category,
            build=build,
            bounded=bounded,
        )

    return wrap


@dataclass(frozen=True)
class SubRange:
    """
    A run of levels inside one grade. `ceiling` is the largest |answer| any of
    its shapes may produce; ceilings never decrease as levels rise.
    """

    min_level: int
    max_level: int
    topic: str
    ceiling: int
    shapes: Tuple[Shape, ...]

    def contains(self, level: int) -> bool:
        return self.min_level <= level <= self.max_level

    def categories(self) -> List[str]:
        seen: List[str] = []
        for item in self.shapes:
            if item.category not in seen:
                seen.append(item.category)
        return seen


def clamp_level(level: int) -> int:
    return max(MIN_LEVEL, min(MAX_LEVEL, int(level)))


def question_id(grade: str, level: int, rng: random.Random) -> str:
    return f"{grade}-{level}-{rng.getrandbits(40):010x}"


def safe_fallback_question(
    grade: str,
    level: int,
    rng: Optional[random.Random] = None,
) -> Question:
    """
    The generic question used whenever a grade, band, or shape cannot produce
    something valid: `a + b` with operands up to min(level * 2, 50).
    """

    rng = rng or random.Random()
    level = clamp_level(level)
    max_number = min(level * 2, 50)
    a = rng.randint(1, max_number)
    b = rng.randint(1, max_number)
    answer = a + b
    return Question(
        id=question_id(grade or "fallback", level, rng),
        grade=grade or "unknown",
        prompt=f"{a} + {b} = ?",
        answer=answer,
        choices=generate_choices(answer, CHOICE_COUNT, default_spread(answer), rng),
        category="addition",
        difficulty_level=level,
        skill="Addition review",
    )


class GradeStrategy:
    """
    Generates questions for one grade from its sub-range table.

    Never raises while generating: any arithmetic or validation failure inside
    a shape is logged as a warning and replaced by `safe_fallback_question`.
    """

    def __init__(self, grade: str, sub_ranges: Sequence[SubRange]):
        self.grade = grade
        self.sub_ranges: Tuple[SubRange, ...] = tuple(
            sorted(sub_ranges, key=lambda item: item.min_level)
        )

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def supports_level(self, level: int) -> bool:
        return any(sub_range.contains(level) for sub_range in self.sub_ranges)

    def sub_range_for(self, level: int) -> SubRange:
        level = clamp_level(level)
        for sub_range in self.sub_ranges:
            if sub_range.contains(level):
                return sub_range
        # An incomplete table still answers with its nearest range.
        return min(
            self.sub_ranges,
            key=lambda item: min(abs(item.min_level - level), abs(item.max_level - level)),
        )

    def available_categories(self, level: int) -> List[str]:
        return self.sub_range_for(level).categories()

    def generate_question(
        self,
        level: int,
        band: Optional[LevelBand] = None,
        rng: Optional[random.Random] = None,
    ) -> Question:
        rng = rng or random.Random()
        level = clamp_level(level)
        sub_range = self.sub_range_for(level)
        return self._build(rng.choice(sub_range.shapes), sub_range, level, band, rng)

    def generate_word_problem(
        self,
        level: int,
        band: Optional[LevelBand] = None,
        rng: Optional[random.Random] = None,
    ) -> Question:
        return self.generate_of_category(level, "word_problem", band, rng)

    def generate_of_category(
        self,
        level: int,
        category: str,
        band: Optional[LevelBand] = None,
        rng: Optional[random.Random] = None,
    ) -> Question:
        """
        Picks only shapes of `category`. Levels that do not offer it get a
        regular question instead.
        """

        rng = rng or random.Random()
        level = clamp_level(level)
        sub_range = self.sub_range_for(level)
        matching = [item for item in sub_range.shapes if item.category == category]
        if not matching:
            logger.debug(
                "%s level %s offers no %s shapes; using any shape.",
                self.grade,
                level,
                category,
            )
            matching = list(sub_range.shapes)
        return self._build(rng.choice(matching), sub_range, level, band, rng)

    def layout_problems(self) -> List[str]:
        """
        Lists structural faults in the sub-range table: gaps, overlaps,
        decreasing ceilings, or a shape count outside 2..6.
        """

        problems: List[str] = []
        expected_start = MIN_LEVEL
        previous_ceiling = None
        for sub_range in self.sub_ranges:
            if sub_range.min_level != expected_start:
                problems.append(
                    f"{self.grade}: range {sub_range.min_level}-{sub_range.max_level} "
                    f"should start at {expected_start}"
                )
            if sub_range.max_level < sub_range.min_level:
                problems.append(f"{self.grade}: range {sub_range.topic!r} is inverted")
            if previous_ceiling is not None and sub_range.ceiling < previous_ceiling:
                problems.append(
                    f"{self.grade}: ceiling of {sub_range.topic!r} drops below {previous_ceiling}"
                )
            if not MIN_SHAPES_PER_RANGE <= len(sub_range.shapes) <= MAX_SHAPES_PER_RANGE:
                problems.append(
                    f"{self.grade}: {sub_range.topic!r} has {len(sub_range.shapes)} shapes"
                )
            expected_start = sub_range.max_level + 1
            previous_ceiling = sub_range.ceiling
        if expected_start != MAX_LEVEL + 1:
            problems.append(f"{self.grade}: levels stop at {expected_start - 1}")
        return problems

    def shapes(self) -> Iterable[Tuple[SubRange, Shape]]:
        for sub_range in self.sub_ranges:
            for item in sub_range.shapes:
                yield sub_range, item

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    def _build(
        self,
        item: Shape,
        sub_range: SubRange,
        level: int,
        band: Optional[LevelBand],
        rng: random.Random,
    ) -> Question:
        try:
            top = band.numeric_range.max if band is not None else None
            problem = item(rng, level, top)
            answer = ensure_integer(problem.answer)
            spread = max(1, problem.spread) if problem.spread is not None else default_spread(answer)
            choices = generate_choices(answer, CHOICE_COUNT, spread, rng)
            question = Question(
                id=question_id(self.grade, level, rng),
                grade=self.grade,
                prompt=problem.prompt,
                answer=answer,
                choices=choices,
                category=item.category,
                difficulty_level=level,
                skill=sub_range.topic,
            )
        except Exception as exc:  # any shape failure becomes the fallback question
            logger.warning(
                "Shape %s for %s level %s failed (%s); using fallback question.",
                item.name,
                self.grade,
                level,
                exc,
            )
            return safe_fallback_question(self.grade, level, rng)

        logger.debug("%s level %s -> %s = %s", self.grade, level, question.prompt, answer)
        return question
