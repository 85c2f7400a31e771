"""
question_validator.py

Structural checks run on a generated question before it reaches a player.
Returns a list of human-readable problems; an empty list means the question
is safe to show.
"""

from __future__ import annotations

import math
from typing import List

from schemas.question import CHOICE_COUNT, QUESTION_CATEGORIES, Question

MAX_ABS_ANSWER = 10_000_000


def validate_question(question: Question) -> List[str]:
    errors: List[str] = []

    if not question.id.strip():
        errors.append("question id is empty")
    if not question.prompt.strip():
        errors.append("prompt is empty")
    if question.category not in QUESTION_CATEGORIES:
        errors.append(f"unknown category {question.category!r}")

    answer = question.answer
    if isinstance(answer, bool) or not isinstance(answer, int):
        errors.append(f"answer {answer!r} is not an integer")
    elif abs(answer) > MAX_ABS_ANSWER:
        errors.append(f"answer {answer} is outside ±{MAX_ABS_ANSWER}")

    if question.choices is not None:
        errors.extend(_choice_problems(question))

    return errors


def is_valid_question(question: Question) -> bool:
    return not validate_question(question)


def _choice_problems(question: Question) -> List[str]:
    problems: List[str] = []
    choices = question.choices or []
    if len(choices) != CHOICE_COUNT:
        problems.append(f"expected {CHOICE_COUNT} choices, got {len(choices)}")
    if len(set(choices)) != len(choices):
        problems.append("choices are not unique")
    if choices.count(question.answer) != 1:
        problems.append("choices must contain the answer exactly once")
    for choice in choices:
        if not isinstance(choice, int) or isinstance(choice, bool):
            problems.append(f"choice {choice!r} is not an integer")
        elif not math.isfinite(choice) or abs(choice) > MAX_ABS_ANSWER:
            problems.append(f"choice {choice} is out of range")
    return problems
