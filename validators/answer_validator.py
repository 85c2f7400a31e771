"""
answer_validator.py

SymPy-based checking of a player's response against a question's integer
answer. Responses arrive as the tapped choice (an int) or as typed text such
as "12", "-7" or "12/3"; anything that does not parse to a plain number is
simply wrong, never an error.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict

from sympy import Expr, Rational, sympify

# Digits, one decimal point per number, the four operators and brackets.
ARITHMETIC_TEXT = re.compile(r"^[\d\s.+\-*/()]+$")
MAX_TEXT_LENGTH = 32


@dataclass
class ValidationResult:
    """
    Represents the outcome of a single validation attempt.
    """

    correct: bool
    message: str
    details: Dict[str, Any] = field(default_factory=dict)


class AnswerValidator:
    """
    Validates numeric answers using SymPy.

    Usage:
        validator = AnswerValidator()
        result = validator.validate(4, "12/3")
        if result.correct:
            ...
    """

    def __init__(self, *, tolerance: float = 1e-6):
        self.tolerance = tolerance

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def validate(self, expected: int, actual: Any) -> ValidationResult:
        """
        Compares `actual` against the integer `expected`. Accepts ints,
        floats, Decimals, SymPy numbers and short arithmetic strings.
        """

        if actual is None:
            return ValidationResult(correct=False, message="No answer given.")

        try:
            expected_expr = self._to_expr(expected)
            actual_expr = self._to_expr(actual)
        except ValueError as exc:
            return ValidationResult(
                correct=False,
                message=str(exc),
                details={"expected": expected, "actual": actual},
            )

        details = {"expected_expr": str(expected_expr), "actual_expr": str(actual_expr)}
        if self._expressions_match(expected_expr, actual_expr):
            return ValidationResult(correct=True, message="Answers are equivalent.", details=details)
        return ValidationResult(correct=False, message="Answers differ.", details=details)

    def is_correct(self, expected: int, actual: Any) -> bool:
        return self.validate(expected, actual).correct

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    def _to_expr(self, value: Any) -> Expr:
        if isinstance(value, bool):
            raise ValueError("A boolean is not a numeric answer.")
        if isinstance(value, Expr):
            expr = value
        elif isinstance(value, int):
            return Rational(value)
        elif isinstance(value, (float, Decimal)):
            expr = sympify(value)
        elif isinstance(value, str):
            expr = self._parse_text(value)
        else:
            raise ValueError(f"Unsupported answer type: {type(value).__name__}")

        if not isinstance(expr, Expr) or expr.free_symbols or not expr.is_number:
            raise ValueError(f"'{value}' is not a number.")
        return expr

    def _parse_text(self, text: str) -> Expr:
        cleaned = text.strip()
        if not cleaned:
            raise ValueError("Empty answer.")
        if len(cleaned) > MAX_TEXT_LENGTH or "**" in cleaned or not ARITHMETIC_TEXT.match(cleaned):
            raise ValueError(f"Unable to parse expression '{text}'.")
        try:
            parsed = sympify(cleaned, rational=True)
        except Exception as exc:  # sympify surfaces tokenizer and evaluation errors unwrapped
            raise ValueError(f"Unable to parse expression '{text}'.") from exc
        # "()" and "(())" parse to empty tuples.
        if not isinstance(parsed, Expr):
            raise ValueError(f"Unable to parse expression '{text}'.")
        return parsed

    def _expressions_match(self, expected: Expr, actual: Expr) -> bool:
        if expected.is_Rational and actual.is_Rational:
            return expected == actual

        difference = (expected - actual).evalf()
        if not difference.is_finite or not difference.is_real:
            return False
        return abs(float(difference)) <= self.tolerance


def validate_answer(
    expected: int,
    actual: Any,
    *,
    tolerance: float = 1e-6,
) -> ValidationResult:
    """
    Convenience function for one-off validations.
    """

    validator = AnswerValidator(tolerance=tolerance)
    return validator.validate(expected, actual)


if __name__ == "__main__":
    validator = AnswerValidator()
    print(validator.validate(4, "12/3"))
    print(validator.validate(-7, "seven"))
