"""A left-to-right arithmetic expression evaluator for + - * /."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum

_OPERATOR_CHARS = "+-*/"
_SPLIT_PATTERN = re.compile(r"[+\-*/]")


def _divide(x: float, y: float) -> float:
    if y != 0:
        return x / y
    if x == 0 or math.isnan(x):
        return math.nan
    return math.copysign(math.inf, x) * math.copysign(1.0, y)


class Operation(Enum):
    """A binary arithmetic operation, keyed by its operator symbol."""

    ADD = "+"
    DIFFERENCE = "-"
    DIVISION = "/"
    PRODUCT = "*"

    def run(self, x: float, y: float) -> float:
        """Apply the operation to ``x`` and ``y``."""
        if self is Operation.ADD:
            return x + y
        if self is Operation.DIFFERENCE:
            return x - y
        if self is Operation.DIVISION:
            return _divide(x, y)
        return x * y


def _parse_number(text: str) -> float:
    stripped = text.strip()
    if not stripped or "_" in stripped:
        raise ValueError(f"invalid number: {text!r}")
    try:
        return float(stripped)
    except ValueError:
        raise ValueError(f"invalid number: {text!r}") from None


@dataclass(frozen=True)
class Calculator:
    """Evaluates an expression of numbers joined by + - * /.

    Multiplication and division are folded in a first pass, in which an
    operator directly after a folded one is passed over; addition and
    subtraction are then applied left to right, and any * or / still
    left at that point yields 0.
    """

    expression: str

    def calculate(self) -> float:
        """Evaluate the expression; raises ValueError on a malformed number."""
        operators = [c for c in self.expression if c in _OPERATOR_CHARS]
        operands = [_parse_number(part) for part in _SPLIT_PATTERN.split(self.expression)]

        numbers = [operands[0]]
        remaining: list[str] = []
        skip_next = False
        for symbol, right in zip(operators, operands[1:]):
            if not skip_next and symbol in "*/":
                numbers[-1] = Operation(symbol).run(numbers[-1], right)
                skip_next = True
            else:
                remaining.append(symbol)
                numbers.append(right)
                skip_next = False

        result = numbers[0]
        for symbol, right in zip(remaining, numbers[1:]):
            if symbol in "+-":
                result = Operation(symbol).run(result, right)
            else:
                result = 0.0
        return result