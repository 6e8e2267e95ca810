"""Data models for cdeps.

Operation enum and the Calculation record that flows from the calculator
to the CLI.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from fractions import Fraction

from cdeps.calculator import Operand, divide, format_number, plus


class Operation(str, Enum):
    """Supported operations, keyed by their printed symbol."""

    PLUS = "+"
    DIVIDE = "/"

    def apply(self, a: Operand, b: Operand) -> Operand:
        if self is Operation.PLUS:
            return plus(a, b)
        return divide(a, b)


@dataclass(frozen=True)
class Calculation:
    """One evaluated operation with its operands and result."""

    operation: Operation
    a: Operand
    b: Operand
    result: Operand

    @classmethod
    def evaluate(cls, operation: Operation, a: Operand, b: Operand) -> Calculation:
        """Run the operation and record it. Errors propagate to the caller."""
        return cls(operation=operation, a=a, b=b, result=operation.apply(a, b))

    @property
    def line(self) -> str:
        """Human-readable form, e.g. '4 / 2 is 2'."""
        return (
            f"{format_number(self.a)} {self.operation.value} "
            f"{format_number(self.b)} is {format_number(self.result)}"
        )

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "operation": self.operation.name.lower(),
            "symbol": self.operation.value,
            "a": _json_number(self.a),
            "b": _json_number(self.b),
            "result": _json_number(self.result),
        }


def _json_number(value: Operand) -> int | float | str:
    # Fractions and non-finite floats have no JSON form, emit them as strings
    if isinstance(value, Fraction):
        if value.denominator == 1:
            return value.numerator
        return format_number(value)
    if isinstance(value, float) and not math.isfinite(value):
        return format_number(value)
    return value


# The two calculations the default invocation prints.
DEMO = (
    (Operation.PLUS, 2, 2),
    (Operation.DIVIDE, 4, 2),
)
