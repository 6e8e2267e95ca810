"""Arithmetic primitives for cdeps.

Two pure operations, plus and divide. Division between rationals stays
exact: the quotient is a Fraction, collapsed back to int when it divides
evenly. Floats fall through to ordinary true division.
"""

from __future__ import annotations

import re
from fractions import Fraction
from typing import Union

Operand = Union[int, Fraction, float]
_OPERAND_TYPES = (int, Fraction, float)

_INT_RE = re.compile(r"^[+-]?\d+$")
_FRACTION_RE = re.compile(r"^([+-]?\d+)\s*/\s*(\d+)$")
_FLOAT_RE = re.compile(r"^[+-]?(\d+\.\d*|\.\d+|\d+)([eE][+-]?\d+)?$")


class DivisionByZero(ZeroDivisionError):
    """Raised when the divisor of a divide is zero."""

    def __init__(self, dividend: object = None) -> None:
        self.dividend = dividend
        if dividend is None:
            super().__init__("Divide by zero")
        else:
            super().__init__(f"Divide by zero: {dividend} / 0")


def _check(value: object, name: str) -> None:
    # bool is an int subclass but never a meaningful operand
    if isinstance(value, bool) or not isinstance(value, _OPERAND_TYPES):
        raise TypeError(f"{name} must be a number, got {type(value).__name__}")


def _normalize(value: Fraction) -> Operand:
    """Collapse a whole-number Fraction to int."""
    if value.denominator == 1:
        return value.numerator
    return value


def plus(a: Operand, b: Operand) -> Operand:
    """Return a + b. A whole Fraction sum collapses to int."""
    _check(a, "a")
    _check(b, "b")
    result = a + b
    if isinstance(result, Fraction):
        return _normalize(result)
    return result


def divide(a: Operand, b: Operand) -> Operand:
    """Return a / b, exact when both operands are rational.

    Raises:
        DivisionByZero: If b is zero.
    """
    _check(a, "a")
    _check(b, "b")
    if b == 0:
        raise DivisionByZero(a)

    if isinstance(a, (int, Fraction)) and isinstance(b, (int, Fraction)):
        return _normalize(Fraction(a) / Fraction(b))
    return a / b


def parse_operand(text: str) -> Operand:
    """Parse a command-line token into an operand.

    '4' -> 4, '1/3' -> Fraction(1, 3), '2.5' -> 2.5.

    Raises:
        ValueError: If the token is not a number.
        DivisionByZero: If a fraction literal has a zero denominator.
    """
    token = text.strip()

    if _INT_RE.match(token):
        return int(token)

    m = _FRACTION_RE.match(token)
    if m:
        numerator, denominator = int(m.group(1)), int(m.group(2))
        if denominator == 0:
            raise DivisionByZero(numerator)
        return _normalize(Fraction(numerator, denominator))

    if _FLOAT_RE.match(token):
        return float(token)

    raise ValueError(f"Not a number: {text!r}")


def format_number(value: Operand) -> str:
    """Render an operand the way results are printed.

    Fractions print as 'n/d', integral floats keep their '.0'.
    """
    if isinstance(value, Fraction):
        value = _normalize(value)
    return str(value)
