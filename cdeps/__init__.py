"""cdeps — a two-function arithmetic library.

Adds and divides numbers. Division between integers and fractions is exact,
yielding a Fraction when the quotient is not whole.

Usage:
    python -m cdeps                  # 2 + 2 is 4 / 4 / 2 is 2
    python -m cdeps plus 1/2 1/3     # 1/2 + 1/3 is 5/6
    python -m cdeps divide 1 0       # Divide by zero, exit 1
"""

from cdeps.calculator import DivisionByZero, divide, parse_operand, plus

__all__ = ["DivisionByZero", "divide", "parse_operand", "plus"]
