"""Tests for Operation and Calculation."""

import json
from fractions import Fraction

import pytest

from cdeps.calculator import DivisionByZero
from cdeps.models import DEMO, Calculation, Operation


def test_operation_from_symbol():
    assert Operation("+") is Operation.PLUS
    assert Operation("/") is Operation.DIVIDE


def test_operation_apply():
    assert Operation.PLUS.apply(2, 2) == 4
    assert Operation.DIVIDE.apply(1, 4) == Fraction(1, 4)


def test_evaluate_records_operands_and_result():
    calc = Calculation.evaluate(Operation.DIVIDE, 4, 2)
    assert calc.operation is Operation.DIVIDE
    assert (calc.a, calc.b, calc.result) == (4, 2, 2)


def test_evaluate_propagates_division_by_zero():
    with pytest.raises(DivisionByZero):
        Calculation.evaluate(Operation.DIVIDE, 1, 0)


def test_line_format():
    assert Calculation.evaluate(Operation.PLUS, 2, 2).line == "2 + 2 is 4"
    assert Calculation.evaluate(Operation.DIVIDE, 4, 2).line == "4 / 2 is 2"


def test_line_with_fractions():
    calc = Calculation.evaluate(Operation.PLUS, Fraction(1, 2), Fraction(1, 3))
    assert calc.line == "1/2 + 1/3 is 5/6"


def test_demo_lines():
    lines = [Calculation.evaluate(op, a, b).line for op, a, b in DEMO]
    assert lines == ["2 + 2 is 4", "4 / 2 is 2"]


def test_to_dict_is_json_serializable():
    d = Calculation.evaluate(Operation.DIVIDE, 1, 3).to_dict()
    assert d == {"operation": "divide", "symbol": "/", "a": 1, "b": 3, "result": "1/3"}
    assert json.loads(json.dumps(d)) == d


def test_to_dict_whole_fraction_operand_is_int():
    d = Calculation.evaluate(Operation.PLUS, Fraction(4, 2), 1.5).to_dict()
    assert d["a"] == 2
    assert d["result"] == pytest.approx(3.5)


def test_calculation_is_frozen():
    calc = Calculation.evaluate(Operation.PLUS, 1, 1)
    with pytest.raises(AttributeError):
        calc.result = 3


def test_to_dict_non_finite_floats_are_strings():
    d = Calculation.evaluate(Operation.PLUS, float("inf"), 1).to_dict()
    assert d["a"] == "inf"
    assert d["result"] == "inf"
    assert json.loads(json.dumps(d, allow_nan=False)) == d
