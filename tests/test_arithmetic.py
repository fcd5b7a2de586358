import math

import pytest

from tinyscheme.types.nil import Nil
from tinyscheme.types.symbol import TRUE


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", 6),
        ("(+)", 0),
        ("(-)", 0),
        ("(*)", 0),
        ("(+ 7)", 7),
        ("(- 5)", 5),
        ("(- 10 3 2)", 5),
        ("(* 2 3 4)", 24),
        ("(/ 12 3)", 4),
        ("(/ 1 2)", 0.5),
        ("(/ 100 2 5)", 10),
        ("(+ (* 2 3) (- 10 4))", 12),
        ("(/ (+ 20 10) (* 2 5))", 3),
        ("(+ 1 2.5 3)", 6.5),
        ("(* 1 2 3 4 5 6)", 720),
        ("(+ -1 5 -3)", 1),
        ("(- -10 -5)", -5),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", 57),
    ]
)
def test_arithmetic(interp, source, expected):
    assert interp.eval(source) == expected


def test_results_are_floats(interp):
    assert isinstance(interp.eval("(+ 1 2)"), float)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(/ 1 0)", math.inf),
        ("(/ -1 0)", -math.inf),
        ("(/ 5 2 0)", math.inf),
    ]
)
def test_division_by_zero_follows_ieee(interp, source, expected):
    assert interp.eval(source) == expected


def test_zero_over_zero_is_nan(interp):
    assert math.isnan(interp.eval("(/ 0 0)"))


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(= 1 1)", TRUE),
        ("(= 1 2)", Nil),
        ("(= 2 2.0)", TRUE),
        ("(< 1 2)", TRUE),
        ("(< 2 1)", Nil),
        ("(< 1 1)", Nil),
        ("(> 3 2)", TRUE),
        ("(> 2 3)", Nil),
    ]
)
def test_comparison(interp, source, expected):
    assert interp.eval(source) == expected


@pytest.mark.parametrize(
    "source",
    [
        "(+ 1 (quote a))",
        "(* 2 (list 1))",
        "(- 1 #t)",
        "(< 1)",
        "(< 1 2 3)",
        "(= 1 (quote x))",
    ]
)
def test_bad_arithmetic_yields_nil(interp, source):
    assert interp.eval(source) is Nil
