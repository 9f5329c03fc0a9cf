import math

import pytest

from sprig.types.nil import Nil
from sprig.types.printer import display
from sprig.types.symbol import Symbol


@pytest.mark.parametrize(
    "value,expected",
    [
        (6.0, "6"),
        (-5.0, "-5"),
        (0.5, "0.5"),
        (2.25, "2.25"),
        (math.inf, "inf"),
        (-math.inf, "-inf"),
        (math.nan, "nan"),
        (True, "true"),
        (False, "false"),
        (Nil, "nil"),
    ]
)
def test_display_values(value, expected):
    assert display(value) == expected


def test_display_builtin_uses_registered_name(run):
    assert display(run("+")) == "+"
    assert display(run("<=")) == "<="


def test_display_named_and_anonymous_closures(run):
    assert display(run("(define (square x) (* x x))")) == "square"
    assert display(run("(lambda (x) x)")) == ""


def test_display_syntax_nodes():
    node = [Symbol("define"), [Symbol("f"), Symbol("x")], [Symbol("+"), Symbol("x"), 1.0]]
    assert display(node) == "(define (f x) (+ x 1))"
    assert display([]) == "()"


def test_repr_of_procedures(run):
    assert repr(run("+")) == "<builtin +>"
    assert repr(run("(define (add a b) (+ a b))")) == "<closure add (a b)>"
