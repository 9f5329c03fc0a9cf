import pytest

from sprig.errors import SprigError
from sprig.types.symbol import Symbol


def test_equal_names_are_equal_and_share_storage():
    a, b = Symbol("lambda"), Symbol("".join(["lam", "bda"]))
    assert a == b
    assert hash(a) == hash(b)
    assert a.name is b.name


def test_symbols_are_not_strings():
    assert Symbol("x") != "x"
    assert Symbol("x") != Symbol("y")


def test_symbols_are_immutable():
    s = Symbol("x")
    with pytest.raises(AttributeError):
        s.name = "y"
    with pytest.raises(AttributeError):
        s.other = 1
    assert s.name == "x"


@pytest.mark.parametrize("bad", ["", None, 3])
def test_symbol_names_must_be_non_empty_strings(bad):
    with pytest.raises(SprigError):
        Symbol(bad)


def test_symbol_rendering():
    assert str(Symbol("make-adder")) == "make-adder"
    assert repr(Symbol("make-adder")) == "Symbol('make-adder')"
