import pytest

from sprig.errors import SprigError, SprigUnboundSymbol
from sprig.types.environment import Environment
from sprig.types.symbol import Symbol


def test_define_and_lookup():
    env = Environment()
    env.define(Symbol("x"), 1.0)
    assert env.lookup(Symbol("x")) == 1.0


def test_define_overwrites_local_binding():
    env = Environment()
    env.define(Symbol("x"), 1.0)
    env.define(Symbol("x"), 2.0)
    assert env.lookup(Symbol("x")) == 2.0


def test_unbound_lookup_raises():
    with pytest.raises(SprigUnboundSymbol) as exc:
        Environment().lookup(Symbol("missing"))
    assert exc.value.name == Symbol("missing")


def test_define_requires_symbol():
    with pytest.raises(SprigError):
        Environment().define("x", 1.0)


def test_child_scope_starts_empty_and_links_parent():
    parent = Environment()
    parent.define(Symbol("x"), 1.0)
    child = parent.child_scope()
    assert child.vars == {}
    assert child.outer is parent
    assert child.lookup(Symbol("x")) == 1.0


def test_child_sees_later_parent_definitions():
    # linked, not a snapshot
    parent = Environment()
    child = parent.child_scope()
    parent.define(Symbol("late"), 3.0)
    assert child.lookup(Symbol("late")) == 3.0


def test_child_definitions_do_not_leak():
    parent = Environment()
    child = parent.child_scope()
    sibling = parent.child_scope()
    child.define(Symbol("y"), 1.0)
    with pytest.raises(SprigUnboundSymbol):
        parent.lookup(Symbol("y"))
    with pytest.raises(SprigUnboundSymbol):
        sibling.lookup(Symbol("y"))


def test_inner_binding_shadows_outer():
    parent = Environment()
    parent.define(Symbol("x"), 1.0)
    child = parent.child_scope()
    child.define(Symbol("x"), 2.0)
    assert child.lookup(Symbol("x")) == 2.0
    assert parent.lookup(Symbol("x")) == 1.0


def test_find_and_contains():
    root = Environment()
    root.define(Symbol("x"), 1.0)
    inner = root.child_scope().child_scope()
    assert inner.find(Symbol("x")) is root
    assert Symbol("x") in inner
    assert Symbol("y") not in inner
    assert inner.depth() == 2


def test_repr_summarizes_chain():
    root = Environment()
    root.update({Symbol("a"): 1.0, Symbol("b"): 2.0})
    assert repr(root.child_scope()) == "<Environment chain: 0 -> 2>"
    assert str(root) == "{a: 1.0, b: 2.0}"
