"""Identifier nodes of the syntax tree."""

from __future__ import annotations
import sys

from sprig.errors import SprigError


class Symbol:
    """An immutable, interned identifier. Equal names compare and hash equal."""

    __slots__ = ("name",)

    def __init__(self, name: str):
        if not isinstance(name, str) or not name:
            raise SprigError(f"Symbol name must be a non-empty string, got {name!r}")
        object.__setattr__(self, "name", sys.intern(name))

    def __setattr__(self, attr: str, value: object) -> None:
        raise AttributeError(f"Symbol {self.name!r} is immutable")

    def __eq__(self, other: object) -> bool:
        # interned names: identity is equality
        return isinstance(other, Symbol) and self.name is other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name
