"""Procedure values: native builtins and user-defined closures."""

from __future__ import annotations

from typing import Callable, Optional

from sprig import SExpression, LispValue
from sprig.types.environment import Environment
from sprig.types.symbol import Symbol


BuiltinFn = Callable[[list[LispValue], SExpression], LispValue]


class Builtin:
    """A native primitive: called with evaluated arguments and the call-site node."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: BuiltinFn):
        self.name = name
        self.fn = fn

    def __call__(self, args: list[LispValue], site: SExpression = None) -> LispValue:
        return self.fn(args, site)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"<builtin {self.name}>"


class Closure:
    """A user-defined procedure with formal parameters, body, and captured env."""

    __slots__ = ("params", "body", "env", "name")

    def __init__(
        self,
        params: list[Symbol],
        body: SExpression,
        env: Environment,
        name: Optional[str] = None,
    ):
        self.params: list[Symbol] = params
        self.body: SExpression = body
        # Shared with the defining scope, never copied
        self.env: Environment = env
        self.name: Optional[str] = name

    @property
    def arity(self) -> int:
        return len(self.params)

    def bind(self, args: list[LispValue]) -> Environment:
        """Return a fresh child frame of the captured env with params bound to `args`.

        The caller is responsible for checking arity first.
        """
        frame = self.env.child_scope()
        for param, arg in zip(self.params, args):
            frame.define(param, arg)
        return frame

    def __str__(self) -> str:
        return self.name or ""

    def __repr__(self) -> str:
        params = " ".join(str(p) for p in self.params)
        return f"<closure {self.name or 'λ'} ({params})>"
