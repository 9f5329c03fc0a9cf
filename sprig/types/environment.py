"""Runtime environment for Sprig.

The Environment stores bindings of Symbols to evaluated values and supports
nested scopes via an `outer` link. Child frames link to their parent rather
than copying it, so a frame only ever writes to its own bindings while
lookups see every enclosing binding as it currently stands.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from sprig import LispValue
from sprig.errors import SprigError, SprigUnboundSymbol
from sprig.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Sprig values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, overwriting any local binding.

        Raises SprigError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise SprigError(f"Cannot define {name!r} as a symbol")
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost frame first.

        Raises SprigUnboundSymbol if no frame in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise SprigUnboundSymbol(name)
        return env.vars[name]

    def child_scope(self) -> Environment:
        """Return a new, empty frame whose parent is this frame (shared, not copied)."""
        return Environment(outer=self)

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def depth(self) -> int:
        """Number of frames between this one and the root (the root is 0)."""
        n = 0
        env = self.outer
        while env is not None:
            n += 1
            env = env.outer
        return n

    def __contains__(self, name: Symbol) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Frame-size summary of the whole chain, innermost first."""
        sizes = []
        env: Optional[Environment] = self
        while env is not None:
            sizes.append(str(len(env.vars)))
            env = env.outer
        return f"<Environment chain: {' -> '.join(sizes)}>"
