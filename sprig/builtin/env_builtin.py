"""Built-in procedures for the Sprig root environment.

Arithmetic and numeric comparison primitives, plus the boolean and nil
constants. Every primitive has the signature ``fn(args, site)``: `args` are
already evaluated and `site` is the calling node, used only in errors.
"""
from __future__ import annotations

import logging
import math
import operator
from typing import Callable

import numpy as np

from sprig import LispValue, SExpression
from sprig.errors import SprigArityError, SprigTypeError
from sprig.types.environment import Environment
from sprig.types.nil import Nil
from sprig.types.procedure import Builtin
from sprig.types.symbol import Symbol

logger = logging.getLogger(__name__)


def as_number(value: LispValue, site: SExpression) -> float:
    """Return `value` as a float; booleans are not numbers."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SprigTypeError("number", value, site)
    return float(value)


def as_numbers(args: list[LispValue], site: SExpression) -> list[float]:
    return [as_number(a, site) for a in args]


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: list[LispValue], site: SExpression) -> float:
    """Return the sum of all arguments; (+) is 0."""
    return sum(as_numbers(args, site), 0.0)


def sub(args: list[LispValue], site: SExpression) -> float:
    """Negate a single argument; otherwise subtract the sum of the rest from the first."""
    if not args:
        raise SprigArityError(1, 0, site, at_least=True)
    first, *rest = as_numbers(args, site)
    if not rest:
        return -first
    return first - sum(rest, 0.0)


def mul(args: list[LispValue], site: SExpression) -> float:
    """Return the product of at least 2 arguments."""
    if len(args) < 2:
        raise SprigArityError(2, len(args), site, at_least=True)
    return math.prod(as_numbers(args, site))


def div(args: list[LispValue], site: SExpression) -> float:
    """Reciprocal of a single argument; otherwise the first divided by the product of the rest.

    Division by zero yields inf or nan, as in IEEE 754, rather than an error.
    """
    if not args:
        raise SprigArityError(1, 0, site, at_least=True)
    first, *rest = as_numbers(args, site)
    if not rest:
        first, rest = 1.0, [first]
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(first) / np.float64(math.prod(rest)))


# -------------------------------
# Comparison
# -------------------------------
def comparison(name: str, op: Callable[[float, float], bool]) -> Callable[[list[LispValue], SExpression], bool]:
    """Build a strictly binary numeric comparison returning a boolean."""

    def compare(args: list[LispValue], site: SExpression) -> bool:
        if len(args) != 2:
            raise SprigArityError(2, len(args), site)
        a, b = as_numbers(args, site)
        return bool(op(a, b))

    compare.__name__ = f"compare_{op.__name__}"
    compare.__doc__ = f"({name} a b) for exactly 2 numbers."
    return compare


BUILTINS: dict[str, Callable[[list[LispValue], SExpression], LispValue]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "<": comparison("<", operator.lt),
    "<=": comparison("<=", operator.le),
    ">": comparison(">", operator.gt),
    ">=": comparison(">=", operator.ge),
    "=": comparison("=", operator.eq),
    "!=": comparison("!=", operator.ne),
}

CONSTANTS: dict[str, LispValue] = {
    "true": True,
    "false": False,
    "nil": Nil,
}


def register(env: Environment) -> None:
    """Register all builtin procedures and constants into the given environment."""
    env.update({Symbol(name): Builtin(name, fn) for name, fn in BUILTINS.items()})
    env.update({Symbol(name): value for name, value in CONSTANTS.items()})
    logger.debug("registered %d builtins and %d constants", len(BUILTINS), len(CONSTANTS))
