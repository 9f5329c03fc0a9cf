"""Core evaluator for the Sprig interpreter.

A recursive tree walker: atoms evaluate directly, lists headed by a special
form keyword are handed to that form's handler, and every other list is a
procedure call. There is no tail-call elimination; each nested closure call
uses Python stack frames.
"""

from __future__ import annotations

import logging
import sys

from sprig import SExpression, LispValue
from sprig.config import get_max_depth
from sprig.errors import SprigRecursionError, SprigSyntaxError
from sprig.evaluation.apply import apply
from sprig.evaluation.context import CallContext
from sprig.evaluation.special_forms import SPECIAL_FORMS
from sprig.types.environment import Environment
from sprig.types.nil import Nil
from sprig.types.symbol import Symbol

logger = logging.getLogger(__name__)


def evaluate(
    expr: SExpression, env: Environment, ctx: CallContext | None = None
) -> LispValue:
    """Evaluate one syntax tree node against `env`.

    Only `define` mutates `env`; everything else is a pure function of
    (expr, env). Errors propagate as SprigError subclasses.
    """
    if ctx is None:
        return evaluate_toplevel(expr, env, CallContext(get_max_depth()))

    match expr:
        case Symbol():
            return env.lookup(expr)
        case bool():
            # bool is an int subclass; it is a value, not a syntax node
            raise SprigSyntaxError(expr, f"Not a syntax tree node: {expr!r}")
        case int() | float():
            return float(expr)
        case []:
            return Nil
        case [Symbol() as head, *tail] if head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](tail, env, ctx, evaluate, expr)
        case [head, *tail]:
            fn = evaluate(head, env, ctx)
            args = [evaluate(arg, env, ctx) for arg in tail]
            return apply(fn, args, expr, ctx, evaluate)

    raise SprigSyntaxError(expr, f"Not a syntax tree node: {expr!r}")


def evaluate_toplevel(expr: SExpression, env: Environment, ctx: CallContext) -> LispValue:
    """Evaluate a top-level form, reporting host stack exhaustion as SprigRecursionError."""
    try:
        return evaluate(expr, env, ctx)
    except RecursionError as e:
        limit = sys.getrecursionlimit()
        logger.debug("host recursion limit %d reached", limit)
        raise SprigRecursionError(limit) from e
