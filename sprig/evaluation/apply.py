"""Application engine for Sprig.

Centralizes procedure-call semantics so the evaluator and any host code
calling procedures directly share one implementation:
- Builtins receive the evaluated arguments plus the call-site node.
- Closures check arity, then evaluate their body in a fresh child frame of
  the environment they captured.
"""

import logging

from sprig import LispValue, SExpression, EvaluatorFn
from sprig.errors import SprigArityError, SprigTypeError
from sprig.evaluation.context import CallContext
from sprig.types.procedure import Builtin, Closure

logger = logging.getLogger(__name__)


def apply_closure(
    fn: Closure,
    args: list[LispValue],
    site: SExpression,
    ctx: CallContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a user-defined Closure.

    The new frame's parent is the closure's captured environment, so any
    `define` in the body stays local to this activation.
    """
    if len(args) != fn.arity:
        raise SprigArityError(fn.arity, len(args), site)

    with ctx.frame():
        frame = fn.bind(args)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("apply %r depth=%d scope=%d", fn, ctx.depth, frame.depth())
        return evaluate_fn(fn.body, frame, ctx)


def apply(
    fn: LispValue,
    args: list[LispValue],
    site: SExpression,
    ctx: CallContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Builtin or a Closure; anything else is a type error."""
    if isinstance(fn, Builtin):
        return fn(args, site)
    if isinstance(fn, Closure):
        return apply_closure(fn, args, site, ctx, evaluate_fn)
    raise SprigTypeError("function", fn, site)
