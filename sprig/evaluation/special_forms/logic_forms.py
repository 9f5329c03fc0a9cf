from sprig import SExpression, LispValue, EvaluatorFn
from sprig.errors import SprigSyntaxError
from sprig.evaluation.context import CallContext
from sprig.types.environment import Environment


def _boolean(keyword: str, value: LispValue, form: SExpression) -> bool:
    if not isinstance(value, bool):
        raise SprigSyntaxError(form, f"{keyword} requires boolean arguments")
    return value


def and_form(tail: list[SExpression], env: Environment, ctx: CallContext, evaluate_fn: EvaluatorFn, form: SExpression) -> bool:
    """Short-circuiting logical AND special form.

    (and a b ...) evaluates operands left to right; each must be a boolean.
    Returns false at the first false operand without evaluating the rest,
    otherwise true.
    """
    if len(tail) < 2:
        raise SprigSyntaxError(form, "and requires at least 2 arguments")

    for expr in tail:
        if not _boolean("and", evaluate_fn(expr, env, ctx), form):
            return False
    return True


def or_form(tail: list[SExpression], env: Environment, ctx: CallContext, evaluate_fn: EvaluatorFn, form: SExpression) -> bool:
    """Short-circuiting logical OR special form; mirror image of `and`."""
    if len(tail) < 2:
        raise SprigSyntaxError(form, "or requires at least 2 arguments")

    for expr in tail:
        if _boolean("or", evaluate_fn(expr, env, ctx), form):
            return True
    return False


def not_form(tail: list[SExpression], env: Environment, ctx: CallContext, evaluate_fn: EvaluatorFn, form: SExpression) -> bool:
    if len(tail) != 1:
        raise SprigSyntaxError(form, "not requires 1 argument")
    return not _boolean("not", evaluate_fn(tail[0], env, ctx), form)
