from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.errors import SprigSyntaxError
from sprig.evaluation.context import CallContext
from sprig.types.environment import Environment


def begin_form(
    tail: list[SExpression],
    env: Environment,
    ctx: CallContext,
    evaluate_fn: EvaluatorFn,
    form: SExpression,
) -> LispValue:
    """(begin e1 e2 ... en): evaluate in order, return the value of en."""
    if not tail:
        raise SprigSyntaxError(form, "begin requires at least 1 expression")
    for e in tail[:-1]:
        evaluate_fn(e, env, ctx)
    return evaluate_fn(tail[-1], env, ctx)
