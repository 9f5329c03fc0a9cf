from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.errors import SprigSyntaxError
from sprig.evaluation.context import CallContext
from sprig.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    ctx: CallContext,
    evaluate_fn: EvaluatorFn,
    form: SExpression,
) -> LispValue:
    if len(tail) != 3:
        raise SprigSyntaxError(form, "if requires 3 arguments")

    test = evaluate_fn(tail[0], env, ctx)
    if not isinstance(test, bool):
        raise SprigSyntaxError(form, "if requires a boolean condition")

    # Only the selected branch is evaluated
    return evaluate_fn(tail[1] if test else tail[2], env, ctx)
