"""Special form: cond, a multi-branch conditional.

(cond (test1 result1) (test2 result2) ... (else resultN))

Clauses are tried in order. A test that is literally the symbol `else`
always matches. Every other test must evaluate to a boolean. Only the
selected clause's result is evaluated. Falling off the end is an error.
"""

from sprig import SExpression, LispValue, EvaluatorFn
from sprig.errors import SprigSyntaxError, SprigTypeError
from sprig.evaluation.context import CallContext
from sprig.types.environment import Environment
from sprig.types.symbol import Symbol

ELSE = Symbol("else")


def cond_form(
    tail: list[SExpression],
    env: Environment,
    ctx: CallContext,
    evaluate_fn: EvaluatorFn,
    form: SExpression,
) -> LispValue:
    if len(tail) < 2:
        raise SprigSyntaxError(form, "cond requires at least 2 arguments")
    for clause in tail:
        if not isinstance(clause, list) or len(clause) != 2:
            raise SprigSyntaxError(form, "cond clauses must be (test result) pairs")

    for test, result in tail:
        if test == ELSE:
            return evaluate_fn(result, env, ctx)
        flag = evaluate_fn(test, env, ctx)
        if not isinstance(flag, bool):
            raise SprigTypeError("boolean", flag, test)
        if flag:
            return evaluate_fn(result, env, ctx)

    raise SprigSyntaxError(form, "no matching clause in cond")
