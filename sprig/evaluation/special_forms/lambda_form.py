from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.errors import SprigSyntaxError
from sprig.evaluation.context import CallContext
from sprig.types.environment import Environment
from sprig.types.procedure import Closure
from sprig.types.symbol import Symbol


def parse_params(params: SExpression, keyword: str, form: SExpression) -> list[Symbol]:
    """Validate a parameter list: a list whose elements are all Symbols."""
    if not isinstance(params, list):
        raise SprigSyntaxError(form, f"{keyword} parameters must be a list")
    for p in params:
        if not isinstance(p, Symbol):
            raise SprigSyntaxError(form, f"{keyword} parameters must be symbols")
    return list(params)


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    ctx: CallContext,
    evaluate_fn: EvaluatorFn,
    form: SExpression,
) -> LispValue:
    """(lambda (params...) body): an anonymous closure over the current env."""
    if len(tail) != 2:
        raise SprigSyntaxError(form, "lambda requires a parameter list and a body")

    params = parse_params(tail[0], "lambda", form)
    return Closure(params, tail[1], env)
