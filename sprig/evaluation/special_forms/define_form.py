import logging

from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.errors import SprigSyntaxError
from sprig.evaluation.context import CallContext
from sprig.evaluation.special_forms.lambda_form import parse_params
from sprig.types.environment import Environment
from sprig.types.procedure import Closure
from sprig.types.symbol import Symbol

logger = logging.getLogger(__name__)

_BEGIN = Symbol("begin")


def define_form(
    tail: list[SExpression],
    env: Environment,
    ctx: CallContext,
    evaluate_fn: EvaluatorFn,
    form: SExpression,
) -> LispValue:
    """
    (define name value)
    (define (fname params...) body...)

    Binds in the current frame only and returns the bound value. The
    function form closes over its own frame holding `fname`, so the body
    can recurse no matter what later happens to `fname` in the caller's
    scope.
    """
    if len(tail) < 2:
        raise SprigSyntaxError(form, "define requires 2 arguments")

    match tail[0]:
        case Symbol() as name:
            if len(tail) != 2:
                raise SprigSyntaxError(form, "define requires 2 arguments")
            value = evaluate_fn(tail[1], env, ctx)
            env.define(name, value)
            logger.debug("define %s", name)
            return value

        case [Symbol() as fname, *params]:
            params = parse_params(params, "define", form)
            body_forms = tail[1:]
            body = body_forms[0] if len(body_forms) == 1 else [_BEGIN, *body_forms]

            closure_env = env.child_scope()
            fn = Closure(params, body, closure_env, name=fname.name)
            closure_env.define(fname, fn)
            env.define(fname, fn)
            logger.debug("define function %s/%d", fname, len(params))
            return fn

        case [_, *_]:
            raise SprigSyntaxError(form, "define function name must be a symbol")

    raise SprigSyntaxError(form, "define requires a symbol or a list")
