import pytest

from sprig.errors import SprigArityError, SprigSyntaxError, SprigTypeError, SprigUnboundSymbol
from sprig.evaluation.evaluator import evaluate
from sprig.types.nil import Nil
from sprig.types.procedure import Builtin
from sprig.types.symbol import Symbol


# -----------------------------------------------------
# Syntax tree nodes built directly
# -----------------------------------------------------

def test_number_nodes_evaluate_to_floats(env):
    assert evaluate(3.5, env) == 3.5
    result = evaluate(2, env)
    assert result == 2.0 and isinstance(result, float)


def test_symbol_lookup(env):
    env.define(Symbol("x"), 42.0)
    assert evaluate(Symbol("x"), env) == 42.0
    with pytest.raises(SprigUnboundSymbol):
        evaluate(Symbol("z"), env)


def test_empty_list_node(env):
    assert evaluate([], env) is Nil


def test_simple_application(env):
    assert evaluate([Symbol("+"), 1, 2], env) == 3


def test_non_nodes_are_rejected(env):
    with pytest.raises(SprigSyntaxError):
        evaluate(True, env)
    with pytest.raises(SprigSyntaxError):
        evaluate("text", env)


def test_builtin_receives_call_site(env):
    seen = []
    env.define(Symbol("probe"), Builtin("probe", lambda args, site: seen.append((args, site)) or Nil))
    node = [Symbol("probe"), 1, [Symbol("+"), 1, 1]]
    evaluate(node, env)
    assert seen == [([1.0, 2.0], node)]


def test_arguments_evaluated_left_to_right(env):
    order = []

    def trace(args, site):
        order.append(args[0])
        return args[0]

    env.define(Symbol("trace"), Builtin("trace", trace))
    evaluate([Symbol("+"), [Symbol("trace"), 1], [Symbol("trace"), 2], [Symbol("trace"), 3]], env)
    assert order == [1.0, 2.0, 3.0]


# -----------------------------------------------------
# Application errors
# -----------------------------------------------------

@pytest.mark.parametrize("source", ["(1 2)", "(true)", "(() 1)"])
def test_calling_a_non_function(run, source):
    with pytest.raises(SprigTypeError) as exc:
        run(source)
    assert exc.value.expected == "function"


def test_closure_arity_mismatch(run):
    run("(define (add a b) (+ a b))")
    with pytest.raises(SprigArityError) as exc:
        run("(add 1)")
    assert (exc.value.expected, exc.value.found) == (2, 1)
    with pytest.raises(SprigArityError):
        run("(add 1 2 3)")


def test_head_can_be_an_expression(run):
    assert run("((if true + -) 5 3)") == 8


def test_errors_propagate_through_nested_calls(run):
    run("(define (f x) (+ x true))")
    run("(define (g x) (* 2 (f x)))")
    with pytest.raises(SprigTypeError):
        run("(g 1)")


def test_failed_define_binds_nothing(run, env):
    with pytest.raises(SprigUnboundSymbol):
        run("(define x (+ 1 missing))")
    assert Symbol("x") not in env
