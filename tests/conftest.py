import pytest

from sprig.builtin.env_builtin import register
from sprig.evaluation.evaluator import evaluate
from sprig.interpreter import Interpreter
from sprig.reader.parser import lex, TokenStream
from sprig.types.environment import Environment


# Tests read SPRIG_* settings only when a case sets them explicitly.
@pytest.fixture(autouse=True)
def _clean_sprig_env(monkeypatch):
    monkeypatch.delenv("SPRIG_MAX_DEPTH", raising=False)
    monkeypatch.delenv("SPRIG_LOG_LEVEL", raising=False)
    monkeypatch.delenv("SPRIG_HOST_RECURSION_LIMIT", raising=False)


@pytest.fixture
def env():
    """Fresh root environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def run(env):
    """Evaluate every form in a source string against `env`; return the last value."""

    def _run(source):
        result = None
        for expr in TokenStream(lex(source)).parse_all():
            result = evaluate(expr, env)
        return result

    return _run
