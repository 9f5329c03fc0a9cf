from __future__ import annotations

import logging
import sys
from typing import Optional

from sprig import LispValue
from sprig.builtin.env_builtin import register
from sprig.config import get_host_recursion_limit, get_max_depth
from sprig.evaluation.context import CallContext
from sprig.evaluation.evaluator import evaluate_toplevel
from sprig.reader.parser import lex, TokenStream
from sprig.types.environment import Environment
from sprig.types.nil import Nil

logger = logging.getLogger(__name__)


def raise_host_recursion_limit() -> None:
    """Raise Python's recursion limit to the configured floor; never lowers it."""
    limit = get_host_recursion_limit()
    if sys.getrecursionlimit() < limit:
        sys.setrecursionlimit(limit)
        logger.debug("host recursion limit raised to %d", limit)


class Interpreter:
    """
    Reads and evaluates Sprig source against one root Environment, so
    definitions accumulate across calls the way a REPL session does.
    """

    def __init__(self, prelude: str | None = None, *, max_depth: Optional[int] = None):
        self.env: Environment = Environment()
        register(self.env)
        raise_host_recursion_limit()
        self.max_depth: Optional[int] = max_depth if max_depth is not None else get_max_depth()

        if prelude:
            self.eval_prelude(prelude)

    def _evaluate_all(self, code: str) -> list[LispValue]:
        stream = TokenStream(lex(code))
        results: list[LispValue] = []
        while (expr := stream.parse_expr()) is not None:
            results.append(evaluate_toplevel(expr, self.env, CallContext(self.max_depth)))
        return results

    def eval_prelude(self, code: str) -> None:
        """Evaluate a string of Sprig code for its definitions."""
        count = len(self._evaluate_all(code))
        logger.debug("prelude evaluated %d forms", count)

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code`; return the last value (nil if none)."""
        results = self._evaluate_all(code)
        if not results:
            return Nil
        return results[-1]
