from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional

from sprig.errors import SprigRecursionError


class CallContext:
    """Per-evaluation bookkeeping passed alongside the environment.

    Tracks how many closure activations are live so a host can bound
    recursion depth without relying on Python's own stack limit.
    """

    __slots__ = ("depth", "max_depth")

    def __init__(self, max_depth: Optional[int] = None):
        self.depth = 0
        self.max_depth = max_depth

    @contextmanager
    def frame(self) -> Iterator[None]:
        if self.max_depth is not None and self.depth >= self.max_depth:
            raise SprigRecursionError(self.max_depth)
        self.depth += 1
        try:
            yield
        finally:
            self.depth -= 1
