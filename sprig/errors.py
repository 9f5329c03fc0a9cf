"""Error taxonomy raised by the Sprig reader and evaluator.

Every error is a recoverable exception: it aborts the evaluation in progress
and propagates unchanged to whoever called ``evaluate``. The session (root
environment) remains usable afterwards.
"""

from __future__ import annotations

from typing import Any


class SprigError(Exception):
    """ Base class for all Sprig errors; also used for host-specific failures"""
    pass


class SprigUnboundSymbol(SprigError):
    """ Raised when a symbol is not bound anywhere in the environment chain"""

    def __init__(self, name: Any):
        super().__init__(f"Unbound symbol: {name}")
        self.name = name


class SprigSyntaxError(SprigError):
    """ Raised when a special form has the wrong shape, or no cond clause matched"""

    def __init__(self, node: Any, description: str):
        super().__init__(description)
        self.description = description
        self.node = node


class SprigTypeError(SprigError):
    """ Raised when an operand or callable has the wrong runtime kind"""

    def __init__(self, expected: str, found: Any, site: Any = None):
        from sprig.types.printer import display

        super().__init__(f"Expected {expected}, found {display(found)!r}")
        self.expected = expected
        self.found = found
        self.site = site


class SprigArityError(SprigError):
    """ Raised when a procedure receives the wrong number of arguments"""

    def __init__(self, expected: int, found: int, site: Any = None, at_least: bool = False):
        qualifier = "at least " if at_least else ""
        super().__init__(f"Expected {qualifier}{expected} argument(s), found {found}")
        self.expected = expected
        self.found = found
        self.site = site


class SprigRecursionError(SprigError):
    """ Raised when nested closure calls exceed the configured depth limit"""

    def __init__(self, limit: int):
        super().__init__(f"Recursion limit of {limit} exceeded")
        self.limit = limit
