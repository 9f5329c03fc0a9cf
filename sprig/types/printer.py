"""Rendering of values and syntax tree nodes for REPLs and error messages."""

from __future__ import annotations

import math

from sprig import LispValue
from sprig.types.nil import NilType
from sprig.types.symbol import Symbol
from sprig.types.procedure import Builtin, Closure


def format_number(n: float) -> str:
    if math.isnan(n):
        return "nan"
    if math.isinf(n):
        return "inf" if n > 0 else "-inf"
    if n == int(n) and abs(n) < 1e16:
        return str(int(n))
    return repr(n)


def display(obj: LispValue) -> str:
    """Render a value or a syntax node using read syntax where one exists.

    - Numbers render as decimals (whole numbers without a fractional part)
    - Bools render as true/false, Nil as nil
    - Builtins render as their registered name
    - Closures render as their declared name ("" when anonymous)
    - Lists render as space-separated parenthesized sequences
    """
    if isinstance(obj, bool):
        return "true" if obj else "false"
    if isinstance(obj, (int, float)):
        return format_number(float(obj))
    if isinstance(obj, NilType):
        return "nil"
    if isinstance(obj, (Symbol, Builtin, Closure)):
        return str(obj)
    if isinstance(obj, list):
        return "(" + " ".join(display(x) for x in obj) + ")"
    return repr(obj)
