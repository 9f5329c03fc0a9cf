# Core type aliases for Sprig's data model.
# Syntax trees are built from plain Python types: Symbol for identifiers,
# float for numeric literals and list for compound forms.
# Runtime values are float, bool, Nil, Builtin and Closure.
#
# Naming guidance:
# - SExpression: Use in reader/special-form code to denote syntax tree nodes.
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Syntax tree node alias
SExpression = Any

# Evaluator function type: passed into special forms so they can recurse
EvaluatorFn = Callable[..., LispValue]
