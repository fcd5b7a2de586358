# Core type aliases for the tinyscheme data model.
# Runtime data is represented with a handful of small classes (Symbol, Pair,
# Closure, Primitive), the Nil singleton, and plain Python floats for numbers.
#
# Naming guidance:
# - SExpression: Use in reader/parser code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any`; code and data share one representation.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms and values are the same objects
SExpression = LispValue

# Evaluator function type: passed to special forms and the apply engine
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"
