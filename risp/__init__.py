# Core type aliases for risp's data model.
# Code and runtime values share one representation built from plain Python types:
# lists are tuples, the empty tuple is nil, numbers are int/float, strings are str,
# booleans are bool. Symbols, closures, macros and primitives have their own classes.
#
# Naming guidance:
# - SExpression: use in reader/macro code to denote syntactic forms (code-as-data).
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both resolve to `Any`; they are interchangeable because the language is homoiconic.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type, threaded through special forms and application
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.3.0"
