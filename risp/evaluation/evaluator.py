"""Core evaluator for the risp interpreter.

A plain recursive tree walk: atoms evaluate to themselves, symbols are looked up,
special forms are dispatched by name, and everything else is an application
handed to `apply`, which is also where macro expansion happens.
"""

from __future__ import annotations

from risp import SExpression, LispValue
from risp.errors import located
from risp.types.environment import Environment
from risp.types.symbol import Symbol
from risp.evaluation.apply import apply
from risp.evaluation.special_forms import SPECIAL_FORMS


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate one expression in `env`.

    Raises a RispError subclass on failure; its `path` locates the failing
    operand within `expr`.
    """
    match expr:
        case Symbol():
            return env.lookup(expr)

        case tuple((head, *operands)):
            # --- Special forms handling ---
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](operands, env, evaluate)

            with located(0):
                callee = evaluate(head, env)
            return apply(callee, operands, env, evaluate)

    # --- Atoms and the empty list return as-is ---
    return expr
