import logging

from risp import EvaluatorFn
from risp import SExpression, LispValue
from risp.errors import RispArityError, RispInvalidSymbol, located
from risp.types.environment import Environment
from risp.types.symbol import Symbol

logger = logging.getLogger(__name__)


def _name_and_value(
    keyword: str,
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> tuple[Symbol, LispValue]:
    if len(tail) != 2:
        raise RispArityError(f"{keyword} requires exactly 2 arguments")
    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise RispInvalidSymbol(f"{keyword} must have a symbol in 1st place, got {name!r}").at(1)
    with located(2):
        value = evaluate_fn(val_expr, env)
    return name, value


def def_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (def name value)
    The value is evaluated in the current environment but always bound in the
    global frame, however deeply nested the def is. Returns the value.
    """
    name, value = _name_and_value("def", tail, env, evaluate_fn)
    env.root.define(name, value)
    logger.debug("def %s = %r", name, value)
    return value


def set_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (set name value)
    Binds in the innermost frame, shadowing any outer binding. Returns the value.
    """
    name, value = _name_and_value("set", tail, env, evaluate_fn)
    env.define(name, value)
    return value
