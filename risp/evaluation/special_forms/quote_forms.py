from risp import SExpression, LispValue, EvaluatorFn
from risp.errors import RispArityError
from risp.types.environment import Environment


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """(quote expr): return expr as data, without evaluating anything in it."""
    if len(tail) != 1:
        raise RispArityError("quote expects exactly 1 argument")
    return tail[0]
