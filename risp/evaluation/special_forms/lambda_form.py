from risp import EvaluatorFn
from risp import SExpression, LispValue
from risp.errors import RispArityError, located
from risp.types.bind import ParamList
from risp.types.environment import Environment
from risp.types.lambda_fn import Closure, Lambda, Macro


def _make(
    cls: type[Lambda],
    tail: list[SExpression],
    env: Environment,
) -> Lambda:
    # (fn (params) body...) captures the current environment; the body is
    # kept verbatim and only evaluated when the result is applied.
    if len(tail) < 2:
        raise RispArityError(f"{cls.keyword} requires a parameter list and at least one body form")

    with located(1):
        params = ParamList.parse(tail[0])
    return cls(params, tuple(tail[1:]), env)


def fn_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    return _make(Closure, tail, env)


def macro_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    return _make(Macro, tail, env)
