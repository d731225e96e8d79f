from risp import EvaluatorFn
from risp import SExpression, LispValue
from risp.errors import located
from risp.types.environment import Environment
from risp.types.nil import Nil


def eval_body(
    forms: tuple[SExpression, ...] | list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    offset: int = 0,
) -> LispValue:
    """Evaluate forms in order and return the last value; `()` for no forms.

    `offset` is the operand index of the first form within its enclosing form.
    """
    result: LispValue = Nil
    for index, form in enumerate(forms, start=offset):
        with located(index):
            result = evaluate_fn(form, env)
    return result


def begin_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(begin form...)"""
    return eval_body(tail, env, evaluate_fn, offset=1)
