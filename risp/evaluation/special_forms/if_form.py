from risp import EvaluatorFn
from risp import SExpression, LispValue
from risp.errors import RispArityError, located
from risp.types.environment import Environment
from risp.evaluation.special_forms.progn_form import eval_body


def is_true(value: LispValue) -> bool:
    # Only an explicit #f is false; (), 0 and "" are all true.
    return value is not False


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(if test then else...)

    Exactly one branch is evaluated. Without an else branch a false test yields #f;
    several else forms run in sequence and the last one gives the value.
    """
    if len(tail) < 2:
        raise RispArityError("if requires a condition and a then-expression")

    with located(1):
        cond = evaluate_fn(tail[0], env)

    if is_true(cond):
        with located(2):
            return evaluate_fn(tail[1], env)
    elif len(tail) > 2:
        return eval_body(tail[2:], env, evaluate_fn, offset=3)
    else:
        return False
