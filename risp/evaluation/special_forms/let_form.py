from risp import EvaluatorFn
from risp import SExpression, LispValue
from risp.errors import RispArityError, RispInvalidSymbol, RispSyntaxError, located
from risp.types.environment import Environment
from risp.types.symbol import Symbol
from risp.evaluation.special_forms.progn_form import eval_body


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (let ((name expr) ...) body...)
    Every expr is evaluated in the enclosing environment, then all names are
    bound together in one new frame in which the body runs.
    """
    if len(tail) < 2:
        raise RispArityError("let requires a binding list and at least one body form")

    bindings = tail[0]
    if not isinstance(bindings, tuple):
        raise RispSyntaxError(f"let bindings must be a list, got {bindings!r}").at(1)

    values: list[tuple[Symbol, LispValue]] = []
    with located(1):
        for index, binding in enumerate(bindings):
            with located(index):
                if not isinstance(binding, tuple) or len(binding) != 2:
                    raise RispSyntaxError("let binding must be a (name value) pair")
                name, expr = binding
                if not isinstance(name, Symbol):
                    raise RispInvalidSymbol(f"let binding name must be a symbol, got {name!r}").at(0)
                with located(1):
                    values.append((name, evaluate_fn(expr, env)))

    local_env = env.child()
    for name, value in values:
        local_env.define(name, value)
    return eval_body(tail[1:], local_env, evaluate_fn, offset=2)
