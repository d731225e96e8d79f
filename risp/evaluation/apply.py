"""Application engine for risp.

This module centralizes what happens once the head of a form has been evaluated:
- Macro: operands are bound unevaluated, the body produces an expansion, and the
  expansion is evaluated again in the caller's environment.
- Closure: operands are evaluated left to right, bound in a child of the
  captured environment, and the body runs there.
- Primitive: operands are evaluated and the host function is called.
Anything else in head position raises RispNotCallable.
"""

from __future__ import annotations

import logging
from typing import Sequence

from risp import LispValue, SExpression, EvaluatorFn
from risp.errors import RispError, RispNotCallable, located
from risp.types.environment import Environment
from risp.types.lambda_fn import Closure, Lambda, Macro, Primitive
from risp.types.symbol import Symbol
from risp.evaluation.special_forms.progn_form import eval_body

logger = logging.getLogger(__name__)


def evaluate_operands(
    operands: Sequence[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> list[LispValue]:
    """Evaluate operands eagerly, left to right."""
    args = []
    for index, operand in enumerate(operands, start=1):
        with located(index):
            args.append(evaluate_fn(operand, env))
    return args


def run_body(fn: Lambda, args: Sequence[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Bind `args` to `fn`'s parameters and evaluate its body, returning the last value.

    Argument count errors belong to the call site. An error from inside the body
    is framed over `fn`'s defining form, then located at the head of the call.
    """
    call_env = fn.extend_env(args)
    try:
        # body forms follow the keyword and the parameter list
        return eval_body(fn.body, call_env, evaluate_fn, offset=2)
    except RispError as e:
        e.frame(fn.source()).at(0)
        raise


def expand(macro: Macro, operands: Sequence[SExpression], evaluate_fn: EvaluatorFn) -> SExpression:
    """Run the macro transformer on raw operands and return the expansion, unevaluated."""
    expansion = run_body(macro, operands, evaluate_fn)
    if logger.isEnabledFor(logging.DEBUG):
        from risp.debug_utils.pprint import to_source

        logger.debug(
            "macro %s expanded %s -> %s",
            macro.params,
            to_source(tuple(operands)),
            to_source(expansion),
        )
    return expansion


def expand_1(form: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> SExpression:
    """Expand `form` once if its head is a symbol bound to a macro in `env`.

    The head is looked up, never evaluated, so nothing else runs. Any other
    form is returned unchanged.
    """
    if isinstance(form, tuple) and form and isinstance(form[0], Symbol):
        frame = env.find(form[0])
        if frame is not None:
            callee = frame.vars[form[0]]
            if isinstance(callee, Macro):
                return expand(callee, form[1:], evaluate_fn)
    return form


def apply(
    callee: LispValue,
    operands: Sequence[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply an evaluated head to the unevaluated operands of a form evaluated in `env`."""
    match callee:
        case Macro():
            expansion = expand(callee, operands, evaluate_fn)
            try:
                return evaluate_fn(expansion, env)
            except RispError as e:
                e.frame(expansion).at(0)
                raise
        case Closure():
            args = evaluate_operands(operands, env, evaluate_fn)
            return run_body(callee, args, evaluate_fn)
        case Primitive():
            args = evaluate_operands(operands, env, evaluate_fn)
            return callee(args)
        case _:
            from risp.debug_utils.pprint import to_source

            raise RispNotCallable(f"Cannot apply non-function {to_source(callee)}").at(0)
