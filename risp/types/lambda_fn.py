"""Callable values: closures, macros and primitives.

The set of callables is closed. The evaluator matches on these three classes;
Closure and Macro share a shape and differ only in their tag (the class), which
decides whether operands are evaluated before the call and whether the result
is evaluated again afterwards.
"""

from __future__ import annotations

from typing import Callable, ClassVar, Sequence

from risp import SExpression, LispValue
from risp.types.bind import ParamList, bind_arguments, match_arguments
from risp.types.environment import Environment
from risp.types.symbol import Symbol


class Lambda:
    """Parameter list, body forms and the environment captured at creation."""

    __slots__ = ("params", "body", "env")
    keyword: ClassVar[str] = "fn"

    def __init__(self, params: ParamList, body: tuple[SExpression, ...], env: Environment):
        self.params: ParamList = params
        self.body: tuple[SExpression, ...] = body
        self.env: Environment = env

    def extend_env(self, args: Sequence[LispValue]) -> Environment:
        """Bind `args` to the parameters in a fresh child of the captured environment."""
        return bind_arguments(self.params, args, self.env)

    def source(self) -> tuple[SExpression, ...]:
        """The defining form, e.g. (fn (x) (+ x 1))."""
        return (Symbol(self.keyword), self.params.to_form()) + self.body

    def __str__(self) -> str:
        from risp.debug_utils.pprint import to_source

        return to_source(self.source())

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.params}>"


class Closure(Lambda):
    """Created by `fn`: called with evaluated arguments, returns a value."""

    __slots__ = ()
    keyword = "fn"


class Macro(Lambda):
    """Created by `macro`: called with unevaluated operands, returns code to evaluate again."""

    __slots__ = ()
    keyword = "macro"


class Primitive:
    """A host function with a lambda list, invoked with evaluated arguments."""

    __slots__ = ("name", "params", "fn")

    def __init__(self, name: str, params: ParamList, fn: Callable[..., LispValue]):
        self.name = name
        self.params = params
        self.fn = fn

    def __call__(self, args: Sequence[LispValue]) -> LispValue:
        return self.fn(*match_arguments(self.params, args))

    def __str__(self) -> str:
        return f"<primitive {self.name} {self.params}>"

    __repr__ = __str__
