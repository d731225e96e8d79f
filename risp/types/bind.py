from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from risp import LispValue, SExpression
from risp.types.environment import Environment
from risp.errors import RispArityError, RispInvalidSymbol, RispSyntaxError
from risp.types.symbol import Symbol

REST = Symbol("&rest")


@dataclass(frozen=True)
class ParamList:
    """
    Parsed lambda list shared by closures, macros and primitives.

    Supports:
    - Positional required parameters
    - &rest capturing every remaining supplied argument as one list

    `&rest` must be second to last, followed by exactly one name.
    """

    positional: tuple[Symbol, ...]
    rest: Symbol | None = None

    @classmethod
    def parse(cls, formals: SExpression) -> ParamList:
        if not isinstance(formals, tuple):
            raise RispSyntaxError(f"Parameter list must be a list, got {formals!r}")
        for index, formal in enumerate(formals):
            if not isinstance(formal, Symbol):
                raise RispInvalidSymbol(f"Parameter must be a symbol, got {formal!r}").at(index)
        if REST not in formals:
            return cls(formals)
        rest_index = formals.index(REST)
        if rest_index != len(formals) - 2:
            raise RispSyntaxError("&rest must be second to last in parameter list").at(rest_index)
        return cls(formals[:rest_index], formals[rest_index + 1])

    @classmethod
    def of(cls, spec: str) -> ParamList:
        """Build from a space-separated spec such as "lst" or "min &rest subs"."""
        return cls.parse(tuple(Symbol(name) for name in spec.split()))

    @property
    def names(self) -> tuple[Symbol, ...]:
        """Every bound name, in binding order."""
        if self.rest is None:
            return self.positional
        return self.positional + (self.rest,)

    def to_form(self) -> tuple[Symbol, ...]:
        if self.rest is None:
            return self.positional
        return self.positional + (REST, self.rest)

    def __str__(self) -> str:
        parts = [str(p) for p in self.positional]
        if self.rest is not None:
            parts += [str(REST), str(self.rest)]
        return "(" + " ".join(parts) + ")"


def match_arguments(params: ParamList, supplied: Sequence[LispValue]) -> list[LispValue]:
    """
    Check `supplied` against `params` and return one value per bound name.

    Positional parameters take the leading arguments; with a rest parameter
    the trailing arguments are collected into one list (a tuple, possibly empty).
    Raises RispArityError when too few arguments are supplied, or when the
    count differs and no rest parameter is declared.
    """
    required = len(params.positional)
    provided = len(supplied)
    if provided < required:
        missing = [str(s) for s in params.positional[provided:]]
        raise RispArityError(
            f"Too few arguments for {params}: expected {required}, got {provided}; missing {missing}"
        )
    if params.rest is None:
        if provided > required:
            raise RispArityError(
                f"Too many arguments for {params}: expected {required}, got {provided}"
            )
        return list(supplied)
    return [*supplied[:required], tuple(supplied[required:])]


def bind_arguments(
    params: ParamList,
    supplied: Sequence[LispValue],
    closure_env: Environment,
) -> Environment:
    """
    Single source of truth for lambda-list binding.

    Returns a new Environment whose outer is `closure_env`, populated with
    the bindings for evaluating the callee body.
    """
    values = match_arguments(params, supplied)
    local_env = closure_env.child()
    for name, value in zip(params.names, values):
        local_env.define(name, value)
    return local_env
