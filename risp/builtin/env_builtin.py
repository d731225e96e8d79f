"""Built-in primitives for the risp runtime environment.

This module defines the list primitives the prelude is written against, a little
arithmetic, and `register`, which installs them all in a global environment.
Each primitive is a plain Python function; its lambda list (and so its arity
checking) is declared next to it in `PRIMITIVES`.
"""
from __future__ import annotations

from risp import LispValue
from risp.errors import RispEmptyListError, RispTypeError
from risp.types.bind import ParamList
from risp.types.environment import Environment
from risp.types.lambda_fn import Primitive
from risp.types.nil import is_list
from risp.types.symbol import Symbol


def _type_name(value: LispValue) -> str:
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Symbol):
        return "symbol"
    if isinstance(value, tuple):
        return "list"
    return type(value).__name__.lower()


def _expect_list(name: str, value: LispValue, position: int = 1) -> tuple:
    if not is_list(value):
        raise RispTypeError(f"{name} expects a list, got {_type_name(value)}").at(position)
    return value


def _expect_number(name: str, value: LispValue, position: int) -> int | float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise RispTypeError(f"{name} expects numbers, got {_type_name(value)}").at(position)
    return value


# -------------------------------
# Lists
# -------------------------------
def first(lst: LispValue) -> LispValue:
    """Head of a non-empty list."""
    lst = _expect_list("first", lst)
    if not lst:
        raise RispEmptyListError("first of empty list").at(1)
    return lst[0]


def rest(lst: LispValue) -> tuple:
    """Everything after the head, as a new (possibly empty) list."""
    lst = _expect_list("rest", lst)
    if not lst:
        raise RispEmptyListError("rest of empty list").at(1)
    return lst[1:]


def cons(value: LispValue, lst: LispValue) -> tuple:
    """New list with `value` in front; `lst` itself is untouched."""
    return (value,) + _expect_list("cons", lst, position=2)


def list_builtin(elems: tuple) -> tuple:
    return elems


def concat(lsts: tuple) -> tuple:
    """All elements of every argument list, in order."""
    result: tuple = ()
    for position, lst in enumerate(lsts, start=1):
        result += _expect_list("concat", lst, position)
    return result


def length(lst: LispValue) -> int:
    return len(_expect_list("length", lst))


def is_list_builtin(value: LispValue) -> bool:
    return is_list(value)


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality: lists element-wise, atoms by value.

    A list never equals a non-list and a boolean never equals a number; ints and
    floats compare numerically. Anything else (closures, primitives) compares by identity.
    """
    if a is b:
        return True
    if isinstance(a, tuple) or isinstance(b, tuple):
        if not (isinstance(a, tuple) and isinstance(b, tuple)) or len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, bool) or isinstance(b, bool):
        return False
    if isinstance(a, (int, float)) and isinstance(b, (int, float)):
        return a == b
    if type(a) is not type(b):
        return False
    return a == b


def equals(a: LispValue, b: LispValue) -> bool:
    return is_equal(a, b)


# -------------------------------
# Arithmetic
# -------------------------------
def add(terms: tuple) -> int | float:
    """Sum of all arguments; 0 with none."""
    total = 0
    for position, term in enumerate(terms, start=1):
        total += _expect_number("+", term, position)
    return total


def mul(factors: tuple) -> int | float:
    """Product of all arguments; 1 with none."""
    product = 1
    for position, factor in enumerate(factors, start=1):
        product *= _expect_number("*", factor, position)
    return product


def sub(minuend: LispValue, subtrahends: tuple) -> int | float:
    """The first argument minus the sum of the rest; (- x) is x."""
    result = _expect_number("-", minuend, 1)
    for position, sub_term in enumerate(subtrahends, start=2):
        result -= _expect_number("-", sub_term, position)
    return result


PRIMITIVES = {
    "first": ("lst", first),
    "rest": ("lst", rest),
    "cons": ("value lst", cons),
    "list": ("&rest elems", list_builtin),
    "concat": ("&rest lsts", concat),
    "length": ("lst", length),
    "is-list": ("value", is_list_builtin),
    "=": ("a b", equals),
    "+": ("&rest terms", add),
    "*": ("&rest factors", mul),
    "-": ("min &rest subs", sub),
}


def register(env: Environment) -> None:
    """Install every primitive in `env`, normally the global frame."""
    env.update(
        {
            Symbol(name): Primitive(name, ParamList.of(params), fn)
            for name, (params, fn) in PRIMITIVES.items()
        }
    )
