"""The empty list.

Lists are immutable tuples, so the empty tuple is both the terminal list value
and nil. CPython keeps a single empty tuple, which makes `Nil` a singleton.
"""

from __future__ import annotations

from risp import LispValue

Nil: tuple = ()

def is_list(value: LispValue) -> bool:
    return isinstance(value, tuple)

