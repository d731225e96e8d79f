"""Runtime environment for risp.

The Environment stores bindings of Symbols to evaluated Lisp values and supports
nested lexical scopes via an `outer` link. The frame without an outer link is the
global frame: it holds the primitives and every top-level `def`.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from risp import LispValue
from risp.errors import RispInvalidSymbol, RispUnboundSymbol
from risp.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this exact frame, overwriting any previous binding here.

        Raises RispInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise RispInvalidSymbol(f"Cannot define {name!r}: not a symbol")
        self.vars[name] = value

    def child(self) -> Environment:
        """Return a new, empty frame whose parent is this one."""
        return Environment(outer=self)

    @property
    def root(self) -> Environment:
        """The global frame at the end of the chain."""
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def frames(self) -> Iterator[Environment]:
        env: Optional[Environment] = self
        while env is not None:
            yield env
            env = env.outer

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `symbol`."""
        for env in self.frames():
            if symbol in env.vars:
                return env
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost frame first.

        Raises RispUnboundSymbol if no frame up to the root binds it.
        """
        for env in self.frames():
            try:
                return env.vars[name]
            except KeyError:
                continue
        raise RispUnboundSymbol(f"Unbound symbol '{name}'")

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def __contains__(self, name: Symbol) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging; the global frame is summarised."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            for env in self.frames():
                if env.outer is None:
                    chain.append(f"<global: {len(env.vars)} bindings>")
                    continue
                env_buf = StringIO()
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
