"""Error hierarchy for risp.

Every error raised while reading or evaluating derives from RispError. Errors
carry a `path`: the operand indices leading from the top-level form down to the
sub-form that failed. The evaluator extends the path as the error propagates
outward; the host uses it to point at the failing sub-form.

When an error leaves a form the caller never wrote (a function definition or a
macro expansion), that form and the path into it are pushed onto `frames` and
the path starts again at the call site.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator


class RispError(Exception):
    """ Base class for all risp errors"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        # innermost index first; the top-level form's index is appended last
        self.path: list[int] = []
        # (form, path) pairs already left behind, innermost first
        self.frames: list[tuple[Any, list[int]]] = []
        # the top-level form being evaluated, filled in by the host loader
        self.form = None

    def at(self, index: int) -> RispError:
        """Record that the error happened in operand `index` of the enclosing form."""
        self.path.append(index)
        return self

    def frame(self, form: Any) -> RispError:
        """Close the current path as a frame over `form` and start a new one."""
        self.frames.append((form, self.path))
        self.path = []
        return self


class RispInvalidSymbol(RispError):
    """ Raised when a symbol is required but something else was given"""


class RispUnboundSymbol(RispError):
    """ Raised when a symbol is used before it is bound"""


class RispSyntaxError(RispError):
    """ Raised for malformed source text or malformed parameter lists"""


class RispArityError(RispError):
    """ Raised when the number of arguments passed to a callable or special form is incorrect"""


class RispTypeError(RispError):
    """ Raised when a primitive is applied to a value of the wrong shape"""


class RispEmptyListError(RispError):
    """ Raised when first/rest is applied to the empty list"""


class RispNotCallable(RispError):
    """ Raised when the head of an application is not a closure, macro or primitive"""


@contextmanager
def located(index: int) -> Iterator[None]:
    """Tag any RispError raised in the block with operand `index` of the current form."""
    try:
        yield
    except RispError as e:
        e.at(index)
        raise
