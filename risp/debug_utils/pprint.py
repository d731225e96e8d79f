"""Rendering of values as source text and of errors as annotated forms."""

from __future__ import annotations

from typing import Sequence

from risp import LispValue
from risp.errors import RispError
from risp.types.symbol import Symbol

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_ERROR = "\033[91m"
COLOR_GUTTER = "\033[94m"

_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\t": "\\t"}


def to_source(obj: LispValue) -> str:
    """Render a value the way the reader would accept it back, where possible."""
    if obj is True:
        return "#t"
    if obj is False:
        return "#f"
    if isinstance(obj, Symbol):
        return obj.id
    if isinstance(obj, str):
        return '"' + "".join(_ESCAPES.get(c, c) for c in obj) + '"'
    if isinstance(obj, tuple):
        return "(" + " ".join(to_source(x) for x in obj) + ")"
    return str(obj)


def _paint(text: str, color: str, enabled: bool) -> str:
    return f"{color}{text}{RESET}" if enabled else text


def locate(form: LispValue, path: Sequence[int]) -> tuple[str, int, int]:
    """
    Render `form` and find the span of the sub-form reached by `path`.

    `path` lists operand indices outermost first. Returns the rendered text and
    the start/end offsets of the sub-form within it. A path that runs past the
    structure of `form` stops at the deepest sub-form it can reach.
    """
    if not path or not isinstance(form, tuple) or path[0] >= len(form):
        text = to_source(form)
        return text, 0, len(text)

    offset = path[0]
    start = end = 0
    parts = ["("]
    width = 1
    for index, item in enumerate(form):
        if index:
            parts.append(" ")
            width += 1
        if index == offset:
            text, sub_start, sub_end = locate(item, path[1:])
            start, end = width + sub_start, width + sub_end
        else:
            text = to_source(item)
        parts.append(text)
        width += len(text)
    parts.append(")")
    return "".join(parts), start, end


def render_error(form: LispValue, error: RispError, color: bool = True) -> str:
    """Format `error` with every form it passed through underlined, innermost first.

    Function definitions and macro expansions the error left come first, then
    the top-level `form`. With no form (reader errors) only the message line is
    produced.
    """
    headline = f"{_paint('Error', COLOR_ERROR, color)}: {error.message}"
    if form is None:
        return headline
    gutter = _paint("|", COLOR_GUTTER, color)
    lines = [headline]
    for frame_form, path in [*error.frames, (form, error.path)]:
        text, start, end = locate(frame_form, list(reversed(path)))
        lines.append(f" {gutter} {text}")
        lines.append(f" {gutter} {' ' * start}{_paint('^' * max(end - start, 1), COLOR_ERROR, color)}")
    return "\n".join(lines)
