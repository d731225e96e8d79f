from __future__ import annotations
import os
from pathlib import Path
from typing import Optional, TextIO


# Resolve installation dir (risp package directory)
_RISP_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIR = _RISP_DIR / 'prelude'


def get_prelude_root() -> Path:
    """Directory holding prelude.lisp; RISP_PRELUDE_PATH may name it or the file itself."""
    raw = os.environ.get('RISP_PRELUDE_PATH', '').strip()
    if not raw:
        return _DEFAULT_PRELUDE_DIR
    p = Path(raw)
    return p if p.is_dir() else p.parent


def get_recursion_limit() -> Optional[int]:
    """Python recursion limit requested through RISP_RECURSION_LIMIT, if any."""
    raw = os.environ.get('RISP_RECURSION_LIMIT', '').strip()
    if not raw:
        return None
    try:
        limit = int(raw)
    except ValueError:
        raise ValueError(f"RISP_RECURSION_LIMIT must be an integer, got {raw!r}") from None
    if limit <= 0:
        raise ValueError(f"RISP_RECURSION_LIMIT must be positive, got {limit}")
    return limit


def color_enabled(stream: TextIO) -> bool:
    """ANSI colour only for terminals, and never when NO_COLOR is set."""
    if os.environ.get('NO_COLOR'):
        return False
    isatty = getattr(stream, 'isatty', None)
    return bool(isatty and isatty())
