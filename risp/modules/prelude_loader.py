from __future__ import annotations
import logging
from pathlib import Path
from typing import Protocol

from risp.config import get_prelude_root

logger = logging.getLogger(__name__)

PRELUDE_FILE = 'prelude.lisp'


class _HasEvalPrelude(Protocol):
    def eval_prelude(self, code: str) -> None: ...


def resolve_prelude() -> Path:
    p = get_prelude_root() / PRELUDE_FILE
    if not p.is_file():
        raise FileNotFoundError(f"Cannot find {PRELUDE_FILE} in RISP_PRELUDE_PATH ({p.parent})")
    return p


def load_prelude(itp: _HasEvalPrelude) -> None:
    p = resolve_prelude()
    logger.info("loading prelude %s", p)
    itp.eval_prelude(p.read_text(encoding='utf-8'))
