from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Literal

from risp import SExpression, LispValue
from risp.builtin.env_builtin import register
from risp.errors import RispError
from risp.evaluation.evaluator import evaluate
from risp.reader.parser import lex, TokenStream
from risp.types.environment import Environment
from risp.types.nil import Nil

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Host loader for risp code.

    Owns one global Environment, pre-populated with the primitives, and feeds
    top-level forms to the evaluator one at a time, in order. Independent
    interpreters never share bindings.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        self.env: Environment = Environment()
        register(self.env)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            try:
                # Lazy import to avoid circular imports
                from risp.modules.prelude_loader import load_prelude
                load_prelude(self)
            except FileNotFoundError as e:
                logger.warning("starting without prelude: %s", e)
        else:
            self.eval_prelude(prelude)

    def eval_form(self, expr: SExpression) -> LispValue:
        """Evaluate one top-level form against the global environment."""
        try:
            return evaluate(expr, self.env)
        except RispError as e:
            if e.form is None:
                e.form = expr
            raise

    def eval_forms(self, forms: Iterable[SExpression]) -> LispValue:
        """Evaluate forms in order, stopping at the first failure; return the last value."""
        result: LispValue = Nil
        for expr in forms:
            result = self.eval_form(expr)
        return result

    def eval_prelude(self, code: str) -> None:
        self.eval(code)

    def eval(self, code: str) -> LispValue:
        """Read and evaluate every form in `code`; the value of the last one, or () if none."""
        return self.eval_forms(TokenStream(lex(code)).parse_all())

    def eval_file(self, path: str | Path) -> LispValue:
        p = Path(path)
        logger.info("loading %s", p)
        return self.eval(p.read_text(encoding='utf-8'))
