from __future__ import annotations
import logging
from typing import Callable

from clojette import SExpression, LispValue
from clojette.builtins import register
from clojette.evaluation.evaluator import evaluate
from clojette.reader.parser import read_forms
from clojette.types.environment import Environment
from clojette.types.literal import NIL
from clojette.types.seq import ListSeq
from clojette.types.symbol import Symbol

logger = logging.getLogger(__name__)

DO = Symbol("do")


class Interpreter:
    """
    Orchestrates reading and evaluating Clojette code.
    Keeps one global Environment alive across calls, so definitions made by
    one chunk of input are visible to the next.
    """

    def __init__(
        self,
        eval_fn: Callable[[SExpression, Environment], LispValue] | None = None,
        prelude: str | None = None,
    ):
        self.eval_fn = eval_fn or evaluate
        self.env: Environment = Environment()
        register(self.env)

        if prelude:
            self.eval(prelude)

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code`, returning the last value (nil if none)."""
        result: LispValue = NIL
        for expr in read_forms(code):
            logger.debug("read %r", expr)
            result = self.eval_fn(expr, self.env)
            logger.debug("evaluated to %r", result)
        return result

    def eval_line(self, line: str) -> LispValue:
        """Evaluate one line of console input as an implicit do block."""
        forms = read_forms(line)
        if not forms:
            return NIL
        logger.debug("read %d form(s) from line", len(forms))
        return self.eval_fn(ListSeq([DO, *forms]), self.env)
