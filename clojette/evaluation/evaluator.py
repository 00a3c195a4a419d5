"""Core evaluator for the Clojette interpreter.

Rules are tried in a fixed order and the first match wins:
self-evaluating values, variable references, special forms, application.
"""

from __future__ import annotations

from clojette import SExpression, LispValue
from clojette.errors import UnknownExpression
from clojette.evaluation.apply import apply
from clojette.evaluation.special_forms import SPECIAL_FORMS
from clojette.types.environment import Environment
from clojette.types.literal import Literal
from clojette.types.seq import ListSeq, VectorSeq
from clojette.types.symbol import Keyword, Symbol

SELF_EVALUATING = (int, float, str, Keyword, Literal, VectorSeq)


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env` and return its value."""
    match expr:
        case bool():
            # bool is an int subclass but never a Clojette value
            raise UnknownExpression(f"Unknown expression {expr!r}")
        case _ if isinstance(expr, SELF_EVALUATING):
            return expr
        case Symbol():
            return env.lookup(expr)
        case ListSeq() if not expr:
            return expr
        case ListSeq():
            head, tail_args = expr.head, expr.tail
            # --- Special forms handling ---
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](tail_args, env, evaluate)

            # --- Application ---
            proc = evaluate(head, env)
            args = [evaluate(arg, env) for arg in tail_args]
            return apply(proc, args, env, evaluate)

    raise UnknownExpression(f"Unknown expression {expr!r}")
