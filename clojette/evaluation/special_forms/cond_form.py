from clojette import EvaluatorFn
from clojette import SExpression, LispValue
from clojette.errors import MalformedCond
from clojette.types.environment import Environment
from clojette.types.literal import FALSE
from clojette.types.seq import ListSeq
from clojette.types.symbol import Keyword, Symbol

IF = Symbol("if")
ELSE_MARKERS = (Symbol("else"), Keyword("else"))


def is_else(predicate: SExpression) -> bool:
    return predicate in ELSE_MARKERS


def cond_to_if(clauses: tuple[SExpression, ...]) -> SExpression:
    """Rewrite flat (pred action ...) pairs into nested if forms.

    An else/:else marker is only allowed as the final predicate. With no
    clauses left the result is false.
    """
    if len(clauses) % 2:
        raise MalformedCond("cond requires an even number of forms")
    pairs = [clauses[i:i + 2] for i in range(0, len(clauses), 2)]

    expanded: SExpression = FALSE
    for index in range(len(pairs) - 1, -1, -1):
        predicate, action = pairs[index]
        if is_else(predicate):
            if index != len(pairs) - 1:
                raise MalformedCond("cond: else clause not last")
            expanded = action
        else:
            expanded = ListSeq([IF, predicate, action, expanded])
    return expanded


def cond_form(
    tail: tuple[SExpression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    return evaluate_fn(cond_to_if(tail), env)
