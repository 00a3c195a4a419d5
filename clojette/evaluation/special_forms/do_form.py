from typing import Sequence

from clojette import EvaluatorFn
from clojette import SExpression, LispValue
from clojette.errors import MalformedForm
from clojette.types.environment import Environment


def evaluate_sequence(
    forms: Sequence[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Evaluate `forms` in order and return the value of the last one."""
    if not forms:
        raise MalformedForm("do requires at least one form")
    for e in forms[:-1]:
        evaluate_fn(e, env)
    return evaluate_fn(forms[-1], env)


def do_form(
    tail: tuple[SExpression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    return evaluate_sequence(tail, env, evaluate_fn)
