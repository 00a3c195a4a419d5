from clojette import SExpression, LispValue, EvaluatorFn
from clojette.errors import MalformedForm
from clojette.types.environment import Environment


def quote_form(
    tail: tuple[SExpression, ...], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise MalformedForm("quote expects exactly 1 argument")
    return tail[0]
