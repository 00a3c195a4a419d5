from clojette import EvaluatorFn
from clojette import SExpression, LispValue
from clojette.errors import MalformedForm
from clojette.types.environment import Environment
from clojette.types.literal import FALSE, is_truthy


def if_form(
    tail: tuple[SExpression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) not in (2, 3):
        raise MalformedForm(
            "if requires a condition, a then-expression and an optional else-expression"
        )

    cond = evaluate_fn(tail[0], env)
    # only false and nil are falsy; 0, "" and empty sequences are truthy
    if is_truthy(cond):
        return evaluate_fn(tail[1], env)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env)
    else:
        return FALSE
