from clojette import EvaluatorFn
from clojette import SExpression, LispValue
from clojette.errors import MalformedForm
from clojette.types.environment import Environment
from clojette.types.procedure import Compound
from clojette.types.seq import VectorSeq
from clojette.types.symbol import Symbol


def lambda_form(
    tail: tuple[SExpression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (fn [params] body...): the body is an implicit do, so it may hold
    # several forms but never none.
    if not tail:
        raise MalformedForm("fn requires a parameter vector")

    params, *body_forms = tail
    if not isinstance(params, VectorSeq):
        raise MalformedForm(f"fn parameters must be a vector, got {params!r}")
    for p in params:
        if not isinstance(p, Symbol):
            raise MalformedForm(f"fn parameter must be a symbol, got {p!r}")
    if not body_forms:
        raise MalformedForm("fn requires at least one body form")

    return Compound(tuple(params), tuple(body_forms), env)
