from clojette import EvaluatorFn
from clojette import SExpression, LispValue
from clojette.errors import MalformedForm
from clojette.types.environment import Environment
from clojette.types.seq import ListSeq, VectorSeq
from clojette.types.symbol import Symbol, OK

FN = Symbol("fn")


def def_form(
    tail: tuple[SExpression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (def name value)
    Binds in the current frame only.
    """
    if len(tail) != 2:
        raise MalformedForm("def requires exactly 2 arguments: (def name value)")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise MalformedForm(f"def name must be a symbol, got {name!r}")
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return OK


def defn_to_def(tail: tuple[SExpression, ...]) -> ListSeq:
    """Rewrite (defn name "doc"? [params] body...) as (def name (fn [params] body...))."""
    if not tail:
        raise MalformedForm("defn requires a name")
    name, *rest = tail
    # optional docstring
    if len(rest) >= 2 and isinstance(rest[0], str) and isinstance(rest[1], VectorSeq):
        rest = rest[1:]
    if not rest:
        raise MalformedForm(f"defn {name} requires a parameter vector")
    return ListSeq([Symbol("def"), name, ListSeq([FN, *rest])])


def defn_form(
    tail: tuple[SExpression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    return evaluate_fn(defn_to_def(tail), env)
