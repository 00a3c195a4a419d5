from clojette import EvaluatorFn
from clojette import SExpression, LispValue
from clojette.errors import MalformedForm
from clojette.types.symbol import Symbol, OK
from clojette.types.environment import Environment


def set_form(
    tail: tuple[SExpression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (set! var value)
    Mutates the nearest existing binding of var; never creates one.
    """
    if len(tail) != 2:
        raise MalformedForm("set! requires exactly 2 arguments: (set! var value)")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise MalformedForm(f"set! first argument must be a symbol, got {var_sym!r}")
    value = evaluate_fn(val_expr, env)
    env.assign(var_sym, value)
    return OK
