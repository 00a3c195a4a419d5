"""Application engine for Clojette.

Centralizes procedure application for the evaluator:
- Primitives receive the evaluated argument list and the caller's env.
- Compound procedures get a fresh frame over their captured environment and
  run their body as an implicit do.

There is no tail-call handling: nested applications use the Python stack.
"""

import logging

from clojette import LispValue, EvaluatorFn
from clojette.errors import ClojetteError, NativeError, UnknownProcedureType
from clojette.evaluation.special_forms.do_form import evaluate_sequence
from clojette.types.environment import Environment
from clojette.types.procedure import Compound, Primitive

logger = logging.getLogger(__name__)


def apply_primitive(
    fn: Primitive, args: list[LispValue], env: Environment
) -> LispValue:
    """Invoke a built-in; host failures surface as NativeError."""
    try:
        return fn(env, args)
    except (ClojetteError, RecursionError):
        raise
    except Exception as exc:
        logger.debug("primitive %s failed on %r", fn.name, args, exc_info=True)
        raise NativeError(f"{fn.name}: {exc}") from exc


def apply_compound(
    fn: Compound, args: list[LispValue], evaluate_fn: EvaluatorFn
) -> LispValue:
    """Apply a closure.

    The argument count must equal the parameter count; Environment.extend
    raises ArityError otherwise, before anything is bound.
    """
    new_env = fn.extend_env(args)
    return evaluate_sequence(fn.body, new_env, evaluate_fn)


def apply(
    head: Primitive | Compound | object,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Compound or a Primitive procedure.

    Anything else raises UnknownProcedureType.
    """
    if isinstance(head, Primitive):
        return apply_primitive(head, args, env)
    elif isinstance(head, Compound):
        return apply_compound(head, args, evaluate_fn)
    else:
        raise UnknownProcedureType(f"Cannot apply non-procedure {head!r}")
