from __future__ import annotations
import sys
from typing import Any

from clojette.types.environment import Environment
from clojette.types.literal import Literal, TRUE, FALSE, NIL
from clojette.types.procedure import Primitive
from clojette.types.seq import ListSeq, VectorSeq
from clojette.types.symbol import Symbol
from clojette.errors import NativeError
from clojette.printer import to_string


def _expect_count(name: str, expr: list[Any], count: int) -> None:
    if len(expr) != count:
        raise NativeError(f"{name} requires exactly {count} argument(s), got {len(expr)}")


def is_number(x: Any) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _numbers(name: str, expr: list[Any]) -> list[Any]:
    for x in expr:
        if not is_number(x):
            raise NativeError(f"All arguments to {name} must be numbers, got {to_string(x)}")
    return expr


def _as_items(name: str, seq: Any) -> tuple[Any, ...]:
    if seq == NIL:
        return ()
    if isinstance(seq, (ListSeq, VectorSeq)):
        return seq.items
    raise NativeError(f"{name} expects a list, vector or nil, got {to_string(seq)}")


def _literal(flag: bool) -> Literal:
    return TRUE if flag else FALSE


# -------------------------------
# Equality and literal predicates
# -------------------------------
def is_equal(a: Any, b: Any) -> bool:
    # Structural equality; numbers compare across int/float
    if a is b:
        return True
    if is_number(a) and is_number(b):
        return a == b
    if type(a) != type(b):
        return False
    if isinstance(a, (ListSeq, VectorSeq)):
        return len(a) == len(b) and all(is_equal(x, y) for x, y in zip(a, b))
    return a == b


def equals(env: Environment, expr: list[Any]) -> Literal:
    if len(expr) < 2:
        raise NativeError("= requires at least 2 arguments")
    return _literal(is_equal(expr[0], expr[1]))


def is_nil(env: Environment, expr: list[Any]) -> Literal:
    _expect_count("nil?", expr, 1)
    return _literal(expr[0] == NIL)


def is_true(env: Environment, expr: list[Any]) -> Literal:
    _expect_count("true?", expr, 1)
    return _literal(expr[0] == TRUE)


def is_false(env: Environment, expr: list[Any]) -> Literal:
    _expect_count("false?", expr, 1)
    return _literal(expr[0] == FALSE)


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, expr: list[Any]) -> Any:
    return sum(_numbers("+", expr))


def sub(env: Environment, expr: list[Any]) -> Any:
    if not expr:
        raise NativeError("- requires at least 1 argument")
    _numbers("-", expr)
    if len(expr) == 1:
        return -expr[0]
    result = expr[0]
    for x in expr[1:]:
        result -= x
    return result


# -------------------------------
# List operations
# -------------------------------
def cons(env: Environment, expr: list[Any]) -> ListSeq:
    _expect_count("cons", expr, 2)
    head, tail = expr
    return ListSeq((head, *_as_items("cons", tail)))


def car(env: Environment, expr: list[Any]) -> Any:
    _expect_count("car", expr, 1)
    items = _as_items("car", expr[0])
    if not items:
        return NIL
    return items[0]


def cdr(env: Environment, expr: list[Any]) -> ListSeq:
    _expect_count("cdr", expr, 1)
    return ListSeq(_as_items("cdr", expr[0])[1:])


# -------------------------------
# Output
# -------------------------------
def println(env: Environment, expr: list[Any]) -> Any:
    _expect_count("println", expr, 1)
    sys.stdout.write(to_string(expr[0], readably=False) + "\n")
    return expr[0]


PRIMITIVES = {
    'car': car,
    'cdr': cdr,
    'cons': cons,
    'nil?': is_nil,
    'true?': is_true,
    'false?': is_false,
    '+': add,
    '-': sub,
    '=': equals,
    'println': println,
}


# -------------------------------
# Registration
# -------------------------------
def register(env: Environment):
    env.update({Symbol(name): Primitive(name, fn) for name, fn in PRIMITIVES.items()})
