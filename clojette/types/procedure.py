"""Procedure values: host-implemented primitives and user-defined closures."""

from __future__ import annotations

from io import StringIO
from typing import Callable

from clojette import SExpression, LispValue
from clojette.types.environment import Environment
from clojette.types.symbol import Symbol

PrimitiveFn = Callable[[Environment, list[LispValue]], LispValue]


class Primitive:
    """A built-in procedure called with already-evaluated arguments."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: PrimitiveFn):
        self.name = name
        self.fn = fn

    def __call__(self, env: Environment, args: list[LispValue]) -> LispValue:
        return self.fn(env, args)

    def __repr__(self) -> str:
        return f"#<primitive {self.name}>"


class Compound:
    """A first-class closure with parameters, body forms, and captured env."""

    __slots__ = ("params", "body", "env")

    def __init__(
        self,
        params: tuple[Symbol, ...],
        body: tuple[SExpression, ...],
        env: Environment,
    ):
        self.params: tuple[Symbol, ...] = tuple(params)
        self.body: tuple[SExpression, ...] = tuple(body)
        # Shared, not copied: mutations in the defining frame stay visible
        self.env: Environment = env

    @property
    def arity(self) -> int:
        return len(self.params)

    def extend_env(self, args: list[LispValue]) -> Environment:
        """Bind `args` to the parameters in a new frame over the closure env."""
        return self.env.extend(self.params, args)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("#<fn [")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write("]>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)
