"""Runtime environment for Clojette.

An Environment holds one frame of bindings from Symbols to evaluated values
and links to its enclosing Environment via `outer`. The chain models lexical
scope: lookups search the innermost frame first and stop at the root, whose
`outer` is None. Closures keep a reference to the Environment they were
created in, so several procedures may share (and mutate) the same frame.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Optional, Sequence

from clojette import LispValue
from clojette.errors import ArityError, MalformedForm, UnboundVariable
from clojette.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, replacing any existing binding.

        Enclosing frames are never touched. Raises MalformedForm if `name`
        is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise MalformedForm(f"Cannot define {name!r}: not a symbol")
        self.vars[name] = value

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def assign(self, name: Symbol, value: LispValue) -> None:
        """Update the binding for `name` in the nearest frame that has one.

        Raises UnboundVariable rather than creating a new binding.
        """
        env = self.find(name)
        if env is None:
            raise UnboundVariable(f"Cannot set unbound variable {name}")
        env.vars[name] = value

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost frame first."""
        env = self.find(name)
        if env is None:
            raise UnboundVariable(f"Unbound variable {name}")
        return env.vars[name]

    def extend(
        self, names: Sequence[Symbol], values: Sequence[LispValue]
    ) -> Environment:
        """Return a child environment binding `names` to `values` pairwise.

        The counts must match; ArityError is raised before anything is bound.
        """
        if len(names) != len(values):
            raise ArityError(len(names), len(values))
        child = Environment(outer=self)
        for name, value in zip(names, values):
            child.define(name, value)
        return child

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def names(self) -> Iterable[Symbol]:
        return self.vars.keys()

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
