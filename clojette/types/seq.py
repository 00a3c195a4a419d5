"""Immutable sequence values: lists (code and quoted data) and vectors."""

from __future__ import annotations

from typing import Iterable, Iterator

from clojette import LispValue


class _Seq:
    __slots__ = ("items",)

    open_bracket = "("
    close_bracket = ")"

    def __init__(self, items: Iterable[LispValue] = ()):
        self.items: tuple[LispValue, ...] = tuple(items)

    def __iter__(self) -> Iterator[LispValue]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return type(self)(self.items[index])
        return self.items[index]

    def __bool__(self) -> bool:
        # Python-level emptiness only; Lisp truthiness lives in literal.is_truthy
        return bool(self.items)

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.items == other.items

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.items))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.items)!r})"


class ListSeq(_Seq):
    """An ordered, immutable list. Non-empty lists evaluate as forms."""

    __slots__ = ()

    @property
    def head(self) -> LispValue:
        return self.items[0]

    @property
    def tail(self) -> tuple[LispValue, ...]:
        return self.items[1:]


class VectorSeq(_Seq):
    """An ordered, immutable vector. Vectors evaluate to themselves."""

    __slots__ = ()

    open_bracket = "["
    close_bracket = "]"
