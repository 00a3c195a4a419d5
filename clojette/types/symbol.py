from __future__ import annotations
import sys
from typing import Optional


class Symbol:
    __slots__ = ("name", "namespace")

    def __init__(self, name: str, namespace: Optional[str] = None):
        # Intern to ensure fast equality/hash and reduce memory
        self.name = sys.intern(name)
        self.namespace = sys.intern(namespace) if namespace else None

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Symbol)
            and self.name == other.name
            and self.namespace == other.namespace
        )

    def __hash__(self) -> int:
        return hash(("symbol", self.namespace, self.name))

    def __repr__(self):
        if self.namespace:
            return f"Symbol({self.name!r}, {self.namespace!r})"
        return f"Symbol({self.name!r})"

    def __str__(self):
        if self.namespace:
            return f"{self.namespace}/{self.name}"
        return self.name


class Keyword:
    """A self-evaluating atom written with a leading colon, e.g. :a or :ns/a."""

    __slots__ = ("name", "namespace")

    def __init__(self, name: str, namespace: Optional[str] = None):
        self.name = sys.intern(name)
        self.namespace = sys.intern(namespace) if namespace else None

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Keyword)
            and self.name == other.name
            and self.namespace == other.namespace
        )

    def __hash__(self) -> int:
        return hash(("keyword", self.namespace, self.name))

    def __repr__(self):
        if self.namespace:
            return f"Keyword({self.name!r}, {self.namespace!r})"
        return f"Keyword({self.name!r})"

    def __str__(self):
        if self.namespace:
            return f":{self.namespace}/{self.name}"
        return f":{self.name}"


# Result of def, defn and set!
OK = Symbol("ok")
