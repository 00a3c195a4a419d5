from __future__ import annotations


class Literal:
    """One of the three reserved constants: true, false and nil.

    Only these carry truthiness: false and nil are falsy and every other
    value, literal true included, is truthy. The reader hands out the
    module singletons, but equality is by text.
    """

    __slots__ = ("text",)

    def __init__(self, text: str):
        self.text = text

    def __repr__(self):
        return self.text

    def __eq__(self, other):
        return isinstance(other, Literal) and self.text == other.text

    def __hash__(self):
        return hash(("literal", self.text))


TRUE = Literal("true")
FALSE = Literal("false")
NIL = Literal("nil")

_BY_TEXT = {lit.text: lit for lit in (TRUE, FALSE, NIL)}


def literal_for(text: str) -> Literal | None:
    """Return the literal spelled `text`, or None if it is not one."""
    return _BY_TEXT.get(text)


def is_truthy(value) -> bool:
    # compare by text so an equal Literal built elsewhere behaves the same
    return not (isinstance(value, Literal) and value.text in ("false", "nil"))
