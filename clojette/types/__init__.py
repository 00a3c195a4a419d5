"""Value kinds that have no native Python counterpart."""

from clojette.types.symbol import Symbol, Keyword, OK
from clojette.types.literal import Literal, TRUE, FALSE, NIL
from clojette.types.seq import ListSeq, VectorSeq
from clojette.types.environment import Environment
from clojette.types.procedure import Primitive, Compound

__all__ = [
    "Symbol",
    "Keyword",
    "OK",
    "Literal",
    "TRUE",
    "FALSE",
    "NIL",
    "ListSeq",
    "VectorSeq",
    "Environment",
    "Primitive",
    "Compound",
]
