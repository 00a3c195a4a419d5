"""Text rendering for Clojette values.

`to_string(value)` gives the readable form the REPL echoes (strings quoted,
so the output can be read back). `readably=False` gives the display form
used by println, where strings are written raw.
"""

from __future__ import annotations

from clojette import LispValue
from clojette.types.literal import Literal
from clojette.types.seq import ListSeq, VectorSeq
from clojette.types.symbol import Keyword, Symbol

STRING_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
}


def quote_string(s: str) -> str:
    return '"' + "".join(STRING_ESCAPES.get(c, c) for c in s) + '"'


def format_number(n: int | float) -> str:
    if isinstance(n, float):
        # repr keeps enough digits to read the same float back
        return repr(n)
    return str(n)


def to_string(value: LispValue, readably: bool = True) -> str:
    if isinstance(value, (int, float)):
        return format_number(value)
    if isinstance(value, str):
        return quote_string(value) if readably else value
    if isinstance(value, (Symbol, Keyword)):
        return str(value)
    if isinstance(value, Literal):
        return value.text
    if isinstance(value, (ListSeq, VectorSeq)):
        inner = " ".join(to_string(v, readably) for v in value)
        return f"{value.open_bracket}{inner}{value.close_bracket}"
    return repr(value)
