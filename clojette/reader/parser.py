"""
  Clojette Reader, Lexer and Parser

- `scan` is a single pass over the text yielding (token_type, token_value, offset);
  `lex` drops the offsets
- `parse` builds the value tree with a stack of open containers
- Emits Python primitives where they exist and Clojette values otherwise:

    - numbers -> int / float
    - strings -> str
    - true / false / nil -> TRUE / FALSE / NIL
    - symbols -> Symbol (optionally namespaced, ns/name)
    - keywords -> Keyword (:name, :ns/name)
    - (...) -> ListSeq
    - [...] -> VectorSeq
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator

from clojette import SExpression
from clojette.errors import ParseError
from clojette.types.literal import literal_for
from clojette.types.seq import ListSeq, VectorSeq
from clojette.types.symbol import Keyword, Symbol


TOKEN_RE = re.compile(
    r"[\s,]*(?:"
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbracket>\[)"  # [
    r"|(?P<rbracket>\])"  # ]
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<unterminated>")'  # a quote that never closes
    r'|(?P<atom>[^\s,()\[\]";]+)'  # everything else accumulates into an atom
    r")",
    re.DOTALL,
)

NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
SYMBOL_RE = re.compile(r"(?:(?P<ns>[^\d/:][^/:]*)/)?(?P<name>[^\d/:][^/:]*|/)")
KEYWORD_RE = re.compile(r":(?:(?P<ns>[^/:]+)/)?(?P<name>[^/:]+)")

ESCAPES: dict[str, str] = {
    '"': '"',
    "\\": "\\",
    "n": "\n",
    "t": "\t",
    "r": "\r",
}

CLOSERS: dict[str, type] = {
    "rparen": ListSeq,
    "rbracket": VectorSeq,
}


def scan(source: str) -> Iterator[tuple[str, str, int]]:
    """Token generator: yields (token_type, token_value, offset) tuples.

    Whitespace, commas and comments are dropped here.
    """
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if m is None or m.lastgroup is None:
            # Only trailing whitespace left
            break
        kind = m.lastgroup
        if kind == "unterminated":
            raise ParseError(f"Unterminated string literal at {m.start(kind)}")
        pos = m.end()
        if kind == "comment":
            continue
        yield kind, m.group(kind), m.start(kind)


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    for kind, value, _ in scan(source):
        yield kind, value


def unescape(body: str) -> str:
    """Decode backslash escapes inside a string literal body."""
    out: list[str] = []
    i = 0
    while i < len(body):
        ch = body[i]
        if ch == "\\" and i + 1 < len(body):
            nxt = body[i + 1]
            out.append(ESCAPES.get(nxt, nxt))
            i += 2
            continue
        out.append(ch)
        i += 1
    return "".join(out)


def parse_number(text: str) -> int | float:
    if any(c in text for c in ".eE"):
        return float(text)
    return int(text)


def classify(text: str) -> SExpression:
    """Turn a bare atom into a value; the first matching kind wins."""
    if NUMBER_RE.fullmatch(text):
        return parse_number(text)
    lit = literal_for(text)
    if lit is not None:
        return lit
    m = SYMBOL_RE.fullmatch(text)
    if m:
        return Symbol(m.group("name"), m.group("ns"))
    m = KEYWORD_RE.fullmatch(text)
    if m:
        return Keyword(m.group("name"), m.group("ns"))
    raise ParseError(f"Cannot read token {text!r}")


def _where(pos: int | None) -> str:
    return f" at {pos}" if pos is not None else ""


def parse(tokens: Iterable[tuple]) -> list[SExpression]:
    """Build values from a token stream and return the top-level forms.

    Tokens are (token_type, token_value) pairs, optionally followed by the
    character offset as `scan` yields them; offsets end up in ParseError
    messages. Each open bracket pushes an accumulator; each close pops it,
    checks the bracket kind, and appends the finished sequence to its parent.
    """
    top: list[SExpression] = []
    stack: list[tuple[type, list[SExpression], int | None]] = []

    def current() -> list[SExpression]:
        return stack[-1][1] if stack else top

    for tok_type, tok_val, *rest in tokens:
        pos = rest[0] if rest else None
        if tok_type == "lparen":
            stack.append((ListSeq, [], pos))
        elif tok_type == "lbracket":
            stack.append((VectorSeq, [], pos))
        elif tok_type in CLOSERS:
            if not stack:
                raise ParseError(f"Unexpected {tok_val!r}{_where(pos)} with nothing open")
            kind, items, opened = stack.pop()
            if kind is not CLOSERS[tok_type]:
                raise ParseError(
                    f"Mismatched {tok_val!r}{_where(pos)} closing"
                    f" {kind.open_bracket!r}{_where(opened)}"
                )
            current().append(kind(items))
        elif tok_type == "string":
            current().append(unescape(tok_val[1:-1]))
        elif tok_type == "atom":
            try:
                current().append(classify(tok_val))
            except ParseError as exc:
                raise ParseError(f"{exc}{_where(pos)}") from None
        else:
            raise ParseError(f"Unknown token: {tok_type} {tok_val}{_where(pos)}")

    if stack:
        kind, _, opened = stack[-1]
        opened_at = f" opened at {opened}" if opened is not None else ""
        raise ParseError(
            f"Unterminated {kind.open_bracket!r}{opened_at}: reached end of input"
        )
    return top


def read_forms(source: str) -> list[SExpression]:
    """Read every top-level form in `source`, in source order."""
    return parse(scan(source))


def read_one(source: str) -> SExpression:
    """Read exactly one form from `source`."""
    forms = read_forms(source)
    if len(forms) != 1:
        raise ParseError(f"Expected one form, found {len(forms)}")
    return forms[0]
