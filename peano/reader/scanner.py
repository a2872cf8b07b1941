"""
  Peano Scanner

- Pure and stateless: every call takes the source and a caller-threaded offset
  and returns one token plus the offset to resume from.
- Keywords are only keywords as whole words: `defx`, `ifVal` and `sub` are
  identifiers. The alternation order in TOKEN_RE is the matching priority.
- Tokens are (type, value) pairs:

    - identifiers -> ("ident", text)
    - keywords    -> ("def", "def"), ("eq", "eq"), ("zero", "z"), ("succ", "s"),
                     ("if", "if"), ("then", "then"), ("else", "else")
    - punctuation -> ("lparen", "("), ("rparen", ")"), ("equals", "="), ("comma", ",")
    - end         -> ("end", None)
"""

from __future__ import annotations

import re
from typing import Iterator, NamedTuple, Optional

from peano import Offset
from peano.errors import PeanoLexError


class Token(NamedTuple):
    type: str
    value: Optional[str]


END = "end"

# A keyword must not run on into another letter or digit.
_KW_END = r"(?![A-Za-z0-9])"

TOKEN_RE = re.compile(
    r"(?P<def>def)" + _KW_END +
    r"|(?P<eq>eq)" + _KW_END +
    r"|(?P<zero>z)" + _KW_END +
    r"|(?P<succ>s)" + _KW_END +
    r"|(?P<if>if)" + _KW_END +
    r"|(?P<then>then)" + _KW_END +
    r"|(?P<else>else)" + _KW_END +
    r"|(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r"|(?P<equals>=)"
    r"|(?P<comma>,)"
    r"|(?P<ident>[A-Za-z][A-Za-z0-9]*)"
)

WHITESPACE_RE = re.compile(r"\s*")


def skip_whitespace(source: str, offset: Offset) -> Offset:
    return WHITESPACE_RE.match(source, offset).end()


def line_col(source: str, offset: Offset) -> tuple[int, int]:
    """1-based line and column of `offset` in `source`."""
    offset = min(max(offset, 0), len(source))
    line = source.count("\n", 0, offset) + 1
    column = offset - (source.rfind("\n", 0, offset) + 1) + 1
    return line, column


def next_token(source: str, offset: Offset) -> tuple[Token, Offset]:
    """Scan one token starting at `offset`, skipping leading whitespace."""
    pos = skip_whitespace(source, offset)
    if pos >= len(source):
        return Token(END, None), pos

    m = TOKEN_RE.match(source, pos)
    if not m:
        line, column = line_col(source, pos)
        raise PeanoLexError(
            f"Unexpected char {source[pos]!r} at line {line}, column {column}", pos
        )
    tok_type = m.lastgroup
    return Token(tok_type, m.group(tok_type)), m.end()


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields every token of `source`, the end token last."""
    pos = 0
    while True:
        token, pos = next_token(source, pos)
        yield token
        if token.type == END:
            return
