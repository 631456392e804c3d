"""
  Token source for the minischeme reader.

- Regex driven, lazy: `lex` is a generator of Token tuples
- Skips whitespace and `;` line comments
- Always ends with exactly one EOF token
- Strings keep their surrounding quotes; the parser strips and unescapes them
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Iterator, NamedTuple, Optional

from minischeme.errors import SchemeSyntaxError


class TokenKind(Enum):
    LPAREN = "("
    RPAREN = ")"
    QUOTE = "'"
    INTEGER = "integer"
    IDENTIFIER = "identifier"
    BOOLEAN = "boolean"
    STRING = "string"
    EOF = "eof"


class Token(NamedTuple):
    kind: TokenKind
    text: str
    line: int = 1
    column: int = 1


TOKEN_RE = re.compile(
    r"(?P<space>\s+)"
    r"|(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r"|(?P<quote>')"
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<unterminated>"(?:\\.|[^\\"])*)'  # string running to end of input
    r'|(?P<atom>[^\s()\'";]+)'  # integers, booleans and identifiers
)

INTEGER_RE = re.compile(r"[+-]?[0-9]+")

BOOLEANS = ("#t", "#f")

_SIMPLE_KINDS = {
    "lparen": TokenKind.LPAREN,
    "rparen": TokenKind.RPAREN,
    "quote": TokenKind.QUOTE,
    "string": TokenKind.STRING,
}


def _classify_atom(text: str) -> TokenKind:
    if INTEGER_RE.fullmatch(text):
        return TokenKind.INTEGER
    if text in BOOLEANS:
        return TokenKind.BOOLEAN
    return TokenKind.IDENTIFIER


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Token(kind, text, line, column) and a final EOF."""
    pos = 0
    n = len(source)
    line, line_start = 1, 0

    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            raise SchemeSyntaxError(
                f"unexpected character {source[pos]!r} at line {line}, column {pos - line_start + 1}"
            )
        kind = m.lastgroup
        text = m.group(kind)
        column = pos - line_start + 1
        if kind == "unterminated":
            raise SchemeSyntaxError(f"unterminated string at line {line}, column {column}")
        if kind == "atom":
            yield Token(_classify_atom(text), text, line, column)
        elif kind in _SIMPLE_KINDS:
            yield Token(_SIMPLE_KINDS[kind], text, line, column)
        newlines = text.count("\n")
        if newlines:
            line += newlines
            line_start = pos + text.rindex("\n") + 1
        pos = m.end()

    yield Token(TokenKind.EOF, "", line, pos - line_start + 1)


class TokenStream:
    """Peekable pull interface over a token iterator."""

    def __init__(self, token_iter: Iterator[Token]):
        self.tokens = iter(token_iter)
        self.buffer: Optional[Token] = None
        self.last: Token = Token(TokenKind.EOF, "")

    @classmethod
    def from_source(cls, source: str) -> TokenStream:
        return cls(lex(source))

    def peek(self) -> Token:
        if self.buffer is None:
            self.buffer = next(self.tokens, None) or Token(
                TokenKind.EOF, "", self.last.line, self.last.column
            )
        return self.buffer

    def peek_type(self) -> TokenKind:
        return self.peek().kind

    def peek_text(self) -> str:
        return self.peek().text

    def next(self) -> Token:
        token = self.peek()
        # EOF is sticky: reading past the end keeps returning it
        if token.kind is not TokenKind.EOF:
            self.buffer = None
        self.last = token
        return token

    def at_eof(self) -> bool:
        return self.peek_type() is TokenKind.EOF
