"""
  Recursive-descent parser for minischeme.

Builds the value graph straight from tokens; there is no intermediate AST:

    - integers        -> Number
    - #t / #f         -> Boolean
    - "text"          -> String (quotes stripped, escapes resolved)
    - identifiers     -> Variable, or Symbol inside a quoted region
    - ()              -> Null
    - (op arg ...)    -> Application(op, (arg ...))
    - 'x              -> Application(quote, (x)) with x parsed as data
    - quoted lists    -> Pair chains (dotted tails allowed)

Forms with their own structure (quote, lambda, let, let*, letrec, cond, do)
are recognised by peeking at the keyword before the operator is consumed and
are validated here, so a malformed one is a SchemeSyntaxError before anything
runs. They still come out as Applications whose operator is the keyword's
Variable, which the evaluator resolves to the SpecialForm bound in scope.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterator, Optional

from minischeme import Value
from minischeme.errors import SchemeSyntaxError
from minischeme.reader.lexer import Token, TokenKind, TokenStream, lex
from minischeme.types.application import Application
from minischeme.types.atoms import Number, String, boolean
from minischeme.types.pair import Null, Pair, from_iterable
from minischeme.types.symbol import Symbol, Variable

logger = logging.getLogger(__name__)

DOT = "."

_UNESCAPES = {"n": "\n", "t": "\t", "\\": "\\", '"': '"'}


def unescape(body: str) -> str:
    out = []
    chars = iter(body)
    for c in chars:
        if c == "\\":
            nxt = next(chars, "")
            out.append(_UNESCAPES.get(nxt, nxt))
        else:
            out.append(c)
    return "".join(out)


def _where(token: Token) -> str:
    return f"line {token.line}, column {token.column}"


class Parser:
    def __init__(self, tokens: TokenStream):
        self.tokens = tokens
        self.keyword_parsers: dict[str, Callable[[], Application]] = {
            "quote": self._parse_quote,
            "lambda": self._parse_lambda,
            "let": self._parse_let,
            "let*": self._parse_let,
            "letrec": self._parse_let,
            "cond": self._parse_cond,
            "do": self._parse_do,
        }

    # ------------------------
    # Entry points
    # ------------------------
    def parse_one(self) -> Optional[Value]:
        """Consume exactly one top-level form; None at end of input."""
        if self.tokens.at_eof():
            return None
        form = self.parse_form()
        logger.debug("parsed %s", form)
        return form

    def parse_all(self) -> Iterator[Value]:
        while (form := self.parse_one()) is not None:
            yield form

    # ------------------------
    # Forms
    # ------------------------
    def parse_form(self, quoted: bool = False) -> Value:
        token = self.tokens.next()
        match token.kind:
            case TokenKind.LPAREN:
                return self._parse_quoted_list(token) if quoted else self._parse_block(token)
            case TokenKind.QUOTE:
                return self._parse_quote_sugar(token, quoted)
            case TokenKind.INTEGER:
                return Number(int(token.text))
            case TokenKind.BOOLEAN:
                return boolean(token.text == "#t")
            case TokenKind.STRING:
                return String(unescape(token.text[1:-1]))
            case TokenKind.IDENTIFIER:
                return Symbol(token.text) if quoted else Variable(token.text)
            case TokenKind.RPAREN:
                raise SchemeSyntaxError(f"unexpected ')' at {_where(token)}")
        raise SchemeSyntaxError(f"unexpected end of input after {_where(token)}")

    def _parse_quote_sugar(self, token: Token, quoted: bool) -> Value:
        if self.tokens.at_eof():
            raise SchemeSyntaxError(f"unterminated quote at {_where(token)}")
        datum = self.parse_form(quoted=True)
        if quoted:
            return from_iterable([Symbol("quote"), datum])
        return Application(Variable("quote"), from_iterable([datum]))

    def _parse_sequence(self, opener: Token, quoted: bool = False) -> tuple[list[Value], Value]:
        """Read forms up to the closing ')'; returns (items, tail) where tail is Null
        unless the sequence was dotted."""
        items: list[Value] = []
        while True:
            token = self.tokens.peek()
            if token.kind is TokenKind.RPAREN:
                self.tokens.next()
                return items, Null
            if token.kind is TokenKind.EOF:
                raise SchemeSyntaxError(f"unterminated list opened at {_where(opener)}")
            if token.kind is TokenKind.IDENTIFIER and token.text == DOT:
                self.tokens.next()
                if not items:
                    raise SchemeSyntaxError(f"bad dot syntax at {_where(token)}")
                tail = self.parse_form(quoted)
                if self.tokens.peek_type() is not TokenKind.RPAREN:
                    raise SchemeSyntaxError(f"expected ')' after dotted tail at {_where(token)}")
                self.tokens.next()
                return items, tail
            items.append(self.parse_form(quoted))

    def _parse_forms(self, opener: Token) -> list[Value]:
        items, tail = self._parse_sequence(opener)
        if tail is not Null:
            raise SchemeSyntaxError(f"unexpected dotted list at {_where(opener)}")
        return items

    def _parse_quoted_list(self, opener: Token) -> Value:
        items, tail = self._parse_sequence(opener, quoted=True)
        return from_iterable(items, tail)

    def _parse_block(self, opener: Token) -> Value:
        token = self.tokens.peek()
        if token.kind is TokenKind.RPAREN:
            self.tokens.next()
            return Null
        if token.kind is TokenKind.IDENTIFIER and token.text in self.keyword_parsers:
            self.tokens.next()
            return self.keyword_parsers[token.text](token)
        operator = self.parse_form()
        items, tail = self._parse_sequence(opener)
        return Application(operator, from_iterable(items, tail))

    def _expect_open(self, keyword: Token, what: str) -> Token:
        token = self.tokens.next()
        if token.kind is not TokenKind.LPAREN:
            raise SchemeSyntaxError(
                f"malformed {keyword.text}: expected {what} at {_where(token)}, got {token.text or 'end of input'!r}"
            )
        return token

    @staticmethod
    def _keyword_form(keyword: Token, args: list[Value]) -> Application:
        return Application(Variable(keyword.text), from_iterable(args))

    # ------------------------
    # Structured special forms
    # ------------------------
    def _parse_quote(self, keyword: Token) -> Application:
        items, tail = self._parse_sequence(keyword, quoted=True)
        form = self._keyword_form(keyword, items)
        if len(items) != 1 or tail is not Null:
            raise SchemeSyntaxError(f"malformed quote: {form}")
        return form

    def _parse_identifier_list(self, keyword: Token, opener: Token) -> Pair:
        names: list[Value] = []
        for item in self._parse_forms(opener):
            if not isinstance(item, Variable):
                raise SchemeSyntaxError(f"malformed {keyword.text}: parameter {item} is not an identifier")
            if item in names:
                raise SchemeSyntaxError(f"malformed {keyword.text}: duplicate parameter {item}")
            names.append(item)
        return from_iterable(names)

    def _parse_body(self, keyword: Token, head: list[Value]) -> Application:
        body = self._parse_forms(keyword)
        form = self._keyword_form(keyword, head + body)
        if not body:
            raise SchemeSyntaxError(f"malformed {keyword.text}: missing body in {form}")
        return form

    def _parse_lambda(self, keyword: Token) -> Application:
        opener = self._expect_open(keyword, "parameter list")
        params = self._parse_identifier_list(keyword, opener)
        return self._parse_body(keyword, [params])

    def _parse_let(self, keyword: Token) -> Application:
        opener = self._expect_open(keyword, "binding list")
        bindings: list[Value] = []
        names: list[Value] = []
        while self.tokens.peek_type() is not TokenKind.RPAREN:
            if self.tokens.at_eof():
                raise SchemeSyntaxError(f"unterminated binding list opened at {_where(opener)}")
            binding = self._parse_clause(keyword, "binding")
            if len(binding) != 2 or not isinstance(binding[0], Variable):
                raise SchemeSyntaxError(
                    f"malformed {keyword.text}: bad binding {from_iterable(binding)}"
                )
            if keyword.text != "let*" and binding[0] in names:
                raise SchemeSyntaxError(f"malformed {keyword.text}: duplicate binding {binding[0]}")
            names.append(binding[0])
            bindings.append(from_iterable(binding))
        self.tokens.next()
        return self._parse_body(keyword, [from_iterable(bindings)])

    def _parse_clause(self, keyword: Token, what: str) -> list[Value]:
        opener = self._expect_open(keyword, what)
        return self._parse_forms(opener)

    def _parse_cond(self, keyword: Token) -> Application:
        clauses: list[Value] = []
        seen_else = False
        while self.tokens.peek_type() is not TokenKind.RPAREN:
            if self.tokens.at_eof():
                raise SchemeSyntaxError(f"unterminated cond at {_where(keyword)}")
            clause = self._parse_clause(keyword, "clause")
            if not clause:
                raise SchemeSyntaxError("malformed cond: bad clause ()")
            if seen_else:
                raise SchemeSyntaxError("malformed cond: 'else' clause followed by more clauses")
            seen_else = clause[0] == Variable("else")
            clauses.append(from_iterable(clause))
        self.tokens.next()
        return self._keyword_form(keyword, clauses)

    def _parse_do(self, keyword: Token) -> Application:
        opener = self._expect_open(keyword, "iterator list")
        iterators: list[Value] = []
        names: list[Value] = []
        while self.tokens.peek_type() is not TokenKind.RPAREN:
            if self.tokens.at_eof():
                raise SchemeSyntaxError(f"unterminated do at {_where(opener)}")
            spec = self._parse_clause(keyword, "iterator")
            text = from_iterable(spec)
            if len(spec) < 2 or not isinstance(spec[0], Variable):
                raise SchemeSyntaxError(f"malformed do: bad iterator {text}")
            if len(spec) > 3:
                raise SchemeSyntaxError(f"malformed do: bad update expr in {text}")
            if spec[0] in names:
                raise SchemeSyntaxError(f"malformed do: duplicate variable {spec[0]}")
            names.append(spec[0])
            iterators.append(text)
        self.tokens.next()
        test_clause = self._parse_clause(keyword, "test clause")
        if not test_clause:
            raise SchemeSyntaxError("malformed do: missing test in ()")
        body = self._parse_forms(keyword)
        return self._keyword_form(
            keyword, [from_iterable(iterators), from_iterable(test_clause), *body]
        )


def parse_one(tokens: TokenStream) -> Optional[Value]:
    """Parse the next top-level form from `tokens`, or None at end of input."""
    return Parser(tokens).parse_one()


def parse(source: str) -> list[Value]:
    """Parse every top-level form in `source`."""
    return list(parse_all(TokenStream(lex(source))))


def parse_all(tokens: TokenStream) -> Iterator[Value]:
    """Lazily parse every remaining top-level form from `tokens`."""
    return Parser(tokens).parse_all()
