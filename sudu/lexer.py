"""Tokenizer for sudu source text."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator

from sudu.common import WITH_ESCAPES, Span, cmp_lexeme, get_lexeme

PRINT_SPAN_INTERNALS = True

_WHITESPACE = frozenset(" \t\r")
_EOF_CHAR = "\0"


class TokenKind(IntEnum):
    EOF = 0
    ILLEGAL = 1
    RPAREN = 2
    LPAREN = 3
    PLUS = 4
    MINUS = 5
    STAR = 6
    SLASH = 7
    PERCENT = 8
    SYMBOL = 9
    INTEGER = 10
    FLOAT = 11
    FUNCTION = 12
    LET = 13
    NEWLINE = 14


_SINGLE_CHAR_TOKENS = {
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "%": TokenKind.PERCENT,
}

_KEYWORDS = (
    ("function", TokenKind.FUNCTION),
    ("let", TokenKind.LET),
)


def _is_alpha(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def _is_digit(ch: str) -> bool:
    return ch.isascii() and ch.isdigit()


def _is_alnum(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


@dataclass(frozen=True)
class Token:
    """A lexed token with its span and 1-based column (``x``) and line (``y``)."""

    kind: TokenKind
    span: Span
    x: int
    y: int

    def format(self, src: str, internals: bool = PRINT_SPAN_INTERNALS) -> str:
        """Describe the token on one line, optionally with position details."""
        lex = get_lexeme(src, self.span, WITH_ESCAPES)
        if internals:
            return (
                f"{self.y}:{self.x} | {self.span.pos} @ {self.span.length} "
                f"| {self.kind.name} | '{lex}'"
            )
        return f"{self.kind.name} | '{lex}'"


def keyword_kind(src: str, span: Span) -> TokenKind:
    """Classify an identifier span as a keyword token kind or a plain symbol."""
    for word, kind in _KEYWORDS:
        if cmp_lexeme(src, span, word):
            return kind
    return TokenKind.SYMBOL


class Lexer:
    """Produces tokens from source text one at a time."""

    def __init__(self, src: str) -> None:
        self.src = src
        self.pos = 0
        self.x = 1
        self.y = 1

    @property
    def at_eof(self) -> bool:
        return self.pos >= len(self.src)

    def _consume(self) -> None:
        if self.at_eof:
            return
        self.pos += 1
        self.x += 1

    def _peek(self) -> str:
        if self.pos + 1 >= len(self.src):
            return _EOF_CHAR
        return self.src[self.pos + 1]

    def _current(self) -> str:
        if self.at_eof:
            return _EOF_CHAR
        return self.src[self.pos]

    def _eat_whitespace(self) -> None:
        while self._current() in _WHITESPACE:
            self._consume()

    def _skip_comment(self) -> None:
        while self._current() not in ("\n", _EOF_CHAR):
            self._consume()

    def _span(self, length: int = 1) -> Span:
        return Span(self.pos, length)

    def _lex_symbol(self) -> Token:
        start, start_x = self.pos, self.x
        while True:
            ch = self._peek()
            if not _is_alnum(ch) and ch != "_":
                break
            self._consume()
        span = Span(start, self.pos - start + 1)
        return Token(keyword_kind(self.src, span), span, start_x, self.y)

    def _lex_number(self) -> Token:
        kind = TokenKind.INTEGER
        start, start_x = self.pos, self.x
        while True:
            ch = self._peek()
            if not (_is_digit(ch) or ch in "_."):
                break
            if ch == ".":
                if kind is TokenKind.FLOAT:
                    # a second dot belongs to whatever follows the float
                    break
                kind = TokenKind.FLOAT
            self._consume()
        span = Span(start, self.pos - start + 1)
        return Token(kind, span, start_x, self.y)

    def next_token(self) -> Token:
        """Return the next token; at the end of input this is always ``EOF``."""
        while True:
            if self.at_eof:
                return Token(TokenKind.EOF, self._span(), self.x, self.y)

            self._eat_whitespace()
            ch = self._current()

            if ch == "#":
                self._skip_comment()
                continue

            if ch == "\n":
                token = Token(TokenKind.NEWLINE, self._span(), self.x, self.y)
                self.y += 1
                self.x = 0  # the consume below moves it to column 1
            elif ch in _SINGLE_CHAR_TOKENS:
                token = Token(_SINGLE_CHAR_TOKENS[ch], self._span(), self.x, self.y)
            elif _is_alpha(ch) or ch == "_":
                token = self._lex_symbol()
            elif _is_digit(ch):
                token = self._lex_number()
            else:
                token = Token(TokenKind.ILLEGAL, self._span(), self.x, self.y)

            self._consume()
            return token

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the first ``EOF``."""
        while True:
            token = self.next_token()
            yield token
            if token.kind is TokenKind.EOF:
                return