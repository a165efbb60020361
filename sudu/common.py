"""Source spans and lexeme helpers shared by the lexer, parser and diagnostics."""

from __future__ import annotations

from dataclasses import dataclass

WITH_ESCAPES = True
NO_ESCAPES = False

_MIN_BUFFER_LEN = 3


@dataclass(frozen=True)
class Span:
    """A half-open region of source text: ``length`` characters from ``pos``."""

    pos: int
    length: int

    def end(self) -> int:
        """Index one past the last character covered by the span."""
        return self.pos + self.length


def lexeme_buffer_len(span: Span) -> int:
    """Room needed to hold the span's text plus a terminator, never below three."""
    return max(span.length + 1, _MIN_BUFFER_LEN)


def get_lexeme(src: str | None, span: Span, escapes: bool = NO_ESCAPES) -> str:
    """Return the text covered by ``span``.

    With ``escapes`` set, a lone newline is shown as ``\\n`` and empty text
    (such as the end of input) as ``\\0``.
    """
    if src is None:
        return "\\0"

    text = src[span.pos:span.end()]
    if text.find("\0") != -1:
        text = text[:text.index("\0")]

    if not escapes:
        return text
    if text == "\n":
        return "\\n"
    if text == "":
        return "\\0"
    return text


def cmp_lexeme(src: str, span: Span, lit: str) -> bool:
    """True when the span's text is exactly ``lit``."""
    return len(lit) == span.length and src[span.pos:span.end()] == lit