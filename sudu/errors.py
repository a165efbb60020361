"""Diagnostics: error records, their terminal rendering and a collection of them."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, TextIO

from sudu.common import NO_ESCAPES, Span, get_lexeme

TERM_ESC = "\x1b"
TERM_RESET = "\x1b[0m"
TERM_REDB = "[31;1m"
TERM_YELLOWB = "[33;1m"
TERM_GREEN = "[32m"
TERM_RED = "[31m"
TERM_MAGENTAB = "[35;1m"

LINE_FETCH_FAILED = "<Error fetching line content>"


class ErrorType(Enum):
    SYNTAX = "syntax error"
    ILLEGAL_CHAR = "illegal character"
    UNTERMINATED_LITERAL = "unterminated literal"
    EXPECTED_EXPRESSION = "expected expression"
    INVALID_RETURN = "invalid return type"

    @property
    def label(self) -> str:
        """Human-readable name used in rendered diagnostics."""
        return self.value


@dataclass(frozen=True)
class InvalidReturnInfo:
    """Where a function's return type was declared, for invalid-return errors."""

    def_span: Span
    def_x: int
    def_y: int
    def_type: str
    def_path: str
    def_src: str


def hide_newlines(text: str) -> str:
    """Replace newlines and stray NUL characters with spaces."""
    return text.replace("\n", " ").replace("\0", " ")


def fetch_line(src: str, index: int) -> Span | None:
    """Return the span of the line holding ``index``, or None if it lies past the end.

    The span includes the line's terminating newline when there is one.
    """
    src = src.split("\0", 1)[0]
    size = len(src)
    if index < 0 or index > size:
        return None

    start = 0 if index == 0 else src.rfind("\n", 1, index) + 1

    if index == size:
        return Span(start, size - start)

    end = src.find("\n", index)
    if end == -1:
        end = size
    return Span(start, end - start + 1)


def _caret_row(line: Span, target: Span) -> str:
    return "".join(
        "^" if target.pos <= i < target.end() else " "
        for i in range(line.pos, line.end())
    )


def _render_excerpt(src: str, target: Span) -> str | None:
    line = fetch_line(src, target.pos)
    if line is None:
        return None
    content = hide_newlines(get_lexeme(src, line, NO_ESCAPES))
    return (
        f"  |\n  | {content}\n  | {TERM_ESC}{TERM_RED}"
        f"{_caret_row(line, target)}{TERM_RESET}\n"
    )


@dataclass
class Diagnostic:
    """A single reported error with its location in the source."""

    kind: ErrorType
    x: int
    y: int
    span: Span
    message: str
    invalid_return: InvalidReturnInfo | None = field(default=None)

    def attach_invalid_return(self, data: InvalidReturnInfo) -> None:
        """Attach definition details; ignored unless this is an invalid-return error."""
        if self.kind is not ErrorType.INVALID_RETURN:
            return
        self.invalid_return = data

    def _render_invalid_return(self) -> str:
        info = self.invalid_return
        if info is None:
            return ""
        head = (
            f"{TERM_ESC}{TERM_MAGENTAB}definition:{TERM_RESET} "
            f"{info.def_path}:{info.def_y}:{info.def_x}\n"
        )
        excerpt = _render_excerpt(info.def_src, info.def_span)
        if excerpt is None:
            return head + LINE_FETCH_FAILED
        return (
            head
            + excerpt
            + f"function defined to return type '{info.def_type}'. "
            "Either change the return expression or use a runtime cast.\n"
        )

    def render(self, src: str, path: str) -> str:
        """Format the diagnostic with a source excerpt and carets under the span."""
        header = (
            f"{TERM_ESC}{TERM_REDB}error:{TERM_RESET} {path}:{self.y}:{self.x}"
            f"{TERM_ESC}{TERM_YELLOWB} {self.kind.label} {TERM_RESET}\n"
        )
        excerpt = _render_excerpt(src, self.span)
        if excerpt is None:
            return header + LINE_FETCH_FAILED
        parts = [header, excerpt, f"{self.message}\n"]
        if self.kind is ErrorType.INVALID_RETURN:
            parts.append(self._render_invalid_return())
        parts.append("\n")
        return "".join(parts)


class ErrorCollection:
    """Diagnostics gathered for one source file, reported in insertion order."""

    def __init__(self, src: str, path: str) -> None:
        self.src = src
        self.path = path
        self._errors: list[Diagnostic] = []

    def push(self, err: Diagnostic) -> None:
        """Record a diagnostic."""
        self._errors.append(err)

    def render_all(self) -> str:
        """Render every diagnostic, one after another."""
        return "".join(err.render(self.src, self.path) for err in self._errors)

    def report_all(self, stream: TextIO | None = None) -> None:
        """Write every rendered diagnostic to ``stream`` (standard output by default)."""
        out = sys.stdout if stream is None else stream
        out.write(self.render_all())

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._errors)