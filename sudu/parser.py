"""Abstract syntax tree storage and literal parsing for sudu source."""

from __future__ import annotations

import math
import re
import struct
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from sudu.common import NO_ESCAPES, Span, get_lexeme
from sudu.lexer import Lexer, Token, TokenKind

PROGRAM_ID = 0

_LONG_MAX = 2**63 - 1
_LONG_MIN = -(2**63)

_SPACE = r"[ \t\n\v\f\r]*"
_INTEGER_RE = re.compile(_SPACE + r"([+-]?\d+)")
_FLOAT_RE = re.compile(
    _SPACE
    + r"([+-]?(?:"
    r"0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)(?:p[+-]?\d+)?"
    r"|(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?"
    r"|inf(?:inity)?"
    r"|nan"
    r"))",
    re.IGNORECASE,
)


class NodeType(Enum):
    PROGRAM = 0
    BINARY_EXPR = 1
    FLOAT = 2
    INTEGER = 3


class BinaryOp(Enum):
    ADD = 0
    SUB = 1
    MUL = 2
    DIV = 3
    MOD = 4


@dataclass(frozen=True)
class BinaryExpr:
    """An operator applied to two nodes, referenced by id."""

    op: BinaryOp
    lhs: int
    rhs: int


NodeValue = Union[list, BinaryExpr, float, int]


@dataclass
class Node:
    """One AST node; ``value`` depends on ``type``.

    A program holds a list of top-level node ids, a binary expression a
    ``BinaryExpr``, and literals their numeric value.
    """

    type: NodeType
    span: Span
    value: NodeValue = field(default_factory=list)


class NodeMap:
    """All nodes of a tree in one list; a node's id is its index.

    Id 0 is always the program node.
    """

    def __init__(self) -> None:
        self._nodes: list[Node] = [Node(NodeType.PROGRAM, Span(0, 0), [])]

    @property
    def program(self) -> Node:
        return self._nodes[PROGRAM_ID]

    def push(self, node: Node) -> int:
        """Store ``node`` and return its id."""
        self._nodes.append(node)
        return len(self._nodes) - 1

    def get(self, node_id: int) -> Node | None:
        """Return the node with ``node_id``, or None if there is none."""
        if node_id < 0 or node_id >= len(self._nodes):
            return None
        return self._nodes[node_id]

    def __len__(self) -> int:
        return len(self._nodes)

    def format_node(self, node_id: int, indent: int = 0) -> str:
        """Render the subtree rooted at ``node_id`` as indented lines."""
        if node_id == PROGRAM_ID:
            return ""
        pad = " " * indent
        node = self.get(node_id)
        if node is None:
            return f"{pad}NULL\n"

        head = f"{pad}[{node_id}] : "
        if node.type is NodeType.BINARY_EXPR:
            expr = node.value
            return (
                head
                + "BINARY EXPR:\n"
                + self.format_node(expr.lhs, indent + 2)
                + self.format_node(expr.rhs, indent + 2)
            )
        if node.type is NodeType.FLOAT:
            return f"{head}FLOAT: {node.value:f}\n"
        if node.type is NodeType.INTEGER:
            return f"{head}INTEGER: {node.value}\n"
        return head


def remove_literal_underscores(text: str) -> str:
    """Drop the digit separators from a numeric literal."""
    return text.replace("_", "")


def _to_float32(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def parse_integer(lexeme: str) -> int:
    """Parse a base-10 integer literal, clamping to the 64-bit signed range.

    Raises ValueError when there are no digits or trailing characters remain.
    """
    text = remove_literal_underscores(lexeme)
    match = _INTEGER_RE.match(text)
    if match is None:
        raise ValueError("No digits in INTEGER")
    if match.end() != len(text):
        raise ValueError("Invalid chars in INTEGER")
    value = int(match.group(1))
    return max(_LONG_MIN, min(_LONG_MAX, value))


def parse_float(lexeme: str) -> float:
    """Parse a floating-point literal at single precision.

    Raises ValueError when there are no digits or trailing characters remain.
    """
    text = remove_literal_underscores(lexeme)
    match = _FLOAT_RE.match(text)
    if match is None:
        raise ValueError("No digits in FLOAT")
    if match.end() != len(text):
        raise ValueError("Invalid chars in FLOAT")
    body = match.group(1)
    if "x" in body.lower() and not body.lower().lstrip("+-").startswith(("inf", "nan")):
        value = float.fromhex(body)
    else:
        value = float(body)
    return _to_float32(value)


class Parser:
    """Builds AST nodes from the tokens of one source text."""

    def __init__(self, src: str) -> None:
        self.src = src
        self.lexer = Lexer(src)
        self.map = NodeMap()

    @property
    def program(self) -> Node:
        return self.map.program

    def push_to_program(self, node: Node) -> int:
        """Store ``node`` as a top-level declaration and return its id."""
        node_id = self.map.push(node)
        self.map.program.value.append(node_id)
        return node_id

    def make_integer(self, span: Span, value: int) -> int:
        """Store an integer literal node and return its id."""
        return self.map.push(Node(NodeType.INTEGER, span, value))

    def make_float(self, span: Span, value: float) -> int:
        """Store a float literal node (single precision) and return its id."""
        return self.map.push(Node(NodeType.FLOAT, span, _to_float32(value)))

    def parse_literal(self, token: Token) -> int | None:
        """Turn a numeric token into a node; None for any other kind of token.

        Raises ValueError when the literal's text is malformed.
        """
        if token.kind is TokenKind.INTEGER:
            lexeme = get_lexeme(self.src, token.span, NO_ESCAPES)
            value = parse_integer(lexeme)
            return self.make_integer(Span(token.span.pos, token.span.length), value)
        if token.kind is TokenKind.FLOAT:
            lexeme = get_lexeme(self.src, token.span, NO_ESCAPES)
            value = parse_float(lexeme)
            return self.make_float(Span(token.span.pos, token.span.length), value)
        return None