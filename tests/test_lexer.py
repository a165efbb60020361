import pytest

from sudu.common import Span, get_lexeme
from sudu.lexer import Lexer, Token, TokenKind, keyword_kind


def kinds(src):
    return [t.kind for t in Lexer(src)]


def test_source_lexer_sequence():
    src = "function main\n    end#this is a comment\n"
    lexer = Lexer(src)
    expected = [
        (TokenKind.FUNCTION, 1, 1),
        (TokenKind.SYMBOL, 10, 1),
        (TokenKind.NEWLINE, 14, 1),
        (TokenKind.SYMBOL, 5, 2),
        (TokenKind.NEWLINE, 26, 2),
        (TokenKind.EOF, 1, 3),
    ]
    for kind, x, y in expected:
        token = lexer.next_token()
        assert (token.kind, token.x, token.y) == (kind, x, y)


def test_symbol_lexemes():
    src = "function main\n    end#this is a comment\n"
    lexemes = [get_lexeme(src, t.span) for t in Lexer(src) if t.kind is TokenKind.SYMBOL]
    assert lexemes == ["main", "end"]


def test_token_kind_numbering_matches_names():
    newline = Lexer("\n").next_token()
    assert newline.kind == 14
    assert newline.kind.name == "NEWLINE"
    eof = Lexer("").next_token()
    assert eof.kind == 0
    assert eof.kind.name == "EOF"
    illegal = Lexer("@").next_token()
    assert illegal.kind == 1
    assert illegal.kind.name == "ILLEGAL"


def test_single_character_operators():
    assert kinds("()+-*/%") == [
        TokenKind.LPAREN,
        TokenKind.RPAREN,
        TokenKind.PLUS,
        TokenKind.MINUS,
        TokenKind.STAR,
        TokenKind.SLASH,
        TokenKind.PERCENT,
        TokenKind.EOF,
    ]


def test_integer_with_underscores():
    src = "1_000"
    token = Lexer(src).next_token()
    assert token.kind is TokenKind.INTEGER
    assert get_lexeme(src, token.span) == src


def test_float_literal():
    src = "3.14"
    token = Lexer(src).next_token()
    assert token.kind is TokenKind.FLOAT
    assert get_lexeme(src, token.span) == src


def test_second_dot_ends_float():
    src = "1.2.3"
    tokens = list(Lexer(src))
    assert [t.kind for t in tokens] == [
        TokenKind.FLOAT,
        TokenKind.ILLEGAL,
        TokenKind.INTEGER,
        TokenKind.EOF,
    ]
    assert [get_lexeme(src, t.span) for t in tokens[:3]] == ["1.2", ".", "3"]


def test_keywords_and_symbols():
    assert kinds("let letter _foo1 function") == [
        TokenKind.LET,
        TokenKind.SYMBOL,
        TokenKind.SYMBOL,
        TokenKind.FUNCTION,
        TokenKind.EOF,
    ]


@pytest.mark.parametrize(
    "src, kind",
    [("function", TokenKind.FUNCTION), ("let", TokenKind.LET), ("main", TokenKind.SYMBOL)],
)
def test_keyword_kind(src, kind):
    assert keyword_kind(src, Span(0, len(src))) is kind


def test_illegal_character():
    token = Lexer("@").next_token()
    assert token.kind is TokenKind.ILLEGAL
    assert token.span == Span(0, 1)


def test_eof_repeats():
    lexer = Lexer("x")
    lexer.next_token()
    first = lexer.next_token()
    second = lexer.next_token()
    assert first.kind is TokenKind.EOF
    assert first == second


def test_iteration_ends_with_single_eof():
    tokens = list(Lexer("let a\n"))
    assert tokens[-1].kind is TokenKind.EOF
    assert sum(t.kind is TokenKind.EOF for t in tokens) == 1


def test_trailing_whitespace_yields_illegal_before_eof():
    assert kinds("a  ") == [TokenKind.SYMBOL, TokenKind.ILLEGAL, TokenKind.EOF]


def test_comment_at_end_of_input():
    assert kinds("a # trailing") == [TokenKind.SYMBOL, TokenKind.EOF]


def test_format_without_internals():
    src = "function main"
    token = Lexer(src).next_token()
    assert token.format(src, internals=False) == "FUNCTION | 'function'"


def test_format_newline_is_escaped():
    src = "\n"
    token = Lexer(src).next_token()
    assert token.format(src, internals=False) == "NEWLINE | '\\n'"


def test_format_with_internals_includes_position():
    src = "function main"
    token = Lexer(src).next_token()
    assert token.format(src, internals=True) == "1:1 | 0 @ 8 | FUNCTION | 'function'"


def test_token_is_immutable():
    token = Lexer("+").next_token()
    with pytest.raises(AttributeError):
        token.x = 2
    assert token == Token(TokenKind.PLUS, Span(0, 1), 1, 1)
    assert token.x == 1