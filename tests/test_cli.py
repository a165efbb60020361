from sudu.cli import SAMPLE_SOURCE, main
from sudu.lexer import Lexer, TokenKind


def test_sample_source_tokens(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    tokens = list(Lexer(SAMPLE_SOURCE))
    assert lines == [t.format(SAMPLE_SOURCE) for t in tokens]
    assert [t.kind for t in tokens] == [
        TokenKind.FUNCTION,
        TokenKind.SYMBOL,
        TokenKind.NEWLINE,
        TokenKind.SYMBOL,
        TokenKind.NEWLINE,
        TokenKind.EOF,
    ]


def test_file_source_tokens(tmp_path, capsys):
    src = "let x\n"
    path = tmp_path / "prog.sudu"
    path.write_text(src, encoding="utf-8")
    assert main([str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [t.format(src) for t in Lexer(src)]


def test_brief_output(tmp_path, capsys):
    src = "let"
    path = tmp_path / "prog.sudu"
    path.write_text(src, encoding="utf-8")
    assert main(["--brief", str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [t.format(src, False) for t in Lexer(src)]
    assert lines[0] == "LET | 'let'"


def test_missing_file_reports_error(tmp_path, capsys):
    assert main([str(tmp_path / "absent.sudu")]) == 1
    captured = capsys.readouterr()
    assert "cannot read" in captured.err
    assert captured.out == ""