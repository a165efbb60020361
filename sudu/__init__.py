"""Lexer, diagnostics, syntax-tree storage and literal parsing for the sudu language."""

__version__ = "0.1.0"
__all__ = ["common", "lexer", "errors", "parser", "cli"]