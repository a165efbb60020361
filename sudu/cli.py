"""Command-line entry point: print the tokens of a sudu source file."""

from __future__ import annotations

import argparse
import sys

from sudu.lexer import Lexer

SAMPLE_SOURCE = "function main\n    end#this is a comment\n"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sudu", description="Print the tokens of a sudu source file."
    )
    parser.add_argument(
        "path",
        nargs="?",
        help="source file to tokenize; a built-in sample is used when omitted",
    )
    parser.add_argument(
        "--brief",
        action="store_true",
        help="omit line, column and span details",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Tokenize the given file (or the sample) and print one token per line."""
    args = _build_parser().parse_args(argv)

    if args.path is None:
        src = SAMPLE_SOURCE
    else:
        try:
            with open(args.path, encoding="utf-8") as handle:
                src = handle.read()
        except OSError as exc:
            print(f"error: cannot read {args.path}: {exc.strerror}", file=sys.stderr)
            return 1

    for token in Lexer(src):
        print(token.format(src, internals=not args.brief))
    return 0


if __name__ == "__main__":
    sys.exit(main())