# sudu

The front end of the sudu language, as a Python package with no runtime
dependencies. It has these modules:

- `sudu.common` holds `Span`, a region of source text with a position
  (`pos`) and a `length`. It also has the helpers `get_lexeme` and
  `cmp_lexeme`, which read or compare the text a span covers.
- `sudu.lexer` turns source text into `Token`s. Each token has a
  `TokenKind`, a span, and the column (`x`) and line (`y`) where it starts.
  Both count from 1. The lexer knows these tokens: parentheses, the
  operators `+ - * / %`, symbols, integer and float literals, the keywords
  `function` and `let`, newlines and end of input. Any other character
  gives an `ILLEGAL` token. Comments start with `#` and run to the end of
  the line.
- `sudu.errors` holds diagnostics (`Diagnostic`, `ErrorType`) and an
  `ErrorCollection` of them. A rendered diagnostic is in compiler style,
  with terminal colours. It shows the source line and marks the span with
  carets.
- `sudu.parser` holds the node map for the syntax tree (`NodeMap`, `Node`)
  and a `Parser` that turns numeric tokens into literal nodes.
- `sudu.cli` holds the `sudu` command.

## Installation

```
pip install .
```

## Tokenizing

```python
from sudu.lexer import Lexer

src = "function main\n    end # a comment\n"
for token in Lexer(src):
    print(token.format(src, True))
```

Iterating over a `Lexer` yields tokens up to and including the first `EOF`
token. You can also call `Lexer.next_token()` yourself. Once the input is
used up, it returns `EOF` every time.

`Token.format(src, internals)` describes a token on one line. When
`internals` is true, the line has the form `line:column | pos @ length |
KIND | 'text'`. When it is false, the line has the form `KIND | 'text'`.
A newline is shown as `\n` and the end of input as `\0`.

## Diagnostics

```python
from sudu.common import Span
from sudu.errors import Diagnostic, ErrorCollection, ErrorType

src = "function main()\n    let 2 = 20\nend\n"
errors = ErrorCollection(src, "main.sudu")
errors.push(Diagnostic(ErrorType.SYNTAX, 9, 2, Span(24, 1), "expected identifier, got '2'"))
errors.report_all()
```

- `ErrorCollection.render_all()` returns the text of every diagnostic, in
  the order they were pushed.
- `report_all(stream)` writes that text to `stream`, or to standard output
  if no stream is given.
- For an `INVALID_RETURN` error, `Diagnostic.attach_invalid_return` adds an
  `InvalidReturnInfo`. The rendered output then also shows where the
  function's return type was declared. For any other kind of error, this
  method does nothing.

## Parsing literals

```python
from sudu.lexer import Lexer
from sudu.parser import Parser

src = "1_024"
parser = Parser(src)
node_id = parser.parse_literal(Lexer(src).next_token())
print(parser.map.format_node(node_id, 0))   # [1] : INTEGER: 1024
```

`parse_literal` works as follows:

- It turns an `INTEGER` or `FLOAT` token into a node and returns the new
  node's id.
- For any other token, it returns `None`.
- Underscores in a literal are ignored.
- Integers are clamped to the 64-bit signed range.
- Floats are kept at single precision.
- If a literal's text is malformed, it raises `ValueError`.

Id 0 in a `NodeMap` is always the program node. `Parser.push_to_program`
stores a node and records it as a top-level declaration.

## Command line

```
sudu [path] [--brief]
```

The command tokenizes the file at `path` and prints one token per line. It
uses the same format as `Token.format`. With `--brief`, it leaves out the
line, column and span details. If no path is given, it tokenizes a small
built-in sample. If the file cannot be read, it prints an error to
standard error and exits with status 1.

## What it does not do

The package does not parse whole programs. The `Parser` only builds
literal nodes. The `BinaryExpr` node exists, but nothing builds it from
tokens. There is no type checking and no way to run sudu code. The
command only lists tokens.

## Running the tests

```
pip install .[test]
pytest
```