"""
  Lexer shared by the shell-like and S-expression readers.

- Tokens are (kind, text, offset) triples; kinds: lparen, rparen, string, atom
- Whitespace is skipped; `;` line comments are skipped only when asked for
  (the shell reader treats top-level `;` as a statement separator instead)
- Atoms become Numbers when they match a plain decimal grammar, Symbols otherwise
- String literals use backslash escapes; an unknown escape is a syntax error
"""

from __future__ import annotations

import re
from typing import Iterator, NamedTuple

from texted.errors import TextedSyntaxError
from texted.types.value import Number, String, Symbol, Value

TOKEN_RE = re.compile(
    r"(?P<ws>\s+)"
    r"|(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<unterminated>")'  # a quote that never closes
    r'|(?P<atom>[^\s()";]+)',  # fallback: numbers and symbols
    re.DOTALL,
)

NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?\Z")

SIMPLE_ESCAPES: dict[str, str] = {
    "\\": "\\",
    '"': '"',
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
}

HEX_ESCAPES: dict[str, int] = {"x": 2, "u": 4, "U": 8}


class Token(NamedTuple):
    kind: str
    text: str
    offset: int


def position_of(source: str, offset: int) -> tuple[int, int]:
    """1-based (line, column) of `offset` within `source`."""
    line = source.count("\n", 0, offset) + 1
    last_nl = source.rfind("\n", 0, offset)
    return line, offset - last_nl


def syntax_error(message: str, source: str, offset: int, line_base: int = 0) -> TextedSyntaxError:
    line, col = position_of(source, offset)
    return TextedSyntaxError(message, line + line_base, col)


def lex(
    source: str,
    comments: bool = False,
    line_base: int = 0,
    start: int = 0,
    end: int | None = None,
) -> Iterator[Token]:
    """Token generator over `source[start:end]`.

    With `comments` set, `;` starts a comment that runs to end of line.
    `line_base` shifts reported line numbers when `source` is one line of a
    larger script. Token offsets index into the whole of `source`.
    """
    pos = start
    n = len(source) if end is None else end
    while pos < n:
        m = TOKEN_RE.match(source, pos, n)
        kind = m.lastgroup
        if kind == "ws":
            pass
        elif kind == "comment":
            if not comments:
                raise syntax_error("unexpected ';'", source, pos, line_base)
        elif kind == "unterminated":
            raise syntax_error("unterminated string literal", source, pos, line_base)
        else:
            yield Token(kind, m.group(kind), pos)
        pos = m.end()


def decode_string(literal: str, source: str = "", offset: int = 0, line_base: int = 0) -> str:
    """Decode a double-quoted literal (quotes included) into its text."""
    body = literal[1:-1]
    out: list[str] = []
    i = 0
    n = len(body)
    while i < n:
        ch = body[i]
        if ch != "\\":
            out.append(ch)
            i += 1
            continue
        if i + 1 >= n:
            raise syntax_error("dangling backslash in string literal", source, offset, line_base)
        esc = body[i + 1]
        if esc in SIMPLE_ESCAPES and not (esc == "0" and body[i + 2:i + 4].isdigit()):
            out.append(SIMPLE_ESCAPES[esc])
            i += 2
        elif esc in HEX_ESCAPES:
            width = HEX_ESCAPES[esc]
            digits = body[i + 2:i + 2 + width]
            if len(digits) != width or not all(c in "0123456789abcdefABCDEF" for c in digits):
                raise syntax_error(f"invalid \\{esc} escape in string literal", source, offset, line_base)
            code = int(digits, 16)
            if code > 0x10FFFF:
                raise syntax_error(f"escape \\{esc}{digits} is out of range", source, offset, line_base)
            out.append(chr(code))
            i += 2 + width
        elif esc in "01234567":
            digits = body[i + 1:i + 4]
            if len(digits) != 3 or not all(c in "01234567" for c in digits):
                raise syntax_error("invalid octal escape in string literal", source, offset, line_base)
            out.append(chr(int(digits, 8)))
            i += 4
        else:
            raise syntax_error(f"invalid escape \\{esc} in string literal", source, offset, line_base)
    return "".join(out)


def parse_atom(text: str) -> Value:
    if NUMBER_RE.match(text):
        return Number(float(text))
    return Symbol(text)


def token_value(token: Token, source: str = "", line_base: int = 0) -> Value:
    """Convert a string or atom token into a Value."""
    if token.kind == "string":
        return String(decode_string(token.text, source, token.offset, line_base))
    return parse_atom(token.text)
