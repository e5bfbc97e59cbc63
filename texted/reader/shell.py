"""
  Shell-like reader

Each line is split on top-level semicolons (a `;` inside a string literal is
not a split point) and every non-empty segment becomes one top-level form:

    goto-char 7; delete-char 5      -> (goto-char 7) (delete-char 5)
    insert "a;b"                    -> (insert "a;b")
    buffer-substring (point) -1     -> (buffer-substring (point) -1)
    (mark-whole-buffer)             -> (mark-whole-buffer)

A segment beginning with `(` is one complete S-expression. Any other segment
is an implicit list of its tokens, with nested parentheses read recursively.
"""

from __future__ import annotations

import logging
from typing import Iterator

from texted.reader.sexp import read_form
from texted.reader.tokenizer import lex, syntax_error, token_value
from texted.types.value import List, Value

logger = logging.getLogger(__name__)


def split_statements(line: str) -> Iterator[tuple[str, int]]:
    """Yield (segment, offset) pairs for the top-level `;`-separated parts of `line`."""
    start = 0
    in_string = False
    escaped = False
    for i, ch in enumerate(line):
        if escaped:
            escaped = False
        elif in_string and ch == "\\":
            escaped = True
        elif ch == '"':
            in_string = not in_string
        elif ch == ";" and not in_string:
            yield line[start:i], start
            start = i + 1
    yield line[start:], start


def parse_segment(line: str, start: int, end: int, line_no: int) -> Value:
    """Parse the statement `line[start:end]`; `line_no` is 1-based."""
    base = line_no - 1
    tokens = list(lex(line, line_base=base, start=start, end=end))
    if tokens[0].kind == "lparen":
        form, pos = read_form(tokens, 0, line, base)
        if pos != len(tokens):
            raise syntax_error("unexpected tokens after expression", line, tokens[pos].offset, base)
        return form

    elements: list[Value] = []
    pos = 0
    while pos < len(tokens):
        tok = tokens[pos]
        if tok.kind == "lparen":
            form, pos = read_form(tokens, pos, line, base, depth=1)
            elements.append(form)
        elif tok.kind == "rparen":
            raise syntax_error("unexpected closing parenthesis in shell-like syntax", line, tok.offset, base)
        else:
            elements.append(token_value(tok, line, base))
            pos += 1
    return List(elements)


def parse_shell(source: str) -> list[Value]:
    """Parse shell-like script text into a program."""
    program: list[Value] = []
    for line_no, line in enumerate(source.split("\n"), start=1):
        for segment, offset in split_statements(line):
            if not segment.strip():
                continue
            program.append(parse_segment(line, offset, offset + len(segment), line_no))
    logger.debug("shell reader produced %d form(s)", len(program))
    return program
