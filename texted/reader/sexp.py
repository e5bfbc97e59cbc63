"""
  S-expression reader

- Recursive descent over the shared lexer; the cursor is an explicit index
  threaded through `read_form`, so there is no parser object holding state
- `( ... )` -> List, "..." -> String, decimal atoms -> Number, other atoms -> Symbol
- `;` starts a comment that runs to end of line
- Atoms at top level are forms of their own (`5` -> [5])
"""

from __future__ import annotations

import logging
from typing import Sequence

from texted.config import MAX_NESTING
from texted.errors import TextedSyntaxError
from texted.reader.tokenizer import Token, lex, syntax_error, token_value
from texted.types.value import List, Value

logger = logging.getLogger(__name__)


def read_form(
    tokens: Sequence[Token], pos: int, source: str, line_base: int = 0, depth: int = 0
) -> tuple[Value, int]:
    """Read one form starting at `tokens[pos]`; return it and the next index.

    `depth` counts the lists already open around this form.
    """
    if pos >= len(tokens):
        raise TextedSyntaxError("unexpected end of input")
    tok = tokens[pos]
    if tok.kind == "lparen":
        if depth >= MAX_NESTING:
            raise syntax_error("nesting too deep", source, tok.offset, line_base)
        return read_list(tokens, pos + 1, source, tok.offset, line_base, depth + 1)
    if tok.kind == "rparen":
        raise syntax_error("unexpected closing parenthesis", source, tok.offset, line_base)
    return token_value(tok, source, line_base), pos + 1


def read_list(
    tokens: Sequence[Token], pos: int, source: str, open_offset: int, line_base: int = 0, depth: int = 1
) -> tuple[List, int]:
    """Read list elements after an opening parenthesis up to its match."""
    items: list[Value] = []
    while True:
        if pos >= len(tokens):
            raise syntax_error("unterminated list", source, open_offset, line_base)
        if tokens[pos].kind == "rparen":
            return List(items), pos + 1
        item, pos = read_form(tokens, pos, source, line_base, depth)
        items.append(item)


def read_all(tokens: Sequence[Token], source: str, line_base: int = 0) -> list[Value]:
    forms: list[Value] = []
    pos = 0
    while pos < len(tokens):
        form, pos = read_form(tokens, pos, source, line_base)
        forms.append(form)
    return forms


def parse_sexp(source: str) -> list[Value]:
    """Parse S-expression text into a program (list of top-level forms)."""
    tokens = list(lex(source, comments=True))
    program = read_all(tokens, source)
    logger.debug("sexp reader produced %d form(s)", len(program))
    return program
