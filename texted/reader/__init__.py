"""Readers turn script text into a program: an ordered list of Values.

Three syntaxes produce identical programs:

    shell   goto-char 7; delete-char 5
    sexp    (goto-char 7) (delete-char 5)
    json    [["goto-char", 7], ["delete-char", 5]]

A syntax error aborts the whole read; no partial program is returned.
"""

from __future__ import annotations

from typing import Callable

from texted.config import SYNTAXES
from texted.errors import TextedSyntaxError
from texted.reader.json_reader import parse_json, parse_json_program, parse_json_stream
from texted.reader.sexp import parse_sexp
from texted.reader.shell import parse_shell
from texted.reader.tokenizer import lex
from texted.types.value import Value

READERS: dict[str, Callable[[str], list[Value]]] = {
    "shell": parse_shell,
    "sexp": parse_sexp,
    "json": parse_json,
}


def parse(syntax: str, text: str) -> list[Value]:
    """Parse `text` written in `syntax` (one of shell, sexp, json)."""
    reader = READERS.get(syntax)
    if reader is None:
        raise TextedSyntaxError(f"unknown syntax {syntax!r}; expected one of {', '.join(SYNTAXES)}")
    return reader(text)


__all__ = [
    "READERS",
    "parse",
    "parse_shell",
    "parse_sexp",
    "parse_json",
    "parse_json_stream",
    "parse_json_program",
    "lex",
]
