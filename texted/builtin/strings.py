"""String functions. None of these touch the buffer."""

from __future__ import annotations

import re

from texted.builtin.args import check_arity, number_arg, string_arg
from texted.builtin.search import compile_regexp, try_compile
from texted.errors import TextedInvalidRegexp
from texted.types.buffer import Buffer
from texted.types.value import NIL, Number, String, Value


def concat(args: list[Value], buffer: Buffer) -> Value:
    """Join any number of strings."""
    return String("".join(string_arg("concat", args, i) for i in range(len(args))))


def substring(args: list[Value], buffer: Buffer) -> Value:
    """Characters START..END of STRING, 1-based and end-exclusive; END defaults to the end."""
    check_arity("substring", args, 2, 3)
    text = string_arg("substring", args, 0)
    start = number_arg("substring", args, 1) - 1
    end = number_arg("substring", args, 2) - 1 if len(args) == 3 else len(text)
    start = max(start, 0)
    end = min(end, len(text))
    if start > end:
        return String("")
    return String(text[start:end])


def length(args: list[Value], buffer: Buffer) -> Value:
    check_arity("length", args, 1)
    return Number(len(string_arg("length", args)))


def upcase(args: list[Value], buffer: Buffer) -> Value:
    check_arity("upcase", args, 1)
    return String(string_arg("upcase", args).upper())


def downcase(args: list[Value], buffer: Buffer) -> Value:
    check_arity("downcase", args, 1)
    return String(string_arg("downcase", args).lower())


def capitalize(args: list[Value], buffer: Buffer) -> Value:
    """Upper-case the first character and lower-case the rest."""
    check_arity("capitalize", args, 1)
    text = string_arg("capitalize", args)
    return String(text[:1].upper() + text[1:].lower())


def string_match(args: list[Value], buffer: Buffer) -> Value:
    """0-based index of the first match of PATTERN in STRING, or nil.

    A pattern that does not compile is searched for literally.
    """
    check_arity("string-match", args, 2)
    pattern = string_arg("string-match", args, 0)
    text = string_arg("string-match", args, 1)
    rx = try_compile(pattern)
    if rx is None:
        index = text.find(pattern)
        return NIL if index == -1 else Number(index)
    m = rx.search(text)
    return NIL if m is None else Number(m.start())


def replace_regexp_in_string(args: list[Value], buffer: Buffer) -> Value:
    """Replace every match of PATTERN in STRING with REPLACEMENT (`\\1` refers to groups)."""
    check_arity("replace-regexp-in-string", args, 3)
    pattern = string_arg("replace-regexp-in-string", args, 0)
    replacement = string_arg("replace-regexp-in-string", args, 1)
    text = string_arg("replace-regexp-in-string", args, 2)
    rx = compile_regexp(pattern)
    try:
        return String(rx.sub(replacement, text))
    except re.error as err:
        raise TextedInvalidRegexp(f"invalid replacement {replacement!r}: {err}") from err
