"""Searching, match replacement and look-around predicates.

The search commands move point to the end of the match and record the match
(text plus 1-based, end-exclusive bounds) for replace-match. A failed search
raises TextedSearchFailed and leaves the buffer untouched; an invalid regexp
raises TextedInvalidRegexp.

looking-at and looking-back never fail on a bad pattern: when the pattern
does not compile they fall back to a literal prefix / suffix comparison.
"""

from __future__ import annotations

import re
from typing import Optional

from texted.builtin.args import check_arity, string_arg
from texted.errors import TextedInvalidRegexp, TextedNoPreviousSearch, TextedSearchFailed
from texted.types.buffer import Buffer
from texted.types.value import EMPTY, Value, boolean


def compile_regexp(pattern: str) -> re.Pattern:
    try:
        return re.compile(pattern)
    except re.error as err:
        raise TextedInvalidRegexp(f"invalid regexp {pattern!r}: {err}") from err


def try_compile(pattern: str) -> Optional[re.Pattern]:
    """Compile `pattern`, or return None when it is not a valid regexp."""
    try:
        return re.compile(pattern)
    except re.error:
        return None


def _found(buffer: Buffer, start: int, end: int) -> Value:
    # start/end are 0-based indices of the match
    buffer.record_search(buffer.text[start:end], start + 1, end + 1)
    buffer.point = end + 1
    return EMPTY


def search_forward(args: list[Value], buffer: Buffer) -> Value:
    """Search forward from point for STRING, literally."""
    check_arity("search-forward", args, 1)
    needle = string_arg("search-forward", args)
    text = buffer.text
    pos = buffer.point - 1
    if pos >= len(text):
        raise TextedSearchFailed(f"search failed: {needle!r}")
    index = text.find(needle, pos)
    if index == -1:
        raise TextedSearchFailed(f"search failed: {needle!r}")
    return _found(buffer, index, index + len(needle))


def search_backward(args: list[Value], buffer: Buffer) -> Value:
    """Search before point for the last literal occurrence of STRING."""
    check_arity("search-backward", args, 1)
    needle = string_arg("search-backward", args)
    text = buffer.text
    index = text.rfind(needle, 0, buffer.point - 1)
    if index == -1:
        raise TextedSearchFailed(f"search failed: {needle!r}")
    return _found(buffer, index, index + len(needle))


def re_search_forward(args: list[Value], buffer: Buffer) -> Value:
    """Search forward from point for a match of REGEXP."""
    check_arity("re-search-forward", args, 1)
    pattern = string_arg("re-search-forward", args)
    rx = compile_regexp(pattern)
    text = buffer.text
    pos = buffer.point - 1
    if pos >= len(text):
        raise TextedSearchFailed(f"search failed: {pattern!r}")
    # the text after point is searched on its own, so ^ matches at point
    m = rx.search(text[pos:])
    if m is None:
        raise TextedSearchFailed(f"search failed: {pattern!r}")
    return _found(buffer, pos + m.start(), pos + m.end())


def re_search_backward(args: list[Value], buffer: Buffer) -> Value:
    """Find the last match of REGEXP that lies entirely before point."""
    check_arity("re-search-backward", args, 1)
    pattern = string_arg("re-search-backward", args)
    rx = compile_regexp(pattern)
    last = None
    for last in rx.finditer(buffer.text[:buffer.point - 1]):
        pass
    if last is None:
        raise TextedSearchFailed(f"search failed: {pattern!r}")
    return _found(buffer, last.start(), last.end())


def replace_match(args: list[Value], buffer: Buffer) -> Value:
    """Replace the text matched by the last search with STRING."""
    check_arity("replace-match", args, 1)
    replacement = string_arg("replace-match", args)
    match = buffer.last_search
    if match is None:
        raise TextedNoPreviousSearch("replace-match: no previous search")
    start, end = match.start - 1, match.end - 1
    if start < 0 or end > len(buffer) or start >= end:
        raise TextedNoPreviousSearch("replace-match: the previous match no longer fits the buffer")
    buffer.splice(start, end, replacement)
    return EMPTY


def looking_at(args: list[Value], buffer: Buffer) -> Value:
    """t if the text after point matches PATTERN, else nil."""
    check_arity("looking-at", args, 1)
    pattern = string_arg("looking-at", args)
    text = buffer.text
    pos = buffer.point - 1
    if pos >= len(text):
        return boolean(False)
    rx = try_compile(pattern)
    if rx is None:
        return boolean(text.startswith(pattern, pos))
    return boolean(rx.match(text[pos:]) is not None)


def looking_back(args: list[Value], buffer: Buffer) -> Value:
    """t if a match of PATTERN ends exactly at point, else nil."""
    check_arity("looking-back", args, 1)
    pattern = string_arg("looking-back", args)
    pos = buffer.point - 1
    if pos <= 0:
        return boolean(False)
    before = buffer.text[:pos]
    rx = try_compile(pattern)
    if rx is None:
        return boolean(before.endswith(pattern))
    # nearest start first; a match from `start` must run exactly to point
    return boolean(any(rx.fullmatch(before, start) for start in range(pos, -1, -1)))
