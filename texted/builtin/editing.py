"""Insertion, deletion and replacement.

Every deletion works on a 0-based half-open span, normalised so start <= end
and clamped into the text; an empty span is a no-op. Afterwards point sits at
the start of the deleted span, or after the inserted replacement.
"""

from __future__ import annotations

from texted.builtin.args import check_arity, no_args, optional_count, string_arg
from texted.builtin.text import backward_word_start, forward_word_end, line_end, line_start, lines_end
from texted.types.buffer import Buffer
from texted.types.value import EMPTY, Value


def insert(args: list[Value], buffer: Buffer) -> Value:
    """Insert STRING at point; point ends up after it."""
    check_arity("insert", args, 1)
    buffer.insert(string_arg("insert", args))
    return EMPTY


def delete_char(args: list[Value], buffer: Buffer) -> Value:
    """Delete N characters after point. Point does not move."""
    count = optional_count("delete-char", args)
    if count <= 0:
        return EMPTY
    pos = buffer.point - 1
    buffer.delete(pos, pos + count, keep_point=True)
    return EMPTY


def delete_backward_char(args: list[Value], buffer: Buffer) -> Value:
    """Delete N characters before point."""
    count = optional_count("delete-backward-char", args)
    if count <= 0:
        return EMPTY
    pos = buffer.point - 1
    buffer.delete(max(0, pos - count), pos)
    return EMPTY


def delete_region(args: list[Value], buffer: Buffer) -> Value:
    no_args("delete-region", args)
    start, end = buffer.region()
    buffer.delete(start - 1, end - 1)
    return EMPTY


def replace_region(args: list[Value], buffer: Buffer) -> Value:
    """Replace the region with STRING; an empty region is left alone."""
    check_arity("replace-region", args, 1)
    replacement = string_arg("replace-region", args)
    start, end = buffer.region()
    if start >= end:
        return EMPTY
    buffer.splice(start - 1, end - 1, replacement)
    return EMPTY


def delete_line(args: list[Value], buffer: Buffer) -> Value:
    """Delete N whole lines starting with the current one, newlines included."""
    count = optional_count("delete-line", args)
    if count <= 0:
        return EMPTY
    text = buffer.text
    pos = buffer.point - 1
    start = line_start(text, pos)
    buffer.delete(start, lines_end(text, pos, count))
    buffer.point = start + 1
    return EMPTY


def kill_line(args: list[Value], buffer: Buffer) -> Value:
    """Delete from point to the end of the line.

    On an empty remainder (point right before a newline) the newline itself
    goes. With N > 1, N lines from point are deleted, newlines included.
    """
    count = optional_count("kill-line", args)
    text = buffer.text
    pos = buffer.point - 1
    if count <= 0 or pos >= len(text):
        return EMPTY
    if count == 1:
        end = line_end(text, pos)
        if end == pos:
            end += 1
    else:
        end = lines_end(text, pos, count)
    buffer.delete(pos, end)
    return EMPTY


def kill_word(args: list[Value], buffer: Buffer) -> Value:
    """Delete up to the end of the Nth word after point."""
    count = optional_count("kill-word", args)
    pos = buffer.point - 1
    buffer.delete(pos, forward_word_end(buffer.text, pos, count))
    return EMPTY


def backward_kill_word(args: list[Value], buffer: Buffer) -> Value:
    """Delete back to the start of the Nth word before point."""
    count = optional_count("backward-kill-word", args)
    pos = buffer.point - 1
    buffer.delete(backward_word_start(buffer.text, pos, count), pos)
    return EMPTY
