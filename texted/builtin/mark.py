"""Mark and region selection commands."""

from __future__ import annotations

from texted.builtin.args import check_arity, no_args, number_arg, optional_count
from texted.builtin.text import is_word_char, line_start, lines_end
from texted.types.buffer import Buffer
from texted.types.value import EMPTY, Value


def set_mark(args: list[Value], buffer: Buffer) -> Value:
    """Set mark at point."""
    no_args("set-mark", args)
    buffer.mark = buffer.point
    return EMPTY


def set_mark_command(args: list[Value], buffer: Buffer) -> Value:
    """Set mark at POS (clamped), or at point when POS is omitted."""
    check_arity("set-mark-command", args, 0, 1)
    buffer.mark = number_arg("set-mark-command", args) if args else buffer.point
    return EMPTY


def exchange_point_and_mark(args: list[Value], buffer: Buffer) -> Value:
    no_args("exchange-point-and-mark", args)
    buffer.point, buffer.mark = buffer.mark, buffer.point
    return EMPTY


def mark_word(args: list[Value], buffer: Buffer) -> Value:
    """Select the word under point, or the next word after it.

    Mark goes to the start of the word and point to its end. Nothing changes
    when no word follows point.
    """
    no_args("mark-word", args)
    text = buffer.text
    n = len(text)
    pos = buffer.point - 1
    if pos < n and is_word_char(text[pos]):
        start = pos
        while start > 0 and is_word_char(text[start - 1]):
            start -= 1
    else:
        while pos < n and not is_word_char(text[pos]):
            pos += 1
        if pos >= n:
            return EMPTY
        start = pos
    end = pos
    while end < n and is_word_char(text[end]):
        end += 1
    buffer.mark = start + 1
    buffer.point = end + 1
    return EMPTY


def mark_line(args: list[Value], buffer: Buffer) -> Value:
    """Mark the start of the current line and put point after N lines."""
    count = optional_count("mark-line", args)
    text = buffer.text
    pos = buffer.point - 1
    buffer.mark = line_start(text, pos) + 1
    buffer.point = lines_end(text, pos, count) + 1
    return EMPTY


def mark_whole_buffer(args: list[Value], buffer: Buffer) -> Value:
    no_args("mark-whole-buffer", args)
    buffer.mark = 1
    buffer.point = buffer.point_max
    return EMPTY
