"""Point movement: characters, words, lines and the buffer ends."""

from __future__ import annotations

from texted.builtin.args import check_arity, no_args, number_arg, optional_count
from texted.builtin.text import backward_word_start, forward_word_end, line_end, line_start
from texted.types.buffer import Buffer
from texted.types.value import EMPTY, Value


def forward_char(args: list[Value], buffer: Buffer) -> Value:
    """Move point forward N characters (default 1); a negative N moves backward."""
    count = optional_count("forward-char", args)
    buffer.point = buffer.point + count
    return EMPTY


def backward_char(args: list[Value], buffer: Buffer) -> Value:
    """Move point backward N characters (default 1)."""
    count = optional_count("backward-char", args)
    buffer.point = buffer.point - count
    return EMPTY


def forward_word(args: list[Value], buffer: Buffer) -> Value:
    """Move point to the end of the Nth word after it."""
    count = optional_count("forward-word", args)
    buffer.point = forward_word_end(buffer.text, buffer.point - 1, count) + 1
    return EMPTY


def backward_word(args: list[Value], buffer: Buffer) -> Value:
    """Move point to the start of the Nth word before it."""
    count = optional_count("backward-word", args)
    buffer.point = backward_word_start(buffer.text, buffer.point - 1, count) + 1
    return EMPTY


def beginning_of_line(args: list[Value], buffer: Buffer) -> Value:
    no_args("beginning-of-line", args)
    buffer.point = line_start(buffer.text, buffer.point - 1) + 1
    return EMPTY


def end_of_line(args: list[Value], buffer: Buffer) -> Value:
    """Move point before the newline that ends the current line."""
    no_args("end-of-line", args)
    buffer.point = line_end(buffer.text, buffer.point - 1) + 1
    return EMPTY


def beginning_of_buffer(args: list[Value], buffer: Buffer) -> Value:
    no_args("beginning-of-buffer", args)
    buffer.point = 1
    return EMPTY


def end_of_buffer(args: list[Value], buffer: Buffer) -> Value:
    no_args("end-of-buffer", args)
    buffer.point = buffer.point_max
    return EMPTY


def goto_char(args: list[Value], buffer: Buffer) -> Value:
    """Set point to POS, clamped into [1, point-max]."""
    check_arity("goto-char", args, 1)
    buffer.point = number_arg("goto-char", args)
    return EMPTY


def goto_line(args: list[Value], buffer: Buffer) -> Value:
    """Move point to the start of line N (1-based, clamped to the existing lines)."""
    check_arity("goto-line", args, 1)
    target = number_arg("goto-line", args)
    lines = buffer.text.split("\n")
    target = max(1, min(target, len(lines)))
    buffer.point = 1 + sum(len(line) + 1 for line in lines[:target - 1])
    return EMPTY
