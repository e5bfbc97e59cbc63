"""Reading buffer text."""

from __future__ import annotations

from texted.builtin.args import check_arity, number_arg
from texted.types.buffer import Buffer
from texted.types.value import String, Value


def buffer_substring(args: list[Value], buffer: Buffer) -> Value:
    """Text between 1-based positions START and END (exclusive).

    END = -1 stands for the end of the buffer. Both ends are clamped and an
    empty or inverted range gives the empty string.
    """
    check_arity("buffer-substring", args, 2)
    start = number_arg("buffer-substring", args, 0)
    end = number_arg("buffer-substring", args, 1)
    text = buffer.text
    if end == -1:
        end = len(text) + 1
    start = max(start - 1, 0)
    end = min(end - 1, len(text))
    if start >= end:
        return String("")
    return String(text[start:end])
