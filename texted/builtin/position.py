"""Read-only queries about positions in the buffer."""

from __future__ import annotations

from texted.builtin.args import no_args
from texted.builtin.text import line_start
from texted.types.buffer import Buffer
from texted.types.value import Number, Value


def point(args: list[Value], buffer: Buffer) -> Value:
    no_args("point", args)
    return Number(buffer.point)


def point_min(args: list[Value], buffer: Buffer) -> Value:
    no_args("point-min", args)
    return Number(1)


def point_max(args: list[Value], buffer: Buffer) -> Value:
    no_args("point-max", args)
    return Number(buffer.point_max)


def mark(args: list[Value], buffer: Buffer) -> Value:
    no_args("mark", args)
    return Number(buffer.mark)


def buffer_size(args: list[Value], buffer: Buffer) -> Value:
    no_args("buffer-size", args)
    return Number(len(buffer))


def current_column(args: list[Value], buffer: Buffer) -> Value:
    """Column of point, counting from 0 at the start of the line."""
    no_args("current-column", args)
    pos = buffer.point - 1
    return Number(pos - line_start(buffer.text, pos))


def line_number_at_pos(args: list[Value], buffer: Buffer) -> Value:
    no_args("line-number-at-pos", args)
    return Number(buffer.text.count("\n", 0, buffer.point - 1) + 1)


def region_beginning(args: list[Value], buffer: Buffer) -> Value:
    no_args("region-beginning", args)
    return Number(buffer.region()[0])


def region_end(args: list[Value], buffer: Buffer) -> Value:
    no_args("region-end", args)
    return Number(buffer.region()[1])
