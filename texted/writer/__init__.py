"""Writers: the inverse of each reader.

`write(syntax, program_or_value)` renders a program (a list of forms) or a
single value. For every program the readers can produce,
`parse(s, write(s, p))` equals `p`, except that shell syntax has no way to
express nested lists.
"""

from __future__ import annotations

from typing import Union

from texted.errors import TextedWriteError
from texted.types.value import Value
from texted.writer.base import Writer
from texted.writer.json_writer import JsonWriter
from texted.writer.sexp import SexpWriter
from texted.writer.shell import ShellWriter

WRITERS: dict[str, Writer] = {
    "shell": ShellWriter(),
    "sexp": SexpWriter(),
    "json": JsonWriter(),
}


def get_writer(syntax: str) -> Writer:
    writer = WRITERS.get(syntax)
    if writer is None:
        raise TextedWriteError(f"unknown syntax {syntax!r}; expected one of {', '.join(WRITERS)}")
    return writer


def write(syntax: str, program: Union[list, tuple, Value]) -> str:
    writer = get_writer(syntax)
    if isinstance(program, (list, tuple)):
        return writer.write(program)
    return writer.write_value(program)


__all__ = ["Writer", "ShellWriter", "SexpWriter", "JsonWriter", "WRITERS", "get_writer", "write"]
