from __future__ import annotations

from texted.errors import TextedWriteError
from texted.types.value import List, Number, String, Symbol, Value
from texted.writer.base import Writer


class SexpWriter(Writer):
    """S-expression writer. Every value has a rendering, so output always reads back."""

    syntax = "sexp"

    def write_value(self, value: Value) -> str:
        match value:
            case Symbol() | String() | Number():
                return str(value)
            case List(elements):
                return "(" + " ".join(self.write_value(e) for e in elements) + ")"
            case _:
                raise TextedWriteError(f"cannot write {value!r} as an S-expression")
