from __future__ import annotations

from texted.errors import TextedWriteError
from texted.types.value import List, Number, String, Symbol, Value, format_number, quote_string
from texted.writer.base import Writer


class ShellWriter(Writer):
    """Shell-like writer: `name arg arg`.

    Only a flat List is representable; nested Lists and bare atoms are
    rejected because the shell reader would read them back differently.
    """

    syntax = "shell"

    def write_value(self, value: Value) -> str:
        if not isinstance(value, List):
            raise TextedWriteError(f"shell syntax can only write lists, got {value.kind}")
        if not value.elements:
            return "()"
        return " ".join(self._atom(e) for e in value.elements)

    def _atom(self, value: Value) -> str:
        match value:
            case Symbol(name):
                return name
            case String(text):
                return quote_string(text)
            case Number(num):
                return format_number(num)
            case List():
                raise TextedWriteError("shell syntax cannot represent nested lists")
            case _:
                raise TextedWriteError(f"cannot write {value!r} in shell syntax")
