from __future__ import annotations

from typing import Iterable

from texted.types.value import Value


class Writer:
    """Renders values back into one surface syntax.

    Subclasses implement `write_value`; `write` renders a whole program with
    one top-level form per line.
    """

    syntax: str = ""

    def write_value(self, value: Value) -> str:
        raise NotImplementedError

    def write(self, program: Iterable[Value]) -> str:
        return "\n".join(self.write_value(form) for form in program)
