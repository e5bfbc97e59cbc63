from __future__ import annotations

import json
import math
from typing import Any, Iterable

from texted.errors import TextedWriteError
from texted.types.value import List, Number, String, Symbol, Value
from texted.writer.base import Writer


class JsonWriter(Writer):
    """JSON writer: Lists become arrays, Symbols and Strings become strings.

    `write` renders a program as one array of forms, which `parse_json`
    reads back as a whole program.
    """

    syntax = "json"

    def to_json(self, value: Value) -> Any:
        match value:
            case Symbol(name):
                return name
            case String(text):
                return text
            case Number(num):
                if not math.isfinite(num):
                    raise TextedWriteError(f"JSON cannot represent the number {num!r}")
                return int(num) if num.is_integer() else num
            case List(elements):
                return [self.to_json(e) for e in elements]
            case _:
                raise TextedWriteError(f"cannot write {value!r} as JSON")

    def write_value(self, value: Value) -> str:
        return json.dumps(self.to_json(value), ensure_ascii=False)

    def write(self, program: Iterable[Value]) -> str:
        forms = [self.to_json(form) for form in program]
        return json.dumps(forms, ensure_ascii=False)
