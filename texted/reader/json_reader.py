"""
  JSON reader

Every form is a JSON array whose first element is a string naming the
function. The remaining elements convert as:

    string -> String      number -> Number      array -> List (same rules)

Booleans, null, objects and top-level scalars are rejected. Two entry points
share the conversion: `parse_json_stream` reads one JSON value after another
(whitespace separated), `parse_json_program` reads a single array of forms.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from texted.config import MAX_NESTING
from texted.errors import TextedSyntaxError
from texted.types.value import List, Number, String, Symbol, Value

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    raise TextedSyntaxError(f"{name} is not a valid number in texted JSON")


_DECODER = json.JSONDecoder(parse_constant=_reject_constant)


def _describe(value: Any) -> str:
    if isinstance(value, bool):
        return "boolean"
    if value is None:
        return "null"
    if isinstance(value, dict):
        return "object"
    if isinstance(value, list):
        return "array"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (int, float)):
        return "number"
    return type(value).__name__


def convert_form(value: Any, where: str = "form", depth: int = 1) -> List:
    """Convert one decoded JSON array into a List form, validating as we go.

    `depth` is the nesting level of `value`, 1 for a top-level form.
    """
    if depth > MAX_NESTING:
        raise TextedSyntaxError(f"{where}: nesting too deep")
    if not isinstance(value, list):
        raise TextedSyntaxError(f"{where}: expected an array, got {_describe(value)}")
    if not value:
        raise TextedSyntaxError(f"{where}: empty array is not a valid form")
    head = value[0]
    if not isinstance(head, str):
        raise TextedSyntaxError(
            f"{where}: first element of an array must be a string, got {_describe(head)}"
        )
    elements: list[Value] = [Symbol(head)]
    for i, item in enumerate(value[1:], start=1):
        elements.append(convert_item(item, f"{where}[{i}]", depth))
    return List(elements)


def convert_item(item: Any, where: str, depth: int = 1) -> Value:
    # bool is a subclass of int; test it first
    if isinstance(item, bool):
        raise TextedSyntaxError(f"{where}: boolean values are not supported in texted JSON")
    if item is None:
        raise TextedSyntaxError(f"{where}: null values are not supported in texted JSON")
    if isinstance(item, str):
        return String(item)
    if isinstance(item, (int, float)):
        return Number(item)
    if isinstance(item, list):
        return convert_form(item, where, depth + 1)
    if isinstance(item, dict):
        raise TextedSyntaxError(f"{where}: objects are not supported in texted JSON")
    raise TextedSyntaxError(f"{where}: unsupported JSON value {item!r}")


def _decode_error(err: json.JSONDecodeError) -> TextedSyntaxError:
    return TextedSyntaxError(f"JSON decode error: {err.msg}", err.lineno, err.colno)


def _raw_decode(source: str, pos: Optional[int] = None) -> tuple[Any, int]:
    """raw_decode from `pos`, or decode the whole of `source` when `pos` is None."""
    try:
        if pos is None:
            return _DECODER.decode(source), len(source)
        return _DECODER.raw_decode(source, pos)
    except json.JSONDecodeError as err:
        raise _decode_error(err) from None
    except RecursionError as err:
        # the decoder recurses once per nested array
        raise TextedSyntaxError("JSON decode error: nesting too deep") from err


def _skip_ws(source: str, pos: int) -> int:
    while pos < len(source) and source[pos] in " \t\n\r":
        pos += 1
    return pos


def parse_json_stream(source: str) -> list[Value]:
    """Parse a sequence of JSON arrays, one form each."""
    program: list[Value] = []
    pos = _skip_ws(source, 0)
    index = 0
    while pos < len(source):
        raw, pos = _raw_decode(source, pos)
        program.append(convert_form(raw, f"form {index}"))
        index += 1
        pos = _skip_ws(source, pos)
    logger.debug("json stream reader produced %d form(s)", len(program))
    return program


def parse_json_program(source: str) -> list[Value]:
    """Parse one JSON array whose elements are the forms of the program."""
    raw, _ = _raw_decode(source)
    if not isinstance(raw, list):
        raise TextedSyntaxError(f"expected a JSON array of forms, got {_describe(raw)}")
    program = [convert_form(item, f"form {i}") for i, item in enumerate(raw)]
    logger.debug("json reader produced %d form(s)", len(program))
    return program


def parse_json(source: str) -> list[Value]:
    """Parse JSON script text.

    A text that is a single array of arrays is read as a whole program
    (`[["point"], ["mark"]]`); otherwise the text is read as a stream of
    forms (`["point"] ["mark"]`). Blank input is the empty program.
    """
    if not source.strip():
        return []
    raw, end = _raw_decode(source, _skip_ws(source, 0))
    if _skip_ws(source, end) == len(source) and isinstance(raw, list) and (
        not raw or all(isinstance(item, list) for item in raw)
    ):
        return parse_json_program(source)
    return parse_json_stream(source)
