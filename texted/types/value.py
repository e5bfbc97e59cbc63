"""Closed value model for texted programs.

Every script form and every runtime result is one of four variants:
Symbol, String, Number or List. The variant set is fixed, so each value
carries a `Kind` tag and code dispatches on it (or on the class via `match`).
Values are immutable; a List owns a tuple of its elements.
"""

from __future__ import annotations

import enum
import math
import sys
from dataclasses import dataclass, field
from typing import Iterable, Union


class Kind(enum.Enum):
    SYMBOL = "symbol"
    STRING = "string"
    NUMBER = "number"
    LIST = "list"

    def __str__(self) -> str:
        return self.value


_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\v": "\\v",
}


def quote_string(text: str) -> str:
    """Render `text` as a double-quoted literal the readers accept."""
    out = ['"']
    for ch in text:
        esc = _ESCAPES.get(ch)
        if esc is not None:
            out.append(esc)
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            out.append(f"\\x{ord(ch):02x}")
        else:
            out.append(ch)
    out.append('"')
    return "".join(out)


def format_number(value: float) -> str:
    # Integral values print without a fraction; everything else uses the
    # shortest repr that reads back to the same float.
    if math.isinf(value):
        return "-1e999" if value < 0 else "1e999"
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


@dataclass(frozen=True, slots=True)
class Symbol:
    name: str

    def __post_init__(self):
        object.__setattr__(self, "name", sys.intern(self.name))

    @property
    def kind(self) -> Kind:
        return Kind.SYMBOL

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class String:
    value: str

    @property
    def kind(self) -> Kind:
        return Kind.STRING

    def __str__(self) -> str:
        return quote_string(self.value)


@dataclass(frozen=True, slots=True)
class Number:
    value: float

    def __post_init__(self):
        object.__setattr__(self, "value", float(self.value))

    @property
    def kind(self) -> Kind:
        return Kind.NUMBER

    def as_int(self) -> int:
        """Truncate toward zero, the way positions and counts are read.

        Infinities saturate at +-sys.maxsize and NaN reads as 0, so callers
        that clamp into the buffer never see a non-integer.
        """
        if math.isnan(self.value):
            return 0
        if math.isinf(self.value):
            return sys.maxsize if self.value > 0 else -sys.maxsize
        return int(self.value)

    def __str__(self) -> str:
        return format_number(self.value)


@dataclass(frozen=True, slots=True)
class List:
    elements: tuple = field(default=())

    def __post_init__(self):
        object.__setattr__(self, "elements", tuple(self.elements))

    @property
    def kind(self) -> Kind:
        return Kind.LIST

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self):
        return iter(self.elements)

    def __getitem__(self, index):
        return self.elements[index]

    @property
    def head(self) -> "Value | None":
        return self.elements[0] if self.elements else None

    @property
    def rest(self) -> tuple:
        return self.elements[1:]

    def __str__(self) -> str:
        return "(" + " ".join(str(e) for e in self.elements) + ")"


Value = Union[Symbol, String, Number, List]
Program = list  # list[Value], in evaluation order

NIL = Symbol("nil")
T = Symbol("t")
EMPTY = String("")


def is_a(value: Value, kind: Kind) -> bool:
    return value.kind is kind


def symbol(name: str) -> Symbol:
    return Symbol(name)


def string(value: str) -> String:
    return String(value)


def number(value: Union[int, float]) -> Number:
    return Number(value)


def make_list(*elements: Value) -> List:
    return List(elements)


def list_of(elements: Iterable[Value]) -> List:
    return List(tuple(elements))


def boolean(flag: bool) -> Symbol:
    """Predicates answer with the symbols t and nil."""
    return T if flag else NIL
