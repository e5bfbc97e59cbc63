from texted.types.value import (
    Kind,
    Symbol,
    String,
    Number,
    List,
    Value,
    Program,
    NIL,
    T,
    EMPTY,
    is_a,
    symbol,
    string,
    number,
    make_list,
    list_of,
    boolean,
    quote_string,
    format_number,
)
from texted.types.equality import equal, program_equal
from texted.types.buffer import Buffer, BufferSnapshot, SearchMatch
from texted.types.environment import Environment, BuiltinFn

__all__ = [
    "Kind",
    "Symbol",
    "String",
    "Number",
    "List",
    "Value",
    "Program",
    "NIL",
    "T",
    "EMPTY",
    "is_a",
    "symbol",
    "string",
    "number",
    "make_list",
    "list_of",
    "boolean",
    "quote_string",
    "format_number",
    "equal",
    "program_equal",
    "Buffer",
    "BufferSnapshot",
    "SearchMatch",
    "Environment",
    "BuiltinFn",
]
