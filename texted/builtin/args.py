"""Argument checking shared by the builtins.

Builtins validate everything before they touch the buffer, so an arity or
type error always leaves the buffer as it was.
"""

from __future__ import annotations

from typing import Optional

from texted.errors import TextedArityError, TextedTypeError
from texted.types.value import Number, String, Value


def _plural(n: int) -> str:
    return "argument" if n == 1 else "arguments"


def check_arity(name: str, args: list[Value], minimum: int, maximum: Optional[int] = None) -> None:
    """Raise TextedArityError unless minimum <= len(args) <= maximum.

    `maximum=None` means the same as `minimum` (an exact count).
    """
    if maximum is None:
        maximum = minimum
    n = len(args)
    if minimum <= n <= maximum:
        return
    if minimum == maximum:
        raise TextedArityError(f"{name} expects {minimum} {_plural(minimum)}, got {n}")
    if n > maximum:
        raise TextedArityError(f"{name} expects at most {maximum} {_plural(maximum)}, got {n}")
    raise TextedArityError(f"{name} expects at least {minimum} {_plural(minimum)}, got {n}")


def number_arg(name: str, args: list[Value], index: int = 0) -> int:
    """Integer value of a Number argument, truncated toward zero."""
    arg = args[index]
    if not isinstance(arg, Number):
        raise TextedTypeError(f"{name} expects a number argument at position {index + 1}, got {arg.kind}")
    return arg.as_int()


def string_arg(name: str, args: list[Value], index: int = 0) -> str:
    arg = args[index]
    if not isinstance(arg, String):
        raise TextedTypeError(f"{name} expects a string argument at position {index + 1}, got {arg.kind}")
    return arg.value


def optional_count(name: str, args: list[Value], default: int = 1) -> int:
    """Read the optional trailing count most commands take."""
    check_arity(name, args, 0, 1)
    if not args:
        return default
    return number_arg(name, args, 0)


def no_args(name: str, args: list[Value]) -> None:
    check_arity(name, args, 0)
