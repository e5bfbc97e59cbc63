from __future__ import annotations

from typing import Optional

from texted.types.value import Value, Symbol, String, Number, List


def equal(a: Optional[Value], b: Optional[Value]) -> bool:
    """Deep structural equality over texted values.

    Kinds must match; Lists compare element-wise and are length sensitive.
    `None` equals only `None`. Unknown shapes compare unequal, never raise.
    """
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False
    if a is b:
        return True
    match a, b:
        case Symbol(name=x), Symbol(name=y):
            return x == y
        case String(value=x), String(value=y):
            return x == y
        case Number(value=x), Number(value=y):
            return x == y
        case List(elements=xs), List(elements=ys):
            if len(xs) != len(ys):
                return False
            return all(equal(x, y) for x, y in zip(xs, ys))
    return False


def program_equal(a, b) -> bool:
    """Element-wise `equal` over two programs (sequences of top-level forms)."""
    a, b = list(a), list(b)
    return len(a) == len(b) and all(equal(x, y) for x, y in zip(a, b))
