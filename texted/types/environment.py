"""Function table used by the evaluator.

An Environment maps function names to builtin implementations. It is built
once and never mutated: the table is stored behind a read-only mapping proxy,
so one Environment may be shared by concurrent evaluations. Derive a new one
with `extend` / `without` to customise the available functions.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Iterator, Mapping, Optional

from texted.errors import TextedUndefinedFunction

BuiltinFn = Callable[[list, "object"], object]


class Environment:
    """Immutable mapping from function names to builtin implementations."""

    __slots__ = ("_functions",)

    def __init__(self, functions: Optional[Mapping[str, BuiltinFn]] = None):
        self._functions: Mapping[str, BuiltinFn] = MappingProxyType(dict(functions or {}))

    @classmethod
    def default(cls) -> Environment:
        """Environment holding every builtin in the library."""
        from texted.builtin import BUILTINS

        return cls(BUILTINS)

    @property
    def functions(self) -> Mapping[str, BuiltinFn]:
        return self._functions

    def lookup(self, name: str) -> BuiltinFn:
        """Return the implementation bound to `name`.

        Raises TextedUndefinedFunction if the name is not bound.
        """
        fn = self._functions.get(name)
        if fn is None:
            raise TextedUndefinedFunction(name)
        return fn

    def extend(self, functions: Mapping[str, BuiltinFn]) -> Environment:
        merged = dict(self._functions)
        merged.update(functions)
        return Environment(merged)

    def without(self, *names: str) -> Environment:
        return Environment({k: v for k, v in self._functions.items() if k not in names})

    def names(self) -> list[str]:
        return sorted(self._functions)

    def __contains__(self, name: object) -> bool:
        return name in self._functions

    def __iter__(self) -> Iterator[str]:
        return iter(self._functions)

    def __len__(self) -> int:
        return len(self._functions)

    def __repr__(self):
        return f"Environment({len(self._functions)} functions)"
