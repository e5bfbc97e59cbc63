from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ParameterDoc:
    name: str
    type: str
    description: str
    optional: bool = False


@dataclass(frozen=True)
class ExampleDoc:
    """A runnable example: `input` is a shell-syntax script run on `buffer`;
    `result` is the S-expression rendering of the value it returns."""

    description: str
    input: str
    buffer: str
    result: str


@dataclass(frozen=True)
class FunctionDoc:
    name: str
    summary: str
    description: str
    category: str
    parameters: Tuple[ParameterDoc, ...] = ()
    examples: Tuple[ExampleDoc, ...] = ()
    see_also: Tuple[str, ...] = ()

    @property
    def signature(self) -> str:
        parts = [self.name]
        for p in self.parameters:
            parts.append(f"[{p.name}]" if p.optional else p.name)
        return " ".join(parts)
