from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from texted.types.buffer import BufferSnapshot
from texted.types.environment import Environment
from texted.types.value import Value


@dataclass(frozen=True)
class TraceContext:
    """State observed after one top-level form has been evaluated."""

    index: int
    instruction: Value
    result: Value
    snapshot: BufferSnapshot
    environment: Environment

    @property
    def text(self) -> str:
        return self.snapshot.text

    @property
    def point(self) -> int:
        return self.snapshot.point

    @property
    def mark(self) -> int:
        return self.snapshot.mark


TraceCallback = Callable[[TraceContext], None]
