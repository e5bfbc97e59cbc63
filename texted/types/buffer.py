"""Mutable text buffer with Emacs-style point and mark.

Positions are 1-based: position 1 sits before the first character and
`len(text) + 1` after the last. Point and mark are clamped into that range on
every assignment and after every edit, so the invariant
`1 <= point, mark <= len(text) + 1` always holds.

The buffer also remembers the most recent successful search (matched text and
its 1-based, end-exclusive bounds); only the search builtins record it and only
replace-match consumes it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class SearchMatch:
    text: str
    start: int  # 1-based, inclusive
    end: int  # 1-based, exclusive


@dataclass(frozen=True, slots=True)
class BufferSnapshot:
    text: str
    point: int
    mark: int
    last_search: Optional[SearchMatch]


class Buffer:
    __slots__ = ("_text", "_point", "_mark", "_last_search")

    def __init__(self, text: str = ""):
        self._text = text
        self._point = 1
        self._mark = 1
        self._last_search: Optional[SearchMatch] = None

    # -------------------------------
    # Content
    # -------------------------------
    @property
    def text(self) -> str:
        return self._text

    def __str__(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def __repr__(self):
        return f"Buffer(len={len(self._text)}, point={self._point}, mark={self._mark})"

    @property
    def point_max(self) -> int:
        return len(self._text) + 1

    def clamp(self, pos: int) -> int:
        """Clamp a 1-based position into [1, point_max]."""
        if pos < 1:
            return 1
        if pos > self.point_max:
            return self.point_max
        return pos

    # -------------------------------
    # Point / mark
    # -------------------------------
    @property
    def point(self) -> int:
        return self._point

    @point.setter
    def point(self, pos: int) -> None:
        self._point = self.clamp(pos)

    @property
    def mark(self) -> int:
        return self._mark

    @mark.setter
    def mark(self, pos: int) -> None:
        self._mark = self.clamp(pos)

    def region(self) -> tuple[int, int]:
        """Return (beginning, end) of the region as 1-based positions."""
        return min(self._mark, self._point), max(self._mark, self._point)

    # -------------------------------
    # Editing
    # -------------------------------
    def insert(self, text: str) -> None:
        """Insert `text` at point and advance point past it."""
        if not text:
            return
        idx = self._point - 1
        self._text = self._text[:idx] + text + self._text[idx:]
        self._point = idx + len(text) + 1
        self._mark = self.clamp(self._mark)

    def splice(self, start: int, end: int, replacement: str = "") -> str:
        """Replace the 0-based half-open span [start, end) and return the removed text.

        Both ends are clamped into [0, len(text)]. An empty or inverted span
        with no replacement leaves the buffer untouched. Point is left at the
        end of the inserted replacement (the start of the span for a plain
        deletion) and mark is re-clamped to the new length.
        """
        size = len(self._text)
        start = max(0, min(start, size))
        end = max(0, min(end, size))
        if start >= end:
            if not replacement:
                return ""
            end = start
        removed = self._text[start:end]
        self._text = self._text[:start] + replacement + self._text[end:]
        self._point = start + len(replacement) + 1
        self._mark = self.clamp(self._mark)
        return removed

    def delete(self, start: int, end: int, keep_point: bool = False) -> str:
        """Delete [start, end) (0-based); optionally keep point where it was."""
        point = self._point
        removed = self.splice(start, end)
        if keep_point:
            self._point = self.clamp(point)
        return removed

    # -------------------------------
    # Search bookkeeping
    # -------------------------------
    @property
    def last_search(self) -> Optional[SearchMatch]:
        return self._last_search

    def record_search(self, text: str, start: int, end: int) -> None:
        # An empty match means "no previous search".
        self._last_search = SearchMatch(text, start, end) if text else None

    def snapshot(self) -> BufferSnapshot:
        return BufferSnapshot(self._text, self._point, self._mark, self._last_search)
