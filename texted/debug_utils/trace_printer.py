"""Readable rendering of evaluation trace steps.

    >>> printer = TracePrinter(color=False)
    >>> evaluate(program, buffer=buf, trace=printer)

prints one block per top-level form: the form, its value and the buffer with
point (|) and mark (^) drawn in.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from texted.evaluation.trace import TraceContext
from texted.types.buffer import BufferSnapshot

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_INDEX = "\033[90m"
COLOR_FORM = "\033[94m"
COLOR_RESULT = "\033[92m"
COLOR_CURSOR = "\033[91m"

DEFAULT_OPTIONS = {
    "color": True,
    "max_text_length": 200,
    "show_buffer": True,
}


def _paint(text: str, color: str, enabled: bool) -> str:
    return f"{color}{text}{RESET}" if enabled else text


def render_buffer(snapshot: BufferSnapshot, color: bool = False, max_length: int = 200) -> str:
    """Buffer text with `|` at point and `^` at mark (one marker when they coincide).

    Text past `max_length` characters is cut before the markers are drawn, so
    a marker beyond the cut is not shown.
    """
    text = snapshot.text
    truncated = len(text) > max_length
    if truncated:
        text = text[:max_length]
    markers = {snapshot.point - 1: "|"}
    if snapshot.mark != snapshot.point:
        markers[snapshot.mark - 1] = "^"
    out = []
    for i in range(len(text) + 1):
        if i in markers:
            out.append(_paint(markers[i], COLOR_CURSOR, color))
        if i < len(text):
            out.append(text[i])
    rendered = "".join(out).replace("\n", "\\n")
    return rendered + "..." if truncated else rendered


def format_step(step: TraceContext, options: Optional[dict] = None) -> str:
    options = dict(DEFAULT_OPTIONS, **(options or {}))
    color = options["color"]
    head = _paint(f"[{step.index}]", COLOR_INDEX, color)
    lines = [
        f"{head} {_paint(str(step.instruction), COLOR_FORM, color)}",
        f"    => {_paint(str(step.result), COLOR_RESULT, color)}",
        f"    point={step.point} mark={step.mark}",
    ]
    if options["show_buffer"]:
        lines.append("    " + render_buffer(step.snapshot, color, options["max_text_length"]))
    return "\n".join(lines)


class TracePrinter:
    """Trace callback that writes each step to a stream."""

    def __init__(self, stream: Optional[TextIO] = None, color: Optional[bool] = None, **options):
        self.stream = stream or sys.stderr
        self.options = dict(DEFAULT_OPTIONS, **options)
        if color is not None:
            self.options["color"] = color
        self.steps: list[TraceContext] = []

    def __call__(self, step: TraceContext) -> None:
        self.steps.append(step)
        print(format_step(step, self.options), file=self.stream)
