from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from texted.config import SYNTAXES, get_default_syntax
from texted.evaluation.evaluator import evaluate
from texted.evaluation.trace import TraceCallback
from texted.reader import parse
from texted.types.buffer import Buffer
from texted.types.environment import Environment
from texted.types.value import Value

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScriptResult:
    text: str
    value: Value
    point: int
    mark: int


def is_valid_syntax(name: str) -> bool:
    return name in SYNTAXES


def run_script(
    text: str,
    script: str,
    syntax: str = "shell",
    env: Optional[Environment] = None,
    trace: Optional[TraceCallback] = None,
) -> ScriptResult:
    """Parse `script`, run it on a fresh buffer holding `text` and report the outcome."""
    program = parse(syntax, script)
    buffer = Buffer(text)
    value = evaluate(program, env, buffer, trace)
    return ScriptResult(buffer.text, value, buffer.point, buffer.mark)


class Interpreter:
    """
    Runs scripts of one syntax against text, reusing one Environment.
    Each run gets its own Buffer, so a single Interpreter can serve many inputs.
    """
    def __init__(self, syntax: Optional[str] = None, env: Optional[Environment] = None):
        self.syntax = syntax or get_default_syntax()
        if not is_valid_syntax(self.syntax):
            raise ValueError(f"unknown syntax {self.syntax!r}; expected one of {', '.join(SYNTAXES)}")
        self.env = env if env is not None else Environment.default()

    def run(self, text: str, script: str, trace: Optional[TraceCallback] = None) -> ScriptResult:
        logger.debug("running %s script on %d characters", self.syntax, len(text))
        return run_script(text, script, self.syntax, self.env, trace)

    def transform(self, text: str, script: str) -> str:
        """Return `text` as edited by `script`."""
        return self.run(text, script).text
