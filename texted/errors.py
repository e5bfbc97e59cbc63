from __future__ import annotations

from typing import Optional


class TextedError(Exception):
    """ Base class for all texted errors"""
    pass


class TextedSyntaxError(TextedError):
    """ Raised when script text cannot be parsed"""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        self.reason = message
        self.line = line
        self.column = column
        if line is not None:
            where = f"line {line}" if column is None else f"line {line}, column {column}"
            message = f"{message} ({where})"
        super().__init__(message)


class TextedArityError(TextedError):
    """ Raised when the number of arguments passed to a function is incorrect"""


class TextedTypeError(TextedError):
    """ Raised when the types of arguments passed to a function are incorrect"""


class TextedSearchFailed(TextedError):
    """ Raised when a search builtin finds no match"""


class TextedInvalidRegexp(TextedError):
    """ Raised when a search builtin is given a pattern that does not compile"""


class TextedNoPreviousSearch(TextedError):
    """ Raised when replace-match runs without a recorded search"""


class TextedUndefinedFunction(TextedError):
    """ Raised when a form names a function missing from the environment"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"undefined-function {name!r}")


class TextedEvaluationError(TextedError):
    """ Raised when a form has no valid evaluation rule (empty list, non-symbol head)"""


class TextedWriteError(TextedError):
    """ Raised when a value cannot be rendered in the requested syntax"""


def _render(instruction) -> str:
    try:
        return str(instruction)
    except RecursionError:
        # a hand-built form nested too deep to print
        return "<deeply nested form>"


class TextedExecutionError(TextedError):
    """Wraps the error that stopped an evaluation together with the state at that moment.

    `original` is the underlying TextedError; `instruction_index` and
    `instruction` identify the top-level form being evaluated, and `snapshot`
    holds the buffer content, point, mark and last search at failure time.
    Side effects of earlier forms are not rolled back.
    """

    def __init__(self, original, program, instruction_index, instruction, snapshot, environment=None):
        self.original = original
        self.program = program
        self.instruction_index = instruction_index
        self.instruction = instruction
        self.snapshot = snapshot
        self.environment = environment
        super().__init__(
            f"{original} (at instruction {instruction_index}: {_render(instruction)}, "
            f"point={snapshot.point}, mark={snapshot.mark})"
        )
