"""texted: a scriptable, headless text editor.

Scripts in shell-like, S-expression or JSON syntax edit an in-memory buffer
through Emacs-style primitives:

    >>> from texted import run_script
    >>> run_script("Hello world", "goto-char 7; delete-char 5").text
    'Hello '
"""

from texted.errors import (
    TextedArityError,
    TextedError,
    TextedEvaluationError,
    TextedExecutionError,
    TextedInvalidRegexp,
    TextedNoPreviousSearch,
    TextedSearchFailed,
    TextedSyntaxError,
    TextedTypeError,
    TextedUndefinedFunction,
    TextedWriteError,
)
from texted.types import (
    EMPTY,
    NIL,
    T,
    Buffer,
    Environment,
    Kind,
    List,
    Number,
    Program,
    String,
    Symbol,
    Value,
    equal,
    is_a,
)
from texted.reader import parse
from texted.writer import write
from texted.evaluation import TraceContext, evaluate
from texted.interpreter import Interpreter, ScriptResult, run_script

__all__ = [
    "Buffer",
    "Environment",
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
    "equal",
    "is_a",
    "parse",
    "write",
    "evaluate",
    "TraceContext",
    "run_script",
    "ScriptResult",
    "Interpreter",
    "TextedError",
    "TextedSyntaxError",
    "TextedArityError",
    "TextedTypeError",
    "TextedSearchFailed",
    "TextedInvalidRegexp",
    "TextedNoPreviousSearch",
    "TextedUndefinedFunction",
    "TextedEvaluationError",
    "TextedWriteError",
    "TextedExecutionError",
]
