"""Tree-walking evaluator for texted programs.

Top-level forms run strictly in order against one Buffer and the value of the
last form is the result (the empty String for an empty program). Evaluation
rules per form:

- String and Number evaluate to themselves. Symbols do too when they are
  arguments: the language has no variables, so `t` and `nil` can be passed
  as plain arguments. A bare Symbol is not a valid top-level form.
- A List needs a Symbol head naming a function in the Environment. Its
  remaining elements are evaluated first, left to right, and the resulting
  argument vector is handed to the builtin together with the buffer.

The first error stops evaluation. It is raised as a TextedExecutionError
wrapping the original error and a snapshot of the buffer; changes made by
earlier forms stay in place.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from texted.config import MAX_NESTING
from texted.errors import TextedError, TextedEvaluationError, TextedExecutionError
from texted.evaluation.trace import TraceCallback, TraceContext
from texted.types.buffer import Buffer
from texted.types.environment import Environment
from texted.types.value import EMPTY, List, Number, String, Symbol, Value

logger = logging.getLogger(__name__)


def evaluate_form(form: Value, env: Environment, buffer: Buffer, depth: int = 1) -> Value:
    """Evaluate a single form; errors propagate unwrapped.

    `depth` is the nesting level of `form`; lists nested deeper than
    MAX_NESTING raise TextedEvaluationError.
    """
    match form:
        case String() | Number() | Symbol():
            return form
        case List(elements):
            if depth > MAX_NESTING:
                raise TextedEvaluationError(f"nesting too deep: forms may be nested at most {MAX_NESTING} levels")
            if not elements:
                raise TextedEvaluationError("cannot evaluate the empty list")
            head = elements[0]
            if not isinstance(head, Symbol):
                raise TextedEvaluationError(f"invalid function {head}: the head of a form must be a symbol")
            fn = env.lookup(head.name)
            args = [evaluate_form(arg, env, buffer, depth + 1) for arg in elements[1:]]
            return fn(args, buffer)
        case _:
            raise TextedEvaluationError(f"cannot evaluate {form!r}")


def evaluate(
    program: Iterable[Value],
    env: Optional[Environment] = None,
    buffer: Optional[Buffer] = None,
    trace: Optional[TraceCallback] = None,
) -> Value:
    """Evaluate every top-level form of `program` and return the last value.

    `trace`, when given, is called after each top-level form with a
    TraceContext; it only observes and cannot change the outcome.
    """
    if env is None:
        env = Environment.default()
    if buffer is None:
        buffer = Buffer()
    program = list(program)

    result: Value = EMPTY
    for index, form in enumerate(program):
        logger.debug("eval[%d] %s (point=%d, mark=%d)", index, form, buffer.point, buffer.mark)
        try:
            if isinstance(form, Symbol):
                raise TextedEvaluationError(f"a top-level form cannot be the bare symbol {form}")
            result = evaluate_form(form, env, buffer)
        except TextedError as err:
            logger.debug("eval[%d] failed: %s", index, err)
            raise TextedExecutionError(err, program, index, form, buffer.snapshot(), env) from err
        if trace is not None:
            trace(TraceContext(index, form, result, buffer.snapshot(), env))
    return result
