from texted.evaluation.evaluator import evaluate, evaluate_form
from texted.evaluation.trace import TraceCallback, TraceContext

__all__ = ["evaluate", "evaluate_form", "TraceContext", "TraceCallback"]
