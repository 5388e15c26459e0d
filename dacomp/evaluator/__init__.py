"""
dacomp Evaluator Package

Walks a diagnostic-free syntax tree and computes its signed 32-bit integer
value.
"""

from .evaluator import Evaluator, evaluate, wrap_int32
from .errors import EvaluationError, DivisionByZeroError, InternalEvaluationError

__all__ = [
    "Evaluator",
    "evaluate",
    "wrap_int32",
    "EvaluationError",
    "DivisionByZeroError",
    "InternalEvaluationError",
]
