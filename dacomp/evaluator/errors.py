"""
Evaluation error handling for dacomp.

Unlike lexing and parsing, evaluation stops at the first fault. These
exceptions describe why.
"""

from typing import Optional


class EvaluationError(Exception):
    """
    Exception raised when a tree cannot be evaluated.

    Carries the message to show the user and, when known, the offset of
    the token that caused it.
    """

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.position = position

    def __str__(self) -> str:
        return self.message


class DivisionByZeroError(EvaluationError):
    """Right operand of '/' evaluated to zero."""

    def __init__(self, position: Optional[int] = None):
        super().__init__("Division by zero", position)


class InternalEvaluationError(RuntimeError):
    """
    The evaluator met a node it has no rule for.

    This means the parser produced something it should not have; it is a
    bug, not a problem with the user's input.
    """
    pass
