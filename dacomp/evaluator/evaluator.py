"""
Tree-walking evaluator for dacomp.

Arithmetic follows signed 32-bit integer rules: results wrap around on
overflow and division truncates toward zero.

The walk uses an explicit stack, so long operator chains (which the parser
folds into a left-leaning tree as deep as the chain is long) do not touch
the interpreter's recursion limit.
"""

from typing import List, Tuple

from ..lexer.tokens import SyntaxKind, SyntaxToken, INT32_MIN
from ..parser.ast_nodes import (
    ExpressionSyntax, NumberExpressionSyntax, BinaryExpressionSyntax,
    ParenthesizedExpressionSyntax,
)
from ..parser.parser import SyntaxTree
from .errors import EvaluationError, DivisionByZeroError, InternalEvaluationError


def wrap_int32(value: int) -> int:
    """Reduce ``value`` to the signed 32-bit range, two's complement style."""
    return (value - INT32_MIN) % (2 ** 32) + INT32_MIN


def divide_int32(left: int, right: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(left) // abs(right)
    if (left < 0) != (right < 0):
        quotient = -quotient
    return wrap_int32(quotient)


class Evaluator:
    """
    Computes the integer value of an expression tree.

    The tree is not modified; evaluating the same root twice gives the
    same result.
    """

    def __init__(self, root: ExpressionSyntax):
        self.root = root

    def evaluate(self) -> int:
        """
        Evaluate the root expression.

        Nodes are visited in post-order: a binary node is pushed back on
        the stack once its operands are queued, and combines the top two
        values when it comes off the second time.

        Returns:
            The value as a signed 32-bit integer

        Raises:
            DivisionByZeroError: If a '/' has a zero right operand
            InternalEvaluationError: If the tree holds an unknown node or
                a placeholder number left by error recovery
        """
        values: List[int] = []
        stack: List[Tuple[ExpressionSyntax, bool]] = [(self.root, False)]

        while stack:
            node, operands_done = stack.pop()

            if isinstance(node, NumberExpressionSyntax):
                values.append(self._number_value(node.number_token))
            elif isinstance(node, ParenthesizedExpressionSyntax):
                stack.append((node.expression, False))
            elif isinstance(node, BinaryExpressionSyntax):
                if operands_done:
                    right = values.pop()
                    left = values.pop()
                    values.append(self._apply_operator(node.operator_token, left, right))
                else:
                    stack.append((node, True))
                    stack.append((node.right, False))
                    stack.append((node.left, False))
            else:
                raise InternalEvaluationError(f"Unexpected node {node.kind}")

        return values.pop()

    def _number_value(self, token: SyntaxToken) -> int:
        if token.value is None:
            raise InternalEvaluationError(
                f"Number token at position {token.position} has no value"
            )
        return token.value

    def _apply_operator(self, operator: SyntaxToken, left: int, right: int) -> int:
        if operator.kind == SyntaxKind.PLUS_TOKEN:
            return wrap_int32(left + right)
        elif operator.kind == SyntaxKind.MINUS_TOKEN:
            return wrap_int32(left - right)
        elif operator.kind == SyntaxKind.MULTIPLY_TOKEN:
            return wrap_int32(left * right)
        elif operator.kind == SyntaxKind.DIVIDE_TOKEN:
            if right == 0:
                raise DivisionByZeroError(operator.position)
            return divide_int32(left, right)
        else:
            raise InternalEvaluationError(f"Unexpected binary operator {operator.kind}")


def evaluate(tree: SyntaxTree) -> int:
    """
    Convenience function to evaluate a parsed line.

    Args:
        tree: Result of ``parse``

    Returns:
        The integer value of the expression

    Raises:
        EvaluationError: If the tree has diagnostics or evaluation fails
    """
    if tree.has_errors():
        raise EvaluationError(
            f"Cannot evaluate an expression with {len(tree.diagnostics)} diagnostic(s)"
        )
    return Evaluator(tree.root).evaluate()
