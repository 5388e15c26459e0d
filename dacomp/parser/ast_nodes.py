"""
Syntax tree node definitions for dacomp.

Expressions come in exactly three shapes: a number, a binary operation and
a parenthesized expression. Nodes are immutable and own their children;
``children()`` returns them in source order for walkers and printers.
"""

from dataclasses import dataclass
from typing import List

from ..lexer.tokens import SyntaxKind, SyntaxNode, SyntaxToken


class ExpressionSyntax(SyntaxNode):
    """Base class for expressions."""
    pass


@dataclass(frozen=True)
class NumberExpressionSyntax(ExpressionSyntax):
    """Integer literal expression."""
    number_token: SyntaxToken

    @property
    def kind(self) -> SyntaxKind:
        return SyntaxKind.NUMBER_EXPRESSION

    def children(self) -> List[SyntaxNode]:
        return [self.number_token]


@dataclass(frozen=True)
class BinaryExpressionSyntax(ExpressionSyntax):
    """Binary operation expression."""
    left: ExpressionSyntax
    operator_token: SyntaxToken
    right: ExpressionSyntax

    @property
    def kind(self) -> SyntaxKind:
        return SyntaxKind.BINARY_EXPRESSION

    def children(self) -> List[SyntaxNode]:
        return [self.left, self.operator_token, self.right]


@dataclass(frozen=True)
class ParenthesizedExpressionSyntax(ExpressionSyntax):
    """Expression wrapped in parentheses."""
    open_parenthesis_token: SyntaxToken
    expression: ExpressionSyntax
    close_parenthesis_token: SyntaxToken

    @property
    def kind(self) -> SyntaxKind:
        return SyntaxKind.PARENTHESIZED_EXPRESSION

    def children(self) -> List[SyntaxNode]:
        return [self.open_parenthesis_token, self.expression, self.close_parenthesis_token]


def iter_tokens(node: SyntaxNode):
    """Yield the tokens under ``node`` from left to right."""
    stack = [node]
    while stack:
        current = stack.pop()
        if isinstance(current, SyntaxToken):
            yield current
        else:
            stack.extend(reversed(current.children()))
