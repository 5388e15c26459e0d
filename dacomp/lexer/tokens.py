"""
Token definitions for the dacomp lexer.

This module defines the shared syntax vocabulary:
- SyntaxKind, the tag carried by every token and syntax node
- SyntaxNode, the base class of everything that appears in a syntax tree
- SyntaxToken, the leaf node produced by the lexer
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class SyntaxKind(Enum):
    """
    Enumeration of all token and node kinds.

    The values are the names shown in diagnostics and tree dumps.
    """

    # ========================================================================
    # Tokens
    # ========================================================================
    EOF_TOKEN = "EOFToken"
    NUMBER_TOKEN = "NumberToken"
    WHITESPACE_TOKEN = "WhiteSpaceToken"
    PLUS_TOKEN = "PlusToken"
    MINUS_TOKEN = "MinusToken"
    MULTIPLY_TOKEN = "MultiplyToken"
    DIVIDE_TOKEN = "DivideToken"
    OPEN_PARENTHESIS_TOKEN = "OpenParenthesisToken"
    CLOSE_PARENTHESIS_TOKEN = "CloseParenthesisToken"
    INVALID_TOKEN = "InvalidToken"

    # ========================================================================
    # Expressions
    # ========================================================================
    NUMBER_EXPRESSION = "NumberExpression"
    BINARY_EXPRESSION = "BinaryExpression"
    PARENTHESIZED_EXPRESSION = "ParenthesizedExpression"

    def __str__(self) -> str:
        return self.value


class SyntaxNode(ABC):
    """
    Base class for tokens and expressions.

    Every node has a ``kind`` attribute and exposes its immediate children
    in left-to-right source order.
    """

    @abstractmethod
    def children(self) -> List['SyntaxNode']:
        """Get all child nodes."""
        pass


@dataclass(frozen=True)
class SyntaxToken(SyntaxNode):
    """
    A lexical token.

    Holds the token kind, the offset where it starts, the raw text and,
    for number tokens only, the parsed integer value.
    """
    kind: SyntaxKind
    position: int
    text: str
    value: Optional[int] = None

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.kind.value}({self.text!r} -> {self.value!r})"
        return f"{self.kind.value}({self.text!r})"

    def children(self) -> List[SyntaxNode]:
        return []


# Single character tokens, looked up by the lexer
SINGLE_CHAR_TOKENS = {
    "+": SyntaxKind.PLUS_TOKEN,
    "-": SyntaxKind.MINUS_TOKEN,
    "*": SyntaxKind.MULTIPLY_TOKEN,
    "/": SyntaxKind.DIVIDE_TOKEN,
    "(": SyntaxKind.OPEN_PARENTHESIS_TOKEN,
    ")": SyntaxKind.CLOSE_PARENTHESIS_TOKEN,
}

# Tokens the parser never sees
TRIVIA_KINDS = frozenset({SyntaxKind.WHITESPACE_TOKEN, SyntaxKind.INVALID_TOKEN})

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1
