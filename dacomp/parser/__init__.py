"""
dacomp Parser Package

Implements a recursive descent parser for integer arithmetic expressions.

Key Features:
- Two precedence tiers, left-associative
- Parenthesized sub-expressions kept as their own nodes
- Error recovery by placeholder substitution, so a tree is always produced
- Lexer and parser diagnostics merged in order
"""

from .ast_nodes import (
    ExpressionSyntax, NumberExpressionSyntax, BinaryExpressionSyntax,
    ParenthesizedExpressionSyntax, iter_tokens,
)
from .parser import Parser, SyntaxTree, parse
from .errors import ParseDiagnostics

__all__ = [
    # Core parser
    "Parser",
    "SyntaxTree",
    "parse",

    # Syntax nodes
    "ExpressionSyntax",
    "NumberExpressionSyntax",
    "BinaryExpressionSyntax",
    "ParenthesizedExpressionSyntax",
    "iter_tokens",

    # Error handling
    "ParseDiagnostics",
]
