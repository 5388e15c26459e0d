"""
dacomp Lexer Package

Implements the lexical analyzer for arithmetic expressions.

Key Features:
- Decimal integer literals checked against the signed 32-bit range
- Single character operators and parentheses
- Whitespace and invalid characters kept as tokens so lexing never stalls
- Diagnostics collected instead of raised
"""

from .tokens import SyntaxKind, SyntaxNode, SyntaxToken
from .lexer import Lexer, tokenize_string
from .errors import DiagnosticBag

__all__ = [
    "Lexer",
    "SyntaxKind",
    "SyntaxNode",
    "SyntaxToken",
    "DiagnosticBag",
    "tokenize_string",
]
