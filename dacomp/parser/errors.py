"""
Error reporting for the dacomp parser.

The parser recovers from every syntax error by substituting a placeholder
token, so errors are only ever recorded, never raised.
"""

from ..lexer.errors import DiagnosticBag
from ..lexer.tokens import SyntaxKind


class ParseDiagnostics(DiagnosticBag):
    """Diagnostic bag with the parser's own message shapes."""

    def report_unexpected_token(self, expected: SyntaxKind, found: SyntaxKind):
        self.report(create_unexpected_token_message(expected, found))

    def report_nesting_too_deep(self, limit: int):
        self.report(create_nesting_too_deep_message(limit))


def create_unexpected_token_message(expected: SyntaxKind, found: SyntaxKind) -> str:
    """Message for a token of the wrong kind where ``expected`` was required."""
    return f"Error: Unexpected token, Expected: <{expected.value}> Found: <{found.value}>"


def create_nesting_too_deep_message(limit: int) -> str:
    return f"Error: Parentheses nested deeper than {limit} levels"
