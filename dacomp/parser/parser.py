"""
dacomp Recursive Descent Parser

Builds a syntax tree for a single arithmetic expression. Each grammar rule
is one method, and the nesting of those calls encodes precedence:

    expression := addition
    addition   := factor ( ('+' | '-') factor )*
    factor     := primary ( ('*' | '/') primary )*
    primary    := '(' expression ')' | NUMBER

All binary operators are left-associative. The parser never raises on bad
input; a missing token is replaced with an empty placeholder of the kind
that was expected and a diagnostic is recorded. Parentheses deeper than
MAX_NESTING_DEPTH are reported rather than followed, which keeps the
recursion bounded for any input.
"""

from dataclasses import dataclass
from typing import List, Tuple

from ..lexer.lexer import Lexer
from ..lexer.tokens import SyntaxKind, SyntaxToken, TRIVIA_KINDS
from .ast_nodes import (
    ExpressionSyntax, NumberExpressionSyntax, BinaryExpressionSyntax,
    ParenthesizedExpressionSyntax,
)
from .errors import ParseDiagnostics


ADDITIVE_OPERATORS = frozenset({SyntaxKind.PLUS_TOKEN, SyntaxKind.MINUS_TOKEN})
MULTIPLICATIVE_OPERATORS = frozenset({SyntaxKind.MULTIPLY_TOKEN, SyntaxKind.DIVIDE_TOKEN})

# Each level costs four interpreter frames (primary, expression, addition,
# factor); this stays well inside the default recursion limit.
MAX_NESTING_DEPTH = 100


@dataclass(frozen=True)
class SyntaxTree:
    """Result of parsing one line."""
    root: ExpressionSyntax
    end_of_file_token: SyntaxToken
    diagnostic_messages: Tuple[str, ...] = ()

    @property
    def diagnostics(self) -> List[str]:
        """Lexer then parser messages, as a fresh list."""
        return list(self.diagnostic_messages)

    def has_errors(self) -> bool:
        """Check if lexing or parsing reported anything."""
        return len(self.diagnostics) > 0

    @classmethod
    def parse(cls, text: str) -> 'SyntaxTree':
        return Parser(text).parse()


class Parser:
    """
    dacomp recursive descent parser.

    Drains a lexer over the whole text up front, so the token buffer is
    complete before parsing starts.
    """

    def __init__(self, text: str):
        """
        Initialize parser with a line of source text.

        Args:
            text: Source line to lex and parse
        """
        lexer = Lexer(text)
        self.tokens: List[SyntaxToken] = [
            token for token in lexer if token.kind not in TRIVIA_KINDS
        ]
        self.position = 0
        self.depth = 0

        # Lexer messages come first
        self.diagnostics = ParseDiagnostics(lexer.diagnostics)

    def parse(self) -> SyntaxTree:
        """
        Parse the token buffer into a syntax tree.

        Returns:
            SyntaxTree holding the expression, the EOF token and all diagnostics
        """
        expression = self._parse_expression()
        end_of_file_token = self.match(SyntaxKind.EOF_TOKEN)
        return SyntaxTree(expression, end_of_file_token, tuple(self.diagnostics))

    # Grammar rules

    def _parse_expression(self) -> ExpressionSyntax:
        return self._parse_addition()

    def _parse_addition(self) -> ExpressionSyntax:
        left = self._parse_factor()

        while self.current.kind in ADDITIVE_OPERATORS:
            operator_token = self.next_token()
            right = self._parse_factor()
            left = BinaryExpressionSyntax(left, operator_token, right)

        return left

    def _parse_factor(self) -> ExpressionSyntax:
        left = self._parse_primary()

        while self.current.kind in MULTIPLICATIVE_OPERATORS:
            operator_token = self.next_token()
            right = self._parse_primary()
            left = BinaryExpressionSyntax(left, operator_token, right)

        return left

    def _parse_primary(self) -> ExpressionSyntax:
        if self.current.kind == SyntaxKind.OPEN_PARENTHESIS_TOKEN:
            if self.depth >= MAX_NESTING_DEPTH:
                self.diagnostics.report_nesting_too_deep(MAX_NESTING_DEPTH)
                return NumberExpressionSyntax(
                    SyntaxToken(SyntaxKind.NUMBER_TOKEN, self.current.position, "")
                )

            open_token = self.next_token()
            self.depth += 1
            expression = self._parse_expression()
            self.depth -= 1
            close_token = self.match(SyntaxKind.CLOSE_PARENTHESIS_TOKEN)
            return ParenthesizedExpressionSyntax(open_token, expression, close_token)

        number_token = self.match(SyntaxKind.NUMBER_TOKEN)
        return NumberExpressionSyntax(number_token)

    # Utility methods

    def peek(self, offset: int) -> SyntaxToken:
        """Return the token ``offset`` ahead; past the end this is always EOF."""
        index = self.position + offset
        if index >= len(self.tokens):
            return self.tokens[-1]
        return self.tokens[index]

    @property
    def current(self) -> SyntaxToken:
        return self.peek(0)

    def next_token(self) -> SyntaxToken:
        """Consume and return current token."""
        current = self.current
        self.position += 1
        return current

    def match(self, kind: SyntaxKind) -> SyntaxToken:
        """
        Consume the current token if it has the expected kind.

        Otherwise record a diagnostic and return an empty token of the
        expected kind at the current position. Nothing is consumed in that
        case, so the offending token is still there for the next rule.
        """
        if self.current.kind == kind:
            return self.next_token()

        self.diagnostics.report_unexpected_token(kind, self.current.kind)
        return SyntaxToken(kind, self.current.position, "")


def parse(text: str) -> SyntaxTree:
    """
    Convenience function to parse a source string.

    Args:
        text: Source line

    Returns:
        SyntaxTree, with diagnostics describing any malformed input
    """
    return Parser(text).parse()
