"""
dacomp Lexer - turns one line of text into tokens

Every character of the input ends up in exactly one token, including
whitespace and characters we don't understand, so the lexer always makes
progress. Bad input is reported through the diagnostics bag and lexing
carries on.
"""

from typing import Iterator, List

from .tokens import SyntaxToken, SyntaxKind, SINGLE_CHAR_TOKENS, INT32_MIN, INT32_MAX
from .errors import DiagnosticBag


class Lexer:
    """
    dacomp lexical analyzer.

    Call ``next_token()`` repeatedly until it returns an EOF token, or
    iterate the lexer to get the same sequence lazily. Iterating always
    starts again from the beginning of the text.
    """

    def __init__(self, text: str):
        """
        Initialize the lexer with a line of source text.

        Args:
            text: The source line
        """
        self.text = text
        self.pos = 0
        self._diagnostics = DiagnosticBag()

    @property
    def diagnostics(self) -> List[str]:
        """Messages recorded so far, in lexing order."""
        return self._diagnostics.to_list()

    @property
    def current(self) -> str:
        if self.pos >= len(self.text):
            return '\0'
        return self.text[self.pos]

    def __iter__(self) -> Iterator[SyntaxToken]:
        return self.tokenize()

    def tokenize(self) -> Iterator[SyntaxToken]:
        """
        Tokenize the whole text from the start.

        Yields:
            Tokens in source order, ending with exactly one EOF token
        """
        self.pos = 0
        self._diagnostics.clear()

        while True:
            token = self.next_token()
            yield token
            if token.kind == SyntaxKind.EOF_TOKEN:
                break

    def next_token(self) -> SyntaxToken:
        """Produce the token starting at the current position."""
        if self.pos >= len(self.text):
            return SyntaxToken(SyntaxKind.EOF_TOKEN, self.pos, "")

        start = self.pos
        char = self.current

        if char.isdecimal():
            return self._tokenize_number(start)

        if char.isspace():
            while self.pos < len(self.text) and self.current.isspace():
                self._advance()
            return SyntaxToken(SyntaxKind.WHITESPACE_TOKEN, start, self.text[start:self.pos])

        kind = SINGLE_CHAR_TOKENS.get(char)
        if kind is not None:
            self._advance()
            return SyntaxToken(kind, start, char)

        # Unknown character: keep going from the next one
        self._diagnostics.report_invalid_character(char)
        self._advance()
        return SyntaxToken(SyntaxKind.INVALID_TOKEN, start, char)

    def _tokenize_number(self, start: int) -> SyntaxToken:
        """Tokenize a run of digits as a signed 32-bit integer."""
        while self.pos < len(self.text) and self.current.isdecimal():
            self._advance()

        text = self.text[start:self.pos]
        value = int(text)
        if not INT32_MIN <= value <= INT32_MAX:
            self._diagnostics.report_invalid_number(text)
            value = 0

        return SyntaxToken(SyntaxKind.NUMBER_TOKEN, start, text, value)

    def _advance(self):
        self.pos += 1

    def has_errors(self) -> bool:
        """Check if lexer encountered any errors."""
        return len(self._diagnostics) > 0


def tokenize_string(text: str) -> List[SyntaxToken]:
    """
    Convenience function to tokenize a source string.

    Unlike the parser's view of the input, the returned list keeps
    whitespace and invalid tokens.

    Args:
        text: Source string

    Returns:
        List of tokens ending with the EOF token
    """
    return list(Lexer(text))
