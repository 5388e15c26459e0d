"""
Diagnostic collection for the dacomp lexer.

Lexical problems never stop the lexer. They are recorded as human-readable
messages in a DiagnosticBag, in the order they were found, and handed on to
the parser which appends its own.
"""

from typing import Iterable, Iterator, List


class DiagnosticBag:
    """
    Append-only, ordered collection of diagnostic messages.
    """

    def __init__(self, messages: Iterable[str] = ()):
        self._messages: List[str] = list(messages)

    def __iter__(self) -> Iterator[str]:
        return iter(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __repr__(self) -> str:
        return f"DiagnosticBag({self._messages!r})"

    def report(self, message: str):
        """Record a single message."""
        self._messages.append(message)

    def extend(self, messages: Iterable[str]):
        """Record messages from another source, keeping their order."""
        self._messages.extend(messages)

    def clear(self):
        self._messages.clear()

    def report_invalid_character(self, char: str):
        self.report(create_invalid_character_message(char))

    def report_invalid_number(self, text: str):
        self.report(create_invalid_number_message(text))

    def to_list(self) -> List[str]:
        """Return a copy of the messages."""
        return list(self._messages)


# Helper functions for building the common messages
def create_invalid_character_message(char: str) -> str:
    """Message for a character the lexer does not recognize."""
    return f"Invalid character input '{char}'"


def create_invalid_number_message(text: str) -> str:
    """Message for a digit run that does not fit a signed 32-bit integer."""
    return f"Text {text} is not a valid int32"
