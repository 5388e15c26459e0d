"""
Box-drawing dump of a syntax tree, used by the REPL's tree display.

    └──BinaryExpression
       ├──NumberExpression
       │  └──NumberToken 1
       ├──PlusToken
       └──NumberExpression
          └──NumberToken 2
"""

import io
import sys
from typing import Optional, TextIO

from ..lexer.tokens import SyntaxNode, SyntaxToken


def pretty_print(node: SyntaxNode, writer: Optional[TextIO] = None,
                 indent: str = "", is_last: bool = True):
    """Write ``node`` and everything below it, one node per line."""
    if writer is None:
        writer = sys.stdout

    # Pending (node, indent, is_last) entries; children go on in reverse so
    # the first child is written first.
    stack = [(node, indent, is_last)]

    while stack:
        current, current_indent, current_is_last = stack.pop()

        writer.write(current_indent)
        writer.write("└──" if current_is_last else "├──")
        writer.write(current.kind.value)

        if isinstance(current, SyntaxToken) and current.value is not None:
            writer.write(" ")
            writer.write(str(current.value))

        writer.write("\n")

        child_indent = current_indent + ("   " if current_is_last else "│  ")
        children = current.children()
        for index in range(len(children) - 1, -1, -1):
            stack.append((children[index], child_indent, index == len(children) - 1))


def format_tree(node: SyntaxNode) -> str:
    buffer = io.StringIO()
    pretty_print(node, buffer)
    return buffer.getvalue()
