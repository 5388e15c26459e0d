"""
dacomp Tools Package

The interactive shell and the tree printer it uses for debugging output.
"""

from .tree_printer import pretty_print, format_tree
from .repl import Repl, main

__all__ = [
    "Repl",
    "main",
    "pretty_print",
    "format_tree",
]
