"""
dacomp Expression Front End

A small hand-written front end for integer arithmetic expressions: a lexer,
a recursive descent parser producing a syntax tree, and a tree-walking
evaluator. Errors in the input are collected as diagnostics instead of
aborting the pipeline.

Architecture:
    dacomp/
    ├── lexer/           # Tokens, diagnostics and lexical analysis
    ├── parser/          # Syntax tree nodes and recursive descent parser
    ├── evaluator/       # Tree-walking integer evaluator
    └── tools/           # Interactive shell and tree printer

License: MIT
"""

from ._version import __version__

__author__ = "dacomp contributors"
__license__ = "MIT"

from .lexer import Lexer, SyntaxKind, SyntaxToken
from .parser import Parser, SyntaxTree, parse
from .evaluator import Evaluator, EvaluationError, evaluate

__all__ = [
    # Core classes
    "Lexer",
    "Parser",
    "Evaluator",
    "SyntaxKind",
    "SyntaxToken",
    "SyntaxTree",
    "EvaluationError",

    # Entry points
    "parse",
    "evaluate",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
