"""
declparse - Declaration Statement Parser

Turns a fragment of source text holding one or more variable declarations
into a structured syntax tree of declaration nodes, each carrying a binding
kind, an identifier, an optional type annotation and a classified literal.

Architecture:
    declparse/
    ├── source.py        # Source locations and spans
    ├── options.py       # Parser configuration
    ├── parser/          # Splitting, declaration parsing, literal classification
    ├── serializer.py    # Tree -> source text / plain data
    └── cli.py           # Command line entry point

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .options import ParserOptions
from .parser import (
    Parser, parse, parse_declaration, split_statements, classify_literal,
    ParseError, MissingDeclarationKeyword, MissingAssignmentOperator,
)
from .serializer import to_source, to_dict

__all__ = [
    # Core
    "Parser",
    "ParserOptions",
    "parse",
    "parse_declaration",
    "split_statements",
    "classify_literal",

    # Errors
    "ParseError",
    "MissingDeclarationKeyword",
    "MissingAssignmentOperator",

    # Serialization
    "to_source",
    "to_dict",

    # Version info
    "__version__",
    "__license__",
]
