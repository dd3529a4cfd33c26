"""
declparse Parser Package

Splits source text into declaration statements and parses each one into
a VariableDeclaration with a classified literal value.
"""

from .ast_nodes import (
    AST, ASTNode, ASTNodeType, ASTVisitor, Program,
    VariableDeclaration, VariableDeclarator, Literal, LiteralKind,
)
from .parser import Parser, parse, parse_declaration, split_statements
from .literals import classify_literal, parse_integer
from .errors import (
    Diagnostic, ParseError, MissingDeclarationKeyword, MissingAssignmentOperator,
    PARSER_ERROR_CODES,
)

__all__ = [
    # Core parser
    "Parser", "parse", "parse_declaration", "split_statements",
    "classify_literal", "parse_integer",

    # AST nodes
    "AST", "ASTNode", "ASTNodeType", "ASTVisitor",
    "Program", "VariableDeclaration", "VariableDeclarator",
    "Literal", "LiteralKind",

    # Error handling
    "Diagnostic", "ParseError", "MissingDeclarationKeyword",
    "MissingAssignmentOperator", "PARSER_ERROR_CODES",
]
