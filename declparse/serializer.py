"""
Tree serialization.

SourceSerializer writes a tree back out as declaration source text that
parses to an equal tree. DictBuilder produces plain data in the shape
{"body": {"declarations": [...]}} for JSON output.
"""

from typing import Any, Dict

from .parser.ast_nodes import (
    ASTNode, ASTVisitor, Literal, Program, VariableDeclaration, VariableDeclarator,
)
from .parser.parser import (
    ASSIGNMENT_OPERATOR, KEYWORD_SEPARATOR, STATEMENT_SEPARATOR, TYPE_ANNOTATION_SEPARATOR,
)


class SourceSerializer(ASTVisitor):
    """Render nodes as declaration source text."""

    def __init__(self, separator: str = STATEMENT_SEPARATOR + " "):
        self.separator = separator

    def visit_program(self, node: Program) -> str:
        return self.separator.join(d.accept(self) for d in node.declarations)

    def visit_variable_declaration(self, node: VariableDeclaration) -> str:
        return node.kind + KEYWORD_SEPARATOR + node.declarator.accept(self)

    def visit_variable_declarator(self, node: VariableDeclarator) -> str:
        left = node.identifier
        if node.type_annotation is not None:
            left += TYPE_ANNOTATION_SEPARATOR + node.type_annotation
        return left + ASSIGNMENT_OPERATOR + node.value.accept(self)

    def visit_literal(self, node: Literal) -> str:
        # raw is exactly what the classifier saw
        return node.raw


class DictBuilder(ASTVisitor):
    """Convert nodes to plain dicts."""

    def visit_program(self, node: Program) -> Dict[str, Any]:
        return {"body": {"declarations": [d.accept(self) for d in node.declarations]}}

    def visit_variable_declaration(self, node: VariableDeclaration) -> Dict[str, Any]:
        result = {
            "kind": node.kind,
            "declarator": node.declarator.accept(self),
        }
        if node.span is not None:
            result["loc"] = str(node.span)
        return result

    def visit_variable_declarator(self, node: VariableDeclarator) -> Dict[str, Any]:
        return {
            "identifier": node.identifier,
            "typeAnnotation": node.type_annotation,
            "value": node.value.accept(self),
        }

    def visit_literal(self, node: Literal) -> Dict[str, Any]:
        return {"kind": node.kind.value, "value": node.value, "raw": node.raw}


def to_source(node: ASTNode) -> str:
    """Serialize a node to declaration source text."""
    return node.accept(SourceSerializer())


def to_dict(node: ASTNode) -> Dict[str, Any]:
    """Convert a tree to plain data."""
    return node.accept(DictBuilder())
