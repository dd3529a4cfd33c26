"""
Abstract Syntax Tree node definitions for declparse.

A parsed source is a Program holding an ordered sequence of variable
declarations. Every declaration owns exactly one declarator, and every
declarator owns exactly one classified literal. Nodes are immutable and
support the visitor pattern.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, List, Optional, Tuple, Union

from ..source import SourceSpan


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""

    PROGRAM = "Program"
    VARIABLE_DECLARATION = "VariableDeclaration"
    VARIABLE_DECLARATOR = "VariableDeclarator"
    LITERAL = "Literal"


class LiteralKind(str, Enum):
    """Classification of a literal value."""

    NUMERIC = "NumericLiteral"
    STRING = "StringLiteral"

    def __str__(self) -> str:
        return self.value


class ASTVisitor:
    """
    Visitor base for traversing AST nodes.

    visit() dispatches to visit_<node type>, e.g. visit_variable_declaration.
    Node types without a handler fall back to generic_visit().
    """

    def visit(self, node: "ASTNode") -> Any:
        method = getattr(self, f"visit_{node.node_type.name.lower()}", self.generic_visit)
        return method(node)

    def generic_visit(self, node: "ASTNode") -> Any:
        for child in node.children():
            child.accept(self)
        return None


class ASTNode(ABC):
    """Base class for all AST nodes."""

    node_type: ClassVar[ASTNodeType]

    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        return visitor.visit(self)

    @abstractmethod
    def children(self) -> List["ASTNode"]:
        """Get all child nodes."""

    def walk(self):
        """Yield this node and all of its descendants, depth first."""
        yield self
        for child in self.children():
            yield from child.walk()


@dataclass(frozen=True)
class Literal(ASTNode):
    """
    Classified literal value.

    value is an int for numeric literals, otherwise the trimmed source
    text (quotes included). raw is the untouched right-hand side text.
    """
    kind: LiteralKind
    value: Union[int, str]
    raw: str

    node_type: ClassVar[ASTNodeType] = ASTNodeType.LITERAL

    @property
    def is_numeric(self) -> bool:
        return self.kind is LiteralKind.NUMERIC

    def children(self) -> List[ASTNode]:
        return []


@dataclass(frozen=True)
class VariableDeclarator(ASTNode):
    """Identifier, optional type annotation and value bound by a declaration."""
    identifier: str
    type_annotation: Optional[str]
    value: Literal

    node_type: ClassVar[ASTNodeType] = ASTNodeType.VARIABLE_DECLARATOR

    def children(self) -> List[ASTNode]:
        return [self.value]


@dataclass(frozen=True)
class VariableDeclaration(ASTNode):
    """A `<kind> <declarator>` statement."""
    kind: str
    declarator: VariableDeclarator
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    node_type: ClassVar[ASTNodeType] = ASTNodeType.VARIABLE_DECLARATION

    @property
    def identifier(self) -> str:
        return self.declarator.identifier

    def children(self) -> List[ASTNode]:
        return [self.declarator]


@dataclass(frozen=True)
class Program(ASTNode):
    """Root AST node: declarations in source order."""
    declarations: Tuple[VariableDeclaration, ...] = ()
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    node_type: ClassVar[ASTNodeType] = ASTNodeType.PROGRAM

    def __len__(self) -> int:
        return len(self.declarations)

    def __iter__(self):
        return iter(self.declarations)

    def __getitem__(self, index: int) -> VariableDeclaration:
        return self.declarations[index]

    def children(self) -> List[ASTNode]:
        return list(self.declarations)


# Type aliases
AST = Program
