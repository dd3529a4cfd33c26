"""
Error handling for the declparse parser.

Parsing is fail-fast: the first statement that cannot be parsed raises a
ParseError carrying a diagnostic with the source location of the statement,
and no tree is produced.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple, TYPE_CHECKING

from ..source import SourceLocation

if TYPE_CHECKING:
    from .ast_nodes import VariableDeclaration


@dataclass
class Diagnostic:
    """A rendered parser message (error or warning)."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class ParseError(Exception):
    """
    Exception raised when a declaration statement cannot be parsed.

    Attributes:
        diagnostic: Rendered diagnostic for the failure
        statement: Text of the statement that failed
        statement_index: Position of that statement in the source (0-based),
            set by the tree assembler
        partial: Declarations successfully parsed before the failure
    """

    code: str = "P000"

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        statement: str = "",
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=self.code,
            help_text=help_text,
            suggestions=suggestions
        )
        self.statement = statement
        self.statement_index: Optional[int] = None
        self.partial: Tuple["VariableDeclaration", ...] = ()

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)


class MissingDeclarationKeyword(ParseError):
    """The statement has no space separating its keyword from its declarator."""
    code = "P001"


class MissingAssignmentOperator(ParseError):
    """The declarator text contains no '='."""
    code = "P002"


PARSER_ERROR_CODES = {
    "P001": "Missing declaration keyword",
    "P002": "Missing assignment operator",
}


def create_missing_keyword_error(statement: str, location: SourceLocation) -> MissingDeclarationKeyword:
    """Create an error for a statement without a separable keyword."""
    suggestions = ["Write declarations as '<keyword> <identifier> = <value>'"]

    if not statement:
        help_text = "The statement is empty."
        suggestions.append("Remove a trailing ';'")
    else:
        help_text = f"Could not find ' ' between the declaration keyword and the declarator in '{statement}'."

    return MissingDeclarationKeyword(
        message="Expected a declaration keyword followed by a space",
        location=location,
        statement=statement,
        help_text=help_text,
        suggestions=suggestions
    )


def create_missing_assignment_error(declarator: str, statement: str,
                                    location: SourceLocation) -> MissingAssignmentOperator:
    """Create an error for a declarator without '='."""
    return MissingAssignmentOperator(
        message="Expected assignment operator '='",
        location=location,
        statement=statement,
        help_text=f"Could not find '=' in '{declarator}'.",
        suggestions=["Add an assignment operator '=' followed by a value"]
    )
