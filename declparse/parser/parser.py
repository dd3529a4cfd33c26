"""
declparse declaration parser.

Parsing is a chain of first-occurrence cuts rather than a token stream:

    source      --split on ';'-->             statements
    statement   --strip, cut at first ' '-->  keyword, declarator text
    declarator  --cut at first '='-->         left part, raw value
    left part   --drop spaces, cut at ':'-->  identifier, type annotation
    raw value   --classify-->                 Literal

The first statement that fails aborts the whole parse.
"""

import logging
from typing import List, Optional

from ..options import ParserOptions
from ..source import LineIndex, SourceLocation, SourceSpan
from .ast_nodes import Program, VariableDeclaration, VariableDeclarator
from .errors import ParseError, create_missing_keyword_error, create_missing_assignment_error
from .literals import classify_literal

logger = logging.getLogger(__name__)

STATEMENT_SEPARATOR = ";"
KEYWORD_SEPARATOR = " "
ASSIGNMENT_OPERATOR = "="
TYPE_ANNOTATION_SEPARATOR = ":"

# Unicode White_Space; unlike str.strip() this keeps \x1c-\x1f
STATEMENT_WHITESPACE = (
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def split_statements(source: str) -> List[str]:
    """
    Split source into declaration statements on every ';'.

    Surrounding whitespace is kept. Source without ';' yields a single
    statement, and empty source yields one empty statement.
    """
    return source.split(STATEMENT_SEPARATOR)


class Parser:
    """
    Declaration statement parser.

    Holds the source text and options for a single parse; the parser keeps
    no state between calls, so one instance may be reused freely.
    """

    def __init__(self, source: str = "", options: Optional[ParserOptions] = None):
        """
        Initialize parser with source text.

        Args:
            source: Text containing zero or more ';'-separated declarations
            options: Parser configuration, defaults to ParserOptions()
        """
        self.source = source
        self.options = options or ParserOptions()
        self._lines = LineIndex(source, self.options.filename)

    def parse(self) -> Program:
        """
        Parse the source into a Program.

        Returns:
            Program holding one declaration per statement, in source order

        Raises:
            ParseError: For the first statement that cannot be parsed. The
                error records the statement index and the declarations
                parsed before it.
        """
        declarations: List[VariableDeclaration] = []
        offset = 0

        for index, statement in enumerate(split_statements(self.source)):
            try:
                declaration = self.parse_declaration(statement, offset)
            except ParseError as e:
                e.statement_index = index
                e.partial = tuple(declarations)
                logger.debug("Statement %d failed with %s: %s", index, e.code, e.message)
                raise

            declarations.append(declaration)
            offset += len(statement) + len(STATEMENT_SEPARATOR)

        logger.debug("Parsed %d declaration(s) from %s", len(declarations), self.options.filename)
        return Program(tuple(declarations), self._span(0, len(self.source)))

    def parse_declaration(self, statement: str, offset: int = 0) -> VariableDeclaration:
        """
        Parse one statement into a declaration.

        Args:
            statement: Statement text, surrounding whitespace allowed
            offset: Offset of the statement within the parser source

        Raises:
            MissingDeclarationKeyword: No ' ' after the keyword
            MissingAssignmentOperator: No '=' in the declarator
        """
        code = statement.strip(STATEMENT_WHITESPACE)
        start = offset + len(statement) - len(statement.lstrip(STATEMENT_WHITESPACE))

        kind, separator, rest = code.partition(KEYWORD_SEPARATOR)
        if not separator:
            raise create_missing_keyword_error(code, self._location(start))

        declarator = self.parse_declarator(rest, start + len(kind) + len(separator), statement=code)

        return VariableDeclaration(
            kind=kind,
            declarator=declarator,
            span=self._span(start, start + len(code))
        )

    def parse_declarator(self, text: str, offset: int = 0,
                         statement: Optional[str] = None) -> VariableDeclarator:
        """
        Parse declarator text such as 'foo : string = 1'.

        Every space in the left-hand side is removed before it is cut into
        identifier and type annotation. The annotation is None when there
        is no ':'. Neither part is validated.
        """
        left, separator, right = text.partition(ASSIGNMENT_OPERATOR)
        if not separator:
            raise create_missing_assignment_error(
                text, text if statement is None else statement, self._location(offset)
            )

        value = classify_literal(right, self.options.integer_bits)

        compact = left.replace(" ", "")
        identifier, colon, type_annotation = compact.partition(TYPE_ANNOTATION_SEPARATOR)

        return VariableDeclarator(
            identifier=identifier,
            type_annotation=type_annotation if colon else None,
            value=value
        )

    def _location(self, offset: int) -> SourceLocation:
        return self._lines.location(offset)

    def _span(self, start: int, end: int) -> SourceSpan:
        return self._lines.span(start, end)


def parse(source: str, options: Optional[ParserOptions] = None) -> Program:
    """Parse source text into a Program."""
    return Parser(source, options).parse()


def parse_declaration(statement: str, options: Optional[ParserOptions] = None) -> VariableDeclaration:
    """Parse a single declaration statement."""
    return Parser(statement, options).parse_declaration(statement)
