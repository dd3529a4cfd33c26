"""
Test suite for parser diagnostics.
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from declparse import ParserOptions, parse
from declparse.parser import (
    ParseError, MissingDeclarationKeyword, MissingAssignmentOperator, PARSER_ERROR_CODES,
)
from declparse.source import LineIndex, SourceLocation, location_at


class TestErrorTaxonomy(unittest.TestCase):
    """Test cases for error classes and codes."""

    def test_errors_share_base_class(self):
        self.assertTrue(issubclass(MissingDeclarationKeyword, ParseError))
        self.assertTrue(issubclass(MissingAssignmentOperator, ParseError))

    def test_error_codes(self):
        self.assertEqual(MissingDeclarationKeyword.code, "P001")
        self.assertEqual(MissingAssignmentOperator.code, "P002")
        self.assertEqual(set(PARSER_ERROR_CODES), {"P001", "P002"})


class TestDiagnostics(unittest.TestCase):
    """Test cases for error locations and rendering."""

    def _error(self, source: str, **options) -> ParseError:
        with self.assertRaises(ParseError) as ctx:
            parse(source, ParserOptions(**options))
        return ctx.exception

    def test_missing_keyword_location(self):
        error = self._error("const a = 1;\nlet", filename="decls.txt")

        self.assertIsInstance(error, MissingDeclarationKeyword)
        self.assertEqual(error.location, SourceLocation("decls.txt", 2, 1, 13))
        self.assertEqual(error.statement, "let")

    def test_missing_assignment_points_at_declarator(self):
        error = self._error("let  b 2")

        self.assertIsInstance(error, MissingAssignmentOperator)
        self.assertEqual(error.location.column, 5)
        self.assertIn("' b 2'", error.diagnostic.help_text)

    def test_rendered_diagnostic(self):
        text = str(self._error("const a 1", filename="x.decl"))

        self.assertTrue(text.startswith("ERROR[P002]: Expected assignment operator '='\n"))
        self.assertIn("  --> x.decl:1:7\n", text)
        self.assertIn("  help: Could not find '=' in 'a 1'.\n", text)
        self.assertIn("    - Add an assignment operator '=' followed by a value\n", text)

    def test_empty_statement_suggests_removing_separator(self):
        error = self._error("const a = 1;")

        self.assertEqual(error.statement, "")
        self.assertIn("Remove a trailing ';'", error.diagnostic.suggestions)

    def test_message(self):
        self.assertEqual(self._error("").message, "Expected a declaration keyword followed by a space")


class TestSourceLocation(unittest.TestCase):
    """Test cases for offset to line/column conversion."""

    def test_first_line(self):
        self.assertEqual(location_at("abc", 2), SourceLocation("<input>", 1, 3, 2))

    def test_after_newline(self):
        self.assertEqual(location_at("a\nbc\nd", 5, "f"), SourceLocation("f", 3, 1, 5))

    def test_line_index_lookups(self):
        index = LineIndex("a\nbc\nd", "f")

        self.assertEqual(index.line_starts, [0, 2, 5])
        self.assertEqual(index.location(1), SourceLocation("f", 1, 2, 1))
        self.assertEqual(index.location(2), SourceLocation("f", 2, 1, 2))
        self.assertEqual(str(index.span(2, 4)), "f:2:1-2:3")

    def test_offset_clamped(self):
        self.assertEqual(location_at("ab", 10).offset, 2)

    def test_str(self):
        self.assertEqual(str(SourceLocation("f", 3, 4, 9)), "f:3:4")


class TestParserOptions(unittest.TestCase):
    """Test cases for parser configuration."""

    def test_defaults(self):
        options = ParserOptions()

        self.assertEqual(options.filename, "<input>")
        self.assertEqual(options.integer_bits, 64)

    def test_invalid_width(self):
        with self.assertRaises(ValueError):
            ParserOptions(integer_bits=0)

    def test_for_file(self):
        options = ParserOptions.for_file("decls.txt", integer_bits=None)

        self.assertEqual(options.filename, "decls.txt")
        self.assertIsNone(options.integer_bits)


if __name__ == "__main__":
    unittest.main()
