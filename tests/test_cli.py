"""
Test suite for the declparse command line.
"""

import io
import json
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest import mock
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from declparse.cli import main


class TestCLI(unittest.TestCase):
    """Test cases for cli.main."""

    def _run(self, *argv):
        stdout, stderr = io.StringIO(), io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(stderr):
            status = main(list(argv))
        return status, stdout.getvalue(), stderr.getvalue()

    def test_prints_declarations(self):
        status, out, err = self._run("const foo : string = 'hello world'; let n = 2")

        self.assertEqual(status, 0)
        self.assertEqual(out, (
            "const foo: string = \"'hello world'\" (StringLiteral)\n"
            "let n = 2 (NumericLiteral)\n"
        ))
        self.assertEqual(err, "")

    def test_json_output(self):
        status, out, _ = self._run("--json", "const a = 1")

        self.assertEqual(status, 0)
        data = json.loads(out)
        self.assertEqual(data["body"]["declarations"][0]["declarator"]["value"],
                         {"kind": "NumericLiteral", "value": 1, "raw": " 1"})

    def test_roundtrip_output(self):
        status, out, _ = self._run("--roundtrip", "const a = 1;  var b : t = 'x'")

        self.assertEqual(status, 0)
        self.assertEqual(out, "const a= 1; var b:t= 'x'\n")

    def test_parse_error_exit_status(self):
        status, out, err = self._run("const a 1")

        self.assertEqual(status, 1)
        self.assertEqual(out, "")
        self.assertIn("ERROR[P002]", err)

    def test_reads_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "decls.txt")
            with open(path, "w", encoding="utf-8") as f:
                f.write("const a = 1;\nlet")

            status, _, err = self._run("--file", path)

        self.assertEqual(status, 1)
        self.assertIn(f"{path}:2:1", err)

    def test_missing_file(self):
        status, _, err = self._run("--file", os.path.join(tempfile.gettempdir(), "no-such-declparse-file"))

        self.assertEqual(status, 2)
        self.assertIn("cannot read", err)

    def test_non_utf8_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "latin1.txt")
            with open(path, "wb") as f:
                f.write(b"const a = '\xff'")

            status, out, err = self._run("--file", path)

        self.assertEqual(status, 2)
        self.assertEqual(out, "")
        self.assertIn("cannot read", err)
        self.assertIn("not valid UTF-8", err)

    def test_json_and_roundtrip_are_exclusive(self):
        with self.assertRaises(SystemExit) as ctx:
            self._run("--json", "--roundtrip", "const a = 1")

        self.assertEqual(ctx.exception.code, 2)

    def test_reads_stdin(self):
        with mock.patch("sys.stdin", io.StringIO("let b = 2\n")):
            status, out, _ = self._run()

        self.assertEqual(status, 0)
        self.assertEqual(out, "let b = 2 (NumericLiteral)\n")

    def test_no_int_limit(self):
        status, out, _ = self._run("--no-int-limit", "let n = 99999999999999999999")

        self.assertEqual(status, 0)
        self.assertIn("(NumericLiteral)", out)


if __name__ == "__main__":
    unittest.main()
