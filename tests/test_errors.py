"""
Tests for diagnostics, reporters and ScanError.

Author: xwest
"""

import logging
import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from lox.scanner import Scanner, Diagnostics, LoggingReporter, ScanError, TokenType
from lox.scanner.errors import (
    Diagnostic, ERROR_CODES, create_unexpected_character_error,
    create_unterminated_string_error
)


class TestDiagnostics(unittest.TestCase):

    def test_report_records_plain_diagnostic(self):
        diagnostics = Diagnostics()
        diagnostics.report(4, "Something odd.")

        self.assertEqual(list(diagnostics), [Diagnostic(line=4, message="Something odd.")])
        self.assertTrue(diagnostics.has_errors())
        self.assertEqual(str(diagnostics.errors[0]), "[line 4] Error: Something odd.")

    def test_empty(self):
        diagnostics = Diagnostics()
        self.assertFalse(diagnostics.has_errors())
        self.assertEqual(len(diagnostics), 0)
        diagnostics.raise_for_errors()

    def test_clear(self):
        diagnostics = Diagnostics()
        diagnostics.report(1, "x")
        diagnostics.clear()
        self.assertEqual(len(diagnostics), 0)

    def test_raise_for_errors_uses_first_error(self):
        diagnostics = Diagnostics()
        Scanner("@\n\"open", diagnostics).scan_tokens()

        with self.assertRaises(ScanError) as ctx:
            diagnostics.raise_for_errors()

        self.assertEqual(ctx.exception.line, 1)
        self.assertEqual(ctx.exception.diagnostic.code, "LOX001")
        self.assertEqual(str(ctx.exception), "[line 1] Error at '@': Unexpected character.")

    def test_factories_use_known_codes(self):
        unexpected = create_unexpected_character_error("#", 2)
        unterminated = create_unterminated_string_error(5)

        self.assertIn(unexpected.code, ERROR_CODES)
        self.assertIn(unterminated.code, ERROR_CODES)
        self.assertEqual(str(unterminated), "[line 5] Error: Unterminated string.")

    def test_offending_character_is_quoted_verbatim(self):
        self.assertEqual(create_unexpected_character_error("'", 1).where, " at '''")
        self.assertEqual(create_unexpected_character_error("\\", 1).where, " at '\\'")
        self.assertEqual(
            str(create_unexpected_character_error("#", 3)),
            "[line 3] Error at '#': Unexpected character."
        )


class TestLoggingReporter(unittest.TestCase):

    def test_errors_are_logged(self):
        logger = logging.getLogger("lox.tests.reporter")
        reporter = LoggingReporter(logger)

        with self.assertLogs(logger, level="ERROR") as captured:
            tokens = Scanner("1 @ 2", reporter).scan_tokens()

        self.assertEqual([t.type for t in tokens], [TokenType.NUMBER, TokenType.NUMBER, TokenType.EOF])
        self.assertEqual(captured.output, ["ERROR:lox.tests.reporter:[line 1] Error at '@': Unexpected character."])

    def test_forwarding(self):
        diagnostics = Diagnostics()
        reporter = LoggingReporter(logging.getLogger("lox.tests.forward"), forward_to=diagnostics)

        with self.assertLogs("lox.tests.forward", level="ERROR"):
            Scanner('"never closed', reporter).scan_tokens()

        self.assertEqual([d.message for d in diagnostics], ["Unterminated string."])

    def test_forwarded_diagnostics_match_direct(self):
        direct = Diagnostics()
        Scanner("x @", direct).scan_tokens()

        forwarded = Diagnostics()
        reporter = LoggingReporter(logging.getLogger("lox.tests.match"), forward_to=forwarded)
        with self.assertLogs("lox.tests.match", level="ERROR"):
            Scanner("x @", reporter).scan_tokens()

        self.assertEqual(list(forwarded), list(direct))
        self.assertEqual(list(forwarded)[0].code, "LOX001")
        self.assertEqual(list(forwarded)[0].where, " at '@'")

    def test_forwarding_to_plain_reporter(self):
        calls = []

        class PlainReporter:
            def report(self, line, message):
                calls.append((line, message))

        reporter = LoggingReporter(logging.getLogger("lox.tests.plain"), forward_to=PlainReporter())
        with self.assertLogs("lox.tests.plain", level="ERROR"):
            Scanner("\n#", reporter).scan_tokens()

        self.assertEqual(calls, [(2, "Unexpected character.")])


if __name__ == '__main__':
    unittest.main()
