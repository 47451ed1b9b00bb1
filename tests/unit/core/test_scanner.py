"""
Test cases for the tinyjson scanner.

Tests focus on cursor primitives and the save/restore contract backtracking relies on.
"""

import unittest

from tinyjson.core.constants import is_digit
from tinyjson.core.scanner import Scanner


class TestScannerPrimitives(unittest.TestCase):
    """Test peek, consume and boundary behavior."""

    def test_peek_does_not_consume(self):
        scanner = Scanner("ab")
        self.assertEqual(scanner.peek(), "a")
        self.assertEqual(scanner.peek(), "a")
        self.assertEqual(scanner.position, 0)

    def test_consume_one_advances(self):
        scanner = Scanner("ab")
        self.assertEqual(scanner.consume_one(), "a")
        self.assertEqual(scanner.consume_one(), "b")
        self.assertEqual(scanner.position, 2)
        self.assertTrue(scanner.at_end())

    def test_reads_past_end_raise(self):
        """Reading at end of input is an error; callers must check first."""
        scanner = Scanner("")
        self.assertFalse(scanner.has_remaining())
        with self.assertRaises(IndexError):
            scanner.peek()
        with self.assertRaises(IndexError):
            scanner.consume_one()
        self.assertEqual(scanner.position, 0)

    def test_remaining(self):
        scanner = Scanner("abc")
        scanner.consume_one()
        self.assertEqual(scanner.remaining(), "bc")


class TestScanWhile(unittest.TestCase):
    """Test predicate-driven scanning."""

    def test_maximal_run(self):
        scanner = Scanner("123abc")
        self.assertEqual(scanner.scan_while(is_digit), "123")
        self.assertEqual(scanner.position, 3)

    def test_no_match_consumes_nothing(self):
        scanner = Scanner("abc")
        self.assertEqual(scanner.scan_while(is_digit), "")
        self.assertEqual(scanner.position, 0)

    def test_stops_at_end_of_input(self):
        scanner = Scanner("42")
        self.assertEqual(scanner.scan_while(is_digit), "42")
        self.assertTrue(scanner.at_end())
        self.assertEqual(scanner.scan_while(is_digit), "")

    def test_limit(self):
        scanner = Scanner("abcdef")
        self.assertEqual(scanner.scan_while(lambda c: True, 4), "abcd")
        self.assertEqual(scanner.position, 4)


class TestScanLiteral(unittest.TestCase):
    """Test fixed-pattern scanning returns exactly the matched prefix."""

    def test_full_match(self):
        scanner = Scanner("true,")
        self.assertEqual(scanner.scan_literal("true"), "true")
        self.assertEqual(scanner.position, 4)

    def test_partial_match(self):
        scanner = Scanner("trux")
        self.assertEqual(scanner.scan_literal("true"), "tru")
        self.assertEqual(scanner.position, 3)

    def test_input_shorter_than_pattern(self):
        scanner = Scanner("tr")
        self.assertEqual(scanner.scan_literal("true"), "tr")
        self.assertTrue(scanner.at_end())

    def test_no_match(self):
        scanner = Scanner("xyz")
        self.assertEqual(scanner.scan_literal("true"), "")
        self.assertEqual(scanner.position, 0)


class TestBacktracking(unittest.TestCase):
    """Test mark/reset and the furthest-position high-water mark."""

    def test_reset_restores_position(self):
        scanner = Scanner("hello")
        start = scanner.mark()
        scanner.scan_literal("hel")
        scanner.reset(start)
        self.assertEqual(scanner.position, 0)
        self.assertEqual(scanner.peek(), "h")

    def test_reset_bounds(self):
        scanner = Scanner("abc")
        scanner.reset(3)
        self.assertTrue(scanner.at_end())
        with self.assertRaises(ValueError):
            scanner.reset(-1)
        with self.assertRaises(ValueError):
            scanner.reset(4)

    def test_furthest_survives_reset(self):
        scanner = Scanner("abcdef")
        scanner.scan_literal("abcd")
        scanner.reset(0)
        self.assertEqual(scanner.position, 0)
        self.assertEqual(scanner.furthest, 4)

    def test_skip_whitespace(self):
        scanner = Scanner(" \t\n\rx")
        scanner.skip_whitespace()
        self.assertEqual(scanner.peek(), "x")

    def test_skip_whitespace_ignores_other_spaces(self):
        """Form feed and vertical tab are not JSON whitespace."""
        scanner = Scanner("\f\v1")
        scanner.skip_whitespace()
        self.assertEqual(scanner.position, 0)


if __name__ == '__main__':
    unittest.main()
