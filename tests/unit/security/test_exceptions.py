"""
Test cases for tinyjson exceptions and their message formatting.
"""

import unittest

from tinyjson.security.exceptions import (
    JSONDecodeError,
    NestingDepthError,
    ParseError,
    SecurityError,
    TinyJSONError,
)


class TestTinyJSONError(unittest.TestCase):
    """Test base TinyJSONError exception class."""

    def test_basic_error_creation(self):
        error = TinyJSONError("Test error message")
        self.assertEqual(error.message, "Test error message")
        self.assertIsNone(error.position)
        self.assertEqual(str(error), "Test error message")

    def test_error_with_position(self):
        error = TinyJSONError("Parse error", position=15)
        self.assertEqual(error.position, 15)
        self.assertEqual(str(error), "Parse error at position 15")

    def test_position_zero_is_reported(self):
        self.assertIn("at position 0", str(TinyJSONError("Start error", 0)))


class TestParseError(unittest.TestCase):
    """Test ParseError specific functionality."""

    def test_parse_error_inheritance(self):
        error = ParseError("Parse failure")
        self.assertIsInstance(error, TinyJSONError)
        self.assertIsNone(error.furthest)

    def test_furthest_position_reported(self):
        error = ParseError("Expecting JSON value", 0, 12)
        self.assertEqual(
            str(error),
            "Expecting JSON value at position 0 (scanning stopped at position 12)",
        )

    def test_furthest_equal_to_position_not_repeated(self):
        error = ParseError("Expecting JSON value", 3, 3)
        self.assertEqual(str(error), "Expecting JSON value at position 3")

    def test_offsets_kept_when_omitted_from_message(self):
        error = ParseError("Expecting JSON value", 0, 12, include_position=False)
        self.assertEqual(error.position, 0)
        self.assertEqual(error.furthest, 12)
        self.assertEqual(str(error), "Expecting JSON value")


class TestSecurityErrors(unittest.TestCase):
    """Test SecurityError and NestingDepthError."""

    def test_security_error_inheritance(self):
        error = SecurityError("Security violation")
        self.assertIsInstance(error, TinyJSONError)
        self.assertNotIsInstance(error, ParseError)

    def test_nesting_depth_error(self):
        error = NestingDepthError(101, 100, position=7)
        self.assertIsInstance(error, SecurityError)
        self.assertEqual(error.depth, 101)
        self.assertEqual(error.limit, 100)
        self.assertEqual(str(error), "Nesting depth 101 exceeds limit 100 at position 7")

    def test_nesting_depth_error_custom_message(self):
        error = NestingDepthError(
            240, 1000, message="Nesting depth 240 exhausts the call stack"
        )
        self.assertEqual(error.depth, 240)
        self.assertEqual(error.limit, 1000)
        self.assertEqual(str(error), "Nesting depth 240 exhausts the call stack")


class TestJSONDecodeError(unittest.TestCase):
    """Test the json-compatible decode error."""

    def test_attributes(self):
        error = JSONDecodeError("Extra data", "1 2", 2)
        self.assertEqual(error.msg, "Extra data")
        self.assertEqual(error.doc, "1 2")
        self.assertEqual(error.pos, 2)
        self.assertEqual(error.position, 2)
        self.assertEqual(str(error), "Extra data at position 2")

    def test_catchable_as_value_error(self):
        with self.assertRaises(ValueError):
            raise JSONDecodeError("Expecting JSON value", "", 0)


if __name__ == '__main__':
    unittest.main()
