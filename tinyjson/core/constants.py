"""
Common constants and mappings used across the tinyjson grammar rules.
"""

# Insignificant whitespace between tokens
WHITESPACE = frozenset(" \t\n\r")

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

DIGITS = frozenset("0123456789")
NONZERO_DIGITS = frozenset("123456789")

# Escape sequences with a fixed replacement; \u is handled separately
JSON_ESCAPE_MAP = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

NULL_LITERAL = "null"
TRUE_LITERAL = "true"
FALSE_LITERAL = "false"

# Longest run of hex digits a \u escape consumes
UNICODE_ESCAPE_LENGTH = 4

# Integer results with more decimal digits than this are rejected
MAX_INTEGER_DIGITS = 4300


def is_whitespace(char: str) -> bool:
    """Return True for JSON insignificant whitespace."""
    return char in WHITESPACE


def is_digit(char: str) -> bool:
    """Return True for an ASCII decimal digit."""
    return char in DIGITS


def is_hex_digit(char: str) -> bool:
    """Return True for an ASCII hexadecimal digit."""
    return char in HEX_DIGITS


def is_control(char: str) -> bool:
    """Return True for characters that must be escaped inside strings."""
    return ord(char) < 0x20
