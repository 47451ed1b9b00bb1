"""
String grammar with escape-sequence decoding.
"""

from typing import Optional

from ..security.limits import LimitValidator
from .constants import JSON_ESCAPE_MAP, UNICODE_ESCAPE_LENGTH, is_control, is_hex_digit
from .results import Match, MatchResult
from .scanner import Scanner


def _read_unicode_escape(scanner: Scanner) -> str:
    """Decode the hex digits after ``\\u`` into a single code unit.

    Up to four digits are taken; surrogates are returned as-is and never paired.
    With no digits at all the ``u`` is kept literally.
    """
    hex_digits = scanner.scan_while(is_hex_digit, UNICODE_ESCAPE_LENGTH)
    if not hex_digits:
        return "u"
    return chr(int(hex_digits, 16))


def _read_escape(scanner: Scanner) -> Optional[str]:
    """Decode the escape after a consumed backslash; None at end of input."""
    if not scanner.has_remaining():
        return None
    char = scanner.consume_one()
    if char == "u":
        return _read_unicode_escape(scanner)
    return JSON_ESCAPE_MAP.get(char, char)


def match_string(
    scanner: Scanner, validator: Optional[LimitValidator] = None
) -> MatchResult:
    """Match a double-quoted string at the current position."""
    start = scanner.mark()
    if not scanner.has_remaining() or scanner.peek() != '"':
        return None
    scanner.consume_one()

    chunks: list[str] = []
    while scanner.has_remaining():
        char = scanner.consume_one()

        if char == '"':
            result = "".join(chunks)
            if validator:
                validator.validate_string_length(result, start)
            return Match(result, scanner.position)

        if char == "\\":
            decoded = _read_escape(scanner)
            if decoded is None:
                break
            chunks.append(decoded)
        elif is_control(char):
            break
        else:
            chunks.append(char)

    scanner.reset(start)
    return None
