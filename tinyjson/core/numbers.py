"""
Number grammar.

    number   = [ "-" ] int [ frac ] [ exp ]
    int      = "0" / ( digit1-9 *DIGIT )
    frac     = "." 1*DIGIT
    exp      = ( "e" / "E" ) [ "+" / "-" ] 1*DIGIT

Integers keep exact integer arithmetic, including when scaled by a non-negative
exponent (``12e3`` is the int ``12000``). A fraction or a negative exponent
yields a float, converted from the literal text so the result is correctly
rounded. Values that cannot be represented (an integer wider than
``MAX_INTEGER_DIGITS`` digits, a float overflowing to infinity) make the rule
fail like any other non-match.
"""

import math
from typing import Optional, Union

from ..security.limits import LimitValidator
from .constants import MAX_INTEGER_DIGITS, NONZERO_DIGITS, is_digit
from .results import Match, MatchResult
from .scanner import Scanner


def _scan_integer_part(scanner: Scanner) -> Optional[str]:
    if not scanner.has_remaining():
        return None
    char = scanner.peek()
    if char == "0":
        return scanner.consume_one()
    if char in NONZERO_DIGITS:
        return scanner.scan_while(is_digit)
    return None


def _scan_fraction(scanner: Scanner) -> Optional[str]:
    """Return the fraction digits, "" when absent, or None when malformed."""
    if not scanner.has_remaining() or scanner.peek() != ".":
        return ""
    scanner.consume_one()
    digits = scanner.scan_while(is_digit)
    return digits or None


def _scan_exponent(scanner: Scanner) -> Optional[str]:
    """Return the signed exponent text, "" when absent, or None when malformed."""
    if not scanner.has_remaining() or scanner.peek() not in "eE":
        return ""
    scanner.consume_one()
    sign = ""
    if scanner.has_remaining() and scanner.peek() in "+-":
        sign = scanner.consume_one()
    digits = scanner.scan_while(is_digit)
    if not digits:
        return None
    return sign + digits


def _scale_integer(integer: str, exponent: int) -> Optional[int]:
    if integer == "0":
        return 0
    if len(integer) + exponent > MAX_INTEGER_DIGITS:
        return None
    return int(integer) * 10 ** exponent


def _to_float(text: str) -> Optional[float]:
    value = float(text)
    if math.isinf(value):
        return None
    return value


def convert_number(
    negative: bool, integer: str, fraction: str, exponent: str
) -> Optional[Union[int, float]]:
    """Compute the value of a scanned number, or None if it is not representable."""
    sign = "-" if negative else ""
    try:
        exp_value = int(exponent) if exponent else 0
        if not fraction and exp_value >= 0:
            value = _scale_integer(integer, exp_value)
            if value is None:
                return None
            return -value if negative else value
        text = f"{sign}{integer}"
        if fraction:
            text += f".{fraction}"
        if exponent:
            text += f"e{exponent}"
        return _to_float(text)
    except (ValueError, OverflowError):
        return None


def match_number(
    scanner: Scanner, validator: Optional[LimitValidator] = None
) -> MatchResult:
    """Match a JSON number at the current position."""
    start = scanner.mark()

    negative = scanner.has_remaining() and scanner.peek() == "-"
    if negative:
        scanner.consume_one()

    integer = _scan_integer_part(scanner)
    fraction = _scan_fraction(scanner) if integer is not None else None
    exponent = _scan_exponent(scanner) if fraction is not None else None
    if integer is None or fraction is None or exponent is None:
        scanner.reset(start)
        return None

    if validator:
        validator.validate_number_length(scanner.text[start:scanner.position], start)

    value = convert_number(negative, integer, fraction, exponent)
    if value is None:
        scanner.reset(start)
        return None
    return Match(value, scanner.position)

