"""
Keyword literals: null, true and false.
"""

from .constants import FALSE_LITERAL, NULL_LITERAL, TRUE_LITERAL
from .results import Match, MatchResult
from .scanner import Scanner


def _match_keyword(scanner: Scanner, keyword: str) -> bool:
    start = scanner.mark()
    if scanner.scan_literal(keyword) == keyword:
        return True
    scanner.reset(start)
    return False


def match_null(scanner: Scanner) -> MatchResult:
    """Match the ``null`` keyword."""
    if _match_keyword(scanner, NULL_LITERAL):
        return Match(None, scanner.position)
    return None


def match_boolean(scanner: Scanner) -> MatchResult:
    """Match ``true`` or ``false``."""
    if _match_keyword(scanner, TRUE_LITERAL):
        return Match(True, scanner.position)
    if _match_keyword(scanner, FALSE_LITERAL):
        return Match(False, scanner.position)
    return None
