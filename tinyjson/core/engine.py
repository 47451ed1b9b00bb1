"""
Parser for tinyjson - recursive-descent value dispatcher and top-level API.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, TextIO, Union

from ..security.exceptions import (
    JSONDecodeError,
    NestingDepthError,
    ParseError,
    SecurityError,
)
from ..security.limits import LimitValidator
from ..utils.config import ParseConfig
from .containers import ContainerRulesMixin
from .literals import match_boolean, match_null
from .numbers import match_number
from .results import JSONValue, MatchResult
from .scanner import Scanner
from .strings import match_string


@dataclass
class ParseResult:
    """Outcome of try_parse(): either a value or the error that prevented one."""

    value: JSONValue = None
    error: Optional[ParseError] = None
    end: int = 0

    @property
    def ok(self) -> bool:
        """Whether parsing succeeded."""
        return self.error is None


class Parser(ContainerRulesMixin):
    """Recursive-descent JSON parser over a single input text.

    Each rule either returns a ``Match`` and leaves the scanner after the text
    it consumed, or returns ``None`` and leaves the scanner where it started.
    Only ``parse_value`` turns a non-match into an exception.
    """

    def __init__(self, text: str, config: Optional[ParseConfig] = None):
        self.config = config or ParseConfig()
        self.scanner = Scanner(text)
        self.validator = (
            LimitValidator(self.config.limits) if self.config.limits else None
        )
        self.logger = self.config.logger or logging.getLogger(__name__)
        self._rules: tuple[Callable[[], MatchResult], ...] = (
            self.match_null,
            self.match_boolean,
            self.match_string,
            self.match_number,
            self.match_array,
            self.match_object,
        )

    def match_null(self) -> MatchResult:
        return match_null(self.scanner)

    def match_boolean(self) -> MatchResult:
        return match_boolean(self.scanner)

    def match_string(self) -> MatchResult:
        return match_string(self.scanner, self.validator)

    def match_number(self) -> MatchResult:
        return match_number(self.scanner, self.validator)

    def match_value(self) -> MatchResult:
        """Try every value rule in priority order at the current position."""
        scanner = self.scanner
        start = scanner.mark()
        scanner.skip_whitespace()

        for rule in self._rules:
            result = rule()
            if result is not None:
                if self.validator:
                    self.validator.count_item()
                scanner.skip_whitespace()
                return result._replace(end=scanner.position)

        scanner.reset(start)
        return None

    def parse_value(self) -> JSONValue:
        """Parse one value, raising ParseError if none matches here."""
        start = self.scanner.mark()
        result = self.match_value()
        if result is None:
            self.logger.debug(
                f"No JSON value at position {start}, "
                f"furthest position reached {self.scanner.furthest}"
            )
            raise self.create_parse_error("Expecting JSON value", start)
        return result.value

    def parse(self) -> JSONValue:
        """Parse a complete JSON value, leaving any trailing content unconsumed.

        Containers recurse on the call stack, so input nested deeper than the
        interpreter's recursion limit allows is reported as NestingDepthError
        even when max_nesting_depth is set higher.
        """
        if self.validator:
            self.validator.validate_input_size(self.scanner.text)
        try:
            return self.parse_value()
        except RecursionError as e:
            raise self._stack_exhausted() from e

    def _stack_exhausted(self) -> NestingDepthError:
        assert self.config.limits is not None
        depth = self.validator.deepest if self.validator else 0
        limit = self.config.limits.max_nesting_depth
        self.logger.debug(f"Call stack exhausted at nesting depth {depth}")
        return NestingDepthError(
            depth,
            limit,
            self.scanner.furthest,
            message=(
                f"Nesting depth {depth} exhausts the call stack "
                f"before limit {limit}"
            ),
        )

    def create_parse_error(self, message: str, position: int) -> ParseError:
        return ParseError(
            message,
            position,
            self.scanner.furthest,
            include_position=self.config.include_position,
        )


def try_parse(text: str, config: Optional[ParseConfig] = None) -> ParseResult:
    """
    Parse a JSON text into Python data without raising on malformed input.

    Args:
        text: The JSON text to parse
        config: Optional ParseConfig for limits and leniency options

    Returns:
        ParseResult holding either the value or the ParseError

    Raises:
        SecurityError: If a configured limit is exceeded
    """
    parser = Parser(text, config)
    parser.logger.debug(f"Parsing {len(text)} characters")

    try:
        value = parser.parse()
    except ParseError as e:
        return ParseResult(error=e, end=parser.scanner.position)
    except SecurityError as e:
        parser.logger.warning(f"Parsing aborted: {e}")
        raise

    scanner = parser.scanner
    if not parser.config.allow_trailing_data and not scanner.at_end():
        parser.logger.debug(
            f"Unconsumed input after value at position {scanner.position}"
        )
        error = parser.create_parse_error("Extra data", scanner.position)
        return ParseResult(error=error, end=scanner.position)

    return ParseResult(value=value, end=scanner.position)


def parse(text: str, config: Optional[ParseConfig] = None) -> JSONValue:
    """
    Parse a JSON text into a Python data structure.

    Args:
        text: The JSON text to parse
        config: Optional ParseConfig for limits and leniency options

    Returns:
        Parsed Python data structure

    Raises:
        ParseError: If the text is not a JSON value
        SecurityError: If a configured limit is exceeded
    """
    result = try_parse(text, config)
    if result.error is not None:
        raise result.error
    return result.value


def loads(
    s: Union[str, bytes, bytearray], *, config: Optional[ParseConfig] = None
) -> JSONValue:
    """
    Deserialize a JSON document to a Python object, like json.loads().

    Raises:
        JSONDecodeError: If parsing fails
        SecurityError: If a configured limit is exceeded
    """
    if isinstance(s, (bytes, bytearray)):
        s = s.decode("utf-8-sig")
    elif s.startswith("\ufeff"):
        s = s[1:]

    try:
        return parse(s, config)
    except ParseError as e:
        raise JSONDecodeError(
            e.message, s, e.position, include_position=e.include_position
        ) from e


def load(fp: TextIO, *, config: Optional[ParseConfig] = None) -> JSONValue:
    """Deserialize a JSON document read from a file-like object."""
    return loads(fp.read(), config=config)
