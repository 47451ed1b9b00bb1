"""
Array and object grammar rules.

These rules recurse into the value dispatcher for every element, so they are
written as a mixin over the parser that owns the scanner.
"""

from typing import Any, Callable, Optional

from ..security.limits import LimitValidator
from ..utils.config import ParseConfig
from .results import Match, MatchResult
from .scanner import Scanner
from .strings import match_string


class ContainerRulesMixin:
    """Array and object rules shared by parsers exposing ``match_value``."""

    scanner: Scanner
    config: ParseConfig
    validator: Optional[LimitValidator]

    def match_value(self) -> MatchResult:
        raise NotImplementedError

    def match_array(self) -> MatchResult:
        """Match ``[ value, ... ]`` including its closing bracket."""
        return self._match_container("[", "]", self._match_array_body)

    def match_object(self) -> MatchResult:
        """Match ``{ "key": value, ... }`` including its closing brace."""
        return self._match_container("{", "}", self._match_object_body)

    def _match_container(
        self, opener: str, closer: str, body: Callable[[str], Any]
    ) -> MatchResult:
        scanner = self.scanner
        start = scanner.mark()
        if not scanner.has_remaining() or scanner.peek() != opener:
            return None

        if self.validator:
            self.validator.enter_structure(start)
        try:
            scanner.consume_one()
            scanner.skip_whitespace()
            value = body(closer)
        finally:
            if self.validator:
                self.validator.exit_structure()

        if value is None:
            scanner.reset(start)
            return None
        return Match(value, scanner.position)

    def _match_array_body(self, closer: str) -> Optional[list[Any]]:
        items: list[Any] = []
        if self._match_closer(closer):
            return items

        while True:
            element = self.match_value()
            if element is None:
                return None
            items.append(element.value)
            if self.validator:
                self.validator.validate_array_items(len(items))

            closed = self._match_separator(closer)
            if closed is None:
                return None
            if closed:
                return items

    def _match_object_body(self, closer: str) -> Optional[dict[str, Any]]:
        scanner = self.scanner
        obj: dict[str, Any] = {}
        if self._match_closer(closer):
            return obj

        while True:
            scanner.skip_whitespace()
            key = match_string(scanner, self.validator)
            if key is None:
                return None

            scanner.skip_whitespace()
            if not scanner.has_remaining() or scanner.peek() != ":":
                return None
            scanner.consume_one()

            value = self.match_value()
            if value is None:
                return None
            obj[key.value] = value.value
            if self.validator:
                self.validator.validate_object_keys(len(obj))

            closed = self._match_separator(closer)
            if closed is None:
                return None
            if closed:
                return obj

    def _match_closer(self, closer: str) -> bool:
        scanner = self.scanner
        if scanner.has_remaining() and scanner.peek() == closer:
            scanner.consume_one()
            return True
        return False

    def _match_separator(self, closer: str) -> Optional[bool]:
        """Consume ``,`` or the closer after a member.

        Returns True when the container is closed, False when another member
        follows, and None when neither a separator nor the closer is present.
        """
        scanner = self.scanner
        if self._match_closer(closer):
            return True
        if not scanner.has_remaining() or scanner.peek() != ",":
            return None
        scanner.consume_one()
        scanner.skip_whitespace()

        if scanner.has_remaining() and scanner.peek() == closer:
            if not self.config.allow_trailing_commas:
                return None
            scanner.consume_one()
            return True
        return False
