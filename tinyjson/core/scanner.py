"""
Cursor over the input text for tinyjson's grammar rules.
"""

from typing import Callable, Optional

from .constants import is_whitespace


class Scanner:
    """Forward-only cursor with explicit save/restore for backtracking."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.length = len(text)
        self.pos = 0
        self.furthest = 0

    @property
    def position(self) -> int:
        """Current offset into the text."""
        return self.pos

    def has_remaining(self) -> bool:
        """Whether any characters are left to consume."""
        return self.pos < self.length

    def at_end(self) -> bool:
        """Whether the cursor has reached the end of the text."""
        return self.pos >= self.length

    def remaining(self) -> str:
        """The unconsumed tail of the text."""
        return self.text[self.pos:]

    def peek(self) -> str:
        """Return the current character without consuming it."""
        if self.pos >= self.length:
            raise IndexError(f"peek past end of input at position {self.pos}")
        return self.text[self.pos]

    def consume_one(self) -> str:
        """Return the current character and advance past it."""
        char = self.peek()
        self._advance_to(self.pos + 1)
        return char

    def scan_while(
        self, predicate: Callable[[str], bool], limit: Optional[int] = None
    ) -> str:
        """Consume the longest run of characters satisfying predicate."""
        start = self.pos
        end = self.length if limit is None else min(self.length, start + limit)
        pos = start
        while pos < end and predicate(self.text[pos]):
            pos += 1
        self._advance_to(pos)
        return self.text[start:pos]

    def scan_literal(self, pattern: str) -> str:
        """Consume characters while they match pattern; return the matched prefix."""
        start = self.pos
        pos = start
        for expected in pattern:
            if pos >= self.length or self.text[pos] != expected:
                break
            pos += 1
        self._advance_to(pos)
        return self.text[start:pos]

    def skip_whitespace(self) -> None:
        """Skip insignificant whitespace (space, tab, line feed, carriage return)."""
        self.scan_while(is_whitespace)

    def mark(self) -> int:
        """Save the current position for a later reset()."""
        return self.pos

    def reset(self, position: int) -> None:
        """Restore a position previously returned by mark()."""
        if not 0 <= position <= self.length:
            raise ValueError(
                f"Position {position} outside input of length {self.length}"
            )
        self.pos = position

    def _advance_to(self, position: int) -> None:
        self.pos = position
        if position > self.furthest:
            self.furthest = position
