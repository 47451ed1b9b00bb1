"""
Exception classes for tinyjson.

Grammar rules never raise these for an ordinary non-match; they are reserved
for the single top-level parse failure and for exceeded limits.
"""

from typing import Optional


class TinyJSONError(Exception):
    """Base class for all tinyjson errors."""

    def __init__(self, message: str, position: Optional[int] = None):
        self.message = message
        self.position = position
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.position is None:
            return self.message
        return f"{self.message} at position {self.position}"


class ParseError(TinyJSONError):
    """Raised when the input is not a well-formed JSON value.

    The offsets are always kept on the exception; ``include_position`` only
    controls whether they appear in the formatted message.
    """

    def __init__(
        self,
        message: str,
        position: Optional[int] = None,
        furthest: Optional[int] = None,
        include_position: bool = True,
    ):
        self.furthest = furthest
        self.include_position = include_position
        super().__init__(message, position)

    def _format_message(self) -> str:
        if not self.include_position:
            return self.message
        message = super()._format_message()
        if self.furthest is not None and self.furthest != self.position:
            message += f" (scanning stopped at position {self.furthest})"
        return message


class SecurityError(TinyJSONError):
    """Raised when input exceeds a configured parsing limit."""


class NestingDepthError(SecurityError):
    """Raised when arrays and objects nest deeper than allowed."""

    def __init__(
        self,
        depth: int,
        limit: int,
        position: Optional[int] = None,
        message: Optional[str] = None,
    ):
        self.depth = depth
        self.limit = limit
        super().__init__(
            message or f"Nesting depth {depth} exceeds limit {limit}", position
        )


class JSONDecodeError(ParseError, ValueError):
    """Raised by loads() and load(), mirroring json.JSONDecodeError's attributes."""

    def __init__(self, msg: str, doc: str, pos: int, include_position: bool = True):
        self.msg = msg
        self.doc = doc
        self.pos = pos
        super().__init__(msg, pos, include_position=include_position)
