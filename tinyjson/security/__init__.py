"""
tinyjson Security and Validation System.

This module provides security limits and exception handling.
"""

from .exceptions import (
    JSONDecodeError,
    NestingDepthError,
    ParseError,
    SecurityError,
    TinyJSONError,
)
from .limits import LimitValidator

__all__ = [
    'TinyJSONError', 'ParseError', 'SecurityError', 'NestingDepthError',
    'JSONDecodeError', 'LimitValidator'
]
