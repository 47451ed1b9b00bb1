"""
Configuration and limits for tinyjson parsing.

This module defines security limits and behavior options for the grammar engine.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class SizeLimits:
    """Input and content size limits."""
    max_input_size: int = 10 * 1024 * 1024
    max_string_length: int = 1024 * 1024
    max_number_length: int = 100


@dataclass
class StructureLimits:
    """JSON structure complexity limits."""
    max_nesting_depth: int = 100
    max_object_keys: int = 10000
    max_array_items: int = 100000
    max_total_items: int = 1000000


_SIZE_LIMIT_NAMES = ("max_input_size", "max_string_length", "max_number_length")
_STRUCTURE_LIMIT_NAMES = (
    "max_nesting_depth", "max_object_keys", "max_array_items", "max_total_items"
)


@dataclass
class ParseLimits:
    """Security limits for JSON parsing to prevent abuse."""

    size_limits: Optional[SizeLimits] = None
    structure_limits: Optional[StructureLimits] = None

    def __init__(
        self,
        *,
        size_limits: Optional[SizeLimits] = None,
        structure_limits: Optional[StructureLimits] = None,
        **flat_limits: int,
    ):
        unknown = set(flat_limits) - set(_SIZE_LIMIT_NAMES + _STRUCTURE_LIMIT_NAMES)
        if unknown:
            raise TypeError(f"Unknown limit(s): {', '.join(sorted(unknown))}")

        if size_limits is not None:
            self.size_limits = size_limits
        else:
            self.size_limits = SizeLimits(
                **{k: v for k, v in flat_limits.items() if k in _SIZE_LIMIT_NAMES}
            )

        if structure_limits is not None:
            self.structure_limits = structure_limits
        else:
            self.structure_limits = StructureLimits(
                **{k: v for k, v in flat_limits.items() if k in _STRUCTURE_LIMIT_NAMES}
            )

        if self.size_limits.max_input_size <= 0:
            raise ValueError("max_input_size must be positive")
        if self.structure_limits.max_nesting_depth <= 0:
            raise ValueError("max_nesting_depth must be positive")

    @property
    def max_input_size(self) -> int:
        """Maximum input size in characters."""
        assert self.size_limits is not None
        return self.size_limits.max_input_size

    @property
    def max_string_length(self) -> int:
        """Maximum length for individual decoded strings."""
        assert self.size_limits is not None
        return self.size_limits.max_string_length

    @property
    def max_number_length(self) -> int:
        """Maximum length for number literals."""
        assert self.size_limits is not None
        return self.size_limits.max_number_length

    @property
    def max_nesting_depth(self) -> int:
        """Maximum nesting depth for arrays and objects."""
        assert self.structure_limits is not None
        return self.structure_limits.max_nesting_depth

    @property
    def max_object_keys(self) -> int:
        """Maximum number of keys in an object."""
        assert self.structure_limits is not None
        return self.structure_limits.max_object_keys

    @property
    def max_array_items(self) -> int:
        """Maximum number of items in an array."""
        assert self.structure_limits is not None
        return self.structure_limits.max_array_items

    @property
    def max_total_items(self) -> int:
        """Maximum total values across the whole document."""
        assert self.structure_limits is not None
        return self.structure_limits.max_total_items


@dataclass
class ParsingBehavior:
    """Core parsing behavior settings."""
    allow_trailing_commas: bool = False
    allow_trailing_data: bool = False


@dataclass
class ErrorReporting:
    """Error reporting settings."""
    include_position: bool = True


@dataclass
class ParseConfig:
    """Configuration options for tinyjson parsing."""

    limits: Optional[ParseLimits] = None
    behavior: Optional[ParsingBehavior] = None
    error_reporting: Optional[ErrorReporting] = None
    logger: Optional[logging.Logger] = None

    def __init__(
        self,
        *,
        limits: Optional[ParseLimits] = None,
        behavior: Optional[ParsingBehavior] = None,
        error_reporting: Optional[ErrorReporting] = None,
        logger: Optional[logging.Logger] = None,
        **config_options: Any,
    ):
        self.limits = limits or ParseLimits()
        self.logger = logger

        if behavior is not None:
            self.behavior = behavior
        else:
            self.behavior = ParsingBehavior(
                allow_trailing_commas=config_options.get("allow_trailing_commas", False),
                allow_trailing_data=config_options.get("allow_trailing_data", False),
            )

        if error_reporting is not None:
            self.error_reporting = error_reporting
        else:
            self.error_reporting = ErrorReporting(
                include_position=config_options.get("include_position", True),
            )

    @property
    def allow_trailing_commas(self) -> bool:
        """Whether arrays and objects accept a comma before their closer."""
        assert self.behavior is not None
        return self.behavior.allow_trailing_commas

    @allow_trailing_commas.setter
    def allow_trailing_commas(self, value: bool) -> None:
        assert self.behavior is not None
        self.behavior.allow_trailing_commas = value

    @property
    def allow_trailing_data(self) -> bool:
        """Whether content after the top-level value is tolerated."""
        assert self.behavior is not None
        return self.behavior.allow_trailing_data

    @allow_trailing_data.setter
    def allow_trailing_data(self, value: bool) -> None:
        assert self.behavior is not None
        self.behavior.allow_trailing_data = value

    @property
    def include_position(self) -> bool:
        """Whether to include position information in errors."""
        assert self.error_reporting is not None
        return self.error_reporting.include_position

    @include_position.setter
    def include_position(self, value: bool) -> None:
        assert self.error_reporting is not None
        self.error_reporting.include_position = value

    @classmethod
    def strict(cls) -> "ParseConfig":
        """RFC 8259 behavior: no trailing commas, nothing after the value."""
        return cls(behavior=ParsingBehavior())

    @classmethod
    def lenient(cls) -> "ParseConfig":
        """Accept trailing commas and ignore content after the value."""
        return cls(
            behavior=ParsingBehavior(
                allow_trailing_commas=True,
                allow_trailing_data=True,
            )
        )
