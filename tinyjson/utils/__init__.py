"""
tinyjson configuration utilities.
"""

from .config import (
    ErrorReporting,
    ParseConfig,
    ParseLimits,
    ParsingBehavior,
    SizeLimits,
    StructureLimits,
)

__all__ = [
    'ParseConfig', 'ParseLimits', 'ParsingBehavior', 'ErrorReporting',
    'SizeLimits', 'StructureLimits'
]
