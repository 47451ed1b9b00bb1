"""
tinyjson - a small recursive-descent JSON parser.

tinyjson turns JSON text into plain Python values (None, bool, int, float,
str, list, dict) using a backtracking scanner and one grammar rule per JSON
production. It has no dependencies outside the standard library.

Quick Start:
    import tinyjson
    data = tinyjson.loads('{"a": 1, "b": [true, null]}')

    # Typed result instead of an exception
    result = tinyjson.try_parse('{a: 1}')
    if not result.ok:
        print(result.error)

    # Limits and leniency
    from tinyjson import ParseConfig, ParseLimits
    config = ParseConfig(limits=ParseLimits(max_nesting_depth=20),
                         allow_trailing_commas=True)
    tinyjson.parse('[1, 2,]', config)

Numbers: integers stay exact (``12e3`` is ``12000``); a fraction or a negative
exponent produces a float.
"""

from .core.engine import ParseResult, Parser, load, loads, parse, try_parse
from .core.results import JSONValue
from .security.exceptions import (
    JSONDecodeError,
    NestingDepthError,
    ParseError,
    SecurityError,
    TinyJSONError,
)
from .utils.config import ErrorReporting, ParseConfig, ParseLimits, ParsingBehavior

__version__ = "0.1.0"
__author__ = "tinyjson contributors"

__all__ = [
    # Parsing functions
    "parse", "try_parse", "loads", "load",
    # Parser and results
    "Parser", "ParseResult", "JSONValue",
    # Configuration classes
    "ParseConfig", "ParseLimits", "ParsingBehavior", "ErrorReporting",
    # Exception classes
    "TinyJSONError", "ParseError", "SecurityError", "NestingDepthError",
    "JSONDecodeError",
]
