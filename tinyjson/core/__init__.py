"""
tinyjson Core Parsing Engine.

This module provides the scanner, the grammar rules and the value dispatcher.
"""

from .engine import ParseResult, Parser, load, loads, parse, try_parse
from .results import JSONValue, Match
from .scanner import Scanner

__all__ = [
    'parse', 'try_parse', 'loads', 'load', 'Parser', 'ParseResult',
    'Scanner', 'Match', 'JSONValue'
]
