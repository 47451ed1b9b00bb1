"""
Result types shared by the grammar rules.
"""

from typing import Any, NamedTuple, Optional, Union

JSONValue = Union[None, bool, int, float, str, list[Any], dict[str, Any]]


class Match(NamedTuple):
    """A successful rule application: the produced value and the end position.

    Rules return ``Optional[Match]``; ``None`` means the rule did not match and
    the scanner has been restored. ``Match(None, end)`` is a matched ``null``.
    """

    value: JSONValue
    end: int


MatchResult = Optional[Match]
