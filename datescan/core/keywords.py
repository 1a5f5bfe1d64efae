"""Static table of the words the date parser understands.

Words are matched on their first ``PREFIX_LENGTH`` lowercase characters. Only
month names may be longer than the prefix ("january", "sept"); every other
keyword must match in full, so "utc" is a zone but "utcx" is an unknown word.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType
from typing import Mapping, Optional

PREFIX_LENGTH = 3


class KeywordType(IntEnum):
    MONTH_NAME = 1
    TIME_ZONE_NAME = 2
    TIME_SEPARATOR = 3
    AM_PM = 4


@dataclass(frozen=True)
class Keyword:
    prefix: str
    type: KeywordType
    value: int  # month 0-11, zone offset in minutes, or hours added for am/pm


KEYWORDS: tuple[Keyword, ...] = (
    Keyword("jan", KeywordType.MONTH_NAME, 0),
    Keyword("feb", KeywordType.MONTH_NAME, 1),
    Keyword("mar", KeywordType.MONTH_NAME, 2),
    Keyword("apr", KeywordType.MONTH_NAME, 3),
    Keyword("may", KeywordType.MONTH_NAME, 4),
    Keyword("jun", KeywordType.MONTH_NAME, 5),
    Keyword("jul", KeywordType.MONTH_NAME, 6),
    Keyword("aug", KeywordType.MONTH_NAME, 7),
    Keyword("sep", KeywordType.MONTH_NAME, 8),
    Keyword("oct", KeywordType.MONTH_NAME, 9),
    Keyword("nov", KeywordType.MONTH_NAME, 10),
    Keyword("dec", KeywordType.MONTH_NAME, 11),
    Keyword("am", KeywordType.AM_PM, 0),
    Keyword("pm", KeywordType.AM_PM, 12),
    Keyword("ut", KeywordType.TIME_ZONE_NAME, 0),
    Keyword("utc", KeywordType.TIME_ZONE_NAME, 0),
    Keyword("z", KeywordType.TIME_ZONE_NAME, 0),
    Keyword("gmt", KeywordType.TIME_ZONE_NAME, 0),
    Keyword("cdt", KeywordType.TIME_ZONE_NAME, -5 * 60),
    Keyword("cst", KeywordType.TIME_ZONE_NAME, -6 * 60),
    Keyword("edt", KeywordType.TIME_ZONE_NAME, -4 * 60),
    Keyword("est", KeywordType.TIME_ZONE_NAME, -5 * 60),
    Keyword("mdt", KeywordType.TIME_ZONE_NAME, -6 * 60),
    Keyword("mst", KeywordType.TIME_ZONE_NAME, -7 * 60),
    Keyword("pdt", KeywordType.TIME_ZONE_NAME, -7 * 60),
    Keyword("pst", KeywordType.TIME_ZONE_NAME, -8 * 60),
    Keyword("t", KeywordType.TIME_SEPARATOR, 0),
)

_BY_PREFIX: Mapping[str, int] = MappingProxyType(
    {kw.prefix: index for index, kw in enumerate(KEYWORDS)}
)


def lookup(prefix: str, length: int) -> Optional[int]:
    """Return the table index for a scanned word, or None if it is not a keyword."""
    index = _BY_PREFIX.get(prefix[:PREFIX_LENGTH])
    if index is None:
        return None
    if length <= PREFIX_LENGTH or KEYWORDS[index].type is KeywordType.MONTH_NAME:
        return index
    return None


def get_type(index: int) -> KeywordType:
    return KEYWORDS[index].type


def get_value(index: int) -> int:
    return KEYWORDS[index].value
