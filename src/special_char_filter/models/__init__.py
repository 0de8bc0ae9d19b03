"""Data models for special-char-filter"""

from special_char_filter.models.ranges import (
    CodepointRange,
    RangeTable,
    coerce_ranges,
    find_overlaps,
    parse_codepoint,
)


__all__ = [
    "CodepointRange",
    "RangeTable",
    "coerce_ranges",
    "find_overlaps",
    "parse_codepoint",
]
