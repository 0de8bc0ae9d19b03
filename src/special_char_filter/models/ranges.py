"""Codepoint range models"""

import re
from collections.abc import Iterable, Mapping
from typing import Any, Final, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from special_char_filter.exceptions import InvalidRangeError
from special_char_filter.utils.unicode import UnicodeConstants


# "U+1F300..U+1F321", "1F300-1F321", "0x2194..0x2199"
RANGE_SEPARATOR_REGEX: Final[re.Pattern[str]] = re.compile(r"\s*(?:\.\.|-)\s*")
CODEPOINT_PREFIXES: Final[tuple[str, ...]] = ("U+", "0X")


def parse_codepoint(token: str) -> int:
    """Parse a hex codepoint token like ``U+1F600``, ``0x1F600`` or ``1F600``"""
    value = token.strip().upper()
    for prefix in CODEPOINT_PREFIXES:
        if value.startswith(prefix):
            value = value[len(prefix) :]
            break
    if not value:
        raise ValueError(f"empty codepoint token: {token!r}")
    return int(value, 16)


def _coerce_range_input(data: Any) -> Any:
    """Normalize the accepted range notations into {start, end}"""
    if isinstance(data, bool):
        raise ValueError("boolean is not a codepoint")
    if isinstance(data, int):
        return {"start": data, "end": data}
    if isinstance(data, str):
        parts = RANGE_SEPARATOR_REGEX.split(data.strip(), maxsplit=1)
        start = parse_codepoint(parts[0])
        end = parse_codepoint(parts[1]) if len(parts) > 1 else start
        return {"start": start, "end": end}
    if isinstance(data, (list, tuple)):
        if len(data) == 1:
            return _coerce_range_input(data[0])
        if len(data) == 2:
            start, end = data
            if isinstance(start, str):
                start = parse_codepoint(start)
            if isinstance(end, str):
                end = parse_codepoint(end)
            return {"start": start, "end": end}
        raise ValueError(f"range must have 1 or 2 items, got {len(data)}")
    if isinstance(data, Mapping):
        bounds = {
            key: parse_codepoint(value) if isinstance(value, str) else value
            for key, value in data.items()
        }
        bounds.setdefault("end", bounds.get("start"))
        return bounds
    return data


class CodepointRange(BaseModel):
    """Inclusive codepoint range [start, end]"""

    model_config = ConfigDict(frozen=True)

    start: int = Field(ge=0, le=UnicodeConstants.MAX_CODEPOINT, strict=True)
    end: int = Field(ge=0, le=UnicodeConstants.MAX_CODEPOINT, strict=True)

    @model_validator(mode="before")
    @classmethod
    def _normalize(cls, data: Any) -> Any:
        return _coerce_range_input(data)

    @model_validator(mode="after")
    def _check_order(self) -> Self:
        if self.start > self.end:
            raise ValueError(
                f"start {self.start:#x} is greater than end {self.end:#x}"
            )
        return self

    @classmethod
    def coerce(cls, entry: "CodepointRange | object") -> "CodepointRange":
        """Build a range from any accepted notation

        Raises:
            InvalidRangeError: entry cannot be interpreted as a range
        """
        if isinstance(entry, cls):
            return entry
        try:
            return cls.model_validate(entry)
        except (ValidationError, ValueError, TypeError) as e:
            raise InvalidRangeError(entry, str(e)) from e

    @property
    def size(self) -> int:
        return self.end - self.start + 1

    @property
    def is_singleton(self) -> bool:
        return self.start == self.end

    def codepoints(self) -> range:
        """All codepoints in the range, inclusive"""
        return range(self.start, self.end + 1)

    def overlaps(self, other: "CodepointRange") -> bool:
        return self.start <= other.end and other.start <= self.end

    def __contains__(self, codepoint: object) -> bool:
        return isinstance(codepoint, int) and self.start <= codepoint <= self.end

    def __str__(self) -> str:
        if self.is_singleton:
            return f"U+{self.start:04X}"
        return f"U+{self.start:04X}..U+{self.end:04X}"


class RangeTable(BaseModel):
    """A named, ordered collection of codepoint ranges (YAML range table)"""

    version: int = 1
    name: str = "custom"
    unicode_version: str | None = None
    ranges: list[CodepointRange] = Field(default_factory=list)

    @property
    def codepoint_count(self) -> int:
        return sum(r.size for r in self.ranges)


def coerce_ranges(entries: Iterable[object]) -> list[CodepointRange]:
    """Coerce every configured entry into a CodepointRange"""
    return [CodepointRange.coerce(entry) for entry in entries]


def find_overlaps(
    ranges: Iterable[CodepointRange],
) -> list[tuple[CodepointRange, CodepointRange]]:
    """Find pairs of overlapping ranges (sorted sweep by start)"""
    ordered = sorted(ranges, key=lambda r: (r.start, r.end))
    overlaps: list[tuple[CodepointRange, CodepointRange]] = []
    if not ordered:
        return overlaps

    widest = ordered[0]
    for current in ordered[1:]:
        if current.start <= widest.end:
            overlaps.append((widest, current))
        if current.end > widest.end:
            widest = current
    return overlaps
