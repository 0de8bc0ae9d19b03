"""Scanner - flagged character and supplementary-plane detection over UTF-16 units"""

import logging
from threading import Lock

from special_char_filter.infra.registry import RangeRegistry, get_default_registry
from special_char_filter.types import CodeUnits, MembershipSet
from special_char_filter.utils.unicode import (
    UnicodeConstants,
    has_high_surrogate_marker,
    is_surrogate_pair,
    to_utf16_units,
)


log = logging.getLogger(__name__)


class Scanner:
    """Single-pass scans over a UTF-16 code unit sequence

    Malformed input (lone or truncated surrogates) never raises; it is
    treated as non-matching.
    """

    def __init__(self, membership: MembershipSet) -> None:
        """Initialize scanner

        Args:
            membership: Read-only {encoded key: codepoint} mapping
        """
        self._membership = membership

    @classmethod
    def from_registry(cls, registry: RangeRegistry) -> "Scanner":
        return cls(registry.build())

    def contains_flagged(self, units: CodeUnits) -> bool:
        """Check if the sequence contains any codepoint in the membership set

        Args:
            units: UTF-16 code units

        Returns:
            True on the first BMP unit or surrogate pair found in the set
        """
        membership = self._membership
        length = len(units)
        for i in range(length):
            unit = units[i]
            if unit in membership:
                return True

            if not has_high_surrogate_marker(unit):
                continue

            # 마지막 unit은 쌍을 이룰 수 없음
            if i + 1 >= length:
                continue

            # low unit은 다음 반복에서 다시 검사됨 (low로 시작하는 키는 존재하지 않음)
            key = (unit << UnicodeConstants.UNIT_BITS) | units[i + 1]
            if key in membership:
                return True

        return False

    def fits_basic_plane(self, units: CodeUnits) -> bool:
        """Check if the sequence has no surrogate pair (BMP-only storage safe)

        Args:
            units: UTF-16 code units

        Returns:
            False if any adjacent units form a valid high/low surrogate pair
        """
        for i in range(len(units) - 1):
            if is_surrogate_pair(units[i], units[i + 1]):
                return False
        return True

    def contains_flagged_text(self, text: str) -> bool:
        """contains_flagged for a Python string"""
        return self.contains_flagged(to_utf16_units(text))

    def fits_basic_plane_text(self, text: str) -> bool:
        """fits_basic_plane for a Python string"""
        return self.fits_basic_plane(to_utf16_units(text))


# Singleton instance
_scanner: Scanner | None = None
_scanner_lock = Lock()


def get_default_scanner() -> Scanner:
    """Get scanner singleton bound to the default registry"""
    global _scanner
    if _scanner is None:
        with _scanner_lock:
            if _scanner is None:
                registry = get_default_registry()
                log.debug("Default scanner created: registry=%s", registry)
                _scanner = Scanner.from_registry(registry)
    return _scanner


def contains_special_char(text: str) -> bool:
    """Check if text contains a flagged (emoji/pictographic) character"""
    return get_default_scanner().contains_flagged_text(text)


def can_store_in_bmp(text: str) -> bool:
    """Check if text can be stored in a BMP-only encoding (e.g. MySQL utf8)"""
    return get_default_scanner().fits_basic_plane_text(text)
