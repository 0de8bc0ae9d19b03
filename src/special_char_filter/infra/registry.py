"""Range Registry - read-only membership set of flagged codepoints"""

import logging
import sys
from collections.abc import Iterable
from threading import Lock
from types import MappingProxyType
from typing import Final

from special_char_filter.config.settings import ByteOrder, FilterSettings, get_settings
from special_char_filter.domains.emoji import EMOJI_RANGES
from special_char_filter.infra.range_loader import load_ranges
from special_char_filter.models.ranges import (
    CodepointRange,
    RangeTable,
    coerce_ranges,
    find_overlaps,
)
from special_char_filter.types import Codepoint, EncodedKey, MembershipSet
from special_char_filter.utils.unicode import UnicodeConstants, encode


log = logging.getLogger(__name__)


EXPORT_SEPARATOR: Final[str] = "\r\n"


def build_membership(ranges: Iterable[CodepointRange]) -> MembershipSet:
    """Expand ranges into a read-only {encoded key: codepoint} mapping"""
    table: dict[EncodedKey, Codepoint] = {}
    for codepoint_range in ranges:
        for codepoint in codepoint_range.codepoints():
            table[encode(codepoint)] = codepoint
    return MappingProxyType(table)


def _resolve_byteorder(byteorder: ByteOrder | str) -> str:
    order = ByteOrder(byteorder) if isinstance(byteorder, str) else byteorder
    if order is ByteOrder.NATIVE:
        return sys.byteorder
    return order.value


def export_membership(
    membership: MembershipSet,
    byteorder: ByteOrder | str = ByteOrder.LITTLE,
) -> bytes:
    """Serialize membership keys for inspection.

    BMP keys are written as 2 bytes, supplementary keys as the whole 32-bit
    key in 4 bytes (little: low unit first), each followed by CRLF in the
    same encoding.
    """
    order = _resolve_byteorder(byteorder)
    codec = "utf-16-le" if order == "little" else "utf-16-be"
    separator = EXPORT_SEPARATOR.encode(codec)

    chunks: list[bytes] = []
    for key in membership:
        if key & UnicodeConstants.BMP_KEY_MASK == 0:
            chunks.append(key.to_bytes(2, order))
        else:
            chunks.append(key.to_bytes(4, order))
        chunks.append(separator)
    return b"".join(chunks)


class RangeRegistry:
    """Registry of configured codepoint ranges

    Builds the membership set once (lazily, thread-safe) and serves it
    read-only afterwards.
    """

    def __init__(
        self,
        ranges: Iterable[object] | None = None,
        *,
        name: str = "emoji",
        warn_on_overlap: bool = True,
    ) -> None:
        """Initialize registry

        Args:
            ranges: Range entries (ints, (start, end) pairs, strings or
                CodepointRange); default: builtin emoji table

        Raises:
            InvalidRangeError: an entry cannot be interpreted as a range
        """
        self._name = name
        self._ranges: tuple[CodepointRange, ...] = tuple(
            coerce_ranges(EMOJI_RANGES if ranges is None else ranges)
        )
        self._membership: MembershipSet | None = None
        self._lock = Lock()

        if warn_on_overlap:
            for first, second in find_overlaps(self._ranges):
                log.warning(
                    "Overlapping ranges in %s: %s and %s", self._name, first, second
                )

    @classmethod
    def from_table(
        cls, table: RangeTable, *, warn_on_overlap: bool = True
    ) -> "RangeRegistry":
        return cls(table.ranges, name=table.name, warn_on_overlap=warn_on_overlap)

    @classmethod
    def from_settings(cls, settings: FilterSettings | None = None) -> "RangeRegistry":
        """Create a registry from filter settings (ranges_path or builtin table)"""
        settings = settings or get_settings().filter
        if settings.ranges_path:
            return cls(
                load_ranges(settings.ranges_path),
                name=settings.ranges_path,
                warn_on_overlap=settings.warn_on_overlap,
            )
        return cls(warn_on_overlap=settings.warn_on_overlap)

    @property
    def name(self) -> str:
        return self._name

    @property
    def ranges(self) -> tuple[CodepointRange, ...]:
        return self._ranges

    @property
    def is_built(self) -> bool:
        return self._membership is not None

    def build(self) -> MembershipSet:
        """Build (once) and return the membership set"""
        if self._membership is None:
            with self._lock:
                if self._membership is None:
                    membership = build_membership(self._ranges)
                    log.info(
                        "Membership set built: name=%s ranges=%d keys=%d",
                        self._name,
                        len(self._ranges),
                        len(membership),
                    )
                    self._membership = membership
        return self._membership

    def is_flagged(self, codepoint: Codepoint) -> bool:
        """Check if a codepoint is in the configured set"""
        if not 0 <= codepoint <= UnicodeConstants.MAX_CODEPOINT:
            return False
        return encode(codepoint) in self.build()

    def export(self, byteorder: ByteOrder | str | None = None) -> bytes:
        """Serialize the membership set for inspection

        Args:
            byteorder: Unit byte order (default: settings export_byteorder)
        """
        if byteorder is None:
            byteorder = get_settings().filter.export_byteorder
        return export_membership(self.build(), byteorder)

    def __contains__(self, codepoint: object) -> bool:
        return isinstance(codepoint, int) and self.is_flagged(codepoint)

    def __len__(self) -> int:
        return len(self.build())

    def __repr__(self) -> str:
        return f"RangeRegistry(name={self._name!r}, ranges={len(self._ranges)})"


# Singleton instance
_registry: RangeRegistry | None = None
_registry_lock = Lock()


def get_default_registry() -> RangeRegistry:
    """Get process-wide registry singleton (built from settings)"""
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                registry = RangeRegistry.from_settings()
                registry.build()
                _registry = registry
    return _registry
