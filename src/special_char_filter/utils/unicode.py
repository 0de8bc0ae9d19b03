"""Unicode constants and UTF-16 codec utilities"""

import sys
from array import array
from typing import Final

from special_char_filter.exceptions import (
    InvalidCodepointError,
    InvalidSurrogatePairError,
)
from special_char_filter.types import CodeUnit, CodeUnits, Codepoint, EncodedKey


class UnicodeConstants:
    """Unicode code point and UTF-16 surrogate constants"""

    MAX_CODEPOINT: Final[int] = 0x10FFFF
    MAX_CODE_UNIT: Final[int] = 0xFFFF

    # 보조 평면 시작 (surrogate pair 필요)
    SUPPLEMENTARY_START: Final[int] = 0x10000

    # Surrogate ranges
    HIGH_SURROGATE_START: Final[int] = 0xD800
    HIGH_SURROGATE_END: Final[int] = 0xDBFF
    LOW_SURROGATE_START: Final[int] = 0xDC00
    LOW_SURROGATE_END: Final[int] = 0xDFFF

    # 상위 6비트로 high/low 구분
    SURROGATE_MASK: Final[int] = 0xFC00
    # 스캐너가 쓰는 느슨한 high surrogate 표식 (u & 0xD800 == 0xD800)
    HIGH_SURROGATE_MARKER: Final[int] = 0xD800

    # Encoded key layout
    UNIT_BITS: Final[int] = 16
    UNIT_MASK: Final[int] = 0xFFFF
    BMP_KEY_MASK: Final[int] = 0xFFFF0000
    PAYLOAD_BITS: Final[int] = 10
    PAYLOAD_MASK: Final[int] = 0x3FF


# host 바이트 순서의 UTF-16 (BOM 없음)
NATIVE_UTF16_CODEC: Final[str] = (
    "utf-16-le" if sys.byteorder == "little" else "utf-16-be"
)


def is_high_surrogate(unit: CodeUnit) -> bool:
    """Check if a unit is a high (leading) surrogate"""
    return unit & UnicodeConstants.SURROGATE_MASK == UnicodeConstants.HIGH_SURROGATE_START


def is_low_surrogate(unit: CodeUnit) -> bool:
    """Check if a unit is a low (trailing) surrogate"""
    return unit & UnicodeConstants.SURROGATE_MASK == UnicodeConstants.LOW_SURROGATE_START


def has_high_surrogate_marker(unit: CodeUnit) -> bool:
    """Loose high surrogate test used while scanning.

    Also true for low surrogates and 0xF800..0xFFFF; callers only use it to
    decide whether a pair lookup is worth doing.
    """
    marker = UnicodeConstants.HIGH_SURROGATE_MARKER
    return unit & marker == marker


def is_surrogate_pair(high_unit: CodeUnit, low_unit: CodeUnit) -> bool:
    """Check if two adjacent units encode one supplementary-plane codepoint"""
    return is_high_surrogate(high_unit) and is_low_surrogate(low_unit)


def is_supplementary(codepoint: Codepoint) -> bool:
    """Check if a codepoint needs a surrogate pair in UTF-16"""
    return UnicodeConstants.SUPPLEMENTARY_START <= codepoint <= UnicodeConstants.MAX_CODEPOINT


def encode(codepoint: Codepoint) -> EncodedKey:
    """Encode a codepoint into its UTF-16 encoded key.

    BMP codepoints are returned unchanged (one unit). Supplementary-plane
    codepoints become ``(high << 16) | low``.

    Raises:
        InvalidCodepointError: codepoint outside 0..0x10FFFF
    """
    if codepoint < 0 or codepoint > UnicodeConstants.MAX_CODEPOINT:
        raise InvalidCodepointError(codepoint)

    if codepoint & UnicodeConstants.BMP_KEY_MASK == 0:
        return codepoint

    # 20비트 값: 상위 10비트 -> high, 하위 10비트 -> low
    shifted = codepoint - UnicodeConstants.SUPPLEMENTARY_START
    high = UnicodeConstants.HIGH_SURROGATE_START + (
        shifted >> UnicodeConstants.PAYLOAD_BITS
    )
    low = UnicodeConstants.LOW_SURROGATE_START + (
        shifted & UnicodeConstants.PAYLOAD_MASK
    )
    return (high << UnicodeConstants.UNIT_BITS) | low


def split_key(key: EncodedKey) -> tuple[CodeUnit, ...]:
    """Split an encoded key into its one or two UTF-16 units"""
    if key & UnicodeConstants.BMP_KEY_MASK == 0:
        return (key,)
    return (key >> UnicodeConstants.UNIT_BITS, key & UnicodeConstants.UNIT_MASK)


def encode_units(codepoint: Codepoint) -> tuple[CodeUnit, ...]:
    """Encode a codepoint into its UTF-16 unit sequence"""
    return split_key(encode(codepoint))


def _order_units(first: CodeUnit, second: CodeUnit) -> tuple[CodeUnit, CodeUnit]:
    """Put units in (high, low) order by plain integer comparison.

    A high surrogate always sorts below its low surrogate, and a lone unit
    passed in the second slot ends up first.
    """
    if first == 0 or (second != 0 and first > second):
        return second, first
    return first, second


def decode(high_unit: CodeUnit, low_unit: CodeUnit = 0) -> Codepoint:
    """Decode one or two UTF-16 units back into a codepoint.

    Args:
        high_unit: Leading unit (or the only unit)
        low_unit: Trailing unit, 0 when absent

    Raises:
        InvalidSurrogatePairError: units outside 0..0xFFFF or not a
            high/low surrogate pair
    """
    for unit in (high_unit, low_unit):
        if unit < 0 or unit > UnicodeConstants.MAX_CODE_UNIT:
            raise InvalidSurrogatePairError(high_unit, low_unit)

    high, low = _order_units(high_unit, low_unit)
    if low == 0:
        return high

    if not is_surrogate_pair(high, low):
        raise InvalidSurrogatePairError(high_unit, low_unit)

    return (
        ((high - UnicodeConstants.HIGH_SURROGATE_START) << UnicodeConstants.PAYLOAD_BITS)
        + (low - UnicodeConstants.LOW_SURROGATE_START)
        + UnicodeConstants.SUPPLEMENTARY_START
    )


def decode_key(key: EncodedKey) -> Codepoint:
    """Decode an encoded key back into its codepoint"""
    return decode(*split_key(key))


def to_utf16_units(text: str) -> array:
    """Convert text into a native-order array of UTF-16 units.

    Lone surrogates in ``text`` are kept as-is (``surrogatepass``).
    """
    units = array("H")
    units.frombytes(text.encode(NATIVE_UTF16_CODEC, "surrogatepass"))
    return units


def from_utf16_units(units: CodeUnits) -> str:
    """Convert a UTF-16 unit sequence back into text"""
    return array("H", units).tobytes().decode(NATIVE_UTF16_CODEC, "surrogatepass")
