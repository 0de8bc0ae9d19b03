"""Special Char Filter - emoji detection and BMP-only storage checks over UTF-16"""

__version__ = "0.1.0"

from special_char_filter.exceptions import (
    InvalidCodepointError,
    InvalidSurrogatePairError,
    SpecialCharFilterError,
)
from special_char_filter.infra.registry import RangeRegistry, get_default_registry
from special_char_filter.infra.scanner import (
    Scanner,
    can_store_in_bmp,
    contains_special_char,
    get_default_scanner,
)
from special_char_filter.utils.unicode import decode, encode, to_utf16_units


__all__ = [
    "InvalidCodepointError",
    "InvalidSurrogatePairError",
    "RangeRegistry",
    "Scanner",
    "SpecialCharFilterError",
    "__version__",
    "can_store_in_bmp",
    "contains_special_char",
    "decode",
    "encode",
    "get_default_registry",
    "get_default_scanner",
    "to_utf16_units",
]
