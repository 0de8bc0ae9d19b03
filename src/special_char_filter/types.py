"""프로젝트 전반에서 사용하는 코드포인트/UTF-16 타입 별칭."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TypeAlias


__all__ = [
    "CodeUnit",
    "CodeUnits",
    "Codepoint",
    "EncodedKey",
    "MembershipSet",
    "RangeSpec",
]

# 0..0x10FFFF
Codepoint: TypeAlias = int
# 0..0xFFFF
CodeUnit: TypeAlias = int
# BMP: 단일 unit, 보조 평면: (high << 16) | low
EncodedKey: TypeAlias = int
CodeUnits: TypeAlias = Sequence[CodeUnit]
# 단일 코드포인트 또는 (start, end) 포함 범위
RangeSpec: TypeAlias = int | tuple[int, int]
MembershipSet: TypeAlias = Mapping[EncodedKey, Codepoint]
