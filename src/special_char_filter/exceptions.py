"""Custom exception hierarchy for special-char-filter.

Exception 계층 구조:
- SpecialCharFilterError (base)
  - CodecError: 코드포인트 <-> UTF-16 변환 관련
    - InvalidCodepointError: 0x10FFFF 초과 코드포인트
    - InvalidSurrogatePairError: 잘못된 서로게이트 쌍
  - RangeConfigError: 범위 설정 관련
    - InvalidRangeError: 범위 항목 파싱/검증 실패
    - RangeTableLoadError: 범위 테이블 파일 로드 실패
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """표준화된 에러 코드."""

    # Generic
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Codec
    CODEC_ERROR = "CODEC_ERROR"
    INVALID_CODEPOINT = "INVALID_CODEPOINT"
    INVALID_SURROGATE_PAIR = "INVALID_SURROGATE_PAIR"

    # Range configuration
    RANGE_CONFIG_ERROR = "RANGE_CONFIG_ERROR"
    INVALID_RANGE = "INVALID_RANGE"
    RANGE_TABLE_LOAD_ERROR = "RANGE_TABLE_LOAD_ERROR"


@dataclass
class ErrorContext:
    """에러 컨텍스트 정보."""

    operation: str | None = None
    details: dict[str, Any] | None = None


class SpecialCharFilterError(Exception):
    """Base exception for special-char-filter.

    모든 커스텀 예외의 부모 클래스.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or ErrorContext()

    def to_dict(self) -> dict[str, Any]:
        """에러 정보를 딕셔너리로 변환."""
        return {
            "error_code": self.error_code.value,
            "error_type": self.__class__.__name__,
            "message": self.message,
            "operation": self.context.operation,
            "details": self.context.details,
        }


# =============================================================================
# Codec Errors
# =============================================================================


class CodecError(SpecialCharFilterError, ValueError):
    """코드포인트/UTF-16 변환 에러."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.CODEC_ERROR,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(message, error_code, context)


class InvalidCodepointError(CodecError):
    """유니코드 범위를 벗어난 코드포인트."""

    def __init__(
        self,
        codepoint: int,
        context: ErrorContext | None = None,
    ) -> None:
        ctx = context or ErrorContext(operation="encode")
        ctx.details = {"codepoint": codepoint}
        self.codepoint = codepoint
        super().__init__(
            f"Invalid unicode codepoint: {codepoint:#x}",
            ErrorCode.INVALID_CODEPOINT,
            ctx,
        )


class InvalidSurrogatePairError(CodecError):
    """high/low 서로게이트 관계가 성립하지 않는 UTF-16 unit 쌍."""

    def __init__(
        self,
        high_unit: int,
        low_unit: int,
        context: ErrorContext | None = None,
    ) -> None:
        ctx = context or ErrorContext(operation="decode")
        ctx.details = {"high_unit": high_unit, "low_unit": low_unit}
        self.high_unit = high_unit
        self.low_unit = low_unit
        super().__init__(
            f"Invalid UTF-16 surrogate pair: high={high_unit:#06x} low={low_unit:#06x}",
            ErrorCode.INVALID_SURROGATE_PAIR,
            ctx,
        )


# =============================================================================
# Range Configuration Errors
# =============================================================================


class RangeConfigError(SpecialCharFilterError):
    """범위 설정 에러."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.RANGE_CONFIG_ERROR,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(message, error_code, context)


class InvalidRangeError(RangeConfigError):
    """코드포인트 범위로 해석할 수 없는 항목."""

    def __init__(
        self,
        entry: object,
        reason: str,
        context: ErrorContext | None = None,
    ) -> None:
        ctx = context or ErrorContext()
        ctx.details = {"entry": repr(entry), "reason": reason}
        super().__init__(
            f"Invalid codepoint range {entry!r}: {reason}",
            ErrorCode.INVALID_RANGE,
            ctx,
        )


class RangeTableLoadError(RangeConfigError):
    """범위 테이블 파일을 읽거나 파싱하지 못함."""

    def __init__(
        self,
        path: str,
        reason: str,
        context: ErrorContext | None = None,
    ) -> None:
        ctx = context or ErrorContext(operation="load_range_table")
        ctx.details = {"path": path, "reason": reason}
        super().__init__(
            f"Failed to load range table '{path}': {reason}",
            ErrorCode.RANGE_TABLE_LOAD_ERROR,
            ctx,
        )
