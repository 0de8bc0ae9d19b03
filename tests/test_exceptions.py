"""Tests for exception hierarchy."""

import pytest

from special_char_filter.exceptions import (
    CodecError,
    ErrorCode,
    ErrorContext,
    InvalidCodepointError,
    InvalidRangeError,
    InvalidSurrogatePairError,
    RangeConfigError,
    RangeTableLoadError,
    SpecialCharFilterError,
)


class TestHierarchy:
    """Tests for exception inheritance."""

    @pytest.mark.parametrize(
        ("exc", "parent"),
        [
            (InvalidCodepointError(0x110000), CodecError),
            (InvalidSurrogatePairError(0x41, 0x42), CodecError),
            (InvalidRangeError((2, 1), "reversed"), RangeConfigError),
            (RangeTableLoadError("x.yml", "missing"), RangeConfigError),
        ],
    )
    def test_parents(self, exc: SpecialCharFilterError, parent: type) -> None:
        assert isinstance(exc, parent)
        assert isinstance(exc, SpecialCharFilterError)

    def test_codec_errors_are_value_errors(self) -> None:
        assert isinstance(InvalidCodepointError(-1), ValueError)
        assert isinstance(InvalidSurrogatePairError(0, 1), ValueError)

    def test_config_errors_are_not_value_errors(self) -> None:
        assert not isinstance(RangeTableLoadError("x", "y"), ValueError)


class TestErrorDetails:
    """Tests for error codes, messages and to_dict."""

    def test_invalid_codepoint(self) -> None:
        exc = InvalidCodepointError(0x110000)

        assert exc.error_code == ErrorCode.INVALID_CODEPOINT
        assert str(exc) == "Invalid unicode codepoint: 0x110000"
        assert exc.context.operation == "encode"
        assert exc.context.details == {"codepoint": 0x110000}

    def test_invalid_surrogate_pair(self) -> None:
        exc = InvalidSurrogatePairError(0xD800, 0x41)

        assert exc.error_code == ErrorCode.INVALID_SURROGATE_PAIR
        assert "high=0xd800" in str(exc)
        assert "low=0x0041" in str(exc)

    def test_to_dict(self) -> None:
        exc = RangeTableLoadError("ranges.yml", "path does not exist")

        assert exc.to_dict() == {
            "error_code": "RANGE_TABLE_LOAD_ERROR",
            "error_type": "RangeTableLoadError",
            "message": "Failed to load range table 'ranges.yml': path does not exist",
            "operation": "load_range_table",
            "details": {"path": "ranges.yml", "reason": "path does not exist"},
        }

    def test_custom_context(self) -> None:
        ctx = ErrorContext(operation="build")
        exc = InvalidRangeError("bogus", "not hex", context=ctx)

        assert exc.context is ctx
        assert exc.context.details == {"entry": "'bogus'", "reason": "not hex"}

    def test_base_defaults(self) -> None:
        exc = SpecialCharFilterError("boom")

        assert exc.error_code == ErrorCode.INTERNAL_ERROR
        assert exc.context.operation is None
