"""Tests for error classification and request results."""

from src.core.errors import (
    ConfigurationError,
    ErrorCategory,
    RequestResult,
    ScrollerError,
)


class TestRequestResult:
    """Tests for RequestResult."""

    def test_ok_is_truthy(self) -> None:
        result = RequestResult.ok()
        assert result
        assert result.accepted
        assert result.category is None
        assert result.reason is None

    def test_rejected_is_falsy(self) -> None:
        result = RequestResult.rejected(ErrorCategory.INVALID_REQUEST, "busy")
        assert not result
        assert result.category is ErrorCategory.INVALID_REQUEST
        assert result.reason == "busy"


class TestConfigurationError:
    """Tests for ConfigurationError."""

    def test_is_scroller_error_with_category(self) -> None:
        error = ConfigurationError("snap_duration must be positive")
        assert isinstance(error, ScrollerError)
        assert error.category is ErrorCategory.CONFIGURATION
        assert str(error) == "snap_duration must be positive"

    def test_from_exception_keeps_original(self) -> None:
        original = ValueError("bad value")
        error = ConfigurationError.from_exception(original)
        assert error.original_error is original
        assert str(error) == "bad value"
