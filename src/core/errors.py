"""Error classification and request results for the scroller core.

Nothing in the core is fatal to the host. Configuration problems are
raised as ``ConfigurationError`` by the config layer and caught by the
scroller, which keeps its last valid settings. Everything else degrades
to "no visible motion" and is reported through ``RequestResult``.

Example:
    from src.core.errors import ErrorCategory, RequestResult

    result = scroller.append_items(handles)
    if not result:
        logger.info("append_rejected", category=result.category, reason=result.reason)
"""

from dataclasses import dataclass
from enum import Enum, auto


class ErrorCategory(Enum):
    """Classification of scroller failure modes."""

    CONFIGURATION = auto()  # Non-positive thresholds or durations
    LAYOUT = auto()  # Zero items or a zero-size container
    INVALID_REQUEST = auto()  # Append/remove while interactive, advance on empty
    ANIMATION_CONFLICT = auto()  # Resolved by cancel-then-start, never surfaced


class ScrollerError(Exception):
    """Base error for the scroller core.

    Attributes:
        category: The failure category.
        original_error: The underlying exception, if one was wrapped.
    """

    def __init__(
        self,
        message: str,
        category: ErrorCategory,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.category = category
        self.original_error = original_error


class ConfigurationError(ScrollerError):
    """Raised when a configuration change fails validation."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        super().__init__(message, ErrorCategory.CONFIGURATION, original_error)

    @classmethod
    def from_exception(cls, ex: Exception) -> "ConfigurationError":
        """Create a ConfigurationError from an existing exception."""
        return cls(message=str(ex), original_error=ex)


@dataclass(frozen=True)
class RequestResult:
    """Outcome of a host request that may be rejected.

    Attributes:
        accepted: Whether the request was carried out.
        category: Why it was rejected, if it was.
        reason: Human-readable rejection reason.
    """

    accepted: bool
    category: ErrorCategory | None = None
    reason: str | None = None

    def __bool__(self) -> bool:
        return self.accepted

    @classmethod
    def ok(cls) -> "RequestResult":
        return cls(accepted=True)

    @classmethod
    def rejected(cls, category: ErrorCategory, reason: str) -> "RequestResult":
        return cls(accepted=False, category=category, reason=reason)
