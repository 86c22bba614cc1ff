"""Mock implementations for testing."""

from tests.mocks.host import MockItemHost

__all__ = ["MockItemHost"]
