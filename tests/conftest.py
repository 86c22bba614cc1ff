"""Shared pytest fixtures for scroller tests."""

from collections.abc import Callable
from typing import Any

import pytest

from src.core.config import ScrollerConfig
from src.core.scroller import InfiniteSnapScroller
from tests.helpers import ITEM_HEIGHT, ITEM_WIDTH
from tests.mocks.host import MockItemHost

# Configure pytest-asyncio for the frame loop tests
pytest_plugins = ["pytest_asyncio"]


@pytest.fixture
def host() -> MockItemHost:
    """Provide a fresh recording host.

    Returns:
        MockItemHost: A host with no recorded calls.
    """
    return MockItemHost()


@pytest.fixture
def make_scroller(
    host: MockItemHost,
) -> Callable[..., InfiniteSnapScroller[str]]:
    """Provide a factory for enabled scrollers with items already laid out.

    The factory takes the item count followed by any ScrollerConfig
    overrides. Items are named "item0", "item1", ... and are attached on
    a zero-length tick, so the scroller is at rest on item 0.

    Example:
        def test_something(make_scroller):
            scroller = make_scroller(5, continuous_scroll_enabled=True)
            assert scroller.current_index == 0
    """

    def factory(count: int = 5, **overrides: Any) -> InfiniteSnapScroller[str]:
        scroller: InfiniteSnapScroller[str] = InfiniteSnapScroller(
            host, ScrollerConfig(**overrides)
        )
        scroller.append_items([f"item{i}" for i in range(count)])
        scroller.enable(width=ITEM_WIDTH, height=ITEM_HEIGHT)
        scroller.tick(0.0)
        return scroller

    return factory
