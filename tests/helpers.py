"""Helpers shared by the scroller test suites."""

from typing import Any

from src.core.scroller import InfiniteSnapScroller

ITEM_WIDTH = 100.0
ITEM_HEIGHT = 50.0
# Exact in binary, so per-tick snap steps add up without rounding
TICK = 0.125


def run_until_idle(
    scroller: InfiniteSnapScroller[Any], dt: float = TICK, limit: int = 5000
) -> int:
    """Tick until no animation is active; returns the number of ticks."""
    for ticks in range(1, limit + 1):
        scroller.tick(dt)
        if not scroller.motion.is_animating:
            return ticks
    raise AssertionError(f"scroller still animating after {limit} ticks")


def assert_at_rest(positions: list[float], current_index: int, item_width: float) -> None:
    """Check the rest invariant around ``current_index``."""
    n = len(positions)
    assert positions.count(0.0) == 1
    assert positions[current_index] == 0.0
    if current_index + 1 < n:
        assert positions[current_index + 1] == item_width
    if current_index > 0:
        assert positions[current_index - 1] == -item_width
    for x in positions:
        assert x % item_width == 0
