"""Carousel state - platform agnostic."""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class Item(Generic[T]):
    """A host-owned visual element and its position on the scroll axis.

    Items never change identity or index; only ``x`` moves.
    """

    handle: T
    index: int
    x: float = 0.0


@dataclass
class ScrollerState(Generic[T]):
    """Mutable per-instance state of an infinite snap scroller."""

    items: list[Item[T]] = field(default_factory=list)
    current_index: int = 0
    is_dragging: bool = False
    # None while auto-advance has no pending trigger
    auto_advance_countdown: float | None = None
    auto_advance_grace: float = 0.0

    @property
    def item_count(self) -> int:
        return len(self.items)

    @property
    def closest_item(self) -> Item[T] | None:
        if 0 <= self.current_index < len(self.items):
            return self.items[self.current_index]
        return None

    @property
    def is_auto_advance_active(self) -> bool:
        return self.auto_advance_countdown is not None

    @property
    def positions(self) -> list[float]:
        return [item.x for item in self.items]

    def set_current(self, index: int) -> None:
        """Set the current index, wrapped into ``[0, item_count)``."""
        count = len(self.items)
        self.current_index = index % count if count else 0


def next_index(current_index: int, item_count: int) -> int:
    """Index after ``current_index``, wrapping to 0 past the last item."""
    if item_count <= 0:
        return 0
    return (current_index + 1) % item_count
