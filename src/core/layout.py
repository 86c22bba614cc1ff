"""Layout of scroller items inside the content container.

The builder sizes every item to the container, places item ``i`` at
``item_width * i`` and owns the ordered list of item handles. Appends are
queued and applied on the next tick, after the host has parented them.
"""

from collections.abc import Iterable
from typing import Any

from src.core.carousel_logic import Item, ScrollerState
from src.core.geometry import GeometryState, compute_layout, rest_positions
from src.core.logging import get_logger
from src.ports.host import ItemHost

logger = get_logger(__name__)


class LayoutBuilder:
    """Computes geometry and rest positions for a ``ScrollerState``."""

    def __init__(self, host: ItemHost, state: ScrollerState[Any]) -> None:
        self.host = host
        self.state = state
        self.container_width = 0.0
        self.container_height = 0.0
        self.viewport_width: float | None = None
        self.geometry: GeometryState | None = None
        self._pending: list[Any] = []

    @property
    def has_pending(self) -> bool:
        return bool(self._pending)

    @property
    def drag_scale(self) -> float:
        """Pointer pixels to scroll distance: item width over viewport width."""
        if self.geometry is None:
            return 0.0
        viewport = self.viewport_width or self.geometry.item_width
        return self.geometry.item_width / viewport

    def resize(
        self, width: float, height: float, viewport_width: float | None = None
    ) -> None:
        self.container_width = width
        self.container_height = height
        if viewport_width is not None:
            self.viewport_width = viewport_width if viewport_width > 0 else None

    def build(self) -> GeometryState | None:
        """(Re)compute geometry and reset every item to its rest slot.

        Returns:
            The new geometry, or None when there is nothing to lay out.
        """
        self.state.current_index = 0
        geometry = compute_layout(
            self.container_width, self.container_height, self.state.item_count
        )
        self.geometry = geometry
        if geometry is None:
            logger.debug(
                "layout_skipped",
                item_count=self.state.item_count,
                container_width=self.container_width,
            )
            return None

        for item, x in zip(self.state.items, rest_positions(geometry), strict=True):
            self.host.set_item_size(item.handle, geometry.item_width, geometry.item_height)
            item.x = x
        self.publish()
        logger.debug(
            "layout_computed",
            item_width=geometry.item_width,
            item_count=geometry.item_count,
        )
        return geometry

    def publish(self) -> None:
        """Push every item's position to the host."""
        for item in self.state.items:
            self.host.set_item_position(item.handle, item.x)

    def queue_append(self, handles: Iterable[Any]) -> int:
        before = len(self._pending)
        self._pending.extend(handles)
        return len(self._pending) - before

    def flush_pending(self) -> bool:
        """Attach queued handles and rebuild; False if nothing was queued."""
        if not self._pending:
            return False
        pending, self._pending = self._pending, []
        for handle in pending:
            self.host.attach_item(handle)
            self.state.items.append(Item(handle=handle, index=self.state.item_count))
        logger.debug("items_appended", added=len(pending), item_count=self.state.item_count)
        self.build()
        return True

    def clear(self) -> int:
        """Dispose every item through the host and forget them."""
        removed = len(self.state.items)
        for item in self.state.items:
            self.host.dispose_item(item.handle)
        self.state.items.clear()
        self._pending.clear()
        self.state.current_index = 0
        self.geometry = None
        return removed
