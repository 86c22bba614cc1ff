"""Host protocols for rendering scroller items.

This module defines the interface between the scroller core and whatever
draws the items (a GUI toolkit, a game engine, a terminal renderer).
Item handles are opaque to the core; only the host knows what they are.
"""

from typing import Any, Protocol

# =============================================================================
# Host Protocol
# =============================================================================


class ItemHost(Protocol):
    """Protocol for the host that owns and renders item handles.

    Positions and sizes are in the content container's local pixels, with
    x growing to the right and the current item at x == 0.
    """

    def attach_item(self, handle: Any) -> None:
        """Parent a new item handle under the content container.

        Args:
            handle: The opaque host item being added.
        """
        ...

    def set_item_size(self, handle: Any, width: float, height: float) -> None:
        """Resize an item so it fills the viewport.

        Args:
            handle: The item to resize.
            width: New width; equal to the container width.
            height: New height; equal to the container height.
        """
        ...

    def set_item_position(self, handle: Any, x: float) -> None:
        """Move an item along the scroll axis.

        Args:
            handle: The item to move.
            x: New position of the item's left edge.
        """
        ...

    def dispose_item(self, handle: Any) -> None:
        """Destroy an item the scroller no longer holds.

        Args:
            handle: The item being removed. The core drops its reference
                right after this call.
        """
        ...
