"""Cyclic geometry for a one-item-per-viewport carousel.

Items sit on a single axis, one ``item_width`` apart, inside the half-open
range ``(-item_width, max_x]``. Moving past either end folds the position
back in by one full period (``wrap_extent``), so the strip has no seam.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """Scroll direction along the axis. Left moves items toward negative x."""

    LEFT = -1
    RIGHT = 1

    @classmethod
    def from_delta(cls, dx: float) -> "Direction":
        """Negative travel is LEFT, anything else is RIGHT."""
        return cls.LEFT if dx < 0 else cls.RIGHT

    def signed(self, distance: float) -> float:
        """Apply this direction's sign to a non-negative distance."""
        return distance * self.value


@dataclass(frozen=True)
class GeometryState:
    """Item size and the cyclic period derived from it.

    Attributes:
        item_width: Width of one item; equals the container width.
        item_height: Height of one item; equals the container height.
        item_count: Number of items laid out.
    """

    item_width: float
    item_height: float
    item_count: int

    @property
    def wrap_extent(self) -> float:
        return self.item_width * self.item_count

    @property
    def max_x(self) -> float:
        return self.wrap_extent - self.item_width

    @property
    def min_x(self) -> float:
        """Exclusive lower bound of the fold range."""
        return -self.item_width


def compute_layout(
    container_width: float, container_height: float, item_count: int
) -> GeometryState | None:
    """Derive geometry from the container size.

    Returns None when there is nothing to lay out (no items, or a container
    with no width), so callers never divide by zero or place NaN positions.
    """
    if item_count <= 0:
        return None
    if not container_width > 0 or not math.isfinite(container_width):
        return None
    return GeometryState(
        item_width=float(container_width),
        item_height=float(max(container_height, 0.0)),
        item_count=item_count,
    )


def wrap(position: float, delta: float, geometry: GeometryState) -> float:
    """Move ``position`` by ``delta`` and fold it into ``(min_x, max_x]``.

    This is a modulo on the distance from the lower bound, so applying it
    step by step lands where a single call with the summed delta does.
    """
    offset = (position + delta - geometry.min_x) % geometry.wrap_extent
    if offset == 0:
        return geometry.max_x
    return offset + geometry.min_x


def rest_positions(geometry: GeometryState) -> list[float]:
    """Initial placement: item ``i`` at ``item_width * i``."""
    return [geometry.item_width * i for i in range(geometry.item_count)]


def canonical_positions(geometry: GeometryState, current_index: int) -> list[float]:
    """Exact rest placement with ``current_index`` at 0.

    Item ``current_index + k`` goes to ``k * item_width``. The item just
    before ``current_index`` goes to ``-item_width``, except when
    ``current_index`` is 0: the wrap-around neighbour at the end of the
    array then stays in its folded slot at ``max_x``.
    """
    n = geometry.item_count
    positions = []
    for i in range(n):
        k = (i - current_index) % n
        if k == n - 1 and current_index > 0:
            positions.append(-geometry.item_width)
        else:
            positions.append(geometry.item_width * k)
    return positions


def nearest_index(positions: Sequence[float]) -> int:
    """Index of the position closest to 0; ties go to the lower index."""
    best = 0
    best_distance = math.inf
    for i, x in enumerate(positions):
        distance = abs(x)
        if distance < best_distance:
            best = i
            best_distance = distance
    return best
