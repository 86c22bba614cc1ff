"""Inertial scroll and snap animations driven one tick at a time.

At most one animation is active. Starting one replaces whatever was
running; a finished snap forces every item onto its exact rest slot.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from src.core.carousel_logic import ScrollerState, next_index
from src.core.config import ScrollerConfig
from src.core.geometry import (
    GeometryState,
    canonical_positions,
    nearest_index,
    wrap,
)
from src.core.gestures import SwipeEvent
from src.core.logging import get_logger

logger = get_logger(__name__)


class MotionState(Enum):
    IDLE = "idle"
    SCROLLING = "scrolling"
    SNAPPING = "snapping"


@dataclass(frozen=True)
class SnapTarget:
    """How far, and which way, to shift every item."""

    distance: float
    toward_positive: bool

    @classmethod
    def from_offset(cls, x: float) -> "SnapTarget":
        """Target that brings an item at ``x`` back to 0."""
        return cls(distance=abs(x), toward_positive=x < 0)

    @property
    def signed_distance(self) -> float:
        return self.distance if self.toward_positive else -self.distance


@dataclass
class ScrollAnimation:
    velocity: float
    warned: bool = False


@dataclass
class SnapAnimation:
    target: SnapTarget
    elapsed: float = 0.0


class MotionEngine:
    """Moves the items of a ``ScrollerState`` through the cyclic geometry.

    Args:
        state: The scroller state whose items are moved.
        config: Current tunables; replaced by the owner on reconfigure.
        publish: Called after every position change so the host can render.
    """

    def __init__(
        self,
        state: ScrollerState[Any],
        config: ScrollerConfig,
        publish: Callable[[], None] | None = None,
    ) -> None:
        self.state = state
        self.config = config
        self.geometry: GeometryState | None = None
        self._publish = publish or (lambda: None)
        self._active: ScrollAnimation | SnapAnimation | None = None

    @property
    def motion_state(self) -> MotionState:
        if isinstance(self._active, ScrollAnimation):
            return MotionState.SCROLLING
        if isinstance(self._active, SnapAnimation):
            return MotionState.SNAPPING
        return MotionState.IDLE

    @property
    def is_animating(self) -> bool:
        return self._active is not None

    def halt(self) -> None:
        """Drop the in-flight animation, leaving items where they are."""
        self._active = None

    def nudge(self, delta: float) -> None:
        """Shift every item by ``delta`` and re-pick the item nearest 0."""
        geometry = self.geometry
        if geometry is None or not self.state.items:
            return
        for item in self.state.items:
            item.x = wrap(item.x, delta, geometry)
        self.state.set_current(nearest_index(self.state.positions))
        self._publish()

    def start_scroll(self, event: SwipeEvent) -> bool:
        if self.geometry is None or not self.state.items:
            return False
        self.halt()
        self._active = ScrollAnimation(velocity=event.velocity)
        logger.debug("scroll_started", velocity=event.velocity)
        return True

    def start_snap(self, target: SnapTarget) -> bool:
        if self.geometry is None or not self.state.items:
            return False
        self.halt()
        self._active = SnapAnimation(target=target)
        return True

    def snap_to_nearest(self) -> bool:
        closest = self.state.closest_item
        if closest is None:
            return False
        return self.start_snap(SnapTarget.from_offset(closest.x))

    def advance(self) -> bool:
        """Make the next item current and slide everything left onto it."""
        geometry = self.geometry
        if geometry is None or not self.state.items:
            return False
        self.state.set_current(next_index(self.state.current_index, self.state.item_count))
        return self.start_snap(SnapTarget(distance=geometry.item_width, toward_positive=False))

    def step(self, dt: float) -> None:
        """Advance the active animation by one tick of ``dt`` seconds."""
        if dt <= 0:
            return
        active = self._active
        if isinstance(active, ScrollAnimation):
            self._step_scroll(active, dt)
        elif isinstance(active, SnapAnimation):
            self._step_snap(active, dt)

    def _step_scroll(self, anim: ScrollAnimation, dt: float) -> None:
        config = self.config
        if not config.decay_converges(dt):
            if not anim.warned:
                logger.warning(
                    "scroll_decay_not_converging",
                    decay_factor=config.decay_factor(dt),
                    scroll_speed=config.scroll_speed,
                    stop_speed=config.stop_speed,
                    dt=dt,
                )
                anim.warned = True
            self._finish_scroll()
            return

        delta = config.scroll_speed * anim.velocity * dt
        anim.velocity -= delta * dt * config.stop_speed
        self.nudge(delta)
        if abs(delta) <= config.snap_limit:
            self._finish_scroll()

    def _finish_scroll(self) -> None:
        # clear first so the snap start sees no active animation
        self._active = None
        logger.debug("scroll_settled", current_index=self.state.current_index)
        self.snap_to_nearest()

    def _step_snap(self, anim: SnapAnimation, dt: float) -> None:
        geometry = self.geometry
        if geometry is None:
            self._active = None
            return
        duration = self.config.snap_duration
        delta = dt * anim.target.signed_distance / duration
        for item in self.state.items:
            item.x = wrap(item.x, delta, geometry)
        anim.elapsed += dt
        if anim.elapsed >= duration:
            self._active = None
            self.place_at_rest()
            logger.debug("snap_completed", current_index=self.state.current_index)
            return
        self._publish()

    def place_at_rest(self) -> None:
        """Force exact rest positions around the current index."""
        geometry = self.geometry
        if geometry is None:
            return
        positions = canonical_positions(geometry, self.state.current_index)
        for item, x in zip(self.state.items, positions, strict=True):
            item.x = x
        self._publish()
