"""Infinite snap scroller: the host-facing entry point.

The host drives the scroller with ``tick(dt)`` once per frame and forwards
pointer or touch events to the ``on_*`` handlers. Positions come back
through the ``ItemHost`` port.

Example:
    scroller = InfiniteSnapScroller(host, ScrollerConfig(auto_advance_enabled=True))
    scroller.append_items(["a", "b", "c"])
    scroller.enable(width=320, height=180)

    # every frame
    scroller.on_pointer_move(x, y, now)
    scroller.tick(dt)
"""

import functools
import itertools
import math
from collections.abc import Callable, Iterable, Sequence
from typing import Any, Generic, TypeVar, cast

from src.core.auto_advance import AutoAdvanceScheduler
from src.core.carousel_logic import Item, ScrollerState
from src.core.config import ScrollerConfig
from src.core.errors import ConfigurationError, ErrorCategory, RequestResult
from src.core.geometry import GeometryState, nearest_index
from src.core.gestures import (
    GestureDetector,
    GestureSample,
    TouchPhase,
    TouchSample,
    check_swipe,
)
from src.core.layout import LayoutBuilder
from src.core.logging import get_logger, log_context
from src.core.motion import MotionEngine, MotionState
from src.ports.host import ItemHost

logger = get_logger(__name__)

T = TypeVar("T")
F = TypeVar("F", bound=Callable[..., Any])

_scroller_ids = itertools.count(1)


def _in_log_context(method: F) -> F:
    """Tag every log line emitted inside ``method`` with the scroller name."""

    @functools.wraps(method)
    def wrapper(self: "InfiniteSnapScroller[Any]", *args: Any, **kwargs: Any) -> Any:
        with log_context(scroller=self.name):
            return method(self, *args, **kwargs)

    return cast(F, wrapper)


class InfiniteSnapScroller(Generic[T]):
    """A cyclic carousel of equal-width items with swipe, drag and snap.

    Args:
        host: Renders items and receives position updates.
        config: Initial tunables; defaults to ``ScrollerConfig()``.
        items: Handles the host has already parented under the container.
        name: Tag bound to this scroller's log lines; defaults to
            ``scroller-<n>``.
    """

    def __init__(
        self,
        host: ItemHost,
        config: ScrollerConfig | None = None,
        items: Iterable[T] = (),
        name: str | None = None,
    ) -> None:
        self.name = name or f"scroller-{next(_scroller_ids)}"
        self._config = config or ScrollerConfig()
        self.state: ScrollerState[T] = ScrollerState()
        for handle in items:
            self.state.items.append(Item(handle=handle, index=self.state.item_count))

        self.layout = LayoutBuilder(host, self.state)
        self.motion = MotionEngine(self.state, self._config, publish=self.layout.publish)
        self.gestures = GestureDetector()
        self.auto_advance = AutoAdvanceScheduler(
            delay=self._config.auto_advance_delay,
            resume_grace=self._config.auto_advance_resume_grace,
            enabled=self._config.auto_advance_enabled,
        )
        self._enabled = False
        self._scrolling_enabled = True

    @property
    def config(self) -> ScrollerConfig:
        return self._config

    @property
    def geometry(self) -> GeometryState | None:
        return self.layout.geometry

    @property
    def current_index(self) -> int:
        return self.state.current_index

    @property
    def positions(self) -> list[float]:
        return self.state.positions

    @property
    def motion_state(self) -> MotionState:
        return self.motion.motion_state

    @property
    def is_interactive(self) -> bool:
        """True while a drag or animation is in flight.

        Hosts check this before calling ``append_items`` or ``remove_all``;
        both are rejected while it is set.
        """
        return self.state.is_dragging or self.motion.is_animating

    @property
    def accepts_input(self) -> bool:
        return (
            self._enabled
            and self._scrolling_enabled
            and self.geometry is not None
            and self.state.item_count > 1
        )

    @property
    def scrolling_enabled(self) -> bool:
        return self._scrolling_enabled

    @scrolling_enabled.setter
    @_in_log_context
    def scrolling_enabled(self, value: bool) -> None:
        """Turning scrolling off stops every animation, drag and timer now."""
        self._scrolling_enabled = value
        if not value:
            self._halt()
            logger.info("scrolling_stopped", current_index=self.state.current_index)

    @_in_log_context
    def enable(
        self, width: float, height: float, viewport_width: float | None = None
    ) -> GeometryState | None:
        """Start the scroller with the given container size."""
        self._enabled = True
        return self.update_layout(width, height, viewport_width)

    @_in_log_context
    def disable(self) -> None:
        self._halt()
        self._enabled = False

    @_in_log_context
    def update_layout(
        self,
        width: float | None = None,
        height: float | None = None,
        viewport_width: float | None = None,
    ) -> GeometryState | None:
        """Recompute geometry, e.g. after the container was resized.

        Any drag or animation is dropped and item 0 becomes current again.
        """
        self.motion.halt()
        self.gestures.cancel()
        self.state.is_dragging = False
        self.layout.resize(
            self.layout.container_width if width is None else width,
            self.layout.container_height if height is None else height,
            viewport_width,
        )
        geometry = self.layout.build()
        self.motion.geometry = geometry
        return geometry

    @_in_log_context
    def configure(self, **changes: Any) -> RequestResult:
        """Apply new settings, keeping the current ones if any is invalid."""
        try:
            config = self._config.with_changes(**changes)
        except ConfigurationError as ex:
            logger.warning("config_rejected", changes=changes, error=str(ex))
            return RequestResult.rejected(ErrorCategory.CONFIGURATION, str(ex))

        self._config = config
        self.motion.config = config
        self.auto_advance.delay = config.auto_advance_delay
        self.auto_advance.resume_grace = config.auto_advance_resume_grace
        self.auto_advance.set_enabled(self.state, config.auto_advance_enabled)
        return RequestResult.ok()

    @_in_log_context
    def tick(self, dt: float) -> None:
        """Advance the simulation by one frame of ``dt`` seconds.

        Queued appends are applied on the first tick with no drag or
        animation in flight, so a rebuild never lands mid-gesture.
        """
        if self.layout.has_pending and not self.is_interactive:
            self.layout.flush_pending()
            self.motion.geometry = self.layout.geometry
        if not self._enabled:
            return
        if not math.isfinite(dt) or dt < 0:
            logger.debug("tick_ignored", dt=dt)
            return

        if self._scrolling_enabled and self.auto_advance.tick(self.state, dt):
            self.scroll_to_next()
        self.motion.step(dt)

    @_in_log_context
    def on_pointer_down(self, x: float, y: float, time: float) -> None:
        if not self.accepts_input:
            return
        self.motion.halt()
        self.gestures.begin(x, y, time)
        self.state.is_dragging = True

    @_in_log_context
    def on_pointer_move(self, x: float, y: float, time: float) -> None:
        if not self.state.is_dragging:
            return
        delta = self.gestures.move(x, y, time, self.layout.drag_scale)
        if delta is None or not self._config.continuous_scroll_enabled:
            return
        self.motion.nudge(delta.signed)
        if self.auto_advance.enabled:
            self.auto_advance.rearm_after_drag(self.state)

    @_in_log_context
    def on_pointer_up(self, x: float, y: float, time: float) -> None:
        if not self.state.is_dragging:
            return
        self.state.is_dragging = False
        sample = self.gestures.end(x, y, time)
        if sample is not None:
            self._finish_gesture(sample)

    @_in_log_context
    def on_touches(self, touches: Sequence[TouchSample]) -> None:
        """Handle this frame's touches; only the first touch is used."""
        if not touches:
            return
        touch = touches[0]
        if touch.phase is TouchPhase.BEGAN:
            self.on_pointer_down(touch.x, touch.y, touch.time)
        elif touch.phase is TouchPhase.MOVED:
            self.on_pointer_move(touch.x, touch.y, touch.time)
        elif touch.phase in (TouchPhase.ENDED, TouchPhase.CANCELED):
            self.on_pointer_up(touch.x, touch.y, touch.time)

    def _finish_gesture(self, sample: GestureSample) -> None:
        swipe = check_swipe(sample, self._config)
        if swipe is None:
            self.motion.snap_to_nearest()
            return
        logger.debug(
            "swipe_recognized",
            direction=swipe.direction.name,
            velocity=swipe.velocity,
            continuous=self._config.continuous_scroll_enabled,
        )
        if self._config.continuous_scroll_enabled:
            self.motion.start_scroll(swipe)
        else:
            # one item per swipe, whatever its speed
            self.scroll_to_next()

    @_in_log_context
    def scroll_to_next(self) -> RequestResult:
        """Animate to the next item, wrapping after the last one."""
        if self.geometry is None or not self.state.items:
            return RequestResult.rejected(ErrorCategory.INVALID_REQUEST, "no items to advance")
        if not self._scrolling_enabled:
            return RequestResult.rejected(ErrorCategory.INVALID_REQUEST, "scrolling is stopped")
        if self.state.is_dragging:
            return RequestResult.rejected(ErrorCategory.INVALID_REQUEST, "drag in progress")
        self.motion.advance()
        return RequestResult.ok()

    @_in_log_context
    def append_items(self, handles: Iterable[T]) -> RequestResult:
        """Queue items to be attached and laid out on the next tick."""
        if self.is_interactive:
            return self._reject_busy("append")
        queued = self.layout.queue_append(handles)
        if queued == 0:
            return RequestResult.rejected(ErrorCategory.INVALID_REQUEST, "no items given")
        self.auto_advance.cancel(self.state)
        return RequestResult.ok()

    def add_item(self, handle: T) -> RequestResult:
        return self.append_items([handle])

    @_in_log_context
    def remove_all(self) -> RequestResult:
        """Dispose every item through the host."""
        if self.is_interactive:
            return self._reject_busy("remove")
        removed = self.layout.clear()
        self.motion.geometry = None
        self.auto_advance.cancel(self.state)
        logger.debug("items_removed", removed=removed)
        return RequestResult.ok()

    def _reject_busy(self, operation: str) -> RequestResult:
        logger.info(
            "request_rejected",
            operation=operation,
            dragging=self.state.is_dragging,
            motion_state=self.motion.motion_state.value,
        )
        return RequestResult.rejected(
            ErrorCategory.INVALID_REQUEST, f"cannot {operation} items while interactive"
        )

    def _halt(self) -> None:
        """Stop drag, animation and timer, settling items on the nearest slot."""
        was_moving = self.motion.is_animating or self.state.is_dragging
        self.motion.halt()
        self.gestures.cancel()
        self.state.is_dragging = False
        self.auto_advance.cancel(self.state)
        if was_moving and self.geometry is not None and self.state.items:
            self.state.set_current(nearest_index(self.state.positions))
            self.motion.place_at_rest()
