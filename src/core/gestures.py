"""Pointer and touch gesture classification.

A gesture runs from pointer-down (or touch BEGAN) to pointer-up (or touch
ENDED/CANCELED). Intermediate samples become drag deltas; the completed
gesture is classified once as a swipe or not.
"""

import math
from dataclasses import dataclass
from enum import Enum

from src.core.config import ScrollerConfig
from src.core.geometry import Direction


class TouchPhase(Enum):
    """Phases a host touch stream reports for one finger."""

    BEGAN = "began"
    MOVED = "moved"
    STATIONARY = "stationary"
    ENDED = "ended"
    CANCELED = "canceled"


@dataclass(frozen=True)
class TouchSample:
    """One touch point as delivered by the host for a single frame."""

    phase: TouchPhase
    x: float
    y: float
    time: float
    delta_x: float = 0.0
    delta_y: float = 0.0


@dataclass
class GestureSample:
    """Start, latest and end points of one pointer/touch gesture."""

    start_x: float
    start_y: float
    start_time: float
    previous_x: float
    previous_y: float
    end_x: float | None = None
    end_y: float | None = None
    end_time: float | None = None

    @property
    def is_complete(self) -> bool:
        return self.end_time is not None

    @property
    def distance(self) -> float:
        if self.end_x is None or self.end_y is None:
            return 0.0
        return math.hypot(self.end_x - self.start_x, self.end_y - self.start_y)

    @property
    def elapsed(self) -> float:
        if self.end_time is None:
            return 0.0
        return self.end_time - self.start_time

    @property
    def direction(self) -> Direction:
        if self.end_x is None:
            return Direction.RIGHT
        return Direction.from_delta(self.end_x - self.start_x)


@dataclass(frozen=True)
class SwipeEvent:
    """A recognized swipe; ``velocity`` carries the direction's sign."""

    velocity: float
    direction: Direction


@dataclass(frozen=True)
class DragDelta:
    """Scroll distance produced by one drag sample."""

    distance: float
    direction: Direction

    @property
    def signed(self) -> float:
        return self.direction.signed(self.distance)


class GestureDetector:
    """Tracks the active gesture and turns samples into drag deltas."""

    def __init__(self) -> None:
        self._sample: GestureSample | None = None

    @property
    def is_active(self) -> bool:
        return self._sample is not None

    def begin(self, x: float, y: float, time: float) -> None:
        """Start a new gesture, discarding any unfinished one."""
        self._sample = GestureSample(
            start_x=x,
            start_y=y,
            start_time=time,
            previous_x=x,
            previous_y=y,
        )

    def move(self, x: float, y: float, time: float, scale: float) -> DragDelta | None:
        """Record an intermediate sample.

        Args:
            x: Pointer x position.
            y: Pointer y position.
            time: Sample timestamp in seconds.
            scale: Factor from pointer pixels to scroll distance
                (``item_width / viewport_width``).

        Returns:
            The scaled movement since the previous sample, or None when no
            gesture is active or the pointer did not move.
        """
        sample = self._sample
        if sample is None:
            return None
        dx = x - sample.previous_x
        raw = math.hypot(dx, y - sample.previous_y)
        sample.previous_x = x
        sample.previous_y = y
        sample.end_x = x
        sample.end_y = y
        sample.end_time = time
        if raw == 0:
            return None
        return DragDelta(distance=raw * scale, direction=Direction.from_delta(dx))

    def end(self, x: float, y: float, time: float) -> GestureSample | None:
        """Finish the gesture and return it; None if none was started."""
        sample = self._sample
        self._sample = None
        if sample is None:
            return None
        sample.end_x = x
        sample.end_y = y
        sample.end_time = time
        return sample

    def cancel(self) -> None:
        self._sample = None


def check_swipe(sample: GestureSample, config: ScrollerConfig) -> SwipeEvent | None:
    """Classify a completed gesture.

    A swipe needs ``distance >= swipe_distance_threshold`` and
    ``elapsed <= swipe_time_threshold``; both bounds are inclusive.
    """
    if not sample.is_complete:
        return None
    distance = sample.distance
    elapsed = sample.elapsed
    if distance < config.swipe_distance_threshold:
        return None
    if elapsed > config.swipe_time_threshold:
        return None
    direction = sample.direction
    speed = distance * elapsed * config.scroll_sensitivity
    return SwipeEvent(velocity=direction.signed(speed), direction=direction)
