"""Scroller tunables with pydantic validation.

A ``ScrollerConfig`` is immutable for the lifetime of a session. Changing a
setting produces a new config via ``with_changes``. Constructing one
directly raises pydantic's ``ValidationError`` on bad values, while
``with_changes`` and ``from_env`` wrap it in ``ConfigurationError`` and
leave the caller's config untouched. Infinite and NaN values are rejected
for every numeric field.

Environment overrides use the ``SNAP_SCROLL_`` prefix, e.g.
``SNAP_SCROLL_AUTO_ADVANCE_DELAY=3`` or ``SNAP_SCROLL_CONTINUOUS_SCROLL_ENABLED=true``.
"""

import os
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from src.core.errors import ConfigurationError

ENV_PREFIX = "SNAP_SCROLL_"


class ScrollerConfig(BaseModel):
    """Tunables for swipe detection, inertial scroll, snapping and auto-advance."""

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    # Swipe
    swipe_time_threshold: float = Field(
        0.5, gt=0, description="Longest gesture (seconds) that still counts as a swipe"
    )
    swipe_distance_threshold: float = Field(
        1.0, ge=0, description="Shortest travel (pixels) that counts as a swipe"
    )

    # Snap
    snap_duration: float = Field(
        0.5, gt=0, description="Seconds the snap-to-item animation takes"
    )
    snap_limit: float = Field(
        1.0, ge=0, description="Per-tick scroll step below which inertia hands off to snap"
    )

    # Scrolling
    scroll_sensitivity: float = Field(
        5.0, description="Multiplier from swipe distance*time to initial velocity"
    )
    scroll_speed: float = Field(20.0, description="Velocity to per-tick step multiplier")
    stop_speed: float = Field(10.0, description="Deceleration applied to the velocity")
    continuous_scroll_enabled: bool = Field(
        False,
        description="Drag scrolls continuously; when off, only swipes step one item",
    )

    # Auto-advance
    auto_advance_enabled: bool = False
    auto_advance_delay: float = Field(2.0, gt=0, description="Seconds between advances")
    auto_advance_resume_grace: float = Field(
        5.0, ge=0, description="Seconds auto-advance waits after a drag scroll sample"
    )

    def with_changes(self, **changes: Any) -> "ScrollerConfig":
        """Return a validated copy with ``changes`` applied.

        Raises:
            ConfigurationError: If any value fails validation or names an
                unknown setting.
        """
        try:
            return ScrollerConfig.model_validate({**self.model_dump(), **changes})
        except ValidationError as ex:
            raise ConfigurationError.from_exception(ex) from ex

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX) -> "ScrollerConfig":
        """Build a config from defaults overridden by environment variables.

        Raises:
            ConfigurationError: If an environment value is invalid.
        """
        overrides = {}
        for name in cls.model_fields:
            value = os.getenv(f"{prefix}{name.upper()}")
            if value is not None:
                overrides[name] = value
        return cls().with_changes(**overrides)

    def decay_factor(self, dt: float) -> float:
        """Fraction of velocity removed per tick by the inertial decay."""
        return self.scroll_speed * self.stop_speed * dt * dt

    def decay_converges(self, dt: float) -> bool:
        """Whether inertial scroll settles for ticks of length ``dt``.

        The step shrinks geometrically by ``1 - decay_factor(dt)`` per tick,
        so it only converges for factors strictly between 0 and 2. Factors
        above 1 also flip the scroll direction every tick.
        """
        return 0 < self.decay_factor(dt) < 2
