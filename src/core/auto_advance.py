"""Timer that periodically asks the scroller to advance one item.

The scheduler keeps its countdown on the ``ScrollerState`` it is ticked
with. While a drag is active it never fires. A drag that actually scrolled
re-arms it with a grace window; otherwise the paused countdown resumes
where it stopped.
"""

from typing import Any

from src.core.carousel_logic import ScrollerState
from src.core.logging import get_logger

logger = get_logger(__name__)


class AutoAdvanceScheduler:
    """Fires every ``delay`` seconds while enabled, idle and with 2+ items."""

    def __init__(self, delay: float, resume_grace: float, enabled: bool = False) -> None:
        self.delay = delay
        self.resume_grace = resume_grace
        self._enabled = enabled

    @property
    def enabled(self) -> bool:
        return self._enabled

    def set_enabled(self, state: ScrollerState[Any], enabled: bool) -> None:
        """Enable or disable; either way any pending trigger is dropped."""
        if enabled == self._enabled:
            return
        self._enabled = enabled
        # re-enabling starts a fresh period on the next tick
        self.cancel(state)

    def cancel(self, state: ScrollerState[Any]) -> None:
        state.auto_advance_countdown = None
        state.auto_advance_grace = 0.0

    def rearm_after_drag(self, state: ScrollerState[Any]) -> None:
        """Restart from the grace window after a drag scrolled the items."""
        state.auto_advance_countdown = None
        state.auto_advance_grace = self.resume_grace

    def tick(self, state: ScrollerState[Any], dt: float) -> bool:
        """Advance the countdown by ``dt``; True when an advance is due."""
        if not self._enabled or state.item_count <= 1:
            if state.is_auto_advance_active:
                self.cancel(state)
            return False
        if state.is_dragging:
            return False
        if state.auto_advance_grace > 0:
            state.auto_advance_grace = max(state.auto_advance_grace - dt, 0.0)
            return False

        if state.auto_advance_countdown is None:
            state.auto_advance_countdown = self.delay
        state.auto_advance_countdown -= dt
        if state.auto_advance_countdown > 0:
            return False

        state.auto_advance_countdown += self.delay
        logger.debug("auto_advance_fired", current_index=state.current_index)
        return True
