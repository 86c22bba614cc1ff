"""Core scroller logic and protocols.

This module contains the platform-agnostic motion model of the infinite
snap scroller: geometry, gesture classification, animations, auto-advance
and layout. Rendering and raw input stay with the host.
"""

from src.core.auto_advance import AutoAdvanceScheduler
from src.core.carousel_logic import Item, ScrollerState, next_index
from src.core.config import ScrollerConfig
from src.core.errors import (
    ConfigurationError,
    ErrorCategory,
    RequestResult,
    ScrollerError,
)
from src.core.frame_loop import run_frame_loop
from src.core.geometry import (
    Direction,
    GeometryState,
    canonical_positions,
    compute_layout,
    nearest_index,
    rest_positions,
    wrap,
)
from src.core.gestures import (
    DragDelta,
    GestureDetector,
    GestureSample,
    SwipeEvent,
    TouchPhase,
    TouchSample,
    check_swipe,
)
from src.core.layout import LayoutBuilder
from src.core.logging import (
    configure_logging,
    get_logger,
    log_context,
)
from src.core.motion import MotionEngine, MotionState, SnapTarget
from src.core.scroller import InfiniteSnapScroller

__all__ = [
    # Scroller
    "InfiniteSnapScroller",
    # State
    "Item",
    "ScrollerState",
    "next_index",
    # Configuration
    "ScrollerConfig",
    # Error handling
    "ConfigurationError",
    "ErrorCategory",
    "RequestResult",
    "ScrollerError",
    # Geometry
    "Direction",
    "GeometryState",
    "canonical_positions",
    "compute_layout",
    "nearest_index",
    "rest_positions",
    "wrap",
    # Gestures
    "DragDelta",
    "GestureDetector",
    "GestureSample",
    "SwipeEvent",
    "TouchPhase",
    "TouchSample",
    "check_swipe",
    # Motion
    "MotionEngine",
    "MotionState",
    "SnapTarget",
    # Auto-advance
    "AutoAdvanceScheduler",
    # Layout
    "LayoutBuilder",
    # Frame loop
    "run_frame_loop",
    # Logging
    "configure_logging",
    "get_logger",
    "log_context",
]
