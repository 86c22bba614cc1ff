"""Asyncio frame clock for hosts without their own frame callback.

Example:
    stop = asyncio.Event()
    task = asyncio.create_task(run_frame_loop(scroller, fps=60, stop_event=stop))
    ...
    stop.set()
    await task
"""

import asyncio
import time
from collections.abc import Callable
from typing import Protocol

from src.core.logging import get_logger

logger = get_logger(__name__)


class Tickable(Protocol):
    def tick(self, dt: float) -> None: ...


async def run_frame_loop(
    target: Tickable,
    fps: float = 60.0,
    stop_event: asyncio.Event | None = None,
    max_frames: int | None = None,
    clock: Callable[[], float] = time.perf_counter,
) -> int:
    """Call ``target.tick(dt)`` once per frame until stopped.

    Args:
        target: Anything with a ``tick(dt)`` method, usually a scroller.
        fps: Frames per second to aim for.
        stop_event: Ends the loop once set.
        max_frames: Ends the loop after this many frames.
        clock: Monotonic time source in seconds.

    Returns:
        The number of frames ticked.

    Raises:
        ValueError: If ``fps`` is not positive.
    """
    if fps <= 0:
        raise ValueError(f"fps must be positive, got {fps}")

    frame_interval = 1.0 / fps
    frames = 0
    last = clock()
    logger.debug("frame_loop_started", fps=fps, max_frames=max_frames)
    while True:
        if stop_event is not None and stop_event.is_set():
            break
        if max_frames is not None and frames >= max_frames:
            break
        await asyncio.sleep(frame_interval)
        now = clock()
        target.tick(now - last)
        last = now
        frames += 1
    logger.debug("frame_loop_stopped", frames=frames)
    return frames
