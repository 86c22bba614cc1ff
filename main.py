"""Headless demo: auto-advance a scroller and log where the items land."""

import asyncio
import os
from typing import Any

from src.core.config import ScrollerConfig
from src.core.frame_loop import run_frame_loop
from src.core.logging import configure_logging, get_logger
from src.core.scroller import InfiniteSnapScroller

# Configure structured logging (reads ENVIRONMENT and LOG_LEVEL from env)
configure_logging()

logger = get_logger(__name__)

DEMO_SECONDS = float(os.getenv("DEMO_SECONDS", "6"))
DEMO_FPS = float(os.getenv("DEMO_FPS", "60"))


class LoggingHost:
    """ItemHost that records positions instead of drawing anything."""

    def __init__(self) -> None:
        self.positions: dict[Any, float] = {}

    def attach_item(self, handle: Any) -> None:
        logger.debug("item_attached", item=handle)

    def set_item_size(self, handle: Any, width: float, height: float) -> None:
        pass

    def set_item_position(self, handle: Any, x: float) -> None:
        self.positions[handle] = x

    def dispose_item(self, handle: Any) -> None:
        self.positions.pop(handle, None)


async def main() -> None:
    """Run the demo session."""
    config = ScrollerConfig.from_env().with_changes(
        auto_advance_enabled=True, auto_advance_delay=1.0
    )
    host = LoggingHost()
    scroller: InfiniteSnapScroller[str] = InfiniteSnapScroller(host, config, name="demo")
    scroller.append_items(["red", "green", "blue", "yellow", "purple"])
    scroller.enable(width=320, height=180)

    frames = await run_frame_loop(
        scroller, fps=DEMO_FPS, max_frames=int(DEMO_SECONDS * DEMO_FPS)
    )
    logger.info(
        "demo_finished",
        frames=frames,
        current_index=scroller.current_index,
        positions=host.positions,
    )


if __name__ == "__main__":
    asyncio.run(main())
