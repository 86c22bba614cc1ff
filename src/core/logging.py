"""Structured logging for the scroller, built on structlog.

Hosts call ``configure_logging`` once; core modules log through
``get_logger``. Every call into an ``InfiniteSnapScroller`` runs inside
``log_context(scroller=<name>)``, so lines from several carousels on one
screen can be told apart.

Usage:
    from src.core.logging import configure_logging, get_logger, log_context

    configure_logging(development=True)

    logger = get_logger(__name__)
    with log_context(scroller="hero"):
        logger.debug("snap_completed", current_index=3)
"""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from os import getenv
from typing import Any, cast

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

# Positions and velocities are logged every frame; sub-millipixel digits are noise
FLOAT_PRECISION = 3


def round_floats(_logger: WrappedLogger, _method: str, event_dict: EventDict) -> EventDict:
    """Round float values so per-frame motion logs stay readable."""
    for key, value in event_dict.items():
        if isinstance(value, float):
            event_dict[key] = round(value, FLOAT_PRECISION)
    return event_dict


def configure_logging(
    development: bool | None = None,
    log_level: str | None = None,
) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        development: Console renderer if True, JSON lines if False. If None,
            ``ENVIRONMENT=production`` selects JSON.
        log_level: Level name; if None, read from ``LOG_LEVEL`` (default
            INFO). Unknown names fall back to INFO.
    """
    if development is None:
        development = getenv("ENVIRONMENT", "development").lower() != "production"
    if log_level is None:
        log_level = getenv("LOG_LEVEL", "INFO")
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        round_floats,
    ]
    renderer: Processor
    if development:
        renderer = structlog.dev.ConsoleRenderer(colors=True)
    else:
        shared_processors.append(structlog.processors.format_exc_info)
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # force=True overrides any configuration the host already installed
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=numeric_level,
        force=True,
    )
    logging.getLogger().setLevel(numeric_level)

    # asyncio is chatty at DEBUG when the frame loop runs
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger, typically with ``__name__``."""
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))


@contextmanager
def log_context(**values: Any) -> Iterator[None]:
    """Bind context variables for the duration of a block.

    Previous values are restored on exit, so nested blocks (a touch handler
    calling the pointer handlers, one scroller driving another) unwind
    cleanly.

    Example:
        with log_context(scroller="hero"):
            logger.info("layout_computed")  # includes scroller="hero"
    """
    tokens = structlog.contextvars.bind_contextvars(**values)
    try:
        yield
    finally:
        structlog.contextvars.reset_contextvars(**tokens)
