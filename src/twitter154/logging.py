"""Structured logging with structlog."""

from __future__ import annotations

import logging
import sys
from functools import lru_cache
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

    from twitter154.settings import Settings


@lru_cache(maxsize=1)
def _configure_logging(*, is_production: bool, min_level: int) -> None:
    """Configure structlog for the library.

    Args:
        is_production: Use JSON output for production, colorized for dev.
        min_level: Lowest stdlib level that gets rendered.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if is_production:
        structlog.configure(
            processors=[
                *shared_processors,
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ],
            wrapper_class=structlog.make_filtering_bound_logger(min_level),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )
    else:
        structlog.configure(
            processors=[
                *shared_processors,
                structlog.dev.ConsoleRenderer(colors=True),
            ],
            wrapper_class=structlog.make_filtering_bound_logger(min_level),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
            cache_logger_on_first_use=True,
        )


def _min_level(log_level: str) -> int:
    if log_level == "silent":
        return logging.CRITICAL
    return logging.getLevelNamesMapping()[log_level]


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog from settings.

    Called when a client is built from the environment. Until then loggers
    use structlog's defaults, so importing the package never reads settings.

    Raises:
        Twitter154Error: CONFIGURATION if the environment is malformed.
    """
    from twitter154.settings import load_settings

    settings = settings or load_settings()
    _configure_logging(
        is_production=settings.is_production,
        min_level=_min_level(settings.log_level),
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """Get a logger for a specific module.

    Args:
        name: Logger name (typically module name like "twitter154.engine").

    Returns:
        Lazy structlog logger with service context; it picks up the
        configuration in force when it is first used.

    Example:
        >>> log = get_logger("twitter154.engine")
        >>> log.info("pagination_complete", path="user/followers", items=250)
    """
    return structlog.get_logger(service=name)
