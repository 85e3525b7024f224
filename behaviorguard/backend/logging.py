"""Structured logging with structlog.

Production emits one JSON object per line on stdout so the hosting
platform can index evaluations; development uses the colorized console.
"""

from __future__ import annotations

import logging
import sys
from functools import lru_cache
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "silent": logging.CRITICAL,
}


@lru_cache(maxsize=1)
def _configure_logging(*, is_production: bool, log_level: str) -> None:
    """Configure structlog for the service.

    Args:
        is_production: Use JSON output for production, colorized for dev.
        log_level: One of the ``LOG_LEVEL`` setting values.
    """
    min_level = _LEVELS[log_level]

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
            logger_factory=structlog.PrintLoggerFactory(),
            cache_logger_on_first_use=True,
        )


def get_logger(name: str) -> FilteringBoundLogger:
    """Get a logger bound to a module/service name.

    Example:
        >>> log = get_logger("behaviorguard.backend.app")
        >>> log.info("behavior_assessed", risk_score=65, valid=False)
    """
    from behaviorguard.backend.settings import get_settings

    settings = get_settings()
    _configure_logging(is_production=settings.is_production, log_level=settings.log_level)

    return structlog.get_logger(service=name)
