"""Structured logging for stack_navigator.

Events are snake_case names with key-value context, e.g.
``logger.debug("context_updated", message_id=..., changes=...)``. They are
rendered for the console by default, or as one JSON object per line.
"""

import logging
import sys
from typing import Any

import structlog

__all__ = [
    "configure_logging",
    "get_logger",
]

# SDK clients used by the recommendation providers log every request at INFO
QUIET_LOGGERS = ("httpx", "httpcore", "openai", "anthropic")


def _processors(add_timestamp: bool) -> list[Any]:
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if add_timestamp:
        processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))
    return processors


def _renderers(json_output: bool) -> list[Any]:
    if json_output:
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [
        structlog.dev.ConsoleRenderer(
            colors=sys.stdout.isatty(),
            exception_formatter=structlog.dev.plain_traceback,
        )
    ]


def configure_logging(
    level: int = logging.INFO,
    json_output: bool = False,
    add_timestamp: bool = True,
    force: bool = True,
) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        level: Root logging level (default: INFO)
        json_output: Render JSON lines instead of console output
        add_timestamp: Prefix entries with an ISO timestamp
        force: Replace existing root handlers, including the import-time
            default installed by this module
    """
    structlog.configure(
        processors=_processors(add_timestamp) + _renderers(json_output),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level, force=force)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger, usually for ``__name__``."""
    return structlog.get_logger(name)


# Leaves handlers an application installed before importing us alone
configure_logging(force=False)
