"""Structured logging setup using structlog.

Queries run concurrently, one asyncio task each; ``bind_query_context``
tags every event logged inside a task with the query it belongs to.
"""

from __future__ import annotations

import logging
import sys

import structlog

from alertmanager_ds.core.config import get_settings

_TRANSPORT_LOGGERS = ("httpx", "httpcore")


def _renderer(log_format: str) -> structlog.types.Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def _set_transport_level(log_level: int) -> None:
    """httpx logs every request at INFO; only let it through when debugging."""
    transport_level = logging.DEBUG if log_level <= logging.DEBUG else logging.WARNING
    for name in _TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)


def bind_query_context(ref_id: str, **extra: str) -> None:
    """Attach ``ref_id`` (and *extra*) to all events of the current task."""
    structlog.contextvars.bind_contextvars(ref_id=ref_id, **extra)


def setup_logging(level: str | None = None, fmt: str | None = None) -> None:
    """Route structlog through a single stderr handler on the root logger.

    Args:
        level: Log level override (e.g. "DEBUG"). Uses config if None.
        fmt: Renderer override ("json" or "console"). Uses config if None.
    """
    cfg = get_settings().logging
    log_level = getattr(logging, (level or cfg.level).upper(), logging.INFO)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(fmt or cfg.format),
        ],
    ))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)
    _set_transport_level(log_level)
