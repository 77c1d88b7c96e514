"""Structured logging setup for typeschema.

Modules log through ``structlog.get_logger(__name__)``. Applications (and the
CLI) call :func:`configure_logging` once at startup to choose level and
rendering.
"""

from __future__ import annotations

import logging
from typing import Any

import structlog

from typeschema_core.config import get_settings


def configure_logging(
    *,
    log_level: str | None = None,
    json_format: bool | None = None,
    add_timestamp: bool = True,
) -> None:
    """Configure structured logging for typeschema.

    Args:
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to the ``TYPESCHEMA_LOG_LEVEL`` setting.
        json_format: If True, output JSON format. If False, output human-readable.
            Defaults to the ``TYPESCHEMA_JSON_LOGS`` setting.
        add_timestamp: If True, add ISO timestamp to log entries.

    Example:
        >>> configure_logging(log_level="DEBUG", json_format=False)
    """
    settings = get_settings()
    level_name = (log_level or settings.log_level).upper()
    use_json = settings.json_logs if json_format is None else json_format

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if add_timestamp:
        processors.insert(1, structlog.processors.TimeStamper(fmt="iso"))

    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name),
    )
    logging.getLogger("typeschema_core").setLevel(getattr(logging, level_name))
