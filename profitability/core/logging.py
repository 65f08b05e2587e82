"""Logging configuration for the profitability engine.

Modules only call ``get_logger``; nothing is configured on import, so a host
application keeps its own logging setup. Standalone tools call
``configure_logging`` once to get console (or JSON) output, and a rotating
file when ``PROFITABILITY_LOG_FILE`` is set.
"""

from __future__ import annotations

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any

import structlog

# Namespace every engine logger lives under
PACKAGE_LOGGER = "profitability"

# Module-level state for idempotent initialization
_configured: bool = False


def configure_logging(
    level: str | None = None,
    json_output: bool | None = None,
    log_file: str | None = None,
) -> structlog.BoundLogger:
    """Configure structured logging for the engine.

    Handlers go on the ``profitability`` logger only; the root logger is left
    alone.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to settings,
            DEBUG when ``debug_mode`` is on.
        json_output: Render JSON instead of console lines. Defaults to settings.
        log_file: Rotating log file path. Defaults to settings (none).

    Returns:
        Configured logger instance.
    """
    global _configured

    if _configured:
        return structlog.get_logger(PACKAGE_LOGGER)

    from profitability.core.settings import get_settings

    settings = get_settings()
    log_level = (level or ("DEBUG" if settings.debug_mode else settings.log_level)).upper()
    numeric_level = getattr(logging, log_level, logging.INFO)
    if json_output is None:
        json_output = settings.log_json
    log_file = log_file or settings.log_file

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.handlers.RotatingFileHandler(
                log_file, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
            )
        )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(numeric_level)
    package_logger.propagate = False
    for handler in handlers:
        handler.setFormatter(logging.Formatter("%(message)s"))
        package_logger.addHandler(handler)

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    _configured = True
    return structlog.get_logger(PACKAGE_LOGGER)


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a logger instance, optionally bound to a module name.

    Output follows whatever structlog configuration the process has.
    """
    return structlog.get_logger(name)
