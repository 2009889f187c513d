"""
Structured logging setup.

Console output for local runs, JSON for anything shipping logs elsewhere.
"""

from __future__ import annotations

import logging
import sys

import structlog
from structlog.stdlib import LoggerFactory

from core.config import get_settings


def setup_logging(log_level: str | None = None, fmt: str | None = None) -> None:
    """
    Configure structlog on top of stdlib logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL);
            defaults to the settings, with verbosity applied
        fmt: "console" for human-readable output, "json" for one JSON object
            per line; defaults to the settings
    """
    settings = get_settings()
    log_level = log_level or settings.effective_log_level
    fmt = fmt or settings.log_format

    renderer = (
        structlog.processors.JSONRenderer()
        if fmt == "json"
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper(), logging.INFO),
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance (usually ``get_logger(__name__)``)."""
    return structlog.get_logger(name)
