"""Core infrastructure: config, logging, and exception types."""

from core.config import Settings, get_settings, load_settings
from core.errors import ConfigValidationError, SchemaValidationError
from core.logging import get_logger, setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "load_settings",
    "ConfigValidationError",
    "SchemaValidationError",
    "get_logger",
    "setup_logging",
]
