"""Exception types raised at the schema boundary."""

from __future__ import annotations

from typing import Any


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.errors = errors or []


class SchemaValidationError(ValueError):
    """Raised by parse helpers when a payload does not conform to a schema.

    Guards report the same condition as ``False``; this carries the
    field-by-field reasons for callers that need them.
    """

    def __init__(self, schema: str, errors: list[dict[str, Any]] | None = None):
        self.schema = schema
        self.errors = errors or []
        super().__init__(f"Value does not conform to {schema} ({len(self.errors)} errors)")
