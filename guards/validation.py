"""Schema checks shared by the entity guards and boundary parsers."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

import structlog
from pydantic import TypeAdapter, ValidationError

from core.config import get_settings
from core.errors import SchemaValidationError
from guards.primitives import is_object, within_depth

logger = structlog.get_logger(__name__)

T = TypeVar("T")

MAX_NESTING_DEPTH = 64


class SchemaCheck(Generic[T]):
    """A named schema that can answer "does this conform?" or parse into a model.

    Both paths reject non-objects and over-deep or cyclic input before the
    schema itself is consulted. The verdict depends only on the value:
    nothing here reads settings, the environment or files.
    """

    def __init__(self, name: str, schema: Any, max_depth: int = MAX_NESTING_DEPTH) -> None:
        if max_depth < 1:
            raise ValueError(f"max_depth must be >= 1, got {max_depth}")
        self.name = name
        self.max_depth = max_depth
        self._adapter: TypeAdapter[T] = TypeAdapter(schema)

    def _shape_error(self, value: Any) -> dict[str, Any] | None:
        if not is_object(value):
            return {
                "type": "object_type",
                "loc": (),
                "msg": f"Input should be an object, got {type(value).__name__}",
            }
        if not within_depth(value, self.max_depth):
            return {
                "type": "nesting_depth",
                "loc": (),
                "msg": f"Input is nested deeper than {self.max_depth} levels or is cyclic",
            }
        return None

    def conforms(self, value: Any) -> bool:
        """True if value satisfies the schema. Never raises."""
        if self._shape_error(value) is not None:
            return False
        try:
            self._adapter.validate_python(value)
        except ValidationError:
            return False
        return True

    def parse(self, value: Any) -> T:
        """Validate and return the model, with timestamps normalized to UTC.

        Raises:
            SchemaValidationError: If value does not satisfy the schema
        """
        shape_error = self._shape_error(value)
        if shape_error is not None:
            self._log_rejection(1)
            raise SchemaValidationError(self.name, [shape_error])

        try:
            return self._adapter.validate_python(value)
        except ValidationError as e:
            errors = e.errors(include_input=False, include_url=False)
            self._log_rejection(len(errors))
            raise SchemaValidationError(self.name, errors) from e

    def _log_rejection(self, error_count: int) -> None:
        if get_settings().log_rejections:
            logger.debug("schema_rejected", schema=self.name, error_count=error_count)
