"""API response envelope guards and constructors.

An envelope is either ``{"success": True, "data": ..., "message"?: str}``
or ``{"success": False, "error": {"code": str, "message": str, "details"?: ...}}``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeGuard

from core.errors import SchemaValidationError
from guards.primitives import is_object
from guards.validation import SchemaCheck
from schemas.api import ApiErrorResponse, ApiSuccessResponse

_SUCCESS = SchemaCheck[ApiSuccessResponse]("ApiSuccessResponse", ApiSuccessResponse)
_ERROR = SchemaCheck[ApiErrorResponse]("ApiErrorResponse", ApiErrorResponse)

Envelope = Mapping[str, Any] | ApiSuccessResponse | ApiErrorResponse


def is_api_response(value: Any) -> TypeGuard[Mapping[str, Any]]:
    """True if value is a well-formed envelope.

    The success arm only needs a ``data`` key; its payload is not
    inspected. The error arm needs an ``error`` object with string
    ``code`` and ``message``.
    """
    if not is_object(value):
        return False

    success = value.get("success")
    if not isinstance(success, bool):
        return False

    if success:
        return "data" in value

    error = value.get("error")
    if not is_object(error):
        return False
    return isinstance(error.get("code"), str) and isinstance(error.get("message"), str)


def parse_api_response(value: Any) -> ApiSuccessResponse | ApiErrorResponse:
    """Validate an envelope and return the matching arm as a model.

    Raises:
        SchemaValidationError: If value is not a well-formed envelope
    """
    if not is_api_response(value):
        raise SchemaValidationError(
            "ApiResponse",
            [{"type": "envelope", "loc": (), "msg": "Input is not an API response envelope"}],
        )
    if value["success"]:
        return _SUCCESS.parse(value)
    return _ERROR.parse(value)


def _field(response: Envelope, name: str) -> Any:
    if isinstance(response, Mapping):
        return response.get(name)
    return getattr(response, name, None)


def is_api_success(
    response: Envelope,
) -> TypeGuard[Mapping[str, Any] | ApiSuccessResponse]:
    """Narrow an envelope already known to be well-formed to its success arm."""
    return _field(response, "success") is True


def is_api_error(
    response: Envelope,
) -> TypeGuard[Mapping[str, Any] | ApiErrorResponse]:
    """Narrow an envelope already known to be well-formed to its error arm."""
    return _field(response, "success") is False


def has_error_code(response: Envelope, code: str) -> bool:
    """True if an error envelope carries exactly ``code``."""
    return _field(_field(response, "error"), "code") == code


def create_success_response(data: Any, message: str | None = None) -> dict[str, Any]:
    """Build a success envelope. ``message`` is omitted unless non-empty."""
    response: dict[str, Any] = {"success": True, "data": data}
    if message:
        response["message"] = message
    return response


def create_error_response(
    code: str,
    message: str,
    details: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Build an error envelope. ``details`` is omitted unless given."""
    error: dict[str, Any] = {"code": code, "message": message}
    if details is not None:
        error["details"] = details
    return {"success": False, "error": error}
