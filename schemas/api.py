"""API response envelope schemas.

Every API response is one of two arms keyed by the boolean ``success``.
"""

from typing import Any, Literal

from .base import BaseSchema, Text


class ApiErrorDetail(BaseSchema):
    """Structured error carried by the error arm."""

    code: Text
    message: Text
    details: Any = None


class ApiSuccessResponse(BaseSchema):
    """Success arm: payload plus optional message.

    ``data`` must be present but its shape is the caller's concern.
    """

    success: Literal[True]
    data: Any
    message: Text | None = None


class ApiErrorResponse(BaseSchema):
    """Error arm."""

    success: Literal[False]
    error: ApiErrorDetail


ApiResponse = ApiSuccessResponse | ApiErrorResponse
