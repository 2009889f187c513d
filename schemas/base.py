"""Base schema utilities and common field types."""

from datetime import datetime
from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    PlainSerializer,
    PlainValidator,
    Strict,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
)

from guards.primitives import (
    is_date_like,
    is_valid_email,
    is_valid_url,
    to_datetime,
    to_iso_string,
)


class BaseSchema(BaseModel):
    """Base schema with common configuration.

    Documents are read-only value objects produced elsewhere, so models
    are frozen and unknown keys are ignored.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


def _coerce_date_like(value: Any) -> datetime:
    if not is_date_like(value):
        raise ValueError("expected a datetime or a timestamp object")
    # to_datetime() runs the timestamp object's own converter, which may fail any way.
    try:
        return to_datetime(value)
    except Exception as e:
        raise ValueError(f"timestamp could not be converted: {e!r}") from e


def _require_url(value: str) -> str:
    if not is_valid_url(value):
        raise ValueError("expected an http(s) URL")
    return value


def _require_email(value: str) -> str:
    if not is_valid_email(value):
        raise ValueError("expected an email address")
    return value


# Common field types
#
# Numbers never accept bools, strings never accept numbers: the input is
# untyped document data, so nothing is coerced except timestamps.
Text = StrictStr
Integer = StrictInt
Number = StrictFloat  # ints are accepted and widened
Flag = StrictBool
StringList = Annotated[list[StrictStr], Strict()]
DateLike = Annotated[
    datetime,
    PlainValidator(_coerce_date_like),
    PlainSerializer(to_iso_string, return_type=str, when_used="json"),
]
HttpUrl = Annotated[StrictStr, AfterValidator(_require_url)]
EmailAddress = Annotated[StrictStr, AfterValidator(_require_email)]
JsonObject = Annotated[dict[str, Any], Strict()]
