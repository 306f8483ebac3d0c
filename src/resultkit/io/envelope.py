"""Envelope adapter: Result ⇄ plain mapping for API and storage boundaries.

The envelope is the untyped shape a Result takes outside Python:

    {"status": "success", "data": <value>}
    {"status": "error", "error": <payload>}

`from_envelope` is the validating entry point for foreign data. Inside the
library a Result is always well formed, so tolerance stops here.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from resultkit.core.result import Result, error, success
from resultkit.foundation.errors import JsonDict


class SuccessEnvelope(BaseModel):
    """Success variant of the envelope."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    status: Literal["success"]
    data: Any


class ErrorEnvelope(BaseModel):
    """Error variant of the envelope. The payload must be present and not null."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    status: Literal["error"]
    error: Any

    @field_validator("error")
    @classmethod
    def _not_null(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("error payload must not be null")
        return v


Envelope = Annotated[Union[SuccessEnvelope, ErrorEnvelope], Field(discriminator="status")]

_ADAPTER: TypeAdapter[SuccessEnvelope | ErrorEnvelope] = TypeAdapter(Envelope)


def to_envelope(result: Result[Any, Any]) -> JsonDict:
    """Render a Result as an envelope mapping.

    Exception payloads become {"type": <class name>, "message": str(exc)}.
    """
    if result.is_success():
        return {"status": "success", "data": result.payload}
    payload = result.payload
    if isinstance(payload, BaseException):
        payload = {"type": type(payload).__name__, "message": str(payload)}
    return {"status": "error", "error": payload}


def from_envelope(data: Mapping[str, Any]) -> Result[Any, Any]:
    """Validate an envelope mapping and build the matching Result.

    Raises:
        pydantic.ValidationError: Missing or unknown status, missing payload,
            extra keys, or a null error payload
    """
    match _ADAPTER.validate_python(data):
        case SuccessEnvelope(data=value):
            return success(value)
        case ErrorEnvelope(error=err):
            return error(err)
    raise AssertionError("unreachable")  # pragma: no cover
