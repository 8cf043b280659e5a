"""Pydantic base models shared by the resource modules.

Operation inputs subclass `RequestInput`. Each field declares how it goes
over the wire:

- Path identifiers and client-side options are declared with
  ``exclude=True`` and never serialized.
- Form and query fields declare their wire key with ``serialization_alias``
  and default to `None`; `None` means "absent" and the field is omitted,
  while an explicit zero value (``priority=0``) is sent.

API responses are decoded into `FastlyModel` subclasses, which declare the
wire key of each field as its ``alias``.
"""

from __future__ import annotations

import datetime
from typing import Annotated, Any, ClassVar, Dict, Optional, Tuple, Type

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationInfo,
    field_validator,
)
from pydantic import ValidationError as PydanticValidationError

from fastly_client.exceptions import (
    FastlyDecodeError,
    FastlyValidationError,
    MissingAccessKeyIDError,
    MissingDescriptionError,
    MissingDomainError,
    MissingKeyError,
    MissingKeysError,
    MissingNameError,
    MissingPermissionError,
    MissingServiceIDError,
    MissingServiceVersionError,
    MissingURLError,
    NotOKError,
)
from fastly_client.utils import decode_body, format_param, parse_utc_datetime

__all__ = [
    "Timestamp",
    "MISSING_FIELD_ERRORS",
    "RequestInput",
    "FastlyModel",
    "StatusResponse",
    "decode_as",
    "check_status_ok",
]

Timestamp = Annotated[
    Optional[datetime.datetime], BeforeValidator(parse_utc_datetime)
]
"""An optional API timestamp, normalized to UTC."""

MISSING_FIELD_ERRORS: Dict[str, Type[FastlyValidationError]] = {
    "access_key_id": MissingAccessKeyIDError,
    "description": MissingDescriptionError,
    "domain": MissingDomainError,
    "key": MissingKeyError,
    "keys": MissingKeysError,
    "name": MissingNameError,
    "permission": MissingPermissionError,
    "service_id": MissingServiceIDError,
    "service_version": MissingServiceVersionError,
    "url": MissingURLError,
}
"""Exception raised for each required input field that is left empty."""


class RequestInput(BaseModel):
    """Base class for operation inputs."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    required_fields: ClassVar[Tuple[str, ...]] = ()
    """Fields that must be non-empty (or non-zero), in the order they are
    checked.
    """

    timeout: Optional[float] = Field(default=None, exclude=True)
    """Seconds to wait for the API before giving up on the request."""

    def check_required(self) -> None:
        """Raise the matching ``Missing*Error`` for the first empty required
        field.
        """
        for field in self.required_fields:
            if not getattr(self, field):
                raise MISSING_FIELD_ERRORS[field]()

    def payload(self) -> Dict[str, Any]:
        """Serializable fields that are present, keyed by wire name."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def encode(self) -> Dict[str, str]:
        """Present fields as form or query string values."""
        return {
            key: format_param(value) for key, value in self.payload().items()
        }


class FastlyModel(BaseModel):
    """Base class for API response entities.

    Every field is optional because the API may omit any of them. A JSON
    ``null`` decodes to the field default, so collections stay empty rather
    than `None`.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def null_to_default(cls, v: Any, info: ValidationInfo) -> Any:
        if v is None and info.field_name is not None:
            return cls.model_fields[info.field_name].get_default(
                call_default_factory=True
            )
        return v


class StatusResponse(FastlyModel):
    """The status payload returned by delete operations."""

    status: Optional[str] = None

    msg: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"


def decode_as(response: Any, type_: Any, step: str) -> Any:
    """Decode a response body and validate it as ``type_``.

    Parameters
    ----------
    response : `requests.Response`
        The API response.
    type_
        A model class or a typing construct such as ``List[Condition]``.
    step : str
        Name of the decoding step, used in error messages.

    Raises
    ------
    fastly_client.exceptions.FastlyDecodeError
        The body is malformed or does not match ``type_``.
    """
    payload = decode_body(response, step)
    try:
        return TypeAdapter(type_).validate_python(payload)
    except PydanticValidationError as e:
        raise FastlyDecodeError(
            "error decoding {0}: {1}".format(step, e)
        ) from e


def check_status_ok(response: Any, step: str) -> None:
    """Decode a status payload and require it to be ``"ok"``.

    Raises
    ------
    fastly_client.exceptions.NotOKError
        The payload's status is missing or not ``"ok"``.
    fastly_client.exceptions.FastlyDecodeError
        The body is not a status payload.
    """
    status = decode_as(response, StatusResponse, step)
    if not status.ok:
        raise NotOKError()
