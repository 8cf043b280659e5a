"""General settings of a service version (default host and TTLs).

See https://developer.fastly.com/reference/api/vcl-services/settings/ for
more information.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from pydantic import Field, NonNegativeInt

from fastly_client.client import RequestOptions
from fastly_client.models import FastlyModel, RequestInput, decode_as
from fastly_client.utils import to_safe_url

if TYPE_CHECKING:
    from fastly_client.client import FastlyClient

__all__ = [
    "Settings",
    "GetSettingsInput",
    "UpdateSettingsInput",
    "get_settings",
    "update_settings",
]


class Settings(FastlyModel):
    """Settings of a service version.

    The API reports these under dotted ``general.*`` keys.
    """

    default_host: Optional[str] = Field(
        default=None, alias="general.default_host"
    )
    default_ttl: Optional[NonNegativeInt] = Field(
        default=None, alias="general.default_ttl"
    )
    service_id: Optional[str] = None
    service_version: Optional[int] = Field(default=None, alias="version")
    stale_if_error: Optional[bool] = Field(
        default=None, alias="general.stale_if_error"
    )
    stale_if_error_ttl: Optional[NonNegativeInt] = Field(
        default=None, alias="general.stale_if_error_ttl"
    )


class GetSettingsInput(RequestInput):
    required_fields = ("service_id", "service_version")

    service_id: str = Field(default="", exclude=True)
    """The ID of the service (required)."""

    service_version: int = Field(default=0, exclude=True)
    """The specific configuration version (required)."""


class UpdateSettingsInput(RequestInput):
    required_fields = ("service_id", "service_version")

    service_id: str = Field(default="", exclude=True)
    service_version: int = Field(default=0, exclude=True)

    default_host: Optional[str] = Field(
        default=None, serialization_alias="general.default_host"
    )
    """The default host name for the version."""

    default_ttl: Optional[NonNegativeInt] = Field(
        default=None, serialization_alias="general.default_ttl"
    )
    """The default time-to-live (TTL) for the version, in seconds."""

    stale_if_error: Optional[bool] = Field(
        default=None, serialization_alias="general.stale_if_error"
    )
    """Serve a stale object if there is an error."""

    stale_if_error_ttl: Optional[NonNegativeInt] = Field(
        default=None, serialization_alias="general.stale_if_error_ttl"
    )
    """How long a stale object may be served on error, in seconds."""


def _path(service_id: str, service_version: int) -> str:
    return to_safe_url(
        "service", service_id, "version", service_version, "settings"
    )


def get_settings(client: FastlyClient, i: GetSettingsInput) -> Settings:
    i.check_required()
    r = client.get(
        _path(i.service_id, i.service_version), RequestOptions.for_input(i)
    )
    return decode_as(r, Settings, "get settings response")


def update_settings(client: FastlyClient, i: UpdateSettingsInput) -> Settings:
    i.check_required()
    r = client.put_form(
        _path(i.service_id, i.service_version),
        i,
        RequestOptions.for_input(i),
    )
    return decode_as(r, Settings, "update settings response")
