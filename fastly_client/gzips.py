"""Gzip compression configurations of a service version.

See https://developer.fastly.com/reference/api/vcl-services/gzip/ for more
information.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from pydantic import Field

from fastly_client.client import RequestOptions
from fastly_client.models import (
    FastlyModel,
    RequestInput,
    Timestamp,
    check_status_ok,
    decode_as,
)
from fastly_client.utils import to_safe_url

if TYPE_CHECKING:
    from fastly_client.client import FastlyClient

__all__ = [
    "Gzip",
    "ListGzipsInput",
    "CreateGzipInput",
    "GetGzipInput",
    "UpdateGzipInput",
    "DeleteGzipInput",
    "list_gzips",
    "create_gzip",
    "get_gzip",
    "update_gzip",
    "delete_gzip",
]


class Gzip(FastlyModel):
    """A gzip configuration."""

    cache_condition: Optional[str] = None
    content_types: Optional[str] = None
    created_at: Timestamp = None
    deleted_at: Timestamp = None
    extensions: Optional[str] = None
    name: Optional[str] = None
    service_id: Optional[str] = None
    service_version: Optional[int] = Field(default=None, alias="version")
    updated_at: Timestamp = None


class ListGzipsInput(RequestInput):
    required_fields = ("service_id", "service_version")

    service_id: str = Field(default="", exclude=True)
    service_version: int = Field(default=0, exclude=True)


class CreateGzipInput(RequestInput):
    required_fields = ("service_id", "service_version")

    service_id: str = Field(default="", exclude=True)
    service_version: int = Field(default=0, exclude=True)

    cache_condition: Optional[str] = Field(
        default=None, serialization_alias="cache_condition"
    )
    """Name of the cache condition controlling when this configuration
    applies.
    """

    content_types: Optional[str] = Field(
        default=None, serialization_alias="content_types"
    )
    """Space-separated list of content types to compress."""

    extensions: Optional[str] = Field(
        default=None, serialization_alias="extensions"
    )
    """Space-separated list of file extensions to compress."""

    name: Optional[str] = Field(default=None, serialization_alias="name")


class GetGzipInput(RequestInput):
    required_fields = ("name", "service_id", "service_version")

    name: str = Field(default="", exclude=True)
    service_id: str = Field(default="", exclude=True)
    service_version: int = Field(default=0, exclude=True)


class UpdateGzipInput(RequestInput):
    required_fields = ("name", "service_id", "service_version")

    name: str = Field(default="", exclude=True)
    """The name of the gzip configuration to update (required)."""

    service_id: str = Field(default="", exclude=True)
    service_version: int = Field(default=0, exclude=True)

    cache_condition: Optional[str] = Field(
        default=None, serialization_alias="cache_condition"
    )
    content_types: Optional[str] = Field(
        default=None, serialization_alias="content_types"
    )
    extensions: Optional[str] = Field(
        default=None, serialization_alias="extensions"
    )
    new_name: Optional[str] = Field(default=None, serialization_alias="name")


class DeleteGzipInput(RequestInput):
    required_fields = ("name", "service_id", "service_version")

    name: str = Field(default="", exclude=True)
    service_id: str = Field(default="", exclude=True)
    service_version: int = Field(default=0, exclude=True)


def _path(service_id: str, service_version: int, *rest: str) -> str:
    return to_safe_url(
        "service", service_id, "version", service_version, "gzip", *rest
    )


def list_gzips(client: FastlyClient, i: ListGzipsInput) -> List[Gzip]:
    i.check_required()
    r = client.get(
        _path(i.service_id, i.service_version), RequestOptions.for_input(i)
    )
    return decode_as(r, List[Gzip], "list gzips response")


def create_gzip(client: FastlyClient, i: CreateGzipInput) -> Gzip:
    i.check_required()
    r = client.post_form(
        _path(i.service_id, i.service_version),
        i,
        RequestOptions.for_input(i),
    )
    return decode_as(r, Gzip, "create gzip response")


def get_gzip(client: FastlyClient, i: GetGzipInput) -> Gzip:
    i.check_required()
    r = client.get(
        _path(i.service_id, i.service_version, i.name),
        RequestOptions.for_input(i),
    )
    return decode_as(r, Gzip, "get gzip response")


def update_gzip(client: FastlyClient, i: UpdateGzipInput) -> Gzip:
    i.check_required()
    r = client.put_form(
        _path(i.service_id, i.service_version, i.name),
        i,
        RequestOptions.for_input(i),
    )
    return decode_as(r, Gzip, "update gzip response")


def delete_gzip(client: FastlyClient, i: DeleteGzipInput) -> None:
    i.check_required()
    r = client.delete(
        _path(i.service_id, i.service_version, i.name),
        RequestOptions.for_input(i),
    )
    check_status_ok(r, "delete gzip response")
