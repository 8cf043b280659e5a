"""Custom VCL files of a service version.

See https://developer.fastly.com/reference/api/vcl-services/vcl/ for more
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
    "VCL",
    "ListVCLsInput",
    "GetVCLInput",
    "GetGeneratedVCLInput",
    "CreateVCLInput",
    "UpdateVCLInput",
    "ActivateVCLInput",
    "DeleteVCLInput",
    "list_vcls",
    "get_vcl",
    "get_generated_vcl",
    "create_vcl",
    "update_vcl",
    "activate_vcl",
    "delete_vcl",
]


class VCL(FastlyModel):
    """A custom (or generated) VCL file."""

    content: Optional[str] = None
    created_at: Timestamp = None
    deleted_at: Timestamp = None
    main: Optional[bool] = None
    name: Optional[str] = None
    service_id: Optional[str] = None
    service_version: Optional[int] = Field(default=None, alias="version")
    updated_at: Timestamp = None


class _VersionInput(RequestInput):
    required_fields = ("service_id", "service_version")

    service_id: str = Field(default="", exclude=True)
    """The ID of the service (required)."""

    service_version: int = Field(default=0, exclude=True)
    """The specific configuration version (required)."""


class _NamedVCLInput(RequestInput):
    required_fields = ("name", "service_id", "service_version")

    name: str = Field(default="", exclude=True)
    """The name of the VCL (required)."""

    service_id: str = Field(default="", exclude=True)
    service_version: int = Field(default=0, exclude=True)


class ListVCLsInput(_VersionInput):
    pass


class GetGeneratedVCLInput(_VersionInput):
    pass


class CreateVCLInput(_VersionInput):
    content: Optional[str] = Field(
        default=None, serialization_alias="content"
    )
    """The VCL code to be included."""

    main: Optional[bool] = Field(default=None, serialization_alias="main")
    """Set to true when this is the main VCL."""

    name: Optional[str] = Field(default=None, serialization_alias="name")


class GetVCLInput(_NamedVCLInput):
    pass


class UpdateVCLInput(_NamedVCLInput):
    content: Optional[str] = Field(
        default=None, serialization_alias="content"
    )

    new_name: Optional[str] = Field(default=None, serialization_alias="name")
    """Rename the VCL."""


class ActivateVCLInput(_NamedVCLInput):
    pass


class DeleteVCLInput(_NamedVCLInput):
    pass


def _path(service_id: str, service_version: int, *rest: str) -> str:
    return to_safe_url(
        "service", service_id, "version", service_version, *rest
    )


def list_vcls(client: FastlyClient, i: ListVCLsInput) -> List[VCL]:
    i.check_required()
    r = client.get(
        _path(i.service_id, i.service_version, "vcl"),
        RequestOptions.for_input(i),
    )
    return decode_as(r, List[VCL], "list VCLs response")


def get_vcl(client: FastlyClient, i: GetVCLInput) -> VCL:
    i.check_required()
    r = client.get(
        _path(i.service_id, i.service_version, "vcl", i.name),
        RequestOptions.for_input(i),
    )
    return decode_as(r, VCL, "get VCL response")


def get_generated_vcl(client: FastlyClient, i: GetGeneratedVCLInput) -> VCL:
    """Get the VCL Fastly generates from a version's configuration."""
    i.check_required()
    r = client.get(
        _path(i.service_id, i.service_version, "generated_vcl"),
        RequestOptions.for_input(i),
    )
    return decode_as(r, VCL, "get generated VCL response")


def create_vcl(client: FastlyClient, i: CreateVCLInput) -> VCL:
    i.check_required()
    r = client.post_form(
        _path(i.service_id, i.service_version, "vcl"),
        i,
        RequestOptions.for_input(i),
    )
    return decode_as(r, VCL, "create VCL response")


def update_vcl(client: FastlyClient, i: UpdateVCLInput) -> VCL:
    i.check_required()
    r = client.put_form(
        _path(i.service_id, i.service_version, "vcl", i.name),
        i,
        RequestOptions.for_input(i),
    )
    return decode_as(r, VCL, "update VCL response")


def activate_vcl(client: FastlyClient, i: ActivateVCLInput) -> VCL:
    """Mark a VCL as the main VCL of its version."""
    i.check_required()
    r = client.put(
        _path(i.service_id, i.service_version, "vcl", i.name, "main"),
        RequestOptions.for_input(i),
    )
    return decode_as(r, VCL, "activate VCL response")


def delete_vcl(client: FastlyClient, i: DeleteVCLInput) -> None:
    i.check_required()
    r = client.delete(
        _path(i.service_id, i.service_version, "vcl", i.name),
        RequestOptions.for_input(i),
    )
    check_status_ok(r, "delete VCL response")
