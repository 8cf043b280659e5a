"""Access keys for Fastly Object Storage.

See https://developer.fastly.com/reference/api/services/resources/object-storage-access-keys/
for more information.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional

from pydantic import Field

from fastly_client.client import RequestOptions
from fastly_client.exceptions import InvalidPermissionError, NotOKError
from fastly_client.models import (
    FastlyModel,
    RequestInput,
    Timestamp,
    decode_as,
)
from fastly_client.utils import to_safe_url

if TYPE_CHECKING:
    from fastly_client.client import FastlyClient

__all__ = [
    "PERMISSIONS",
    "AccessKey",
    "AccessKeys",
    "CreateInput",
    "GetInput",
    "DeleteInput",
    "list_access_keys",
    "create_access_key",
    "get_access_key",
    "delete_access_key",
]

PERMISSIONS = frozenset(
    [
        "read-write-admin",
        "read-only-admin",
        "read-write-objects",
        "read-only-objects",
    ]
)
"""Permissions an access key may be granted."""

_ROOT = ("resources", "object-storage", "access-keys")


class AccessKey(FastlyModel):
    access_key_id: Optional[str] = Field(default=None, alias="access_key")
    """The public access key ID."""

    secret_key: Optional[str] = None
    """The secret part of the key. Only reported when a key is created."""

    description: Optional[str] = None
    permission: Optional[str] = None
    buckets: List[str] = Field(default_factory=list)
    """Buckets the key is restricted to; empty means every bucket."""

    created_at: Timestamp = None


class AccessKeys(FastlyModel):
    data: List[AccessKey] = Field(default_factory=list)
    meta: Dict[str, Any] = Field(default_factory=dict)


class CreateInput(RequestInput):
    required_fields = ("description", "permission")

    description: Optional[str] = Field(
        default=None, serialization_alias="description"
    )
    """A description of the access key (required)."""

    permission: Optional[str] = Field(
        default=None, serialization_alias="permission"
    )
    """One of `PERMISSIONS` (required)."""

    buckets: Optional[List[str]] = Field(
        default=None, serialization_alias="buckets"
    )
    """Restrict the key to these buckets."""


class GetInput(RequestInput):
    required_fields = ("access_key_id",)

    access_key_id: str = Field(default="", exclude=True)


class DeleteInput(RequestInput):
    required_fields = ("access_key_id",)

    access_key_id: str = Field(default="", exclude=True)


def list_access_keys(client: FastlyClient) -> AccessKeys:
    """List all access keys within object storage."""
    r = client.get(to_safe_url(*_ROOT))
    return decode_as(r, AccessKeys, "access keys json response")


def create_access_key(client: FastlyClient, i: CreateInput) -> AccessKey:
    """Create an access key. The response is the only place the secret key
    is ever reported.
    """
    i.check_required()
    if i.permission not in PERMISSIONS:
        raise InvalidPermissionError()

    r = client.post_json(to_safe_url(*_ROOT), i, RequestOptions.for_input(i))
    return decode_as(r, AccessKey, "access key json response")


def get_access_key(client: FastlyClient, i: GetInput) -> AccessKey:
    i.check_required()
    r = client.get(
        to_safe_url(*_ROOT, i.access_key_id), RequestOptions.for_input(i)
    )
    return decode_as(r, AccessKey, "access key json response")


def delete_access_key(client: FastlyClient, i: DeleteInput) -> None:
    """Delete an access key.

    Raises
    ------
    fastly_client.exceptions.NotOKError
        The API did not answer ``204 No Content``.
    """
    i.check_required()
    r = client.delete(
        to_safe_url(*_ROOT, i.access_key_id), RequestOptions.for_input(i)
    )
    if r.status_code != 204:
        raise NotOKError()
