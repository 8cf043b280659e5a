"""Conditions attached to a service version.

See https://developer.fastly.com/reference/api/vcl-services/condition/ for
more information.
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
    "Condition",
    "ListConditionsInput",
    "CreateConditionInput",
    "GetConditionInput",
    "UpdateConditionInput",
    "DeleteConditionInput",
    "list_conditions",
    "create_condition",
    "get_condition",
    "update_condition",
    "delete_condition",
]


class Condition(FastlyModel):
    """A condition response from the Fastly API."""

    comment: Optional[str] = None
    created_at: Timestamp = None
    deleted_at: Timestamp = None
    name: Optional[str] = None
    priority: Optional[int] = None
    service_id: Optional[str] = None
    service_version: Optional[int] = Field(default=None, alias="version")
    statement: Optional[str] = None
    type: Optional[str] = None
    updated_at: Timestamp = None


class ListConditionsInput(RequestInput):
    required_fields = ("service_id", "service_version")

    service_id: str = Field(default="", exclude=True)
    """The ID of the service (required)."""

    service_version: int = Field(default=0, exclude=True)
    """The specific configuration version (required)."""


class CreateConditionInput(RequestInput):
    required_fields = ("service_id", "service_version")

    service_id: str = Field(default="", exclude=True)
    """The ID of the service (required)."""

    service_version: int = Field(default=0, exclude=True)
    """The specific configuration version (required)."""

    name: Optional[str] = Field(default=None, serialization_alias="name")
    """The name of the condition."""

    priority: Optional[int] = Field(
        default=None, serialization_alias="priority"
    )
    """Execution order; lower numbers execute first."""

    statement: Optional[str] = Field(
        default=None, serialization_alias="statement"
    )
    """A VCL conditional expression deciding whether the condition is
    met.
    """

    type: Optional[str] = Field(default=None, serialization_alias="type")
    """``REQUEST``, ``CACHE``, ``RESPONSE`` or ``PREFETCH``."""


class GetConditionInput(RequestInput):
    required_fields = ("name", "service_id", "service_version")

    name: str = Field(default="", exclude=True)
    """The name of the condition to fetch (required)."""

    service_id: str = Field(default="", exclude=True)
    service_version: int = Field(default=0, exclude=True)


class UpdateConditionInput(RequestInput):
    required_fields = ("name", "service_id", "service_version")

    name: str = Field(default="", exclude=True)
    """The name of the condition to update (required)."""

    service_id: str = Field(default="", exclude=True)
    service_version: int = Field(default=0, exclude=True)

    comment: Optional[str] = Field(
        default=None, serialization_alias="comment"
    )
    """A freeform descriptive note."""

    priority: Optional[int] = Field(
        default=None, serialization_alias="priority"
    )
    statement: Optional[str] = Field(
        default=None, serialization_alias="statement"
    )
    type: Optional[str] = Field(default=None, serialization_alias="type")


class DeleteConditionInput(RequestInput):
    required_fields = ("name", "service_id", "service_version")

    name: str = Field(default="", exclude=True)
    """The name of the condition to delete (required)."""

    service_id: str = Field(default="", exclude=True)
    service_version: int = Field(default=0, exclude=True)


def _path(service_id: str, service_version: int, *rest: str) -> str:
    return to_safe_url(
        "service", service_id, "version", service_version, "condition", *rest
    )


def list_conditions(
    client: FastlyClient, i: ListConditionsInput
) -> List[Condition]:
    """List all conditions of a service version."""
    i.check_required()
    r = client.get(
        _path(i.service_id, i.service_version), RequestOptions.for_input(i)
    )
    return decode_as(r, List[Condition], "list conditions response")


def create_condition(
    client: FastlyClient, i: CreateConditionInput
) -> Condition:
    i.check_required()
    r = client.post_form(
        _path(i.service_id, i.service_version),
        i,
        RequestOptions.for_input(i),
    )
    return decode_as(r, Condition, "create condition response")


def get_condition(client: FastlyClient, i: GetConditionInput) -> Condition:
    i.check_required()
    r = client.get(
        _path(i.service_id, i.service_version, i.name),
        RequestOptions.for_input(i),
    )
    return decode_as(r, Condition, "get condition response")


def update_condition(
    client: FastlyClient, i: UpdateConditionInput
) -> Condition:
    i.check_required()
    r = client.put_form(
        _path(i.service_id, i.service_version, i.name),
        i,
        RequestOptions.for_input(i),
    )
    return decode_as(r, Condition, "update condition response")


def delete_condition(client: FastlyClient, i: DeleteConditionInput) -> None:
    """Delete a condition.

    Raises
    ------
    fastly_client.exceptions.NotOKError
        The API did not report an ``ok`` status.
    """
    i.check_required()
    r = client.delete(
        _path(i.service_id, i.service_version, i.name),
        RequestOptions.for_input(i),
    )
    check_status_ok(r, "delete condition response")
