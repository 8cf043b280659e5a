"""Domain availability status checks.

See https://developer.fastly.com/reference/api/domain-management/domain-research/
for more information.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Union

from pydantic import Field

from fastly_client.client import RequestOptions
from fastly_client.models import FastlyModel, RequestInput, decode_as
from fastly_client.utils import to_safe_url

if TYPE_CHECKING:
    from fastly_client.client import FastlyClient

__all__ = ["Scope", "Offer", "Status", "GetInput", "get"]


class Scope(str, Enum):
    """Depth of the availability check."""

    ESTIMATE = "estimate"
    """Check DNS and aftermarket availability only. Estimates include
    aftermarket offers.
    """


class Offer(FastlyModel):
    """An aftermarket offer for a domain."""

    vendor: Optional[str] = None
    currency: Optional[str] = None
    price: Optional[str] = None


class Status(FastlyModel):
    """The availability status of a domain."""

    domain: Optional[str] = None
    """The domain that was checked."""

    zone: Optional[str] = None
    """The zone (public suffix) of the domain, such as ``com``."""

    status: Optional[str] = None
    """Space-separated status tokens, such as ``undelegated inactive``."""

    scope: Union[Scope, str, None] = Field(
        default=None, union_mode="left_to_right"
    )
    """Set when the check was an estimate. Scopes this client does not know
    are kept as plain strings.
    """

    tags: Optional[str] = None
    """Space-separated descriptive tags of the zone."""

    offers: List[Offer] = Field(default_factory=list)
    """Aftermarket offers, only reported by estimates."""


class GetInput(RequestInput):
    required_fields = ("domain",)

    domain: str = Field(default="", serialization_alias="domain")
    """The domain name to check (required)."""

    scope: Optional[Scope] = Field(default=None, serialization_alias="scope")
    """Leave unset for a precise check; `Scope.ESTIMATE` for an estimate."""


def get(client: FastlyClient, i: GetInput) -> Status:
    """Check the availability status of a domain."""
    i.check_required()

    options = RequestOptions.for_input(i)
    options.params.update(i.encode())

    r = client.get(to_safe_url("domains", "v1", "tools", "status"), options)
    return decode_as(r, Status, "response")
