"""Historical stats and usage.

See https://developer.fastly.com/reference/api/metrics-stats/historical-stats/
for more information.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional

from pydantic import ConfigDict, Field

from fastly_client.client import RequestOptions
from fastly_client.models import FastlyModel, RequestInput, decode_as
from fastly_client.utils import decode_body, to_safe_url

if TYPE_CHECKING:
    from fastly_client.client import FastlyClient

__all__ = [
    "Stats",
    "StatsResponse",
    "StatsFieldResponse",
    "RegionsResponse",
    "Usage",
    "UsageResponse",
    "UsageByServiceResponse",
    "GetStatsInput",
    "GetUsageInput",
    "get_stats",
    "get_stats_field",
    "get_stats_json",
    "get_regions",
    "get_usage",
    "get_usage_by_service",
]


class Stats(FastlyModel):
    """Aggregated stats for one time bucket.

    The API reports many more metrics than are declared here; undeclared
    metrics are kept as extra attributes.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    service_id: Optional[str] = None
    start_time: Optional[int] = None
    requests: Optional[int] = None
    hits: Optional[int] = None
    hits_time: Optional[float] = None
    miss: Optional[int] = None
    miss_time: Optional[float] = None
    pass_: Optional[int] = Field(default=None, alias="pass")
    pass_time: Optional[float] = None
    synth: Optional[int] = None
    errors: Optional[int] = None
    restarts: Optional[int] = None
    hit_ratio: Optional[float] = None
    bandwidth: Optional[int] = None
    body_size: Optional[int] = None
    header_size: Optional[int] = None
    req_body_bytes: Optional[int] = None
    req_header_bytes: Optional[int] = None
    resp_body_bytes: Optional[int] = None
    resp_header_bytes: Optional[int] = None
    edge_requests: Optional[int] = None
    edge_resp_body_bytes: Optional[int] = None
    edge_resp_header_bytes: Optional[int] = None
    origin_fetches: Optional[int] = None
    shield: Optional[int] = None
    status_1xx: Optional[int] = None
    status_2xx: Optional[int] = None
    status_3xx: Optional[int] = None
    status_4xx: Optional[int] = None
    status_5xx: Optional[int] = None
    status_200: Optional[int] = None
    status_204: Optional[int] = None
    status_301: Optional[int] = None
    status_302: Optional[int] = None
    status_304: Optional[int] = None
    status_400: Optional[int] = None
    status_401: Optional[int] = None
    status_403: Optional[int] = None
    status_404: Optional[int] = None
    status_500: Optional[int] = None
    status_503: Optional[int] = None
    tls: Optional[int] = None
    http2: Optional[int] = None
    ipv6: Optional[int] = None
    video: Optional[int] = None
    pci: Optional[int] = None


class StatsResponse(FastlyModel):
    """Stats of one service (or of all services, aggregated)."""

    data: List[Stats] = Field(default_factory=list)
    message: Optional[str] = None
    meta: Dict[str, Any] = Field(default_factory=dict)
    status: Optional[str] = None


class StatsFieldResponse(FastlyModel):
    """A single stats field for every service, keyed by service ID."""

    data: Dict[str, List[Stats]] = Field(default_factory=dict)
    message: Optional[str] = None
    meta: Dict[str, Any] = Field(default_factory=dict)
    status: Optional[str] = None


class RegionsResponse(FastlyModel):
    data: List[str] = Field(default_factory=list)
    message: Optional[str] = None
    status: Optional[str] = None


class Usage(FastlyModel):
    bandwidth: Optional[int] = None
    compute_requests: Optional[int] = None
    requests: Optional[int] = None


class UsageResponse(FastlyModel):
    """Usage keyed by region."""

    data: Dict[str, Usage] = Field(default_factory=dict)
    message: Optional[str] = None
    meta: Dict[str, Any] = Field(default_factory=dict)
    status: Optional[str] = None


class UsageByServiceResponse(FastlyModel):
    """Usage keyed by region, then by service ID."""

    data: Dict[str, Dict[str, Usage]] = Field(default_factory=dict)
    message: Optional[str] = None
    meta: Dict[str, Any] = Field(default_factory=dict)
    status: Optional[str] = None


class GetStatsInput(RequestInput):
    """Input to the stats queries. Every field is optional."""

    service: Optional[str] = Field(default=None, exclude=True)
    """Restrict stats to one service."""

    field: Optional[str] = Field(default=None, exclude=True)
    """Restrict stats to one metric, such as ``bandwidth``."""

    by: Optional[str] = Field(default=None, serialization_alias="by")
    """Sampling rate: ``minute``, ``hour`` or ``day``."""

    from_: Optional[str] = Field(default=None, serialization_alias="from")
    """Start of the range, as a timestamp or phrase (``10 days ago``)."""

    region: Optional[str] = Field(default=None, serialization_alias="region")
    """Restrict stats to a region, such as ``europe`` or ``usa``."""

    to: Optional[str] = Field(default=None, serialization_alias="to")
    """End of the range."""


class GetUsageInput(RequestInput):
    by: Optional[str] = Field(default=None, serialization_alias="by")
    from_: Optional[str] = Field(default=None, serialization_alias="from")
    region: Optional[str] = Field(default=None, serialization_alias="region")
    to: Optional[str] = Field(default=None, serialization_alias="to")


def _stats_path(i: GetStatsInput) -> str:
    components: List[str] = ["stats"]
    if i.service:
        components.extend(["service", i.service])
    if i.field:
        components.extend(["field", i.field])
    return to_safe_url(*components)


def _query_options(i: RequestInput) -> RequestOptions:
    options = RequestOptions.for_input(i)
    options.params.update(i.encode())
    return options


def get_stats_json(client: FastlyClient, i: GetStatsInput) -> Any:
    """Fetch stats and return the decoded JSON document as-is."""
    r = client.get(_stats_path(i), _query_options(i))
    return decode_body(r, "stats response")


def get_stats(client: FastlyClient, i: GetStatsInput) -> StatsResponse:
    r = client.get(_stats_path(i), _query_options(i))
    return decode_as(r, StatsResponse, "stats response")


def get_stats_field(
    client: FastlyClient, i: GetStatsInput
) -> StatsFieldResponse:
    """Fetch one stats field across services."""
    r = client.get(_stats_path(i), _query_options(i))
    return decode_as(r, StatsFieldResponse, "stats field response")


def get_regions(client: FastlyClient) -> RegionsResponse:
    """List the regions stats can be restricted to."""
    r = client.get(to_safe_url("stats", "regions"))
    return decode_as(r, RegionsResponse, "regions response")


def get_usage(client: FastlyClient, i: GetUsageInput) -> UsageResponse:
    r = client.get(to_safe_url("stats", "usage"), _query_options(i))
    return decode_as(r, UsageResponse, "usage response")


def get_usage_by_service(
    client: FastlyClient, i: GetUsageInput
) -> UsageByServiceResponse:
    r = client.get(
        to_safe_url("stats", "usage_by_service"), _query_options(i)
    )
    return decode_as(r, UsageByServiceResponse, "usage by service response")
