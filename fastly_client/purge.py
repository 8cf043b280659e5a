"""Purge cached content by URL, by surrogate key, or for a whole service.

See https://developer.fastly.com/reference/api/purging/ for more
information.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Optional

from pydantic import Field
from structlog import get_logger

from fastly_client.client import RequestOptions
from fastly_client.models import FastlyModel, RequestInput, decode_as
from fastly_client.utils import split_query, to_safe_url

if TYPE_CHECKING:
    from fastly_client.client import FastlyClient

__all__ = [
    "SOFT_PURGE_HEADER",
    "SURROGATE_KEY_HEADER",
    "Purge",
    "PurgeInput",
    "PurgeKeyInput",
    "PurgeKeysInput",
    "PurgeAllInput",
    "purge",
    "purge_key",
    "purge_keys",
    "purge_all",
]

SOFT_PURGE_HEADER = "Fastly-Soft-Purge"
"""Header that marks content stale instead of evicting it."""

SURROGATE_KEY_HEADER = "Surrogate-Key"
"""Header carrying space-separated surrogate keys for a bulk purge."""


class Purge(FastlyModel):
    """A response from a purge request."""

    purge_id: Optional[str] = Field(default=None, alias="id")
    """The unique ID of the purge request."""

    status: Optional[str] = None
    """The status of the purge, usually ``"ok"``."""


class PurgeInput(RequestInput):
    """Input to `purge`."""

    required_fields = ("url",)

    url: str = Field(default="", exclude=True)
    """The URL to purge (required)."""

    soft: bool = Field(default=False, exclude=True)
    """Perform a soft purge."""


class PurgeKeyInput(RequestInput):
    """Input to `purge_key`."""

    required_fields = ("service_id", "key")

    service_id: str = Field(default="", exclude=True)
    """The ID of the service (required)."""

    key: str = Field(default="", exclude=True)
    """The surrogate key to purge (required)."""

    soft: bool = Field(default=False, exclude=True)
    """Perform a soft purge."""


class PurgeKeysInput(RequestInput):
    """Input to `purge_keys`."""

    required_fields = ("service_id", "keys")

    service_id: str = Field(default="", exclude=True)
    """The ID of the service (required)."""

    keys: List[str] = Field(default_factory=list, exclude=True)
    """The surrogate keys to purge (required)."""

    soft: bool = Field(default=False, exclude=True)
    """Perform a soft purge."""


class PurgeAllInput(RequestInput):
    """Input to `purge_all`."""

    required_fields = ("service_id",)

    service_id: str = Field(default="", exclude=True)
    """The ID of the service (required)."""


def _purge_options(i: RequestInput, soft: bool) -> RequestOptions:
    options = RequestOptions.for_input(i)
    options.parallel = True
    if soft:
        options.headers[SOFT_PURGE_HEADER] = "1"
    return options


def purge(client: FastlyClient, i: PurgeInput) -> Purge:
    """Instantly purge an individual URL.

    The target's query string is sent as request parameters so that it
    survives being embedded in the request path.
    """
    i.check_required()

    target, params = split_query(i.url)
    options = _purge_options(i, i.soft)
    options.params.update(params)

    logger = get_logger(__name__)
    logger.info("Fastly URL purge", url=i.url, soft=i.soft)

    r = client.post("/purge/" + target, options)
    return decode_as(r, Purge, "purge response")


def purge_key(client: FastlyClient, i: PurgeKeyInput) -> Purge:
    """Instantly purge items of a service tagged with a surrogate key."""
    i.check_required()

    path = to_safe_url("service", i.service_id, "purge", i.key)
    logger = get_logger(__name__)
    logger.info("Fastly key purge", path=path, surrogate_key=i.key)

    r = client.post(path, _purge_options(i, i.soft))
    return decode_as(r, Purge, "purge response")


def purge_keys(client: FastlyClient, i: PurgeKeysInput) -> Dict[str, str]:
    """Instantly purge items of a service tagged with any of several
    surrogate keys.

    Returns
    -------
    purges : dict
        Mapping of each surrogate key to its purge ID.
    """
    i.check_required()

    path = to_safe_url("service", i.service_id, "purge")
    options = _purge_options(i, i.soft)
    options.headers[SURROGATE_KEY_HEADER] = " ".join(i.keys)

    logger = get_logger(__name__)
    logger.info("Fastly keys purge", path=path, surrogate_keys=i.keys)

    r = client.post(path, options)
    return decode_as(r, Dict[str, str], "purge keys response")


def purge_all(client: FastlyClient, i: PurgeAllInput) -> Purge:
    """Instantly purge everything from a service."""
    i.check_required()

    path = to_safe_url("service", i.service_id, "purge_all")
    logger = get_logger(__name__)
    logger.info("Fastly purge all", path=path)

    r = client.post(path, RequestOptions.for_input(i))
    return decode_as(r, Purge, "purge all response")
