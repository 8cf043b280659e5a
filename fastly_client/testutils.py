"""Utilities for unit testing code that calls the Fastly API.

HTTP traffic is mocked with the ``responses`` library; these helpers
inspect the requests it records.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Optional
from urllib.parse import parse_qs, urlsplit

if TYPE_CHECKING:
    import requests

__all__ = [
    "API_ROOT",
    "API_KEY",
    "SERVICE_ID",
    "SERVICE_VERSION",
    "version_url",
    "form_body",
    "query_params",
]

API_ROOT = "https://api.fastly.com"
API_KEY = "d3cafb4dde4dbeef"
SERVICE_ID = "SU1Z0isxPaozGVKXdv0eY"
SERVICE_VERSION = 3


def version_url(*rest: str) -> str:
    """URL of a resource under the test service version."""
    url = "{0}/service/{1}/version/{2}".format(
        API_ROOT, SERVICE_ID, SERVICE_VERSION
    )
    if rest:
        url = url + "/" + "/".join(rest)
    return url


def _flatten(parsed: Dict[str, List[str]]) -> Dict[str, str]:
    return {key: values[0] for key, values in parsed.items()}


def form_body(request: requests.PreparedRequest) -> Dict[str, str]:
    """Decode the form-urlencoded body of a recorded request."""
    body: Optional[object] = request.body
    if body is None:
        return {}
    if isinstance(body, bytes):
        body = body.decode("utf-8")
    return _flatten(parse_qs(str(body), keep_blank_values=True))


def query_params(request: requests.PreparedRequest) -> Dict[str, str]:
    """Decode the query string of a recorded request."""
    assert request.url is not None
    query = urlsplit(request.url).query
    return _flatten(parse_qs(query, keep_blank_values=True))
