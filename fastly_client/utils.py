"""Utilities for building request paths and decoding response bodies."""

from __future__ import annotations

import datetime
import json
from typing import (
    TYPE_CHECKING,
    Any,
    Dict,
    List,
    Mapping,
    Optional,
    Tuple,
)
from urllib.parse import parse_qs, parse_qsl, quote, urlsplit, urlunsplit

from dateutil import parser as datetime_parser
from dateutil.tz import tzutc

from fastly_client.exceptions import FastlyDecodeError

if TYPE_CHECKING:
    import requests

__all__ = [
    "PATH_SEGMENT_SAFE",
    "to_safe_url",
    "split_query",
    "parse_utc_datetime",
    "decode_body",
    "error_list",
    "format_param",
]

PATH_SEGMENT_SAFE = "$&+=:@"
"""Characters left unescaped inside a single path segment (besides the
unreserved ones, which `urllib.parse.quote` never escapes).
"""


def to_safe_url(*components: Any) -> str:
    """Join path components into an absolute path, escaping each one so that
    it stays a single segment.

    Examples
    --------
    >>> to_safe_url("service", "abc", "version", 1, "condition", "a/b c")
    '/service/abc/version/1/condition/a%2Fb%20c'
    """
    return "/" + "/".join(
        quote(str(c), safe=PATH_SEGMENT_SAFE) for c in components
    )


def split_query(url: str) -> Tuple[str, Dict[str, str]]:
    """Split a URL into the URL without its query string and a mapping of
    query parameters.

    Only the first value of a repeated parameter is kept.
    """
    parts = urlsplit(url)
    params: Dict[str, str] = {}
    for key, values in parse_qs(parts.query, keep_blank_values=True).items():
        params[key] = values[0]
    bare = urlunsplit((parts.scheme, parts.netloc, parts.path, "", ""))
    return bare, params


def parse_utc_datetime(
    value: Optional[Any],
) -> Optional[datetime.datetime]:
    """Parse a date string, returning a timezone-aware UTC datetime.

    Empty strings are treated as missing values.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime.datetime):
        date = value
    else:
        date = datetime_parser.parse(str(value))
    if date.tzinfo is None:
        date = date.replace(tzinfo=tzutc())
    return date.astimezone(tzutc())


def format_param(value: Any) -> str:
    """Format a JSON-mode scalar as a form or query string value."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def decode_body(response: requests.Response, step: str = "response") -> Any:
    """Decode a JSON or form-urlencoded response body.

    Parameters
    ----------
    response : `requests.Response`
        The response.
    step : str
        Name of the decoding step, used in the error message.

    Raises
    ------
    fastly_client.exceptions.FastlyDecodeError
        The body is malformed.
    """
    content_type = response.headers.get("Content-Type", "")
    text = response.text
    if content_type.startswith("application/x-www-form-urlencoded"):
        return dict(parse_qsl(text, keep_blank_values=True))
    try:
        return json.loads(text)
    except ValueError as e:
        raise FastlyDecodeError(
            "error decoding {0}: {1}".format(step, e)
        ) from e


def error_list(payload: Any) -> List[Dict[str, Any]]:
    """Extract API errors from a decoded error body.

    Fastly reports errors either as ``{"msg": ..., "detail": ...}`` or as a
    JSON:API document with an ``errors`` array.
    """
    if not isinstance(payload, Mapping):
        return []
    if isinstance(payload.get("errors"), list):
        errors = []
        for e in payload["errors"]:
            if isinstance(e, Mapping):
                errors.append(
                    {"title": e.get("title"), "detail": e.get("detail")}
                )
        return errors
    if "msg" in payload or "detail" in payload:
        return [{"title": payload.get("msg"), "detail": payload.get("detail")}]
    return []
