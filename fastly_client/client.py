"""HTTP client for the Fastly control-plane API.

See https://developer.fastly.com/reference/api/ for more information about
the Fastly API.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional

import requests
from structlog import get_logger

from fastly_client.config import get_config
from fastly_client.exceptions import FastlyHTTPError
from fastly_client.logutils import log_request
from fastly_client.utils import error_list
from fastly_client.version import get_version

if TYPE_CHECKING:
    from fastly_client.models import RequestInput

__all__ = ["FastlyClient", "RequestOptions"]

_SAFE_METHODS = frozenset(["GET", "HEAD"])


@dataclass
class RequestOptions:
    """Per-request options passed to the `FastlyClient` verb methods."""

    headers: Dict[str, str] = field(default_factory=dict)
    """Extra request headers."""

    params: Dict[str, str] = field(default_factory=dict)
    """Query string parameters."""

    parallel: bool = False
    """Allow this mutating request to run concurrently with others from the
    same client. Mutating requests are otherwise sent one at a time.
    """

    timeout: Optional[float] = None
    """Seconds to wait for the API; `None` uses the client default."""

    @classmethod
    def for_input(cls, i: RequestInput) -> RequestOptions:
        """Create options carrying the timeout of an operation input."""
        return cls(timeout=i.timeout)


class FastlyClient:
    """API client for the Fastly control plane.

    Parameters
    ----------
    api_key : str, optional
        The Fastly API token. Defaults to the ``FASTLY_API_KEY`` environment
        variable. We only support key-based authentication.
    api_root : str, optional
        The API root URL. Defaults to ``FASTLY_API_URL`` or
        ``https://api.fastly.com``.
    session : `requests.Session`, optional
        Session used to send requests. A new one is created by default.
    timeout : float, optional
        Default per-request timeout in seconds. Defaults to
        ``FASTLY_TIMEOUT``.

    Notes
    -----
    A client may be shared between threads. Mutating requests (anything
    other than GET and HEAD) hold a client-wide lock while in flight unless
    their `RequestOptions` set ``parallel``.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_root: Optional[str] = None,
        *,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ) -> None:
        settings = get_config()
        self.api_key = api_key if api_key is not None else settings.API_KEY
        self.api_root = (api_root or settings.API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.TIMEOUT
        self.session = session if session is not None else requests.Session()
        self.rate_limit_remaining: Optional[int] = None
        self.rate_limit_reset: Optional[int] = None
        self._update_lock = threading.Lock()
        self._logger = get_logger(__name__)

    def _url(self, path: str) -> str:
        if not path.startswith("/"):
            path = "/" + path
        return self.api_root + path

    def _headers(self, extra: Mapping[str, str]) -> Dict[str, str]:
        headers = {
            "Accept": "application/json",
            "User-Agent": "fastly-client/{0}".format(get_version()),
        }
        if self.api_key:
            headers["Fastly-Key"] = self.api_key
        headers.update(extra)
        return headers

    @log_request()
    def request(
        self,
        method: str,
        path: str,
        options: Optional[RequestOptions] = None,
        *,
        data: Optional[Mapping[str, str]] = None,
        json: Any = None,
    ) -> requests.Response:
        """Send a request and return the checked response.

        Parameters
        ----------
        method : str
            HTTP method.
        path : str
            Path relative to the API root.
        options : `RequestOptions`, optional
            Headers, query parameters, timeout and concurrency hint.
        data : mapping, optional
            Form fields, sent form-urlencoded.
        json : optional
            A JSON-serializable request body.

        Raises
        ------
        fastly_client.exceptions.FastlyHTTPError
            The API responded with a non-2xx status.
        requests.RequestException
            Transport failures are raised unchanged.
        """
        if options is None:
            options = RequestOptions()
        timeout = options.timeout
        if timeout is None:
            timeout = self.timeout
        kwargs: Dict[str, Any] = {
            "headers": self._headers(options.headers),
            "params": options.params or None,
            "timeout": timeout,
        }
        if data is not None:
            kwargs["data"] = data
        if json is not None:
            kwargs["json"] = json

        method = method.upper()
        url = self._url(path)
        if method in _SAFE_METHODS:
            r = self.session.request(method, url, **kwargs)
        else:
            if options.parallel:
                r = self.session.request(method, url, **kwargs)
            else:
                with self._update_lock:
                    r = self.session.request(method, url, **kwargs)
            self._record_rate_limit(r)

        self.check_response(r)
        return r

    def _record_rate_limit(self, r: requests.Response) -> None:
        remaining = r.headers.get("Fastly-RateLimit-Remaining")
        if remaining is not None and remaining.isdigit():
            self.rate_limit_remaining = int(remaining)
        reset = r.headers.get("Fastly-RateLimit-Reset")
        if reset is not None and reset.isdigit():
            self.rate_limit_reset = int(reset)

    def check_response(self, r: requests.Response) -> None:
        """Raise `FastlyHTTPError` for a non-2xx response."""
        if 200 <= r.status_code < 300:
            return
        try:
            errors = error_list(r.json())
        except ValueError:
            errors = []
            if r.text:
                errors.append({"title": None, "detail": r.text})
        self._logger.error(
            "Fastly API error",
            status=r.status_code,
            url=r.request.url if r.request is not None else None,
            errors=errors,
        )
        raise FastlyHTTPError(
            r.status_code,
            r.request.method if r.request is not None else "",
            r.request.url if r.request is not None else "",
            errors=errors,
        )

    def get(
        self, path: str, options: Optional[RequestOptions] = None
    ) -> requests.Response:
        return self.request("GET", path, options)

    def post(
        self, path: str, options: Optional[RequestOptions] = None
    ) -> requests.Response:
        return self.request("POST", path, options)

    def put(
        self, path: str, options: Optional[RequestOptions] = None
    ) -> requests.Response:
        return self.request("PUT", path, options)

    def delete(
        self, path: str, options: Optional[RequestOptions] = None
    ) -> requests.Response:
        return self.request("DELETE", path, options)

    def post_form(
        self,
        path: str,
        i: RequestInput,
        options: Optional[RequestOptions] = None,
    ) -> requests.Response:
        """POST the present fields of ``i`` form-urlencoded."""
        return self.request("POST", path, options, data=i.encode())

    def put_form(
        self,
        path: str,
        i: RequestInput,
        options: Optional[RequestOptions] = None,
    ) -> requests.Response:
        """PUT the present fields of ``i`` form-urlencoded."""
        return self.request("PUT", path, options, data=i.encode())

    def post_json(
        self,
        path: str,
        i: RequestInput,
        options: Optional[RequestOptions] = None,
    ) -> requests.Response:
        """POST the present fields of ``i`` as a JSON document."""
        return self.request("POST", path, options, json=i.payload())
