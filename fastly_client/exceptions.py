"""Custom exceptions."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

__all__ = [
    "FastlyError",
    "FastlyValidationError",
    "MissingAccessKeyIDError",
    "MissingDescriptionError",
    "MissingDomainError",
    "MissingKeyError",
    "MissingKeysError",
    "MissingNameError",
    "MissingPermissionError",
    "MissingServiceIDError",
    "MissingServiceVersionError",
    "MissingURLError",
    "InvalidPermissionError",
    "FastlyHTTPError",
    "FastlyDecodeError",
    "NotOKError",
]


class FastlyError(Exception):
    """Errors related to Fastly API usage."""


class FastlyValidationError(FastlyError, ValueError):
    """Use a FastlyValidationError whenever an operation input is missing a
    required value or holds an invalid one.

    These are raised before any request is sent.
    """

    message = "invalid input"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.message)


class MissingAccessKeyIDError(FastlyValidationError):
    """Missing required field 'AccessKeyID'."""

    message = "missing required field 'AccessKeyID'"


class MissingDescriptionError(FastlyValidationError):
    """Missing required field 'Description'."""

    message = "missing required field 'Description'"


class MissingDomainError(FastlyValidationError):
    """Missing required field 'Domain'."""

    message = "missing required field 'Domain'"


class MissingKeyError(FastlyValidationError):
    """Missing required field 'Key'."""

    message = "missing required field 'Key'"


class MissingKeysError(FastlyValidationError):
    """Missing required field 'Keys'."""

    message = "missing required field 'Keys'"


class MissingNameError(FastlyValidationError):
    """Missing required field 'Name'."""

    message = "missing required field 'Name'"


class MissingPermissionError(FastlyValidationError):
    """Missing required field 'Permission'."""

    message = "missing required field 'Permission'"


class MissingServiceIDError(FastlyValidationError):
    """Missing required field 'ServiceID'."""

    message = "missing required field 'ServiceID'"


class MissingServiceVersionError(FastlyValidationError):
    """Missing required field 'ServiceVersion'."""

    message = "missing required field 'ServiceVersion'"


class MissingURLError(FastlyValidationError):
    """Missing required field 'URL'."""

    message = "missing required field 'URL'"


class InvalidPermissionError(FastlyValidationError):
    """The access key permission is not one the API accepts."""

    message = "invalid field 'Permission'"


class FastlyHTTPError(FastlyError):
    """The Fastly API answered with a non-2xx status.

    Parameters
    ----------
    status_code : int
        The HTTP status code.
    method : str
        The HTTP method of the failed request.
    url : str
        The requested URL.
    errors : list of dict, optional
        Errors decoded from the response body. Each item has ``title`` and
        ``detail`` keys (either may be `None`).
    """

    def __init__(
        self,
        status_code: int,
        method: str,
        url: str,
        errors: Optional[List[Dict[str, Any]]] = None,
    ) -> None:
        self.status_code = status_code
        self.method = method
        self.url = url
        self.errors: List[Dict[str, Any]] = errors or []
        super().__init__(self._format())

    def _format(self) -> str:
        lines = [
            "{0} {1}: {2}".format(self.method, self.url, self.status_code)
        ]
        for error in self.errors:
            title = error.get("title")
            detail = error.get("detail")
            if title and detail:
                lines.append("    {0}: {1}".format(title, detail))
            elif title or detail:
                lines.append("    {0}".format(title or detail))
        return "\n".join(lines)

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404


class FastlyDecodeError(FastlyError):
    """A response body could not be decoded into the expected shape.

    The underlying exception is available as ``__cause__``.
    """


class NotOKError(FastlyError):
    """The API accepted a request but its status payload was not "ok"."""

    def __init__(self, message: str = "received a non-OK response") -> None:
        super().__init__(message)
