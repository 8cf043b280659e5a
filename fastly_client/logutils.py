"""Logging helpers and utilities."""

import uuid
from functools import wraps
from timeit import default_timer as timer
from typing import Any, Callable, TypeVar

import structlog

__all__ = ["log_request"]

F = TypeVar("F", bound=Callable[..., Any])


def log_request() -> Callable[[F], F]:
    """Decorator for a client's ``request(method, path, ...)`` method that
    binds a logger with a unique request ID and logs the response status
    and timing.
    """

    def decorator(f):  # type: ignore
        @wraps(f)
        def decorated_function(  # type: ignore
            self, method, path, *args, **kwargs
        ):
            # Initialize a timer to capture the response time
            start_time = timer()

            logger = structlog.get_logger("fastly_client.http")
            log = logger.bind(
                request_id=str(uuid.uuid4()),
                path=path,
                method=method,
            )
            log.debug("Fastly API request")

            try:
                response = f(self, method, path, *args, **kwargs)
            except Exception as e:
                log.warning(
                    "Fastly API request failed",
                    error=str(e),
                    response_time=timer() - start_time,
                )
                raise

            # Close out the logger
            end_time = timer()
            log.info(
                "Fastly API response",
                status=response.status_code,
                response_time=end_time - start_time,
            )

            return response

        return decorated_function

    return decorator
