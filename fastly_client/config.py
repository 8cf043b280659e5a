"""fastly-client configuration and environment profiles."""

from __future__ import annotations

import logging
import os
import sys
from typing import Any, Dict, List, Optional, Type

import structlog

__all__ = [
    "DEFAULT_ENDPOINT",
    "Config",
    "DevelopmentConfig",
    "TestConfig",
    "ProductionConfig",
    "config",
    "get_config",
    "configure_logging",
]

DEFAULT_ENDPOINT = "https://api.fastly.com"
"""Root URL of the Fastly control-plane API."""


def _env_timeout() -> Optional[float]:
    value = os.getenv("FASTLY_TIMEOUT")
    if value is None or value == "":
        return None
    return float(value)


class Config:
    """Configuration baseclass.

    Values are read from the environment when this module is imported.
    """

    API_KEY: Optional[str] = os.environ.get("FASTLY_API_KEY")
    """Fastly API token sent as the ``Fastly-Key`` header."""

    API_URL: str = os.environ.get("FASTLY_API_URL") or DEFAULT_ENDPOINT
    """API root; override to point at a proxy or a mock server."""

    TIMEOUT: Optional[float] = _env_timeout()
    """Default per-request timeout in seconds (`None` waits forever)."""

    LOG_LEVEL: int = logging.INFO

    @classmethod
    def renderer(cls) -> Any:
        return structlog.processors.KeyValueRenderer(
            key_order=["event", "method", "path", "request_id"],
        )

    @classmethod
    def init_logging(cls) -> None:
        """Configure the ``fastly_client`` stdlib logger and structlog."""
        stream_handler = logging.StreamHandler(stream=sys.stdout)
        stream_handler.setFormatter(logging.Formatter("%(message)s"))
        logger = logging.getLogger("fastly_client")
        if logger.hasHandlers():
            logger.handlers.clear()
        logger.addHandler(stream_handler)
        logger.setLevel(cls.LOG_LEVEL)

        processors: List[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            cls.renderer(),
        ]
        structlog.configure(
            processors=processors,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )


class DevelopmentConfig(Config):
    """Local development configuration."""

    LOG_LEVEL = logging.DEBUG


class TestConfig(Config):
    """Test configuration (for py.test harness)."""

    API_KEY = "test-api-key"
    API_URL = DEFAULT_ENDPOINT
    TIMEOUT = None
    LOG_LEVEL = logging.DEBUG


class ProductionConfig(Config):
    """Production configuration."""

    @classmethod
    def renderer(cls) -> Any:
        return structlog.processors.JSONRenderer()


config: Dict[str, Type[Config]] = {
    "development": DevelopmentConfig,
    "testing": TestConfig,
    "production": ProductionConfig,
    "default": ProductionConfig,
}


def get_config(profile: Optional[str] = None) -> Type[Config]:
    """Get the configuration class for a profile name.

    Parameters
    ----------
    profile : str, optional
        One of ``development``, ``testing``, ``production`` or
        ``default``. When `None`, the ``FASTLY_CLIENT_PROFILE`` environment
        variable is consulted before falling back to ``default``.

    Raises
    ------
    KeyError
        The profile is not known.
    """
    if profile is None:
        profile = os.getenv("FASTLY_CLIENT_PROFILE", "default")
    return config[profile]


def configure_logging(profile: Optional[str] = None) -> None:
    """Set up structlog rendering for a configuration profile."""
    get_config(profile).init_logging()
