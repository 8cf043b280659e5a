"""py.test fixtures available to all test modules without explicit import."""

from __future__ import annotations

import pytest

from fastly_client.client import FastlyClient
from fastly_client.testutils import API_KEY, API_ROOT


@pytest.fixture
def client() -> FastlyClient:
    """A client pointed at the Fastly API root with a fake API key.

    Tests must mock every request with ``responses``.
    """
    return FastlyClient(API_KEY, API_ROOT)
