"""Client for the Fastly CDN control-plane API.

Each resource module (`fastly_client.purge`, `fastly_client.conditions`,
`fastly_client.vcls`, `fastly_client.gzips`, `fastly_client.settings`,
`fastly_client.stats`, `fastly_client.domaintools.status` and
`fastly_client.objectstorage.accesskeys`) provides one function per API
endpoint. Each function takes a `FastlyClient` and an input model.
"""

from fastly_client.client import FastlyClient, RequestOptions
from fastly_client.version import get_version

__all__ = ["__version__", "FastlyClient", "RequestOptions"]

__version__: str = get_version()
