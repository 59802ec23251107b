"""Runtime layer: HTTP transport shared by all services."""

from .rest import HTTPClient, RESTTransport, ResponseHook

__all__ = [
    "HTTPClient",
    "RESTTransport",
    "ResponseHook",
]
