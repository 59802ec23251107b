"""REST runtime abstractions."""

from .http_client import HTTPClient, ResponseHook
from .transport import RESTTransport

__all__ = [
    "HTTPClient",
    "RESTTransport",
    "ResponseHook",
]
