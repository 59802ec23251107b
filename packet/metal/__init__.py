"""Packet Metal - async client for the bare-metal provisioning API."""

from .api import (
    GetOptions,
    ListOptions,
    Page,
    SearchOptions,
    collect,
    iterate_pages,
    next_page_request,
)
from .client import MetalClient
from .config import ClientConfig
from .core import (
    APIError,
    MetalError,
    NotFoundError,
    RateLimitError,
    Resource,
    SortDirection,
    ValidationError,
)
from .models import (
    Batch,
    BatchCreateDevice,
    BatchDeviceCreateRequest,
    Device,
    DeviceCreateRequest,
    Facility,
    Href,
    PageMeta,
    Project,
)
from .runtime import RESTTransport

__version__ = "0.1.0"

__all__ = [
    # Client
    "MetalClient",
    "ClientConfig",
    "RESTTransport",
    # Options and pagination
    "ListOptions",
    "GetOptions",
    "SearchOptions",
    "SortDirection",
    "Page",
    "PageMeta",
    "collect",
    "iterate_pages",
    "next_page_request",
    # Models
    "Batch",
    "BatchCreateDevice",
    "BatchDeviceCreateRequest",
    "Device",
    "DeviceCreateRequest",
    "Facility",
    "Href",
    "Project",
    "Resource",
    # Exceptions
    "MetalError",
    "APIError",
    "NotFoundError",
    "RateLimitError",
    "ValidationError",
]
