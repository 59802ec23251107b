"""Core components."""

from .enums import BASE_PATHS, Resource, SortDirection, resource_path
from .exceptions import (
    APIError,
    MetalError,
    NotFoundError,
    RateLimitError,
    ValidationError,
)

__all__ = [
    "BASE_PATHS",
    "Resource",
    "SortDirection",
    "resource_path",
    # Exceptions
    "MetalError",
    "APIError",
    "NotFoundError",
    "RateLimitError",
    "ValidationError",
]
