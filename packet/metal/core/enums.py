"""Core enumerations and static resource paths.

Key Types:
    - SortDirection: ``asc`` / ``desc`` for sorted list requests
    - Resource: API resource collections
    - BASE_PATHS: resource collection to URL path prefix
"""

from enum import Enum


class SortDirection(str, Enum):
    """Sort order accepted by list endpoints."""

    ASC = "asc"
    DESC = "desc"


class Resource(str, Enum):
    """API resource collections addressed by the services."""

    BATCHES = "batches"
    DEVICES = "devices"
    PROJECTS = "projects"


BASE_PATHS = {
    Resource.BATCHES: "/batches",
    Resource.DEVICES: "/devices",
    Resource.PROJECTS: "/projects",
}


def resource_path(resource: Resource, *parts: str) -> str:
    """Join a resource base path with further path segments.

    Example:
        >>> resource_path(Resource.PROJECTS, "abc", "batches")
        '/projects/abc/batches'
    """
    segments = [BASE_PATHS[resource], *(part.strip("/") for part in parts)]
    return "/".join(segments)
