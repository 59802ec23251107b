"""Data models for API resources.

Architecture:
    Pydantic v2 models mirroring the JSON resources of the provisioning API.
    Response models are frozen and ignore unknown fields so that server-side
    additions never break decoding. Nested sub-resources that the server did
    not expand arrive as link-only stubs (only ``href`` populated).

Model Categories:
    - Resources: Batch, Device, Project, Facility
    - Requests: DeviceCreateRequest, BatchCreateDevice, BatchDeviceCreateRequest
    - Pagination: PageMeta, Href
"""

from .batch import Batch, BatchCreateDevice, BatchDeviceCreateRequest
from .common import Facility, Href
from .device import Device, DeviceCreateRequest
from .meta import PageMeta
from .project import Project

__all__ = [
    "Batch",
    "BatchCreateDevice",
    "BatchDeviceCreateRequest",
    "Device",
    "DeviceCreateRequest",
    "Facility",
    "Href",
    "PageMeta",
    "Project",
]
