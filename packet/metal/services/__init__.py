"""Resource services, one per API collection."""

from .base import ServiceOp, decode_page
from .batches import BatchService
from .devices import DeviceService
from .projects import ProjectService

__all__ = [
    "BatchService",
    "DeviceService",
    "ProjectService",
    "ServiceOp",
    "decode_page",
]
