"""Device service."""

from __future__ import annotations

from ..api.options import ListOptions, including
from ..core.enums import Resource, resource_path
from ..models.device import Device
from .base import ServiceOp, require_id


class DeviceService(ServiceOp):
    # Devices are always returned with their facility expanded.

    async def get(self, device_id: str, opts: ListOptions | None = None) -> Device:
        path = resource_path(Resource.DEVICES, require_id(device_id, "device_id"))
        return await self._get_one(path, Device, including(opts, "facility"))

    async def list(self, project_id: str, opts: ListOptions | None = None) -> list[Device]:
        path = resource_path(Resource.PROJECTS, require_id(project_id, "project_id"), "devices")
        return await self._list(path, "devices", Device, including(opts, "facility"))
