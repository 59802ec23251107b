"""Batch service: provisioning many devices in one request."""

from __future__ import annotations

from ..api.options import ListOptions
from ..core.enums import Resource, resource_path
from ..models.batch import Batch, BatchDeviceCreateRequest
from .base import ServiceOp, require_id


class BatchService(ServiceOp):
    """Endpoints under ``/batches`` and ``/projects/{id}/batches``."""

    async def get(self, batch_id: str, opts: ListOptions | None = None) -> Batch:
        """Fetch a single batch."""
        path = resource_path(Resource.BATCHES, require_id(batch_id, "batch_id"))
        return await self._get_one(path, Batch, opts)

    async def list(self, project_id: str, opts: ListOptions | None = None) -> list[Batch]:
        """List every batch of a project, following pagination."""
        path = resource_path(Resource.PROJECTS, require_id(project_id, "project_id"), "batches")
        return await self._list(path, "batches", Batch, opts)

    async def create(self, project_id: str, request: BatchDeviceCreateRequest) -> list[Batch]:
        """Create device batches in a project.

        Returns:
            The batches accepted by the API, in request order
        """
        path = resource_path(
            Resource.PROJECTS, require_id(project_id, "project_id"), "devices", "batch"
        )
        data = await self._t.post(path, json_body=request.to_payload())
        return [Batch.model_validate(b) for b in (data or {}).get("batches") or []]

    async def delete(self, batch_id: str, remove_devices: bool) -> None:
        """Delete a batch, optionally removing the devices it created."""
        path = resource_path(Resource.BATCHES, require_id(batch_id, "batch_id"))
        await self._t.delete(
            path,
            params={"remove_associated_instances": "true" if remove_devices else "false"},
        )
