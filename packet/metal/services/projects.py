"""Project service."""

from __future__ import annotations

from ..api.options import ListOptions
from ..core.enums import BASE_PATHS, Resource, resource_path
from ..models.project import Project
from .base import ServiceOp, require_id


class ProjectService(ServiceOp):
    async def get(self, project_id: str, opts: ListOptions | None = None) -> Project:
        path = resource_path(Resource.PROJECTS, require_id(project_id, "project_id"))
        return await self._get_one(path, Project, opts)

    async def list(self, opts: ListOptions | None = None) -> list[Project]:
        return await self._list(BASE_PATHS[Resource.PROJECTS], "projects", Project, opts)
