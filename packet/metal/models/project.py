"""Project data model."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class Project(BaseModel):
    """Project owning devices and batches."""

    id: str
    name: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    href: str | None = None

    model_config = ConfigDict(frozen=True)
