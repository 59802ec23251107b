"""Shared resource fragments."""

from pydantic import BaseModel, ConfigDict


class Href(BaseModel):
    """Link-only stub for a sub-resource that was not expanded."""

    href: str | None = None

    model_config = ConfigDict(frozen=True)


class Facility(BaseModel):
    """Data center where devices are provisioned."""

    id: str | None = None
    name: str | None = None
    code: str | None = None
    features: list[str] = []
    href: str | None = None

    model_config = ConfigDict(frozen=True)
