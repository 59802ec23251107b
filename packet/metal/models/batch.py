"""Batch data models.

A batch provisions several devices from a single request. Creating one sends
the ordinary device-create fields flattened into each batch entry alongside
``quantity`` and, when set, ``facility_diversity_level``.
"""

from datetime import datetime
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    model_serializer,
)

from .common import Facility, Href
from .device import Device, DeviceCreateRequest


class Batch(BaseModel):
    """Group of devices provisioned together."""

    id: str
    state: str | None = None
    quantity: int | None = None
    created_at: datetime | None = None
    href: str | None = None
    project: Href | None = None
    facilities: list[Facility] = []
    devices: list[Device] = []

    model_config = ConfigDict(frozen=True)


class BatchCreateDevice(DeviceCreateRequest):
    """One entry of a batch create request."""

    quantity: int = Field(..., ge=1)
    facility_diversity_level: int = Field(default=0, ge=0)

    @model_serializer(mode="wrap")
    def omit_unset_diversity(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        """Send facility_diversity_level only when it is non-zero."""
        data = handler(self)
        if not self.facility_diversity_level:
            data.pop("facility_diversity_level", None)
        return data


class BatchDeviceCreateRequest(BaseModel):
    """Body of ``POST /projects/{id}/devices/batch``."""

    batches: list[BatchCreateDevice] = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True)

    def to_payload(self) -> dict:
        """Serialize to the JSON body sent to the API."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
