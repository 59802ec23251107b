"""Device data models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .common import Facility, Href


class Device(BaseModel):
    """Provisioned bare-metal server."""

    id: str
    hostname: str | None = None
    state: str | None = None
    description: str | None = None
    tags: list[str] = []
    facility: Facility | None = None
    project: Href | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    href: str | None = None

    model_config = ConfigDict(frozen=True)


class DeviceCreateRequest(BaseModel):
    """Fields accepted when provisioning a device.

    Unset fields are left out of the request body.
    """

    hostname: str | None = None
    plan: str | None = None
    facility: list[str] | None = None
    metro: str | None = None
    operating_system: str | None = None
    billing_cycle: str | None = None
    project_id: str | None = None
    user_data: str | None = Field(default=None, alias="userdata")
    tags: list[str] | None = None
    description: str | None = None
    always_pxe: bool | None = None
    ipxe_script_url: str | None = None
    hardware_reservation_id: str | None = None
    spot_instance: bool | None = None
    spot_price_max: float | None = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_payload(self) -> dict:
        """Serialize to the JSON body sent to the API."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
