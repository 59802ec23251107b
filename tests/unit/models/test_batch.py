"""Unit tests for batch and device models."""

from datetime import datetime, timezone

import pydantic
import pytest

from packet.metal.models import (
    Batch,
    BatchCreateDevice,
    BatchDeviceCreateRequest,
    DeviceCreateRequest,
    PageMeta,
)


def test_batch_decodes_api_payload():
    """Test a batch response decodes, ignoring unknown fields."""
    batch = Batch.model_validate(
        {
            "id": "b1",
            "state": "completed",
            "quantity": 2,
            "created_at": "2024-01-01T12:00:00Z",
            "href": "/batches/b1",
            "project": {"href": "/projects/p1"},
            "facilities": [{"id": "f1", "code": "ny5"}],
            "devices": [{"id": "d1", "hostname": "web-1"}, {"href": "/devices/d2", "id": "d2"}],
            "error_messages": [],
        }
    )

    assert batch.id == "b1"
    assert batch.created_at == datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
    assert batch.project.href == "/projects/p1"
    assert batch.facilities[0].code == "ny5"
    assert [d.id for d in batch.devices] == ["d1", "d2"]


def test_batch_minimal():
    """Test only the id is required."""
    batch = Batch(id="b1")
    assert batch.devices == []
    assert batch.project is None


def test_device_create_request_omits_unset_fields():
    """Test unset device fields stay out of the body."""
    request = DeviceCreateRequest(hostname="web", plan="c3.small.x86", user_data="#!/bin/sh")
    assert request.to_payload() == {
        "hostname": "web",
        "plan": "c3.small.x86",
        "userdata": "#!/bin/sh",
    }


def test_batch_create_device_flattens_fields():
    """Test device fields, quantity and diversity level share one object."""
    entry = BatchCreateDevice(
        hostname="web-{{index}}",
        plan="c3.small.x86",
        facility=["ny5", "da11"],
        operating_system="ubuntu_22_04",
        quantity=3,
        facility_diversity_level=2,
    )
    payload = BatchDeviceCreateRequest(batches=[entry]).to_payload()

    assert payload == {
        "batches": [
            {
                "hostname": "web-{{index}}",
                "plan": "c3.small.x86",
                "facility": ["ny5", "da11"],
                "operating_system": "ubuntu_22_04",
                "quantity": 3,
                "facility_diversity_level": 2,
            }
        ]
    }


def test_batch_create_device_drops_zero_diversity_level():
    """Test facility_diversity_level is only sent when non-zero."""
    entry = BatchCreateDevice(plan="c3.small.x86", quantity=1)
    payload = BatchDeviceCreateRequest(batches=[entry]).to_payload()

    assert payload == {"batches": [{"plan": "c3.small.x86", "quantity": 1}]}


def test_batch_create_device_requires_quantity():
    """Test quantity is mandatory and positive."""
    with pytest.raises(pydantic.ValidationError):
        BatchCreateDevice(plan="c3.small.x86")
    with pytest.raises(pydantic.ValidationError):
        BatchCreateDevice(plan="c3.small.x86", quantity=0)


def test_batch_create_request_requires_entries():
    """Test an empty batch list is rejected."""
    with pytest.raises(pydantic.ValidationError):
        BatchDeviceCreateRequest(batches=[])


def test_page_meta_decodes_envelope():
    """Test the meta envelope decodes, including the 'self' link."""
    meta = PageMeta.model_validate(
        {
            "self": {"href": "/batches?page=2"},
            "first": {"href": "/batches?page=1"},
            "last": {"href": "/batches?page=3"},
            "previous": {"href": "/batches?page=1"},
            "next": {"href": "/batches?page=3"},
            "total": 25,
            "current_page": 2,
            "last_page": 3,
        }
    )

    assert meta.self_link.href == "/batches?page=2"
    assert meta.next.href == "/batches?page=3"
    assert meta.current_page == 2
    assert meta.has_next is True


def test_page_meta_last_page():
    """Test a meta without next link reports no further page."""
    meta = PageMeta.model_validate({"total": 1, "current_page": 1, "last_page": 1})
    assert meta.has_next is False
