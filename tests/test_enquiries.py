from datetime import date, timedelta

import pytest

from storefront.core.errors import ValidationError
from storefront.schemas.enquiry_schemas import EnquiryCreate
from storefront.services.enquiry_service import validate_enquiry

TODAY = date(2025, 6, 1)

VALID = {
    "name": "Omar Saeed",
    "email": "omar@example.com",
    "phone": "0501234567",
    "vehicle_brand": "BMW",
    "part_category": "Brake System",
    "description": "Front pads for a 2019 X5",
    "response_date": TODAY.isoformat(),
    "priority": "high",
}


def test_valid_enquiry_passes():
    validate_enquiry(EnquiryCreate(**VALID), today=TODAY)


@pytest.mark.parametrize(
    "override, field",
    [
        ({"name": "O"}, "name"),
        ({"email": "omar"}, "email"),
        ({"phone": "050"}, "phone"),
        ({"phone": "  05012345  "}, "phone"),
        ({"name": " O "}, "name"),
        ({"vehicle_brand": "Tesla"}, "vehicle_brand"),
        ({"part_category": ""}, "part_category"),
        ({"response_date": None}, "response_date"),
        ({"response_date": (TODAY - timedelta(days=1)).isoformat()}, "response_date"),
        ({"priority": "whenever"}, "priority"),
        ({"name": "", "priority": None}, "name"),
    ],
)
def test_first_invalid_field_is_reported(override, field):
    with pytest.raises(ValidationError) as exc:
        validate_enquiry(EnquiryCreate(**{**VALID, **override}), today=TODAY)
    assert exc.value.field == field


async def test_enquiry_submission_and_admin_listing(client, admin_headers):
    body = {**VALID, "response_date": date.today().isoformat(), "priority": "urgent"}

    created = await client.post("/enquiries", json=body)
    assert created.status_code == 201
    assert created.json()["message"].startswith("Thank you Omar Saeed!")

    await client.post("/enquiries", json={**body, "priority": "low"})

    urgent = (await client.get("/admin/enquiries", params={"priority": "urgent"}, headers=admin_headers)).json()
    assert [e["priority"] for e in urgent["data"]] == ["urgent"]

    everything = (await client.get("/admin/enquiries", headers=admin_headers)).json()
    assert len(everything["data"]) == 2


async def test_invalid_enquiry_is_not_stored(client, admin_headers):
    response = await client.post("/enquiries", json={**VALID, "vehicle_brand": "Tesla"})

    assert response.status_code == 400
    assert response.json()["detail"]["field"] == "vehicle_brand"
    listing = (await client.get("/admin/enquiries", headers=admin_headers)).json()
    assert listing["data"] == []
