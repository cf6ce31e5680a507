from datetime import time

from sqlalchemy import select

from conftest import auth_headers, make_user

from academy.core.db import SessionLocal
from academy.models import Venue, VenueSlotDay, VenueTimeSlot
from academy.services.venues import TimeSlotSpec, create_venue_with_slots


def _create(tenant_id, name="North Court", slots=None):
    slots = slots or [
        TimeSlotSpec(time(6, 0), time(8, 0), days=("Fri", "Mon")),
        TimeSlotSpec(time(17, 30), time(19, 0), days=("Sat",)),
    ]
    return create_venue_with_slots(
        SessionLocal,
        tenant_id=tenant_id,
        name=name,
        center_head="A. Rao",
        address="12 MG Road",
        google_url="https://maps.example/north",
        time_slots=slots,
    )


# =========================================================
# TEST: GET /api/venues
# =========================================================
def test_list_requires_token(client):
    response = client.get("/api/venues")
    assert response.status_code == 401


def test_list_groups_slots_and_days(client, staff, staff_headers):
    created = _create(staff.tenant_id)

    response = client.get("/api/venues", headers=staff_headers)
    assert response.status_code == 200

    venues = response.json()
    assert len(venues) == 1
    venue = venues[0]
    assert venue["id"] == created.venue_id
    assert venue["centerHead"] == "A. Rao"
    assert venue["googleMapsUrl"] == "https://maps.example/north"
    assert venue["status"] == "Active"
    assert venue["timeSlots"] == [
        {"id": created.slot_ids[0], "startTime": "06:00", "endTime": "08:00", "days": ["Mon", "Fri"]},
        {"id": created.slot_ids[1], "startTime": "17:30", "endTime": "19:00", "days": ["Sat"]},
    ]


def test_list_only_shows_own_tenant(client, db, staff, staff_headers):
    other = make_user(db, email="other@academy.test")
    _create(staff.tenant_id, name="Mine")
    _create(other.tenant_id, name="Theirs")

    names = [v["name"] for v in client.get("/api/venues", headers=staff_headers).json()]
    assert names == ["Mine"]

    names = [v["name"] for v in client.get("/api/venues", headers=auth_headers(other)).json()]
    assert names == ["Theirs"]


# =========================================================
# TEST: DELETE /api/venues/{id}
# =========================================================
def test_delete_deactivates_venue_slots_and_days(client, db, staff, staff_headers):
    created = _create(staff.tenant_id)

    response = client.delete(f"/api/venues/{created.venue_id}", headers=staff_headers)
    assert response.status_code == 200

    venue = db.get(Venue, created.venue_id)
    assert venue.active is False
    assert venue.status == "Inactive"

    slots = db.execute(select(VenueTimeSlot)).scalars().all()
    assert slots and all(not s.active for s in slots)
    days = db.execute(select(VenueSlotDay)).scalars().all()
    assert days and all(not d.active for d in days)

    assert client.get("/api/venues", headers=staff_headers).json() == []


def test_delete_leaves_other_venues_untouched(client, db, staff, staff_headers):
    # keep owns a slot and a day whose ids equal the target venue id
    keep = _create(staff.tenant_id, name="Keep", slots=[
        TimeSlotSpec(time(9, 0), time(10, 0), days=("Tue",)),
        TimeSlotSpec(time(10, 0), time(11, 0), days=("Wed",)),
    ])
    target = _create(staff.tenant_id, name="Target", slots=[TimeSlotSpec(time(6, 0), time(7, 0), days=("Mon",))])
    assert target.venue_id in keep.slot_ids

    client.delete(f"/api/venues/{target.venue_id}", headers=staff_headers)

    kept_slots = db.execute(
        select(VenueTimeSlot).where(VenueTimeSlot.venue_id == keep.venue_id)
    ).scalars().all()
    assert [s.active for s in kept_slots] == [True, True]
    kept_days = db.execute(
        select(VenueSlotDay).where(VenueSlotDay.time_slot_id.in_(keep.slot_ids))
    ).scalars().all()
    assert [d.active for d in kept_days] == [True, True]

    names = [v["name"] for v in client.get("/api/venues", headers=staff_headers).json()]
    assert names == ["Keep"]


def test_delete_unknown_venue_is_404(client, staff_headers):
    response = client.delete("/api/venues/999", headers=staff_headers)
    assert response.status_code == 404


def test_delete_other_tenants_venue_is_404(client, db, staff_headers):
    other = make_user(db, email="other@academy.test")
    created = _create(other.tenant_id)

    response = client.delete(f"/api/venues/{created.venue_id}", headers=staff_headers)
    assert response.status_code == 404
    assert db.get(Venue, created.venue_id).active is True


def test_delete_rejects_non_positive_id(client, staff_headers):
    response = client.delete("/api/venues/0", headers=staff_headers)
    assert response.status_code == 400
