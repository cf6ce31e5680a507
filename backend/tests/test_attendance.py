from datetime import date

import pytest

from conftest import auth_headers, make_user

from academy.models import Coach, Player


@pytest.fixture
def roster(db, staff):
    coach = Coach(tenant_id=staff.tenant_id, coach_name="Ravi Kumar", email="ravi@academy.test")
    db.add(coach)
    db.flush()
    player = Player(
        tenant_id=staff.tenant_id,
        player_id="PL00001",
        name="Arjun Mehta",
        date_of_birth=date(2012, 4, 9),
        guardian_email_id=" Parent@Home.test ",
        center_name="North Court",
        category="U14",
        coach_id=coach.coach_id,
        coach_name=coach.coach_name,
    )
    db.add(player)
    db.commit()
    return {"coach_id": coach.coach_id, "player_code": player.player_id}


def _record(client, roster, day, present, coach_ref=None):
    return client.post(
        "/api/attendance",
        json={
            "playerId": roster["player_code"],
            "attendanceDate": day,
            "isPresent": present,
            "coachId": coach_ref if coach_ref is not None else roster["coach_id"],
        },
    )


# =========================================================
# TEST: POST /api/attendance
# =========================================================
def test_record_attendance(client, roster):
    response = _record(client, roster, "2024-06-01", True)
    assert response.status_code == 201

    data = response.json()["data"]
    assert data["player_id"] == "PL00001"
    assert data["attendance_date"] == "2024-06-01"
    assert data["recorded_by_coach_id"] == roster["coach_id"]


def test_record_attendance_resolves_coach_by_name(client, roster):
    response = _record(client, roster, "2024-06-01", False, coach_ref="Ravi Kumar")
    assert response.status_code == 201
    assert response.json()["data"]["recorded_by_coach_id"] == roster["coach_id"]


def test_record_attendance_missing_fields(client):
    response = client.post("/api/attendance", json={"playerId": "PL00001"})
    assert response.status_code == 400


def test_record_attendance_unknown_coach(client, roster):
    assert _record(client, roster, "2024-06-01", True, coach_ref="Nobody").status_code == 400


def test_record_attendance_unknown_player(client, roster):
    response = _record(client, {**roster, "player_code": "PL99999"}, "2024-06-01", True)
    assert response.status_code == 404


# =========================================================
# TEST: GET /api/attendance/guardian/{email}
# =========================================================
def test_guardian_overview(client, db, roster):
    _record(client, roster, "2024-06-01", True)
    _record(client, roster, "2024-06-03", False)
    _record(client, roster, "2024-06-02", True)
    parent = make_user(db, email="parent@home.test", role="parent", name="Parent")

    response = client.get("/api/attendance/guardian/parent@home.test", headers=auth_headers(parent))
    assert response.status_code == 200

    (child,) = response.json()
    assert child["player_id"] == "PL00001"
    assert child["center"] == "North Court"
    assert child["attendance_percentage"] == 66.67
    assert [a["date"] for a in child["recent_activities"]] == ["2024-06-03", "2024-06-02", "2024-06-01"]
    assert child["recent_activities"][0]["status"] == "Absent"


def test_guardian_without_records_gets_zero_percent(client, db, roster):
    parent = make_user(db, email="parent@home.test", role="parent", name="Parent")

    (child,) = client.get("/api/attendance/guardian/parent@home.test", headers=auth_headers(parent)).json()
    assert child["attendance_percentage"] == 0
    assert child["recent_activities"] == []


def test_guardian_cannot_read_other_family(client, db, roster):
    parent = make_user(db, email="someone@else.test", role="parent", name="Parent")
    response = client.get("/api/attendance/guardian/parent@home.test", headers=auth_headers(parent))
    assert response.status_code == 403


def test_guardian_endpoint_requires_parent_role(client, staff_headers):
    response = client.get("/api/attendance/guardian/staff@academy.test", headers=staff_headers)
    assert response.status_code == 403
