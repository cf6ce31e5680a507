from datetime import date

import pytest

from conftest import auth_headers, make_user

from academy.models import Attendance, Coach, Player
from academy.services.attendance import attendance_percentage
from academy.services.coaches import parse_coach_id


@pytest.fixture
def coach(db, staff):
    c = Coach(tenant_id=staff.tenant_id, coach_name="Ravi Kumar", email="ravi@academy.test")
    db.add(c)
    db.commit()
    db.refresh(c)
    return c


def _player(db, coach, code, name, *, active=True):
    p = Player(
        tenant_id=coach.tenant_id,
        player_id=code,
        name=name,
        date_of_birth=date(2012, 1, 1),
        coach_id=coach.coach_id,
        coach_name=coach.coach_name,
        active=active,
    )
    db.add(p)
    db.commit()
    return p


def _mark(db, coach, code, day, present):
    db.add(Attendance(player_id=code, attendance_date=day, is_present=present, recorded_by_coach_id=coach.coach_id))
    db.commit()


# =========================================================
# Helpers
# =========================================================
@pytest.mark.parametrize(
    "value, expected",
    [(12, 12), ("12", 12), ("CO12", 12), ("co7", 7), (" 3 ", 3), ("Ravi", None), (None, None), (True, None)],
)
def test_parse_coach_id(value, expected):
    assert parse_coach_id(value) == expected


def test_attendance_percentage():
    assert attendance_percentage(2, 3) == 66.67
    assert attendance_percentage(0, 4) == 0.0
    assert attendance_percentage(0, 0) is None


# =========================================================
# TEST: /api/coaches CRUD
# =========================================================
def test_create_and_list_coaches(client, staff_headers):
    response = client.post(
        "/api/coaches",
        json={"coach_name": " Meera Iyer ", "email": "Meera@Academy.test", "salary": 25000},
        headers=staff_headers,
    )
    assert response.status_code == 201
    created = response.json()["coach"]
    assert created["coach_name"] == "Meera Iyer"
    assert created["email"] == "meera@academy.test"
    assert created["salary"] == 25000.0

    listing = client.get("/api/coaches", headers=staff_headers).json()
    assert listing["count"] == 1
    assert listing["data"][0]["coach_id"] == created["coach_id"]


def test_create_coach_requires_name_and_email(client, staff_headers):
    response = client.post("/api/coaches", json={"coach_name": "No Mail"}, headers=staff_headers)
    assert response.status_code == 400


def test_get_coach_accepts_prefixed_id(client, coach):
    response = client.get(f"/api/coaches/CO{coach.coach_id}")
    assert response.status_code == 200
    assert response.json()["coach_name"] == "Ravi Kumar"


def test_get_coach_errors(client):
    assert client.get("/api/coaches/COabc").status_code == 400
    assert client.get("/api/coaches/404").status_code == 404


def test_update_and_deactivate_coach(client, staff_headers, coach):
    response = client.put(f"/api/coaches/{coach.coach_id}", json={"category": "U16", "status": None})
    assert response.status_code == 200
    assert response.json()["coach"]["category"] == "U16"
    assert response.json()["coach"]["status"] == "Active"

    response = client.put(f"/api/coaches/{coach.coach_id}/deactivate")
    assert response.status_code == 200
    assert response.json()["coach"]["active"] is False

    assert client.get("/api/coaches", headers=staff_headers).json()["count"] == 0


# =========================================================
# TEST: players with attendance
# =========================================================
def test_coach_players_with_attendance(client, db, coach):
    _player(db, coach, "PL00001", "Arjun")
    _player(db, coach, "PL00002", "Bela")
    _mark(db, coach, "PL00001", date(2024, 6, 1), True)
    _mark(db, coach, "PL00001", date(2024, 6, 2), True)
    _mark(db, coach, "PL00001", date(2024, 6, 3), False)

    response = client.get(f"/api/coaches/CO{coach.coach_id}/players")
    assert response.status_code == 200
    rows = {r["player_id"]: r for r in response.json()}
    assert rows["PL00001"]["attendance_percentage"] == 66.67
    assert rows["PL00002"]["attendance_percentage"] is None


def test_my_players_for_logged_in_coach(client, db, coach):
    _player(db, coach, "PL00001", "Arjun")
    _player(db, coach, "PL00002", "Gone", active=False)
    coach_user = make_user(db, email="ravi@academy.test", role="coach", name="Ravi Kumar")

    response = client.get("/api/coaches/me/players", headers=auth_headers(coach_user))
    assert response.status_code == 200
    assert [p["name"] for p in response.json()["players"]] == ["Arjun"]


def test_my_players_requires_coach_role(client, staff_headers):
    assert client.get("/api/coaches/me/players", headers=staff_headers).status_code == 403


def test_update_coach_with_only_nulls_is_400(client, coach):
    response = client.put(f"/api/coaches/{coach.coach_id}", json={"coach_name": None})
    assert response.status_code == 400
    assert client.get(f"/api/coaches/{coach.coach_id}").json()["coach_name"] == "Ravi Kumar"
