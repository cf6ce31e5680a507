from __future__ import annotations

import logging
from decimal import Decimal

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field
from sqlalchemy import select
from sqlalchemy.orm import Session

from academy.auth.deps import get_tenant_id
from academy.auth.guards import require_role
from academy.core.db import get_db
from academy.models import Coach, User, UserRole
from academy.services.attendance import coach_players_with_attendance
from academy.services.coaches import parse_coach_id

log = logging.getLogger("academy.coaches")

router = APIRouter(prefix="/api/coaches", tags=["coaches"])


# ---------- Schemas ----------

class CoachCreateIn(BaseModel):
    coach_name: str | None = None
    email: str | None = None
    phone_numbers: str | None = None
    address: str | None = None
    players: int | None = Field(default=None, ge=0)
    salary: Decimal | None = Field(default=None, ge=0)
    week_salary: Decimal | None = Field(default=None, ge=0)
    category: str | None = None
    attendance: str | None = None
    active: bool = True
    status: str = "Active"


class CoachUpdateIn(BaseModel):
    coach_name: str | None = Field(default=None, min_length=1, max_length=100)
    email: str | None = None
    phone_numbers: str | None = None
    address: str | None = None
    salary: Decimal | None = Field(default=None, ge=0)
    week_salary: Decimal | None = Field(default=None, ge=0)
    category: str | None = None
    active: bool | None = None
    status: str | None = None


def _coach_out(c: Coach) -> dict:
    return {
        "coach_id": c.coach_id,
        "tenant_id": c.tenant_id,
        "coach_name": c.coach_name,
        "phone_numbers": c.phone_numbers,
        "email": c.email,
        "address": c.address,
        "players": c.players,
        "salary": float(c.salary) if c.salary is not None else None,
        "week_salary": float(c.week_salary) if c.week_salary is not None else None,
        "category": c.category,
        "attendance": c.attendance,
        "active": c.active,
        "status": c.status,
    }


def _get_coach(db: Session, coach_ref: str) -> Coach:
    coach_id = parse_coach_id(coach_ref)
    if coach_id is None:
        raise HTTPException(status_code=400, detail="Coach ID must resolve to a number")
    coach = db.get(Coach, coach_id)
    if coach is None:
        raise HTTPException(status_code=404, detail=f"Coach with ID {coach_ref} not found")
    return coach


# ---------- Routes ----------

@router.post("", status_code=status.HTTP_201_CREATED)
def create_coach(
    payload: CoachCreateIn,
    db: Session = Depends(get_db),
    tenant_id: int = Depends(get_tenant_id),
):
    if not (payload.coach_name or "").strip() or not (payload.email or "").strip():
        raise HTTPException(status_code=400, detail="Coach name and email are required")

    coach = Coach(tenant_id=tenant_id, **payload.model_dump())
    coach.coach_name = payload.coach_name.strip()
    coach.email = payload.email.strip().lower()
    db.add(coach)
    db.commit()
    db.refresh(coach)

    log.info("coach %s added for tenant %s", coach.coach_id, tenant_id)
    return {"message": "Coach details successfully inserted", "coach": _coach_out(coach)}


@router.get("")
def list_coaches(
    db: Session = Depends(get_db),
    tenant_id: int = Depends(get_tenant_id),
):
    rows = db.execute(
        select(Coach)
        .where(Coach.tenant_id == tenant_id, Coach.active.is_(True))
        .order_by(Coach.coach_id)
    ).scalars().all()
    return {"count": len(rows), "data": [_coach_out(c) for c in rows]}


@router.get("/me/players")
def my_players(
    db: Session = Depends(get_db),
    user: User = Depends(require_role(UserRole.COACH)),
):
    """Players assigned to the logged-in coach, matched by email."""
    coach = db.execute(
        select(Coach).where(Coach.email == user.email, Coach.active.is_(True)).order_by(Coach.coach_id).limit(1)
    ).scalar_one_or_none()
    if coach is None:
        return {"coach_email": user.email, "players": []}

    players = coach_players_with_attendance(db, coach_id=coach.coach_id, active_only=True)
    return {"coach_email": user.email, "players": players}


@router.get("/{coach_ref}")
def get_coach(coach_ref: str, db: Session = Depends(get_db)):
    return _coach_out(_get_coach(db, coach_ref))


@router.get("/{coach_ref}/players")
def get_coach_players(coach_ref: str, db: Session = Depends(get_db)):
    coach = _get_coach(db, coach_ref)
    return coach_players_with_attendance(db, coach_id=coach.coach_id)


@router.put("/{coach_ref}")
def update_coach(coach_ref: str, payload: CoachUpdateIn, db: Session = Depends(get_db)):
    coach = _get_coach(db, coach_ref)

    changes = {
        key: value
        for key, value in payload.model_dump(exclude_unset=True).items()
        if not (value is None and key in ("coach_name", "email", "active", "status"))
    }
    if not changes:
        raise HTTPException(status_code=400, detail="No fields provided to update")

    for key, value in changes.items():
        setattr(coach, key, value)
    db.commit()
    db.refresh(coach)
    return {"message": "Coach successfully updated", "coach": _coach_out(coach)}


@router.put("/{coach_ref}/deactivate")
def deactivate_coach(coach_ref: str, db: Session = Depends(get_db)):
    coach = _get_coach(db, coach_ref)
    coach.active = False
    coach.status = "Inactive"
    db.commit()
    return {"message": "Coach successfully deactivated", "coach": _coach_out(coach)}
