from __future__ import annotations

import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field
from sqlalchemy import select
from sqlalchemy.orm import Session

from academy.auth.deps import get_tenant_id
from academy.core.db import get_db
from academy.models import Player
from academy.services.coaches import resolve_coach

log = logging.getLogger("academy.players")

router = APIRouter(prefix="/api/players", tags=["players"])


# ---------- Schemas ----------

class PlayerFields(BaseModel):
    father_name: str | None = None
    mother_name: str | None = None
    gender: str | None = None
    age: int | None = Field(default=None, ge=0)
    blood_group: str | None = None
    email_id: str | None = None
    phone_no: str | None = None
    emergency_contact_number: str | None = None
    guardian_contact_number: str | None = None
    guardian_email_id: str | None = None
    address: str | None = None
    medical_condition: str | None = None
    aadhar_upload_path: str | None = None
    birth_certificate_path: str | None = None
    profile_photo_path: str | None = None
    center_name: str | None = None
    category: str | None = None


class PlayerCreateIn(PlayerFields):
    name: str | None = None
    date_of_birth: date | None = None


class PlayerUpdateIn(PlayerFields):
    name: str | None = Field(default=None, min_length=1, max_length=128)
    date_of_birth: date | None = None
    active: bool | None = None
    status: str | None = None


class AssignCoachIn(BaseModel):
    id: int = Field(..., gt=0)
    coach_id: int | str


def _player_out(p: Player) -> dict:
    return {
        "id": p.id,
        "player_id": p.player_id,
        "name": p.name,
        "father_name": p.father_name,
        "mother_name": p.mother_name,
        "gender": p.gender,
        "date_of_birth": p.date_of_birth.isoformat() if p.date_of_birth else None,
        "age": p.age,
        "blood_group": p.blood_group,
        "email_id": p.email_id,
        "phone_no": p.phone_no,
        "emergency_contact_number": p.emergency_contact_number,
        "guardian_contact_number": p.guardian_contact_number,
        "guardian_email_id": p.guardian_email_id,
        "address": p.address,
        "medical_condition": p.medical_condition,
        "aadhar_upload_path": p.aadhar_upload_path,
        "birth_certificate_path": p.birth_certificate_path,
        "profile_photo_path": p.profile_photo_path,
        "center_name": p.center_name,
        "coach_id": p.coach_id,
        "coach_name": p.coach_name,
        "category": p.category,
        "active": p.active,
        "status": p.status,
    }


def _get_player(db: Session, player_pk: int, tenant_id: int) -> Player:
    player = db.execute(
        select(Player).where(Player.id == player_pk, Player.tenant_id == tenant_id)
    ).scalar_one_or_none()
    if player is None:
        raise HTTPException(status_code=404, detail="Player not found")
    return player


# ---------- Routes ----------

@router.get("")
def list_players(
    db: Session = Depends(get_db),
    tenant_id: int = Depends(get_tenant_id),
):
    rows = db.execute(
        select(Player).where(Player.tenant_id == tenant_id).order_by(Player.id)
    ).scalars().all()
    return {"players": [_player_out(p) for p in rows]}


@router.post("", status_code=status.HTTP_201_CREATED)
def create_player(
    payload: PlayerCreateIn,
    db: Session = Depends(get_db),
    tenant_id: int = Depends(get_tenant_id),
):
    if not (payload.name or "").strip() or payload.date_of_birth is None:
        raise HTTPException(status_code=400, detail="Missing required fields: name, date_of_birth")

    player = Player(
        tenant_id=tenant_id,
        **payload.model_dump(exclude={"name"}),
    )
    player.name = payload.name.strip()
    db.add(player)
    try:
        db.flush()
        player.player_id = f"PL{player.id:05d}"
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(player)

    log.info("player %s added for tenant %s", player.player_id, tenant_id)
    return {"message": "Player added successfully", "player": _player_out(player)}


@router.post("/assign-coach")
def assign_coach(
    payload: AssignCoachIn,
    db: Session = Depends(get_db),
    tenant_id: int = Depends(get_tenant_id),
):
    """Attach a coach of the same tenant to a player."""
    coach = resolve_coach(db, payload.coach_id, tenant_id=tenant_id)
    if coach is None:
        raise HTTPException(status_code=404, detail="Selected coach not found for your tenant")

    player = _get_player(db, payload.id, tenant_id)
    player.coach_id = coach.coach_id
    player.coach_name = coach.coach_name
    db.commit()
    db.refresh(player)
    return {"message": "Coach assigned successfully", "player": _player_out(player)}


@router.get("/{player_pk}")
def get_player(
    player_pk: int,
    db: Session = Depends(get_db),
    tenant_id: int = Depends(get_tenant_id),
):
    return _player_out(_get_player(db, player_pk, tenant_id))


@router.put("/{player_pk}")
def update_player(
    player_pk: int,
    payload: PlayerUpdateIn,
    db: Session = Depends(get_db),
    tenant_id: int = Depends(get_tenant_id),
):
    changes = {
        key: value
        for key, value in payload.model_dump(exclude_unset=True).items()
        # NOT NULL columns cannot be cleared
        if not (value is None and key in ("name", "date_of_birth", "active", "status"))
    }
    if not changes:
        raise HTTPException(status_code=400, detail="No fields provided to update")

    player = _get_player(db, player_pk, tenant_id)
    for key, value in changes.items():
        setattr(player, key, value)
    db.commit()
    db.refresh(player)
    return {"message": "Player details updated successfully", "player": _player_out(player)}


@router.delete("/{player_pk}")
def deactivate_player(
    player_pk: int,
    db: Session = Depends(get_db),
    tenant_id: int = Depends(get_tenant_id),
):
    player = _get_player(db, player_pk, tenant_id)
    player.active = False
    player.status = "Inactive"
    db.commit()
    return {"message": f"Player ID {player.id} successfully deactivated", "playerId": player.id}
