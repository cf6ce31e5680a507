from __future__ import annotations

import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy import select
from sqlalchemy.orm import Session

from academy.auth.guards import require_role
from academy.core.db import get_db
from academy.models import Attendance, Player, User, UserRole
from academy.services.attendance import guardian_players
from academy.services.coaches import resolve_coach

log = logging.getLogger("academy.attendance")

router = APIRouter(prefix="/api/attendance", tags=["attendance"])


class AttendanceIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    player_id: str | int | None = Field(default=None, alias="playerId")
    attendance_date: date | None = Field(default=None, alias="attendanceDate")
    is_present: bool | None = Field(default=None, alias="isPresent")
    coach_id: int | str | None = Field(default=None, alias="coachId")


@router.post("", status_code=status.HTTP_201_CREATED)
def record_attendance(payload: AttendanceIn, db: Session = Depends(get_db)):
    if (
        payload.player_id in (None, "")
        or payload.attendance_date is None
        or payload.is_present is None
        or payload.coach_id in (None, "")
    ):
        raise HTTPException(
            status_code=400,
            detail="Missing required attendance data: playerId, attendanceDate, isPresent, coachId",
        )

    coach = resolve_coach(db, payload.coach_id)
    if coach is None:
        raise HTTPException(status_code=400, detail=f"Could not resolve coachId: {payload.coach_id}")

    player_code = str(payload.player_id).strip()
    player = db.execute(select(Player).where(Player.player_id == player_code)).scalar_one_or_none()
    if player is None:
        raise HTTPException(status_code=404, detail=f"Player {player_code} not found")

    record = Attendance(
        player_id=player_code,
        attendance_date=payload.attendance_date,
        is_present=payload.is_present,
        recorded_by_coach_id=coach.coach_id,
    )
    db.add(record)
    db.commit()
    db.refresh(record)

    log.debug("attendance %s: player=%s date=%s present=%s", record.attendance_id, player_code,
              record.attendance_date, record.is_present)
    return {
        "message": "Attendance successfully recorded",
        "data": {
            "attendance_id": record.attendance_id,
            "player_id": record.player_id,
            "attendance_date": record.attendance_date.isoformat(),
            "is_present": record.is_present,
            "recorded_by_coach_id": record.recorded_by_coach_id,
        },
    }


@router.get("/guardian/{email}")
def guardian_overview(
    email: str,
    db: Session = Depends(get_db),
    user: User = Depends(require_role(UserRole.PARENT)),
):
    """Attendance summary of the children registered under a guardian email."""
    if user.email.strip().lower() != email.strip().lower():
        raise HTTPException(status_code=403, detail="Forbidden: token email does not match requested data")
    return guardian_players(db, guardian_email=email)
