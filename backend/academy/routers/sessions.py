from __future__ import annotations

import logging
from datetime import time

from fastapi import APIRouter, Depends, HTTPException, Response, status
from pydantic import BaseModel, Field
from sqlalchemy import select
from sqlalchemy.orm import Session

from academy.core.db import get_db
from academy.models import TrainingSession
from academy.services.coaches import parse_coach_id, resolve_coach

log = logging.getLogger("academy.sessions")

router = APIRouter(prefix="/api/sessions", tags=["sessions"])


class SessionCreateIn(BaseModel):
    coach_id: int | str | None = None
    coach_name: str | None = None
    day_of_week: str | None = None
    start_time: time | None = None
    end_time: time | None = None
    group_category: str | None = None
    location: str | None = None
    status: str | None = None
    active: bool = True


class SessionUpdateIn(BaseModel):
    day_of_week: str | None = Field(default=None, min_length=1)
    start_time: time | None = None
    end_time: time | None = None
    group_category: str | None = None
    location: str | None = None
    status: str | None = None
    active: bool | None = None


def _session_out(s: TrainingSession) -> dict:
    return {
        "session_id": s.session_id,
        "coach_id": s.coach_id,
        "coach_name": s.coach_name,
        "day_of_week": s.day_of_week,
        "start_time": s.start_time.strftime("%H:%M"),
        "end_time": s.end_time.strftime("%H:%M"),
        "group_category": s.group_category,
        "location": s.location,
        "status": s.status,
        "active": s.active,
    }


@router.get("/coach/{coach_ref}")
def list_coach_sessions(coach_ref: str, db: Session = Depends(get_db)):
    coach_id = parse_coach_id(coach_ref)
    if coach_id is None:
        raise HTTPException(status_code=400, detail="Coach ID must resolve to a valid number")

    rows = db.execute(
        select(TrainingSession)
        .where(TrainingSession.coach_id == coach_id)
        .order_by(TrainingSession.session_id.desc())
    ).scalars().all()
    return [_session_out(s) for s in rows]


@router.post("", status_code=status.HTTP_201_CREATED)
def create_session(payload: SessionCreateIn, db: Session = Depends(get_db)):
    if payload.coach_id in (None, ""):
        raise HTTPException(status_code=400, detail="Invalid or missing coach_id")
    if not (payload.day_of_week or "").strip():
        raise HTTPException(status_code=400, detail="Invalid or missing day_of_week")
    if payload.start_time is None or payload.end_time is None:
        raise HTTPException(status_code=400, detail="start_time and end_time are required")

    coach = resolve_coach(db, payload.coach_id)
    if coach is None:
        raise HTTPException(status_code=400, detail=f"Could not resolve coach_id: {payload.coach_id}")

    obj = TrainingSession(
        coach_id=coach.coach_id,
        coach_name=(payload.coach_name or "").strip() or coach.coach_name,
        day_of_week=payload.day_of_week.strip(),
        start_time=payload.start_time,
        end_time=payload.end_time,
        group_category=payload.group_category,
        location=payload.location,
        status=(payload.status or "").strip() or "Upcoming",
        active=payload.active,
    )
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return _session_out(obj)


@router.put("/{session_id}")
def update_session(session_id: int, payload: SessionUpdateIn, db: Session = Depends(get_db)):
    obj = db.get(TrainingSession, session_id)
    if obj is None:
        raise HTTPException(status_code=404, detail="Training session not found")

    changes = {
        key: value
        for key, value in payload.model_dump(exclude_unset=True).items()
        if not (value is None and key in ("day_of_week", "start_time", "end_time", "status", "active"))
    }
    if not changes:
        raise HTTPException(status_code=400, detail="No fields provided to update")

    for key, value in changes.items():
        setattr(obj, key, value)
    db.commit()
    db.refresh(obj)
    return _session_out(obj)


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_session(session_id: int, db: Session = Depends(get_db)):
    obj = db.get(TrainingSession, session_id)
    if obj is None:
        log.warning("delete of unknown training session %s", session_id)
        raise HTTPException(status_code=404, detail="Training session not found or already deleted")

    db.delete(obj)
    db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
