from __future__ import annotations

from sqlalchemy import case, func, select
from sqlalchemy.orm import Session

from academy.models import Attendance, Player


def attendance_percentage(present: int | None, total: int | None) -> float | None:
    if not total:
        return None
    return round((present or 0) * 100.0 / total, 2)


def _player_attendance_stmt():
    present = func.coalesce(func.sum(case((Attendance.is_present.is_(True), 1), else_=0)), 0)
    total = func.count(Attendance.attendance_id)
    return (
        select(Player, present.label("present"), total.label("total"))
        .outerjoin(Attendance, Attendance.player_id == Player.player_id)
        .group_by(Player.id)
        .order_by(Player.name)
    )


def coach_players_with_attendance(db: Session, *, coach_id: int, active_only: bool = False) -> list[dict]:
    stmt = _player_attendance_stmt().where(Player.coach_id == coach_id)
    if active_only:
        stmt = stmt.where(Player.active.is_(True))

    return [
        {
            "player_id": r.Player.player_id,
            "name": r.Player.name,
            "age": r.Player.age,
            "category": r.Player.category,
            "status": r.Player.status,
            "active": r.Player.active,
            "attendance_percentage": attendance_percentage(r.present, r.total),
        }
        for r in db.execute(stmt).all()
    ]


def guardian_players(db: Session, *, guardian_email: str, recent_limit: int = 10) -> list[dict]:
    """Players whose guardian email matches (case and whitespace insensitive)."""
    email = (guardian_email or "").strip().lower()
    stmt = _player_attendance_stmt().where(func.lower(func.trim(Player.guardian_email_id)) == email)

    out = []
    for r in db.execute(stmt).all():
        p = r.Player
        recent = db.execute(
            select(Attendance.attendance_date, Attendance.is_present)
            .where(Attendance.player_id == p.player_id)
            .order_by(Attendance.attendance_date.desc(), Attendance.attendance_id.desc())
            .limit(recent_limit)
        ).all()
        out.append(
            {
                "player_id": p.player_id,
                "name": p.name,
                "age": p.age,
                "center": p.center_name,
                "coach": p.coach_name,
                "position": p.category,
                "phone_no": p.phone_no,
                "player_email": p.email_id,
                "attendance_percentage": attendance_percentage(r.present, r.total) or 0,
                "recent_activities": [
                    {
                        "date": a.attendance_date.isoformat(),
                        "activity": "Training Session",
                        "status": "Present" if a.is_present else "Absent",
                    }
                    for a in recent
                ],
            }
        )
    return out
