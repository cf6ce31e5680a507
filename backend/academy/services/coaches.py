from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from academy.models import Coach


def parse_coach_id(value) -> int | None:
    """Numeric coach id from 12, "12" or "CO12"; None when it is not numeric."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    v = str(value).strip()
    if v.upper().startswith("CO"):
        v = v[2:]
    return int(v) if v.isdigit() else None


def resolve_coach(db: Session, identifier, *, tenant_id: int | None = None) -> Coach | None:
    """Find a coach by numeric id (or CO-prefixed id), falling back to an exact name match."""
    coach_id = parse_coach_id(identifier)
    if coach_id is not None:
        stmt = select(Coach).where(Coach.coach_id == coach_id)
    else:
        name = str(identifier or "").strip()
        if not name:
            return None
        stmt = select(Coach).where(Coach.coach_name == name).order_by(Coach.coach_id)

    if tenant_id is not None:
        stmt = stmt.where(Coach.tenant_id == tenant_id)
    return db.execute(stmt.limit(1)).scalar_one_or_none()
