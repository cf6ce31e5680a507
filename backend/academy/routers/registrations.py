from __future__ import annotations

import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Response, status
from pydantic import BaseModel, Field
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from academy.auth.deps import get_tenant_id
from academy.core.db import get_db
from academy.models import Registration, RegistrationStatus

log = logging.getLogger("academy.registrations")

router = APIRouter(prefix="/api/registrations", tags=["registrations"])


class RegistrationIn(BaseModel):
    name: str | None = None
    phone_number: str | None = None
    email_id: str | None = None
    address: str | None = None
    age: int | None = Field(default=None, ge=0)
    application_date: date | None = None
    parent_name: str | None = None


class RegistrationStatusIn(BaseModel):
    status: RegistrationStatus


def _registration_out(r: Registration) -> dict:
    return {
        "regist_id": r.regist_id,
        "tenant_id": r.tenant_id,
        "name": r.name,
        "phone_number": r.phone_number,
        "email_id": r.email_id,
        "address": r.address,
        "age": r.age,
        "application_date": r.application_date.isoformat() if r.application_date else None,
        "parent_name": r.parent_name,
        "status": r.status,
        "active": r.active,
    }


@router.get("")
def list_registrations(
    db: Session = Depends(get_db),
    tenant_id: int = Depends(get_tenant_id),
):
    rows = db.execute(
        select(Registration)
        .where(Registration.tenant_id == tenant_id)
        .order_by(Registration.regist_id.desc())
    ).scalars().all()
    return {
        "tenant_id": tenant_id,
        "count": len(rows),
        "registrations": [_registration_out(r) for r in rows],
    }


def _registered_emails(db: Session, tenant_id: int) -> set[str]:
    return set(
        db.execute(
            select(Registration.email_id).where(
                Registration.tenant_id == tenant_id,
                Registration.email_id.is_not(None),
            )
        ).scalars().all()
    )


def _insert_each(db: Session, tenant_id: int, rows: list[dict]) -> list[Registration]:
    """One commit per row; rows that hit the tenant/email constraint are skipped."""
    inserted: list[Registration] = []
    for data in rows:
        reg = Registration(tenant_id=tenant_id, **data)
        db.add(reg)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            log.info("registration for %s already exists for tenant %s, skipped", data["email_id"], tenant_id)
            continue
        inserted.append(reg)
    return inserted


@router.post("/bulk", status_code=status.HTTP_201_CREATED)
def bulk_upload(
    payload: list[RegistrationIn],
    db: Session = Depends(get_db),
    tenant_id: int = Depends(get_tenant_id),
):
    """Import spreadsheet rows; rows whose email is already registered for the tenant are skipped."""
    if not payload:
        raise HTTPException(status_code=400, detail="Invalid or empty array")

    seen = _registered_emails(db, tenant_id)

    rows: list[dict] = []
    for item in payload:
        email = (item.email_id or "").strip().lower() or None
        if email is not None:
            if email in seen:
                continue
            seen.add(email)
        data = item.model_dump()
        data["email_id"] = email
        rows.append(data)

    new_rows = [Registration(tenant_id=tenant_id, **data) for data in rows]
    db.add_all(new_rows)
    try:
        db.commit()
    except IntegrityError:
        # a concurrent import registered some of these emails first; keep the rest
        db.rollback()
        new_rows = _insert_each(db, tenant_id, rows)
    for r in new_rows:
        db.refresh(r)

    log.info("bulk registrations for tenant %s: %d of %d inserted", tenant_id, len(new_rows), len(payload))
    return {
        "tenant_id": tenant_id,
        "inserted": len(new_rows),
        "totalRecordsAttempted": len(payload),
        "newRecords": [_registration_out(r) for r in new_rows],
    }


@router.put("/{regist_id}/status")
def update_status(
    regist_id: int,
    payload: RegistrationStatusIn,
    db: Session = Depends(get_db),
):
    reg = db.get(Registration, regist_id)
    if reg is None:
        raise HTTPException(status_code=404, detail=f"Registration with ID {regist_id} not found")

    reg.status = payload.status.value
    db.commit()
    return {"message": f"Registration {regist_id} status updated to {reg.status}"}


@router.delete("/{regist_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_registration(regist_id: int, db: Session = Depends(get_db)):
    reg = db.get(Registration, regist_id)
    if reg is None:
        raise HTTPException(status_code=404, detail=f"Registration with ID {regist_id} not found")

    db.delete(reg)
    db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
