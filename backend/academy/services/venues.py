from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, time, timezone
from typing import Sequence

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from academy.core.errors import ConnectionAcquisitionFailure, TransactionFailure, ValidationError
from academy.core.weekdays import day_order, normalize_day
from academy.models import Venue, VenueSlotDay, VenueTimeSlot

log = logging.getLogger("academy.venues")


@dataclass(frozen=True)
class TimeSlotSpec:
    start_time: time | None
    end_time: time | None
    active: bool = True
    days: Sequence[str] = ()


@dataclass(frozen=True)
class VenueCreated:
    venue_id: int
    time_slots_inserted: int
    days_inserted: int
    slot_ids: list[int] = field(default_factory=list)


def _validate(
    *,
    name: str | None,
    center_head: str | None,
    address: str | None,
    time_slots: Sequence[TimeSlotSpec],
) -> list[tuple[TimeSlotSpec, list[str]]]:
    """Check the submission before touching the store; returns slots with normalized days."""
    missing = [
        label
        for label, value in (("name", name), ("centerHead", center_head), ("address", address))
        if not (value or "").strip()
    ]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")
    if not time_slots:
        raise ValidationError("At least one time slot is required")

    checked: list[tuple[TimeSlotSpec, list[str]]] = []
    for idx, slot in enumerate(time_slots, start=1):
        if slot.start_time is None or slot.end_time is None:
            raise ValidationError(f"Time slot {idx}: startTime and endTime are required")
        # TIME columns keep wall-clock only
        if slot.start_time.tzinfo is not None or slot.end_time.tzinfo is not None:
            raise ValidationError(f"Time slot {idx}: times must not carry a UTC offset")
        if slot.end_time <= slot.start_time:
            raise ValidationError(f"Time slot {idx}: endTime must be after startTime")

        days: list[str] = []
        for raw in slot.days or ():
            day = normalize_day(raw)
            if day is None:
                raise ValidationError(f"Time slot {idx}: unknown day {raw!r}")
            if day in days:
                raise ValidationError(f"Time slot {idx}: day {day} listed twice")
            days.append(day)
        checked.append((slot, days))
    return checked


def create_venue_with_slots(
    session_factory: sessionmaker,
    *,
    tenant_id: int | None,
    name: str | None,
    center_head: str | None,
    address: str | None,
    time_slots: Sequence[TimeSlotSpec],
    active: bool = True,
    google_url: str | None = None,
) -> VenueCreated:
    """Create a venue with its time slots and their days as one all-or-nothing unit.

    Input is validated before a connection is taken from the pool. Inserts run in
    submission order inside a single transaction because every child row needs the
    id generated for its parent. Any failure rolls the whole attempt back; there are
    no retries.

    Raises:
        ValidationError: required fields missing or malformed slots/days.
        ConnectionAcquisitionFailure: the store could not hand out a connection.
        TransactionFailure: an insert or the commit failed; nothing was persisted.
    """
    checked = _validate(name=name, center_head=center_head, address=address, time_slots=time_slots)

    with session_factory() as db:
        try:
            db.connection()
        except SQLAlchemyError as e:
            log.error("venue create: cannot acquire store connection: %s", e)
            raise ConnectionAcquisitionFailure(
                "Database is unavailable, please retry later",
                details=str(e),
            ) from e

        try:
            venue = Venue(
                tenant_id=tenant_id,
                name=name.strip(),
                center_head=center_head.strip(),
                address=address.strip(),
                active=active,
                google_url=(google_url or "").strip() or None,
            )
            db.add(venue)
            db.flush()
            venue_id = venue.id

            slot_ids: list[int] = []
            days_inserted = 0
            for slot, days in checked:
                ts = VenueTimeSlot(
                    tenant_id=tenant_id,
                    venue_id=venue_id,
                    start_time=slot.start_time,
                    end_time=slot.end_time,
                    active=slot.active,
                )
                db.add(ts)
                db.flush()  # ts.id
                slot_ids.append(ts.id)

                for day in days:
                    db.add(VenueSlotDay(tenant_id=tenant_id, time_slot_id=ts.id, day=day, active=True))
                    db.flush()
                    days_inserted += 1

            db.commit()
        except Exception as e:
            db.rollback()
            log.error("venue create rolled back: %s", e)
            raise TransactionFailure(
                "Failed to insert venue due to a database error",
                details=str(e),
            ) from e

        log.info(
            "venue %s created with %d time slots, %d days (tenant=%s)",
            venue_id, len(slot_ids), days_inserted, tenant_id,
        )
        return VenueCreated(
            venue_id=venue_id,
            time_slots_inserted=len(slot_ids),
            days_inserted=days_inserted,
            slot_ids=slot_ids,
        )


def list_venues(db: Session, *, tenant_id: int | None) -> list[dict]:
    """Active venues with their active time slots and days, shaped for the UI."""
    stmt = select(Venue).where(Venue.active.is_(True)).order_by(Venue.id)
    if tenant_id is not None:
        stmt = stmt.where(Venue.tenant_id == tenant_id)
    venues = db.execute(stmt).scalars().all()
    if not venues:
        return []

    venue_ids = [v.id for v in venues]
    slots = db.execute(
        select(VenueTimeSlot)
        .where(VenueTimeSlot.venue_id.in_(venue_ids), VenueTimeSlot.active.is_(True))
        .order_by(VenueTimeSlot.id)
    ).scalars().all()

    days_by_slot: dict[int, list[str]] = {}
    if slots:
        rows = db.execute(
            select(VenueSlotDay.time_slot_id, VenueSlotDay.day).where(
                VenueSlotDay.time_slot_id.in_([s.id for s in slots]),
                VenueSlotDay.active.is_(True),
            )
        ).all()
        for r in rows:
            days_by_slot.setdefault(r.time_slot_id, []).append(r.day)

    slots_by_venue: dict[int, list[dict]] = {}
    for s in slots:
        slots_by_venue.setdefault(s.venue_id, []).append(
            {
                "id": s.id,
                "startTime": s.start_time.strftime("%H:%M"),
                "endTime": s.end_time.strftime("%H:%M"),
                "days": sorted(days_by_slot.get(s.id, []), key=day_order),
            }
        )

    return [
        {
            "id": v.id,
            "tenant_id": v.tenant_id,
            "name": v.name,
            "status": v.status,
            "centerHead": v.center_head,
            "address": v.address,
            "googleMapsUrl": v.google_url,
            "timeSlots": slots_by_venue.get(v.id, []),
        }
        for v in venues
    ]


def deactivate_venue(db: Session, *, venue_id: int, tenant_id: int | None = None) -> bool:
    """Soft-delete a venue and cascade by foreign key to its slots and their days.

    Returns False when the venue does not exist (nothing is changed).
    """
    stmt = select(Venue).where(Venue.id == venue_id)
    if tenant_id is not None:
        stmt = stmt.where(Venue.tenant_id == tenant_id)
    venue = db.execute(stmt).scalar_one_or_none()
    if venue is None:
        return False

    now = datetime.now(timezone.utc)
    slot_ids = select(VenueTimeSlot.id).where(VenueTimeSlot.venue_id == venue_id)
    try:
        db.execute(
            update(VenueSlotDay)
            .where(VenueSlotDay.time_slot_id.in_(slot_ids))
            .values(active=False, updated_at=now)
            .execution_options(synchronize_session=False)
        )
        db.execute(
            update(VenueTimeSlot)
            .where(VenueTimeSlot.venue_id == venue_id)
            .values(active=False, updated_at=now)
            .execution_options(synchronize_session=False)
        )
        venue.active = False
        venue.status = "Inactive"
        venue.updated_at = now
        db.commit()
    except Exception:
        db.rollback()
        raise

    log.info("venue %s deactivated", venue_id)
    return True
