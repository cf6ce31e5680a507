from __future__ import annotations

from datetime import time
from typing import Any, List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.orm import Session, sessionmaker

from academy.auth.deps import get_optional_claims, get_tenant_id
from academy.core.db import get_db, get_session_factory
from academy.services.venues import (
    TimeSlotSpec,
    create_venue_with_slots,
    deactivate_venue,
    list_venues,
)

router = APIRouter(prefix="/api/venues", tags=["venues"])


# ---------- Schemas ----------

class TimeSlotIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    start_time: time | None = Field(default=None, alias="startTime")
    end_time: time | None = Field(default=None, alias="endTime")
    active: bool = True
    days: Optional[List[str]] = None  # ["Mon", "Wednesday", ...]


class VenueCreateIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # emptiness is checked by the service so that it is reported as 400
    name: str | None = None
    center_head: str | None = Field(default=None, alias="centerHead")
    address: str | None = None
    active: bool = True
    google_url: str | None = Field(default=None, alias="googleUrl")
    time_slots: List[TimeSlotIn] = Field(default_factory=list, alias="timeSlots")


# ---------- Routes ----------

@router.post("", status_code=status.HTTP_201_CREATED)
def create_venue(
    payload: VenueCreateIn,
    session_factory: sessionmaker = Depends(get_session_factory),
    claims: dict[str, Any] | None = Depends(get_optional_claims),
):
    """Create a venue with its time slots and days in one transaction."""
    tenant_id = claims.get("tenant_id") if claims else None

    result = create_venue_with_slots(
        session_factory,
        tenant_id=tenant_id,
        name=payload.name,
        center_head=payload.center_head,
        address=payload.address,
        active=payload.active,
        google_url=payload.google_url,
        time_slots=[
            TimeSlotSpec(
                start_time=s.start_time,
                end_time=s.end_time,
                active=s.active,
                days=tuple(s.days or ()),
            )
            for s in payload.time_slots
        ],
    )
    return {
        "message": "Venue and time slots inserted successfully",
        "venue_id": result.venue_id,
        "time_slots_inserted": result.time_slots_inserted,
        "days_inserted": result.days_inserted,
    }


@router.get("")
def get_venues(
    db: Session = Depends(get_db),
    tenant_id: int = Depends(get_tenant_id),
):
    return list_venues(db, tenant_id=tenant_id)


@router.delete("/{venue_id}")
def delete_venue(
    venue_id: int,
    db: Session = Depends(get_db),
    tenant_id: int = Depends(get_tenant_id),
):
    """Soft delete: the venue, its time slots and their days are marked inactive."""
    if venue_id <= 0:
        raise HTTPException(status_code=400, detail="Invalid venue ID")

    if not deactivate_venue(db, venue_id=venue_id, tenant_id=tenant_id):
        raise HTTPException(status_code=404, detail=f"Venue with ID {venue_id} not found")

    return {"message": f"Venue ID {venue_id} and related data deactivated successfully"}
