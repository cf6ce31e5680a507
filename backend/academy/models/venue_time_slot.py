from __future__ import annotations

from datetime import datetime, time

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, Time
from sqlalchemy.orm import Mapped, mapped_column, relationship

from academy.core.db import Base


class VenueTimeSlot(Base):
    """Recurring start/end window at a venue (e.g. 06:00-08:00)."""

    __tablename__ = "venue_time_slots"

    id: Mapped[int] = mapped_column(primary_key=True)
    tenant_id: Mapped[int | None] = mapped_column(Integer, nullable=True)

    venue_id: Mapped[int] = mapped_column(ForeignKey("venues.id"), index=True)
    start_time: Mapped[time] = mapped_column(Time, nullable=False)
    end_time: Mapped[time] = mapped_column(Time, nullable=False)

    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    updated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    venue = relationship("Venue", back_populates="time_slots")
    days = relationship("VenueSlotDay", back_populates="time_slot", order_by="VenueSlotDay.id")
