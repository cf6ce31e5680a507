from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from academy.core.db import Base


class VenueSlotDay(Base):
    """A weekday on which a time slot runs."""

    __tablename__ = "venue_slot_days"
    __table_args__ = (
        UniqueConstraint("time_slot_id", "day", name="uq_venue_slot_days_slot_day"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    tenant_id: Mapped[int | None] = mapped_column(Integer, nullable=True)

    time_slot_id: Mapped[int] = mapped_column(ForeignKey("venue_time_slots.id"), index=True)
    day: Mapped[str] = mapped_column(String(3), nullable=False)  # Mon..Sun

    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    updated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    time_slot = relationship("VenueTimeSlot", back_populates="days")
