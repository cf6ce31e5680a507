from __future__ import annotations

from datetime import date

from sqlalchemy import Boolean, Date, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from academy.core.db import Base


class Attendance(Base):
    __tablename__ = "attendance"

    attendance_id: Mapped[int] = mapped_column(primary_key=True)

    player_id: Mapped[str] = mapped_column(String(32), ForeignKey("players.player_id"), index=True)
    attendance_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    is_present: Mapped[bool] = mapped_column(Boolean, nullable=False)
    recorded_by_coach_id: Mapped[int] = mapped_column(ForeignKey("coaches.coach_id"), index=True)
