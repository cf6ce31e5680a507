from __future__ import annotations

from datetime import time

from sqlalchemy import Boolean, ForeignKey, String, Time
from sqlalchemy.orm import Mapped, mapped_column

from academy.core.db import Base


class TrainingSession(Base):
    __tablename__ = "training_sessions"

    session_id: Mapped[int] = mapped_column(primary_key=True)

    coach_id: Mapped[int] = mapped_column(ForeignKey("coaches.coach_id"), index=True)
    coach_name: Mapped[str] = mapped_column(String(100), nullable=False)

    day_of_week: Mapped[str] = mapped_column(String(16), nullable=False)
    start_time: Mapped[time] = mapped_column(Time, nullable=False)
    end_time: Mapped[time] = mapped_column(Time, nullable=False)
    group_category: Mapped[str | None] = mapped_column(String(64), nullable=True)
    location: Mapped[str | None] = mapped_column(String(200), nullable=True)

    status: Mapped[str] = mapped_column(String(32), nullable=False, default="Upcoming")
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
