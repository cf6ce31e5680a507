from __future__ import annotations

from datetime import date

from sqlalchemy import Boolean, Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from academy.core.db import Base


class Player(Base):
    __tablename__ = "players"

    id: Mapped[int] = mapped_column(primary_key=True)
    # public code shown in the UI, e.g. PL00042; filled right after insert
    player_id: Mapped[str | None] = mapped_column(String(32), unique=True, nullable=True)
    tenant_id: Mapped[int | None] = mapped_column(Integer, nullable=True, index=True)

    name: Mapped[str] = mapped_column(String(128), nullable=False)
    father_name: Mapped[str | None] = mapped_column(String(128), nullable=True)
    mother_name: Mapped[str | None] = mapped_column(String(128), nullable=True)
    gender: Mapped[str | None] = mapped_column(String(16), nullable=True)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
    age: Mapped[int | None] = mapped_column(Integer, nullable=True)
    blood_group: Mapped[str | None] = mapped_column(String(8), nullable=True)

    email_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone_no: Mapped[str | None] = mapped_column(String(32), nullable=True)
    emergency_contact_number: Mapped[str | None] = mapped_column(String(32), nullable=True)
    guardian_contact_number: Mapped[str | None] = mapped_column(String(32), nullable=True)
    guardian_email_id: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    address: Mapped[str | None] = mapped_column(String(500), nullable=True)
    medical_condition: Mapped[str | None] = mapped_column(Text, nullable=True)

    aadhar_upload_path: Mapped[str | None] = mapped_column(String(500), nullable=True)
    birth_certificate_path: Mapped[str | None] = mapped_column(String(500), nullable=True)
    profile_photo_path: Mapped[str | None] = mapped_column(String(500), nullable=True)

    center_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    coach_id: Mapped[int | None] = mapped_column(ForeignKey("coaches.coach_id"), nullable=True, index=True)
    coach_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    category: Mapped[str | None] = mapped_column(String(64), nullable=True)

    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    status: Mapped[str] = mapped_column(String(32), nullable=False, default="Active")

    coach = relationship("Coach")
