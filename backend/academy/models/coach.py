from __future__ import annotations

from decimal import Decimal

from sqlalchemy import Boolean, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from academy.core.db import Base


class Coach(Base):
    __tablename__ = "coaches"

    coach_id: Mapped[int] = mapped_column(primary_key=True)
    tenant_id: Mapped[int | None] = mapped_column(Integer, nullable=True, index=True)

    coach_name: Mapped[str] = mapped_column(String(100), nullable=False)
    phone_numbers: Mapped[str | None] = mapped_column(String(64), nullable=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    address: Mapped[str | None] = mapped_column(String(500), nullable=True)

    players: Mapped[int | None] = mapped_column(Integer, nullable=True)
    salary: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    week_salary: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True, default=0)
    category: Mapped[str | None] = mapped_column(String(64), nullable=True)
    attendance: Mapped[str | None] = mapped_column(String(32), nullable=True)

    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    status: Mapped[str] = mapped_column(String(32), nullable=False, default="Active")
