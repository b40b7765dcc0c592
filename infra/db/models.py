# infra/db/models.py
from __future__ import annotations
from datetime import date
from typing import Optional

from sqlalchemy import (
    String,
    Date,
    Boolean,
    ForeignKey,
    Enum as SAEnum,
    Index,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column

from infra.db.base import Base
from core.models import Role, VacationStatus


class EmployeeORM(Base):
    __tablename__ = "employees"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    email: Mapped[str] = mapped_column(String(254), default="")
    role: Mapped[Role] = mapped_column(
        SAEnum(Role, values_callable=lambda enum: [m.value for m in enum], native_enum=False, length=64),
        default=Role.OTHER,
        nullable=False,
    )
    department: Mapped[str] = mapped_column(String, default="")
    color: Mapped[str] = mapped_column(String(16), default="")
    employee_code: Mapped[str] = mapped_column(String(64), default="")
    is_admin: Mapped[bool] = mapped_column(Boolean, default=False)
    avatar: Mapped[Optional[str]] = mapped_column(String, nullable=True)
Index("idx_employees_email", EmployeeORM.email)
Index("idx_employees_role", EmployeeORM.role)


class VacationORM(Base):
    __tablename__ = "vacations"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    employee_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("employees.id", ondelete="CASCADE"),
        nullable=False,
    )
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    status: Mapped[VacationStatus] = mapped_column(
        SAEnum(VacationStatus, values_callable=lambda enum: [m.value for m in enum], native_enum=False, length=16),
        default=VacationStatus.PENDING,
        nullable=False,
    )
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
Index("idx_vacations_employee_id", VacationORM.employee_id)
Index("idx_vacations_dates", VacationORM.start_date, VacationORM.end_date)
