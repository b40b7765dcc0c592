from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import Any, Optional

from core.domain.dates import format_date, parse_date
from core.domain.enums import VacationStatus
from core.domain.identifiers import generate_id


@dataclass(frozen=True)
class DateRange:
    """Closed calendar-date interval; both ends are included."""

    start: date
    end: date

    @property
    def days(self) -> int:
        return (self.end - self.start).days + 1

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end

    def overlaps(self, other: "DateRange") -> bool:
        return self.start <= other.end and self.end >= other.start


@dataclass
class VacationRequest:
    id: str
    employee_id: str
    start_date: date
    end_date: date
    status: VacationStatus = VacationStatus.PENDING
    notes: Optional[str] = None

    @staticmethod
    def create(
        employee_id: str,
        start_date: date,
        end_date: date,
        status: VacationStatus = VacationStatus.PENDING,
        notes: Optional[str] = None,
    ) -> "VacationRequest":
        return VacationRequest(
            id=generate_id(),
            employee_id=employee_id,
            start_date=start_date,
            end_date=end_date,
            status=status,
            notes=notes,
        )

    @property
    def date_range(self) -> DateRange:
        return DateRange(self.start_date, self.end_date)

    def days(self) -> int:
        return self.date_range.days

    def with_dates(self, start_date: date, end_date: date) -> "VacationRequest":
        """Copy keeping the id; used when a boundary day is removed."""
        return replace(self, start_date=start_date, end_date=end_date)

    def spawn(self, start_date: date, end_date: date) -> "VacationRequest":
        """New record with a fresh id inheriting employee, status and notes."""
        return VacationRequest.create(
            employee_id=self.employee_id,
            start_date=start_date,
            end_date=end_date,
            status=self.status,
            notes=self.notes,
        )

    def to_record(self) -> dict[str, Any]:
        record: dict[str, Any] = {
            "id": self.id,
            "employeeId": self.employee_id,
            "startDate": format_date(self.start_date),
            "endDate": format_date(self.end_date),
            "status": self.status.value,
        }
        if self.notes is not None:
            record["notes"] = self.notes
        return record

    @staticmethod
    def from_record(record: dict[str, Any]) -> "VacationRequest":
        return VacationRequest(
            id=str(record["id"]),
            employee_id=str(record["employeeId"]),
            start_date=parse_date(record["startDate"]),
            end_date=parse_date(record["endDate"]),
            status=VacationStatus(record.get("status") or VacationStatus.PENDING.value),
            notes=record.get("notes"),
        )


__all__ = ["DateRange", "VacationRequest"]
