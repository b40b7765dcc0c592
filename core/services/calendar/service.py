from __future__ import annotations

import calendar as _calendar
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional

from core.interfaces import EmployeeRepository, VacationStore
from core.models import DateRange, Employee, Holiday, Role, VacationRequest, iter_days
from core.services.work_calendar.engine import WorkCalendarEngine


@dataclass
class CalendarDay:
    day: date
    is_weekend: bool
    holiday: Optional[Holiday] = None
    vacations: List[VacationRequest] = field(default_factory=list)

    @property
    def is_business_day(self) -> bool:
        return not self.is_weekend and self.holiday is None


@dataclass
class CalendarMonth:
    year: int
    month: int
    days: List[CalendarDay]
    employees: List[Employee]


class CalendarService:
    """
    Calendar module:
    - Month grid with weekend / holiday flags and the vacations on each day
    - Year view as twelve months
    - Role and employee filters, as in the calendar screen
    """

    def __init__(
        self,
        vacation_store: VacationStore,
        employee_repo: EmployeeRepository,
        calendar: WorkCalendarEngine,
    ):
        self._store = vacation_store
        self._employee_repo = employee_repo
        self._calendar = calendar

    def month_view(
        self,
        year: int,
        month: int,
        role: Role | str | None = None,
        employee_id: str | None = None,
    ) -> CalendarMonth:
        employees = {e.id: e for e in self._employee_repo.list_all()}
        vacations = self._filtered_vacations(employees, role, employee_id)
        return self._build_month(year, month, employees, vacations)

    def year_view(
        self,
        year: int,
        role: Role | str | None = None,
        employee_id: str | None = None,
    ) -> List[CalendarMonth]:
        employees = {e.id: e for e in self._employee_repo.list_all()}
        vacations = self._filtered_vacations(employees, role, employee_id)
        return [self._build_month(year, month, employees, vacations) for month in range(1, 13)]

    def employees_in_window(
        self,
        start: date,
        end: date,
        role: Role | str | None = None,
        employee_id: str | None = None,
    ) -> List[Employee]:
        employees = {e.id: e for e in self._employee_repo.list_all()}
        vacations = self._filtered_vacations(employees, role, employee_id)
        return self._employees_with_vacations(DateRange(start, end), employees, vacations)

    def _build_month(
        self,
        year: int,
        month: int,
        employees: Dict[str, Employee],
        vacations: List[VacationRequest],
    ) -> CalendarMonth:
        first = date(year, month, 1)
        last = date(year, month, _calendar.monthrange(year, month)[1])
        window = DateRange(first, last)
        in_window = [v for v in vacations if v.date_range.overlaps(window)]
        holidays = {h.date: h for h in self._calendar.holidays.holidays_for_year(year)}

        days = [
            CalendarDay(
                day=d,
                is_weekend=self._calendar.is_weekend(d),
                holiday=holidays.get(d),
                vacations=[v for v in in_window if v.date_range.contains(d)],
            )
            for d in iter_days(first, last)
        ]
        return CalendarMonth(
            year=year,
            month=month,
            days=days,
            employees=self._employees_with_vacations(window, employees, in_window),
        )

    def _filtered_vacations(
        self,
        employees: Dict[str, Employee],
        role: Role | str | None,
        employee_id: str | None,
    ) -> List[VacationRequest]:
        wanted_role = Role(role) if role is not None else None
        result: List[VacationRequest] = []
        for vacation in self._store.list_all():
            employee = employees.get(vacation.employee_id)
            if employee is None:
                continue
            if wanted_role is not None and employee.role != wanted_role:
                continue
            if employee_id is not None and employee.id != employee_id:
                continue
            result.append(vacation)
        result.sort(key=lambda v: (v.start_date, v.employee_id))
        return result

    @staticmethod
    def _employees_with_vacations(
        window: DateRange,
        employees: Dict[str, Employee],
        vacations: List[VacationRequest],
    ) -> List[Employee]:
        ids = {v.employee_id for v in vacations if v.date_range.overlaps(window)}
        return sorted((employees[i] for i in ids if i in employees), key=lambda e: e.name.lower())


__all__ = ["CalendarService", "CalendarDay", "CalendarMonth"]
