# core/services/vacation/overlap.py
from __future__ import annotations

from datetime import date
from typing import Iterable, List, Mapping

from core.models import DateRange, Employee, Role, VacationRequest, VacationStatus


def find_overlaps(
    vacations: Iterable[VacationRequest],
    employees: Mapping[str, Employee],
    start: date,
    end: date,
    role: Role,
    exclude_vacation_id: str | None = None,
) -> List[VacationRequest]:
    """
    Non-rejected vacations of same-role employees sharing at least one day
    with [start, end]. Advisory: callers warn, they never block.
    """
    candidate = DateRange(start, end)
    matches: List[VacationRequest] = []
    for vacation in vacations:
        if exclude_vacation_id is not None and vacation.id == exclude_vacation_id:
            continue
        if vacation.status == VacationStatus.REJECTED:
            continue
        if not candidate.overlaps(vacation.date_range):
            continue
        employee = employees.get(vacation.employee_id)
        if employee is None or employee.role != role:
            continue
        matches.append(vacation)
    return matches


__all__ = ["find_overlaps"]
