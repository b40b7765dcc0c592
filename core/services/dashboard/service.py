# core/services/dashboard/service.py
from __future__ import annotations

import os
from datetime import date
from typing import List, Optional

from core.interfaces import EmployeeRepository, VacationStore
from core.models import Employee, VacationRequest, VacationStatus
from core.services.auth.session import UserSessionContext
from core.services.dashboard.models import DashboardData, VacationBalance

DEFAULT_ANNUAL_ALLOWANCE_DAYS = 23
UPCOMING_LIMIT = 6


def annual_allowance_days() -> int:
    raw = os.getenv("VP_ANNUAL_ALLOWANCE_DAYS", "").strip()
    if not raw:
        return DEFAULT_ANNUAL_ALLOWANCE_DAYS
    try:
        value = int(raw)
    except ValueError:
        return DEFAULT_ANNUAL_ALLOWANCE_DAYS
    return value if value >= 0 else DEFAULT_ANNUAL_ALLOWANCE_DAYS


class DashboardService:
    """
    Summary figures for the landing screen. Administrators see every pending
    request; employees only their own.
    """

    def __init__(
        self,
        vacation_store: VacationStore,
        employee_repo: EmployeeRepository,
        user_session: UserSessionContext | None = None,
    ):
        self._store = vacation_store
        self._employees = employee_repo
        self._user_session = user_session

    def get_dashboard_data(self, today: date | None = None) -> DashboardData:
        today = today or date.today()
        vacations = self._store.list_all()
        principal = self._user_session.principal if self._user_session else None

        pending = [v for v in vacations if v.status == VacationStatus.PENDING]
        if principal is not None and not principal.is_admin:
            pending = [v for v in pending if v.employee_id == principal.employee_id]
        pending.sort(key=lambda v: (v.start_date, v.id))

        balance: Optional[VacationBalance] = None
        if principal is not None and principal.employee_id:
            balance = self.balance_for(principal.employee_id, vacations)

        return DashboardData(
            pending=pending,
            on_vacation_today=self.on_vacation(today, vacations),
            upcoming_approved=self.upcoming_approved(today, vacations),
            balance=balance,
        )

    def on_vacation(self, day: date, vacations: List[VacationRequest] | None = None) -> List[Employee]:
        """Distinct employees with an approved vacation covering `day`."""
        if vacations is None:
            vacations = self._store.list_all()
        employee_ids = {
            v.employee_id
            for v in vacations
            if v.status == VacationStatus.APPROVED and v.date_range.contains(day)
        }
        employees = [self._employees.get(eid) for eid in employee_ids]
        return sorted((e for e in employees if e is not None), key=lambda e: e.name.lower())

    def upcoming_approved(
        self,
        today: date,
        vacations: List[VacationRequest] | None = None,
        limit: int = UPCOMING_LIMIT,
    ) -> List[VacationRequest]:
        if vacations is None:
            vacations = self._store.list_all()
        approved = [v for v in vacations if v.status == VacationStatus.APPROVED and v.end_date >= today]
        approved.sort(key=lambda v: (v.start_date, v.id))
        return approved[:limit]

    def balance_for(
        self,
        employee_id: str,
        vacations: List[VacationRequest] | None = None,
    ) -> VacationBalance:
        """Approved calendar days against the annual allowance."""
        if vacations is None:
            vacations = self._store.list_by_employee(employee_id)
        used = sum(
            v.days()
            for v in vacations
            if v.employee_id == employee_id and v.status == VacationStatus.APPROVED
        )
        return VacationBalance(
            employee_id=employee_id,
            allowance_days=annual_allowance_days(),
            used_days=used,
        )


__all__ = ["DashboardService", "annual_allowance_days"]
