from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from sqlalchemy.orm import Session

from core.interfaces import SessionStorage
from core.services.auth import AuthService
from core.services.auth.session import UserSessionContext
from core.services.calendar import CalendarService
from core.services.dashboard import DashboardService
from core.services.employee import EmployeeService
from core.services.holidays import HolidayCalculator
from core.services.vacation import VacationService
from core.services.work_calendar import WorkCalendarEngine
from infra.db.repositories import SqlAlchemyEmployeeRepository, SqlAlchemyVacationStore


@dataclass(frozen=True)
class ServiceGraph:
    session: Session
    user_session: UserSessionContext
    auth_service: AuthService
    employee_service: EmployeeService
    vacation_service: VacationService
    calendar_service: CalendarService
    dashboard_service: DashboardService
    work_calendar_engine: WorkCalendarEngine
    holiday_calculator: HolidayCalculator

    def as_dict(self) -> dict[str, Any]:
        return {
            "session": self.session,
            "user_session": self.user_session,
            "auth_service": self.auth_service,
            "employee_service": self.employee_service,
            "vacation_service": self.vacation_service,
            "calendar_service": self.calendar_service,
            "dashboard_service": self.dashboard_service,
            "work_calendar_engine": self.work_calendar_engine,
            "holiday_calculator": self.holiday_calculator,
        }


def build_service_graph(session: Session, storage: SessionStorage | None = None) -> ServiceGraph:
    user_session = UserSessionContext(storage)
    employee_repo = SqlAlchemyEmployeeRepository(session)
    vacation_store = SqlAlchemyVacationStore(session)

    holiday_calculator = HolidayCalculator()
    work_calendar_engine = WorkCalendarEngine(holiday_calculator)

    auth_service = AuthService(employee_repo, user_session)
    employee_service = EmployeeService(
        session,
        employee_repo,
        vacation_store,
        user_session=user_session,
    )
    vacation_service = VacationService(
        vacation_store,
        employee_repo,
        work_calendar_engine,
        user_session=user_session,
    )
    calendar_service = CalendarService(vacation_store, employee_repo, work_calendar_engine)
    dashboard_service = DashboardService(
        vacation_store,
        employee_repo,
        user_session=user_session,
    )

    return ServiceGraph(
        session=session,
        user_session=user_session,
        auth_service=auth_service,
        employee_service=employee_service,
        vacation_service=vacation_service,
        calendar_service=calendar_service,
        dashboard_service=dashboard_service,
        work_calendar_engine=work_calendar_engine,
        holiday_calculator=holiday_calculator,
    )

