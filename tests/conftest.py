# tests/conftest.py
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from infra.db.base import Base
import infra.db.models  # noqa
from infra.db.repositories import SqlAlchemyEmployeeRepository, SqlAlchemyVacationStore

from core.services.auth import AuthService, InMemorySessionStorage, UserSessionContext
from core.services.calendar import CalendarService
from core.services.dashboard import DashboardService
from core.services.employee import EmployeeService
from core.services.holidays import HolidayCalculator
from core.services.vacation import VacationService
from core.services.work_calendar import WorkCalendarEngine


@pytest.fixture
def session():
    # separate in-memory DB for tests
    engine = create_engine("sqlite:///:memory:", future=True)
    TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def work_calendar_engine():
    return WorkCalendarEngine(HolidayCalculator())


@pytest.fixture
def services(session, work_calendar_engine):
    # Recreate what build_service_graph() does, but with the test session
    storage = InMemorySessionStorage()
    user_session = UserSessionContext(storage)
    employee_repo = SqlAlchemyEmployeeRepository(session)
    vacation_store = SqlAlchemyVacationStore(session)

    return {
        "session": session,
        "session_storage": storage,
        "user_session": user_session,
        "employee_repo": employee_repo,
        "vacation_store": vacation_store,
        "work_calendar_engine": work_calendar_engine,
        "auth_service": AuthService(employee_repo, user_session),
        "employee_service": EmployeeService(
            session,
            employee_repo,
            vacation_store,
            user_session=user_session,
        ),
        "vacation_service": VacationService(
            vacation_store,
            employee_repo,
            work_calendar_engine,
            user_session=user_session,
        ),
        "calendar_service": CalendarService(vacation_store, employee_repo, work_calendar_engine),
        "dashboard_service": DashboardService(
            vacation_store,
            employee_repo,
            user_session=user_session,
        ),
    }
