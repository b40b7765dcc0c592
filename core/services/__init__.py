from .auth import AuthService
from .calendar import CalendarService
from .dashboard import DashboardService, DashboardData, VacationBalance
from .employee import EmployeeService
from .holidays import HolidayCalculator
from .vacation import IntervalSegmenter, RemovalKind, RemovalPlan, RequestPreview, VacationService
from .work_calendar import WorkCalendarEngine

__all__ = [
    "AuthService",
    "CalendarService",
    "DashboardService",
    "DashboardData",
    "VacationBalance",
    "EmployeeService",
    "HolidayCalculator",
    "WorkCalendarEngine",
    "IntervalSegmenter",
    "RemovalKind",
    "RemovalPlan",
    "RequestPreview",
    "VacationService",
]
