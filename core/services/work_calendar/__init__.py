from core.services.work_calendar.engine import WorkCalendarEngine

__all__ = ["WorkCalendarEngine"]
