from core.services.calendar.service import CalendarDay, CalendarMonth, CalendarService

__all__ = ["CalendarService", "CalendarDay", "CalendarMonth"]
