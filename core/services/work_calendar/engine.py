# core/services/work_calendar/engine.py
from __future__ import annotations

from datetime import date, timedelta
from typing import List, Set

from core.models import Holiday
from core.services.holidays.calculator import HolidayCalculator

WEEKEND_DAYS: Set[int] = {5, 6}


class WorkCalendarEngine:
    """Business-day filter: a day counts unless it is a weekend or a holiday."""

    def __init__(self, holiday_calculator: HolidayCalculator | None = None):
        self._holidays: HolidayCalculator = holiday_calculator or HolidayCalculator()

    @property
    def holidays(self) -> HolidayCalculator:
        return self._holidays

    @staticmethod
    def is_weekend(d: date) -> bool:
        return d.weekday() in WEEKEND_DAYS

    def holiday_on(self, d: date) -> Holiday | None:
        return self._holidays.is_holiday(d)

    def is_business_day(self, d: date) -> bool:
        if self.is_weekend(d):
            return False
        return self._holidays.is_holiday(d) is None

    def next_business_day(self, d: date, include_today: bool = True) -> date:
        current = d
        if not include_today:
            current += timedelta(days=1)
        while not self.is_business_day(current):
            current += timedelta(days=1)
        return current

    def business_days(self, start: date, end: date) -> List[date]:
        if end < start:
            return []
        holiday_dates = {h.date for h in self._holidays.holidays_between(start, end)}
        result: List[date] = []
        current = start
        while current <= end:
            if not self.is_weekend(current) and current not in holiday_dates:
                result.append(current)
            current += timedelta(days=1)
        return result

    def working_days_between(self, start: date, end: date) -> int:
        return len(self.business_days(start, end))

    def excluded_days(self, start: date, end: date) -> int:
        """Weekend and holiday days inside [start, end]."""
        if end < start:
            return 0
        total = (end - start).days + 1
        return total - self.working_days_between(start, end)


__all__ = ["WorkCalendarEngine", "WEEKEND_DAYS"]
