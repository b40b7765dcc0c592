# core/services/holidays/calculator.py
from __future__ import annotations

from datetime import date, timedelta
from typing import List, Optional

from core.exceptions import ValidationError
from core.models import Holiday

# (month, day, name)
FIXED_HOLIDAYS: tuple[tuple[int, int, str], ...] = (
    (1, 1, "Ano Novo"),
    (4, 25, "Dia da Liberdade"),
    (5, 1, "Dia do Trabalhador"),
    (6, 10, "Dia de Portugal"),
    (8, 15, "Assunção de Nossa Senhora"),
    (10, 5, "Implantação da República"),
    (11, 1, "Dia de Todos os Santos"),
    (12, 1, "Restauração da Independência"),
    (12, 8, "Imaculada Conceição"),
    (12, 25, "Natal"),
)

# (offset in days from Easter Sunday, name)
EASTER_HOLIDAYS: tuple[tuple[int, str], ...] = (
    (-2, "Sexta-feira Santa"),
    (0, "Páscoa"),
    (60, "Corpo de Deus"),
)

FIRST_GREGORIAN_YEAR = 1583


def easter_date(year: int) -> date:
    """Easter Sunday for a Gregorian year (Meeus/Jones/Butcher)."""
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    return date(year, month, day)


class HolidayCalculator:
    """
    Portuguese public holidays: ten fixed dates plus three movable ones
    derived from Easter. Recomputed on every call; the set is tiny.
    """

    def holidays_for_year(self, year: int) -> List[Holiday]:
        if year < FIRST_GREGORIAN_YEAR:
            raise ValidationError(
                f"Holidays are only defined for Gregorian years (>= {FIRST_GREGORIAN_YEAR}).",
                code="UNSUPPORTED_YEAR",
            )
        easter = easter_date(year)
        holidays = [Holiday(date=date(year, month, day), name=name) for month, day, name in FIXED_HOLIDAYS]
        holidays.extend(
            Holiday(date=easter + timedelta(days=offset), name=name) for offset, name in EASTER_HOLIDAYS
        )
        holidays.sort(key=lambda h: h.date)
        return holidays

    def is_holiday(self, day: date) -> Optional[Holiday]:
        for holiday in self.holidays_for_year(day.year):
            if holiday.date == day:
                return holiday
        return None

    def holidays_between(self, start: date, end: date) -> List[Holiday]:
        if end < start:
            return []
        result: List[Holiday] = []
        for year in range(start.year, end.year + 1):
            result.extend(h for h in self.holidays_for_year(year) if start <= h.date <= end)
        return result


__all__ = ["HolidayCalculator", "easter_date", "FIXED_HOLIDAYS", "EASTER_HOLIDAYS"]
