from core.services.holidays.calculator import HolidayCalculator, easter_date

__all__ = ["HolidayCalculator", "easter_date"]
