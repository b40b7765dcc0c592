from core.domain.calendar import Holiday
from core.domain.dates import format_date, iter_days, parse_date
from core.domain.employee import Employee
from core.domain.enums import Role, UserRole, VacationStatus
from core.domain.identifiers import generate_id, normalize_id
from core.domain.vacation import DateRange, VacationRequest

__all__ = [
    "generate_id",
    "normalize_id",
    "parse_date",
    "format_date",
    "iter_days",
    "Role",
    "VacationStatus",
    "UserRole",
    "Employee",
    "DateRange",
    "VacationRequest",
    "Holiday",
]
