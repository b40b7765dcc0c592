"""Compatibility wrapper: domain models live in core.domain."""

from core.domain import (
    DateRange,
    Employee,
    Holiday,
    Role,
    UserRole,
    VacationRequest,
    VacationStatus,
    format_date,
    generate_id,
    iter_days,
    normalize_id,
    parse_date,
)

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
