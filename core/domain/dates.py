from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Any, Iterator

from core.exceptions import ValidationError


def parse_date(value: Any) -> date:
    """
    Parse a calendar date from a date, datetime or ``YYYY-MM-DD`` string.

    Strings are read as local calendar dates: only the first ten characters
    are used, so ``"2024-06-03T00:00:00.000Z"`` is still June 3rd.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()[:10]
        try:
            return date.fromisoformat(text)
        except ValueError as exc:
            raise ValidationError(f"Invalid date value: {value!r}", code="INVALID_DATE") from exc
    raise ValidationError(f"Unsupported date value: {value!r}", code="INVALID_DATE")


def format_date(value: date) -> str:
    return value.isoformat()


def iter_days(start: date, end: date) -> Iterator[date]:
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


__all__ = ["parse_date", "format_date", "iter_days"]
