# core/services/vacation/segmentation.py
from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional, Sequence

from core.exceptions import ValidationError
from core.models import DateRange, VacationRequest, VacationStatus
from core.services.work_calendar.engine import WorkCalendarEngine

logger = logging.getLogger(__name__)


class IntervalSegmenter:
    """
    Splits a requested range into maximal runs of consecutive business days.
    Each run becomes its own vacation record.
    """

    def __init__(self, calendar: WorkCalendarEngine):
        self._calendar = calendar

    def segment(self, start: date, end: date, employee_id: str | None = None) -> List[DateRange]:
        if end < start:
            raise ValidationError(
                "End date must be on or after start date.",
                code="INVALID_DATE_RANGE",
            )

        days = self._calendar.business_days(start, end)
        if not days:
            raise ValidationError(
                "No business days in the selected range.",
                code="NO_BUSINESS_DAYS",
            )

        groups: List[DateRange] = []
        group_start = days[0]
        previous = days[0]
        for current in days[1:]:
            if (current - previous).days != 1:
                groups.append(DateRange(group_start, previous))
                group_start = current
            previous = current
        groups.append(DateRange(group_start, previous))
        logger.debug(
            "Segmented %s..%s for employee %s into %d group(s)",
            start,
            end,
            employee_id or "-",
            len(groups),
        )
        return groups

    @staticmethod
    def build_requests(
        groups: Sequence[DateRange],
        employee_id: str,
        status: VacationStatus = VacationStatus.PENDING,
        notes: Optional[str] = None,
    ) -> List[VacationRequest]:
        return [
            VacationRequest.create(
                employee_id=employee_id,
                start_date=group.start,
                end_date=group.end,
                status=status,
                notes=notes,
            )
            for group in groups
        ]


__all__ = ["IntervalSegmenter"]
