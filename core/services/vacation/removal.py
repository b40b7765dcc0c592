# core/services/vacation/removal.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from enum import Enum
from typing import List, Optional

from core.models import VacationRequest


class RemovalKind(str, Enum):
    NOOP = "NOOP"
    DELETE = "DELETE"
    SHRINK_START = "SHRINK_START"
    SHRINK_END = "SHRINK_END"
    SPLIT = "SPLIT"


@dataclass(frozen=True)
class RemovalPlan:
    """
    What has to happen to the stored records once `day` is taken out of
    `vacation`. The plan is a value; VacationService applies it.
    """

    kind: RemovalKind
    vacation: VacationRequest
    day: date
    updated: Optional[VacationRequest] = None
    created: List[VacationRequest] = field(default_factory=list)

    @property
    def deleted_id(self) -> Optional[str]:
        if self.kind in (RemovalKind.DELETE, RemovalKind.SPLIT):
            return self.vacation.id
        return None


def remove_day(vacation: VacationRequest, day: date) -> RemovalPlan:
    start, end = vacation.start_date, vacation.end_date
    one_day = timedelta(days=1)

    if not (start <= day <= end):
        return RemovalPlan(RemovalKind.NOOP, vacation, day)

    if start == end:
        return RemovalPlan(RemovalKind.DELETE, vacation, day)

    if day == start:
        return RemovalPlan(
            RemovalKind.SHRINK_START,
            vacation,
            day,
            updated=vacation.with_dates(day + one_day, end),
        )

    if day == end:
        return RemovalPlan(
            RemovalKind.SHRINK_END,
            vacation,
            day,
            updated=vacation.with_dates(start, day - one_day),
        )

    return RemovalPlan(
        RemovalKind.SPLIT,
        vacation,
        day,
        created=[
            vacation.spawn(start, day - one_day),
            vacation.spawn(day + one_day, end),
        ],
    )


__all__ = ["RemovalKind", "RemovalPlan", "remove_day"]
