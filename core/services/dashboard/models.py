from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from core.models import Employee, VacationRequest


@dataclass
class VacationBalance:
    employee_id: str
    allowance_days: int
    used_days: int

    @property
    def remaining_days(self) -> int:
        return self.allowance_days - self.used_days


@dataclass
class DashboardData:
    pending: List[VacationRequest]
    on_vacation_today: List[Employee]
    upcoming_approved: List[VacationRequest] = field(default_factory=list)
    balance: Optional[VacationBalance] = None

    @property
    def employees_on_vacation_today(self) -> int:
        return len(self.on_vacation_today)
