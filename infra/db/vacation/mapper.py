from __future__ import annotations

from core.models import VacationRequest, VacationStatus
from infra.db.models import VacationORM


def vacation_to_orm(vacation: VacationRequest) -> VacationORM:
    return VacationORM(
        id=vacation.id,
        employee_id=vacation.employee_id,
        start_date=vacation.start_date,
        end_date=vacation.end_date,
        status=vacation.status,
        notes=vacation.notes,
    )


def vacation_from_orm(obj: VacationORM) -> VacationRequest:
    return VacationRequest(
        id=obj.id,
        employee_id=obj.employee_id,
        start_date=obj.start_date,
        end_date=obj.end_date,
        status=VacationStatus(obj.status) if obj.status else VacationStatus.PENDING,
        notes=obj.notes,
    )
