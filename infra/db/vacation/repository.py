from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.exceptions import NotFoundError, PersistenceError
from core.interfaces import VacationStore
from core.models import VacationRequest
from infra.db.models import VacationORM
from infra.db.vacation.mapper import vacation_from_orm, vacation_to_orm

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SqlAlchemyVacationStore(VacationStore):
    """
    Vacation records on a SQLAlchemy session.
    Each mutating call commits on its own and rolls back on failure.
    """

    def __init__(self, session: Session):
        self.session = session

    def create(self, vacation: VacationRequest) -> VacationRequest:
        def op() -> VacationRequest:
            self.session.add(vacation_to_orm(vacation))
            return vacation

        return self._commit("create", op)

    def update(self, vacation: VacationRequest) -> VacationRequest:
        def op() -> VacationRequest:
            obj = self.session.get(VacationORM, vacation.id)
            if obj is None:
                raise NotFoundError("Vacation not found.", code="VACATION_NOT_FOUND")
            obj.employee_id = vacation.employee_id
            obj.start_date = vacation.start_date
            obj.end_date = vacation.end_date
            obj.status = vacation.status
            obj.notes = vacation.notes
            return vacation_from_orm(obj)

        return self._commit("update", op)

    def delete(self, vacation_id: str) -> None:
        def op() -> None:
            deleted = self.session.query(VacationORM).filter_by(id=vacation_id).delete()
            if not deleted:
                raise NotFoundError("Vacation not found.", code="VACATION_NOT_FOUND")

        self._commit("delete", op)

    def batch_create(self, vacations: Sequence[VacationRequest]) -> int:
        def op() -> int:
            self.session.add_all([vacation_to_orm(v) for v in vacations])
            return len(vacations)

        return self._commit("batch_create", op)

    def delete_by_employee(self, employee_id: str) -> int:
        def op() -> int:
            return self.session.query(VacationORM).filter_by(employee_id=employee_id).delete()

        return self._commit("delete_by_employee", op)

    def get(self, vacation_id: str) -> Optional[VacationRequest]:
        obj = self.session.get(VacationORM, vacation_id)
        return vacation_from_orm(obj) if obj else None

    def list_all(self) -> List[VacationRequest]:
        stmt = select(VacationORM).order_by(VacationORM.start_date, VacationORM.id)
        rows = self.session.execute(stmt).scalars().all()
        return [vacation_from_orm(row) for row in rows]

    def list_by_employee(self, employee_id: str) -> List[VacationRequest]:
        stmt = (
            select(VacationORM)
            .where(VacationORM.employee_id == employee_id)
            .order_by(VacationORM.start_date, VacationORM.id)
        )
        rows = self.session.execute(stmt).scalars().all()
        return [vacation_from_orm(row) for row in rows]

    def _commit(self, operation: str, op: Callable[[], T]) -> T:
        try:
            result = op()
            self.session.commit()
            return result
        except NotFoundError:
            self.session.rollback()
            raise
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.error("Vacation store %s failed: %s", operation, exc)
            raise PersistenceError(
                f"Vacation store {operation} failed.",
                code="VACATION_STORE_FAILED",
            ) from exc
