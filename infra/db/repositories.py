# infra/db/repositories.py
from __future__ import annotations

from infra.db.employee.repository import SqlAlchemyEmployeeRepository
from infra.db.vacation.repository import SqlAlchemyVacationStore

__all__ = [
    "SqlAlchemyEmployeeRepository",
    "SqlAlchemyVacationStore",
]
