from __future__ import annotations

from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from core.exceptions import NotFoundError
from core.interfaces import EmployeeRepository
from core.models import Employee
from infra.db.employee.mapper import employee_from_orm, employee_to_orm
from infra.db.models import EmployeeORM


class SqlAlchemyEmployeeRepository(EmployeeRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, employee: Employee) -> None:
        self.session.add(employee_to_orm(employee))

    def update(self, employee: Employee) -> None:
        obj = self.session.get(EmployeeORM, employee.id)
        if obj is None:
            raise NotFoundError("Employee not found.", code="EMPLOYEE_NOT_FOUND")
        obj.name = employee.name
        obj.email = employee.email
        obj.role = employee.role
        obj.department = employee.department
        obj.color = employee.color
        obj.employee_code = employee.employee_code
        obj.is_admin = employee.is_admin
        obj.avatar = employee.avatar

    def delete(self, employee_id: str) -> None:
        self.session.query(EmployeeORM).filter_by(id=employee_id).delete()

    def get(self, employee_id: str) -> Optional[Employee]:
        obj = self.session.get(EmployeeORM, employee_id)
        return employee_from_orm(obj) if obj else None

    def get_by_email(self, email: str) -> Optional[Employee]:
        normalized = (email or "").strip().lower()
        if not normalized:
            return None
        stmt = select(EmployeeORM).where(func.lower(EmployeeORM.email) == normalized)
        obj = self.session.execute(stmt).scalars().first()
        return employee_from_orm(obj) if obj else None

    def list_all(self) -> List[Employee]:
        rows = self.session.execute(select(EmployeeORM)).scalars().all()
        return [employee_from_orm(row) for row in rows]
