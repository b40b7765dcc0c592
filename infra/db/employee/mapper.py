from __future__ import annotations

from core.models import Employee, Role
from infra.db.models import EmployeeORM


def employee_to_orm(employee: Employee) -> EmployeeORM:
    return EmployeeORM(
        id=employee.id,
        name=employee.name,
        email=employee.email,
        role=employee.role,
        department=employee.department,
        color=employee.color,
        employee_code=employee.employee_code,
        is_admin=employee.is_admin,
        avatar=employee.avatar,
    )


def employee_from_orm(obj: EmployeeORM) -> Employee:
    return Employee(
        id=obj.id,
        name=obj.name,
        role=Role(obj.role) if obj.role else Role.OTHER,
        color=obj.color or "",
        email=obj.email or "",
        employee_code=obj.employee_code or "",
        department=obj.department or "",
        is_admin=bool(obj.is_admin),
        avatar=obj.avatar,
    )
