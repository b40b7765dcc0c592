# core/services/employee/service.py
from __future__ import annotations

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.events.domain_events import domain_events
from core.exceptions import NotFoundError, PersistenceError, ValidationError
from core.interfaces import EmployeeRepository, VacationStore
from core.models import Employee, Role, normalize_id
from core.services.auth.authorization import require_admin
from core.services.auth.session import UserSessionContext
from core.services.employee.validation import EmployeeValidationMixin

logger = logging.getLogger(__name__)

COLOR_PALETTE: tuple[str, ...] = (
    "#ef4444", "#f97316", "#f59e0b", "#84cc16", "#10b981", "#06b6d4", "#3b82f6", "#6366f1",
    "#8b5cf6", "#d946ef", "#f43f5e", "#b91c1c", "#c2410c", "#b45309", "#4d7c0f", "#15803d",
    "#0e7490", "#1d4ed8", "#4338ca", "#6d28d9", "#be185d", "#be123c", "#94a3b8", "#64748b",
    "#475569", "#334155", "#1e293b", "#0f172a", "#78716c", "#57534e", "#44403c", "#292524",
    "#1c1917", "#000000",
)


class EmployeeService(EmployeeValidationMixin):
    def __init__(
        self,
        session: Session,
        employee_repo: EmployeeRepository,
        vacation_store: VacationStore,
        user_session: UserSessionContext | None = None,
    ):
        self._session: Session = session
        self._employee_repo: EmployeeRepository = employee_repo
        self._vacation_store: VacationStore = vacation_store
        self._user_session: UserSessionContext | None = user_session

    def create_employee(
        self,
        name: str,
        role: Role | str = Role.OTHER,
        color: str = "",
        email: str = "",
        employee_code: str = "",
        department: str = "",
        is_admin: bool = False,
        avatar: str | None = None,
        employee_id: str | None = None,
    ) -> Employee:
        require_admin(self._user_session, operation_label="create employee")
        role = self._coerce_role(role)
        email = self._normalize_email(email)
        color = self._normalize_color(color)
        employee_id = normalize_id(employee_id)
        if employee_id and self._employee_repo.get(employee_id) is not None:
            raise ValidationError("Employee ID already exists.", code="EMPLOYEE_ID_EXISTS")
        self._ensure_email_free(email, None)
        self._ensure_color_free(color, role, None)

        employee = Employee.create(
            name=self._validate_name(name),
            role=role,
            color=color,
            email=email,
            employee_code=(employee_code or "").strip(),
            department=(department or "").strip(),
            is_admin=bool(is_admin),
            avatar=avatar,
            employee_id=employee_id or None,
        )
        try:
            self._employee_repo.add(employee)
            self._session.commit()
        except SQLAlchemyError as exc:
            self._session.rollback()
            logger.error("Error creating employee %s: %s", employee.id, exc)
            raise PersistenceError("Failed to save employee.", code="EMPLOYEE_SAVE_FAILED") from exc
        logger.info("Created employee %s - %s", employee.id, employee.name)
        domain_events.employees_changed.emit(employee.id)
        return employee

    def update_employee(
        self,
        employee_id: str,
        name: str | None = None,
        role: Role | str | None = None,
        color: str | None = None,
        email: str | None = None,
        employee_code: str | None = None,
        department: str | None = None,
        is_admin: bool | None = None,
        avatar: str | None = None,
    ) -> Employee:
        require_admin(self._user_session, operation_label="update employee")
        employee = self.get_employee(employee_id)

        if name is not None:
            employee.name = self._validate_name(name)
        if role is not None:
            employee.role = self._coerce_role(role)
        if color is not None:
            employee.color = self._normalize_color(color)
        if email is not None:
            employee.email = self._normalize_email(email)
            self._ensure_email_free(employee.email, employee.id)
        if employee_code is not None:
            employee.employee_code = employee_code.strip()
        if department is not None:
            employee.department = department.strip()
        if is_admin is not None:
            employee.is_admin = bool(is_admin)
        if avatar is not None:
            employee.avatar = avatar or None
        self._ensure_color_free(employee.color, employee.role, employee.id)

        try:
            self._employee_repo.update(employee)
            self._session.commit()
        except SQLAlchemyError as exc:
            self._session.rollback()
            logger.error("Error updating employee %s: %s", employee.id, exc)
            raise PersistenceError("Failed to update employee.", code="EMPLOYEE_SAVE_FAILED") from exc
        domain_events.employees_changed.emit(employee.id)
        return employee

    def delete_employee(self, employee_id: str) -> int:
        """Remove the employee and every vacation they own; returns the vacation count removed."""
        require_admin(self._user_session, operation_label="delete employee")
        employee = self.get_employee(employee_id)

        removed = self._vacation_store.delete_by_employee(employee.id)
        try:
            self._employee_repo.delete(employee.id)
            self._session.commit()
        except SQLAlchemyError as exc:
            self._session.rollback()
            logger.error(
                "Employee %s kept after its %d vacation(s) were deleted: %s",
                employee.id,
                removed,
                exc,
            )
            raise PersistenceError("Failed to delete employee.", code="EMPLOYEE_DELETE_FAILED") from exc
        logger.info("Deleted employee %s with %d vacation(s)", employee.id, removed)
        domain_events.employees_changed.emit(employee.id)
        if removed:
            domain_events.vacations_changed.emit(employee.id)
        return removed

    def get_employee(self, employee_id: str) -> Employee:
        employee = self._employee_repo.get(employee_id)
        if not employee:
            raise NotFoundError("Employee not found.", code="EMPLOYEE_NOT_FOUND")
        return employee

    def list_employees(self) -> List[Employee]:
        return sorted(self._employee_repo.list_all(), key=lambda e: e.name.lower())

    def list_by_role(self, role: Role | str) -> List[Employee]:
        role = self._coerce_role(role)
        return [e for e in self.list_employees() if e.role == role]

    def list_roles_in_use(self) -> List[Role]:
        seen = {e.role for e in self._employee_repo.list_all()}
        return [role for role in Role if role in seen]

    def available_colors(self, role: Role | str, employee_id: str | None = None) -> List[str]:
        role = self._coerce_role(role)
        taken = {
            e.color.lower()
            for e in self._employee_repo.list_all()
            if e.role == role and e.id != employee_id and e.color
        }
        return [color for color in COLOR_PALETTE if color not in taken]


__all__ = ["EmployeeService", "COLOR_PALETTE"]
