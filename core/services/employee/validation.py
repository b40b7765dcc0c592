from __future__ import annotations

import re

from core.exceptions import ValidationError
from core.interfaces import EmployeeRepository
from core.models import Role

_EMAIL_RE = re.compile(r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")
_COLOR_RE = re.compile(r"^#[0-9a-fA-F]{6}$")


class EmployeeValidationMixin:
    _employee_repo: EmployeeRepository

    @staticmethod
    def _validate_name(name: str) -> str:
        cleaned = (name or "").strip()
        if not cleaned:
            raise ValidationError("Employee name cannot be empty.", code="EMPLOYEE_NAME_EMPTY")
        return cleaned

    @staticmethod
    def _coerce_role(role: Role | str) -> Role:
        if isinstance(role, Role):
            return role
        try:
            return Role(str(role).strip())
        except ValueError as exc:
            raise ValidationError(f"Unknown role: {role!r}", code="INVALID_ROLE") from exc

    @staticmethod
    def _normalize_email(email: str | None) -> str:
        value = (email or "").strip().lower()
        if value and not _EMAIL_RE.match(value):
            raise ValidationError("Invalid email format.", code="INVALID_EMAIL")
        return value

    @staticmethod
    def _normalize_color(color: str | None) -> str:
        value = (color or "").strip().lower()
        if value and not _COLOR_RE.match(value):
            raise ValidationError("Color must be a #rrggbb value.", code="INVALID_COLOR")
        return value

    def _ensure_email_free(self, email: str, employee_id: str | None) -> None:
        if not email:
            return
        existing = self._employee_repo.get_by_email(email)
        if existing is not None and existing.id != employee_id:
            raise ValidationError("Another employee already uses this email.", code="EMPLOYEE_EMAIL_EXISTS")

    def _ensure_color_free(self, color: str, role: Role, employee_id: str | None) -> None:
        """Within a role every employee keeps a distinct calendar color."""
        if not color:
            return
        for other in self._employee_repo.list_all():
            if other.id == employee_id:
                continue
            if other.role == role and other.color.lower() == color:
                raise ValidationError(
                    f"Color {color} is already used by {other.name} in {role.value}.",
                    code="EMPLOYEE_COLOR_TAKEN",
                )


__all__ = ["EmployeeValidationMixin"]
