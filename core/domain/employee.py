from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from core.domain.enums import Role
from core.domain.identifiers import generate_id


@dataclass
class Employee:
    id: str
    name: str
    role: Role = Role.OTHER
    color: str = ""
    email: str = ""
    employee_code: str = ""
    department: str = ""
    is_admin: bool = False
    avatar: Optional[str] = None

    @staticmethod
    def create(
        name: str,
        role: Role = Role.OTHER,
        color: str = "",
        email: str = "",
        employee_code: str = "",
        department: str = "",
        is_admin: bool = False,
        avatar: Optional[str] = None,
        employee_id: Optional[str] = None,
    ) -> "Employee":
        return Employee(
            id=employee_id or generate_id(),
            name=name,
            role=role,
            color=color,
            email=email,
            employee_code=employee_code,
            department=department,
            is_admin=is_admin,
            avatar=avatar,
        )

    def to_record(self) -> dict[str, Any]:
        record: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "role": self.role.value,
            "department": self.department,
            "color": self.color,
            "employeeCode": self.employee_code,
            "isAdmin": self.is_admin,
        }
        if self.avatar:
            record["avatar"] = self.avatar
        return record

    @staticmethod
    def from_record(record: dict[str, Any]) -> "Employee":
        return Employee(
            id=str(record["id"]),
            name=str(record.get("name") or ""),
            role=Role(record.get("role") or Role.OTHER.value),
            color=str(record.get("color") or ""),
            email=str(record.get("email") or ""),
            employee_code=str(record.get("employeeCode") or ""),
            department=str(record.get("department") or ""),
            is_admin=bool(record.get("isAdmin", False)),
            avatar=record.get("avatar"),
        )


__all__ = ["Employee"]
