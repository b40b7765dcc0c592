from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from core.interfaces import SessionStorage
from core.models import UserRole


@dataclass(frozen=True)
class UserSessionPrincipal:
    user_id: str
    name: str
    email: str
    role: UserRole
    employee_id: str | None = None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "id": self.user_id,
            "name": self.name,
            "email": self.email,
            "role": self.role.value,
        }
        if self.employee_id:
            payload["employeeId"] = self.employee_id
        return payload

    @staticmethod
    def from_payload(payload: dict[str, Any]) -> "UserSessionPrincipal":
        return UserSessionPrincipal(
            user_id=str(payload["id"]),
            name=str(payload.get("name") or ""),
            email=str(payload.get("email") or ""),
            role=UserRole(payload.get("role") or UserRole.EMPLOYEE.value),
            employee_id=payload.get("employeeId"),
        )


class UserSessionContext:
    """
    The signed-in user for one application run. Passed explicitly to the
    services that need it; the storage keeps it across restarts.
    """

    def __init__(self, storage: SessionStorage | None = None):
        self._principal: UserSessionPrincipal | None = None
        self._storage: SessionStorage | None = storage

    @property
    def principal(self) -> UserSessionPrincipal | None:
        return self._principal

    def set_principal(self, principal: UserSessionPrincipal) -> None:
        self._principal = principal
        if self._storage is not None:
            self._storage.save(principal.to_payload())

    def load_stored(self) -> UserSessionPrincipal | None:
        if self._storage is None:
            return None
        payload = self._storage.load()
        if not payload:
            return None
        try:
            principal = UserSessionPrincipal.from_payload(payload)
        except (KeyError, ValueError):
            self._storage.clear()
            return None
        self._principal = principal
        return principal

    def clear(self) -> None:
        self._principal = None
        if self._storage is not None:
            self._storage.clear()

    def is_authenticated(self) -> bool:
        return self._principal is not None

    def is_admin(self) -> bool:
        return self._principal is not None and self._principal.is_admin


__all__ = ["UserSessionPrincipal", "UserSessionContext"]
