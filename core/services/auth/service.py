from __future__ import annotations

import hmac
import logging
import os

from core.exceptions import ValidationError
from core.interfaces import EmployeeRepository
from core.models import Employee, UserRole
from core.services.auth.session import UserSessionContext, UserSessionPrincipal

logger = logging.getLogger(__name__)

DEFAULT_ADMIN_ID = "admin-default"


class AuthService:
    """
    Two ways in: the built-in administrator account, or an employee's
    e-mail plus their employee code.
    """

    def __init__(
        self,
        employee_repo: EmployeeRepository,
        user_session: UserSessionContext,
    ):
        self._employee_repo: EmployeeRepository = employee_repo
        self._user_session: UserSessionContext = user_session

    @property
    def user_session(self) -> UserSessionContext:
        return self._user_session

    def login(self, identifier: str, code: str) -> UserSessionPrincipal:
        normalized = (identifier or "").strip()
        principal = self._match_default_admin(normalized, code or "")
        if principal is None:
            employee = self._employee_repo.get_by_email(normalized.lower()) if normalized else None
            if employee is not None and employee.employee_code and _same_secret(employee.employee_code, code or ""):
                principal = self.build_principal(employee)

        if principal is None:
            logger.warning("Login failed for %s", normalized or "<empty>")
            raise ValidationError("Invalid credentials.", code="AUTH_FAILED")

        self._user_session.set_principal(principal)
        logger.info("User %s signed in as %s", principal.user_id, principal.role.value)
        return principal

    def logout(self) -> None:
        principal = self._user_session.principal
        self._user_session.clear()
        if principal is not None:
            logger.info("User %s signed out", principal.user_id)

    def restore(self) -> UserSessionPrincipal | None:
        """Bring back the stored session, dropping it if its employee is gone."""
        principal = self._user_session.load_stored()
        if principal is None or principal.employee_id is None:
            return principal
        employee = self._employee_repo.get(principal.employee_id)
        if employee is None:
            logger.info("Stored session for removed employee %s discarded", principal.employee_id)
            self._user_session.clear()
            return None
        refreshed = self.build_principal(employee)
        if refreshed != principal:
            self._user_session.set_principal(refreshed)
        return refreshed

    @staticmethod
    def build_principal(employee: Employee) -> UserSessionPrincipal:
        return UserSessionPrincipal(
            user_id=employee.id,
            name=employee.name,
            email=employee.email,
            role=UserRole.ADMIN if employee.is_admin else UserRole.EMPLOYEE,
            employee_id=employee.id,
        )

    @staticmethod
    def _match_default_admin(identifier: str, code: str) -> UserSessionPrincipal | None:
        admin_username = os.getenv("VP_ADMIN_USERNAME", "admin").strip() or "admin"
        admin_code = os.getenv("VP_ADMIN_CODE", "admin123")
        if identifier != admin_username or not _same_secret(admin_code, code):
            return None
        return UserSessionPrincipal(
            user_id=DEFAULT_ADMIN_ID,
            name="Administrador",
            email=admin_username,
            role=UserRole.ADMIN,
        )


def _same_secret(expected: str, given: str) -> bool:
    return hmac.compare_digest(expected.encode("utf-8"), given.encode("utf-8"))


__all__ = ["AuthService", "DEFAULT_ADMIN_ID"]
