from __future__ import annotations

from core.exceptions import BusinessRuleError
from core.services.auth.session import UserSessionContext


def require_admin(
    user_session: UserSessionContext | None,
    *,
    operation_label: str,
) -> None:
    if user_session is None or user_session.principal is None:
        return
    if user_session.is_admin():
        return
    raise BusinessRuleError(
        f"Permission denied for {operation_label}. Administrator access required.",
        code="PERMISSION_DENIED",
    )


def require_self_or_admin(
    user_session: UserSessionContext | None,
    employee_id: str,
    *,
    operation_label: str,
) -> None:
    principal = user_session.principal if user_session is not None else None
    if principal is None or principal.is_admin:
        return
    if principal.employee_id == employee_id:
        return
    raise BusinessRuleError(
        f"Permission denied for {operation_label}. Employees may only act on their own vacations.",
        code="PERMISSION_DENIED",
    )


__all__ = ["require_admin", "require_self_or_admin"]
