# core/interfaces.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List, Optional, Sequence

from core.models import Employee, VacationRequest


class EmployeeRepository(ABC):
    @abstractmethod
    def add(self, employee: Employee) -> None: ...

    @abstractmethod
    def update(self, employee: Employee) -> None: ...

    @abstractmethod
    def delete(self, employee_id: str) -> None: ...

    @abstractmethod
    def get(self, employee_id: str) -> Optional[Employee]: ...

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[Employee]: ...

    @abstractmethod
    def list_all(self) -> List[Employee]: ...


class VacationStore(ABC):
    """
    Persistence collaborator for vacation records.
    Every call is its own unit of work; nothing spans two calls.
    """

    @abstractmethod
    def create(self, vacation: VacationRequest) -> VacationRequest: ...

    @abstractmethod
    def update(self, vacation: VacationRequest) -> VacationRequest: ...

    @abstractmethod
    def delete(self, vacation_id: str) -> None: ...

    @abstractmethod
    def batch_create(self, vacations: Sequence[VacationRequest]) -> int: ...

    @abstractmethod
    def get(self, vacation_id: str) -> Optional[VacationRequest]: ...

    @abstractmethod
    def list_all(self) -> List[VacationRequest]: ...

    @abstractmethod
    def list_by_employee(self, employee_id: str) -> List[VacationRequest]: ...

    @abstractmethod
    def delete_by_employee(self, employee_id: str) -> int: ...


class SessionStorage(ABC):
    """Where the signed-in user survives between application runs."""

    @abstractmethod
    def load(self) -> Optional[dict[str, Any]]: ...

    @abstractmethod
    def save(self, payload: dict[str, Any]) -> None: ...

    @abstractmethod
    def clear(self) -> None: ...


__all__ = ["EmployeeRepository", "VacationStore", "SessionStorage"]
