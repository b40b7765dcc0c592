from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    FINANCE = "Departamento Financeiro"
    IMPORT = "Importação"
    EXPORT = "Exportação"
    AIR = "Departamento Aereo"
    MARITIME = "Departamento Maritimo"
    WAREHOUSE = "Armazém"
    NATIONAL = "Departamento Nacional"
    DRIVERS = "Motoristas"
    OTHER = "Outro"


class VacationStatus(str, Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class UserRole(str, Enum):
    ADMIN = "admin"
    EMPLOYEE = "employee"


__all__ = ["Role", "VacationStatus", "UserRole"]
