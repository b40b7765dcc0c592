from core.services.employee.service import COLOR_PALETTE, EmployeeService

__all__ = ["EmployeeService", "COLOR_PALETTE"]
