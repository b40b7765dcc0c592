from .models import DashboardData, VacationBalance
from .service import DashboardService

__all__ = [
    "DashboardService",
    "DashboardData",
    "VacationBalance",
]
