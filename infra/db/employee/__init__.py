from infra.db.employee.repository import SqlAlchemyEmployeeRepository

__all__ = ["SqlAlchemyEmployeeRepository"]
