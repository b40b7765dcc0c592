from infra.db.vacation.repository import SqlAlchemyVacationStore

__all__ = ["SqlAlchemyVacationStore"]
