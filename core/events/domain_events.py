"""Change notifications for employees and vacations; payload is the employee id."""
from core.events.signal import Signal


class DomainEvents:
    def __init__(self) -> None:
        self.employees_changed: Signal[str] = Signal()
        self.vacations_changed: Signal[str] = Signal()


# SINGLE global instance
domain_events = DomainEvents()
