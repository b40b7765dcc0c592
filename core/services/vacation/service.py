# core/services/vacation/service.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, List, Optional

from core.events.domain_events import domain_events
from core.exceptions import BusinessRuleError, NotFoundError, PersistenceError, ValidationError
from core.interfaces import EmployeeRepository, VacationStore
from core.models import Employee, VacationRequest, VacationStatus, parse_date
from core.services.auth.authorization import require_admin, require_self_or_admin
from core.services.auth.session import UserSessionContext
from core.services.vacation.overlap import find_overlaps
from core.services.vacation.removal import RemovalKind, RemovalPlan, remove_day
from core.services.vacation.segmentation import IntervalSegmenter
from core.services.work_calendar.engine import WorkCalendarEngine

logger = logging.getLogger(__name__)


@dataclass
class RequestPreview:
    total_days: int
    excluded_days: int
    business_days: int
    overlaps: List[VacationRequest] = field(default_factory=list)


class VacationService:
    """
    Vacation booking and editing on top of the interval engine.
    The engine decides, the store persists; each store call stands alone.
    """

    def __init__(
        self,
        vacation_store: VacationStore,
        employee_repo: EmployeeRepository,
        calendar: WorkCalendarEngine,
        user_session: UserSessionContext | None = None,
    ):
        self._store: VacationStore = vacation_store
        self._employee_repo: EmployeeRepository = employee_repo
        self._calendar: WorkCalendarEngine = calendar
        self._segmenter: IntervalSegmenter = IntervalSegmenter(calendar)
        self._user_session: UserSessionContext | None = user_session

    # ------------------------------------------------------------------ queries

    def get_vacation(self, vacation_id: str) -> VacationRequest:
        vacation = self._store.get(vacation_id)
        if vacation is None:
            raise NotFoundError("Vacation not found.", code="VACATION_NOT_FOUND")
        return vacation

    def list_vacations(
        self,
        employee_id: str | None = None,
        status: VacationStatus | str | None = None,
    ) -> List[VacationRequest]:
        if employee_id is not None:
            vacations = self._store.list_by_employee(employee_id)
        else:
            vacations = self._store.list_all()
        if status is not None:
            wanted = VacationStatus(status)
            vacations = [v for v in vacations if v.status == wanted]
        return sorted(vacations, key=lambda v: (v.start_date, v.end_date, v.id))

    def list_pending(self, employee_id: str | None = None) -> List[VacationRequest]:
        return self.list_vacations(employee_id=employee_id, status=VacationStatus.PENDING)

    def find_overlaps(
        self,
        employee_id: str,
        start: Any,
        end: Any,
        exclude_vacation_id: str | None = None,
    ) -> List[VacationRequest]:
        employee = self._require_employee(employee_id)
        employees = {e.id: e for e in self._employee_repo.list_all()}
        return find_overlaps(
            self._store.list_all(),
            employees,
            parse_date(start),
            parse_date(end),
            employee.role,
            exclude_vacation_id=exclude_vacation_id,
        )

    def preview_request(
        self,
        employee_id: str,
        start: Any,
        end: Any,
        exclude_vacation_id: str | None = None,
    ) -> RequestPreview:
        """Figures shown while dates are being picked, before anything is saved."""
        start_date, end_date = self._parse_range(start, end)
        total = (end_date - start_date).days + 1
        excluded = self._calendar.excluded_days(start_date, end_date)
        return RequestPreview(
            total_days=total,
            excluded_days=excluded,
            business_days=total - excluded,
            overlaps=self.find_overlaps(employee_id, start_date, end_date, exclude_vacation_id),
        )

    # ---------------------------------------------------------------- mutations

    def book_vacation(
        self,
        employee_id: str,
        start: Any,
        end: Any,
        notes: str | None = None,
        status: VacationStatus = VacationStatus.PENDING,
    ) -> List[VacationRequest]:
        """Segment the range into business-day runs and store one record per run."""
        require_self_or_admin(self._user_session, employee_id, operation_label="book vacation")
        if status != VacationStatus.PENDING:
            require_admin(self._user_session, operation_label="book pre-decided vacation")
        employee = self._require_employee(employee_id)
        start_date, end_date = self._parse_range(start, end)

        groups = self._segmenter.segment(start_date, end_date, employee.id)
        requests = self._segmenter.build_requests(groups, employee.id, status=status, notes=_clean_notes(notes))
        try:
            count = self._store.batch_create(requests)
        except PersistenceError as exc:
            logger.error("Error booking vacation for employee %s: %s", employee.id, exc)
            raise
        logger.info(
            "Booked %d vacation record(s) for employee %s from %s to %s",
            count,
            employee.id,
            start_date,
            end_date,
        )
        domain_events.vacations_changed.emit(employee.id)
        return requests

    def create_vacation(
        self,
        employee_id: str,
        start: Any,
        end: Any,
        status: VacationStatus = VacationStatus.PENDING,
        notes: str | None = None,
    ) -> VacationRequest:
        """Single record exactly as given; no business-day segmentation."""
        require_admin(self._user_session, operation_label="create vacation")
        employee = self._require_employee(employee_id)
        start_date, end_date = self._parse_range(start, end)
        vacation = VacationRequest.create(
            employee_id=employee.id,
            start_date=start_date,
            end_date=end_date,
            status=VacationStatus(status),
            notes=_clean_notes(notes),
        )
        try:
            created = self._store.create(vacation)
        except PersistenceError as exc:
            logger.error("Error creating vacation for employee %s: %s", employee.id, exc)
            raise
        domain_events.vacations_changed.emit(employee.id)
        return created

    def update_vacation(
        self,
        vacation_id: str,
        start: Any = None,
        end: Any = None,
        status: VacationStatus | str | None = None,
        notes: str | None = None,
        employee_id: str | None = None,
    ) -> VacationRequest:
        """Administrator edit. Dates are taken as given, weekends and holidays included."""
        require_admin(self._user_session, operation_label="edit vacation")
        vacation = self.get_vacation(vacation_id)

        start_date = parse_date(start) if start is not None else vacation.start_date
        end_date = parse_date(end) if end is not None else vacation.end_date
        self._ensure_ordered(start_date, end_date)
        if employee_id is not None and employee_id != vacation.employee_id:
            vacation.employee_id = self._require_employee(employee_id).id
        vacation.start_date = start_date
        vacation.end_date = end_date
        if status is not None:
            vacation.status = VacationStatus(status)
        if notes is not None:
            vacation.notes = _clean_notes(notes)

        return self._save(vacation)

    def delete_vacation(self, vacation_id: str) -> None:
        vacation = self.get_vacation(vacation_id)
        require_self_or_admin(self._user_session, vacation.employee_id, operation_label="delete vacation")
        try:
            self._store.delete(vacation.id)
        except PersistenceError as exc:
            logger.error("Error deleting vacation %s: %s", vacation.id, exc)
            raise
        logger.info("Deleted vacation %s", vacation.id)
        domain_events.vacations_changed.emit(vacation.employee_id)

    def approve(self, vacation_id: str) -> VacationRequest:
        return self._decide(vacation_id, VacationStatus.APPROVED, "approve vacation")

    def reject(self, vacation_id: str) -> VacationRequest:
        return self._decide(vacation_id, VacationStatus.REJECTED, "reject vacation")

    def revoke(self, vacation_id: str) -> VacationRequest:
        """Withdraw an approval; the record stays, marked Rejected."""
        require_admin(self._user_session, operation_label="revoke vacation")
        vacation = self.get_vacation(vacation_id)
        if vacation.status != VacationStatus.APPROVED:
            raise BusinessRuleError(
                "Only approved vacations can be revoked.",
                code="VACATION_NOT_APPROVED",
            )
        vacation.status = VacationStatus.REJECTED
        return self._save(vacation)

    def plan_day_removal(self, vacation_id: str, day: Any) -> RemovalPlan:
        return remove_day(self.get_vacation(vacation_id), parse_date(day))

    def remove_day(self, vacation_id: str, day: Any) -> RemovalPlan:
        """Take one day out of a vacation and persist the outcome."""
        require_admin(self._user_session, operation_label="remove vacation day")
        plan = self.plan_day_removal(vacation_id, day)
        self._apply_plan(plan)
        return plan

    # ---------------------------------------------------------------- internals

    def _apply_plan(self, plan: RemovalPlan) -> None:
        vacation = plan.vacation
        if plan.kind == RemovalKind.NOOP:
            logger.warning(
                "Day %s is outside vacation %s (%s..%s); nothing removed",
                plan.day,
                vacation.id,
                vacation.start_date,
                vacation.end_date,
            )
            return

        if plan.kind == RemovalKind.DELETE:
            try:
                self._store.delete(vacation.id)
            except PersistenceError as exc:
                logger.error("Error deleting vacation %s: %s", vacation.id, exc)
                raise
        elif plan.kind in (RemovalKind.SHRINK_START, RemovalKind.SHRINK_END):
            try:
                self._store.update(plan.updated)
            except PersistenceError as exc:
                logger.error("Error shrinking vacation %s: %s", vacation.id, exc)
                raise
        else:
            self._apply_split(plan)

        logger.info("Removed %s from vacation %s (%s)", plan.day, vacation.id, plan.kind.value)
        domain_events.vacations_changed.emit(vacation.employee_id)

    def _apply_split(self, plan: RemovalPlan) -> None:
        vacation = plan.vacation
        try:
            self._store.delete(vacation.id)
        except PersistenceError as exc:
            logger.error("Error deleting vacation %s before split: %s", vacation.id, exc)
            raise
        try:
            self._store.batch_create(plan.created)
        except PersistenceError as exc:
            parts = ", ".join(f"{p.start_date}..{p.end_date}" for p in plan.created)
            logger.error(
                "Vacation %s of employee %s was deleted but its split parts (%s) were not saved; "
                "manual reconciliation required: %s",
                vacation.id,
                vacation.employee_id,
                parts,
                exc,
            )
            domain_events.vacations_changed.emit(vacation.employee_id)
            raise PersistenceError(
                f"Vacation {vacation.id} was removed but its replacement parts ({parts}) could not be saved.",
                code="SPLIT_PARTIAL_FAILURE",
            ) from exc

    def _decide(self, vacation_id: str, status: VacationStatus, label: str) -> VacationRequest:
        require_admin(self._user_session, operation_label=label)
        vacation = self.get_vacation(vacation_id)
        vacation.status = status
        return self._save(vacation)

    def _save(self, vacation: VacationRequest) -> VacationRequest:
        try:
            saved = self._store.update(vacation)
        except PersistenceError as exc:
            logger.error("Error updating vacation %s: %s", vacation.id, exc)
            raise
        domain_events.vacations_changed.emit(saved.employee_id)
        return saved

    def _require_employee(self, employee_id: str) -> Employee:
        employee = self._employee_repo.get(employee_id)
        if employee is None:
            raise NotFoundError("Employee not found.", code="EMPLOYEE_NOT_FOUND")
        return employee

    def _parse_range(self, start: Any, end: Any) -> tuple[date, date]:
        start_date = parse_date(start)
        end_date = parse_date(end)
        self._ensure_ordered(start_date, end_date)
        return start_date, end_date

    @staticmethod
    def _ensure_ordered(start: date, end: date) -> None:
        if end < start:
            raise ValidationError(
                "End date must be on or after start date.",
                code="INVALID_DATE_RANGE",
            )


def _clean_notes(notes: Optional[str]) -> Optional[str]:
    if notes is None:
        return None
    return notes.strip() or None


__all__ = ["VacationService", "RequestPreview"]
