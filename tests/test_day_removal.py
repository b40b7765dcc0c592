from datetime import date

from core.models import VacationRequest, VacationStatus
from core.services.vacation import RemovalKind, remove_day


def _week(status=VacationStatus.APPROVED):
    return VacationRequest(
        id="vac-1",
        employee_id="emp-1",
        start_date=date(2024, 6, 3),
        end_date=date(2024, 6, 7),
        status=status,
        notes="family trip",
    )


def test_removing_first_day_shrinks_start():
    plan = remove_day(_week(), date(2024, 6, 3))

    assert plan.kind == RemovalKind.SHRINK_START
    assert plan.updated.id == "vac-1"
    assert (plan.updated.start_date, plan.updated.end_date) == (date(2024, 6, 4), date(2024, 6, 7))
    assert plan.created == []
    assert plan.deleted_id is None


def test_removing_last_day_shrinks_end():
    plan = remove_day(_week(), date(2024, 6, 7))

    assert plan.kind == RemovalKind.SHRINK_END
    assert plan.updated.id == "vac-1"
    assert (plan.updated.start_date, plan.updated.end_date) == (date(2024, 6, 3), date(2024, 6, 6))


def test_removing_middle_day_splits_with_fresh_ids():
    vacation = _week()

    plan = remove_day(vacation, date(2024, 6, 5))

    assert plan.kind == RemovalKind.SPLIT
    assert plan.deleted_id == "vac-1"
    first, second = plan.created
    assert (first.start_date, first.end_date) == (date(2024, 6, 3), date(2024, 6, 4))
    assert (second.start_date, second.end_date) == (date(2024, 6, 6), date(2024, 6, 7))
    assert len({first.id, second.id, vacation.id}) == 3
    for part in plan.created:
        assert part.employee_id == "emp-1"
        assert part.status == VacationStatus.APPROVED
        assert part.notes == "family trip"


def test_removing_only_day_deletes():
    vacation = VacationRequest(
        id="vac-2",
        employee_id="emp-1",
        start_date=date(2024, 6, 5),
        end_date=date(2024, 6, 5),
    )

    plan = remove_day(vacation, date(2024, 6, 5))

    assert plan.kind == RemovalKind.DELETE
    assert plan.deleted_id == "vac-2"


def test_day_outside_range_is_a_noop():
    vacation = _week()

    plan = remove_day(vacation, date(2024, 6, 10))

    assert plan.kind == RemovalKind.NOOP
    assert plan.updated is None
    assert plan.created == []
    # the input is never mutated
    assert (vacation.start_date, vacation.end_date) == (date(2024, 6, 3), date(2024, 6, 7))
