from datetime import date

import pytest

from core.exceptions import ValidationError
from core.models import Employee, Role, VacationRequest, VacationStatus, parse_date
from infra.db.employee.mapper import employee_from_orm, employee_to_orm
from infra.db.vacation.mapper import vacation_from_orm, vacation_to_orm


def test_parse_date_reads_calendar_date_from_timestamp():
    assert parse_date("2024-06-03T00:00:00.000Z") == date(2024, 6, 3)
    assert parse_date(date(2024, 6, 3)) == date(2024, 6, 3)


@pytest.mark.parametrize("value", ["03/06/2024", "", None, 20240603])
def test_parse_date_rejects_garbage(value):
    with pytest.raises(ValidationError) as exc:
        parse_date(value)
    assert exc.value.code == "INVALID_DATE"


def test_vacation_record_uses_wire_keys():
    record = {
        "id": "v-1",
        "employeeId": "emp-1",
        "startDate": "2024-06-03T00:00:00.000Z",
        "endDate": "2024-06-07",
        "status": "Approved",
        "notes": "verão",
    }

    vacation = VacationRequest.from_record(record)

    assert vacation.start_date == date(2024, 6, 3)
    assert vacation.status == VacationStatus.APPROVED
    assert vacation.to_record() == {**record, "startDate": "2024-06-03"}


def test_employee_record_uses_wire_keys():
    employee = Employee.from_record(
        {"id": "emp-1", "name": "Ana", "role": "Armazém", "employeeCode": "A-1", "isAdmin": True}
    )

    assert employee.role == Role.WAREHOUSE
    assert employee.employee_code == "A-1"
    assert employee.is_admin
    record = employee.to_record()
    assert record["employeeCode"] == "A-1"
    assert "avatar" not in record


def test_orm_mappers_keep_every_field():
    employee = Employee.create(
        name="Ana",
        role=Role.AIR,
        color="#3b82f6",
        email="ana@example.com",
        employee_code="A-1",
        department="Aéreo",
        is_admin=True,
        avatar="data:image/png;base64,xx",
    )
    vacation = VacationRequest.create(
        employee_id=employee.id,
        start_date=date(2024, 6, 3),
        end_date=date(2024, 6, 7),
        status=VacationStatus.REJECTED,
        notes="n",
    )

    assert employee_from_orm(employee_to_orm(employee)) == employee
    assert vacation_from_orm(vacation_to_orm(vacation)) == vacation
