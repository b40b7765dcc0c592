from datetime import date

import pytest

from core.events.domain_events import domain_events
from core.exceptions import NotFoundError, ValidationError
from core.models import Role
from core.services.employee import COLOR_PALETTE


def test_create_employee_normalizes_fields(services):
    es = services["employee_service"]

    emp = es.create_employee(
        name="  Ana Silva ",
        role="Motoristas",
        color="#EF4444",
        email=" Ana@Example.com ",
        employee_code="A-001",
    )

    stored = es.get_employee(emp.id)
    assert stored.name == "Ana Silva"
    assert stored.role == Role.DRIVERS
    assert stored.color == "#ef4444"
    assert stored.email == "ana@example.com"


def test_create_employee_validations(services):
    es = services["employee_service"]

    with pytest.raises(ValidationError) as exc:
        es.create_employee(name="   ")
    assert exc.value.code == "EMPLOYEE_NAME_EMPTY"

    with pytest.raises(ValidationError) as exc:
        es.create_employee(name="Ana", role="Marketing")
    assert exc.value.code == "INVALID_ROLE"

    with pytest.raises(ValidationError) as exc:
        es.create_employee(name="Ana", email="not-an-email")
    assert exc.value.code == "INVALID_EMAIL"


def test_explicit_employee_id_must_be_unique(services):
    es = services["employee_service"]
    es.create_employee(name="Ana", employee_id="emp-1")

    with pytest.raises(ValidationError) as exc:
        es.create_employee(name="Bruno", employee_id="emp-1")
    assert exc.value.code == "EMPLOYEE_ID_EXISTS"


def test_color_is_unique_within_a_role_only(services):
    es = services["employee_service"]
    es.create_employee(name="Ana", role=Role.DRIVERS, color="#ef4444")

    with pytest.raises(ValidationError) as exc:
        es.create_employee(name="Bruno", role=Role.DRIVERS, color="#EF4444")
    assert exc.value.code == "EMPLOYEE_COLOR_TAKEN"

    other = es.create_employee(name="Carla", role=Role.WAREHOUSE, color="#ef4444")
    assert other.color == "#ef4444"


def test_available_colors_skip_taken_ones(services):
    es = services["employee_service"]
    ana = es.create_employee(name="Ana", role=Role.DRIVERS, color=COLOR_PALETTE[0])

    assert COLOR_PALETTE[0] not in es.available_colors(Role.DRIVERS)
    assert COLOR_PALETTE[0] in es.available_colors(Role.DRIVERS, employee_id=ana.id)
    assert COLOR_PALETTE[0] in es.available_colors(Role.WAREHOUSE)


def test_email_is_unique(services):
    es = services["employee_service"]
    es.create_employee(name="Ana", email="ana@example.com")

    with pytest.raises(ValidationError) as exc:
        es.create_employee(name="Ana Two", email="ANA@example.com")
    assert exc.value.code == "EMPLOYEE_EMAIL_EXISTS"


def test_update_employee(services):
    es = services["employee_service"]
    emp = es.create_employee(name="Ana", role=Role.DRIVERS)

    es.update_employee(emp.id, name="Ana Maria", role=Role.FINANCE, department="Contas")

    stored = es.get_employee(emp.id)
    assert stored.name == "Ana Maria"
    assert stored.role == Role.FINANCE
    assert stored.department == "Contas"


def test_delete_employee_removes_their_vacations(services):
    es = services["employee_service"]
    vs = services["vacation_service"]
    ana = es.create_employee(name="Ana", color="#ef4444")
    bruno = es.create_employee(name="Bruno", color="#f97316")
    vs.book_vacation(ana.id, date(2024, 6, 6), date(2024, 6, 12))
    vs.book_vacation(bruno.id, date(2024, 6, 3), date(2024, 6, 7))

    removed = es.delete_employee(ana.id)

    assert removed == 2
    with pytest.raises(NotFoundError):
        es.get_employee(ana.id)
    assert {v.employee_id for v in vs.list_vacations()} == {bruno.id}


def test_roles_in_use_and_listing(services):
    es = services["employee_service"]
    es.create_employee(name="Zé", role=Role.WAREHOUSE)
    es.create_employee(name="Ana", role=Role.DRIVERS)

    assert [e.name for e in es.list_employees()] == ["Ana", "Zé"]
    assert es.list_roles_in_use() == [Role.WAREHOUSE, Role.DRIVERS]
    assert [e.name for e in es.list_by_role("Armazém")] == ["Zé"]


def test_employee_changes_emit_event(services):
    es = services["employee_service"]
    seen: list[str] = []

    def _handler(employee_id: str) -> None:
        seen.append(employee_id)

    domain_events.employees_changed.connect(_handler)
    try:
        emp = es.create_employee(name="Ana")
        es.delete_employee(emp.id)
    finally:
        domain_events.employees_changed.disconnect(_handler)

    assert seen == [emp.id, emp.id]
