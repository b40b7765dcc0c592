import pytest

from core.exceptions import ValidationError
from core.models import Role, UserRole
from core.services.auth import AuthService, InMemorySessionStorage, UserSessionContext, UserSessionPrincipal
from core.services.auth.service import DEFAULT_ADMIN_ID


def _employee(services, **overrides):
    values = dict(name="Ana", role=Role.DRIVERS, email="ana@example.com", employee_code="A-001")
    values.update(overrides)
    return services["employee_service"].create_employee(**values)


def test_default_admin_login(services):
    principal = services["auth_service"].login("admin", "admin123")

    assert principal.user_id == DEFAULT_ADMIN_ID
    assert principal.role == UserRole.ADMIN
    assert services["user_session"].is_admin()
    assert services["session_storage"].load()["role"] == "admin"


def test_default_admin_credentials_come_from_environment(services, monkeypatch):
    monkeypatch.setenv("VP_ADMIN_USERNAME", "boss")
    monkeypatch.setenv("VP_ADMIN_CODE", "s3cret")
    auth = services["auth_service"]

    with pytest.raises(ValidationError):
        auth.login("admin", "admin123")
    assert auth.login("boss", "s3cret").is_admin


def test_employee_login_by_email_is_case_insensitive(services):
    emp = _employee(services)

    principal = services["auth_service"].login("  ANA@Example.COM ", "A-001")

    assert principal.employee_id == emp.id
    assert principal.role == UserRole.EMPLOYEE
    assert not services["user_session"].is_admin()


def test_admin_flag_gives_employee_admin_role(services):
    _employee(services, is_admin=True)

    assert services["auth_service"].login("ana@example.com", "A-001").is_admin


@pytest.mark.parametrize(
    "identifier,code",
    [
        ("ana@example.com", "wrong"),
        ("nobody@example.com", "A-001"),
        ("", ""),
        ("admin", "admin"),
    ],
)
def test_bad_credentials_are_rejected(services, identifier, code):
    _employee(services)

    with pytest.raises(ValidationError) as exc:
        services["auth_service"].login(identifier, code)

    assert exc.value.code == "AUTH_FAILED"
    assert not services["user_session"].is_authenticated()


def test_employee_without_code_cannot_sign_in(services):
    _employee(services, employee_code="")

    with pytest.raises(ValidationError):
        services["auth_service"].login("ana@example.com", "")


def test_logout_clears_storage(services):
    auth = services["auth_service"]
    auth.login("admin", "admin123")

    auth.logout()

    assert not services["user_session"].is_authenticated()
    assert services["session_storage"].load() is None


def test_restore_brings_session_back(services):
    emp = _employee(services)
    services["auth_service"].login("ana@example.com", "A-001")

    fresh_context = UserSessionContext(services["session_storage"])
    restored = AuthService(services["employee_repo"], fresh_context).restore()

    assert restored is not None
    assert restored.employee_id == emp.id
    assert fresh_context.principal == restored


def test_restore_drops_session_of_deleted_employee(services):
    emp = _employee(services)
    services["auth_service"].login("ana@example.com", "A-001")
    stored = services["session_storage"].load()
    services["user_session"].clear()
    services["employee_service"].delete_employee(emp.id)
    services["session_storage"].save(stored)

    fresh_context = UserSessionContext(services["session_storage"])
    restored = AuthService(services["employee_repo"], fresh_context).restore()

    assert restored is None
    assert services["session_storage"].load() is None


def test_restore_picks_up_changed_admin_flag(services):
    emp = _employee(services)
    services["auth_service"].login("ana@example.com", "A-001")
    services["user_session"].clear()
    services["employee_service"].update_employee(emp.id, is_admin=True)
    services["session_storage"].save(AuthService.build_principal(emp).to_payload())

    fresh_context = UserSessionContext(services["session_storage"])
    restored = AuthService(services["employee_repo"], fresh_context).restore()

    assert restored.is_admin


def test_corrupt_stored_payload_is_discarded():
    storage = InMemorySessionStorage({"name": "no id here"})
    context = UserSessionContext(storage)

    assert context.load_stored() is None
    assert storage.load() is None


def test_principal_payload_round_trip():
    principal = UserSessionPrincipal(
        user_id="emp-1",
        name="Ana",
        email="ana@example.com",
        role=UserRole.EMPLOYEE,
        employee_id="emp-1",
    )

    payload = principal.to_payload()

    assert payload["employeeId"] == "emp-1"
    assert UserSessionPrincipal.from_payload(payload) == principal
