from __future__ import annotations

import logging

from sqlalchemy import inspect, create_engine

from core.services.auth import UserSessionContext, UserSessionPrincipal
from core.models import UserRole
from infra.migrate import run_migrations
from infra.operational_support import (
    REDACTED_EMAIL,
    RedactingLogFilter,
    TraceIdLogFilter,
    bind_trace_id,
    current_trace_id,
)
from infra.path import user_data_dir
from infra.services import build_service_graph
from infra.session_storage import JsonFileSessionStorage


def test_trace_id_is_bound_for_the_block():
    assert current_trace_id() is None
    with bind_trace_id("inc-test-1") as trace_id:
        assert trace_id == "inc-test-1"
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
        TraceIdLogFilter().filter(record)
        assert record.trace_id == "inc-test-1"
    assert current_trace_id() is None


def test_redacting_filter_hides_emails_and_codes():
    record = logging.LogRecord(
        "x", logging.WARNING, __file__, 1, "Login failed for %s code=%s", ("ana@example.com", "A-001"), None
    )

    RedactingLogFilter().filter(record)

    message = record.getMessage()
    assert "ana@example.com" not in message
    assert "A-001" not in message
    assert REDACTED_EMAIL in message


def test_user_data_dir_honours_override(tmp_path, monkeypatch):
    monkeypatch.setenv("VP_DATA_DIR", str(tmp_path / "vp"))

    assert user_data_dir() == tmp_path / "vp"
    assert (tmp_path / "vp").is_dir()


def test_json_session_storage_survives_restart(tmp_path):
    path = tmp_path / "session.json"
    principal = UserSessionPrincipal(user_id="admin-default", name="Admin", email="admin", role=UserRole.ADMIN)
    UserSessionContext(JsonFileSessionStorage(path)).set_principal(principal)

    restored = UserSessionContext(JsonFileSessionStorage(path)).load_stored()

    assert restored == principal


def test_json_session_storage_ignores_broken_file(tmp_path):
    path = tmp_path / "session.json"
    path.write_text("{not json", encoding="utf-8")
    storage = JsonFileSessionStorage(path)

    assert storage.load() is None
    storage.clear()
    storage.clear()
    assert not path.exists()


def test_migrations_create_schema(tmp_path):
    db_url = f"sqlite:///{(tmp_path / 'vacations.db').as_posix()}"

    run_migrations(db_url)

    tables = set(inspect(create_engine(db_url)).get_table_names())
    assert {"employees", "vacations"} <= tables


def test_service_graph_wires_shared_session(session):
    graph = build_service_graph(session)
    services = graph.as_dict()

    emp = graph.employee_service.create_employee(name="Ana")
    graph.vacation_service.book_vacation(emp.id, "2024-06-03", "2024-06-07")

    assert services["session"] is session
    assert len(graph.calendar_service.month_view(2024, 6).employees) == 1
    assert graph.auth_service.user_session is graph.user_session
