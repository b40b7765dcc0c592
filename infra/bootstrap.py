# infra/bootstrap.py
from __future__ import annotations

import logging

from infra.db.base import make_engine, make_session_factory, sqlite_url
from infra.logging_config import setup_logging
from infra.migrate import run_migrations
from infra.operational_support import bind_trace_id
from infra.services import ServiceGraph, build_service_graph
from infra.session_storage import JsonFileSessionStorage

logger = logging.getLogger(__name__)


def build_services(db_url: str | None = None) -> ServiceGraph:
    """Migrate the database, open a session and restore the last signed-in user."""
    db_url = db_url or sqlite_url()
    run_migrations(db_url=db_url)

    session = make_session_factory(make_engine(db_url))()
    graph = build_service_graph(session, JsonFileSessionStorage())
    principal = graph.auth_service.restore()
    if principal is not None:
        logger.info("Restored session for %s", principal.user_id)
    return graph


def main() -> int:
    setup_logging()
    with bind_trace_id(None):
        graph = build_services()
        try:
            data = graph.dashboard_service.get_dashboard_data()
            logger.info(
                "Ready: %d pending request(s), %d employee(s) on vacation today",
                len(data.pending),
                data.employees_on_vacation_today,
            )
        finally:
            graph.session.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
