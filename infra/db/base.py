# infra/db/base.py
from __future__ import annotations
from pathlib import Path
import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from infra.path import default_db_path

logger = logging.getLogger(__name__)

Base = declarative_base()


def sqlite_url(db_path: Path | None = None) -> str:
    db_path = db_path or default_db_path()
    db_path.parent.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{db_path.as_posix()}"


def make_engine(db_url: str | None = None) -> Engine:
    db_url = db_url or sqlite_url()
    logger.info("Using database at: %s", db_url)
    return create_engine(db_url, echo=False, future=True)


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
