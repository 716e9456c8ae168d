"""
Database engine and session management.
Provides the SQLAlchemy engine factory, table creation, and the FastAPI
session dependency.
"""

import logging
from collections.abc import Generator
from pathlib import Path

from fastapi import Request
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from salary_api.models import Base

logger = logging.getLogger(__name__)


def _is_memory_sqlite(url: str) -> bool:
    database = make_url(url).database
    return not database or database == ":memory:"


def build_engine(url: str, echo: bool = False) -> Engine:
    """Create the engine, with the connection options SQLite needs under a threaded server."""
    engine_args: dict = {"echo": echo}

    is_sqlite = url.startswith("sqlite")
    if is_sqlite:
        engine_args["connect_args"] = {"check_same_thread": False}
        if _is_memory_sqlite(url):
            # One shared connection, otherwise every checkout sees an empty database
            engine_args["poolclass"] = StaticPool
    else:
        engine_args["pool_pre_ping"] = True

    engine = create_engine(url, **engine_args)

    if is_sqlite:
        @event.listens_for(engine, "connect")
        def set_sqlite_pragma(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def init_db(engine: Engine) -> None:
    """Create the SQLite data directory if needed, then all tables."""
    url = engine.url
    if url.get_backend_name() == "sqlite" and url.database and url.database != ":memory:":
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)

    Base.metadata.create_all(bind=engine)
    logger.info("Database schema ready (%s)", url.render_as_string(hide_password=True))


def check_connection(engine: Engine) -> bool:
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        logger.info("Database connection established successfully")
        return True
    except SQLAlchemyError:
        logger.exception("Failed to connect to database")
        return False


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Yield a session bound to the application's engine.
    Use as a FastAPI dependency: Depends(get_db)
    """
    session = request.app.state.session_factory()
    try:
        yield session
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
