"""
Engine, session factory and schema bootstrap for the taxonomy database.
"""

import logging
import sqlite3
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from app.config import settings

logger = logging.getLogger("pawnder.database")

Base = declarative_base()


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


@event.listens_for(Engine, "connect")
def _register_sqlite_lower(dbapi_connection, connection_record):
    """SQLite's built-in lower() folds ASCII only; names are compared with full Unicode folding"""
    if isinstance(dbapi_connection, sqlite3.Connection):
        dbapi_connection.create_function("lower", 1, _unicode_lower, deterministic=True)


def _engine_kwargs(url: str) -> dict:
    kwargs = {"echo": settings.db_echo, "future": True}
    if url.startswith("sqlite"):
        # Sessions are handed to FastAPI's threadpool
        kwargs["connect_args"] = {"check_same_thread": False}
    return kwargs


engine = create_engine(settings.database_url, **_engine_kwargs(settings.database_url))
SessionLocal = sessionmaker(bind=engine, future=True)


def init_database():
    """Create any missing taxonomy tables and indexes; existing ones are left alone."""
    # Registers every table on Base.metadata
    from domain.models import attribute, preference  # noqa: F401

    with engine.begin() as conn:
        Base.metadata.create_all(bind=conn)
    logger.info(f"schema_ready tables={len(Base.metadata.tables)}")


def get_db_session():
    """Request-scoped session, closed once the response is sent"""
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
