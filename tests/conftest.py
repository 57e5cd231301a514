"""
Pytest configuration and shared fixtures.

Tests run against an in-memory SQLite database; every test function gets a
fresh schema so committed rows never leak between tests.
"""

import os
import sys
from pathlib import Path
from typing import Generator

# Must be set before app.config is imported anywhere
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "testing"

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from domain.models import Base, get_db_session
from main import app


@pytest.fixture(scope="function")
def db_engine():
    """One in-memory database shared by every session of a single test"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture(scope="function")
def db_session(db_engine) -> Generator[Session, None, None]:
    """
    Database session for repository and service tests.

    Yields:
        Session: SQLAlchemy session bound to the test database
    """
    TestingSession = sessionmaker(bind=db_engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture(scope="function")
def client(db_engine) -> Generator[TestClient, None, None]:
    """
    TestClient whose requests use the test database.

    The lifespan is not entered, so no schema creation runs against the
    configured DATABASE_URL.
    """
    TestingSession = sessionmaker(bind=db_engine)

    def override_get_db_session():
        db = TestingSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db_session] = override_get_db_session
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_db_session, None)
