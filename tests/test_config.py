"""
Tests for settings loading and engine options.
"""

import pytest
from pydantic import ValidationError

from app.config import Environment, Settings, settings
from domain.models.database import _engine_kwargs


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg2://u:p@db:5432/pawnder")
    monkeypatch.setenv("ENVIRONMENT", "PRODUCTION")
    monkeypatch.setenv("MAX_PAGE_SIZE", "50")

    loaded = Settings()

    assert loaded.database_url.endswith("/pawnder")
    assert loaded.environment == Environment.PRODUCTION
    assert loaded.is_production()
    assert loaded.max_page_size == 50


def test_settings_rewrite_postgres_scheme(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgres://u:p@db:5432/pawnder")

    assert Settings().database_url == "postgresql+psycopg2://u:p@db:5432/pawnder"


def test_settings_reject_default_page_above_max(monkeypatch):
    monkeypatch.setenv("DEFAULT_PAGE_SIZE", "200")
    monkeypatch.setenv("MAX_PAGE_SIZE", "100")

    with pytest.raises(ValidationError):
        Settings()


def test_settings_defaults():
    defaults = Settings.model_fields

    assert defaults["database_url"].default.startswith("postgresql")
    assert defaults["default_page_size"].default == 20
    assert defaults["max_page_size"].default == 100


def test_test_run_uses_sqlite():
    assert settings.database_url == "sqlite://"
    assert settings.is_testing()


def test_engine_kwargs_for_sqlite_and_postgres():
    sqlite_kwargs = _engine_kwargs("sqlite://")
    pg_kwargs = _engine_kwargs("postgresql+psycopg2://localhost/pawnder")

    assert sqlite_kwargs["connect_args"] == {"check_same_thread": False}
    assert "connect_args" not in pg_kwargs
