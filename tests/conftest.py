"""Pytest configuration and shared fixtures for AXIS6 tests.

This module provides database fixtures, repository/service wiring and a Flask
client for testing streak logic without touching the real app database.
"""

from __future__ import annotations

from datetime import date

import pytest
from sqlmodel import Session, select

from axis6 import create_app
from axis6.config import TestingConfig
from axis6.infra.database import create_db_engine, init_database, session_scope
from axis6.infra.repositories import (
    SQLModelCategoryRepository,
    SQLModelCheckinRepository,
    SQLModelProfileRepository,
    SQLModelStreakRepository,
)
from axis6.models import Profile, Streak
from axis6.services.checkins import CheckinService

# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture
def test_config(tmp_path, monkeypatch: pytest.MonkeyPatch) -> TestingConfig:
    """Configuration pointing at a throwaway data directory and SQLite file."""

    monkeypatch.setenv("AXIS6_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("AXIS6_DATABASE_URL", f"sqlite:///{tmp_path / 'axis6-test.db'}")
    monkeypatch.delenv("AXIS6_STREAK_MAX_ATTEMPTS", raising=False)
    return TestingConfig()


@pytest.fixture
def db_engine(test_config):
    """Create an isolated SQLite database file for each test.

    Yields:
        Engine: engine with every AXIS6 table created and foreign keys enforced
    """
    engine = create_db_engine(test_config)
    init_database(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    """Session factory matching what repositories expect: Callable[[], Session]."""

    def factory() -> Session:
        return Session(db_engine, expire_on_commit=False)

    return factory


@pytest.fixture
def db_session(db_engine):
    """A committed session for arranging and inspecting rows directly."""

    with session_scope(db_engine) as session:
        yield session


# =============================================================================
# Repositories and services
# =============================================================================


@pytest.fixture
def categories(session_factory):
    """Category repository with the six defaults seeded."""

    repo = SQLModelCategoryRepository(session_factory)
    repo.ensure_defaults()
    return repo


@pytest.fixture
def profiles(session_factory):
    return SQLModelProfileRepository(session_factory)


@pytest.fixture
def checkins(session_factory):
    return SQLModelCheckinRepository(session_factory)


@pytest.fixture
def streaks(session_factory):
    return SQLModelStreakRepository(session_factory)


@pytest.fixture
def user(profiles, categories) -> Profile:
    """A default profile owning the check-ins under test."""

    return profiles.ensure("user-1", "Tester")


@pytest.fixture
def physical(categories):
    return categories.get_by_slug("physical")


@pytest.fixture
def checkin_service(categories, checkins, streaks, profiles) -> CheckinService:
    return CheckinService(
        categories=categories,
        checkins=checkins,
        streaks=streaks,
        profiles=profiles,
    )


@pytest.fixture
def stored_streak(session_factory):
    """Read the raw streak row for a pair, bypassing the repository."""

    def _read(user_id: str, category_id: int) -> Streak | None:
        with session_factory() as session:
            return session.exec(
                select(Streak).where(Streak.user_id == user_id, Streak.category_id == category_id)
            ).first()

    return _read


@pytest.fixture
def jan():
    """Shorthand for dates in January 2024."""

    return lambda day: date(2024, 1, day)


# =============================================================================
# Flask
# =============================================================================


@pytest.fixture
def app(test_config):
    app = create_app("testing")
    yield app
    app.extensions["axis6"].engine.dispose()


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"X-User-Id": "api-user"}
