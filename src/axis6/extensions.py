"""Database and service wiring for the AXIS6 Flask app."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from flask import Flask, current_app
from sqlalchemy.engine import Engine
from sqlmodel import Session

from .config import BaseConfig
from .infra.database import bootstrap_database
from .infra.repositories import (
    SQLModelCategoryRepository,
    SQLModelCheckinRepository,
    SQLModelProfileRepository,
    SQLModelStreakRepository,
)
from .services.checkins import CheckinService

EXTENSION_KEY = "axis6"


@dataclass
class AppServices:
    """Repositories and services shared by request handlers and CLI commands."""

    engine: Engine
    session_factory: Callable[[], Session]
    categories: SQLModelCategoryRepository
    checkins: SQLModelCheckinRepository
    profiles: SQLModelProfileRepository
    streaks: SQLModelStreakRepository
    checkin_service: CheckinService


def build_services(config: BaseConfig) -> AppServices:
    """Create the engine, schema, repositories and services for a config."""

    engine, session_factory = bootstrap_database(config)
    categories = SQLModelCategoryRepository(session_factory)
    checkins = SQLModelCheckinRepository(session_factory)
    profiles = SQLModelProfileRepository(session_factory)
    streaks = SQLModelStreakRepository(
        session_factory, max_attempts=config.STREAK_UPDATE_MAX_ATTEMPTS
    )
    categories.ensure_defaults()
    return AppServices(
        engine=engine,
        session_factory=session_factory,
        categories=categories,
        checkins=checkins,
        profiles=profiles,
        streaks=streaks,
        checkin_service=CheckinService(
            categories=categories,
            checkins=checkins,
            streaks=streaks,
            profiles=profiles,
        ),
    )


def init_db(app: Flask) -> None:
    """Initialize the SQLModel engine and services using the app's config."""

    config: BaseConfig = app.config["AXIS6_CONFIG"]
    app.extensions[EXTENSION_KEY] = build_services(config)


def get_services() -> AppServices:
    """Return the services bound to the current app."""

    services = current_app.extensions.get(EXTENSION_KEY)
    if services is None:  # pragma: no cover - only when init_db was skipped
        raise RuntimeError("Database engine not initialized")
    return services
