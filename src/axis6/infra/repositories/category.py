"""SQLModel implementation of the category repository."""

from __future__ import annotations

from typing import Callable, Optional

from sqlmodel import Session, select

from ...constants.categories import DEFAULT_CATEGORIES
from ...models.category import AxisCategory


class SQLModelCategoryRepository:
    """SQLModel-based category repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def get_by_id(self, category_id: int) -> Optional[AxisCategory]:
        """Retrieve a category by ID."""
        with self.session_factory() as session:
            obj = session.get(AxisCategory, category_id)
            if obj:
                session.expunge(obj)
            return obj

    def get_by_slug(self, slug: str) -> Optional[AxisCategory]:
        """Retrieve a category by slug."""
        with self.session_factory() as session:
            obj = session.exec(select(AxisCategory).where(AxisCategory.slug == slug)).first()
            if obj:
                session.expunge(obj)
            return obj

    def list_all(self) -> list[AxisCategory]:
        """List all categories ordered by position."""
        with self.session_factory() as session:
            rows = list(
                session.exec(
                    select(AxisCategory).order_by(AxisCategory.position)  # type: ignore
                ).all()
            )
            session.expunge_all()
            return rows

    def ensure_defaults(self) -> list[AxisCategory]:
        """Insert any missing default category and return the full set."""
        with self.session_factory() as session:
            existing = set(session.exec(select(AxisCategory.slug)).all())
            for entry in DEFAULT_CATEGORIES:
                if entry["slug"] in existing:
                    continue
                session.add(AxisCategory(id=entry["position"], **entry))
            session.commit()
        return self.list_all()
