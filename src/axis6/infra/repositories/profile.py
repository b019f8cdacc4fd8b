"""SQLModel implementation of the profile repository."""

from __future__ import annotations

from typing import Callable, Optional

from sqlmodel import Session

from ...models.profile import Profile


class SQLModelProfileRepository:
    """SQLModel-based profile repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def get(self, user_id: str) -> Optional[Profile]:
        with self.session_factory() as session:
            obj = session.get(Profile, user_id)
            if obj:
                session.expunge(obj)
            return obj

    def ensure(self, user_id: str, name: str = "") -> Profile:
        """Return the profile, creating it on first sight."""
        with self.session_factory() as session:
            obj = session.get(Profile, user_id)
            if obj is None:
                obj = Profile(id=user_id, name=name or user_id)
                session.add(obj)
                session.commit()
                session.refresh(obj)
            session.expunge(obj)
            return obj
