"""SQLModel implementation of the check-in repository."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Callable, Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from ...models.checkin import CheckIn


class SQLModelCheckinRepository:
    """SQLModel-based check-in repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    @staticmethod
    def _day_query(user_id: str, category_id: int, on: date):
        return (
            select(CheckIn)
            .where(CheckIn.user_id == user_id)
            .where(CheckIn.category_id == category_id)
            .where(CheckIn.completed_at == on)
        )

    def _find(
        self, session: Session, user_id: str, category_id: int, on: date
    ) -> Optional[CheckIn]:
        return session.exec(self._day_query(user_id, category_id, on)).first()

    def get(self, user_id: str, category_id: int, on: date) -> Optional[CheckIn]:
        """Get the check-in for one user, category and day."""
        with self.session_factory() as session:
            obj = self._find(session, user_id, category_id, on)
            if obj:
                session.expunge(obj)
            return obj

    def list_for_user(
        self,
        user_id: str,
        *,
        on: Optional[date] = None,
        category_id: Optional[int] = None,
    ) -> list[CheckIn]:
        """List a user's check-ins, newest first."""
        with self.session_factory() as session:
            statement = select(CheckIn).where(CheckIn.user_id == user_id)
            if on is not None:
                statement = statement.where(CheckIn.completed_at == on)
            if category_id is not None:
                statement = statement.where(CheckIn.category_id == category_id)
            statement = statement.order_by(
                CheckIn.completed_at.desc(), CheckIn.category_id  # type: ignore
            )
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def upsert(
        self,
        user_id: str,
        category_id: int,
        on: date,
        *,
        mood: Optional[int] = None,
        notes: Optional[str] = None,
    ) -> CheckIn:
        """Insert or update the check-in for a day.

        A concurrent insert of the same day surfaces as a unique-key violation;
        the row that won is then updated in place.
        """
        with self.session_factory() as session:
            existing = self._find(session, user_id, category_id, on)

            if existing is None:
                entry = CheckIn(
                    user_id=user_id,
                    category_id=category_id,
                    completed_at=on,
                    mood=mood,
                    notes=notes,
                )
                session.add(entry)
                try:
                    session.commit()
                except IntegrityError:
                    session.rollback()
                    existing = self._find(session, user_id, category_id, on)
                    if existing is None:
                        raise
                else:
                    session.refresh(entry)
                    session.expunge(entry)
                    return entry

            existing.mood = mood
            existing.notes = notes
            existing.updated_at = datetime.now(timezone.utc)
            session.add(existing)
            session.commit()
            session.refresh(existing)
            session.expunge(existing)
            return existing

    def delete(self, user_id: str, category_id: int, on: date) -> bool:
        """Delete the check-in for a day; False when there was none."""
        with self.session_factory() as session:
            entry = self._find(session, user_id, category_id, on)
            if not entry:
                return False
            session.delete(entry)
            session.commit()
            return True

    def dates_for(self, user_id: str, category_id: int) -> list[date]:
        """Return every completed day for a pair in ascending order."""
        with self.session_factory() as session:
            statement = (
                select(CheckIn.completed_at)
                .where(CheckIn.user_id == user_id)
                .where(CheckIn.category_id == category_id)
                .order_by(CheckIn.completed_at)  # type: ignore
            )
            return list(session.exec(statement).all())
