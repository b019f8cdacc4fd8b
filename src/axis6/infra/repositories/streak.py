"""SQLModel implementation of the streak repository.

Each update is a single fetch/compute/write unit. The read takes a row lock
where the backend supports it (``SELECT ... FOR UPDATE`` on PostgreSQL) and
the write only lands if ``version`` still holds the value that was read, so
two toggles racing on the same (user, category) can never overwrite each
other. A lost race re-runs the unit from a fresh read.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Callable, Optional

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from ...logging_config import get_logger
from ...models.streak import Streak
from ...services.streaks import StreakState, advance_streak, rebuild_state

logger = get_logger("repositories.streak")

Transition = Callable[[Optional[StreakState]], Optional[StreakState]]


class StreakConflictError(RuntimeError):
    """Raised when concurrent writers kept winning every attempt."""


def _state_of(row: Optional[Streak]) -> Optional[StreakState]:
    if row is None:
        return None
    return StreakState(
        current=row.current_streak,
        longest=row.longest_streak,
        last_checkin_date=row.last_checkin_date,
    )


class SQLModelStreakRepository:
    """SQLModel-based streak repository implementation."""

    def __init__(self, session_factory: Callable[[], Session], *, max_attempts: int = 3):
        """Initialize with a session factory."""
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.session_factory = session_factory
        self.max_attempts = max_attempts

    def get(self, user_id: str, category_id: int) -> Optional[Streak]:
        """Retrieve the streak record for a pair."""
        with self.session_factory() as session:
            obj = session.exec(self._pair_query(user_id, category_id)).first()
            if obj:
                session.expunge(obj)
            return obj

    def list_for_user(self, user_id: str) -> list[Streak]:
        """List all streak records of a user ordered by category."""
        with self.session_factory() as session:
            statement = (
                select(Streak)
                .where(Streak.user_id == user_id)
                .order_by(Streak.category_id)  # type: ignore
            )
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def update_streak(
        self,
        user_id: str,
        category_id: int,
        completed: bool,
        on: Optional[date] = None,
    ) -> Optional[Streak]:
        """Apply a check-in toggle and return the stored record.

        Returns None when un-marking a pair that has no record yet. Storage
        errors propagate unchanged; only lost compare-and-swap races are
        retried.
        """
        day = on or date.today()
        return self._apply(
            user_id,
            category_id,
            lambda state: advance_streak(state, completed=completed, on=day),
            reason="completed" if completed else "unmarked",
            on=day,
        )

    def recalculate(self, user_id: str, category_id: int, days: list[date]) -> Optional[Streak]:
        """Rebuild a streak from the given completed days."""
        history = list(days)

        def transition(state: Optional[StreakState]) -> Optional[StreakState]:
            if state is None and not history:
                return None
            return rebuild_state(state, history)

        return self._apply(user_id, category_id, transition, reason="recalculated")

    # Internal helpers
    @staticmethod
    def _pair_query(user_id: str, category_id: int):
        return select(Streak).where(Streak.user_id == user_id, Streak.category_id == category_id)

    def _apply(
        self,
        user_id: str,
        category_id: int,
        transition: Transition,
        *,
        reason: str,
        on: Optional[date] = None,
    ) -> Optional[Streak]:
        for attempt in range(1, self.max_attempts + 1):
            with self.session_factory() as session:
                row = session.exec(
                    self._pair_query(user_id, category_id).with_for_update()
                ).first()
                new_state = transition(_state_of(row))
                if new_state is None:
                    session.rollback()
                    return None

                if row is None:
                    stored = self._insert(session, user_id, category_id, new_state)
                else:
                    stored = self._compare_and_swap(session, row, new_state)

                if stored is None:
                    logger.warning(
                        "Streak write lost a concurrent race; retrying",
                        extra={
                            "user_id": user_id,
                            "category_id": category_id,
                            "attempt": attempt,
                        },
                    )
                    continue

                logger.info(
                    "Streak %s",
                    reason,
                    extra={
                        "user_id": user_id,
                        "category_id": category_id,
                        "on": on,
                        "current_streak": stored.current_streak,
                        "longest_streak": stored.longest_streak,
                        "last_checkin_date": stored.last_checkin_date,
                    },
                )
                return stored

        raise StreakConflictError(
            f"Streak for user {user_id!r} category {category_id} changed concurrently "
            f"on each of {self.max_attempts} attempts"
        )

    def _insert(
        self, session: Session, user_id: str, category_id: int, state: StreakState
    ) -> Optional[Streak]:
        row = Streak(
            user_id=user_id,
            category_id=category_id,
            current_streak=state.current,
            longest_streak=state.longest,
            last_checkin_date=state.last_checkin_date,
        )
        session.add(row)
        try:
            session.commit()
        except IntegrityError:
            session.rollback()
            # Another writer created the pair first; anything else is a real violation.
            if session.exec(self._pair_query(user_id, category_id)).first() is not None:
                return None
            raise
        session.refresh(row)
        session.expunge(row)
        return row

    def _compare_and_swap(
        self, session: Session, row: Streak, state: StreakState
    ) -> Optional[Streak]:
        seen_version = row.version
        result = session.exec(  # type: ignore[call-overload]
            update(Streak)
            .where(Streak.id == row.id, Streak.version == seen_version)  # type: ignore
            .values(
                current_streak=state.current,
                longest_streak=state.longest,
                last_checkin_date=state.last_checkin_date,
                version=seen_version + 1,
                updated_at=datetime.now(timezone.utc),
            )
            .execution_options(synchronize_session=False)
        )
        if result.rowcount != 1:
            session.rollback()
            return None
        session.commit()
        session.refresh(row)
        session.expunge(row)
        return row
