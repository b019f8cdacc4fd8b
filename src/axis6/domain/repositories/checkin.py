"""Check-in repository protocol."""

from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from ...models.checkin import CheckIn


class CheckinRepository(Protocol):
    """Repository for daily check-in records."""

    def get(self, user_id: str, category_id: int, on: date) -> Optional[CheckIn]:
        """Get the check-in for one user, category and day."""
        ...

    def list_for_user(
        self,
        user_id: str,
        *,
        on: Optional[date] = None,
        category_id: Optional[int] = None,
    ) -> list[CheckIn]:
        """List a user's check-ins, newest first."""
        ...

    def upsert(
        self,
        user_id: str,
        category_id: int,
        on: date,
        *,
        mood: Optional[int] = None,
        notes: Optional[str] = None,
    ) -> CheckIn:
        """Insert or update the check-in for a day."""
        ...

    def delete(self, user_id: str, category_id: int, on: date) -> bool:
        """Delete the check-in for a day; False when there was none."""
        ...

    def dates_for(self, user_id: str, category_id: int) -> list[date]:
        """Return every completed day for a pair in ascending order."""
        ...
