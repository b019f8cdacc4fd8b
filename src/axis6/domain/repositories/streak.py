"""Streak repository protocol."""

from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from ...models.streak import Streak


class StreakRepository(Protocol):
    """Repository owning writes to streak records."""

    def get(self, user_id: str, category_id: int) -> Optional[Streak]:
        """Retrieve the streak record for a pair."""
        ...

    def list_for_user(self, user_id: str) -> list[Streak]:
        """List all streak records of a user ordered by category."""
        ...

    def update_streak(
        self,
        user_id: str,
        category_id: int,
        completed: bool,
        on: Optional[date] = None,
    ) -> Optional[Streak]:
        """Apply a check-in toggle atomically and return the stored record."""
        ...

    def recalculate(self, user_id: str, category_id: int, days: list[date]) -> Optional[Streak]:
        """Rebuild a streak from the given completed days."""
        ...
