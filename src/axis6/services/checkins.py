"""Check-in toggling: record the day, then update its streak."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Literal, Optional, Union

from ..domain.repositories import (
    CategoryRepository,
    CheckinRepository,
    ProfileRepository,
    StreakRepository,
)
from ..logging_config import get_logger
from ..models import AxisCategory, CheckIn, Streak

logger = get_logger("services.checkins")

MOOD_RANGE = range(1, 6)


@dataclass(frozen=True)
class ToggleResult:
    """Outcome of a check-in toggle."""

    action: Literal["completed", "removed"]
    checkin: Optional[CheckIn]
    streak: Optional[Streak]


class CheckinService:
    """Coordinates the check-in store and the streak updater."""

    def __init__(
        self,
        *,
        categories: CategoryRepository,
        checkins: CheckinRepository,
        streaks: StreakRepository,
        profiles: ProfileRepository,
    ):
        self.categories = categories
        self.checkins = checkins
        self.streaks = streaks
        self.profiles = profiles

    def resolve_category(self, category: Union[int, str]) -> AxisCategory:
        """Look a category up by id or slug."""

        found: Optional[AxisCategory]
        if isinstance(category, int) or (isinstance(category, str) and category.isdigit()):
            found = self.categories.get_by_id(int(category))
        else:
            found = self.categories.get_by_slug(category.strip().lower())
        if found is None:
            raise ValueError(f"Unknown category: {category!r}")
        return found

    def toggle(
        self,
        user_id: str,
        category: Union[int, str],
        completed: bool,
        *,
        on: Optional[date] = None,
        mood: Optional[int] = None,
        notes: Optional[str] = None,
    ) -> ToggleResult:
        """Mark or un-mark a day and bring the streak in line with it.

        The check-in is written (or removed) first; the streak update runs
        afterwards in its own transaction, trusting ``completed`` to match the
        check-in store.
        """

        if mood is not None and mood not in MOOD_RANGE:
            raise ValueError("Mood must be between 1 and 5.")

        day = on or date.today()
        axis = self.resolve_category(category)

        checkin: Optional[CheckIn] = None
        if completed:
            self.profiles.ensure(user_id)
            checkin = self.checkins.upsert(user_id, axis.id, day, mood=mood, notes=notes)
        else:
            self.checkins.delete(user_id, axis.id, day)

        streak = self.streaks.update_streak(user_id, axis.id, completed, day)
        logger.info(
            "Check-in toggled",
            extra={"user_id": user_id, "category": axis.slug, "on": day, "completed": completed},
        )
        return ToggleResult(
            action="completed" if completed else "removed",
            checkin=checkin,
            streak=streak,
        )

    def remove(self, user_id: str, category: Union[int, str], on: date) -> Optional[Streak]:
        """Delete a specific day's check-in.

        Raises LookupError when there is no such check-in.
        """

        axis = self.resolve_category(category)
        if not self.checkins.delete(user_id, axis.id, on):
            raise LookupError(f"No check-in for {axis.slug} on {on.isoformat()}")
        return self.streaks.update_streak(user_id, axis.id, False, on)

    def recalculate(self, user_id: str, category: Union[int, str]) -> Optional[Streak]:
        """Rebuild a streak from the stored check-in history."""

        axis = self.resolve_category(category)
        days = self.checkins.dates_for(user_id, axis.id)
        streak = self.streaks.recalculate(user_id, axis.id, days)
        logger.info(
            "Streak recalculated from history",
            extra={"user_id": user_id, "category": axis.slug, "days": len(days)},
        )
        return streak

    def recalculate_all(self, user_id: str) -> list[Streak]:
        """Rebuild every category's streak for a user."""

        rebuilt: list[Streak] = []
        for axis in self.categories.list_all():
            streak = self.recalculate(user_id, axis.id)
            if streak is not None:
                rebuilt.append(streak)
        return rebuilt


__all__ = ["CheckinService", "ToggleResult", "MOOD_RANGE"]
