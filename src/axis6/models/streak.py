"""Per-category streak state."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import ClassVar, Optional

from sqlalchemy import CheckConstraint, UniqueConstraint
from sqlmodel import Field, SQLModel


class Streak(SQLModel, table=True):
    """Current and longest run of completed days for one (user, category)."""

    __tablename__: ClassVar[str] = "axis6_streaks"
    __table_args__ = (
        UniqueConstraint("user_id", "category_id", name="uq_streak_user_category"),
        CheckConstraint("current_streak >= 0", name="ck_streak_current_non_negative"),
        CheckConstraint("longest_streak >= current_streak", name="ck_streak_longest_covers_current"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(foreign_key="axis6_profiles.id", nullable=False, index=True)
    category_id: int = Field(foreign_key="axis6_categories.id", nullable=False)
    current_streak: int = Field(default=0, nullable=False)
    longest_streak: int = Field(default=0, nullable=False)
    last_checkin_date: Optional[date] = Field(default=None)
    # Bumped on every write; updates are compare-and-swap on this column.
    version: int = Field(default=1, nullable=False)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    def to_dict(self) -> dict:
        return {
            "user_id": self.user_id,
            "category_id": self.category_id,
            "current_streak": self.current_streak,
            "longest_streak": self.longest_streak,
            "last_checkin_date": (
                self.last_checkin_date.isoformat() if self.last_checkin_date else None
            ),
            "updated_at": self.updated_at.isoformat(),
        }
