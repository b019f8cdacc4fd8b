"""Daily check-in records."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import ClassVar, Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class CheckIn(SQLModel, table=True):
    """A user's completion of one category on one calendar day."""

    __tablename__: ClassVar[str] = "axis6_checkins"
    __table_args__ = (
        UniqueConstraint("user_id", "category_id", "completed_at", name="uq_checkin_day"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(foreign_key="axis6_profiles.id", nullable=False, index=True)
    category_id: int = Field(foreign_key="axis6_categories.id", nullable=False)
    completed_at: date = Field(nullable=False, index=True)
    mood: Optional[int] = Field(default=None, ge=1, le=5)
    notes: Optional[str] = Field(default=None, max_length=1000)
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
            "id": self.id,
            "user_id": self.user_id,
            "category_id": self.category_id,
            "completed_at": self.completed_at.isoformat(),
            "mood": self.mood,
            "notes": self.notes,
            "updated_at": self.updated_at.isoformat(),
        }
