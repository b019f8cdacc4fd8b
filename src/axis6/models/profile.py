"""Profile model standing in for the identity provider's user."""

from __future__ import annotations

from datetime import datetime, timezone as dt_timezone
from typing import ClassVar

from sqlmodel import Field, SQLModel


class Profile(SQLModel, table=True):
    """An account owner whose check-ins and streaks are tracked."""

    __tablename__: ClassVar[str] = "axis6_profiles"

    id: str = Field(primary_key=True, max_length=64)
    name: str = Field(default="", max_length=120)
    timezone: str = Field(default="America/Sao_Paulo", max_length=64)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(dt_timezone.utc),
        nullable=False,
    )
