"""Concrete repository implementations using SQLModel."""

from .category import SQLModelCategoryRepository
from .checkin import SQLModelCheckinRepository
from .profile import SQLModelProfileRepository
from .streak import SQLModelStreakRepository, StreakConflictError

__all__ = [
    "SQLModelCategoryRepository",
    "SQLModelCheckinRepository",
    "SQLModelProfileRepository",
    "SQLModelStreakRepository",
    "StreakConflictError",
]
