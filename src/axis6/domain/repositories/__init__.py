"""Repository protocol definitions for domain layer."""

from .category import CategoryRepository
from .checkin import CheckinRepository
from .profile import ProfileRepository
from .streak import StreakRepository

__all__ = [
    "CategoryRepository",
    "CheckinRepository",
    "ProfileRepository",
    "StreakRepository",
]
