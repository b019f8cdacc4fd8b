"""Blueprint exports."""

from . import categories, checkins, streaks

__all__ = [
    "categories",
    "checkins",
    "streaks",
]
