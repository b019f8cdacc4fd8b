"""Service module exports."""

from . import checkins, streaks

__all__ = [
    "checkins",
    "streaks",
]
