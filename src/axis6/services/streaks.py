"""Streak arithmetic for daily check-ins."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, timedelta
from typing import Iterable, Optional

ONE_DAY = timedelta(days=1)


@dataclass(frozen=True)
class StreakState:
    """Snapshot of a streak record, detached from storage."""

    current: int = 0
    longest: int = 0
    last_checkin_date: Optional[date] = None


def advance_streak(
    state: Optional[StreakState], *, completed: bool, on: date
) -> Optional[StreakState]:
    """Return the state after a check-in toggle, or None when nothing changes.

    ``state`` is None when the (user, category) pair has no record yet.
    Completing the day after ``last_checkin_date`` continues the run; any later
    day starts a new run at 1. Completing a day at or before
    ``last_checkin_date`` leaves the state as is, which makes repeated toggles
    for the same day idempotent. Un-marking zeroes ``current`` and keeps both
    ``longest`` and ``last_checkin_date``.
    """

    if state is None:
        if not completed:
            return None
        return StreakState(current=1, longest=1, last_checkin_date=on)

    if not completed:
        return replace(state, current=0)

    last = state.last_checkin_date
    if last is None or on == last + ONE_DAY:
        current, last = state.current + 1, on
    elif on > last:
        current, last = 1, on
    else:
        current = state.current

    return StreakState(
        current=current,
        longest=max(state.longest, current),
        last_checkin_date=last,
    )


def compute_streaks(days: Iterable[date]) -> tuple[int, int, Optional[date]]:
    """Return (current, longest, last_day) for a collection of completed days.

    ``current`` is the run ending at the most recent day, not at today: a
    streak stays visible until the user un-marks it.
    """

    ordered = sorted(set(days))
    if not ordered:
        return 0, 0, None

    longest = 0
    run = 0
    previous: date | None = None
    for day in ordered:
        if previous is not None and day == previous + ONE_DAY:
            run += 1
        else:
            run = 1
        longest = max(longest, run)
        previous = day

    return run, longest, ordered[-1]


def rebuild_state(existing: Optional[StreakState], days: Iterable[date]) -> StreakState:
    """Recompute a streak from check-in history without erasing its record."""

    current, longest, last_day = compute_streaks(days)
    if existing is not None:
        longest = max(existing.longest, longest)
        if last_day is None:
            last_day = existing.last_checkin_date
    return StreakState(current=current, longest=longest, last_checkin_date=last_day)


__all__ = ["StreakState", "advance_streak", "compute_streaks", "rebuild_state", "ONE_DAY"]
