"""Streak routes."""

from __future__ import annotations

from flask import abort, jsonify

from ...extensions import get_services
from ..identity import current_user_id
from . import bp


@bp.get("")
def list_streaks():
    """Return every streak record of the caller."""

    user_id = current_user_id()
    streaks = get_services().streaks.list_for_user(user_id)
    return jsonify({"streaks": [streak.to_dict() for streak in streaks]})


@bp.post("/<category>/recalculate")
def recalculate_streak(category: str):
    """Rebuild one streak from the caller's check-in history."""

    user_id = current_user_id()
    try:
        streak = get_services().checkin_service.recalculate(user_id, category)
    except ValueError as exc:
        abort(400, description=str(exc))
    return jsonify({"streak": streak.to_dict() if streak else None})
