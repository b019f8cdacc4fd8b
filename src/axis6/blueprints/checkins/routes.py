"""Check-in routes."""

from __future__ import annotations

from datetime import date

from flask import abort, jsonify, request
from pydantic import ValidationError

from ...extensions import get_services
from ..identity import current_user_id
from . import bp
from .forms import parse_toggle, validation_errors


def _query_date(name: str = "date") -> date | None:
    raw = request.args.get(name, "").strip()
    if not raw:
        return None
    try:
        return date.fromisoformat(raw)
    except ValueError:
        abort(400, description=f"Invalid {name}: expected YYYY-MM-DD")


def _query_category() -> str | None:
    raw = request.args.get("categoryId", "").strip()
    return raw or None


@bp.get("")
def list_checkins():
    """Return the caller's check-ins, optionally filtered by day and category."""

    user_id = current_user_id()
    services = get_services()
    category_id = None
    raw_category = _query_category()
    if raw_category is not None:
        try:
            category_id = services.checkin_service.resolve_category(raw_category).id
        except ValueError as exc:
            abort(400, description=str(exc))

    checkins = services.checkins.list_for_user(user_id, on=_query_date(), category_id=category_id)
    return jsonify({"checkins": [checkin.to_dict() for checkin in checkins]})


@bp.post("")
def toggle_checkin():
    """Create or remove the check-in for a day and update its streak."""

    user_id = current_user_id()
    try:
        form = parse_toggle(request.get_json(silent=True))
    except ValidationError as exc:
        return jsonify({"error": "Invalid check-in", "details": validation_errors(exc)}), 400

    try:
        result = get_services().checkin_service.toggle(
            user_id,
            form.category,
            form.completed,
            on=form.on,
            mood=form.mood,
            notes=form.notes,
        )
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400

    message = (
        "Check-in completed successfully"
        if result.action == "completed"
        else "Check-in removed successfully"
    )
    return jsonify(
        {
            "message": message,
            "checkin": result.checkin.to_dict() if result.checkin else None,
            "streak": result.streak.to_dict() if result.streak else None,
        }
    )


@bp.delete("")
def delete_checkin():
    """Delete one specific check-in and update its streak."""

    user_id = current_user_id()
    category = _query_category()
    on = _query_date()
    if category is None or on is None:
        abort(400, description="Category ID and date are required")

    try:
        streak = get_services().checkin_service.remove(user_id, category, on)
    except ValueError as exc:
        abort(400, description=str(exc))
    except LookupError as exc:
        abort(404, description=str(exc))

    return jsonify(
        {
            "message": "Check-in deleted successfully",
            "streak": streak.to_dict() if streak else None,
        }
    )
