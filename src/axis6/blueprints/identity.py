"""Caller identity for JSON endpoints."""

from __future__ import annotations

from flask import abort, request

USER_HEADER = "X-User-Id"


def current_user_id() -> str:
    """Return the caller's user id taken from the request header.

    Authentication happens upstream; a missing header means the request never
    went through it.
    """

    user_id = request.headers.get(USER_HEADER, "").strip()
    if not user_id:
        abort(401, description="Unauthorized")
    return user_id
