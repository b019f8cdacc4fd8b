"""JSON error handlers shared by every blueprint."""

from __future__ import annotations

from flask import Flask, jsonify
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from ..infra.repositories import StreakConflictError
from ..logging_config import get_logger

logger = get_logger("api")


def register_error_handlers(app: Flask) -> None:
    """Translate exceptions into ``{"error": ...}`` responses."""

    @app.errorhandler(HTTPException)
    def _http_error(exc: HTTPException):
        return jsonify({"error": exc.description}), exc.code

    @app.errorhandler(StreakConflictError)
    def _conflict(exc: StreakConflictError):
        logger.warning("Streak update gave up after concurrent writes", exc_info=exc)
        return jsonify({"error": "Streak is being updated, please retry"}), 409

    @app.errorhandler(SQLAlchemyError)
    def _storage_error(exc: SQLAlchemyError):
        logger.error("Storage failure", exc_info=exc)
        return jsonify({"error": "Internal server error"}), 500
