"""Category routes."""

from __future__ import annotations

from flask import jsonify

from ...extensions import get_services
from . import bp


@bp.get("")
def list_categories():
    """Return the six axes in display order."""

    categories = get_services().categories.list_all()
    return jsonify({"categories": [category.to_dict() for category in categories]})
