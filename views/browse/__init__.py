# browse package
from __future__ import annotations

from flask import Blueprint

from .helpers import init_browse_helpers

browse_bp = Blueprint("browse", __name__)

# These will be injected from app.py
_get_db = None


def init_browse_views(app, get_db):
    """
    Register browse routes via Blueprint, template helpers, and inject get_db().
    """
    global _get_db
    _get_db = get_db

    init_browse_helpers(app)

    # Import route modules (they attach routes to browse_bp)
    from . import items  # noqa: F401
    app.register_blueprint(browse_bp)


def get_db():
    """
    Route modules call this to get DB connection.
    """
    if _get_db is None:
        raise RuntimeError("browse.get_db() is not injected. Call init_browse_views(app, get_db) first.")
    return _get_db()
