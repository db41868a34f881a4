import logging
import os

import psycopg2
import psycopg2.extras
from flask import g

log = logging.getLogger(__name__)


def _fix_placeholders(sql: str, params) -> str:
    """
    "?" (sqlite style) -> "%s" and check the count against params.
    Literal % in browse SQL must be written as %% already.
    """
    fixed_sql = sql.replace("?", "%s")

    try:
        param_count = len(params)
    except TypeError:
        # unsized params (rare): let psycopg2 complain
        return fixed_sql

    placeholder_count = fixed_sql.count("%s")
    if placeholder_count != param_count:
        raise ValueError(
            f"SQL placeholder mismatch: %s={placeholder_count}, params={param_count}\n"
            f"SQL: {fixed_sql}\n"
            f"params: {params}"
        )
    return fixed_sql


class DBWrapper:
    """Thin connection wrapper so views can call db.execute(...).fetchall()."""

    def __init__(self, conn):
        self.conn = conn

    def execute(self, sql, params=None):
        if params is None:
            params = []
        cur = self.conn.cursor()
        cur.execute(_fix_placeholders(sql, params), params)
        return cur

    def __getattr__(self, name):
        return getattr(self.conn, name)


def current_env() -> str:
    """
    APP_ENV, then FLASK_ENV, default production.
    prod/dev/local aliases are folded; other names (staging...) pass through.
    """
    env = (os.environ.get("APP_ENV") or os.environ.get("FLASK_ENV") or "production").strip().lower()
    if env in ("prod", "production"):
        return "production"
    if env in ("dev", "development", "local"):
        return "development"
    return env


def db_url_for_env(env: str) -> str:
    if env == "production":
        url = os.environ.get("DATABASE_URL")
    elif env == "development":
        url = os.environ.get("DATABASE_URL_DEV") or os.environ.get("DATABASE_URL")
    else:
        url = os.environ.get(f"DATABASE_URL_{env.upper()}") or os.environ.get("DATABASE_URL")

    if not url:
        raise RuntimeError(
            "No database URL found. Set DATABASE_URL (and optionally DATABASE_URL_DEV / DATABASE_URL_<ENV>)."
        )
    return url


def get_db():
    """One connection per request, kept on flask.g."""
    if "db" not in g:
        env = current_env()
        log.debug("opening database connection (env=%s)", env)
        conn = psycopg2.connect(
            db_url_for_env(env),
            cursor_factory=psycopg2.extras.RealDictCursor,
        )
        g.db = DBWrapper(conn)

    return g.db


def close_db(e=None):
    db = g.pop("db", None)
    if db is not None:
        db.conn.close()
