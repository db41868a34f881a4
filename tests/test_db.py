import pytest

from db import DBWrapper, _fix_placeholders, current_env, db_url_for_env


def test_qmark_placeholders_are_converted():
    assert _fix_placeholders("SELECT * FROM t WHERE a = ? AND b = ?", [1, 2]) == (
        "SELECT * FROM t WHERE a = %s AND b = %s"
    )


def test_placeholder_mismatch_raises():
    with pytest.raises(ValueError, match="placeholder mismatch"):
        _fix_placeholders("SELECT * FROM t WHERE a = %s", [])


def test_wrapper_executes_on_a_new_cursor():
    class Cur:
        def execute(self, sql, params):
            self.sql, self.params = sql, params

    class Conn:
        def cursor(self):
            return Cur()

    cur = DBWrapper(Conn()).execute("SELECT ?", [1])
    assert (cur.sql, cur.params) == ("SELECT %s", [1])


@pytest.mark.parametrize("value, expected", [("prod", "production"), ("local", "development"), ("Staging", "staging")])
def test_current_env(monkeypatch, value, expected):
    monkeypatch.setenv("APP_ENV", value)
    assert current_env() == expected


def test_db_url_per_env(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://main")
    monkeypatch.setenv("DATABASE_URL_STAGING", "postgresql://staging")
    monkeypatch.delenv("DATABASE_URL_DEV", raising=False)
    assert db_url_for_env("staging") == "postgresql://staging"
    assert db_url_for_env("development") == "postgresql://main"


def test_missing_db_url(monkeypatch):
    for key in ("DATABASE_URL", "DATABASE_URL_DEV"):
        monkeypatch.delenv(key, raising=False)
    with pytest.raises(RuntimeError):
        db_url_for_env("production")
