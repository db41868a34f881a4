import pytest


class FakeCursor:
    def __init__(self, rows):
        self.rows = rows

    def fetchall(self):
        return list(self.rows)

    def fetchone(self):
        return self.rows[0] if self.rows else None


class FakeDB:
    """Records executed SQL; returns item rows or a COUNT row."""

    def __init__(self, rows=None, total=None):
        self.rows = rows or []
        self.total = total
        self.calls = []

    def execute(self, sql, params=None):
        self.calls.append((sql, params))
        if "COUNT(*)" in sql:
            cnt = len(self.rows) if self.total is None else self.total
            return FakeCursor([{"cnt": cnt}])
        return FakeCursor(self.rows)

    def list_call(self):
        """(sql, params) of the item list query."""
        return next(c for c in self.calls if "ORDER BY" in c[0])


@pytest.fixture
def fake_db():
    return FakeDB(
        rows=[
            {
                "id": 1,
                "code": "10001",
                "name": "Soy <sauce>",
                "unit": "bottle",
                "supplier_name": "Kikko",
                "updated_at": None,
                "notes": None,
            },
        ]
    )


@pytest.fixture
def app(fake_db, monkeypatch):
    monkeypatch.setenv("LABEL_LANG", "en")
    from app import create_app

    return create_app(get_db_func=lambda: fake_db, config={"TESTING": True})


@pytest.fixture
def client(app):
    return app.test_client()
