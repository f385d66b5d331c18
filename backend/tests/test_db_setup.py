import pytest

from app.models import ActivityStatus, CaseCategory, ServiceCategory
from db import setup as db_setup


class FakeCursor:
    def __init__(self):
        self.executed = []

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, sql):
        self.executed.append(sql)

    def fetchall(self):
        return [("cases",), ("time_entries",)]


class FakeConnection:
    def __init__(self):
        self.autocommit = False
        self.closed = False
        self.cur = FakeCursor()

    def cursor(self):
        return self.cur

    def close(self):
        self.closed = True


@pytest.fixture
def schema_sql():
    return db_setup.SCHEMA_FILE.read_text()


class TestRunSchema:

    def test_applies_schema(self, monkeypatch, schema_sql):
        conn = FakeConnection()
        monkeypatch.setattr(db_setup.psycopg2, "connect", lambda url: conn)

        tables = db_setup.run_schema("postgresql://example/db")

        assert tables == ["cases", "time_entries"]
        assert conn.autocommit is True
        assert conn.closed
        assert conn.cur.executed[0] == schema_sql


class TestSchemaMatchesEnums:

    @pytest.mark.parametrize(
        "values",
        [
            [c.value for c in CaseCategory],
            [s.value for s in ServiceCategory],
            [s.value for s in ActivityStatus],
        ],
    )
    def test_check_constraints_list_every_value(self, schema_sql, values):
        for value in values:
            assert f"'{value}'" in schema_sql
