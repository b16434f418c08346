from __future__ import annotations

from src.school_hrms.school_hrms.core.enums import EmploymentStatus
from src.school_hrms.school_hrms.directory.mysql_directory_repository import MySQLDirectoryRepository


class FakeCursor:
    def __init__(self, rows):
        self.rows = list(rows)
        self.executed: list[tuple[str, tuple]] = []

    def execute(self, sql, params=()):
        self.executed.append((" ".join(sql.split()), tuple(params)))

    def fetchone(self):
        return self.rows.pop(0) if self.rows else None

    def fetchall(self):
        rows, self.rows = self.rows, []
        return rows

    def close(self):
        pass


class FakeConnection:
    def __init__(self, cursor: FakeCursor):
        self._cursor = cursor
        self.committed = False

    def cursor(self, dictionary=True):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        pass

    def close(self):
        pass


class FakeConnectionFactory:
    def __init__(self, cursor: FakeCursor):
        self.conn = FakeConnection(cursor)

    def connect(self):
        return self.conn


def test_status_update_touches_only_the_newest_employment_row():
    cursor = FakeCursor([{"employment_id": 7}])
    factory = FakeConnectionFactory(cursor)

    assert MySQLDirectoryRepository(factory).update_employment_status("E1", EmploymentStatus.RETIRED)

    select_sql, select_params = cursor.executed[0]
    assert "ORDER BY updated_at DESC, employment_id DESC LIMIT 1" in select_sql
    assert select_params == ("E1",)
    assert cursor.executed[1] == (
        "UPDATE employment_details SET employment_status=%s WHERE employment_id=%s",
        ("Retired", 7),
    )
    assert factory.conn.committed


def test_status_update_inserts_when_employee_has_no_employment_row():
    cursor = FakeCursor([])
    MySQLDirectoryRepository(FakeConnectionFactory(cursor)).update_employment_status("E2", EmploymentStatus.REGULAR)

    sql, params = cursor.executed[1]
    assert sql.startswith("INSERT INTO employment_details")
    assert params == ("E2", "Regular")
