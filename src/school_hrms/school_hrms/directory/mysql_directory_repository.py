from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import AccountStatus, EmploymentStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, group_rows, placeholders
from .model import Record
from .normalize import records_from_rows
from .repository import DirectoryRepository


class MySQLDirectoryRepository(DirectoryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_records(
        self,
        *,
        department: Optional[str] = None,
        position: Optional[str] = None,
        status: Optional[EmploymentStatus] = None,
    ) -> Sequence[Record]:
        clauses: list[str] = []
        params: list[object] = []
        if department:
            clauses.append("d.department_name=%s")
            params.append(department)
        if position:
            clauses.append("e.position=%s")
            params.append(position)
        if status is not None:
            clauses.append(
                "EXISTS (SELECT 1 FROM employment_details ed WHERE ed.employee_id=e.employee_id AND ed.employment_status=%s)"
            )
            params.append(status.value)

        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT e.employee_id, e.first_name, e.middle_name, e.last_name, e.suffix, e.position,
                       d.department_name AS department, u.status AS account_status
                FROM employees e
                LEFT JOIN departments d ON d.department_id = e.department_id
                LEFT JOIN users u ON u.employee_id = e.employee_id
                {where}
                ORDER BY e.created_at DESC
                """,
                tuple(params),
            )
            rows = fetchall(cur)
            if not rows:
                return []

            ids = [r["employee_id"] for r in rows]
            cur.execute(
                f"""
                SELECT employee_id, employment_status, hire_date, resignation_date, retirement_date
                FROM employment_details
                WHERE employee_id IN ({placeholders(len(ids))})
                ORDER BY updated_at DESC, employment_id DESC
                """,
                tuple(ids),
            )
            employment = group_rows(fetchall(cur), "employee_id")

            cur.execute(
                f"""
                SELECT employee_id, email, phone, messenger_name, fb_link
                FROM contact_info
                WHERE employee_id IN ({placeholders(len(ids))})
                ORDER BY updated_at DESC, contact_id DESC
                """,
                tuple(ids),
            )
            contacts = group_rows(fetchall(cur), "employee_id")

        nested = []
        for r in rows:
            nested.append(
                {
                    **r,
                    "employment": employment.get(r["employee_id"]),
                    "contact": contacts.get(r["employee_id"]),
                    "account": {"status": r.get("account_status")} if r.get("account_status") else None,
                }
            )
        return records_from_rows(nested)

    def list_departments(self) -> Sequence[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT department_name FROM departments ORDER BY department_name")
            return [r["department_name"] for r in fetchall(cur)]

    def list_positions(self) -> Sequence[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT DISTINCT position FROM employees WHERE position IS NOT NULL ORDER BY position")
            return [r["position"] for r in fetchall(cur) if r["position"]]

    def employee_exists(self, employee_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT 1 AS found FROM employees WHERE employee_id=%s", (employee_id,))
            return fetchone(cur) is not None

    def update_employment_status(self, employee_id: str, status: EmploymentStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            # Only the newest employment row is current; older rows are history.
            cur.execute(
                """
                SELECT employment_id FROM employment_details
                WHERE employee_id=%s
                ORDER BY updated_at DESC, employment_id DESC
                LIMIT 1
                """,
                (employee_id,),
            )
            current = fetchone(cur)
            if current:
                cur.execute(
                    "UPDATE employment_details SET employment_status=%s WHERE employment_id=%s",
                    (status.value, current["employment_id"]),
                )
            else:
                cur.execute(
                    "INSERT INTO employment_details(employee_id, employment_status) VALUES(%s,%s)",
                    (employee_id, status.value),
                )
            return True

    def set_account_status(self, employee_id: str, status: AccountStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT user_id FROM users WHERE employee_id=%s", (employee_id,))
            if not fetchone(cur):
                return False
            cur.execute("UPDATE users SET status=%s WHERE employee_id=%s", (status.value, employee_id))
            return True
