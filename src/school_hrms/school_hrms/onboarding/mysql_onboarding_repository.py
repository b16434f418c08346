from __future__ import annotations

import json
from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import Candidate, EmployeeInfo
from .repository import OnboardingRepository


class MySQLOnboardingRepository(OnboardingRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_candidate(self, candidate_id: str) -> Optional[Candidate]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT candidate_id, full_name, email FROM candidates WHERE candidate_id=%s",
                (candidate_id,),
            )
            row = fetchone(cur)
            if not row:
                return None
            return Candidate(candidate_id=str(row["candidate_id"]), full_name=row["full_name"], email=row.get("email"))

    def get_submission(self, candidate_id: str) -> Optional[EmployeeInfo]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT payload FROM employee_info_submissions WHERE candidate_id=%s", (candidate_id,))
            row = fetchone(cur)
            if not row:
                return None
            payload = row["payload"]
            if isinstance(payload, (bytes, bytearray)):
                payload = payload.decode("utf-8")
            return EmployeeInfo.from_dict(json.loads(payload) if isinstance(payload, str) else payload)

    def save_submission(self, candidate_id: str, info: EmployeeInfo) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO employee_info_submissions(candidate_id, payload) VALUES(%s,%s)",
                (candidate_id, json.dumps(info.to_dict())),
            )
