from __future__ import annotations

from typing import Any, Dict, Sequence

from ..common.datetime_utils import coerce_date
from ..core.enums import FamilyMemberType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import FamilyMember, FamilyMemberFields
from .repository import FamilyRepository

_COLUMNS = (
    "id, employee_id, type, name, date_of_birth, occupation, relationship, "
    "contact_number, address, is_dependent"
)


def _to_member(row: Dict[str, Any]) -> FamilyMember:
    return FamilyMember(
        id=int(row["id"]),
        owner_id=str(row["employee_id"]),
        type=FamilyMemberType(row["type"]),
        name=row["name"],
        date_of_birth=coerce_date(row.get("date_of_birth")),
        occupation=row.get("occupation"),
        relationship=row.get("relationship"),
        contact_number=row.get("contact_number"),
        address=row.get("address"),
        is_dependent=bool(row.get("is_dependent")),
    )


def _values(fields: FamilyMemberFields) -> tuple:
    return (
        fields.type.value,
        fields.name,
        fields.date_of_birth,
        fields.occupation,
        fields.relationship,
        fields.contact_number,
        fields.address,
        1 if fields.is_dependent else 0,
    )


class MySQLFamilyRepository(FamilyRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_owner(self, owner_id: str) -> Sequence[FamilyMember]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM family_members WHERE employee_id=%s ORDER BY created_at, id",
                (owner_id,),
            )
            return [_to_member(r) for r in fetchall(cur)]

    def add(self, owner_id: str, fields: FamilyMemberFields) -> FamilyMember:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO family_members(
                    employee_id, type, name, date_of_birth, occupation, relationship,
                    contact_number, address, is_dependent
                ) VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (owner_id, *_values(fields)),
            )
            return FamilyMember.from_fields(int(cur.lastrowid), owner_id, fields)

    def update(self, owner_id: str, member_id: int, fields: FamilyMemberFields) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE family_members
                SET type=%s, name=%s, date_of_birth=%s, occupation=%s, relationship=%s,
                    contact_number=%s, address=%s, is_dependent=%s
                WHERE employee_id=%s AND id=%s
                """,
                (*_values(fields), owner_id, member_id),
            )
            return cur.rowcount > 0

    def delete(self, owner_id: str, member_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM family_members WHERE employee_id=%s AND id=%s", (owner_id, member_id))
            return cur.rowcount > 0
