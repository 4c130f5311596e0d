from __future__ import annotations

from typing import Any, Dict, Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import Member
from .repository import MemberRepository


def _to_member(row: Dict[str, Any]) -> Member:
    return Member(
        member_id=int(row["member_id"]),
        full_name=row["full_name"],
        person_id=str(row["person_id"]),
    )


class MySQLMemberRepository(MemberRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_person_id(self, person_id: str) -> Optional[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT member_id, full_name, person_id
                FROM members
                WHERE person_id=%s
                """,
                (str(person_id),),
            )
            row = fetchone(cur)
            return _to_member(row) if row else None

    def get_by_id(self, member_id: int) -> Optional[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT member_id, full_name, person_id FROM members WHERE member_id=%s",
                (int(member_id),),
            )
            row = fetchone(cur)
            return _to_member(row) if row else None
