from __future__ import annotations

from typing import Any, Dict, Sequence

from ..core.exceptions import NotFound, ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceMutation, AttendanceSession, CloseSession, CreateSession
from .repository import AttendanceRepository, Decide

_SESSION_COLUMNS = (
    "attendance_id, member_id, room_id, is_guest, entry_time, exit_time, entry_emotion, exit_emotion"
)


def _to_session(r: Dict[str, Any]) -> AttendanceSession:
    return AttendanceSession(
        attendance_id=int(r["attendance_id"]),
        member_id=int(r["member_id"]) if r.get("member_id") is not None else None,
        room_id=int(r["room_id"]),
        entry_time=r["entry_time"],
        exit_time=r.get("exit_time"),
        entry_emotion=r.get("entry_emotion"),
        exit_emotion=r.get("exit_emotion"),
        is_guest=bool(r.get("is_guest", False)),
    )


def _select_open(cur, member_id: int, *, for_update: bool = False) -> Sequence[AttendanceSession]:
    cur.execute(
        f"""
        SELECT {_SESSION_COLUMNS}
        FROM attendance
        WHERE member_id=%s AND exit_time IS NULL
        ORDER BY entry_time DESC, attendance_id DESC
        {"FOR UPDATE" if for_update else ""}
        """,
        (int(member_id),),
    )
    return [_to_session(r) for r in fetchall(cur)]


def _insert(cur, m: CreateSession) -> int:
    cur.execute(
        """
        INSERT INTO attendance(member_id, room_id, is_guest, entry_time, entry_emotion)
        VALUES(%s,%s,%s,%s,%s)
        """,
        (m.member_id, m.room_id, int(m.is_guest), m.entry_time, m.entry_emotion),
    )
    return int(cur.lastrowid)


def _close(cur, m: CloseSession) -> bool:
    cur.execute(
        """
        UPDATE attendance
        SET exit_time=%s, exit_emotion=%s
        WHERE attendance_id=%s AND exit_time IS NULL
        """,
        (m.exit_time, m.exit_emotion, m.attendance_id),
    )
    return cur.rowcount > 0


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_open_for_member(self, member_id: int) -> Sequence[AttendanceSession]:
        with db_cursor(self._conn_factory) as (_, cur):
            return _select_open(cur, member_id)

    def get_recent_for_member(self, member_id: int, limit: int) -> Sequence[AttendanceSession]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_SESSION_COLUMNS}
                FROM attendance
                WHERE member_id=%s
                ORDER BY entry_time DESC, attendance_id DESC
                LIMIT %s
                """,
                (int(member_id), int(limit)),
            )
            return [_to_session(r) for r in fetchall(cur)]

    def create_session(self, mutation: CreateSession) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            return _insert(cur, mutation)

    def close_session(self, mutation: CloseSession) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            return _close(cur, mutation)

    def apply_for_member(self, member_id: int, decide: Decide) -> AttendanceMutation:
        # Locking the member row serializes toggles even before any attendance row exists.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT member_id FROM members WHERE member_id=%s FOR UPDATE", (int(member_id),))
            if not fetchone(cur):
                raise NotFound(f"Socio {member_id} no existe")

            mutation = decide(_select_open(cur, member_id, for_update=True))
            if isinstance(mutation, CreateSession):
                cur.execute("SELECT room_id FROM rooms WHERE room_id=%s", (int(mutation.room_id),))
                if not fetchone(cur):
                    raise ValidationError(f"sala_id {mutation.room_id} no existe")
                _insert(cur, mutation)
            elif not _close(cur, mutation):
                raise NotFound(f"La sesión {mutation.attendance_id} ya no está abierta")
            return mutation
