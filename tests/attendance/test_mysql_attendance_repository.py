from __future__ import annotations

from datetime import datetime

import pytest

from src.gym_attendance.gym_attendance.attendance.model import CloseSession, CreateSession
from src.gym_attendance.gym_attendance.attendance.mysql_attendance_repository import MySQLAttendanceRepository
from src.gym_attendance.gym_attendance.attendance.resolver import AttendanceResolver
from src.gym_attendance.gym_attendance.core.exceptions import NotFound, ValidationError


class ScriptedCursor:
    """Answers each execute() with the next scripted (rows, rowcount, lastrowid)."""

    def __init__(self, conn):
        self._conn = conn
        self._rows = []
        self.rowcount = -1
        self.lastrowid = None

    def execute(self, sql, params=()):
        self._conn.executed.append((" ".join(sql.split()), tuple(params)))
        self._rows, self.rowcount, self.lastrowid = self._conn.replies.pop(0)

    def fetchone(self):
        return self._rows[0] if self._rows else None

    def fetchall(self):
        return list(self._rows)

    def close(self):
        pass


class ScriptedConnection:
    def __init__(self, *replies):
        self.replies = list(replies)
        self.executed: list[tuple[str, tuple]] = []
        self.commits = 0
        self.rollbacks = 0
        self.closed = False

    def cursor(self, dictionary=False):
        return ScriptedCursor(self)

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1

    def close(self):
        self.closed = True


class ScriptedFactory:
    def __init__(self, conn: ScriptedConnection):
        self.conn = conn

    def connect(self):
        return self.conn


def reply(rows=(), *, rowcount=-1, lastrowid=None):
    return list(rows), rowcount, lastrowid


def _open_row(attendance_id: int, member_id: int, entry_time: datetime) -> dict:
    return {
        "attendance_id": attendance_id,
        "member_id": member_id,
        "room_id": 1,
        "is_guest": 0,
        "entry_time": entry_time,
        "exit_time": None,
        "entry_emotion": "happiness",
        "exit_emotion": None,
    }


def _repo(*replies):
    conn = ScriptedConnection(*replies)
    return MySQLAttendanceRepository(ScriptedFactory(conn)), conn


def test_close_session_only_touches_open_rows(fixed_now):
    repo, conn = _repo(reply(rowcount=1))

    assert repo.close_session(CloseSession(attendance_id=5, exit_time=fixed_now, exit_emotion="neutral")) is True

    sql, params = conn.executed[0]
    assert sql.startswith("UPDATE attendance")
    assert "exit_time IS NULL" in sql
    assert params == (fixed_now, "neutral", 5)
    assert conn.commits == 1


def test_close_session_on_closed_row_is_a_noop(fixed_now):
    repo, conn = _repo(reply(rowcount=0))

    assert repo.close_session(CloseSession(attendance_id=5, exit_time=fixed_now, exit_emotion="neutral")) is False
    assert conn.rollbacks == 0
    assert conn.closed


def test_apply_check_in_locks_member_then_inserts(member, fixed_now):
    repo, conn = _repo(
        reply([{"member_id": member.member_id}]),
        reply([]),
        reply([{"room_id": 1}]),
        reply(rowcount=1, lastrowid=41),
    )
    seen = []

    def decide(open_sessions):
        seen.append(list(open_sessions))
        return AttendanceResolver().resolve(member, open_sessions, "happiness", 1, now=fixed_now)

    mutation = repo.apply_for_member(member.member_id, decide)

    assert isinstance(mutation, CreateSession)
    assert seen == [[]]
    statements = [sql for sql, _ in conn.executed]
    assert "FROM members" in statements[0] and statements[0].endswith("FOR UPDATE")
    assert "exit_time IS NULL" in statements[1] and statements[1].endswith("FOR UPDATE")
    assert "FROM rooms" in statements[2]
    assert statements[3].startswith("INSERT INTO attendance")
    assert conn.executed[3][1] == (member.member_id, 1, 0, fixed_now, "happiness")
    assert (conn.commits, conn.rollbacks) == (1, 0)


def test_apply_rolls_back_when_close_finds_session_already_closed(member, fixed_now):
    repo, conn = _repo(
        reply([{"member_id": member.member_id}]),
        reply([_open_row(12, member.member_id, fixed_now)]),
        reply(rowcount=0),
    )

    def decide(open_sessions):
        return AttendanceResolver().resolve(member, open_sessions, "sadness", 1, now=fixed_now)

    with pytest.raises(NotFound):
        repo.apply_for_member(member.member_id, decide)

    assert conn.executed[2][1] == (fixed_now, "sadness", 12)
    assert (conn.commits, conn.rollbacks) == (0, 1)
    assert conn.closed


def test_apply_for_missing_member_never_decides(member):
    repo, conn = _repo(reply([]))

    def decide(open_sessions):
        raise AssertionError("decide must not run")

    with pytest.raises(NotFound):
        repo.apply_for_member(member.member_id, decide)

    assert len(conn.executed) == 1
    assert conn.rollbacks == 1


def test_apply_check_in_to_unknown_room_is_rejected(member, fixed_now):
    repo, conn = _repo(
        reply([{"member_id": member.member_id}]),
        reply([]),
        reply([]),
    )

    def decide(open_sessions):
        return AttendanceResolver().resolve(member, open_sessions, "neutral", 99, now=fixed_now)

    with pytest.raises(ValidationError):
        repo.apply_for_member(member.member_id, decide)

    assert conn.executed[2][1] == (99,)
    assert not any(sql.startswith("INSERT") for sql, _ in conn.executed)
    assert (conn.commits, conn.rollbacks) == (0, 1)
