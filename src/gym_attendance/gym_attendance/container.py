from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.resolver import AttendanceResolver
from .attendance.service import AttendanceService
from .checkin.service import FaceCheckinService
from .common.locks import MemberLocks
from .core.constants import DEFAULT_LOCK_TIMEOUT_SECONDS, DEFAULT_ROOM_ID
from .database.connection import DBConfig, DatabaseConnection
from .members.mysql_member_repository import MySQLMemberRepository
from .members.repository import MemberRepository
from .recognition.client import AzureFaceClient, FaceApiConfig, FaceRecognizer


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    members_repo: MemberRepository
    attendance_repo: AttendanceRepository
    recognizer: FaceRecognizer

    attendance_service: AttendanceService
    checkin_service: FaceCheckinService


def wire_services(
    *,
    members_repo: MemberRepository,
    attendance_repo: AttendanceRepository,
    recognizer: FaceRecognizer,
    conn: Optional[DatabaseConnection] = None,
    default_room_id: int = DEFAULT_ROOM_ID,
    lock_timeout: float = DEFAULT_LOCK_TIMEOUT_SECONDS,
) -> Container:
    attendance_service = AttendanceService(
        attendance_repo,
        locks=MemberLocks(timeout=lock_timeout),
        resolver=AttendanceResolver(),
        default_room_id=default_room_id,
    )
    checkin_service = FaceCheckinService(recognizer, members_repo, attendance_service)

    return Container(
        conn=conn,
        members_repo=members_repo,
        attendance_repo=attendance_repo,
        recognizer=recognizer,
        attendance_service=attendance_service,
        checkin_service=checkin_service,
    )


def build_container(
    *,
    db_config: dict,
    face_api: dict,
    default_room_id: int = DEFAULT_ROOM_ID,
    lock_timeout: float = DEFAULT_LOCK_TIMEOUT_SECONDS,
) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
        connect_timeout=int(db_config.get("connect_timeout", 10)),
    )
    conn = DatabaseConnection.get_instance(config)

    recognizer = AzureFaceClient(FaceApiConfig(**face_api))

    return wire_services(
        members_repo=MySQLMemberRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        recognizer=recognizer,
        conn=conn,
        default_room_id=default_room_id,
        lock_timeout=lock_timeout,
    )
