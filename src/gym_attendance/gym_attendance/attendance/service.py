from __future__ import annotations

import logging
from datetime import datetime

from ..common.datetime_utils import format_timestamp
from ..common.locks import MemberLocks
from ..core.constants import DEFAULT_HISTORY_LIMIT, MAX_HISTORY_LIMIT
from ..core.exceptions import ValidationError
from ..members.model import Member
from .model import AttendanceMutation, AttendanceSession, CreateSession
from .repository import AttendanceRepository
from .resolver import AttendanceResolver

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        locks: MemberLocks,
        resolver: AttendanceResolver | None = None,
        default_room_id: int = 1,
    ):
        self._attendance = attendance
        self._locks = locks
        self._resolver = resolver or AttendanceResolver()
        self._default_room_id = int(default_room_id)

    def register_passage(
        self,
        member: Member,
        emotion: str,
        *,
        room_id: int | None = None,
        now: datetime | None = None,
    ) -> AttendanceMutation:
        """Toggle the member between inside and outside and persist the change."""
        room = int(room_id) if room_id is not None else self._default_room_id

        def decide(open_sessions) -> AttendanceMutation:
            return self._resolver.resolve(member, open_sessions, emotion, room, now=now)

        with self._locks.hold(member.member_id):
            mutation = self._attendance.apply_for_member(member.member_id, decide)

        if isinstance(mutation, CreateSession):
            logger.info("Check-in socio=%s sala=%s emocion=%s", member.member_id, mutation.room_id, emotion)
        else:
            logger.info("Check-out socio=%s sesion=%s emocion=%s", member.member_id, mutation.attendance_id, emotion)
        return mutation

    def get_history(self, member_id: int, *, limit: int = DEFAULT_HISTORY_LIMIT) -> list[dict]:
        if not 1 <= int(limit) <= MAX_HISTORY_LIMIT:
            raise ValidationError(f"limit debe estar entre 1 y {MAX_HISTORY_LIMIT}")
        rows = self._attendance.get_recent_for_member(member_id, int(limit))
        return [self._to_dict(r) for r in rows]

    def _to_dict(self, s: AttendanceSession) -> dict:
        return {
            "asistenciaId": s.attendance_id,
            "salaId": s.room_id,
            "esInvitado": s.is_guest,
            "fechaEntrada": format_timestamp(s.entry_time),
            "fechaSalida": format_timestamp(s.exit_time),
            "emocionEntrada": s.entry_emotion,
            "emocionSalida": s.exit_emotion,
            "dentro": s.is_open,
        }
