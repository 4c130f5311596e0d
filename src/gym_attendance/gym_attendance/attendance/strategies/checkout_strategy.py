from __future__ import annotations

from datetime import datetime
from typing import Optional

from ...core.exceptions import InvalidInput
from ...members.model import Member
from ..model import AttendanceSession, CloseSession
from .base import AttendanceStrategy


class CheckOutStrategy(AttendanceStrategy):
    """Member is inside: close the open session."""

    def build_mutation(
        self,
        *,
        member: Member,
        open_session: Optional[AttendanceSession],
        emotion: str,
        room_id: int,
        now: datetime,
    ) -> CloseSession:
        if open_session is None or not open_session.is_open:
            raise InvalidInput("No hay una sesión abierta que cerrar")
        if open_session.member_id != member.member_id:
            raise InvalidInput(
                f"La sesión {open_session.attendance_id} no pertenece al socio {member.member_id}"
            )
        return CloseSession(
            attendance_id=open_session.attendance_id,
            exit_time=now,
            exit_emotion=emotion,
        )
