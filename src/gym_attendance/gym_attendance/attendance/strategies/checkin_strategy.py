from __future__ import annotations

from datetime import datetime
from typing import Optional

from ...members.model import Member
from ..model import AttendanceSession, CreateSession
from .base import AttendanceStrategy


class CheckInStrategy(AttendanceStrategy):
    """Member is outside: open a session in the given room."""

    def build_mutation(
        self,
        *,
        member: Member,
        open_session: Optional[AttendanceSession],
        emotion: str,
        room_id: int,
        now: datetime,
    ) -> CreateSession:
        return CreateSession(
            member_id=member.member_id,
            room_id=int(room_id),
            entry_time=now,
            entry_emotion=emotion,
            is_guest=False,
        )
