from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from ...members.model import Member
from ..model import AttendanceMutation, AttendanceSession


class AttendanceStrategy(ABC):
    """Strategy Pattern: encapsulate how a passage turns into a record mutation."""

    @abstractmethod
    def build_mutation(
        self,
        *,
        member: Member,
        open_session: Optional[AttendanceSession],
        emotion: str,
        room_id: int,
        now: datetime,
    ) -> AttendanceMutation:
        raise NotImplementedError
