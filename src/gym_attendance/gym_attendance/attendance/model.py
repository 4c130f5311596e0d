from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union

from ..core.enums import AttendanceAction


@dataclass(frozen=True)
class AttendanceSession:
    """Domain entity: one visit of a member. No exit time means the member is inside."""

    attendance_id: int
    member_id: Optional[int]
    room_id: int
    entry_time: datetime
    exit_time: Optional[datetime] = None
    entry_emotion: Optional[str] = None
    exit_emotion: Optional[str] = None
    is_guest: bool = False

    @property
    def is_open(self) -> bool:
        return self.exit_time is None


@dataclass(frozen=True)
class CreateSession:
    """Check-in: open a new session."""

    member_id: int
    room_id: int
    entry_time: datetime
    entry_emotion: str
    is_guest: bool = False

    @property
    def action(self) -> AttendanceAction:
        return AttendanceAction.CHECK_IN


@dataclass(frozen=True)
class CloseSession:
    """Check-out: set exit time and exit emotion on an open session."""

    attendance_id: int
    exit_time: datetime
    exit_emotion: str

    @property
    def action(self) -> AttendanceAction:
        return AttendanceAction.CHECK_OUT


AttendanceMutation = Union[CreateSession, CloseSession]
