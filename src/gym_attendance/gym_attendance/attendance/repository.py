from __future__ import annotations

from typing import Callable, Protocol, Sequence

from .model import AttendanceMutation, AttendanceSession, CloseSession, CreateSession

Decide = Callable[[Sequence[AttendanceSession]], AttendanceMutation]


class AttendanceRepository(Protocol):
    def list_open_for_member(self, member_id: int) -> Sequence[AttendanceSession]:
        """Open sessions of a member, most recent entry first."""

        raise NotImplementedError

    def get_recent_for_member(self, member_id: int, limit: int) -> Sequence[AttendanceSession]:
        raise NotImplementedError

    def create_session(self, mutation: CreateSession) -> int:
        raise NotImplementedError

    def close_session(self, mutation: CloseSession) -> bool:
        """Close an open session. Returns False, changing nothing, if it was already closed."""

        raise NotImplementedError

    def apply_for_member(self, member_id: int, decide: Decide) -> AttendanceMutation:
        """Read the member's open sessions, call decide() and apply its mutation as one unit.

        Raises NotFound if the member is gone or the session closed meanwhile,
        ValidationError if a check-in names an unknown room.
        """

        raise NotImplementedError
