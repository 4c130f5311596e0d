from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import MemberState
from .model import AttendanceSession
from .strategies.base import AttendanceStrategy
from .strategies.checkin_strategy import CheckInStrategy
from .strategies.checkout_strategy import CheckOutStrategy


def state_of(open_session: Optional[AttendanceSession]) -> MemberState:
    return MemberState.INSIDE if open_session is not None else MemberState.OUTSIDE


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose the strategy from the member's current state."""

    def for_state(self, state: MemberState) -> AttendanceStrategy:
        if state is MemberState.INSIDE:
            return CheckOutStrategy()
        return CheckInStrategy()

    def for_open_session(self, open_session: Optional[AttendanceSession]) -> AttendanceStrategy:
        return self.for_state(state_of(open_session))
