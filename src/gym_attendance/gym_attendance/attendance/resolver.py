from __future__ import annotations

import logging
import warnings
from datetime import datetime
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.exceptions import DataIntegrityWarning, InvalidInput
from ..members.model import Member
from .factory import AttendanceStrategyFactory
from .model import AttendanceMutation, AttendanceSession

logger = logging.getLogger(__name__)


class AttendanceResolver:
    """Entry/exit toggle for a recognized member.

    The member's state is whatever the attendance store says: no open session
    means outside (next passage is a check-in), one open session means inside
    (next passage is a check-out). Nothing is kept between calls.
    """

    def __init__(
        self,
        *,
        strategy_factory: AttendanceStrategyFactory | None = None,
        clock: Callable[[], datetime] = now_local,
    ):
        self._factory = strategy_factory or AttendanceStrategyFactory()
        self._clock = clock

    def select_open_session(self, open_sessions: Sequence[AttendanceSession]) -> Optional[AttendanceSession]:
        """Pick the session to close among the member's open ones.

        More than one open session breaks the store invariant. The most recently
        opened one wins (then the highest id) and a DataIntegrityWarning is issued.
        """
        candidates = [s for s in open_sessions if s.is_open]
        if not candidates:
            return None
        chosen = max(candidates, key=lambda s: (s.entry_time, s.attendance_id))
        if len(candidates) > 1:
            ids = sorted(s.attendance_id for s in candidates)
            message = (
                f"Socio {chosen.member_id} tiene {len(candidates)} sesiones abiertas {ids}; "
                f"se cierra la sesión {chosen.attendance_id}"
            )
            logger.warning(message)
            warnings.warn(message, DataIntegrityWarning, stacklevel=2)
        return chosen

    def resolve_action(
        self,
        member: Member,
        open_session: Optional[AttendanceSession],
        emotion: str,
        default_room: int,
        *,
        now: datetime | None = None,
    ) -> AttendanceMutation:
        if not emotion or not emotion.strip():
            raise InvalidInput("La emoción dominante es obligatoria")
        if open_session is not None and not open_session.is_open:
            raise InvalidInput(f"La sesión {open_session.attendance_id} ya está cerrada")

        now = now or self._clock()
        strategy = self._factory.for_open_session(open_session)
        return strategy.build_mutation(
            member=member,
            open_session=open_session,
            emotion=emotion.strip(),
            room_id=default_room,
            now=now,
        )

    def resolve(
        self,
        member: Member,
        open_sessions: Sequence[AttendanceSession],
        emotion: str,
        default_room: int,
        *,
        now: datetime | None = None,
    ) -> AttendanceMutation:
        """Resolve against every open session the store returned for the member."""
        open_session = self.select_open_session(open_sessions)
        return self.resolve_action(member, open_session, emotion, default_room, now=now)
