from __future__ import annotations

from typing import Optional, Protocol

from .model import Member


class MemberRepository(Protocol):
    """Lookup of local members by the face API person id."""

    def get_by_person_id(self, person_id: str) -> Optional[Member]:
        raise NotImplementedError

    def get_by_id(self, member_id: int) -> Optional[Member]:
        raise NotImplementedError
