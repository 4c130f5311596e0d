from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Member:
    """Domain entity: a gym member registered both locally and in the face API person group."""

    member_id: int
    full_name: str
    person_id: str
