from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence


@dataclass(frozen=True)
class FaceRectangle:
    top: int
    left: int
    width: int
    height: int

    @property
    def area(self) -> int:
        return max(self.width, 0) * max(self.height, 0)


@dataclass(frozen=True)
class DetectedFace:
    face_id: str
    rectangle: FaceRectangle
    emotion: Dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class IdentifyCandidate:
    person_id: str
    confidence: float


def select_primary_face(faces: Sequence[DetectedFace]) -> Optional[DetectedFace]:
    """The face with the largest rectangle; on equal areas, the earliest in the response."""
    primary: Optional[DetectedFace] = None
    for face in faces:
        if primary is None or face.rectangle.area > primary.rectangle.area:
            primary = face
    return primary
