from __future__ import annotations

from enum import Enum


class Emotion(str, Enum):
    """Emotion labels returned by the face API.

    Declaration order is the canonical order used to break score ties.
    """

    ANGER = "anger"
    CONTEMPT = "contempt"
    DISGUST = "disgust"
    FEAR = "fear"
    HAPPINESS = "happiness"
    NEUTRAL = "neutral"
    SADNESS = "sadness"
    SURPRISE = "surprise"


class AttendanceAction(str, Enum):
    """Outcome of the entry/exit toggle."""

    CHECK_IN = "entrada"
    CHECK_OUT = "salida"


class MemberState(str, Enum):
    OUTSIDE = "OUTSIDE"
    INSIDE = "INSIDE"
