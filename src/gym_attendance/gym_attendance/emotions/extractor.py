from __future__ import annotations

import math
from numbers import Real
from typing import Mapping, Tuple

from ..core.enums import Emotion
from ..core.exceptions import InvalidInput

CANONICAL_ORDER: Tuple[str, ...] = tuple(e.value for e in Emotion)
_RANK = {label: i for i, label in enumerate(CANONICAL_ORDER)}


def _canonical_key(label: str) -> Tuple[int, str]:
    # Labels outside the known set go after every known label, alphabetically.
    return (_RANK.get(label, len(CANONICAL_ORDER)), label)


def dominant_emotion(scores: Mapping[str, float]) -> str:
    """Return the label with the highest score.

    Ties go to the label that comes first in the canonical emotion order, so the
    result does not depend on the key order of the vendor response.
    """
    if not scores:
        raise InvalidInput("El mapa de emociones está vacío")

    for label, score in scores.items():
        if not isinstance(score, Real) or isinstance(score, bool):
            raise InvalidInput(f"Puntuación no numérica para la emoción {label!r}")
        if math.isnan(score):
            raise InvalidInput(f"Puntuación NaN para la emoción {label!r}")

    best_score = max(scores.values())
    winners = [label for label, score in scores.items() if score == best_score]
    return min(winners, key=_canonical_key)
