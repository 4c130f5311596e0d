from __future__ import annotations

from itertools import permutations

import pytest

from src.gym_attendance.gym_attendance.core.exceptions import InvalidInput
from src.gym_attendance.gym_attendance.emotions.extractor import CANONICAL_ORDER, dominant_emotion


def test_highest_score_wins():
    assert dominant_emotion({"happiness": 0.82, "neutral": 0.1, "sadness": 0.08}) == "happiness"


def test_full_vendor_payload():
    scores = {
        "anger": 0.0,
        "contempt": 0.001,
        "disgust": 0.0,
        "fear": 0.0,
        "happiness": 0.004,
        "neutral": 0.981,
        "sadness": 0.014,
        "surprise": 0.0,
    }
    assert dominant_emotion(scores) == "neutral"


def test_tie_uses_canonical_order_regardless_of_key_order():
    items = [("surprise", 0.5), ("happiness", 0.5), ("neutral", 0.0)]
    results = {dominant_emotion(dict(p)) for p in permutations(items)}
    assert results == {"happiness"}


def test_all_zero_scores_pick_first_canonical_label():
    scores = {label: 0.0 for label in reversed(CANONICAL_ORDER)}
    assert dominant_emotion(scores) == "anger"


def test_unknown_labels_rank_after_known_ones_on_tie():
    assert dominant_emotion({"zeal": 0.4, "awe": 0.4, "surprise": 0.4}) == "surprise"
    assert dominant_emotion({"zeal": 0.4, "awe": 0.4}) == "awe"


def test_single_entry():
    assert dominant_emotion({"fear": 0.3}) == "fear"


def test_repeated_calls_are_stable():
    scores = {"sadness": 0.33, "anger": 0.33, "fear": 0.34}
    assert {dominant_emotion(scores) for _ in range(20)} == {"fear"}


def test_empty_mapping_rejected():
    with pytest.raises(InvalidInput):
        dominant_emotion({})


@pytest.mark.parametrize("bad", ["0.5", None, float("nan"), True])
def test_non_numeric_scores_rejected(bad):
    with pytest.raises(InvalidInput):
        dominant_emotion({"happiness": bad, "neutral": 0.1})
