"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_ROOM_ID = 1
DEFAULT_CONFIDENCE_THRESHOLD = 0.65
DEFAULT_PERSON_GROUP_ID = "facegym"
DEFAULT_RECOGNITION_MODEL = "recognition_04"
# Emotion attributes are only returned by detection_01.
DEFAULT_DETECTION_MODEL = "detection_01"
DEFAULT_HTTP_TIMEOUT_SECONDS = 10.0
DEFAULT_LOCK_TIMEOUT_SECONDS = 10.0
DEFAULT_HISTORY_LIMIT = 15
MAX_HISTORY_LIMIT = 200
