import os

from .config import DB_CONFIG, DEFAULT_ROOM_ID, FACE_API, LOG_DIR, MEMBER_LOCK_TIMEOUT

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
