import os

from .config import DB_CONFIG, DEFAULT_ROOM_ID, FACE_API, LOG_DIR, LOG_LEVEL, MEMBER_LOCK_TIMEOUT

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
