import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "gym_attendance_test"),
    "connect_timeout": 5,
}

FACE_API = {
    "endpoint": "https://face.test.invalid",
    "key": "test-key",
    "person_group_id": "facegym-test",
    "confidence_threshold": 0.65,
    "timeout": 2.0,
}

DEFAULT_ROOM_ID = 1
MEMBER_LOCK_TIMEOUT = 1.0

LOG_LEVEL = "DEBUG"
LOG_DIR = None

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
