import os


def _float(name: str, default: str) -> float:
    return float(os.getenv(name, default))


class Config:
    # Database
    DB_USER = os.environ.get("DB_USER", "root")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "")
    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = int(os.environ.get("DB_PORT", "3306"))
    DB_NAME = os.environ.get("DB_NAME", "gym_attendance")
    DB_CONNECT_TIMEOUT = int(os.environ.get("DB_CONNECT_TIMEOUT", "10"))

    # Face API
    FACE_API_ENDPOINT = os.environ.get("FACE_API_ENDPOINT", "")
    FACE_API_KEY = os.environ.get("FACE_API_KEY", "")
    FACE_PERSON_GROUP_ID = os.environ.get("FACE_PERSON_GROUP_ID", "facegym")
    FACE_CONFIDENCE_THRESHOLD = _float("FACE_CONFIDENCE_THRESHOLD", "0.65")
    FACE_RECOGNITION_MODEL = os.environ.get("FACE_RECOGNITION_MODEL", "recognition_04")
    FACE_DETECTION_MODEL = os.environ.get("FACE_DETECTION_MODEL", "detection_01")
    FACE_API_TIMEOUT = _float("FACE_API_TIMEOUT", "10")

    DEFAULT_ROOM_ID = int(os.environ.get("DEFAULT_ROOM_ID", "1"))
    MEMBER_LOCK_TIMEOUT = _float("MEMBER_LOCK_TIMEOUT", "10")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    LOG_DIR = os.environ.get("LOG_DIR", "logs")


DB_CONFIG = {
    "host": Config.DB_HOST,
    "port": Config.DB_PORT,
    "user": Config.DB_USER,
    "password": Config.DB_PASSWORD,
    "database": Config.DB_NAME,
    "connect_timeout": Config.DB_CONNECT_TIMEOUT,
}

FACE_API = {
    "endpoint": Config.FACE_API_ENDPOINT,
    "key": Config.FACE_API_KEY,
    "person_group_id": Config.FACE_PERSON_GROUP_ID,
    "confidence_threshold": Config.FACE_CONFIDENCE_THRESHOLD,
    "recognition_model": Config.FACE_RECOGNITION_MODEL,
    "detection_model": Config.FACE_DETECTION_MODEL,
    "timeout": Config.FACE_API_TIMEOUT,
}

DEFAULT_ROOM_ID = Config.DEFAULT_ROOM_ID
MEMBER_LOCK_TIMEOUT = Config.MEMBER_LOCK_TIMEOUT
LOG_LEVEL = Config.LOG_LEVEL
LOG_DIR = Config.LOG_DIR
