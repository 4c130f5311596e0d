"""
Logging setup for the attendance webhook.
"""

import logging
import logging.handlers
from pathlib import Path

_OWNED_ATTR = "_gym_attendance_handler"


def setup_logging(app, log_level="INFO", log_dir="logs", max_log_size=10 * 1024 * 1024, backup_count=5):
    """
    Configure the root logger for the Flask app.

    Args:
        app: Flask app instance
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL
        log_dir: directory for the rotating log files; None logs to console only
        max_log_size: max size of one log file (bytes)
        backup_count: rotated files to keep
    """
    level = getattr(logging, str(log_level).upper(), logging.INFO)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(lineno)d - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handlers = []

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if log_dir:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            path / "gym_attendance.log",
            maxBytes=max_log_size,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

        error_handler = logging.handlers.RotatingFileHandler(
            path / "errors.log",
            maxBytes=max_log_size,
            backupCount=backup_count,
            encoding="utf-8",
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(formatter)
        handlers.append(error_handler)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Replace only the handlers installed by a previous call
    for handler in root_logger.handlers[:]:
        if getattr(handler, _OWNED_ATTR, False):
            root_logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        setattr(handler, _OWNED_ATTR, True)
        root_logger.addHandler(handler)

    app.logger.setLevel(level)
    app.logger.info("Logging ready (level=%s, dir=%s)", logging.getLevelName(level), log_dir or "-")
