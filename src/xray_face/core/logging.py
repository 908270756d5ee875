"""Logging configuration and utilities."""

import logging
import sys
from pathlib import Path

APP_LOGGER = "xray_face"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# MediaPipe and its absl backend print graph setup chatter at INFO
QUIET_LOGGERS = ("mediapipe", "absl")


def _build_handler(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure the xray_face logger tree.

    Replaces any handlers from a previous call, so it is safe to call again
    after settings change.

    Args:
        level: Log level name; unknown names fall back to INFO
        log_file: Optional path to a log file (parent dirs are created)
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    app_logger = logging.getLogger(APP_LOGGER)
    app_logger.setLevel(log_level)
    app_logger.handlers.clear()
    app_logger.addHandler(_build_handler(logging.StreamHandler(sys.stdout), log_level))

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        app_logger.addHandler(_build_handler(logging.FileHandler(log_path), log_level))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the xray_face namespace.

    Args:
        name: Module name (typically __name__)
    """
    if not name.startswith(APP_LOGGER):
        name = f"{APP_LOGGER}.{name}"
    return logging.getLogger(name)
