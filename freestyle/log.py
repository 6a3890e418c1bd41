"""Logging setup."""

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(config: dict, level: Optional[str] = None) -> Optional[str]:
    """Send the ``freestyle`` logger to a rotating file.

    The terminal is owned by the UI, so nothing is written to stderr.
    Returns the log file path, or None when file logging is disabled.
    """
    log_config = config.get("logging", {})
    logger = logging.getLogger("freestyle")
    logger.setLevel((level or log_config.get("level") or "INFO").upper())
    logger.propagate = False

    log_dir = log_config.get("dir")
    if not log_dir:
        logger.addHandler(logging.NullHandler())
        return None

    log_dir = os.path.expanduser(log_dir)
    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, log_config.get("file", "freestyle.log"))

    file_handler = RotatingFileHandler(
        log_path, maxBytes=5_000_000, backupCount=3, encoding="utf-8"
    )
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(file_handler)
    return log_path
