# -*- coding: utf-8 -*-
"""
Logging configuration.

Every module logs through a child of the ``fleetdesk`` logger. Wizard
sessions use a SessionLogAdapter so that interleaved sessions can be told
apart in the log file.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

ROOT_LOGGER = "fleetdesk"

FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
CONSOLE_FORMAT = "%(levelname)-8s | %(message)s"

def setup_logger(console_level: Optional[str] = None,
                 log_to_file: Optional[bool] = None) -> logging.Logger:
    """
    Configure the ``fleetdesk`` logger.

    Args:
        console_level: Level name for stdout (defaults to Config.LOG_LEVEL)
        log_to_file: Add the rotating file handler (defaults to Config.LOG_TO_FILE)

    Returns:
        The configured root application logger
    """
    # Import here to avoid circular imports
    from app.config import Config

    if console_level is None:
        console_level = Config.LOG_LEVEL
    if log_to_file is None:
        log_to_file = Config.LOG_TO_FILE

    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(logging.DEBUG)
    root.propagate = False
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    if log_to_file:
        Config.LOGS_DIR.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            Config.LOG_PATH,
            maxBytes=Config.LOG_MAX_BYTES,
            backupCount=Config.LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=Config.DATETIME_FORMAT))
        root.addHandler(file_handler)

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(logging.getLevelName(console_level) if isinstance(console_level, str)
                     else console_level)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    root.addHandler(console)

    return root


def get_logger(name: str) -> logging.Logger:
    """Child logger for a module; handlers are attached by setup_logger()."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


class SessionLogAdapter(logging.LoggerAdapter):
    """Prefixes every record with the short id of a wizard session."""

    def process(self, msg, kwargs):
        return f"[wizard {self.extra['session']}] {msg}", kwargs


def get_session_logger(name: str, session_id: str) -> SessionLogAdapter:
    return SessionLogAdapter(get_logger(name), {"session": session_id[:8]})
