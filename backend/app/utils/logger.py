"""
Logging utilities.

WHAT: Root logger setup for the chat server and its Socket.IO stack
WHY: Join/leave and routing decisions on console and on disk, without the
     transport's per-packet chatter
HOW: Python logging with file and console handlers; socketio/engineio
     loggers capped at SOCKETIO_LOG_LEVEL
"""

import logging
import sys
from pathlib import Path

from ..core.config import settings

# Loggers used by python-socketio and python-engineio
TRANSPORT_LOGGERS = ("socketio", "engineio")

CONSOLE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(pathname)s:%(lineno)d - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _level(name: str, default: int = logging.INFO) -> int:
    """Map a level name from settings to a logging constant."""
    return getattr(logging, name.upper(), default)


def setup_logging():
    """
    Configure application logging.

    WHAT: Console at LOG_LEVEL, file at DEBUG, transport loggers quieted
    WHY: Socket.IO pings every few seconds per client would flood the file
    HOW: Replace root handlers, then set levels on the socketio/engineio loggers
    """
    log_file = Path(settings.LOG_FILE)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    app_level = _level(settings.LOG_LEVEL)

    root_logger = logging.getLogger()
    root_logger.setLevel(app_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(app_level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(console_handler)

    file_handler = logging.FileHandler(log_file)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(file_handler)

    transport_level = _level(settings.SOCKETIO_LOG_LEVEL, logging.WARNING)
    for name in TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)

    root_logger.info(
        f"Logging initialized (level={settings.LOG_LEVEL}, "
        f"transport={settings.SOCKETIO_LOG_LEVEL}, file={log_file})"
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
