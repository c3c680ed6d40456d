"""File logging for WRINKL commands.

Every console message and every file the commands write, move or delete is
recorded, so a session that went wrong can be replayed from the log. The
log stays off unless WRINKL_LOG is set:

    WRINKL_LOG=true                     enable (also "1" or "yes")
    WRINKL_LOG_FILE=/path/to/file.log   default ~/.wrinkl.log
"""

import logging
import os
from pathlib import Path

LOGGER_NAME = "wrinkl"
LOG_FORMAT = "[%(asctime)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_ENABLED = os.environ.get("WRINKL_LOG", "false").lower() in ("true", "1", "yes")
LOG_FILE = Path(os.environ.get("WRINKL_LOG_FILE", str(Path.home() / ".wrinkl.log")))

_logger: logging.Logger | None = None


def _file_handler(path: Path) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    return handler


def setup_logging() -> logging.Logger:
    """Attach the log file handler, or a NullHandler when logging is off.

    Safe to call more than once; the first call wins.
    """
    global _logger

    if _logger is not None:
        return _logger

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()

    if LOG_ENABLED:
        logger.addHandler(_file_handler(LOG_FILE))
        logger.setLevel(logging.INFO)
    else:
        logger.addHandler(logging.NullHandler())

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    return _logger if _logger is not None else setup_logging()


def log_message(message: str) -> None:
    """Record one line in the command log."""
    get_logger().info(message)


def log_file_write(path: Path, action: str = "write") -> None:
    """Record a filesystem change, e.g. `FILE: archive .ai/ledgers/search.md`."""
    get_logger().info(f"FILE: {action} {path}")


__all__ = [
    "LOG_ENABLED",
    "LOG_FILE",
    "setup_logging",
    "get_logger",
    "log_message",
    "log_file_write",
]
