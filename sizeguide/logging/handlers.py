"""
Handler factories for console and file logging.

File handlers always write UTF-8 so rich-text content and shop names with
non-ASCII characters survive in the log files.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d - %(message)s"


def create_console_handler(level=logging.INFO, fmt=None) -> logging.StreamHandler:
    """Create a stderr handler with the project log format."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))
    return handler


def create_utf8_file_handler(
    filepath: str | Path,
    level=logging.INFO,
    fmt=None,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 7,
) -> RotatingFileHandler:
    """
    Create a rotating UTF-8 file handler.

    Args:
        filepath: Path to the log file (parent directory is created)
        level: Logging level for the handler
        fmt: Format string for the formatter
        max_bytes: Rotation threshold
        backup_count: Number of rotated files kept

    Returns:
        RotatingFileHandler configured with UTF-8 encoding
    """
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))
    return handler
