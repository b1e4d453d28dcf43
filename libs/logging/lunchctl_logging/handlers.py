"""Log handlers for lunchctl."""

import logging
import logging.handlers
import sys
from pathlib import Path

# Syslog sockets on macOS and Linux, then the network fallback.
SYSLOG_ADDRESSES: list[str | tuple[str, int]] = [
    '/var/run/syslog',
    '/dev/log',
    ('localhost', 514),
]


def create_file_handler(
    log_file: Path,
    max_bytes: int = 5 * 1024 * 1024,
    backup_count: int = 3,
    formatter: logging.Formatter | None = None
) -> logging.Handler:
    """Create a rotating file handler.

    Args:
        log_file: Path to log file
        max_bytes: Maximum file size before rotation
        backup_count: Number of backup files to keep
        formatter: Log formatter to use

    Returns:
        Configured file handler
    """
    log_file.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding='utf-8'
    )
    if formatter:
        handler.setFormatter(formatter)
    return handler


def create_console_handler(
    formatter: logging.Formatter | None = None,
    stream=None
) -> logging.Handler:
    """Create a console handler writing to stderr by default."""
    handler = logging.StreamHandler(stream or sys.stderr)
    if formatter:
        handler.setFormatter(formatter)
    return handler


def create_syslog_handler(
    formatter: logging.Formatter | None = None,
    facility: int = logging.handlers.SysLogHandler.LOG_USER,
) -> logging.Handler | None:
    """Create a syslog handler on the first available address.

    Returns:
        Configured syslog handler, or None if syslog is not available
    """
    for address in SYSLOG_ADDRESSES:
        if isinstance(address, str) and not Path(address).exists():
            continue
        try:
            handler = logging.handlers.SysLogHandler(address=address, facility=facility)
        except OSError:
            continue
        if formatter:
            handler.setFormatter(formatter)
        return handler
    return None
