"""lunchctl centralized logging with logfmt format."""

from lunchctl_logging.logger import LunchctlLogger, get_logger, configure_from_config
from lunchctl_logging.formatters import LogfmtFormatter
from lunchctl_logging.handlers import (
    create_file_handler,
    create_console_handler,
    create_syslog_handler
)

__all__ = [
    "LunchctlLogger",
    "get_logger",
    "configure_from_config",
    "LogfmtFormatter",
    "create_file_handler",
    "create_console_handler",
    "create_syslog_handler",
]
