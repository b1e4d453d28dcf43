"""lunchctl centralized logger."""

import logging
from pathlib import Path
from typing import Any

from lunchctl_logging.formatters import LogfmtFormatter
from lunchctl_logging.handlers import (
    create_console_handler,
    create_file_handler,
    create_syslog_handler,
)


class LunchctlLogger:
    """Logger that accepts structured context as keyword arguments.

    Example:
        logger = get_logger('store')
        logger.info("Descriptor written", label=agent.label, path=str(path))
    """

    def __init__(self, name: str, **settings):
        """Initialize the logger.

        Args:
            name: Logger name (will be prefixed with 'lunchctl.')
            **settings: Handler settings, see configure()
        """
        self.name = f'lunchctl.{name}'
        self.logger = logging.getLogger(self.name)
        self.logger.propagate = False
        self.formatter = LogfmtFormatter()
        self.configure(**settings)

    def configure(
        self,
        log_dir: Path | None = None,
        level: str = "WARNING",
        enable_file: bool = False,
        enable_syslog: bool = False,
        enable_console: bool = True
    ):
        """Replace the logger's level and handlers.

        Args:
            log_dir: Directory for log files, used when enable_file is set
            level: Log level (DEBUG, INFO, WARNING, ERROR)
            enable_file: Whether to write a rotating log file
            enable_syslog: Whether to enable syslog handler
            enable_console: Whether to enable console handler
        """
        self.logger.setLevel(getattr(logging, level.upper()))
        self.log_dir = log_dir or Path.home() / '.lunchctl' / 'logs'

        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        if enable_file:
            self.logger.addHandler(create_file_handler(
                self.log_dir / f'{self.name}.log',
                formatter=self.formatter
            ))

        if enable_console:
            self.logger.addHandler(create_console_handler(formatter=self.formatter))

        if enable_syslog:
            handler = create_syslog_handler(formatter=self.formatter)
            if handler:
                self.logger.addHandler(handler)

    def _log(self, level: int, msg: str, **kwargs):
        self.logger.log(level, msg, extra=kwargs, stacklevel=3)

    def debug(self, msg: str, **kwargs):
        self._log(logging.DEBUG, msg, **kwargs)

    def info(self, msg: str, **kwargs):
        self._log(logging.INFO, msg, **kwargs)

    def warning(self, msg: str, **kwargs):
        self._log(logging.WARNING, msg, **kwargs)

    def error(self, msg: str, **kwargs):
        self._log(logging.ERROR, msg, **kwargs)

    def exception(self, msg: str, **kwargs):
        """Log an error with the active exception's traceback."""
        self.logger.exception(msg, extra=kwargs, stacklevel=2)


# Global logger cache
_loggers: dict[str, LunchctlLogger] = {}

_defaults: dict[str, Any] = {
    "level": "WARNING",
    "enable_file": False,
    "enable_syslog": False,
}


def get_logger(name: str, **kwargs) -> LunchctlLogger:
    """Get or create a lunchctl logger.

    Settings not passed explicitly come from configure_from_config().

    Args:
        name: Logger name
        **kwargs: configure() arguments overriding the configured defaults

    Returns:
        Logger instance
    """
    if name not in _loggers:
        _loggers[name] = LunchctlLogger(name, **{**_defaults, **kwargs})
    return _loggers[name]


def configure_from_config(config: Any):
    """Apply logging settings from a config object.

    Loggers already handed out are reconfigured in place.

    Args:
        config: Object with a ``logging`` attribute (see LoggingConfig)
    """
    if not hasattr(config, 'logging'):
        return

    log_config = config.logging
    _defaults.update(
        log_dir=Path(log_config.log_dir).expanduser(),
        level=log_config.level,
        enable_file=log_config.enable_file,
        enable_syslog=log_config.enable_syslog,
    )

    for existing in _loggers.values():
        existing.configure(**_defaults)
