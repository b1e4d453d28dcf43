from dataclasses import dataclass, field


@dataclass
class LoggingConfig:
    """Logging settings.

    Attributes:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_dir: Directory for log files
        enable_file: Whether to write a rotating log file under log_dir
        enable_syslog: Whether to also log to syslog
    """

    level: str = "WARNING"
    log_dir: str = "~/.lunchctl/logs"
    enable_file: bool = False
    enable_syslog: bool = False


@dataclass
class LunchctlConfig:
    """lunchctl configuration.

    Attributes:
        launchctl_path: launchctl executable, resolved through PATH if not absolute
        command_timeout: Seconds to wait for launchctl; None blocks indefinitely
        logging: Logging settings
    """

    launchctl_path: str = "launchctl"
    command_timeout: float | None = None
    logging: LoggingConfig = field(default_factory=LoggingConfig)
