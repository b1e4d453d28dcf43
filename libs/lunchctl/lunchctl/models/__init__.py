from lunchctl.models.agent import DEV_NULL, AgentDescriptor, ProcessType
from lunchctl.models.config import LoggingConfig, LunchctlConfig
from lunchctl.models.results import ActionResult, AgentStatus, ShellResult

__all__ = [
    "DEV_NULL",
    "AgentDescriptor",
    "ProcessType",
    "LoggingConfig",
    "LunchctlConfig",
    "ActionResult",
    "AgentStatus",
    "ShellResult",
]
