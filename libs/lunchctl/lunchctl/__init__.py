"""Manage macOS launch agents: descriptors on disk and launchctl lifecycle."""

from lunchctl.actions import AgentActions
from lunchctl.builder import AgentDescriptorBuilder
from lunchctl.controller import LaunchctlController
from lunchctl.errors import (
    BuilderError,
    CommandError,
    FormatError,
    HomeDirectoryError,
    LunchctlError,
    MissingRequiredFieldError,
    StorageError,
)
from lunchctl.models import DEV_NULL, AgentDescriptor, ProcessType
from lunchctl.paths import PathResolver, path_for
from lunchctl.store import AgentStore

__all__ = [
    # Model
    "DEV_NULL",
    "AgentDescriptor",
    "AgentDescriptorBuilder",
    "ProcessType",
    # Components
    "AgentActions",
    "AgentStore",
    "LaunchctlController",
    "PathResolver",
    "path_for",
    # Errors
    "BuilderError",
    "CommandError",
    "FormatError",
    "HomeDirectoryError",
    "LunchctlError",
    "MissingRequiredFieldError",
    "StorageError",
]
