from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from lunchctl.errors import FormatError
from lunchctl.paths import PathResolver

DEV_NULL = Path("/dev/null")


class ProcessType(str, Enum):
    """Resource scheduling class of a launch agent.

    Background jobs do work the user did not directly request and are
    throttled. Standard is equivalent to no ProcessType. Adaptive jobs move
    between Background and Interactive based on XPC activity. Interactive
    jobs run with the same limits as apps, that is none.
    """

    STANDARD = "standard"
    BACKGROUND = "background"
    ADAPTIVE = "adaptive"
    INTERACTIVE = "interactive"

    @classmethod
    def from_token(cls, token: object) -> "ProcessType":
        """Parse a plist token, rejecting anything unrecognized.

        Raises:
            FormatError: If the token is not one of the four known values
        """
        for member in cls:
            if member.value == token:
                return member
        raise FormatError(f"invalid process type: {token!r}")


@dataclass
class AgentDescriptor:
    """Configuration for a macOS launch agent.

    A launch agent is a user-level process started by launchd at login or in
    response to events. Its descriptor is a plist placed in
    ``~/Library/LaunchAgents`` and managed with ``launchctl``.

    Attributes:
        label: Unique identifier for the agent (e.g., 'co.example.agent'),
            also the plist file name stem and the launchd job identifier
        program_arguments: Command line; the first element is the executable
        standard_out_path: Path stdout is redirected to
        standard_error_path: Path stderr is redirected to
        keep_alive: Whether launchd restarts the process when it exits
        run_at_load: Whether to start immediately when bootstrapped
        process_type: Resource scheduling class
    """

    label: str
    program_arguments: list[str] = field(default_factory=list)
    standard_out_path: Path = DEV_NULL
    standard_error_path: Path = DEV_NULL
    keep_alive: bool = False
    run_at_load: bool = False
    process_type: ProcessType = ProcessType.STANDARD

    def __post_init__(self):
        if not self.label:
            raise ValueError("Launch agent label must not be empty")
        self.standard_out_path = Path(self.standard_out_path)
        self.standard_error_path = Path(self.standard_error_path)

    def path(self, resolver: PathResolver | None = None) -> Path:
        """Get the descriptor file path for this agent.

        Args:
            resolver: Resolver to use (defaults to the process environment)

        Returns:
            Path to <home>/Library/LaunchAgents/<label>.plist
        """
        return (resolver or PathResolver()).path_for(self.label)
