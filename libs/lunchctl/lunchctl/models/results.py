from dataclasses import dataclass
from pathlib import Path


@dataclass
class ShellResult:
    """Result from a command execution.

    Attributes:
        code: Exit code of the process
        out: Captured standard output
        err: Captured standard error
    """

    code: int
    out: str
    err: str = ""

    @property
    def success(self) -> bool:
        """Check if the command succeeded (exit code 0)."""
        return self.code == 0


@dataclass
class AgentStatus:
    """Observed state of a launch agent.

    Attributes:
        label: Agent label
        path: Descriptor file path
        installed: Whether the descriptor file exists
        running: Whether launchd reports the job as running
    """

    label: str
    path: Path
    installed: bool = False
    running: bool = False


@dataclass
class ActionResult:
    """Result from an action.

    Attributes:
        success: Whether the action succeeded
        message: Human-readable message about the result
        data: Optional additional data
    """

    success: bool
    message: str
    data: dict | None = None
