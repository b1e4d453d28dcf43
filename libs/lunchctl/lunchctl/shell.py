"""Command execution for launchctl invocations."""

import subprocess
from collections.abc import Sequence

from lunchctl.errors import CommandError
from lunchctl.models.results import ShellResult
from lunchctl_logging import get_logger

COMMAND_NOT_FOUND = 127

logger = get_logger('shell')


def run(argv: Sequence[str], timeout: float | None = None) -> ShellResult:
    """Run a command without a shell and capture its output.

    Non-zero exit codes are returned, not raised; callers decide what a
    failure means.

    Args:
        argv: Executable and arguments (e.g., ['launchctl', 'print', 'gui/501'])
        timeout: Seconds to wait; None blocks until the command exits

    Returns:
        ShellResult with exit code, stdout and stderr

    Raises:
        CommandError: If the executable cannot be spawned or times out
    """
    logger.debug("Running command", argv=" ".join(argv))
    try:
        completed = subprocess.run(
            list(argv),
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except FileNotFoundError as e:
        raise CommandError(COMMAND_NOT_FOUND, f"{argv[0]}: command not found") from e
    except subprocess.TimeoutExpired as e:
        raise CommandError(-1, f"Command timed out after {timeout}s: {' '.join(argv)}") from e
    except OSError as e:
        raise CommandError(e.errno or 1, str(e)) from e

    return ShellResult(
        code=completed.returncode,
        out=completed.stdout or "",
        err=completed.stderr or "",
    )
