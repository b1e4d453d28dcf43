"""launchctl controller for launch agent lifecycle."""

import os
from collections.abc import Callable, Sequence

from lunchctl import shell
from lunchctl.errors import CommandError
from lunchctl.models.agent import AgentDescriptor
from lunchctl.models.results import ShellResult
from lunchctl.paths import PathResolver
from lunchctl_logging import get_logger

BOOTSTRAP = "bootstrap"
BOOTOUT = "bootout"
PRINT = "print"

RUNNING_MARKER = "state = running"

# launchctl print exits with this code when the domain has no such service.
SERVICE_NOT_FOUND = 113

Runner = Callable[[Sequence[str]], ShellResult]


class LaunchctlController:
    """Registers, unregisters and inspects launch agents in the user's GUI domain.

    All three operations target ``gui/<uid>`` for the effective uid of the
    current process. Commands are executed as argument vectors; the
    ``format_*`` methods render the equivalent shell command for display.

    The controller keeps no state about which agents are registered. Calling
    activate twice, or deactivate on an unregistered agent, is left to
    launchctl to accept or reject.
    """

    def __init__(
        self,
        resolver: PathResolver | None = None,
        uid: int | Callable[[], int] | None = None,
        runner: Runner | None = None,
        launchctl: str = "launchctl",
        timeout: float | None = None,
    ):
        """Initialize the controller.

        Args:
            resolver: Resolves agent labels to descriptor paths
            uid: User id of the target GUI domain, or a callable returning it
                (defaults to os.geteuid)
            runner: Executes an argument vector (defaults to shell.run)
            launchctl: launchctl executable
            timeout: Seconds to wait for launchctl; None blocks indefinitely
        """
        self.resolver = resolver or PathResolver()
        self._uid = uid if uid is not None else os.geteuid
        self._runner = runner
        self.launchctl = launchctl
        self.timeout = timeout
        self.logger = get_logger('controller')

    def get_uid(self) -> int:
        """Get the user id of the target GUI domain."""
        return self._uid() if callable(self._uid) else self._uid

    def domain_target(self) -> str:
        """Get the session domain, e.g. 'gui/501'."""
        return f"gui/{self.get_uid()}"

    def service_target(self, descriptor: AgentDescriptor) -> str:
        """Get the service target, e.g. 'gui/501/co.example.agent'."""
        return f"{self.domain_target()}/{descriptor.label}"

    def bootstrap_args(self, descriptor: AgentDescriptor) -> list[str]:
        return self._domain_args(BOOTSTRAP, descriptor)

    def bootout_args(self, descriptor: AgentDescriptor) -> list[str]:
        return self._domain_args(BOOTOUT, descriptor)

    def print_args(self, descriptor: AgentDescriptor) -> list[str]:
        return [self.launchctl, PRINT, self.service_target(descriptor)]

    def format_command(self, command: str, descriptor: AgentDescriptor) -> str:
        """Render a domain command for display.

        The descriptor path is single-quoted verbatim; embedded quotes are
        not escaped.

        Args:
            command: launchctl subcommand, e.g. 'bootstrap'
            descriptor: Agent whose descriptor path is the operand

        Returns:
            "<launchctl> <command> gui/<uid> '<path>'", or "" if command is empty
        """
        if not command:
            return ""
        tool, subcommand, domain, path = self._domain_args(command, descriptor)
        return f"{tool} {subcommand} {domain} '{path}'"

    def format_bootstrap_command(self, descriptor: AgentDescriptor) -> str:
        return self.format_command(BOOTSTRAP, descriptor)

    def format_bootout_command(self, descriptor: AgentDescriptor) -> str:
        return self.format_command(BOOTOUT, descriptor)

    def format_print_command(self, descriptor: AgentDescriptor) -> str:
        return " ".join(self.print_args(descriptor))

    def activate(self, descriptor: AgentDescriptor) -> None:
        """Bootstrap the agent's descriptor into the user's GUI domain.

        With run_at_load set, launchd also starts the process.

        Raises:
            CommandError: If launchctl fails or exits non-zero
        """
        self.logger.info("Bootstrapping launch agent", label=descriptor.label)
        try:
            self._run_launchctl(self.bootstrap_args(descriptor))
        except CommandError as e:
            self._failed(BOOTSTRAP, descriptor, e)
            raise

    def deactivate(self, descriptor: AgentDescriptor) -> None:
        """Boot out the agent, stopping it if it is running.

        Raises:
            CommandError: If launchctl fails or exits non-zero
        """
        self.logger.info("Booting out launch agent", label=descriptor.label)
        try:
            self._run_launchctl(self.bootout_args(descriptor))
        except CommandError as e:
            self._failed(BOOTOUT, descriptor, e)
            raise

    def is_running(self, descriptor: AgentDescriptor) -> bool:
        """Check whether launchd reports the agent as running.

        An agent that is not registered in the domain is reported as not
        running rather than as an error.

        Raises:
            CommandError: If launchctl fails for any other reason
        """
        try:
            output = self._run_launchctl(self.print_args(descriptor))
        except CommandError as e:
            if e.exit_code == SERVICE_NOT_FOUND:
                self.logger.debug("Launch agent not registered", label=descriptor.label)
                return False
            self._failed(PRINT, descriptor, e)
            raise
        return self.check_is_running(output)

    @staticmethod
    def check_is_running(output: str) -> bool:
        """Check if launchctl print output contains the running marker."""
        return RUNNING_MARKER in output

    def _domain_args(self, command: str, descriptor: AgentDescriptor) -> list[str]:
        path = self.resolver.path_for(descriptor.label)
        return [self.launchctl, command, self.domain_target(), str(path)]

    def _run_launchctl(self, argv: list[str]) -> str:
        """Run a launchctl argument vector.

        Returns:
            Captured standard output

        Raises:
            CommandError: If the command cannot be spawned or exits non-zero
        """
        if self._runner is not None:
            result = self._runner(argv)
        else:
            result = shell.run(argv, timeout=self.timeout)

        if not result.success:
            output = (result.err or result.out).strip()
            self.logger.debug(
                "launchctl exited non-zero",
                argv=" ".join(argv),
                exit_code=result.code,
                output=output,
            )
            raise CommandError(result.code, output)
        return result.out

    def _failed(self, command: str, descriptor: AgentDescriptor, error: CommandError) -> None:
        self.logger.error(
            "launchctl failed",
            command=command,
            label=descriptor.label,
            exit_code=error.exit_code,
            output=error.output,
        )
