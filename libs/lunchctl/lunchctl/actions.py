"""Launch agent workflows used by the CLI."""

from lunchctl.controller import LaunchctlController
from lunchctl.errors import LunchctlError
from lunchctl.models.agent import AgentDescriptor
from lunchctl.models.results import ActionResult, AgentStatus
from lunchctl.store import AgentStore
from lunchctl_logging import get_logger


class AgentActions:
    """Encapsulates launch agent management workflows.

    Combines the descriptor store and the launchctl controller into the
    multi-step operations a user runs (install, uninstall, status). Library
    errors are turned into failed ActionResults here so callers can report
    them without handling each error type.
    """

    def __init__(
        self,
        store: AgentStore | None = None,
        controller: LaunchctlController | None = None,
    ):
        """Initialize agent actions.

        Args:
            store: Descriptor store
            controller: launchctl controller sharing the store's resolver
        """
        self.store = store or AgentStore()
        self.controller = controller or LaunchctlController(resolver=self.store.resolver)
        self.logger = get_logger('actions')

    def create(self, descriptor: AgentDescriptor) -> ActionResult:
        """Write a descriptor without registering it."""
        try:
            path = self.store.write(descriptor)
        except LunchctlError as e:
            return self._failed(f"Failed to write descriptor: {e}", descriptor.label)
        return ActionResult(
            success=True,
            message=f"Descriptor written to {path}",
            data={"path": str(path)},
        )

    def install(self, descriptor: AgentDescriptor) -> ActionResult:
        """Write a descriptor and bootstrap it.

        Args:
            descriptor: Agent to install

        Returns:
            ActionResult indicating success or failure
        """
        try:
            path = self.store.write(descriptor)
            self.controller.activate(descriptor)
        except LunchctlError as e:
            return self._failed(f"Failed to install {descriptor.label}: {e}", descriptor.label)

        return ActionResult(
            success=True,
            message=f"Installed {descriptor.label}",
            data={"path": str(path)},
        )

    def uninstall(self, label: str) -> ActionResult:
        """Boot out an agent and delete its descriptor.

        Args:
            label: Agent label

        Returns:
            ActionResult indicating success or failure
        """
        try:
            descriptor = self.store.read(label)
            self.controller.deactivate(descriptor)
            self.store.remove(descriptor)
        except LunchctlError as e:
            return self._failed(f"Failed to uninstall {label}: {e}", label)

        return ActionResult(success=True, message=f"Uninstalled {label}")

    def activate(self, label: str) -> ActionResult:
        """Bootstrap a previously written descriptor."""
        try:
            self.controller.activate(self.store.read(label))
        except LunchctlError as e:
            return self._failed(f"Failed to activate {label}: {e}", label)
        return ActionResult(success=True, message=f"Activated {label}")

    def deactivate(self, label: str) -> ActionResult:
        """Boot out an agent, leaving its descriptor on disk."""
        try:
            self.controller.deactivate(self.store.read(label))
        except LunchctlError as e:
            return self._failed(f"Failed to deactivate {label}: {e}", label)
        return ActionResult(success=True, message=f"Deactivated {label}")

    def remove(self, label: str) -> ActionResult:
        """Delete a descriptor file without touching launchd."""
        try:
            self.store.remove(label)
        except LunchctlError as e:
            return self._failed(f"Failed to remove {label}: {e}", label)
        return ActionResult(success=True, message=f"Removed {label}")

    def status(self, label: str) -> AgentStatus:
        """Get the observed state of an agent.

        Raises:
            CommandError: If launchctl fails while querying
        """
        installed = self.store.exists(label)
        running = self.controller.is_running(AgentDescriptor(label))
        return AgentStatus(
            label=label,
            path=self.store.path_for(label),
            installed=installed,
            running=running,
        )

    def _failed(self, message: str, label: str) -> ActionResult:
        self.logger.error(message, label=label)
        return ActionResult(success=False, message=message)
