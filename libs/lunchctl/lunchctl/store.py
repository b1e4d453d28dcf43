"""Persistence of launch agent descriptors in ~/Library/LaunchAgents."""

from pathlib import Path

from lunchctl import plist_codec
from lunchctl.errors import StorageError
from lunchctl.models.agent import AgentDescriptor
from lunchctl.paths import PathResolver
from lunchctl_logging import get_logger


class AgentStore:
    """Reads, writes and removes descriptor files keyed by agent label.

    The LaunchAgents directory must already exist; the store does not create
    it. There is no locking: concurrent writers to the same label race and
    the last one wins.
    """

    def __init__(self, resolver: PathResolver | None = None):
        """Initialize the store.

        Args:
            resolver: Resolves labels to descriptor paths
        """
        self.resolver = resolver or PathResolver()
        self.logger = get_logger('store')

    def path_for(self, label: str) -> Path:
        """Get the descriptor path for a label."""
        return self.resolver.path_for(label)

    def exists(self, label: str) -> bool:
        """Check if a descriptor file exists for the label.

        Raises:
            HomeDirectoryError: If the home directory cannot be resolved
        """
        return self.path_for(label).exists()

    def read(self, label: str) -> AgentDescriptor:
        """Load a descriptor by label.

        Args:
            label: Agent label

        Returns:
            The decoded AgentDescriptor

        Raises:
            StorageError: If the file is missing or unreadable
            FormatError: If the file is not a valid descriptor
        """
        path = self.path_for(label)
        try:
            with open(path, "rb") as f:
                return plist_codec.load(f)
        except OSError as e:
            raise StorageError(e.errno, f"Failed to read {path}: {e.strerror}") from e

    def write(self, descriptor: AgentDescriptor) -> Path:
        """Write a descriptor, creating or truncating its file.

        Args:
            descriptor: Descriptor to persist

        Returns:
            Path the descriptor was written to

        Raises:
            StorageError: On any filesystem failure, including a missing
                LaunchAgents directory
        """
        path = self.path_for(descriptor.label)
        try:
            with open(path, "wb") as f:
                plist_codec.dump(descriptor, f)
        except OSError as e:
            raise StorageError(e.errno, f"Failed to write {path}: {e.strerror}") from e

        self.logger.info("Descriptor written", label=descriptor.label, path=str(path))
        return path

    def remove(self, descriptor: AgentDescriptor | str) -> None:
        """Delete a descriptor file.

        Args:
            descriptor: Descriptor or label to remove

        Raises:
            StorageError: If the file does not exist or cannot be deleted
        """
        label = descriptor if isinstance(descriptor, str) else descriptor.label
        path = self.path_for(label)
        try:
            path.unlink()
        except OSError as e:
            raise StorageError(e.errno, f"Failed to remove {path}: {e.strerror}") from e

        self.logger.info("Descriptor removed", label=label, path=str(path))

    def list_labels(self) -> list[str]:
        """List labels of all descriptors in the LaunchAgents directory.

        Returns:
            Sorted labels, empty if the directory does not exist
        """
        agents_dir = self.resolver.launch_agents_dir()
        if not agents_dir.is_dir():
            return []
        labels = (self.resolver.label_for(p) for p in agents_dir.iterdir() if p.is_file())
        return sorted(label for label in labels if label)
