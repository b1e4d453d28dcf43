"""Resolution of launch agent descriptor paths."""

import os
from collections.abc import Mapping
from pathlib import Path

from lunchctl.errors import HomeDirectoryError

LAUNCH_AGENTS_SUBDIR = Path("Library") / "LaunchAgents"
PLIST_SUFFIX = ".plist"


class PathResolver:
    """Maps agent labels to descriptor files in the user's LaunchAgents directory.

    The home directory is looked up on every call so that changes to the
    environment are picked up. Tests pass ``home`` or ``environ`` instead of
    touching the real process environment.

    Labels are used verbatim as file name stems. Path-hostile characters are
    not sanitized.
    """

    def __init__(
        self,
        home: str | Path | None = None,
        environ: Mapping[str, str] | None = None,
    ):
        """Initialize the resolver.

        Args:
            home: Fixed home directory; overrides any environment lookup
            environ: Mapping to read ``HOME`` from (defaults to os.environ)
        """
        self._home = Path(home) if home is not None else None
        self._environ = environ

    def home(self) -> Path:
        """Get the current user's home directory.

        Returns:
            Path to the home directory

        Raises:
            HomeDirectoryError: If HOME is unset or empty
        """
        if self._home is not None:
            return self._home

        environ = self._environ if self._environ is not None else os.environ
        home = environ.get("HOME")
        if not home:
            raise HomeDirectoryError("HOME environment variable is not set")
        return Path(home)

    def launch_agents_dir(self) -> Path:
        """Get the user's LaunchAgents directory.

        Returns:
            Path to <home>/Library/LaunchAgents
        """
        return self.home() / LAUNCH_AGENTS_SUBDIR

    def path_for(self, label: str) -> Path:
        """Get the descriptor path for a given label.

        Args:
            label: Launch agent label (e.g., 'co.example.agent')

        Returns:
            Path to the plist file
        """
        return self.launch_agents_dir() / f"{label}{PLIST_SUFFIX}"

    def label_for(self, path: Path) -> str | None:
        """Get the label a descriptor path was derived from.

        Returns:
            The file name stem, or None if the path is not a plist file
        """
        if path.suffix != PLIST_SUFFIX:
            return None
        return path.name[: -len(PLIST_SUFFIX)]


def path_for(label: str) -> Path:
    """Resolve a label against the current process environment."""
    return PathResolver().path_for(label)
