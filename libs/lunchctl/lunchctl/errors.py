"""Error types raised by lunchctl components."""


class LunchctlError(Exception):
    """Base class for all lunchctl errors."""


class FormatError(LunchctlError, ValueError):
    """Descriptor content is malformed or holds an unrecognized value."""


class StorageError(LunchctlError, OSError):
    """Filesystem failure while reading, writing or removing a descriptor."""


class HomeDirectoryError(LunchctlError):
    """The current user's home directory could not be determined."""


class CommandError(LunchctlError):
    """A launchctl invocation failed to spawn or exited non-zero.

    Attributes:
        exit_code: Exit code of the process (127 if the executable was not found)
        output: Captured output explaining the failure
    """

    def __init__(self, exit_code: int, output: str):
        self.exit_code = exit_code
        self.output = output
        super().__init__(
            f"Failed to run launchctl command. Exit code: {exit_code}, Output: {output}"
        )


class BuilderError(LunchctlError):
    """An incrementally built descriptor could not be finalized."""


class MissingRequiredFieldError(BuilderError):
    """A required field was never supplied to the builder."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"`{field_name}` must be initialized")
