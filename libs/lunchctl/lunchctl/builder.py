"""Incremental construction of launch agent descriptors."""

from pathlib import Path

from lunchctl.errors import MissingRequiredFieldError
from lunchctl.models.agent import DEV_NULL, AgentDescriptor, ProcessType


class AgentDescriptorBuilder:
    """Fluent builder for AgentDescriptor.

    Only the label is required; every other field falls back to the
    descriptor default. Validation happens once, in build().

    Example:
        agent = (
            AgentDescriptorBuilder()
            .label("co.example.tail")
            .arg("/usr/bin/tail")
            .arg("-f")
            .arg("/dev/null")
            .keep_alive(True)
            .build()
        )
    """

    def __init__(self):
        self._label: str | None = None
        self._program_arguments: list[str] = []
        self._standard_out_path: Path = DEV_NULL
        self._standard_error_path: Path = DEV_NULL
        self._keep_alive = False
        self._run_at_load = False
        self._process_type = ProcessType.STANDARD

    def label(self, label: str) -> "AgentDescriptorBuilder":
        self._label = label
        return self

    def arg(self, argument: str) -> "AgentDescriptorBuilder":
        """Append a single program argument."""
        self._program_arguments.append(argument)
        return self

    def args(self, arguments: list[str]) -> "AgentDescriptorBuilder":
        """Append several program arguments in order."""
        self._program_arguments.extend(arguments)
        return self

    def standard_out_path(self, path: str | Path) -> "AgentDescriptorBuilder":
        self._standard_out_path = Path(path)
        return self

    def standard_error_path(self, path: str | Path) -> "AgentDescriptorBuilder":
        self._standard_error_path = Path(path)
        return self

    def keep_alive(self, keep_alive: bool) -> "AgentDescriptorBuilder":
        self._keep_alive = keep_alive
        return self

    def run_at_load(self, run_at_load: bool) -> "AgentDescriptorBuilder":
        self._run_at_load = run_at_load
        return self

    def process_type(self, process_type: ProcessType | str) -> "AgentDescriptorBuilder":
        self._process_type = ProcessType(process_type)
        return self

    def build(self) -> AgentDescriptor:
        """Finalize the descriptor.

        Returns:
            A new AgentDescriptor

        Raises:
            MissingRequiredFieldError: If no label was supplied
        """
        if not self._label:
            raise MissingRequiredFieldError("label")

        return AgentDescriptor(
            label=self._label,
            program_arguments=list(self._program_arguments),
            standard_out_path=self._standard_out_path,
            standard_error_path=self._standard_error_path,
            keep_alive=self._keep_alive,
            run_at_load=self._run_at_load,
            process_type=self._process_type,
        )
