"""Plist encoding and decoding of launch agent descriptors."""

import plistlib
from pathlib import Path
from typing import IO, Any
from xml.parsers.expat import ExpatError

from lunchctl.errors import FormatError
from lunchctl.models.agent import AgentDescriptor, ProcessType

# launchd looks these keys up by name, so spelling and case are fixed.
LABEL = "Label"
PROGRAM_ARGUMENTS = "ProgramArguments"
STANDARD_OUT_PATH = "StandardOutPath"
STANDARD_ERROR_PATH = "StandardErrorPath"
KEEP_ALIVE = "KeepAlive"
RUN_AT_LOAD = "RunAtLoad"
PROCESS_TYPE = "ProcessType"


def to_plist_dict(descriptor: AgentDescriptor) -> dict[str, Any]:
    """Generate a plist dictionary from a descriptor.

    Every key is always emitted, including ProcessType.

    Args:
        descriptor: Launch agent descriptor

    Returns:
        Dictionary suitable for plistlib serialization
    """
    return {
        LABEL: descriptor.label,
        PROGRAM_ARGUMENTS: list(descriptor.program_arguments),
        STANDARD_OUT_PATH: str(descriptor.standard_out_path),
        STANDARD_ERROR_PATH: str(descriptor.standard_error_path),
        KEEP_ALIVE: descriptor.keep_alive,
        RUN_AT_LOAD: descriptor.run_at_load,
        PROCESS_TYPE: descriptor.process_type.value,
    }


def from_plist_dict(record: Any) -> AgentDescriptor:
    """Build a descriptor from a decoded plist dictionary.

    Args:
        record: Top-level object decoded from a plist

    Returns:
        The decoded AgentDescriptor

    Raises:
        FormatError: If a key is missing, has the wrong type, or ProcessType
            is not a recognized token
    """
    if not isinstance(record, dict):
        raise FormatError(f"expected a dictionary, got {type(record).__name__}")

    label = _require(record, LABEL, str)
    if not label:
        raise FormatError(f"{LABEL} must not be empty")

    arguments = _require(record, PROGRAM_ARGUMENTS, list)
    if not all(isinstance(arg, str) for arg in arguments):
        raise FormatError(f"{PROGRAM_ARGUMENTS} must contain only strings")

    return AgentDescriptor(
        label=label,
        program_arguments=arguments,
        standard_out_path=Path(_require(record, STANDARD_OUT_PATH, str)),
        standard_error_path=Path(_require(record, STANDARD_ERROR_PATH, str)),
        keep_alive=_require(record, KEEP_ALIVE, bool),
        run_at_load=_require(record, RUN_AT_LOAD, bool),
        process_type=ProcessType.from_token(_require(record, PROCESS_TYPE, str)),
    )


def dumps(descriptor: AgentDescriptor) -> bytes:
    """Serialize a descriptor to XML plist bytes."""
    return plistlib.dumps(to_plist_dict(descriptor), fmt=plistlib.FMT_XML)


def loads(data: bytes) -> AgentDescriptor:
    """Deserialize a descriptor from plist bytes.

    Raises:
        FormatError: If the data is not a valid launch agent plist
    """
    try:
        record = plistlib.loads(data)
    except (plistlib.InvalidFileException, ExpatError, ValueError, AttributeError, TypeError) as e:
        raise FormatError(f"Invalid plist: {e}") from e
    return from_plist_dict(record)


def dump(descriptor: AgentDescriptor, fp: IO[bytes]) -> None:
    """Write a descriptor to a binary file object as XML plist."""
    plistlib.dump(to_plist_dict(descriptor), fp, fmt=plistlib.FMT_XML)


def load(fp: IO[bytes]) -> AgentDescriptor:
    """Read a descriptor from a binary file object.

    Raises:
        FormatError: If the content is not a valid launch agent plist
    """
    return loads(fp.read())


def _require(record: dict[str, Any], key: str, expected: type) -> Any:
    if key not in record:
        raise FormatError(f"Missing required key: {key}")
    value = record[key]
    if not isinstance(value, expected):
        raise FormatError(
            f"{key} must be {expected.__name__}, got {type(value).__name__}"
        )
    return value
