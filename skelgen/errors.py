"""Exception hierarchy for skelgen.

Every fatal condition raised by the option resolver or the project generator
derives from :class:`SkelgenError` so the command line can report it in one
place.  Exceptions carry the offending option name, path or command as
attributes in addition to the formatted message.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class SkelgenError(Exception):
    """Base class for all skelgen errors."""


# ---------------------------------------------------------------------------
# Option resolution
# ---------------------------------------------------------------------------


class ParameterNotSetError(SkelgenError):
    """Raised when a required option is missing from a values file."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"parameter not set: {name}")


class TypeMismatchError(SkelgenError):
    """Raised when a supplied value has a different type than the option's default."""

    def __init__(self, name: str, expected: str, actual: str) -> None:
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(f"{name}: type mismatch, got {actual}, expected {expected}")


class MalformedInputError(SkelgenError):
    """Raised when a value is rejected by the option's validator."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"malformed input: {name}: {reason}")


class ParameterSetError(SkelgenError):
    """Raised when a value is supplied for an option whose dependencies are not met."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"parameter set but preconditions are not met: {name}")


class InputClosedError(SkelgenError):
    """Raised when the input stream ends before an option received a valid value."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"input closed before a valid value for {name} was read")


class UnsupportedOptionTypeError(SkelgenError):
    """Raised when an option value is not a ``str``, ``bool`` or ``int``.

    This is a defect in the option schema, not a user input problem.
    """

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"unsupported option type: {type(value).__name__}")


# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------


class AlreadyExistsError(SkelgenError):
    """Raised when the target project directory is already present."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f"already exists: directory {self.path}")


class BootstrapError(SkelgenError):
    """Raised when an external bootstrap command exits with a non-zero code."""

    def __init__(self, command: str, stderr: str = "") -> None:
        self.command = command
        self.stderr = stderr
        message = f"command failed: {command}"
        if stderr:
            message = f"{message}\n{stderr}"
        super().__init__(message)


class GenerationError(SkelgenError):
    """Raised when a generation phase fails; the cause is chained."""

    def __init__(self, phase: str, message: str) -> None:
        self.phase = phase
        super().__init__(f"{phase}: {message}")
