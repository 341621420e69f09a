"""Exception hierarchy and process exit codes."""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    RESOLUTION_ERROR = 1
    CONFIGURATION_ERROR = 2
    LAUNCH_ERROR = 3


class SynError(Exception):
    """Base class for all errors raised by syn."""


class ConfigurationError(SynError):
    """Raised when flags are combined illegally or compare gets the wrong file count."""


class ResolutionError(SynError):
    """Raised when an operand cannot be opened or created under the active policy."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path


class PermissionDeniedError(ResolutionError):
    """Raised when the operating system refuses read+write access to a path."""


class LaunchError(SynError):
    """Raised when an external application cannot be started."""

    def __init__(self, message: str, executable: str) -> None:
        super().__init__(message)
        self.executable = executable
