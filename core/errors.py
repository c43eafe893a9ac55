"""Exceptions raised by menu actions.

Every error is caught at the dispatch boundary and logged; none of them are
meant to reach the host process.
"""

from __future__ import annotations

from pathlib import Path


class ExtensionError(Exception):
    """Base class for failures of a single menu action."""


class InvalidApplicationError(ExtensionError):
    """An application path is missing or is not an application bundle."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Invalid application {self.path!r}: {reason}")


class MissingTargetError(ExtensionError):
    """The host did not supply a target for an action that needs one."""

    def __init__(self, action: str) -> None:
        self.action = action
        super().__init__(f"No target location available for {action}")


class FileSystemError(ExtensionError):
    """Creating or probing a file failed."""

    def __init__(self, path: str | Path, cause: OSError) -> None:
        self.path = str(path)
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"Failed to create file {self.path}: {reason}")


class ProcessLaunchError(ExtensionError):
    """The external application could not be spawned."""

    def __init__(self, app_name: str, target: str | Path, reason: str) -> None:
        self.app_name = app_name
        self.target = str(target)
        self.reason = reason
        super().__init__(f"Failed to open {app_name!r} at {self.target}: {reason}")
