"""Service interfaces shared by the infrastructure and app layers.

The host-facing seams (clipboard, scoped access, process runner) are plain
protocols so the action handlers can be exercised without a window server.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
import subprocess
from typing import Any, Protocol


class ClipboardWriter(Protocol):
    """Destination for plain-text clipboard writes."""

    def set_text(self, text: str) -> None:
        """Replace the clipboard text with `text`."""
        ...


class AccessGrant(Protocol):
    """Paired acquire/release of access to a path outside the sandbox."""

    def start_accessing(self, path: Path) -> bool:
        """Acquire access to `path`; return whether a grant was obtained."""
        ...

    def stop_accessing(self, path: Path) -> None:
        """Release access previously acquired for `path`."""
        ...


class CommandRunner(Protocol):
    """Callable with the `subprocess.run` signature used by the launcher."""

    def __call__(
        self, args: Sequence[str], **kwargs: Any
    ) -> subprocess.CompletedProcess[str]: ...


class SettingsReader(Protocol):
    """Dotted-key settings lookup."""

    def get(self, key: str, default: Any | None = None) -> Any:
        """Return value for `key`, or `default` if not present."""
        ...
