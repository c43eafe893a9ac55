"""Core domain models for menu actions, applications and launch results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import os
from pathlib import Path
from typing import Any

from core.errors import InvalidApplicationError

APP_BUNDLE_SUFFIX = ".app"

DEFAULT_TERMINAL_PATH = "/System/Applications/Utilities/Terminal.app"
DEFAULT_TEXT_EDITOR_PATH = "/System/Applications/TextEdit.app"
DEFAULT_CODE_EDITOR_PATH = "/Applications/Visual Studio Code.app"


class MenuAction(str, Enum):
    """Identifiers of the actions offered in the context menu."""

    OPEN_TERMINAL = "open_terminal"
    OPEN_EDITOR = "open_editor"
    CREATE_FILE = "create_file"
    COPY_PATHS = "copy_paths"


@dataclass(frozen=True)
class AppDescriptor:
    """A validated application bundle that can be opened at a location."""

    name: str
    path: Path

    @classmethod
    def from_path(cls, path: str | Path) -> AppDescriptor:
        """Validate `path` and build a descriptor named after the bundle.

        Raises:
            InvalidApplicationError: if the path does not end in ``.app`` or
                does not exist.
        """
        raw = os.fspath(path)
        if not raw.endswith(APP_BUNDLE_SUFFIX):
            raise InvalidApplicationError(raw, f"path must end in {APP_BUNDLE_SUFFIX!r}")
        bundle = Path(raw)
        if not bundle.exists():
            raise InvalidApplicationError(raw, "application does not exist")
        return cls(name=bundle.stem, path=bundle)


@dataclass(frozen=True)
class AppCatalog:
    """The fixed set of applications, built once at start-up."""

    terminal: AppDescriptor
    text_editor: AppDescriptor
    code_editor: AppDescriptor
    editor_key: str = "code_editor"

    def __post_init__(self) -> None:
        if self.editor_key not in ("text_editor", "code_editor"):
            raise ValueError(f"Unknown editor: {self.editor_key}")

    @property
    def editor(self) -> AppDescriptor:
        """Application used by "Open in Editor"."""
        return getattr(self, self.editor_key)

    @classmethod
    def from_settings(cls, settings: Any) -> AppCatalog:
        """Build the catalog from `apps.*` and `editor.app` settings keys."""
        return cls(
            terminal=AppDescriptor.from_path(settings.get("apps.terminal", DEFAULT_TERMINAL_PATH)),
            text_editor=AppDescriptor.from_path(
                settings.get("apps.text_editor", DEFAULT_TEXT_EDITOR_PATH)
            ),
            code_editor=AppDescriptor.from_path(
                settings.get("apps.code_editor", DEFAULT_CODE_EDITOR_PATH)
            ),
            editor_key=str(settings.get("editor.app", "code_editor")),
        )


@dataclass(frozen=True)
class CommandResult:
    """Outcome of running an external process.

    Attributes:
        success: True when the process exited with status 0.
        stdout: Captured standard output text.
        stderr: Captured standard error text.
        returncode: Process exit status.
        command: Display form of the command that was run.
    """

    success: bool
    stdout: str
    stderr: str
    returncode: int = 0
    command: str = ""


@dataclass(frozen=True)
class ActionContext:
    """What the host reports at the moment a menu item is clicked."""

    target: Path | None = None
    selection: tuple[Path, ...] = field(default_factory=tuple)
