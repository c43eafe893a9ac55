"""
Shared test fixtures for finder action tests.
"""

from __future__ import annotations

import os
from pathlib import Path
import subprocess
from typing import Any

from loguru import logger
import pytest

from core.models import AppCatalog, AppDescriptor

# Qt tests run without a window server
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class FakeClipboard:
    """Records every text written to the clipboard."""

    def __init__(self) -> None:
        self.texts: list[str] = []

    def set_text(self, text: str) -> None:
        self.texts.append(text)


class RecordingAccess:
    """Access grant that records start/stop calls in order."""

    def __init__(self, granted: bool = True) -> None:
        self.granted = granted
        self.events: list[tuple[str, Path]] = []

    def start_accessing(self, path: Path) -> bool:
        self.events.append(("start", path))
        return self.granted

    def stop_accessing(self, path: Path) -> None:
        self.events.append(("stop", path))

    def count(self, kind: str) -> int:
        return sum(1 for event, _ in self.events if event == kind)


class FakeRunner:
    """Stands in for subprocess.run; returns a canned result or raises."""

    def __init__(
        self,
        returncode: int = 0,
        stdout: str = "",
        stderr: str = "",
        error: BaseException | None = None,
    ) -> None:
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        self.error = error
        self.calls: list[tuple[list[str], dict[str, Any]]] = []

    def __call__(self, args, **kwargs):
        self.calls.append((list(args), kwargs))
        if self.error is not None:
            raise self.error
        return subprocess.CompletedProcess(args, self.returncode, self.stdout, self.stderr)


class DictSettings:
    """In-memory settings with the same dotted-key lookup as JsonSettings."""

    def __init__(self, data: dict | None = None) -> None:
        self._data = data or {}

    def get(self, key: str, default: Any | None = None) -> Any:
        node: Any = self._data
        for part in key.split("."):
            if isinstance(node, dict) and part in node:
                node = node[part]
            else:
                return default
        return default if node is None else node


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during the test."""
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def app_bundles(tmp_path) -> dict[str, Path]:
    """Create empty application bundles and return their paths by key."""
    apps_dir = tmp_path / "Applications"
    bundles = {
        "terminal": apps_dir / "Utilities" / "Terminal.app",
        "text_editor": apps_dir / "TextEdit.app",
        "code_editor": apps_dir / "Visual Studio Code.app",
    }
    for bundle in bundles.values():
        bundle.mkdir(parents=True)
    return bundles


@pytest.fixture
def catalog(app_bundles) -> AppCatalog:
    return AppCatalog(
        terminal=AppDescriptor.from_path(app_bundles["terminal"]),
        text_editor=AppDescriptor.from_path(app_bundles["text_editor"]),
        code_editor=AppDescriptor.from_path(app_bundles["code_editor"]),
    )


@pytest.fixture
def clipboard() -> FakeClipboard:
    return FakeClipboard()


@pytest.fixture
def access() -> RecordingAccess:
    return RecordingAccess()


@pytest.fixture
def target_dir(tmp_path) -> Path:
    folder = tmp_path / "docs"
    folder.mkdir()
    return folder


@pytest.fixture(scope="session")
def qapp():
    """Single QApplication shared by all Qt tests."""
    from PySide6.QtWidgets import QApplication

    return QApplication.instance() or QApplication([])
