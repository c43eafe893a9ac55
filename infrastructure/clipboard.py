"""System clipboard access through Qt."""

from __future__ import annotations

from PySide6.QtGui import QClipboard, QGuiApplication


class QtClipboard:
    """Writes plain text to the general clipboard.

    Requires a running QGuiApplication (or QApplication).
    """

    def set_text(self, text: str) -> None:
        """Replace the clipboard text with `text`."""
        clipboard = QGuiApplication.clipboard()
        clipboard.setText(text, QClipboard.Mode.Clipboard)
