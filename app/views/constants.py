"""
Menu constants centralized for reuse across view modules.

Titles are shown verbatim in the context menu.
"""

from __future__ import annotations

from core.models import MenuAction

MENU_TITLES: dict[MenuAction, str] = {
    MenuAction.OPEN_TERMINAL: "Open in Terminal",
    MenuAction.OPEN_EDITOR: "Open in Editor",
    MenuAction.CREATE_FILE: "Create empty file here",
    MenuAction.COPY_PATHS: "Copy selected paths",
}

# Catalog attribute whose bundle icon decorates the item; None means no icon
MENU_ICONS: dict[MenuAction, str | None] = {
    MenuAction.OPEN_TERMINAL: "terminal",
    MenuAction.OPEN_EDITOR: "editor",
    MenuAction.CREATE_FILE: None,
    MenuAction.COPY_PATHS: None,
}
