"""ContextMenuHandler: builds the popup menu and routes clicks to actions."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import QFileInfo, QPoint
from PySide6.QtGui import QCursor, QIcon
from PySide6.QtWidgets import QFileIconProvider, QMenu, QWidget

from app.views.constants import MENU_ICONS, MENU_TITLES
from core.models import AppCatalog, MenuAction


class ContextMenuHandler:
    """Manages context menu creation and action routing.

    Icons come from the application bundles in the catalog; each item calls
    `on_action` with its `MenuAction` when triggered.
    """

    def __init__(
        self,
        catalog: AppCatalog,
        on_action: Callable[[MenuAction], None],
        parent_widget: QWidget | None = None,
    ) -> None:
        """Initialize with the catalog and the action callback.

        Args:
            catalog: Applications whose icons decorate the open items
            on_action: Called with the chosen action
            parent_widget: Parent widget for menu creation
        """
        self.catalog = catalog
        self.on_action = on_action
        self.parent = parent_widget
        self._icons = QFileIconProvider()

    def _icon_for(self, action: MenuAction) -> QIcon | None:
        attr = MENU_ICONS.get(action)
        if attr is None:
            return None
        app = getattr(self.catalog, attr)
        return self._icons.icon(QFileInfo(str(app.path)))

    def build_menu(self, actions: list[MenuAction]) -> QMenu:
        """Create a menu with one item per action, in the given order."""
        menu = QMenu(self.parent)
        for action in actions:
            item = menu.addAction(MENU_TITLES[action])
            icon = self._icon_for(action)
            if icon is not None:
                item.setIcon(icon)
            item.triggered.connect(lambda checked=False, a=action: self.on_action(a))
        return menu

    def popup(self, actions: list[MenuAction], point: QPoint | None = None) -> None:
        """Show the menu at `point` (the cursor by default) until it closes."""
        if not actions:
            return
        menu = self.build_menu(actions)
        menu.exec(point if point is not None else QCursor.pos())
