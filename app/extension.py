"""FinderActionsExtension: dispatches context-menu actions to their handlers."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from loguru import logger

from core.errors import ExtensionError, MissingTargetError
from core.models import ActionContext, AppCatalog, AppDescriptor, MenuAction
from core.services.interfaces import ClipboardWriter, SettingsReader
from core.services.path_service import (
    DEFAULT_BASE_NAME,
    create_empty_file,
    serialize_selection,
)
from infrastructure.launcher import AppLauncher

ActionHandler = Callable[[ActionContext], bool]

MENU_ORDER: tuple[MenuAction, ...] = (
    MenuAction.OPEN_TERMINAL,
    MenuAction.OPEN_EDITOR,
    MenuAction.CREATE_FILE,
    MenuAction.COPY_PATHS,
)


class FinderActionsExtension:
    """Runs one menu action per click against the host-supplied context.

    Handlers are looked up in an explicit table keyed by `MenuAction`. Every
    failure ends the current action with a log line and a False result; no
    exception escapes to the host.
    """

    def __init__(
        self,
        catalog: AppCatalog,
        launcher: AppLauncher,
        clipboard: ClipboardWriter,
        settings: SettingsReader | None = None,
    ) -> None:
        """Initialize with the app catalog and the host-facing services.

        Args:
            catalog: Applications offered by the open actions
            launcher: Launcher used to open applications
            clipboard: Clipboard receiving copied paths
            settings: Optional settings for file naming and clipboard format
        """
        self.catalog = catalog
        self.launcher = launcher
        self.clipboard = clipboard
        self.settings = settings
        self._handlers: dict[MenuAction, ActionHandler] = {
            MenuAction.OPEN_TERMINAL: self.open_terminal,
            MenuAction.OPEN_EDITOR: self.open_editor,
            MenuAction.CREATE_FILE: self.create_file,
            MenuAction.COPY_PATHS: self.copy_paths,
        }

    def _setting(self, key: str, default):
        if self.settings is None:
            return default
        return self.settings.get(key, default)

    def monitored_directories(self) -> list[Path]:
        roots = self._setting("extension.monitored_directories", ["/"])
        return [Path(r).expanduser() for r in roots]

    def is_monitored(self, target: Path) -> bool:
        """Whether `target` lies under one of the monitored directories."""
        for root in self.monitored_directories():
            if target == root or root in target.parents:
                return True
        return False

    def menu_actions(self, context: ActionContext) -> list[MenuAction]:
        """Actions to offer for `context`, in menu order."""
        if context.target is not None and not self.is_monitored(context.target):
            logger.debug("Target outside monitored directories: {}", context.target)
            return []
        return list(MENU_ORDER)

    def perform(self, action: MenuAction, context: ActionContext) -> bool:
        """Run the handler registered for `action`.

        Returns:
            True if the action completed, False if it failed or was skipped
        """
        handler = self._handlers.get(action)
        if handler is None:
            logger.error("No handler registered for {}", action)
            return False

        logger.info(
            "Action {} | target={} selected={}",
            action.value,
            context.target,
            len(context.selection),
        )
        try:
            return handler(context)
        except ExtensionError as ex:
            logger.error("Action {} failed: {}", action.value, ex)
            return False
        except Exception as ex:  # pylint: disable=broad-exception-caught
            logger.exception("Action {} crashed: {}", action.value, ex)
            return False

    def _require_target(self, action: MenuAction, context: ActionContext) -> Path:
        if context.target is None:
            raise MissingTargetError(action.value)
        return context.target

    def _open(self, action: MenuAction, app: AppDescriptor, context: ActionContext) -> bool:
        target = self._require_target(action, context)
        result = self.launcher.launch(app, target)
        return result.success

    def open_terminal(self, context: ActionContext) -> bool:
        """Open the terminal at the target location."""
        return self._open(MenuAction.OPEN_TERMINAL, self.catalog.terminal, context)

    def open_editor(self, context: ActionContext) -> bool:
        """Open the configured editor at the target location."""
        return self._open(MenuAction.OPEN_EDITOR, self.catalog.editor, context)

    def create_file(self, context: ActionContext) -> bool:
        """Create an empty, uniquely named file in the target directory."""
        target = self._require_target(MenuAction.CREATE_FILE, context)
        create_empty_file(
            target,
            base_name=str(self._setting("new_file.base_name", DEFAULT_BASE_NAME)),
            extension=str(self._setting("new_file.extension", "")),
        )
        return True

    def copy_paths(self, context: ActionContext) -> bool:
        """Copy the selected paths to the clipboard, one per line."""
        base = None
        if self._setting("clipboard.relative_to_target", False):
            base = context.target
        text = serialize_selection(context.selection, base=base)
        if text is None:
            logger.info("Nothing selected, clipboard left unchanged")
            return False
        self.clipboard.set_text(text)
        logger.info("Copied {} path(s) to clipboard", len(context.selection))
        return True
