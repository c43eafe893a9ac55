from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
import sys

from PySide6.QtWidgets import QApplication
from loguru import logger

from app.extension import FinderActionsExtension
from app.host import context_from_args, parse_args
from app.views.handlers.context_menu import ContextMenuHandler
from core.errors import InvalidApplicationError
from core.models import AppCatalog, MenuAction
from infrastructure.clipboard import QtClipboard
from infrastructure.launcher import DEFAULT_OPENER, AppLauncher
from infrastructure.logging import init_logging
from infrastructure.settings import JsonSettings


BASE_DIR = Path(__file__).parent


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    settings_path = Path(args.settings) if args.settings else BASE_DIR / "settings.json"
    try:
        settings = JsonSettings(settings_path)
    except (OSError, ValueError) as ex:
        logger.error("Cannot read settings {}: {}", settings_path, ex)
        return 1
    init_logging(
        settings.get("logging.directory"), level=str(settings.get("logging.level", "INFO"))
    )
    logger.info("Finder actions launched from {}", BASE_DIR)

    # Misconfigured application paths are a developer error: refuse to start
    try:
        catalog = AppCatalog.from_settings(settings)
    except (InvalidApplicationError, ValueError) as ex:
        logger.error("Start-up aborted: {}", ex)
        return 1

    app = QApplication.instance() or QApplication(sys.argv[:1])

    launcher = AppLauncher(opener=str(settings.get("launcher.opener", DEFAULT_OPENER)))
    extension = FinderActionsExtension(catalog, launcher, QtClipboard(), settings)
    context = context_from_args(args)

    if args.action:
        return 0 if extension.perform(MenuAction(args.action), context) else 1

    menu = ContextMenuHandler(catalog, lambda action: extension.perform(action, context))
    menu.popup(extension.menu_actions(context))
    app.processEvents()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
