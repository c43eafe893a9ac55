"""Command line host: turns arguments into an ActionContext.

Finder integrations (Quick Actions, launcher scripts) call the entry point
with the right-clicked folder and the selected items.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from core.models import ActionContext, MenuAction


def _absolute(raw: str) -> Path:
    return Path(raw).expanduser().absolute()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="finder-actions",
        description="Context menu actions for Finder folders and selections.",
    )
    parser.add_argument("selection", nargs="*", help="Selected files and folders")
    parser.add_argument("--target", help="Folder the menu was opened on")
    parser.add_argument(
        "--action",
        choices=[a.value for a in MenuAction],
        help="Run this action directly instead of showing the menu",
    )
    parser.add_argument("--settings", help="Path to settings.json")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def context_from_args(args: argparse.Namespace) -> ActionContext:
    """Build the action context; relative paths resolve against the cwd."""
    target = _absolute(args.target) if args.target else None
    selection = tuple(_absolute(p) for p in args.selection)
    return ActionContext(target=target, selection=selection)
