"""Filesystem helpers behind the menu actions.

Covers unique name synthesis for new files, empty file creation, working
directory selection for launches, and turning a selection into clipboard text.
"""

from __future__ import annotations

from collections.abc import Iterable
import os
from pathlib import Path

from loguru import logger

from core.errors import FileSystemError

DEFAULT_BASE_NAME = "untitled"


def unique_filename(
    directory: str | Path, base_name: str = DEFAULT_BASE_NAME, extension: str = ""
) -> str:
    """Return a file name that does not exist in `directory` at check time.

    Candidates are ``<base><ext>``, then ``<base> 1<ext>``, ``<base> 2<ext>``
    and so on. Nothing is reserved, so concurrent callers may race.
    """
    folder = Path(directory)
    filename = f"{base_name}{extension}"
    counter = 1
    while os.path.lexists(folder / filename):
        filename = f"{base_name} {counter}{extension}"
        counter += 1
    return filename


def create_empty_file(
    directory: str | Path, base_name: str = DEFAULT_BASE_NAME, extension: str = ""
) -> Path:
    """Create a zero-byte file with a unique name in `directory`.

    Creation is exclusive: an existing file is never overwritten.

    Raises:
        FileSystemError: if the file could not be created.
    """
    folder = Path(directory)
    path = folder / unique_filename(folder, base_name, extension)
    try:
        with path.open("x", encoding="utf-8"):
            pass
    except OSError as ex:
        raise FileSystemError(path, ex) from ex
    logger.info("Created empty file: {}", path)
    return path


def working_directory_for(target: str | Path) -> Path:
    """Directory a process should run in for `target`."""
    path = Path(target)
    return path if path.is_dir() else path.parent


def relative_path(path: str | Path, base: str | Path | None = None) -> str:
    """Return `path` relative to `base`, or unchanged when `base` is None."""
    if base is None:
        return os.fspath(path)
    return os.path.relpath(os.fspath(path), os.fspath(base))


def serialize_selection(
    paths: Iterable[str | Path], base: str | Path | None = None
) -> str | None:
    """Join the selection into newline-separated text.

    Returns None for an empty selection so callers can skip the clipboard.
    """
    lines = [relative_path(p, base) for p in paths]
    if not lines:
        return None
    return "\n".join(lines)
