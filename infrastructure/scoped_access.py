"""Scoped access grants for paths outside the process sandbox."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from loguru import logger

from core.services.interfaces import AccessGrant


class UnsandboxedAccess:
    """Grant used when the process is not sandboxed.

    There is nothing to acquire, so both calls only log the pairing.
    """

    def start_accessing(self, path: Path) -> bool:
        logger.debug("Start accessing: {}", path)
        return True

    def stop_accessing(self, path: Path) -> None:
        logger.debug("Stop accessing: {}", path)


@contextmanager
def scoped_access(grant: AccessGrant, path: str | Path) -> Iterator[bool]:
    """Hold access to `path` for the duration of the block.

    The grant is released exactly once however the block exits.
    """
    resource = Path(path)
    granted = grant.start_accessing(resource)
    if not granted:
        logger.warning("Scoped access not granted for {}", resource)
    try:
        yield granted
    finally:
        grant.stop_accessing(resource)
