"""
Helpers for locating and replacing the file that backs a member store.
"""

from __future__ import annotations

import os
from pathlib import Path

from .logging import get_logger

logger = get_logger("utils.files")


class StoreFile:
    """
    A store's backing file on disk.

    The store file is also the consistency artifact shipped between cluster
    members, so ``read_bytes`` returns exactly what a peer would receive.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"StoreFile({str(self.path)!r})"

    def __fspath__(self) -> str:
        return str(self.path)

    def exists(self) -> bool:
        return self.path.exists()

    def destroy(self) -> bool:
        """
        Remove the file. Returns False if there was nothing to remove.
        """
        try:
            self.path.unlink()
        except FileNotFoundError:
            return False
        logger.debug("Store file destroyed", extra={"path": str(self.path)})
        return True

    def read_bytes(self) -> bytes:
        return self.path.read_bytes()

    def parent_directory(self) -> Path:
        return self.path.resolve().parent
