"""Storage collaborator used by the project readers."""

from __future__ import annotations

import asyncio
import os
from typing import Protocol


class Storage(Protocol):
    """Protocol for anything that can hand out project file content."""

    async def read(self, path: str) -> str:
        """Return the text content of a file.

        Raises OSError when the path is missing or unreadable.
        """
        ...

    async def exists(self, path: str) -> bool:
        """Return True if the path points at an existing file."""
        ...


class FileStorage:
    """Local disk storage.

    Reads are synchronous file calls pushed onto a worker thread with
    asyncio.to_thread() so the event loop never blocks on disk.
    """

    def __init__(self, encoding: str = "utf-8-sig") -> None:
        self.encoding = encoding

    async def read(self, path: str) -> str:
        return await asyncio.to_thread(self._read_sync, path)

    async def exists(self, path: str) -> bool:
        return await asyncio.to_thread(os.path.isfile, path)

    def _read_sync(self, path: str) -> str:
        with open(path, "r", encoding=self.encoding) as f:
            return f.read()
