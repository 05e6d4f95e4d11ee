"""Shared test helpers."""

from __future__ import annotations

import pytest


class SequenceStorage:
    """Storage fake that hands out contents in call order, whatever the path.

    Records every path read so tests can assert on import resolution.
    """

    def __init__(self, *contents: str) -> None:
        self.contents = list(contents)
        self.reads: list[str] = []

    async def read(self, path: str) -> str:
        self.reads.append(path)
        if len(self.reads) > len(self.contents):
            raise FileNotFoundError(path)
        return self.contents[len(self.reads) - 1]

    async def exists(self, path: str) -> bool:
        return False


@pytest.fixture()
def storage():
    """Factory: storage(content, [import_content, ...])."""
    return SequenceStorage
