"""Upward search for the nearest project file."""

from __future__ import annotations

import asyncio
import fnmatch
import logging
import os
from typing import Iterator

from csprojkit.dotnet.storage import Storage

logger = logging.getLogger(__name__)


def iter_ancestor_dirs(start_path: str) -> Iterator[str]:
    """Yield start_path's directory, then each parent up to the root.

    If start_path is a directory the walk begins there, otherwise at its
    parent, so a file that doesn't exist yet is a valid starting point.
    """
    current = os.path.abspath(start_path)
    if not os.path.isdir(current):
        current = os.path.dirname(current)

    while True:
        yield current
        parent = os.path.dirname(current)
        if parent == current:
            return
        current = parent


def matching_entries(directory: str, pattern: str) -> list[str]:
    """Entries of one directory matching pattern, sorted by name."""
    try:
        names = sorted(os.listdir(directory))
    except OSError as e:
        logger.debug(f"Skipping unreadable directory {directory}: {e}")
        return []
    return [os.path.join(directory, name) for name in fnmatch.filter(names, pattern)]


async def find_nearest_ancestor_match(
    start_path: str, pattern: str, storage: Storage,
) -> str | None:
    """Return the nearest file matching pattern at or above start_path.

    Directories are listed one at a time and the walk stops at the first
    match. Directories whose name happens to match are skipped. Never descends.
    """
    for directory in iter_ancestor_dirs(start_path):
        candidates = await asyncio.to_thread(matching_entries, directory, pattern)
        for candidate in candidates:
            if await storage.exists(candidate):
                return candidate

    logger.debug(f"No {pattern} found above {start_path}")
    return None
