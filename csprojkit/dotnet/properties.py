"""Scalar property resolution with single-hop <Import> fallback."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from csprojkit.config import ProjectDocument
from csprojkit.dotnet.document import ProjectFileError, load_document
from csprojkit.dotnet.storage import Storage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Found:
    value: str


@dataclass(frozen=True)
class NotPresent:
    pass


@dataclass(frozen=True)
class Malformed:
    error: ProjectFileError


Lookup = Found | NotPresent | Malformed

NOT_PRESENT = NotPresent()


def find_in_groups(groups: list[dict[str, str]], name: str) -> Lookup:
    """Return the value from the first group that defines `name`.

    Groups are never merged: a later group can't fill in for an earlier
    one that lacks the property, it simply gets its own turn.
    """
    for group in groups:
        if name in group:
            return Found(group[name])
    return NOT_PRESENT


def resolve_import_path(document: ProjectDocument) -> str | None:
    """Resolve the document's <Import Project="..."> against its directory."""
    if document.import_path is None:
        return None
    clean = document.import_path.replace("\\", os.sep).replace("/", os.sep)
    base_dir = os.path.dirname(document.path)
    return os.path.abspath(os.path.join(base_dir, clean))


async def resolve_property(
    storage: Storage, document: ProjectDocument, name: str,
) -> Lookup:
    """Resolve a property on an already loaded document.

    The import is followed only when the document has no property groups
    at all, and only once: an import inside the imported file is ignored.

    Raises:
        ProjectFileError: If the import target can't be read or parsed.
    """
    if document.property_groups:
        return find_in_groups(document.property_groups, name)

    target = resolve_import_path(document)
    if target is None:
        return NOT_PRESENT

    logger.debug(f"Following import {document.import_path} -> {target}")
    imported = await load_document(storage, target)
    return find_in_groups(imported.property_groups, name)


async def lookup_property(storage: Storage, path: str, name: str) -> Lookup:
    """Load `path` and resolve `name`, folding load failures into Malformed."""
    try:
        document = await load_document(storage, path)
        return await resolve_property(storage, document, name)
    except ProjectFileError as e:
        return Malformed(e)
