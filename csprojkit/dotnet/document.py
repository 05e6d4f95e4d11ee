"""Parse .csproj files (XML with MSBuild schema) into a ProjectDocument."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from csprojkit.config import ProjectDocument, UsingDirective
from csprojkit.dotnet.storage import Storage


class ProjectFileError(Exception):
    """A project file could not be turned into a ProjectDocument."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class DocumentReadError(ProjectFileError):
    """The file could not be read from storage."""


class MalformedDocumentError(ProjectFileError):
    """The file content is not well-formed XML."""


def _local_name(tag: str) -> str:
    # Legacy projects put everything in the msbuild/2003 namespace
    if tag.startswith("{"):
        return tag.split("}", 1)[1]
    return tag


def _children(elem: ET.Element, name: str) -> list[ET.Element]:
    return [child for child in elem if _local_name(child.tag) == name]


def _parse_property_group(elem: ET.Element) -> dict[str, str]:
    group: dict[str, str] = {}
    for prop in elem:
        group.setdefault(_local_name(prop.tag), prop.text or "")
    return group


def _parse_item_group(elem: ET.Element) -> list[UsingDirective]:
    return [
        UsingDirective(include=using.get("Include"), remove=using.get("Remove"))
        for using in _children(elem, "Using")
    ]


def parse_document(content: str, path: str) -> ProjectDocument:
    """Parse project file content.

    Any well-formed XML parses; a root element other than <Project> gives
    an empty document. Only direct children of <Project> are considered,
    so groups nested under <Target> or <Choose> are ignored.

    Raises:
        MalformedDocumentError: If the content is not well-formed XML.
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise MalformedDocumentError(path, str(e)) from e

    document = ProjectDocument(path=path)
    if _local_name(root.tag) != "Project":
        return document

    document.property_groups = [
        _parse_property_group(pg) for pg in _children(root, "PropertyGroup")
    ]
    document.item_groups = [
        _parse_item_group(ig) for ig in _children(root, "ItemGroup")
    ]

    imports = _children(root, "Import")
    if imports:
        document.import_path = imports[0].get("Project")

    return document


async def load_document(storage: Storage, path: str) -> ProjectDocument:
    """Read a project file from storage and parse it.

    Raises:
        DocumentReadError: If storage cannot produce the content, including
            when the configured encoding is unknown.
        MalformedDocumentError: If the content is not well-formed XML.
    """
    try:
        content = await storage.read(path)
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise DocumentReadError(path, str(e)) from e

    return parse_document(content, path)
