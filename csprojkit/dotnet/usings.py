"""<Using> item extraction from <ItemGroup> elements."""

from __future__ import annotations

from csprojkit.config import ProjectDocument, UsingDirective


def collect_usings(document: ProjectDocument) -> list[UsingDirective]:
    """Flatten every <Using> across every item group, in document order.

    Imports are not followed here.
    """
    usings: list[UsingDirective] = []
    for group in document.item_groups:
        usings.extend(group)
    return usings


def usings_include(usings: list[UsingDirective]) -> list[str]:
    """Include values in order. An empty Include="" still counts."""
    return [u.include for u in usings if u.include is not None]


def usings_remove(usings: list[UsingDirective]) -> list[str]:
    """Remove values in order. An empty Remove="" still counts."""
    return [u.remove for u in usings if u.remove is not None]
