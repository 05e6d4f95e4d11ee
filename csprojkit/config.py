"""Core data types and configuration for csprojkit."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ReaderConfig:
    pattern: str | None = None  # None: the reader's own glob
    encoding: str = "utf-8-sig"  # project files often start with a BOM


@dataclass
class UsingDirective:
    """A <Using> item; either attribute may be missing or empty."""
    include: str | None = None
    remove: str | None = None


@dataclass
class ProjectDocument:
    """Parsed shape of a project file, rebuilt on every lookup."""
    path: str
    property_groups: list[dict[str, str]] = field(default_factory=list)
    item_groups: list[list[UsingDirective]] = field(default_factory=list)
    import_path: str | None = None


@dataclass
class ProjectSummary:
    path: str
    root_namespace: str | None = None
    assembly_name: str | None = None
    target_framework: str | None = None
    target_frameworks: list[str] = field(default_factory=list)
    is_net6_or_later: bool | None = None
    implicit_usings: bool = False
    usings_include: list[str] = field(default_factory=list)
    usings_remove: list[str] = field(default_factory=list)
