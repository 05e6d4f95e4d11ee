"""Project readers: the public face of project file resolution.

Every query re-reads the project file from storage. Nothing is cached, so
two queries on the same reader never share state and may run concurrently.
A file that is missing or malformed never raises out of a query: it is
logged once and the query returns its empty answer (None, False or []).
"""

from __future__ import annotations

import asyncio
import logging

from csprojkit.config import ProjectSummary, ReaderConfig, UsingDirective
from csprojkit.dotnet.document import ProjectFileError, load_document
from csprojkit.dotnet.framework import is_at_least_dotnet6
from csprojkit.dotnet.locator import find_nearest_ancestor_match
from csprojkit.dotnet.properties import Found, Lookup, Malformed, lookup_property
from csprojkit.dotnet.storage import FileStorage, Storage
from csprojkit.dotnet.usings import collect_usings, usings_include, usings_remove

logger = logging.getLogger(__name__)


class ProjectReader:
    """Binds one project file path; subclasses set the file glob."""

    pattern = "*.*proj"

    def __init__(
        self,
        file_path: str,
        storage: Storage | None = None,
        config: ReaderConfig | None = None,
    ) -> None:
        self._file_path = file_path
        self.config = config or ReaderConfig()
        self.storage = storage or FileStorage(self.config.encoding)

    @property
    def file_path(self) -> str:
        return self._file_path

    def get_file_path(self) -> str:
        return self._file_path

    @classmethod
    async def create_from_path(
        cls,
        start_path: str,
        storage: Storage | None = None,
        config: ReaderConfig | None = None,
    ) -> ProjectReader | None:
        """Find the nearest project file at or above start_path.

        Returns a reader bound to it, or None if no ancestor has one.
        """
        config = config or ReaderConfig()
        storage = storage or FileStorage(config.encoding)
        pattern = config.pattern or cls.pattern

        found = await find_nearest_ancestor_match(start_path, pattern, storage)
        if found is None:
            return None
        return cls(found, storage=storage, config=config)

    async def _lookup(self, name: str) -> Lookup:
        result = await lookup_property(self.storage, self._file_path, name)
        if isinstance(result, Malformed):
            logger.error(f"Failed to load project file {result.error}")
        return result

    async def _get_property(self, name: str) -> str | None:
        result = await self._lookup(name)
        if isinstance(result, Found):
            return result.value
        return None

    async def _get_usings(self) -> list[UsingDirective]:
        try:
            document = await load_document(self.storage, self._file_path)
        except ProjectFileError as e:
            logger.error(f"Failed to load project file {e}")
            return []
        return collect_usings(document)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._file_path!r})"


class CsprojReader(ProjectReader):
    """Reader for C# .csproj files."""

    pattern = "*.csproj"

    async def get_root_namespace(self) -> str | None:
        return await self._get_property("RootNamespace")

    async def get_assembly_name(self) -> str | None:
        return await self._get_property("AssemblyName")

    async def get_target_framework(self) -> str | None:
        """The first TargetFramework of this project file, or None."""
        return await self._get_property("TargetFramework")

    async def get_target_frameworks(self) -> list[str]:
        """All target frameworks, in declaration order.

        Multi-targeting projects list them in <TargetFrameworks> separated
        by ';'. Falls back to the single <TargetFramework>.
        """
        result = await self._lookup("TargetFrameworks")
        if isinstance(result, Malformed):
            return []
        if isinstance(result, Found):
            return [f.strip() for f in result.value.split(";") if f.strip()]

        framework = await self.get_target_framework()
        return [framework] if framework else []

    async def is_target_framework_higher_than_or_equal_to_dotnet6(self) -> bool | None:
        """Whether the target framework is net6.0 or later.

        None when no target framework is found at all.
        """
        framework = await self.get_target_framework()
        return is_at_least_dotnet6(framework)

    async def use_implicit_usings(self) -> bool:
        """Whether <ImplicitUsings> is exactly `enable` (case-sensitive)."""
        value = await self._get_property("ImplicitUsings")
        return value == "enable"

    async def get_usings_include(self) -> list[str]:
        """Namespaces listed as <Using Include="..."/>."""
        return usings_include(await self._get_usings())

    async def get_usings_remove(self) -> list[str]:
        """Namespaces listed as <Using Remove="..."/>."""
        return usings_remove(await self._get_usings())

    async def summarize(self) -> ProjectSummary:
        """Run every query concurrently and collect the answers."""
        (
            root_namespace,
            assembly_name,
            target_framework,
            target_frameworks,
            is_net6,
            implicit_usings,
            include,
            remove,
        ) = await asyncio.gather(
            self.get_root_namespace(),
            self.get_assembly_name(),
            self.get_target_framework(),
            self.get_target_frameworks(),
            self.is_target_framework_higher_than_or_equal_to_dotnet6(),
            self.use_implicit_usings(),
            self.get_usings_include(),
            self.get_usings_remove(),
        )
        return ProjectSummary(
            path=self._file_path,
            root_namespace=root_namespace,
            assembly_name=assembly_name,
            target_framework=target_framework,
            target_frameworks=target_frameworks,
            is_net6_or_later=is_net6,
            implicit_usings=implicit_usings,
            usings_include=include,
            usings_remove=remove,
        )
