"""csprojkit - Resolve build facts from .NET project descriptors."""

from csprojkit.config import ProjectSummary, ReaderConfig
from csprojkit.dotnet.reader import CsprojReader, ProjectReader

__version__ = "0.1.0"
__all__ = ["CsprojReader", "ProjectReader", "ProjectSummary", "ReaderConfig"]
