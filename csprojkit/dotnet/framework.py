"""Target framework moniker version parsing."""

from __future__ import annotations

import re

# The version run directly after "net", e.g. net6.0 -> 6.0, net48 -> 48.
# netcoreapp3.1 has no digits right after "net" and so never matches.
_VERSION_RE = re.compile(r"(?<=net)\d+(?:\.\d+)*", re.IGNORECASE)

DOTNET6 = 6.0


def framework_version(moniker: str) -> float | None:
    """Parse the numeric version out of a moniker like 'net6.0'.

    Returns None when there is no version run or it isn't a valid float
    (multi-dot runs such as '5.0.1').
    """
    match = _VERSION_RE.search(moniker)
    if match is None:
        return None
    try:
        return float(match.group(0))
    except ValueError:
        return None


def is_at_least(moniker: str | None, minimum: float) -> bool | None:
    """Compare a moniker against a minimum version.

    None means no target framework was resolved at all, which is distinct
    from a framework that is resolved but too old (False).
    """
    if not moniker:
        return None
    version = framework_version(moniker)
    if version is None:
        return False
    return version >= minimum


def is_at_least_dotnet6(moniker: str | None) -> bool | None:
    return is_at_least(moniker, DOTNET6)
