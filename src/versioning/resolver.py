"""Selection of the version an import map entry should be pinned to."""

from typing import Optional, Sequence

import semantic_version


def parse_version(version: str) -> Optional[semantic_version.Version]:
    """Parse a registry version string, tolerating a leading ``v``.

    Returns None when the string is not a valid semantic version.
    """
    candidate = version.strip()
    if candidate[:1] in ("v", "V"):
        candidate = candidate[1:]
    try:
        return semantic_version.Version(candidate)
    except ValueError:
        return None


def is_stable(version: str) -> bool:
    """Return True for a parsable version without prerelease components."""
    parsed = parse_version(version)
    return parsed is not None and not parsed.prerelease


def eligible_latest_version(versions: Sequence[str], allow_prerelease: bool = False) -> Optional[str]:
    """Pick the upgrade target from a newest-first list of versions.

    The registry order is trusted as-is; nothing is re-sorted here.

    Args:
        versions: Version strings in registry order, newest first.
        allow_prerelease: When True the first entry is returned unconditionally.

    Returns:
        The chosen version string, unchanged, or None if none qualifies.
    """
    if allow_prerelease:
        return versions[0] if versions else None
    for version in versions:
        if is_stable(version):
            return version
    return None


def sort_newest_first(versions: Sequence[str]) -> list:
    """Order version strings newest first, dropping those that do not parse.

    Used by registries whose listing is not already ordered (e.g. the npm
    packument, whose ``versions`` object follows publication order).
    """
    parsed = []
    for version in versions:
        ver = parse_version(version)
        if ver is not None:
            parsed.append((ver, version))
    parsed.sort(key=lambda pair: pair[0], reverse=True)
    return [version for _, version in parsed]
