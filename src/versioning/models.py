"""Data models for version checks and import map updates."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class PendingUpgrade:
    """An import map alias whose pinned version is behind the eligible latest."""
    alias: str
    current_version: Optional[str]
    latest_version: str
    locator: str  # locator string pinned to latest_version


@dataclass
class UpdateResult:
    """Outcome of one update pass over an import map."""
    import_map_path: str
    upgrades: List[PendingUpgrade] = field(default_factory=list)
    compat_alias_added: bool = False
    written: bool = False

    @property
    def changed(self) -> bool:
        """True when the in-memory import map differs from what was loaded."""
        return bool(self.upgrades) or self.compat_alias_added
