"""In-place upgrade of the import map's framework and site pins."""

from __future__ import annotations

import logging
import os
from typing import Optional

from constants import Constants
from importmap.loader import load_import_map, write_import_map
from versioning.models import UpdateResult
from versioning.service import iter_pending_upgrades

logger = logging.getLogger(__name__)


def add_compat_alias(imports: dict) -> bool:
    """Alias ``deco/`` to the ``$live/`` locator when only the latter exists.

    Returns:
        True if the alias was added.
    """
    if imports.get(Constants.COMPAT_ALIAS) or not imports.get(Constants.COMPAT_SOURCE_ALIAS):
        return False
    logger.info("Add %s alias", Constants.COMPAT_ALIAS)
    imports[Constants.COMPAT_ALIAS] = imports[Constants.COMPAT_SOURCE_ALIAS]
    return True


def update(directory: Optional[str] = None, allow_prerelease: bool = False,
           dry_run: bool = False, config_name: Optional[str] = None) -> UpdateResult:
    """Upgrade candidate entries of the project's import map.

    The map is written once, at the end, and only if something changed: a
    version upgrade or the ``deco/`` compatibility alias.

    Args:
        directory: Project directory (defaults to the current directory).
        allow_prerelease: Take the newest listed version even if it is a prerelease.
        dry_run: Report what would change without writing.
        config_name: Explicit configuration file name.

    Returns:
        UpdateResult describing what was changed and whether it was written.

    Raises:
        ConfigLoadError: If the configuration or import map cannot be loaded.
        ImportMapWriteError: If the updated map cannot be written.
    """
    import_map, import_map_path = load_import_map(directory or os.getcwd(), config_name)
    imports = import_map.setdefault("imports", {})
    result = UpdateResult(import_map_path=import_map_path)

    logger.info("Looking up latest versions")

    for pending in iter_pending_upgrades(imports, allow_prerelease):
        logger.info(
            "Upgrading %s %s -> %s.",
            pending.alias,
            pending.current_version,
            pending.latest_version,
        )
        imports[pending.alias] = pending.locator
        result.upgrades.append(pending)

    result.compat_alias_added = add_compat_alias(imports)

    if not result.changed:
        logger.info("Local project depends on the most recent releases.")
        return result

    if dry_run:
        logger.info("Dry run: %s left unchanged", import_map_path)
        return result

    write_import_map(import_map_path, import_map)
    result.written = True
    logger.info("Upgraded successfully")
    return result
