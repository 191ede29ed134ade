"""Resolution of import map candidates against their registries."""

from __future__ import annotations

import logging
from typing import Dict, Iterator, Optional

from common.logging_utils import extra_context, is_debug_enabled
from importmap.candidates import is_candidate
from registry import REGISTRIES, lookup
from .models import PendingUpgrade
from .resolver import eligible_latest_version

logger = logging.getLogger(__name__)


def _debug_skip(alias: str, outcome: str) -> None:
    if is_debug_enabled(logger):
        logger.debug(
            "Skipping import map entry",
            extra=extra_context(
                event="decision",
                component="service",
                action="resolve_candidate",
                outcome=outcome,
                alias=alias
            )
        )


def resolve_candidate(alias: str, locator: str, allow_prerelease: bool = False,
                      registries=REGISTRIES) -> Optional[PendingUpgrade]:
    """Resolve one import map entry.

    Returns:
        A PendingUpgrade when the eligible latest version differs from the
        pinned one, otherwise None (not a candidate, unknown registry, no
        eligible version or already current).
    """
    if not is_candidate(alias):
        return None
    if not isinstance(locator, str):
        _debug_skip(alias, "not_a_string")
        return None

    url = lookup(locator, registries)
    if url is None:
        _debug_skip(alias, "unrecognized_locator")
        return None

    versions = url.all()
    current_version = url.version()
    latest_version = eligible_latest_version(versions, allow_prerelease)

    if latest_version is None:
        _debug_skip(alias, "no_eligible_version")
        return None
    if latest_version == current_version:
        _debug_skip(alias, "up_to_date")
        return None
    return PendingUpgrade(
        alias=alias,
        current_version=current_version,
        latest_version=latest_version,
        locator=url.at(latest_version).url,
    )


def iter_pending_upgrades(imports: Dict[str, str], allow_prerelease: bool = False,
                          registries=REGISTRIES) -> Iterator[PendingUpgrade]:
    """Yield upgrades for candidate aliases, in import map order.

    Entries are resolved one at a time and lazily, so a consumer that stops
    early saves the remaining registry calls.
    """
    for alias, locator in list(imports.items()):
        pending = resolve_candidate(alias, locator, allow_prerelease, registries)
        if pending is not None:
            yield pending
