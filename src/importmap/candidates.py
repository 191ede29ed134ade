"""Selection of import map aliases eligible for automatic upgrades."""

import re

from constants import Constants

_CANDIDATE_RE = re.compile(Constants.CANDIDATE_PATTERN)


def is_candidate(alias: str) -> bool:
    """Return True if ``alias`` names one of the framework or site packages.

    The pattern is searched, not anchored: any alias containing ``apps``,
    ``deco`` or ``$live`` qualifies, so ``deco-sites/<site>`` matches with or
    without a trailing slash. ``std/`` and other third-party aliases do not.
    """
    return _CANDIDATE_RE.search(alias) is not None
