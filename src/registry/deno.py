"""deno.land third-party modules and the standard library."""

from __future__ import annotations

import logging
import re
from typing import List

from constants import Constants
from common.http_client import get_json
from .base import RegistryUrl

logger = logging.getLogger(__name__)


def fetch_deno_versions(module: str) -> List[str]:
    """Fetch the version list of a deno.land module.

    The CDN metadata already lists versions newest first.

    Args:
        module: Module name, e.g. "deco" or "std".

    Returns:
        List of version strings, empty if the module is unknown.
    """
    url = Constants.DENO_CDN_VERSIONS_URL.format(name=module)
    status, data = get_json(url, context="deno.land")
    if status != 200 or not isinstance(data, dict):
        logger.warning("No version metadata for deno.land module %s (HTTP %s)", module, status)
        return []
    versions = data.get("versions") or []
    return [v for v in versions if isinstance(v, str)]


class DenoLand(RegistryUrl):
    """``https://deno.land/x/<name>@<version>/...``"""

    pattern = re.compile(r"^https?://deno\.land/x/(?P<name>[^/@]+)@(?P<version>[^/]+)(?P<path>/.*)?$")

    def name(self) -> str:
        return self._match.group("name")

    def all(self) -> List[str]:
        return fetch_deno_versions(self.name())


class DenoStd(RegistryUrl):
    """``https://deno.land/std@<version>/...``"""

    pattern = re.compile(r"^https?://deno\.land/std@(?P<version>[^/]+)(?P<path>/.*)?$")

    def name(self) -> str:
        return "std"

    def all(self) -> List[str]:
        return fetch_deno_versions("std")
