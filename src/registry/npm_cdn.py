"""CDNs serving npm packages (esm.sh, unpkg, jsDelivr)."""

from __future__ import annotations

import logging
import re
from typing import List

from constants import Constants
from common.http_client import get_json
from versioning.resolver import sort_newest_first
from .base import RegistryUrl

logger = logging.getLogger(__name__)

_NPM_NAME = r"(?P<name>(?:@[^/@]+/)?[^/@?]+)"


def fetch_npm_versions(package: str) -> List[str]:
    """Fetch published versions of an npm package, newest first.

    The packument lists versions in publication order, so they are sorted here.
    """
    status, data = get_json(f"{Constants.REGISTRY_URL_NPM}{package}", context="npm")
    if status != 200 or not isinstance(data, dict):
        logger.warning("No npm metadata for %s (HTTP %s)", package, status)
        return []
    return sort_newest_first(list((data.get("versions") or {}).keys()))


class _NpmCdnUrl(RegistryUrl):
    def name(self) -> str:
        return self._match.group("name")

    def all(self) -> List[str]:
        return fetch_npm_versions(self.name())


class EsmSh(_NpmCdnUrl):
    """``https://esm.sh/[v<n>/]<package>@<version>...``"""

    pattern = re.compile(r"^https?://esm\.sh/(?:v\d+/)?" + _NPM_NAME + r"@(?P<version>[^/?]+)(?P<path>.*)$")


class Unpkg(_NpmCdnUrl):
    """``https://unpkg.com/<package>@<version>...``"""

    pattern = re.compile(r"^https?://unpkg\.com/" + _NPM_NAME + r"@(?P<version>[^/?]+)(?P<path>.*)$")


class JsDelivr(_NpmCdnUrl):
    """``https://cdn.jsdelivr.net/npm/<package>@<version>...``"""

    pattern = re.compile(
        r"^https?://cdn\.jsdelivr\.net/npm/" + _NPM_NAME + r"@(?P<version>[^/?]+)(?P<path>.*)$"
    )
