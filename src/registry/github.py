"""GitHub-backed locators (denopkg.com and raw.githubusercontent.com)."""

from __future__ import annotations

import json
import logging
import os
import re
from typing import Dict, List, Optional

from constants import Constants
from common.http_client import fetch
from versioning.resolver import sort_newest_first
from .base import RegistryUrl

logger = logging.getLogger(__name__)


class GitHubTagsClient:
    """Minimal REST client listing repository tags.

    Supports optional authentication via GITHUB_TOKEN environment variable.
    """

    def __init__(self, base_url: Optional[str] = None, token: Optional[str] = None):
        self.base_url = base_url or Constants.GITHUB_API_BASE
        self.token = token or os.environ.get(Constants.ENV_GITHUB_TOKEN)

    def _get_headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/vnd.github+json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def get_tags(self, owner: str, repo: str) -> List[str]:
        """Fetch all tag names of ``owner/repo`` following pagination links.

        Returns:
            Tag names in API order, empty on any non-200 answer.
        """
        tags: List[str] = []
        url: Optional[str] = (
            f"{self.base_url}/repos/{owner}/{repo}/tags?per_page={Constants.REPO_API_PER_PAGE}"
        )
        while url:
            result = fetch(url, context="github", headers=self._get_headers())
            if result.status_code != 200:
                logger.warning("GitHub tags for %s/%s unavailable (HTTP %s)", owner, repo, result.status_code)
                break
            try:
                page = json.loads(result.body)
            except ValueError:
                logger.warning("GitHub tags for %s/%s returned invalid JSON", owner, repo)
                break
            if not page:
                break
            tags.extend(item["name"] for item in page if isinstance(item, dict) and "name" in item)
            url = result.next_url
        return tags


class _GitHubRepoUrl(RegistryUrl):
    def name(self) -> str:
        return f"{self._match.group('owner')}/{self._match.group('repo')}"

    def all(self) -> List[str]:
        tags = GitHubTagsClient().get_tags(self._match.group("owner"), self._match.group("repo"))
        # The tags endpoint orders by name, not by version.
        return sort_newest_first(tags)


class Denopkg(_GitHubRepoUrl):
    """``https://denopkg.com/<owner>/<repo>@<version>/...``"""

    pattern = re.compile(
        r"^https?://denopkg\.com/(?P<owner>[^/]+)/(?P<repo>[^/@]+)@(?P<version>[^/]+)(?P<path>/.*)?$"
    )


class GithubRaw(_GitHubRepoUrl):
    """``https://raw.githubusercontent.com/<owner>/<repo>/<version>/...``"""

    pattern = re.compile(
        r"^https?://raw\.githubusercontent\.com/(?P<owner>[^/]+)/(?P<repo>[^/]+)/(?P<version>[^/]+)(?P<path>/.*)?$"
    )
