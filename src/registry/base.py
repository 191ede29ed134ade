"""Base type for versioned registry locators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, List, Pattern


class RegistryUrl(ABC):
    """A locator string understood by one registry.

    Subclasses provide ``pattern``, a regex with at least a ``version`` group,
    and ``all()``, the registry's known versions newest first.
    """

    pattern: ClassVar[Pattern[str]]

    def __init__(self, url: str):
        match = self.pattern.match(url)
        if match is None:
            raise ValueError(f"{type(self).__name__} does not recognize {url}")
        self.url = url
        self._match = match

    @classmethod
    def matches(cls, url: str) -> bool:
        """Return True if ``url`` is a locator of this registry."""
        return cls.pattern.match(url) is not None

    def version(self) -> str:
        """Version currently pinned by the locator."""
        return self._match.group("version")

    @abstractmethod
    def name(self) -> str:
        """Package name as known by the registry."""

    @abstractmethod
    def all(self) -> List[str]:
        """All published versions, newest first."""

    def at(self, version: str) -> "RegistryUrl":
        """Return the same locator pinned to ``version``."""
        start, end = self._match.span("version")
        return type(self)(self.url[:start] + version + self.url[end:])

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.url!r})"

