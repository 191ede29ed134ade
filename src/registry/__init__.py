"""Registry lookups for import map locators."""

from typing import Iterable, Optional, Type

from .base import RegistryUrl
from .deno import DenoLand, DenoStd
from .github import Denopkg, GithubRaw
from .npm_cdn import EsmSh, JsDelivr, Unpkg

REGISTRIES = [DenoLand, DenoStd, Denopkg, GithubRaw, EsmSh, Unpkg, JsDelivr]


def lookup(url: str, registries: Iterable[Type[RegistryUrl]] = REGISTRIES) -> Optional[RegistryUrl]:
    """Return a registry locator for ``url``, or None if no registry recognizes it."""
    for registry in registries:
        if registry.matches(url):
            return registry(url)
    return None


__all__ = [
    "REGISTRIES",
    "RegistryUrl",
    "lookup",
    "DenoLand",
    "DenoStd",
    "Denopkg",
    "GithubRaw",
    "EsmSh",
    "Unpkg",
    "JsDelivr",
]
