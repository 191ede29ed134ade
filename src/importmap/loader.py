"""Locate, parse and persist a project's import map."""

from __future__ import annotations

import json
import logging
import os
import re
from typing import Any, Dict, Optional, Tuple

from constants import Constants
from common.logging_utils import extra_context, is_debug_enabled

logger = logging.getLogger(__name__)

# Strings are matched first so "https://..." inside a value is never taken for a comment.
_JSONC_TOKEN_RE = re.compile(r'"(?:\\.|[^"\\])*"|//[^\n]*|/\*.*?\*/', re.DOTALL)
_TRAILING_COMMA_RE = re.compile(r',(\s*[}\]])')


class ConfigLoadError(Exception):
    """Raised when the project configuration or import map cannot be loaded."""


class ImportMapLoadError(ConfigLoadError):
    """Raised when the import map file is missing or is not valid JSON."""


class ImportMapWriteError(Exception):
    """Raised when the updated import map cannot be written back."""


def strip_jsonc_comments(content: str) -> str:
    """Strip comments and trailing commas from JSONC content.

    Args:
        content: JSONC string content

    Returns:
        JSON string with comments removed
    """
    content = _JSONC_TOKEN_RE.sub(
        lambda m: m.group(0) if m.group(0).startswith('"') else "", content
    )
    return _TRAILING_COMMA_RE.sub(r'\1', content)


def _read_json(path: str, jsonc: bool = False) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as fh:
            content = fh.read()
    except OSError as exc:
        raise ImportMapLoadError(f"Cannot read {path}: {exc}") from exc
    if jsonc:
        content = strip_jsonc_comments(content)
    try:
        return json.loads(content)
    except json.JSONDecodeError as exc:
        raise ImportMapLoadError(f"Invalid JSON in {path}: {exc}") from exc


def find_config_file(directory: str, config_name: Optional[str] = None) -> str:
    """Return the path of the project's configuration file.

    Args:
        directory: Project directory.
        config_name: Explicit file name; otherwise deno.json then deno.jsonc.

    Raises:
        ConfigLoadError: If no configuration file exists.
    """
    names = [config_name] if config_name else Constants.CONFIG_FILES
    for name in names:
        path = os.path.join(directory, name)
        if os.path.isfile(path):
            return path
    raise ConfigLoadError(
        f"No configuration file ({', '.join(names)}) found in {os.path.abspath(directory)}"
    )


def resolve_import_map_path(directory: str, config_name: Optional[str] = None) -> str:
    """Resolve the absolute path of the import map named by the configuration."""
    config_path = find_config_file(directory, config_name)
    config = _read_json(config_path, jsonc=config_path.endswith(".jsonc"))
    if not isinstance(config, dict):
        raise ConfigLoadError(f"{config_path} does not contain a JSON object")
    import_map_file = config.get(Constants.CONFIG_IMPORT_MAP_KEY) or Constants.DEFAULT_IMPORT_MAP
    if not isinstance(import_map_file, str):
        raise ConfigLoadError(f"'{Constants.CONFIG_IMPORT_MAP_KEY}' in {config_path} must be a string")
    if "://" in import_map_file:
        raise ConfigLoadError(f"Remote import maps are not supported: {import_map_file}")
    base_dir = os.path.dirname(os.path.abspath(config_path))
    return os.path.normpath(os.path.join(base_dir, import_map_file))


def load_import_map(directory: str, config_name: Optional[str] = None) -> Tuple[Dict[str, Any], str]:
    """Load the import map referenced by the project in ``directory``.

    Args:
        directory: Project directory holding deno.json / deno.jsonc.
        config_name: Optional explicit configuration file name.

    Returns:
        Tuple of (parsed import map, absolute import map path)

    Raises:
        ConfigLoadError: On a missing or invalid configuration or import map.
    """
    import_map_path = resolve_import_map_path(directory, config_name)
    import_map = _read_json(import_map_path)
    if not isinstance(import_map, dict):
        raise ImportMapLoadError(f"{import_map_path} does not contain a JSON object")
    imports = import_map.get("imports")
    if imports is not None and not isinstance(imports, dict):
        raise ImportMapLoadError(f"'imports' in {import_map_path} must be an object")
    if is_debug_enabled(logger):
        logger.debug(
            "Loaded import map",
            extra=extra_context(
                event="load",
                component="loader",
                action="load_import_map",
                target=import_map_path,
                count=len(imports or {})
            )
        )
    return import_map, import_map_path


def dumps_import_map(import_map: Dict[str, Any]) -> str:
    """Serialize an import map the way it is stored on disk."""
    return json.dumps(import_map, indent=Constants.IMPORT_MAP_INDENT, ensure_ascii=False) + "\n"


def write_import_map(path: str, import_map: Dict[str, Any]) -> None:
    """Overwrite ``path`` with ``import_map``, keeping key order.

    Raises:
        ImportMapWriteError: If the file cannot be written.
    """
    try:
        with open(path, "w", encoding="utf-8") as fh:
            fh.write(dumps_import_map(import_map))
    except OSError as exc:
        raise ImportMapWriteError(f"Cannot write {path}: {exc}") from exc
