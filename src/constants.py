"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    CONNECTION_ERROR = 2
    UPDATES_AVAILABLE = 3


class Actions(Enum):
    """Top-level actions supported by the CLI.

    Args:
        Enum (string): Action names accepted on the command line.
    """

    UPDATE = "update"
    CHECK = "check"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    # Project configuration
    CONFIG_FILES = ["deno.json", "deno.jsonc"]
    CONFIG_IMPORT_MAP_KEY = "importMap"
    DEFAULT_IMPORT_MAP = "./import_map.json"
    IMPORT_MAP_INDENT = 2

    # Aliases considered for automatic upgrades (searched, not anchored)
    CANDIDATE_PATTERN = r"(apps)|(deco)|(\$live)|(deco-sites/.*/$)"
    COMPAT_ALIAS = "deco/"
    COMPAT_SOURCE_ALIAS = "$live/"

    # Registries
    DENO_CDN_VERSIONS_URL = "https://cdn.deno.land/{name}/meta/versions.json"
    REGISTRY_URL_NPM = "https://registry.npmjs.org/"
    GITHUB_API_BASE = "https://api.github.com"
    ENV_GITHUB_TOKEN = "GITHUB_TOKEN"
    REPO_API_PER_PAGE = 100
    REQUEST_TIMEOUT = 30  # Timeout in seconds for all HTTP requests

    # Logging
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    ENV_LOG_LEVEL = "PINBUMP_LOG_LEVEL"

    # Advisory printed when `check` finds updates
    ADVISORY_HEADLINE = " Updates available! "
    ADVISORY_FOLLOWUP = " To update, run:"
    UPDATE_COMMAND = "pinbump update"
    QUOTE_WINDOWS = '"{}"'
    QUOTE_POSIX = "'{}'"
