"""Read-only check for available import map upgrades."""

from __future__ import annotations

import os
import platform
import sys
from typing import List, Optional, TextIO

from constants import Constants
from importmap.loader import load_import_map
from versioning.models import PendingUpgrade
from versioning.service import iter_pending_upgrades

# ANSI styles, emitted only when the stream supports them
RESET = "\033[0m"
BANNER = "\033[1;38;2;0;50;50;48;2;47;208;128m"


def find_pending_upgrades(directory: Optional[str] = None, allow_prerelease: bool = False,
                          config_name: Optional[str] = None) -> List[PendingUpgrade]:
    """List every candidate whose eligible latest version differs from its pin."""
    import_map, _ = load_import_map(directory or os.getcwd(), config_name)
    return list(iter_pending_upgrades(import_map.get("imports") or {}, allow_prerelease))


def check_updates(directory: Optional[str] = None, allow_prerelease: bool = False,
                  config_name: Optional[str] = None) -> bool:
    """Return True if an update would change any candidate pin.

    Stops at the first outdated candidate. Never writes the import map.

    Raises:
        ConfigLoadError: If the configuration or import map cannot be loaded.
    """
    import_map, _ = load_import_map(directory or os.getcwd(), config_name)
    pending = next(iter_pending_upgrades(import_map.get("imports") or {}, allow_prerelease), None)
    return pending is not None


def supports_color(stream: TextIO) -> bool:
    """Honor NO_COLOR and only colorize TTYs."""
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def update_command(directory: str, system: Optional[str] = None, allow_prerelease: bool = False,
                   config_name: Optional[str] = None) -> str:
    """Copyable command applying the same upgrades ``check`` reported.

    Quoted values use double quotes on Windows and single quotes elsewhere.
    """
    system = system or platform.system()
    quote = Constants.QUOTE_WINDOWS if system == "Windows" else Constants.QUOTE_POSIX
    parts = [Constants.UPDATE_COMMAND, "--directory", quote.format(directory)]
    if config_name:
        parts += ["--config", quote.format(config_name)]
    if allow_prerelease:
        parts.append("--allow-pre")
    return " ".join(parts)


def print_update_advisory(directory: Optional[str] = None, stream: Optional[TextIO] = None,
                          system: Optional[str] = None, allow_prerelease: bool = False,
                          config_name: Optional[str] = None) -> None:
    """Print the "updates available" banner and the follow-up command."""
    stream = stream or sys.stdout
    headline = Constants.ADVISORY_HEADLINE
    if supports_color(stream):
        headline = f"{BANNER}{headline}{RESET}"
    print(f"{headline}{Constants.ADVISORY_FOLLOWUP}", file=stream)
    command = update_command(
        os.path.abspath(directory or os.getcwd()), system, allow_prerelease, config_name
    )
    print(command, file=stream)
