"""Argument parsing functionality for pinbump."""

import argparse
from constants import Actions

def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="pinbump",
        description=(
            "pinbump - Check and update version pins in a Deno import map"
        ),
        add_help=True,
    )

    parser.add_argument("action",
                        help="update: rewrite outdated pins (default); check: only report them",
                        nargs="?",
                        choices=[a.value for a in Actions],
                        default=Actions.UPDATE.value)

    parser.add_argument("--allow-pre",
                        dest="ALLOW_PRE",
                        help="Always take the newest listed version, including prereleases.",
                        action="store_true")
    parser.add_argument("-d", "--directory",
                        dest="DIRECTORY",
                        help="Project directory containing deno.json (default: current directory)",
                        action="store",
                        type=str)
    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Configuration file name inside the project directory (default: deno.json, then deno.jsonc)",
                        action="store",
                        type=str)
    parser.add_argument("--dry-run",
                        dest="DRY_RUN",
                        help="Report upgrades without writing the import map (update only).",
                        action="store_true")
    parser.add_argument("--error-on-updates",
                        dest="ERROR_ON_UPDATES",
                        help="Exit with a non-zero status code if updates are available (check only).",
                        action="store_true")

    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level (default: PINBUMP_LOG_LEVEL or INFO)",
                        action="store",
                        type=str.upper,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'])
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)
    parser.add_argument("-q", "--quiet",
                        dest="QUIET",
                        help="Do not output to console.",
                        action="store_true")

    return parser.parse_args(argv)
