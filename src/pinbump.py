"""pinbump - keep a Deno import map on the latest framework and site releases

    Returns:
        int: Exit code
"""
import logging
import os
import sys

from constants import Actions, Constants, ExitCodes
from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from args import parse_args
from importmap.loader import ConfigLoadError, ImportMapWriteError
from checker import find_pending_upgrades, print_update_advisory
from updater import update


def run_check(args):
    """Report outdated candidates and print the update advisory.

    Returns:
        int: Exit code
    """
    pending = find_pending_upgrades(args.DIRECTORY, args.ALLOW_PRE, args.CONFIG)
    if not pending:
        logging.info("Local project depends on the most recent releases.")
        return ExitCodes.SUCCESS.value
    for upgrade in pending:
        logging.info(
            "%s %s -> %s",
            upgrade.alias,
            upgrade.current_version,
            upgrade.latest_version,
        )
    if not args.QUIET:
        print_update_advisory(
            args.DIRECTORY, allow_prerelease=args.ALLOW_PRE, config_name=args.CONFIG
        )
    if args.ERROR_ON_UPDATES:
        return ExitCodes.UPDATES_AVAILABLE.value
    return ExitCodes.SUCCESS.value


def run_update(args):
    """Apply upgrades to the import map.

    Returns:
        int: Exit code
    """
    update(
        args.DIRECTORY,
        allow_prerelease=args.ALLOW_PRE,
        dry_run=args.DRY_RUN,
        config_name=args.CONFIG,
    )
    return ExitCodes.SUCCESS.value


def main(argv=None):
    """Main function of the program."""
    logger = logging.getLogger(__name__)

    args = parse_args(argv)
    # Honor CLI --loglevel by passing it to centralized logger via env
    if getattr(args, "LOG_LEVEL", None):
        os.environ[Constants.ENV_LOG_LEVEL] = args.LOG_LEVEL
    configure_logging(log_file=args.LOG_FILE, quiet=args.QUIET)

    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(event="function_entry", component="cli", action=args.action)
        )

    if args.DRY_RUN and args.action != Actions.UPDATE.value:
        logging.warning("--dry-run only applies to the update action.")
    if args.ERROR_ON_UPDATES and args.action != Actions.CHECK.value:
        logging.warning("--error-on-updates only applies to the check action.")

    try:
        if args.action == Actions.CHECK.value:
            return run_check(args)
        return run_update(args)
    except ConfigLoadError as e:
        logging.error("Could not load import map: %s", e)
        return ExitCodes.FILE_ERROR.value
    except ImportMapWriteError as e:
        logging.error("Could not write import map: %s", e)
        return ExitCodes.FILE_ERROR.value


if __name__ == "__main__":
    sys.exit(main())
