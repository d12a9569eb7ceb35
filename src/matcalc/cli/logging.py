"""``matcalc logging`` subcommands.

``set-level`` persists the level and reconfigures the package logger;
``show-path`` and ``show-level`` report the current setup.
"""

import logging

from matcalc.logging import get_logger, reset_logger
from matcalc.logging.logging import get_configured_level, _resolve_log_file
from matcalc.logging.config import save_log_level


def register_subcommands(subparsers):
    """Register logging subcommands on the provided ``argparse`` object.

    Parameters
    ----------
    subparsers : :class:`argparse._SubParsersAction`
        The ``argparse`` subparsers object to which logging commands are added.
    """

    set_level_parser = subparsers.add_parser(
        "set-level", help="Persist the logging level used by matcalc"
    )
    set_level_parser.add_argument(
        "level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level to use",
    )

    subparsers.add_parser("show-path", help="Show the log file location")
    subparsers.add_parser("show-level", help="Show the configured logging level")


def dispatch(args):
    """Execute the logging command associated with ``args.subcommand``."""

    if args.subcommand == "set-level":
        level = getattr(logging, args.level.upper())
        path = save_log_level(args.level.upper())
        reset_logger()
        get_logger(level=level, console=False).info(
            "log level set to %s in %s", args.level.upper(), path
        )
    elif args.subcommand == "show-path":
        print(_resolve_log_file().resolve())
    elif args.subcommand == "show-level":
        print(get_configured_level())
    else:
        get_logger(__name__).error("No handler for subcommand: %s", args.subcommand)
