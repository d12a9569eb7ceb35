"""Command-line helpers for persisted session settings."""

from matcalc.logging import get_logger
from matcalc.logging.config import load_config, save_pretty


def register_subcommands(subparsers):
    pretty_parser = subparsers.add_parser(
        "set-pretty", help="Render matrices as tables by default"
    )
    pretty_parser.add_argument("state", choices=["on", "off"])

    subparsers.add_parser("show", help="Print the stored settings")


def dispatch(args):
    """Execute the config command associated with ``args.subcommand``."""

    if args.subcommand == "set-pretty":
        save_pretty(args.state == "on")
    elif args.subcommand == "show":
        config = load_config()
        for key in sorted(config):
            print(f"{key} = {config[key]}")
    else:
        get_logger(__name__).error("No handler for subcommand: %s", args.subcommand)
