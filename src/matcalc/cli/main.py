# matcalc/cli/main.py
import argparse

from matcalc.cli import config as config_cli
from matcalc.cli import logging as logging_cli
from matcalc.cli.session import run_session
from matcalc.logging.config import load_pretty


def build_parser():
    parser = argparse.ArgumentParser(prog="matcalc", description="Interactive matrix calculator")
    subparsers = parser.add_subparsers(dest="command")

    run_parser = subparsers.add_parser("run", help="Start the interactive calculator")
    run_parser.add_argument(
        "--pretty",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Render matrix results as tables (default: stored setting)",
    )

    logging_parser = subparsers.add_parser("logging", help="Logging utilities")
    logging_subparsers = logging_parser.add_subparsers(dest="subcommand", required=True)
    logging_cli.register_subcommands(logging_subparsers)

    config_parser = subparsers.add_parser("config", help="Stored settings")
    config_subparsers = config_parser.add_subparsers(dest="subcommand", required=True)
    config_cli.register_subcommands(config_subparsers)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.command in (None, "run"):
        pretty = getattr(args, "pretty", None)
        run_session(pretty=load_pretty() if pretty is None else pretty)
    elif args.command == "logging":
        logging_cli.dispatch(args)
    elif args.command == "config":
        config_cli.dispatch(args)


if __name__ == "__main__":
    main()
