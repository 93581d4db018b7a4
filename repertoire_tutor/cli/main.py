import argparse
import logging
import os

from pydantic import ValidationError

from repertoire_tutor import constants
from repertoire_tutor.cli.classify_moves import ClassifyMovesCommand
from repertoire_tutor.cli.classify_pgn import ClassifyPGNCommand
from repertoire_tutor.cli.list_buckets import ListBucketsCommand
from repertoire_tutor.config import config_factory

COMMANDS = [
    ClassifyMovesCommand(),
    ClassifyPGNCommand(),
    ListBucketsCommand(),
]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="repertoire-tutor")
    parser.add_argument(
        "--username",
        type=str,
        default=None,
        help=f"Tracked player (defaults to ${constants.USERNAME_ENV_VAR})",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=constants.LOG_LEVELS,
        default=None,
        help=f"Logging level (defaults to ${constants.LOG_LEVEL_ENV_VAR} or WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    for command in COMMANDS:
        command.register_subparser(subparsers=subparsers)

    return parser


def main(argv: list[str] | None = None) -> int | None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        application_config = config_factory(args, os.environ)
    except ValidationError as exc:
        parser.error(f"invalid configuration: {exc.errors()[0]['msg']}")
    logging.basicConfig(level=application_config.log_level)

    for command in COMMANDS:
        if command.should_run(args):
            return command.run(args, application_config)

    parser.print_help()
    return None
