import argparse

from repertoire_tutor.analysis.buckets import bucket_label
from repertoire_tutor.analysis.openings import Perspective, classify_opening
from repertoire_tutor.cli.base import CLICommand
from repertoire_tutor.config import AppConfig


class ClassifyMovesCommand(CLICommand):
    def should_run(self, args: argparse.Namespace) -> bool:
        return args.command == "classify-moves"

    def run(self, args: argparse.Namespace, config: AppConfig) -> None:
        bucket = classify_opening(args.moves, args.color)
        if bucket is None:
            print("unclassified")
            return
        print(f"{bucket.value} | {bucket_label(bucket)}")

    def register_subparser(self, subparsers: argparse._SubParsersAction) -> None:
        classify_parser = subparsers.add_parser(
            "classify-moves", help="Classify the opening of a SAN move list"
        )
        classify_parser.add_argument(
            "moves", nargs="+", help="SAN moves in play order, e.g. e4 e5 Nf3"
        )
        classify_parser.add_argument(
            "--color",
            choices=[p.value for p in Perspective],
            default=Perspective.WHITE.value,
            help="Side played by the tracked player",
        )
