import argparse

from repertoire_tutor.analysis.buckets import (
    BLACK_BUCKETS,
    BUCKET_LABELS,
    WHITE_BUCKETS,
    OpeningBucket,
)
from repertoire_tutor.analysis.openings import Perspective
from repertoire_tutor.cli.base import CLICommand
from repertoire_tutor.config import AppConfig


class ListBucketsCommand(CLICommand):
    def should_run(self, args: argparse.Namespace) -> bool:
        return args.command == "list-buckets"

    def run(self, args: argparse.Namespace, config: AppConfig) -> None:
        buckets = list(OpeningBucket)
        if args.color == Perspective.WHITE:
            buckets = [b for b in buckets if b in WHITE_BUCKETS]
        elif args.color == Perspective.BLACK:
            buckets = [b for b in buckets if b in BLACK_BUCKETS]

        for bucket in buckets:
            print(f"{bucket.value} | {BUCKET_LABELS[bucket]}")
        print(f"Listed {len(buckets)} buckets.")

    def register_subparser(self, subparsers: argparse._SubParsersAction) -> None:
        list_parser = subparsers.add_parser(
            "list-buckets", help="List opening buckets and their labels"
        )
        list_parser.add_argument(
            "--color",
            choices=[p.value for p in Perspective],
            help="Only list buckets for one repertoire",
        )
