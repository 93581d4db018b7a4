import argparse
import logging
from pathlib import Path

from tqdm import tqdm

from repertoire_tutor.cli.base import CLICommand
from repertoire_tutor.config import AppConfig
from repertoire_tutor.services.classification_service import (
    ClassificationService,
    summarize,
)

logger = logging.getLogger(__name__)


class ClassifyPGNCommand(CLICommand):
    def should_run(self, args: argparse.Namespace) -> bool:
        return args.command == "classify-pgn"

    def run(self, args: argparse.Namespace, config: AppConfig) -> int | None:
        pgn_path: Path = args.pgn_path
        if not pgn_path.is_file():
            print(f"PGN file not found: {pgn_path}")
            return 1
        if not config.username:
            print("A username is required (--username or CHESS_USERNAME).")
            return 1

        service = ClassificationService(username=config.username)
        with tqdm(desc="Classifying openings", unit="game") as pbar:
            results = service.classify_file(
                pgn_path, progress_callback=lambda _result: pbar.update(1)
            )

        for result in results:
            print(
                f"#{result.index} | {result.white} vs {result.black} | "
                f"{result.perspective.value} | "
                f"{result.bucket.value if result.bucket else 'unclassified'} | "
                f"{result.label}"
            )

        if args.summary:
            print("Summary:")
            for bucket, count in summarize(results).most_common():
                print(f"{count:5d}  {bucket.value}")

        print(f"Classified {len(results)} games.")
        return None

    def register_subparser(self, subparsers: argparse._SubParsersAction) -> None:
        pgn_parser = subparsers.add_parser(
            "classify-pgn", help="Classify the opening of every game in a PGN file"
        )
        pgn_parser.add_argument("pgn_path", type=Path, help="PGN file to read")
        pgn_parser.add_argument(
            "--summary",
            action="store_true",
            help="Print the number of games per opening bucket",
        )
