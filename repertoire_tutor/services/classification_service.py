from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

import chess.pgn

from repertoire_tutor.analysis.buckets import OpeningBucket, bucket_label
from repertoire_tutor.analysis.openings import Perspective, classify_opening
from repertoire_tutor.utils.pgn_utils import iter_games, player_perspective, san_moves

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameClassification:
    index: int
    white: str | None
    black: str | None
    perspective: Perspective
    bucket: OpeningBucket | None
    plies: int

    @property
    def label(self) -> str:
        return bucket_label(self.bucket)


class ClassificationService:
    def __init__(self, username: str) -> None:
        self.username = username

    def classify_game(self, game: chess.pgn.Game, index: int = 0) -> GameClassification:
        moves = san_moves(game)
        perspective = player_perspective(game, self.username)
        return GameClassification(
            index=index,
            white=game.headers.get("White"),
            black=game.headers.get("Black"),
            perspective=perspective,
            bucket=classify_opening(moves, perspective),
            plies=len(moves),
        )

    def classify_games(
        self, games: Iterable[chess.pgn.Game]
    ) -> Iterator[GameClassification]:
        for index, game in enumerate(games):
            try:
                yield self.classify_game(game, index=index)
            except ValueError:
                logger.warning("Skipping unreadable game #%d", index, exc_info=True)

    def classify_stream(self, handle: TextIO) -> Iterator[GameClassification]:
        return self.classify_games(iter_games(handle))

    def classify_file(
        self,
        pgn_path: Path,
        progress_callback: Callable[[GameClassification], None] | None = None,
    ) -> list[GameClassification]:
        results = []
        # Older exports carry Latin-1 headers.
        with pgn_path.open("r", encoding="utf-8", errors="replace") as handle:
            for result in self.classify_stream(handle):
                results.append(result)
                if progress_callback:
                    progress_callback(result)

        logger.info(
            "Classified %d games from %s for %s",
            len(results),
            pgn_path,
            self.username,
        )
        return results


def summarize(results: Iterable[GameClassification]) -> Counter[OpeningBucket]:
    """Count classified games per bucket; unclassified games are left out."""
    return Counter(result.bucket for result in results if result.bucket is not None)
