"""Read-only views over a ply-ordered list of SAN moves.

Index 0 is White's first move, index 1 Black's reply, and so on: even
indices always belong to White and odd indices to Black.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import islice

from repertoire_tutor.constants import OPENING_WINDOW_PLIES, SAN_ANNOTATION_SUFFIXES


def white_moves(moves: Sequence[str]) -> list[str]:
    return list(moves[0::2])


def black_moves(moves: Sequence[str]) -> list[str]:
    return list(moves[1::2])


def opening_window(
    moves: Iterable[str], plies: int = OPENING_WINDOW_PLIES
) -> list[str]:
    """Return a copy of the first ``plies`` moves of a game."""
    return list(islice(moves, plies))


def move_at(moves: Sequence[str], index: int) -> str:
    """Return the move at ``index``, or an empty string past the end."""
    if 0 <= index < len(moves):
        return moves[index] or ""
    return ""


def is_same_move(played: str, target: str) -> bool:
    """Compare a played move to a target, ignoring a check or mate suffix."""
    if played == target:
        return True
    return played.endswith(SAN_ANNOTATION_SUFFIXES) and played[:-1] == target


def all_present(moves: Sequence[str], *targets: str) -> bool:
    """Check that every target move was played, ignoring order.

    A target matches the same move played with a check or mate suffix, so
    ``Bg2`` matches a played ``Bg2+`` or ``Bg2#``. The suffix is only
    stripped from the played move: a target of ``Bb4+`` still requires the
    bishop move to have given check.

    Args:
        moves: Moves to search (usually one side's moves)
        *targets: SAN moves that must all be present

    Returns:
        True if each target appears somewhere in ``moves``
    """
    return all(
        any(move and is_same_move(move, target) for move in moves)
        for target in targets
    )
