"""Opening bucket classification from the tracked player's point of view.

Only the first plies of a game (the opening window) are inspected. Every
game with at least two plies gets a bucket: unmatched lines fall back to
the nearest enclosing default instead of failing.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import StrEnum

import chess

from repertoire_tutor.analysis.buckets import OpeningBucket
from repertoire_tutor.analysis.moves import (
    all_present,
    black_moves,
    move_at,
    opening_window,
    white_moves,
)
from repertoire_tutor.constants import COLOR_BLACK, COLOR_WHITE, MIN_CLASSIFIABLE_PLIES


class Perspective(StrEnum):
    WHITE = COLOR_WHITE
    BLACK = COLOR_BLACK

    @classmethod
    def from_color(cls, color: chess.Color) -> Perspective:
        return cls.WHITE if color == chess.WHITE else cls.BLACK


# White repertoire


_WHITE_OPEN_GAME_SECOND_MOVES = {
    "Bc4": OpeningBucket.BISHOPS_OPENING,
    "f4": OpeningBucket.KINGS_GAMBIT,
    "Nc3": OpeningBucket.VIENNA_GAME,
    "d4": OpeningBucket.CENTER_GAME,
    "c3": OpeningBucket.PONZIANI,
}

# Replies to 1.e4 that White's repertoire does not split further.
_WHITE_E4_FIXED_REPLIES = {
    "e6": OpeningBucket.ITALIAN_GAME,
    "c6": OpeningBucket.ITALIAN_GAME,
    "d5": OpeningBucket.CENTER_GAME,
}

_WHITE_FIXED_FIRST_MOVES = {
    "c4": OpeningBucket.ENGLISH_OPENING,
    "f4": OpeningBucket.BIRDS_OPENING,
    "b3": OpeningBucket.LARSEN_OPENING,
    "g4": OpeningBucket.GROB_ATTACK,
}


def _white_after_nf3_nc6(window: list[str]) -> OpeningBucket:
    white3 = move_at(window, 4)
    if white3 in ("Bb5", "Bb5+"):
        return OpeningBucket.RUY_LOPEZ
    if white3 == "Bc4":
        return OpeningBucket.ITALIAN_GAME
    if white3 == "d4":
        return OpeningBucket.SCOTCH_GAME
    if white3 == "Nc3" and move_at(window, 5) == "Nf6":
        return OpeningBucket.FOUR_KNIGHTS
    return OpeningBucket.ITALIAN_GAME


def _white_open_game(window: list[str]) -> OpeningBucket:
    white2 = move_at(window, 2)
    if white2 == "Nf3":
        black2 = move_at(window, 3)
        if black2 == "Nc6":
            return _white_after_nf3_nc6(window)
        if black2 == "Nf6":
            return OpeningBucket.PETROV_DEFENSE
        if black2 == "d6":
            return OpeningBucket.PHILIDOR_DEFENSE
    return _WHITE_OPEN_GAME_SECOND_MOVES.get(white2, OpeningBucket.ITALIAN_GAME)


def _white_vs_sicilian(window: list[str]) -> OpeningBucket:
    white2 = move_at(window, 2)
    if white2 == "c3":
        return OpeningBucket.SICILIAN_ALAPIN
    if white2 == "Nc3" and move_at(window, 3) == "Nc6":
        return OpeningBucket.SICILIAN_CLOSED
    # Open Sicilian lines are filed under White's main 1.e4 bucket.
    return OpeningBucket.ITALIAN_GAME


def _white_e4(window: list[str]) -> OpeningBucket:
    reply = move_at(window, 1)
    if reply == "e5":
        return _white_open_game(window)
    if reply == "c5":
        return _white_vs_sicilian(window)
    return _WHITE_E4_FIXED_REPLIES.get(reply, OpeningBucket.ITALIAN_GAME)


def _white_d4(window: list[str]) -> OpeningBucket:
    white = white_moves(window)
    reply = move_at(window, 1)
    white2 = move_at(window, 2)

    if all_present(white[:4], "c4"):
        if all_present(white[:6], "g3", "Bg2"):
            return OpeningBucket.CATALAN
        return OpeningBucket.QUEENS_GAMBIT
    if all_present(white[:5], "Bf4") and not all_present(white[:4], "c4"):
        return OpeningBucket.LONDON_SYSTEM
    if reply == "Nf6" and white2 == "Bg5":
        return OpeningBucket.TROMPOWSKY
    if all_present(white[:4], "Nf3", "Bg5"):
        return OpeningBucket.TORRE_ATTACK
    if all_present(white[:5], "e3", "Bd3", "Nf3"):
        return OpeningBucket.COLLE_SYSTEM
    if all_present(white[:4], "Nc3", "Bg5") and not all_present(white[:4], "c4"):
        return OpeningBucket.VERESOV
    if reply == "d5" and white2 == "e4":
        return OpeningBucket.BLACKMAR_DIEMER
    return OpeningBucket.QUEENS_GAMBIT


def _white_nf3(window: list[str]) -> OpeningBucket:
    if all_present(white_moves(window)[:6], "g3", "Bg2", "d3"):
        return OpeningBucket.KINGS_INDIAN_ATTACK
    return OpeningBucket.RETI_OPENING


_WHITE_FIRST_MOVES: dict[str, Callable[[list[str]], OpeningBucket]] = {
    "e4": _white_e4,
    "d4": _white_d4,
    "Nf3": _white_nf3,
}


def classify_as_white(window: list[str]) -> OpeningBucket:
    first = move_at(window, 0)
    handler = _WHITE_FIRST_MOVES.get(first)
    if handler is not None:
        return handler(window)
    return _WHITE_FIXED_FIRST_MOVES.get(first, OpeningBucket.OTHER_WHITE)


# Black repertoire


_BLACK_E4_FIXED_REPLIES = {
    "e6": OpeningBucket.FRENCH_DEFENSE,
    "c6": OpeningBucket.CARO_KANN,
    "d5": OpeningBucket.SCANDINAVIAN,
    "Nf6": OpeningBucket.ALEKHINE_DEFENSE,
    "g6": OpeningBucket.MODERN_DEFENSE,
    "b6": OpeningBucket.OWEN_DEFENSE,
}


def _black_open_sicilian(window: list[str]) -> OpeningBucket | None:
    black2 = move_at(window, 3)
    later = black_moves(window)[:8]

    if black2 == "d6":
        if all_present(later, "a6"):
            return OpeningBucket.SICILIAN_NAJDORF
        if all_present(later, "g6", "Bg7"):
            return OpeningBucket.SICILIAN_DRAGON
        if all_present(later, "e6") and not all_present(later, "a6"):
            return OpeningBucket.SICILIAN_SCHEVENINGEN
        if all_present(later, "Nc6", "Nf6"):
            return OpeningBucket.SICILIAN_CLASSICAL
    elif black2 == "Nc6":
        if all_present(later, "e5"):
            return OpeningBucket.SICILIAN_SVESHNIKOV
        if all_present(later, "g6"):
            return OpeningBucket.SICILIAN_ACCELERATED_DRAGON
    elif black2 == "e6":
        if all_present(later, "Nc6"):
            return OpeningBucket.SICILIAN_TAIMANOV
        if all_present(later, "a6"):
            return OpeningBucket.SICILIAN_KAN
    elif black2 == "g6":
        return OpeningBucket.SICILIAN_ACCELERATED_DRAGON
    return None


def _black_sicilian(window: list[str]) -> OpeningBucket:
    white2 = move_at(window, 2)
    if white2 == "c3":
        return OpeningBucket.SICILIAN_ALAPIN
    if white2 == "Nc3" and all_present(white_moves(window)[:5], "g3"):
        return OpeningBucket.SICILIAN_CLOSED
    if white2 == "Nf3":
        bucket = _black_open_sicilian(window)
        if bucket is not None:
            return bucket
    return OpeningBucket.SICILIAN_OTHER


def _black_vs_e4(window: list[str]) -> OpeningBucket:
    reply = move_at(window, 1)
    if reply == "c5":
        return _black_sicilian(window)
    if reply == "d6":
        early = black_moves(window)[:5]
        if all_present(early, "Nf6", "g6"):
            return OpeningBucket.PIRC_DEFENSE
        if all_present(early, "g6"):
            return OpeningBucket.MODERN_DEFENSE
        return OpeningBucket.PHILIDOR_DEFENSE
    return _BLACK_E4_FIXED_REPLIES.get(reply, OpeningBucket.KINGS_PAWN_OTHER)


def _black_indian_e6(window: list[str]) -> OpeningBucket:
    white3 = move_at(window, 4)
    black3 = move_at(window, 5)

    if white3 == "Nc3" and black3 == "Bb4":
        return OpeningBucket.NIMZO_INDIAN
    if white3 == "Nf3":
        if black3 == "b6":
            return OpeningBucket.QUEENS_INDIAN
        if black3 in ("Bb4", "Bb4+"):
            return OpeningBucket.BOGO_INDIAN
    # Late bishop sortie: only counts when the bishop gave check on b4.
    if all_present(black_moves(window)[:5], "Bb4", "Bb4+"):
        if white3 == "Nf3":
            return OpeningBucket.BOGO_INDIAN
        if white3 == "Nc3":
            return OpeningBucket.NIMZO_INDIAN
    return OpeningBucket.QUEENS_GAMBIT_DECLINED


def _black_indian(window: list[str]) -> OpeningBucket:
    if move_at(window, 2) != "c4":
        return OpeningBucket.D4_OTHER

    black2 = move_at(window, 3)
    if black2 == "g6":
        if all_present(black_moves(window)[:8], "d5"):
            return OpeningBucket.GRUNFELD
        return OpeningBucket.KINGS_INDIAN
    if black2 == "e6":
        return _black_indian_e6(window)
    if black2 == "c5":
        return OpeningBucket.BENONI
    if black2 == "e5":
        return OpeningBucket.BUDAPEST_GAMBIT
    return OpeningBucket.D4_OTHER


def _black_queens_gambit(window: list[str]) -> OpeningBucket:
    if move_at(window, 2) != "c4":
        return OpeningBucket.QUEENS_GAMBIT_DECLINED

    black2 = move_at(window, 3)
    later = black_moves(window)[:8]
    if black2 == "dxc4":
        return OpeningBucket.QUEENS_GAMBIT_ACCEPTED
    if black2 == "c6":
        if all_present(later, "e6"):
            return OpeningBucket.SEMI_SLAV
        return OpeningBucket.SLAV_DEFENSE
    if black2 == "e6":
        if all_present(later, "c5"):
            return OpeningBucket.TARRASCH_DEFENSE
        return OpeningBucket.QUEENS_GAMBIT_DECLINED
    if black2 == "Nc6":
        return OpeningBucket.CHIGORIN_DEFENSE
    return OpeningBucket.QUEENS_GAMBIT_DECLINED


def _black_vs_d4(window: list[str]) -> OpeningBucket:
    reply = move_at(window, 1)
    if reply == "Nf6":
        return _black_indian(window)
    if reply == "d5":
        return _black_queens_gambit(window)
    if reply == "f5":
        return OpeningBucket.DUTCH_DEFENSE
    if reply == "e6":
        if move_at(window, 3) == "f5":
            return OpeningBucket.DUTCH_DEFENSE
        return OpeningBucket.QUEENS_GAMBIT_DECLINED
    if reply == "c5":
        return OpeningBucket.BENONI
    if reply == "g6":
        if all_present(black_moves(window)[:6], "d6", "Nf6"):
            return OpeningBucket.KINGS_INDIAN
        return OpeningBucket.MODERN_DEFENSE
    return OpeningBucket.D4_OTHER


def _black_vs_c4(window: list[str]) -> OpeningBucket:
    reply = move_at(window, 1)
    if reply == "c5":
        return OpeningBucket.ENGLISH_SYMMETRICAL
    if reply in ("Nf6", "e6"):
        return OpeningBucket.ANGLO_INDIAN
    return OpeningBucket.OTHER_BLACK


def _black_vs_nf3(window: list[str]) -> OpeningBucket:
    if move_at(window, 1) in ("Nf6", "d5", "c5"):
        return OpeningBucket.ANGLO_INDIAN
    return OpeningBucket.OTHER_BLACK


_BLACK_VS_FIRST_MOVES: dict[str, Callable[[list[str]], OpeningBucket]] = {
    "e4": _black_vs_e4,
    "d4": _black_vs_d4,
    "c4": _black_vs_c4,
    "Nf3": _black_vs_nf3,
}


def classify_as_black(window: list[str]) -> OpeningBucket:
    handler = _BLACK_VS_FIRST_MOVES.get(move_at(window, 0))
    if handler is None:
        return OpeningBucket.OTHER_BLACK
    return handler(window)


def classify_opening(
    moves: Iterable[str], perspective: Perspective | str
) -> OpeningBucket | None:
    """Assign a game to an opening bucket.

    Args:
        moves: SAN moves in play order, without move numbers or comments
        perspective: Side played by the tracked player ("white" or "black")

    Returns:
        The opening bucket, or None when fewer than two plies were played

    Raises:
        ValueError: If ``perspective`` is not a known side
    """
    side = Perspective(perspective)
    window = opening_window(moves)
    if len(window) < MIN_CLASSIFIABLE_PLIES:
        return None

    if side is Perspective.WHITE:
        return classify_as_white(window)
    return classify_as_black(window)
