"""PGN helpers feeding SAN move lists to the opening classifier."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TextIO

import chess
import chess.pgn

from repertoire_tutor.analysis.openings import Perspective


def iter_games(handle: TextIO) -> Iterator[chess.pgn.Game]:
    while True:
        game = chess.pgn.read_game(handle)
        if game is None:
            return
        yield game


def san_moves(game: chess.pgn.Game) -> list[str]:
    """Get the mainline of a game as SAN tokens in play order.

    Args:
        game: Parsed PGN game

    Returns:
        SAN moves, without move numbers, comments or variations

    Raises:
        ValueError: If the game has a parse error, an illegal mainline move
            or does not start from the standard initial position
    """
    if game.errors:
        raise ValueError(f"Invalid PGN mainline: {game.errors[0]}")

    board = game.board()
    # Even plies must be White's moves.
    if board.board_fen() != chess.STARTING_BOARD_FEN or board.turn != chess.WHITE:
        raise ValueError(
            f"Game does not start from the initial position: {board.fen()}"
        )

    moves = []
    for move in game.mainline_moves():
        moves.append(board.san(move))
        board.push(move)
    return moves


def player_perspective(game: chess.pgn.Game, username: str) -> Perspective:
    """Find which side the tracked player had in a game.

    Usernames are compared case-insensitively. Games where the player is on
    neither side are treated as played with White.
    """
    wanted = username.lower()
    if game.headers.get("White", "").lower() == wanted:
        return Perspective.from_color(chess.WHITE)
    if game.headers.get("Black", "").lower() == wanted:
        return Perspective.from_color(chess.BLACK)
    return Perspective.WHITE
