from __future__ import annotations

import pytest

from repertoire_tutor.analysis.moves import (
    all_present,
    black_moves,
    is_same_move,
    move_at,
    opening_window,
    white_moves,
)

GAME = ["e4", "c5", "Nf3", "d6", "d4", "cxd4", "Nxd4", "Nf6", "Nc3"]


class TestSideViews:
    def test_white_moves_are_even_plies(self):
        assert white_moves(GAME) == ["e4", "Nf3", "d4", "Nxd4", "Nc3"]

    def test_black_moves_are_odd_plies(self):
        assert black_moves(GAME) == ["c5", "d6", "cxd4", "Nf6"]

    @pytest.mark.parametrize("length", [0, 1, 2, 5, 9])
    def test_view_lengths(self, length):
        moves = GAME[:length]
        assert len(white_moves(moves)) == (length + 1) // 2
        assert len(black_moves(moves)) == length // 2

    def test_views_accept_tuples(self):
        assert white_moves(("e4", "e5", "Nf3")) == ["e4", "Nf3"]
        assert black_moves(("e4", "e5", "Nf3")) == ["e5"]

    def test_empty_sequence(self):
        assert white_moves([]) == []
        assert black_moves([]) == []


class TestOpeningWindow:
    def test_truncates_to_twenty_plies(self):
        moves = [f"m{i}" for i in range(30)]
        window = opening_window(moves)
        assert window == moves[:20]

    def test_short_game_is_kept_whole(self):
        assert opening_window(GAME) == GAME

    def test_returns_a_copy(self):
        moves = ["e4", "e5"]
        window = opening_window(moves)
        window.append("Nf3")
        moves[0] = "d4"
        assert moves == ["d4", "e5"]
        assert window == ["e4", "e5", "Nf3"]

    def test_accepts_iterators(self):
        assert opening_window(iter(GAME), plies=3) == ["e4", "c5", "Nf3"]

    def test_empty(self):
        assert opening_window([]) == []


class TestMoveAt:
    def test_existing_index(self):
        assert move_at(GAME, 2) == "Nf3"

    def test_past_the_end_is_empty(self):
        assert move_at(GAME, 40) == ""

    def test_negative_index_is_empty(self):
        assert move_at(GAME, -1) == ""


class TestMovePresence:
    @pytest.mark.parametrize("played", ["Bg2", "Bg2+", "Bg2#"])
    def test_suffix_insensitive(self, played):
        assert is_same_move(played, "Bg2")

    def test_different_moves(self):
        assert not is_same_move("Bg2", "Bg3")
        assert not is_same_move("", "e4")

    def test_target_suffix_is_kept(self):
        assert is_same_move("Bb4+", "Bb4+")
        assert not is_same_move("Bb4", "Bb4+")

    def test_all_present_ignores_order(self):
        assert all_present(["Nf3", "Bg2", "g3"], "g3", "Bg2")

    def test_all_present_requires_every_target(self):
        assert not all_present(["Nf3", "g3"], "g3", "Bg2")

    def test_all_present_with_check(self):
        assert all_present(["d4", "Bb5+"], "Bb5")

    def test_all_present_both_plain_and_checking_target(self):
        assert not all_present(["Bb4"], "Bb4", "Bb4+")
        assert all_present(["Bb4+"], "Bb4", "Bb4+")

    def test_all_present_on_empty_moves(self):
        assert not all_present([], "e4")
        assert all_present([])
