"""Tests for the evaluation-to-percentage readout."""

import re

import chess
import pytest

from winprob.search import search
from winprob.win_probability import (
    WinProbabilityEstimator,
    compute_win_probability,
    format_win_status,
    win_percentage,
)

from tests.positions import CRUSHING_FEN, ENDGAME_FEN, FIFTY_MOVE_FEN, KNIGHT_SHUFFLE, STALEMATE_FEN

_STATUS = re.compile(r"^Win Status (\d+\.\d)%$")


class TestWinPercentage:
    @pytest.mark.parametrize(
        "score, side, expected",
        [
            (8.2, chess.WHITE, 60.0),
            (8.2, chess.BLACK, 40.0),
            (-20.5, chess.BLACK, 75.0),
            (-20.5, chess.WHITE, 25.0),
            (100.0, chess.WHITE, 95.0),
            (100.0, chess.BLACK, 5.0),
            (-100.0, chess.BLACK, 95.0),
        ],
    )
    def test_scaling(self, score: float, side: chess.Color, expected: float) -> None:
        assert win_percentage(score, side) == pytest.approx(expected)

    def test_small_advantage_has_a_floor(self) -> None:
        assert win_percentage(0.5, chess.WHITE) == 52.5
        assert win_percentage(0.5, chess.BLACK) == 47.5

    # A level score counts as a Black advantage and still gets the 2.5 floor.
    def test_level_score_favours_black(self) -> None:
        assert win_percentage(0.0, chess.WHITE) == 47.5
        assert win_percentage(0.0, chess.BLACK) == 52.5

    @pytest.mark.parametrize("score", [-1000.0, -41.0, -3.3, 0.0, 0.1, 7.7, 41.0, 1e6])
    @pytest.mark.parametrize("side", [chess.WHITE, chess.BLACK])
    def test_always_within_bounds(self, score: float, side: chess.Color) -> None:
        assert 5.0 <= win_percentage(score, side) <= 95.0

    def test_rounded_to_one_decimal(self) -> None:
        assert win_percentage(1.0, chess.WHITE) == 52.5
        assert win_percentage(3.0, chess.WHITE) == 53.7  # 3 / 41 * 50 = 3.658...


class TestFormat:
    def test_one_decimal_place(self) -> None:
        assert format_win_status(47.5) == "Win Status 47.5%"
        assert format_win_status(95.0) == "Win Status 95.0%"


class TestEstimator:
    def test_spectator_gets_sentinel(self, start_board: chess.Board) -> None:
        assert compute_win_probability(start_board, None) == "N/A"

    def test_finished_game_gets_sentinel(self, mated_board: chess.Board) -> None:
        assert compute_win_probability(mated_board, chess.WHITE) == "N/A"
        assert compute_win_probability(mated_board, chess.BLACK) == "N/A"

    def test_stalemate_gets_sentinel(self) -> None:
        assert compute_win_probability(chess.Board(STALEMATE_FEN), chess.WHITE) == "N/A"

    def test_sentinel_skips_search(self, start_board: chess.Board) -> None:
        estimator = WinProbabilityEstimator(start_board)
        assert estimator.compute(None) == "N/A"
        assert estimator.last_result is None
        assert estimator.last_depth == 0

    def test_start_position(self, start_board: chess.Board) -> None:
        estimator = WinProbabilityEstimator(start_board)
        status = estimator.compute(chess.WHITE)

        # Black answers every first move symmetrically, so the depth-2 root
        # value is level and the 2.5 floor favours Black.
        assert _STATUS.match(status)
        assert estimator.last_depth == 2
        assert estimator.last_result.eval == 0.0
        assert estimator.last_result.eval == search(chess.Board(), 2, True).eval
        assert status == "Win Status 47.5%"
        assert estimator.compute(chess.BLACK) == "Win Status 52.5%"

    def test_fifty_move_rule_gets_sentinel(self) -> None:
        board = chess.Board(FIFTY_MOVE_FEN)
        assert compute_win_probability(board, chess.WHITE) == "N/A"
        assert compute_win_probability(board, chess.BLACK) == "N/A"

    def test_threefold_repetition_gets_sentinel(self, start_board: chess.Board) -> None:
        for san in KNIGHT_SHUFFLE * 2:
            start_board.push_san(san)
        assert compute_win_probability(start_board, chess.WHITE) == "N/A"

    def test_repetition_that_can_only_be_claimed_next_move_still_reads(self, start_board: chess.Board) -> None:
        for san in (KNIGHT_SHUFFLE * 2)[:-1]:
            start_board.push_san(san)
        assert compute_win_probability(start_board, chess.BLACK).startswith("Win Status ")

    def test_overwhelming_advantage_is_clamped(self) -> None:
        board = chess.Board(CRUSHING_FEN)
        assert compute_win_probability(board, chess.WHITE) == "Win Status 95.0%"
        assert compute_win_probability(board, chess.BLACK) == "Win Status 5.0%"

    def test_board_is_left_untouched(self, endgame_board: chess.Board) -> None:
        fen = endgame_board.fen()
        compute_win_probability(endgame_board, chess.BLACK)
        assert endgame_board.fen() == fen
        assert endgame_board.move_stack == []

    def test_tree_is_cleared_between_calls(self, endgame_board: chess.Board) -> None:
        estimator = WinProbabilityEstimator(endgame_board)
        estimator.compute(chess.WHITE)
        first = estimator.tree.as_dict()

        endgame_board.push_san("exd5")
        estimator.compute(chess.WHITE)
        second = estimator.tree.as_dict()

        assert first
        assert second
        assert len(estimator.tree) == sum(len(moves) for moves in second.values())

        original = chess.Board(ENDGAME_FEN)
        original.push_san("Kd2")
        assert original.fen() in first
        assert original.fen() not in second

    def test_tree_is_exposed_through_last_result(self, endgame_board: chess.Board) -> None:
        estimator = WinProbabilityEstimator(endgame_board)
        estimator.compute(chess.BLACK)
        assert estimator.last_result.session.tree is estimator.tree
