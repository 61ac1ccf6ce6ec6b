"""
Win-probability readout for a human player.

After every board change the UI asks for a fresh readout. One policy-depth
search runs from the live position; its root evaluation is scaled against
MAX_SCORE, turned into an advantage for whichever side is ahead, and
reported from the player's point of view as "Win Status 62.3%".

The readout is a heuristic, not a calibrated probability. It never leaves
[5, 95], and a level evaluation still reads 2.5 points away from 50 because
the advantage magnitude has a floor and ties count for Black.
"""

import logging

import chess

from winprob.constants import (
    MAX_MAGNITUDE,
    MAX_PERCENT,
    MAX_SCORE,
    MIN_MAGNITUDE,
    MIN_PERCENT,
    NOT_AVAILABLE,
)
from winprob.rules import is_game_over
from winprob.search import SearchResult, SearchSession, search_position
from winprob.tree import MoveTree

_log = logging.getLogger(__name__)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def win_percentage(score: float, player_side: chess.Color) -> float:
    """
    Convert a White-positive evaluation into player_side's win percentage.

    Args:
        score:       Root evaluation in pawns.
        player_side: chess.WHITE or chess.BLACK.

    Returns:
        Percentage in [5, 95], rounded to one decimal place.
    """
    magnitude = _clamp(abs(score) / MAX_SCORE * 50, MIN_MAGNITUDE, MAX_MAGNITUDE)
    favored = chess.WHITE if score > 0 else chess.BLACK
    adjusted = 50 + magnitude if favored == player_side else 50 - magnitude
    return round(_clamp(adjusted, MIN_PERCENT, MAX_PERCENT), 1)


def format_win_status(percentage: float) -> str:
    return f"Win Status {percentage:.1f}%"


class WinProbabilityEstimator:
    """
    Computes readouts for one live board.

    The estimator owns the session-scoped move tree. It is cleared at the
    start of every compute() call and then holds the tree of that pass until
    the next call. Calls must not overlap: the search mutates the board.

    Attributes:
        board:       The live position, owned by the caller.
        tree:        Move tree of the last pass.
        last_result: Root SearchResult of the last pass, or None.
        last_depth:  Depth used by the last pass (0 when none ran).
    """

    def __init__(self, board: chess.Board) -> None:
        self.board = board
        self.tree = MoveTree()
        self.last_result: SearchResult | None = None
        self.last_depth = 0

    def compute(self, player_side: chess.Color | None) -> str:
        """Readout for player_side, or "N/A" for spectators and finished games."""
        if player_side is None or is_game_over(self.board):
            return NOT_AVAILABLE

        self.tree.clear()
        result, depth = search_position(self.board, SearchSession(tree=self.tree))
        self.last_result = result
        self.last_depth = depth

        status = format_win_status(win_percentage(result.eval, player_side))
        _log.debug("%s for %s at depth %d", status, chess.COLOR_NAMES[player_side], depth)
        return status


def compute_win_probability(board: chess.Board, player_side: chess.Color | None) -> str:
    """One-shot readout for board; see WinProbabilityEstimator.compute."""
    return WinProbabilityEstimator(board).compute(player_side)
