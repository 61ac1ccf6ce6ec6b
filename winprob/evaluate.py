"""
Static position evaluation: material plus positional bonuses.

The score is always returned from White's perspective, in pawns. Positive
means White is ahead. This is the minimax convention: the search maximizes
on White's plies and minimizes on Black's, so the evaluator never needs to
know whose turn it is except for the check adjustment.

Two terms are summed over every occupied square:
- Material: pawn=1, knight=3, bishop=3, rook=5, queen=9, king=0.
- Positional bonus: a fixed table per piece type (pawn, knight and bishop
  only), mirrored per colour so each side reads its own table.

A fixed half-pawn penalty is applied against the side to move when it is in
check. This rewards the side that just delivered the check.
"""

import chess

from winprob.constants import (
    CHECK_PENALTY,
    PIECE_VALUES,
    POSITIONAL_TABLES,
    SCORE_SCALE,
)


def positional_bonus(piece_type: int, index: int) -> int:
    """
    Look up a positional bonus in tenths of a pawn.

    Piece types without a table, and indices outside the table, score 0.
    """
    table = POSITIONAL_TABLES.get(piece_type)
    if table is None or not 0 <= index < len(table):
        return 0
    return table[index]


def evaluate(board: chess.Board) -> float:
    """
    Heuristic evaluation from White's perspective.

    The square indexing convention for table lookup:
        - White piece on square sq: use index sq ^ 56 (flip rank, since table
          row 0 is rank 8 but python-chess a1=0 is at the bottom)
        - Black piece on square sq: use index sq directly (row 0 = rank 1,
          the rank farthest from Black)

    Args:
        board: The current board position. Not modified.

    Returns:
        Score in pawns. Identical positions always yield identical scores.

    Example:
        >>> import chess
        >>> evaluate(chess.Board())
        0.0
    """
    score = 0  # tenths of a pawn, White minus Black

    for sq, piece in board.piece_map().items():
        pt = piece.piece_type
        material = PIECE_VALUES.get(pt, 0)

        if piece.color == chess.WHITE:
            score += material + positional_bonus(pt, sq ^ 56)
        else:
            score -= material + positional_bonus(pt, sq)

    if board.is_check():
        score += -CHECK_PENALTY if board.turn == chess.WHITE else CHECK_PENALTY

    return score / SCORE_SCALE
