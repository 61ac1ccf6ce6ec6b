"""
Engine constants: piece values, positional tables, depth policy and the
win-probability transform parameters.

Every tunable number used by the estimator is defined here so that the
evaluation, search and probability modules never introduce magic numbers.

Scores are stored as integers in tenths of a pawn (SCORE_SCALE). The
evaluator sums integers and divides once at the end, so a position and its
colour-mirrored twin always produce scores of exactly opposite sign.
"""

import chess

# ---------------------------------------------------------------------------
# Scale
# ---------------------------------------------------------------------------
# 1 pawn = 10 units. All integer tables below use this unit.

SCORE_SCALE: int = 10

# ---------------------------------------------------------------------------
# Piece values (tenths of a pawn)
# ---------------------------------------------------------------------------

PAWN_VALUE: int = 10
KNIGHT_VALUE: int = 30
BISHOP_VALUE: int = 30
ROOK_VALUE: int = 50
QUEEN_VALUE: int = 90
KING_VALUE: int = 0  # The king is never captured; it carries no material.

PIECE_VALUES: dict[int, int] = {
    chess.PAWN:   PAWN_VALUE,
    chess.KNIGHT: KNIGHT_VALUE,
    chess.BISHOP: BISHOP_VALUE,
    chess.ROOK:   ROOK_VALUE,
    chess.QUEEN:  QUEEN_VALUE,
    chess.KING:   KING_VALUE,
}

# ---------------------------------------------------------------------------
# Positional tables (tenths of a pawn)
# ---------------------------------------------------------------------------
# Laid out as the owning side sees the board: row 0 is the rank farthest
# from its own back rank, row 7 is its own back rank. Only pawns, knights
# and bishops have tables; other piece types get no positional bonus.

PAWN_TABLE: list[int] = [
     0,  0,  0,  0,  0,  0,  0,  0,
     5,  5,  5,  5,  5,  5,  5,  5,
     1,  2,  2,  3,  3,  2,  2,  1,
     0,  1,  2,  3,  4,  3,  2,  1,
     0,  1,  2,  3,  4,  3,  2,  1,
     0,  1,  2,  3,  3,  2,  2,  1,
     0,  1,  1,  1,  1,  1,  1,  1,
     0,  0,  0,  0,  0,  0,  0,  0,
]

KNIGHT_TABLE: list[int] = [
     0, -1, -2, -2, -2, -2, -1,  0,
    -1,  0,  0,  0,  0,  0,  0, -1,
    -2,  1,  2,  3,  3,  2,  1, -2,
    -2,  2,  4,  5,  5,  4,  2, -2,
    -2,  3,  5,  6,  6,  5,  3, -2,
    -2,  2,  4,  5,  5,  4,  2, -2,
    -1,  1,  2,  3,  3,  2,  1, -1,
     0, -1, -2, -2, -2, -2, -1,  0,
]

BISHOP_TABLE: list[int] = [
    -2, -1, -1, -1, -1, -1, -1, -2,
    -1,  0,  0,  0,  0,  0,  0, -1,
    -1,  1,  1,  1,  1,  1,  1, -1,
    -1,  1,  2,  2,  2,  2,  1, -1,
    -1,  1,  2,  2,  2,  2,  1, -1,
    -1,  1,  1,  1,  1,  1,  1, -1,
    -1,  0,  0,  0,  0,  0,  0, -1,
    -2, -1, -1, -1, -1, -1, -1, -2,
]

POSITIONAL_TABLES: dict[int, list[int]] = {
    chess.PAWN:   PAWN_TABLE,
    chess.KNIGHT: KNIGHT_TABLE,
    chess.BISHOP: BISHOP_TABLE,
}

# Penalty against the side to move when it is in check.
CHECK_PENALTY: int = 5

# ---------------------------------------------------------------------------
# Depth policy
# ---------------------------------------------------------------------------
# Full-width search is O(b^d); the root branching factor picks the depth.

BRANCHING_THRESHOLD: int = 20
DEEP_DEPTH: int = 3     # fewer than BRANCHING_THRESHOLD legal root moves
SHALLOW_DEPTH: int = 2  # everything else

# ---------------------------------------------------------------------------
# Win probability transform
# ---------------------------------------------------------------------------
# MAX_SCORE is one side's full material (39 pawns) plus a tolerance of 2.

MAX_SCORE: float = 39 + 2
MIN_MAGNITUDE: float = 2.5
MAX_MAGNITUDE: float = 47.5
MIN_PERCENT: float = 5.0
MAX_PERCENT: float = 95.0

NOT_AVAILABLE: str = "N/A"
