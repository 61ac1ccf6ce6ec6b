"""
Thin adapter over python-chess: the verbose move records the estimator uses.

python-chess owns everything about legality, move application, undo and
game-over detection. This module only turns its moves into immutable records
that carry the notation and capture information the search and the game
session need.
"""

from dataclasses import dataclass

import chess


@dataclass(frozen=True)
class VerboseMove:
    """
    A legal move together with its human-readable description.

    Attributes:
        move:        The underlying python-chess move.
        from_square: Origin square name (e.g. "e2").
        to_square:   Destination square name (e.g. "e4").
        promotion:   Promotion piece symbol ("q", "r", "b", "n") or None.
        captured:    Captured piece symbol or None. En passant reports "p".
        san:         Standard algebraic notation in the position it was
                     generated from (e.g. "exd5", "O-O", "e8=Q+").
    """

    move: chess.Move
    from_square: str
    to_square: str
    promotion: str | None
    captured: str | None
    san: str

    @property
    def uci(self) -> str:
        return self.move.uci()


def describe(board: chess.Board, move: chess.Move) -> VerboseMove:
    """Build the verbose record for a move that is legal on board."""
    if board.is_en_passant(move):
        captured: str | None = chess.piece_symbol(chess.PAWN)
    else:
        victim = board.piece_type_at(move.to_square)
        captured = chess.piece_symbol(victim) if victim else None

    return VerboseMove(
        move=move,
        from_square=chess.square_name(move.from_square),
        to_square=chess.square_name(move.to_square),
        promotion=chess.piece_symbol(move.promotion) if move.promotion else None,
        captured=captured,
        san=board.san(move),
    )


def verbose_moves(board: chess.Board, square: chess.Square | None = None) -> list[VerboseMove]:
    """
    List the legal moves of the position in python-chess generation order.

    Args:
        board:  The current position. Not modified.
        square: When given, only moves starting on this square are returned.
    """
    if square is None:
        moves = board.legal_moves
    else:
        moves = board.generate_legal_moves(from_mask=chess.BB_SQUARES[square])
    return [describe(board, move) for move in moves]


def legal_move_count(board: chess.Board) -> int:
    return board.legal_moves.count()


def is_game_over(board: chess.Board) -> bool:
    """
    True once the game has ended in the current position.

    Beyond python-chess's automatic endings (checkmate, stalemate,
    insufficient material, 75-move rule, fivefold repetition) this also
    ends the game at the 50-move rule and on threefold repetition of the
    current position, without looking ahead at claimable moves.
    """
    return board.is_game_over() or board.is_fifty_moves() or board.is_repetition(3)
