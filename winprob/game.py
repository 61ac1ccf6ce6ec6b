"""
Game session: the bookkeeping a client keeps around the live board.

Holds the board, the local player's role, per-side capture points and the
FEN history, and produces the status lines shown next to the board. Board
rendering and move transport are not handled here; the session only tracks
state and asks the estimator for a readout after each change.
"""

import logging
from dataclasses import dataclass

import chess

from winprob.constants import PIECE_VALUES, SCORE_SCALE
from winprob.rules import VerboseMove, describe, verbose_moves
from winprob.win_probability import WinProbabilityEstimator

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameSnapshot:
    """Everything a client shows next to the board after one update."""

    fen: str
    status: str
    turn: str
    win_status: str
    white_points: int
    black_points: int


class GameSession:
    """
    One client's view of a two-player game.

    Attributes:
        board:        Live position. The estimator searches on it in place.
        player_role:  chess.WHITE, chess.BLACK, or None for a spectator.
        capture_points: Material captured so far, keyed by capturing colour.
        history:      FEN after the initial load and after every move.
    """

    def __init__(self, fen: str = chess.STARTING_FEN, player_role: chess.Color | None = None) -> None:
        self.board = chess.Board(fen)
        self.player_role = player_role
        self.capture_points: dict[chess.Color, int] = {chess.WHITE: 0, chess.BLACK: 0}
        self.history: list[str] = [self.board.fen()]
        self.estimator = WinProbabilityEstimator(self.board)

    # -----------------------------------------------------------------------
    # Roles
    # -----------------------------------------------------------------------

    def assign_role(self, role: chess.Color) -> None:
        self.player_role = role

    def spectate(self) -> None:
        self.player_role = None

    # -----------------------------------------------------------------------
    # Board updates
    # -----------------------------------------------------------------------

    def load(self, fen: str) -> None:
        """
        Replace the position with a full FEN (board-state sync).

        History and capture points restart from the loaded position. A
        malformed FEN raises ValueError and leaves the session unchanged.
        """
        parsed = chess.Board(fen)
        self.board.set_fen(parsed.fen())
        self.capture_points = {chess.WHITE: 0, chess.BLACK: 0}
        self.history = [self.board.fen()]

    def apply(self, move_text: str) -> VerboseMove:
        """
        Apply a move given in UCI ("e2e4", "e7e8q") or SAN ("Nf3").

        A from/to pawn move onto the last rank without a promotion piece
        promotes to a queen. Illegal or unparsable moves raise the
        python-chess ValueError subclasses unchanged.
        """
        move = self._parse(move_text)
        vmove = describe(self.board, move)
        mover = self.board.turn

        self.board.push(move)

        if vmove.captured:
            piece_type = chess.PIECE_SYMBOLS.index(vmove.captured)
            self.capture_points[mover] += PIECE_VALUES[piece_type] // SCORE_SCALE
        self.history.append(self.board.fen())
        _log.debug("applied %s (%s)", vmove.san, vmove.uci)
        return vmove

    def _parse(self, move_text: str) -> chess.Move:
        try:
            move = chess.Move.from_uci(move_text)
        except chess.InvalidMoveError:
            return self.board.parse_san(move_text)

        if move.promotion is None and self.board.piece_type_at(move.from_square) == chess.PAWN:
            if chess.square_rank(move.to_square) in (0, 7):
                move = chess.Move(move.from_square, move.to_square, promotion=chess.QUEEN)

        if not self.board.is_legal(move):
            raise chess.IllegalMoveError(f"illegal move: {move_text!r} in {self.board.fen()}")
        return move

    # -----------------------------------------------------------------------
    # Read-outs
    # -----------------------------------------------------------------------

    def legal_targets(self, square_name: str) -> list[VerboseMove]:
        """Legal moves of the piece on square_name (empty when none)."""
        return verbose_moves(self.board, chess.parse_square(square_name))

    def status_text(self) -> str:
        if self.board.is_checkmate():
            return "Checkmate!"
        if self.board.is_stalemate():
            return "Stalemate!"
        if self.board.is_check():
            return "Check!"
        return ""

    def turn_text(self) -> str:
        side = "White" if self.board.turn == chess.WHITE else "Black"
        return f"Current Move: {side}"

    def win_status(self) -> str:
        return self.estimator.compute(self.player_role)

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            fen=self.board.fen(),
            status=self.status_text(),
            turn=self.turn_text(),
            win_status=self.win_status(),
            white_points=self.capture_points[chess.WHITE],
            black_points=self.capture_points[chess.BLACK],
        )
