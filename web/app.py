"""
FastAPI web application for the win-probability estimator.

Exposes two REST endpoints:
- POST /api/win-probability: runs one policy-depth search from a FEN and
  returns the player's "Win Status" readout with the search details.
- POST /api/legal-moves: lists the legal moves of one piece, in the verbose
  form the board UI uses to highlight targets.

Architecture notes:
- Sync endpoints (not async): FastAPI runs sync handlers in a thread pool,
  which is the correct pattern for CPU-bound blocking calls like a search.
- Stateless per request: the client sends the full FEN each time; every
  request searches its own board, so concurrent requests never share one.
"""

import logging

import chess
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, field_validator

from winprob.constants import NOT_AVAILABLE
from winprob.game import GameSession
from winprob.rules import VerboseMove

# ---------------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------------

logging.basicConfig(level=logging.INFO)
_log = logging.getLogger(__name__)

app = FastAPI(title="Chess Win Probability", version="1.0.0")

_SIDES: dict[str, chess.Color] = {"w": chess.WHITE, "b": chess.BLACK}


# ---------------------------------------------------------------------------
# Request / response models
# ---------------------------------------------------------------------------


class WinProbabilityRequest(BaseModel):
    """
    Client request for a readout.

    Fields:
        fen: Full FEN string of the current position.
        player_side: "w" or "b" for the local player, null for a spectator.
        include_tree: Return the move tree of the search pass as well.
    """

    fen: str
    player_side: str | None = None
    include_tree: bool = False

    @field_validator("player_side")
    @classmethod
    def check_side(cls, v: str | None) -> str | None:
        """Accept only "w", "b" or null."""
        if v is not None and v not in _SIDES:
            raise ValueError('player_side must be "w", "b" or null')
        return v


class WinProbabilityResponse(BaseModel):
    """
    Readout and search details.

    Fields:
        status: "Win Status 62.3%" or "N/A".
        eval: Root evaluation in pawns, White-positive (null when no search ran).
        depth: Search depth used (0 when no search ran).
        nodes: Positions visited by the search.
        game_status: "Checkmate!", "Stalemate!", "Check!" or "".
        turn: "Current Move: White" or "Current Move: Black".
        tree: FEN -> {SAN -> eval}, only when include_tree was requested.
    """

    status: str
    eval: float | None
    depth: int
    nodes: int
    game_status: str
    turn: str
    tree: dict[str, dict[str, float]] | None = None


class LegalMovesRequest(BaseModel):
    fen: str
    square: str


class MoveInfo(BaseModel):
    """One legal move in verbose form."""

    from_square: str
    to_square: str
    promotion: str | None
    captured: str | None
    san: str
    uci: str

    @classmethod
    def from_verbose(cls, vmove: VerboseMove) -> "MoveInfo":
        return cls(
            from_square=vmove.from_square,
            to_square=vmove.to_square,
            promotion=vmove.promotion,
            captured=vmove.captured,
            san=vmove.san,
            uci=vmove.uci,
        )


def _session(fen: str, player_side: str | None = None) -> GameSession:
    try:
        return GameSession(fen, _SIDES[player_side] if player_side else None)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f"Invalid FEN: {exc}") from exc


# ---------------------------------------------------------------------------
# API routes
# ---------------------------------------------------------------------------


@app.post("/api/win-probability", response_model=WinProbabilityResponse)
def api_win_probability(request: WinProbabilityRequest) -> WinProbabilityResponse:
    """
    Compute the player's win-probability readout for the given position.

    Raises:
        HTTPException 400: Malformed FEN.
        HTTPException 500: The search failed unexpectedly.
    """
    session = _session(request.fen, request.player_side)

    try:
        status = session.win_status()
    except Exception as exc:
        _log.exception("Search failed for FEN=%s", request.fen)
        raise HTTPException(status_code=500, detail=f"Engine error: {exc}") from exc

    result = session.estimator.last_result
    if status != NOT_AVAILABLE:
        _log.info(
            "%s side=%s depth=%d nodes=%d fen=%s",
            status,
            request.player_side,
            session.estimator.last_depth,
            result.session.node_count,
            request.fen[:40],
        )

    return WinProbabilityResponse(
        status=status,
        eval=result.eval if result else None,
        depth=session.estimator.last_depth,
        nodes=result.session.node_count if result else 0,
        game_status=session.status_text(),
        turn=session.turn_text(),
        tree=session.estimator.tree.as_dict() if request.include_tree else None,
    )


@app.post("/api/legal-moves", response_model=list[MoveInfo])
def api_legal_moves(request: LegalMovesRequest) -> list[MoveInfo]:
    """
    List the legal moves starting on one square.

    Raises:
        HTTPException 400: Malformed FEN or square name.
    """
    session = _session(request.fen)
    try:
        moves = session.legal_targets(request.square)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f"Invalid square: {exc}") from exc
    return [MoveInfo.from_verbose(vmove) for vmove in moves]
