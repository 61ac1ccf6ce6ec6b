"""
Search entry point: full-width, depth-limited minimax over python-chess
positions.

The search mutates one shared board via push/pop rather than copying it at
every node. Each child is searched inside a context manager that pops the
move on every exit path, so the board is restored even when a recursive call
raises.

There is no pruning, no transposition table and no move-ordering
optimization: every legal move is searched to the requested depth, so cost
is O(b^d) where b is the branching factor. The depth policy
(select_depth) is the only latency control.

Move ordering at a node is the internal array order of a binary min-heap
keyed on child evaluation. Only the first element is guaranteed extremal.
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator

import chess

from winprob.constants import BRANCHING_THRESHOLD, DEEP_DEPTH, SHALLOW_DEPTH
from winprob.evaluate import evaluate
from winprob.heap import PriorityQueue, ScoredMove
from winprob.rules import VerboseMove, is_game_over, legal_move_count, verbose_moves
from winprob.tree import MoveTree

_log = logging.getLogger(__name__)


@dataclass
class SearchSession:
    """
    Per-pass state of one top-level search.

    Keeping this in one object (rather than module globals) lets callers
    run repeated searches side by side and inspect each pass afterwards.

    Attributes:
        tree:       Diagnostic move tree, filled as the search visits moves.
        node_count: Number of positions visited, leaves included.
    """

    tree: MoveTree = field(default_factory=MoveTree)
    node_count: int = 0


@dataclass
class SearchResult:
    """
    Outcome of searching one node.

    Attributes:
        eval:    Minimax value of the node, White-positive, in pawns.
        moves:   Legal moves in heap-array order. Empty at terminal nodes.
        session: The session the search ran in.
    """

    eval: float
    moves: list[VerboseMove]
    session: SearchSession


@contextmanager
def _applied(board: chess.Board, move: chess.Move) -> Iterator[chess.Board]:
    board.push(move)
    try:
        yield board
    finally:
        board.pop()


def select_depth(board: chess.Board) -> int:
    """Search depth for a root position: deeper when there are few legal moves."""
    return DEEP_DEPTH if legal_move_count(board) < BRANCHING_THRESHOLD else SHALLOW_DEPTH


def search(
    board: chess.Board,
    depth: int,
    maximizing: bool,
    session: SearchSession | None = None,
) -> SearchResult:
    """
    Depth-limited minimax without pruning.

    Args:
        board:      Current position. Modified in-place via push/pop and
                    always restored to its original state on return.
        depth:      Remaining depth in plies.
        maximizing: True to take the maximum child evaluation at this node
                    (White to move in normal use), False for the minimum.
                    The flag flips on every recursive call.
        session:    Pass state to record into. A fresh one is created when
                    omitted.

    Returns:
        SearchResult with the node's value and its moves in heap order.
    """
    if session is None:
        session = SearchSession()

    session.node_count += 1

    if depth == 0 or is_game_over(board):
        return SearchResult(eval=evaluate(board), moves=[], session=session)

    queue = PriorityQueue()
    for vmove in verbose_moves(board):
        with _applied(board, vmove.move):
            child = search(board, depth - 1, not maximizing, session)
            reached = board.fen()
        queue.push(ScoredMove(move=vmove, eval=child.eval))
        session.tree.record(reached, vmove.san, child.eval)

    # The heap root already holds the minimum; only the maximum needs a scan.
    if maximizing:
        value = max(item.eval for item in queue.items)
    else:
        value = queue.peek().eval

    return SearchResult(
        eval=value,
        moves=[item.move for item in queue.items],
        session=session,
    )


def search_position(board: chess.Board, session: SearchSession | None = None) -> tuple[SearchResult, int]:
    """
    Run one policy-depth search from the live position.

    White maximizes, Black minimizes. Returns the root result and the depth
    used.
    """
    depth = select_depth(board)
    result = search(board, depth, board.turn == chess.WHITE, session)
    _log.debug(
        "search depth=%d eval=%.1f nodes=%d positions=%d",
        depth,
        result.eval,
        result.session.node_count,
        len(result.session.tree),
    )
    return result, depth
