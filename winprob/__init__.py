"""
Win-probability estimator package.

This package turns a live python-chess position into a "Win Status" readout
for a human player by running a full-width, depth-limited minimax search
and scaling the root evaluation into a percentage.

Modules:
    constants       — Piece values, positional tables, depth policy, transform limits
    evaluate        — Static position evaluation (material + positional tables + check)
    rules           — Verbose move records built from python-chess moves
    heap            — Binary min-heap ordering a node's moves by evaluation
    tree            — Diagnostic move tree filled during a search pass
    search          — Full-width minimax, depth policy, search session
    win_probability — Evaluation-to-percentage transform and estimator
    game            — Client-side game bookkeeping around the live board
"""

from winprob.search import SearchResult, SearchSession, select_depth
from winprob.win_probability import (
    WinProbabilityEstimator,
    compute_win_probability,
    win_percentage,
)

__all__ = [
    "SearchResult",
    "SearchSession",
    "WinProbabilityEstimator",
    "compute_win_probability",
    "select_depth",
    "win_percentage",
]
