"""
Diagnostic move tree filled as a side effect of a search pass.

Maps a position's FEN to the evaluations of the moves recorded against it.
The search writes to it but never reads it back: there is no memoization
and no cutoff based on its contents.
"""


class MoveTree:
    """
    FEN -> {move SAN -> eval} for the last search pass.

    Entries are write-once within a pass: the first value recorded for a
    (position, move) pair is kept.
    """

    def __init__(self) -> None:
        self._nodes: dict[str, dict[str, float]] = {}
        self._size = 0

    def __len__(self) -> int:
        """Number of recorded (position, move) pairs."""
        return self._size

    def __contains__(self, fen: object) -> bool:
        return fen in self._nodes

    def record(self, fen: str, san: str, value: float) -> None:
        moves = self._nodes.setdefault(fen, {})
        if san not in moves:
            moves[san] = value
            self._size += 1

    def lookup(self, fen: str) -> dict[str, float]:
        """Evaluations recorded against fen; empty when it was never visited."""
        return dict(self._nodes.get(fen, {}))

    def positions(self) -> list[str]:
        return list(self._nodes)

    def clear(self) -> None:
        self._nodes.clear()
        self._size = 0

    def as_dict(self) -> dict[str, dict[str, float]]:
        return {fen: dict(moves) for fen, moves in self._nodes.items()}
