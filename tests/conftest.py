"""Shared pytest fixtures used across the test suite."""

import chess
import pytest

from tests.positions import ENDGAME_FEN, FOOLS_MATE_FEN


@pytest.fixture
def start_board() -> chess.Board:
    return chess.Board()


@pytest.fixture
def mated_board() -> chess.Board:
    return chess.Board(FOOLS_MATE_FEN)


@pytest.fixture
def endgame_board() -> chess.Board:
    return chess.Board(ENDGAME_FEN)
