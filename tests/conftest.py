"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

import pytest

from src.chess.board import Board
from src.chess.coverage import SquareAnnotation
from src.chess.square import Square
from src.core.config import DiagramConfig, resolve_config
from src.render.geometry import BoardGeometry

STARTING_POSITION_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


@pytest.fixture
def default_config() -> DiagramConfig:
    return resolve_config()


@pytest.fixture
def geometry(default_config: DiagramConfig) -> BoardGeometry:
    return BoardGeometry.from_config(default_config)


@pytest.fixture
def starting_board() -> Board:
    return Board.from_fen(STARTING_POSITION_FEN)


@pytest.fixture
def e3_coverage() -> dict[Square, SquareAnnotation]:
    """Two squares of the starting position: e3 and f3, each protected by two pawns and reachable by white"""
    sq = Square.from_algebraic
    return {
        sq("e3"): SquareAnnotation(
            protectors=(sq("d2"), sq("f2")),
            white_moves=(sq("e2"),),
        ),
        sq("f3"): SquareAnnotation(
            protectors=(sq("e2"), sq("g2")),
            white_moves=(sq("f2"), sq("g1")),
        ),
    }
