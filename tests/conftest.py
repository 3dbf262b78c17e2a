"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable, Optional

import pytest

from src.core.shared_types import Variant
from src.wormhole.directions import Direction
from src.wormhole.pieces import Piece, PieceType, Team
from src.wormhole.square import Square
from src.wormhole.state import GameState

PlacePiece = Callable[..., Piece]


@pytest.fixture
def empty_state() -> GameState:
    """Two team game without any pieces, white to move."""
    return GameState.empty(Variant.TWO_TEAM)


@pytest.fixture
def standard_state() -> GameState:
    """Starting position of the two team game."""
    return GameState.new_game(Variant.TWO_TEAM)


@pytest.fixture
def four_team_state() -> GameState:
    """Starting position of the four team game."""
    return GameState.new_game(Variant.FOUR_TEAM)


@pytest.fixture
def place(empty_state: GameState) -> PlacePiece:
    """
    Put a piece on the empty board: place(Team.WHITE, PieceType.ROOK, "a1").
    The id follows the same pattern as the starting layout, so tests can refer to it.
    """

    def _place(
        team: Team,
        piece_type: PieceType,
        square_name: str,
        facing: Optional[Direction] = None,
    ) -> Piece:
        square = Square.from_algebraic(square_name)
        piece = Piece(
            id=f"player{team.value}-{piece_type.name.lower()}-{square}",
            type=piece_type,
            team=team,
            facing=facing,
        )
        empty_state.add_piece(piece, square)
        return piece

    return _place
