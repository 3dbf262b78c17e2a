"""Unit tests for /src/wormhole/directions.py"""

import pytest

from src.wormhole.directions import (
    DIAGONAL_DIRECTIONS,
    KING_DIRECTIONS,
    OPPOSITE,
    ORTHOGONAL_DIRECTIONS,
    PAWN_CAPTURES,
    PERPENDICULAR,
    Direction,
)


def test_king_moves_in_every_direction() -> None:
    assert set(KING_DIRECTIONS) == set(Direction)
    assert set(ORTHOGONAL_DIRECTIONS) | set(DIAGONAL_DIRECTIONS) == set(Direction)
    assert not set(ORTHOGONAL_DIRECTIONS) & set(DIAGONAL_DIRECTIONS)


@pytest.mark.parametrize("direction", list(Direction))
def test_opposite_is_an_involution(direction: Direction) -> None:
    assert OPPOSITE[direction] != direction
    assert OPPOSITE[OPPOSITE[direction]] == direction


@pytest.mark.parametrize("direction", ORTHOGONAL_DIRECTIONS)
def test_perpendicular_axis(direction: Direction) -> None:
    """The sidesteps are orthogonal too, and never along (or against) the heading."""
    sides = PERPENDICULAR[direction]
    assert len(sides) == 2
    for side in sides:
        assert side in ORTHOGONAL_DIRECTIONS
        assert side not in (direction, OPPOSITE[direction])


@pytest.mark.parametrize("direction", ORTHOGONAL_DIRECTIONS)
def test_pawns_capture_diagonally(direction: Direction) -> None:
    assert all(side in DIAGONAL_DIRECTIONS for side in PAWN_CAPTURES[direction])


def test_notation() -> None:
    assert str(Direction.IDL) == "idl"
    assert Direction("N") == Direction.N
