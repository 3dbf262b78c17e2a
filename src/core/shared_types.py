"""
Type definitions used across layers
"""

from enum import StrEnum


class Variant(StrEnum):
    """Number of teams sharing the board."""

    TWO_TEAM = "two_team"
    FOUR_TEAM = "four_team"


# --- NOTE Team and PieceType of the domain layer live in src/wormhole/pieces.py.
# --- These string versions are what the boundary models send across layers.


class TeamName(StrEnum):
    WHITE = "white"
    BLACK = "black"
    BROWN = "brown"
    GREEN = "green"


class PieceType(StrEnum):
    PAWN = "pawn"
    KNIGHT = "knight"
    BISHOP = "bishop"
    ROOK = "rook"
    QUEEN = "queen"
    KING = "king"
