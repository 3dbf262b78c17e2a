"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and the domain layer (lower) use the models defined here to send to/receive from the Service
(Decouples the data model specific to the API layer or the domain layer from the information needed to send across boundaries)

Squares are written in notation ("a1", "x3'", ...), teams as their number.
"""

from dataclasses import dataclass, field
from typing import Optional

# Type aliases to make GameModel easier to read
PieceId = str
SquareName = str


@dataclass
class PieceModel:
    piece_id: PieceId
    piece_type: str
    team: int
    square: SquareName
    facing: Optional[str] = None


@dataclass
class GameModel:
    """Transport-safe representation of a wormhole chess game used between API, Service, and Game layers."""

    variant: str
    promotion_piece: str
    active_team: int
    team_order: list[int]
    pieces: list[PieceModel]
    moved: list[PieceId] = field(default_factory=list)
    captured: list[PieceId] = field(default_factory=list)
    en_passant_square: Optional[SquareName] = None
    en_passant_pawn: Optional[PieceId] = None
    move_log: list[str] = field(default_factory=list)
