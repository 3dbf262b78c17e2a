"""Helpers for implementing Castling rules. Need to be imported by multiple sources"""

from dataclasses import dataclass
from enum import Enum
from typing import Self

from src.wormhole.pieces import Team
from src.wormhole.square import Square


class CastlingSide(Enum):
    KING_SIDE = "king side"
    QUEEN_SIDE = "queen side"


@dataclass(frozen=True)
class CastlingSquares:
    """
    Store the squares where king/rook start from/end up in by castling.

    `king_path` is the route of the king including its starting square, `between` the squares that have to be empty.
    """

    king_path: tuple[Square, ...]
    rook_from: Square
    rook_to: Square
    between: tuple[Square, ...]

    @property
    def king_from(self) -> Square:
        return self.king_path[0]

    @property
    def king_to(self) -> Square:
        return self.king_path[-1]

    @classmethod
    def from_algebraic(
        cls, king_path: str, r_from: str, r_to: str, between: str
    ) -> Self:
        """Convenience method: squares written as space-separated names, to keep the rules below readable"""
        return cls(
            king_path=tuple(Square.from_algebraic(sq) for sq in king_path.split()),
            rook_from=Square.from_algebraic(r_from),
            rook_to=Square.from_algebraic(r_to),
            between=tuple(Square.from_algebraic(sq) for sq in between.split()),
        )

    def on_layer(self, mirrored: bool) -> Self:
        return type(self)(
            king_path=tuple(sq.on_layer(mirrored) for sq in self.king_path),
            rook_from=self.rook_from.on_layer(mirrored),
            rook_to=self.rook_to.on_layer(mirrored),
            between=tuple(sq.on_layer(mirrored) for sq in self.between),
        )


# The moves made when castling, written for the upper surface.
# NOTE: only the teams that start on rank 1 / rank 8 of the upper surface have castling rules.
CASTLING_RULES: dict[Team, dict[CastlingSide, CastlingSquares]] = {
    Team.WHITE: {
        CastlingSide.KING_SIDE: CastlingSquares.from_algebraic(
            "e1 f1 g1", "h1", "f1", "f1 g1"
        ),
        CastlingSide.QUEEN_SIDE: CastlingSquares.from_algebraic(
            "e1 d1 c1", "a1", "d1", "b1 c1 d1"
        ),
    },
    Team.BLACK: {
        CastlingSide.KING_SIDE: CastlingSquares.from_algebraic(
            "e8 f8 g8", "h8", "f8", "f8 g8"
        ),
        CastlingSide.QUEEN_SIDE: CastlingSquares.from_algebraic(
            "e8 d8 c8", "a8", "d8", "b8 c8 d8"
        ),
    },
}


def castling_rules(team: Team, mirrored: bool) -> dict[CastlingSide, CastlingSquares]:
    """The castling rules of a team, on the requested surface. Empty for teams that cannot castle."""
    rules = CASTLING_RULES.get(team, {})
    return {side: rule.on_layer(mirrored) for side, rule in rules.items()}
