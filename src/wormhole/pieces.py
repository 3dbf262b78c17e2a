"""Defines the teams and types of pieces, and which way the pawns of each team move"""

from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from typing import Optional

from src.wormhole.directions import OPPOSITE, Direction


class PieceType(Enum):
    PAWN = auto()
    KNIGHT = auto()
    BISHOP = auto()
    ROOK = auto()
    QUEEN = auto()
    KING = auto()


class Team(IntEnum):
    """Teams are numbered: the turn order follows the numbering."""

    WHITE = 1
    BLACK = 2
    BROWN = 3
    GREEN = 4


# Forward direction of the pawns of each team on the upper surface.
# On the mirrored surface the board is seen from below, so the pawns walk the other way.
TOP_FORWARD: dict[Team, Direction] = {
    Team.WHITE: Direction.N,
    Team.BLACK: Direction.S,
    Team.BROWN: Direction.S,
    Team.GREEN: Direction.N,
}

# rank a pawn starts on / promotes on, by the direction it is walking
START_RANKS: dict[Direction, int] = {Direction.N: 2, Direction.S: 7}
PROMOTION_RANKS: dict[Direction, int] = {Direction.N: 8, Direction.S: 1}


def forward_direction(team: Team, mirrored: bool) -> Direction:
    forward = TOP_FORWARD[team]
    return OPPOSITE[forward] if mirrored else forward


def start_rank(forward: Direction) -> Optional[int]:
    """Pawns facing a ring direction have no start rank (they can only get there by moving)."""
    return START_RANKS.get(forward)


def promotion_rank(team: Team, mirrored: bool) -> int:
    return PROMOTION_RANKS[forward_direction(team, mirrored)]


@dataclass
class Piece:
    """
    A piece never knows where it stands: that is the board's business.

    `facing` is only used by pawns: their forward direction at the start, then the heading of their last step.
    That is not always a compass direction (ex. `out` right after coming up through the wormhole).
    A pawn without a facing walks the forward direction of its team on the surface it stands on.
    """

    id: str
    type: PieceType
    team: Team
    facing: Optional[Direction] = None

    def promote_to(self, new_type: PieceType) -> None:
        self.type = new_type
        self.facing = None
