"""
Starting positions.

Every team lines up like in classical chess: back rank rook-knight-bishop-queen-king-bishop-knight-rook, pawns in
front of it. Teams 1 and 2 use the upper surface, teams 3 and 4 (four team variant only) the mirrored one.
"""

from src.core.shared_types import Variant
from src.wormhole.pieces import Piece, PieceType, Team, forward_direction
from src.wormhole.square import FILES, Square, grid_square

BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

# team -> (back rank, pawn rank, mirrored surface)
HOME_RANKS: dict[Team, tuple[int, int, bool]] = {
    Team.WHITE: (1, 2, False),
    Team.BLACK: (8, 7, False),
    Team.BROWN: (1, 2, True),
    Team.GREEN: (8, 7, True),
}

TEAMS_PER_VARIANT: dict[Variant, tuple[Team, ...]] = {
    Variant.TWO_TEAM: (Team.WHITE, Team.BLACK),
    Variant.FOUR_TEAM: (Team.WHITE, Team.BLACK, Team.BROWN, Team.GREEN),
}


def piece_id(team: Team, piece_type: PieceType, square: Square) -> str:
    """ex) 'player1-rook-a1', "player3-pawn-c2'". The starting square keeps the id unique."""
    return f"player{team.value}-{piece_type.name.lower()}-{square}"


def team_layout(team: Team) -> list[tuple[Piece, Square]]:
    back_rank, pawn_rank, mirrored = HOME_RANKS[team]
    placements: list[tuple[Piece, Square]] = []
    for file, piece_type in enumerate(BACK_RANK, start=1):
        square = grid_square(file, back_rank, mirrored)
        piece = Piece(piece_id(team, piece_type, square), piece_type, team)
        placements.append((piece, square))

    facing = forward_direction(team, mirrored)
    for file in range(1, len(FILES) + 1):
        square = grid_square(file, pawn_rank, mirrored)
        pawn = Piece(
            piece_id(team, PieceType.PAWN, square), PieceType.PAWN, team, facing
        )
        placements.append((pawn, square))
    return placements


def default_layout(variant: Variant) -> list[tuple[Piece, Square]]:
    """All pieces of all teams taking part in the variant, in turn order."""
    return [
        placement
        for team in TEAMS_PER_VARIANT[variant]
        for placement in team_layout(team)
    ]
