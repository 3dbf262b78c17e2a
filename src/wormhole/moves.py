"""
Geometry/Base movement and capturing rules

Key idea: Use strategy pattern to define the move set for each piece type.

Every rule returns an ordered mapping destination -> Move. A Move carries the whole path that was travelled
(start square included), since on this board two different routes can end on the same square and the
rendering layer animates the route. When a destination is reached along several routes the first route found wins.

There is no check / king safety: whatever a rule returns is a legal move.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional, Protocol

from src.wormhole.castling import CastlingSide, castling_rules
from src.wormhole.directions import (
    DIAGONAL_DIRECTIONS,
    KING_DIRECTIONS,
    ORTHOGONAL_DIRECTIONS,
    PERPENDICULAR,
    Direction,
)
from src.wormhole.junctions import pawn_junction, resolve_step, step
from src.wormhole.pieces import (
    Piece,
    PieceType,
    Team,
    forward_direction,
    promotion_rank,
    start_rank,
)
from src.wormhole.square import Square
from src.wormhole.topology import neighbor

logger = logging.getLogger(__name__)


class EnPassant(Protocol):
    square: Square
    pawn_id: str
    team: Team


class Board(Protocol):
    """Just the parts the movement strategies need"""

    en_passant: Optional[EnPassant]
    promotion_piece: PieceType

    def piece_at(self, square: Square) -> Optional[Piece]: ...
    def has_moved(self, piece_id: str) -> bool: ...


@dataclass
class Move:
    """basic definition of a move to be made"""

    path: tuple[Square, ...]
    captured: Optional[str] = None
    castling_side: Optional[CastlingSide] = None
    is_en_passant: bool = False
    is_double_advance: bool = False
    promote_to: Optional[PieceType] = None
    facing: Optional[Direction] = None

    @property
    def from_square(self) -> Square:
        return self.path[0]

    @property
    def to_square(self) -> Square:
        return self.path[-1]

    def path_notation(self) -> list[str]:
        return [square.to_algebraic() for square in self.path]


@dataclass
class MoveResult:
    """All moves of one piece: destination -> Move, in the order they were found."""

    piece_id: str
    origin: Square
    moves: dict[Square, Move] = field(default_factory=dict)

    def destinations(self) -> list[Square]:
        return list(self.moves.keys())

    def move_to(self, destination: Square) -> Optional[Move]:
        return self.moves.get(destination)

    def paths(self) -> dict[Square, tuple[Square, ...]]:
        return {destination: move.path for destination, move in self.moves.items()}


# --- MOVEMENT RULES ---
@dataclass(frozen=True)
class _Frame:
    """Work item of the sliding traversal: where the line is, where it is heading, and how it got there."""

    square: Square
    direction: Direction
    visited: frozenset[tuple[Square, Direction]]
    path: tuple[Square, ...]


def sliding_move(
    piece: Piece, square: Square, board: Board, directions: tuple[Direction, ...]
) -> dict[Square, Move]:
    """
    Raycasting on a graph
    -----

    ---
    Follow each direction until we hit another piece or the edge of the board. Unlike on a flat board a line
    can fork (at a pentagon), and it can come back to where it passed before (around a ring). So instead of
    a simple loop we keep a stack of frames, depth-first, and every frame remembers the (square, heading)
    pairs its own line already went through. A line that repeats one of those stops.

    NOTE: The moving piece is lifted off the board while its lines are traced: a line that comes back to the start
    square passes through it, but the start square is never a destination.
    """
    found: dict[Square, Move] = {}
    for direction in directions:
        stack = [_Frame(square, direction, frozenset(), (square,))]
        while stack:
            frame = stack.pop()
            key = (frame.square, frame.direction)
            if key in frame.visited:
                continue
            visited = frame.visited | {key}

            # explore the branches in the listed order: push them reversed
            for target, heading in reversed(step(frame.square, frame.direction)):
                path = frame.path + (target,)
                occupant = None if target == square else board.piece_at(target)
                if occupant is None:
                    if target != square:
                        found.setdefault(target, Move(path))
                    stack.append(_Frame(target, heading, visited, path))
                elif occupant.team != piece.team:
                    found.setdefault(target, Move(path, captured=occupant.id))
                # own piece: line blocked
    return found


def candidate_rook_moves(
    piece: Piece, square: Square, board: Board
) -> dict[Square, Move]:
    """Rooks move along files, ranks and rings, and straight in/out between the rings"""
    return sliding_move(piece, square, board, ORTHOGONAL_DIRECTIONS)


def candidate_bishop_moves(
    piece: Piece, square: Square, board: Board
) -> dict[Square, Move]:
    """Bishops move diagonally: on the flat parts, and along the ring diagonals (idl, idr, odl, odr)"""
    return sliding_move(piece, square, board, DIAGONAL_DIRECTIONS)


def candidate_queen_moves(
    piece: Piece, square: Square, board: Board
) -> dict[Square, Move]:
    """
    The Queen combines the rook moves and the bishop moves.

    Both are traced independently. If both reach the same square, the rook's route is kept.
    """
    moves = candidate_rook_moves(piece, square, board)
    for destination, move in candidate_bishop_moves(piece, square, board).items():
        moves.setdefault(destination, move)
    return moves


def candidate_knight_moves(
    piece: Piece, square: Square, board: Board
) -> dict[Square, Move]:
    """
    Two steps straight, then one step to the side.

    Each of the two straight steps follows the remaps and may fork at a pentagon; the sidestep is taken
    perpendicular to the heading after the second step. Only the final square matters for occupancy (knights jump).
    """
    found: dict[Square, Move] = {}
    for direction in ORTHOGONAL_DIRECTIONS:
        for first, first_heading in step(square, direction):
            for second, second_heading in step(first, first_heading):
                for side in PERPENDICULAR.get(second_heading, ()):
                    resolved = resolve_step(second, side)
                    if resolved is None:
                        continue
                    target, _ = resolved
                    if target == square or target in found:
                        continue

                    occupant = board.piece_at(target)
                    if occupant is not None and occupant.team == piece.team:
                        continue
                    found[target] = Move(
                        (square, first, second, target),
                        captured=occupant.id if occupant else None,
                    )
    return found


def candidate_king_moves(
    piece: Piece, square: Square, board: Board
) -> dict[Square, Move]:
    """
    The king can move by a single square at the time, in any of the sixteen directions.

    Plain neighbours only: no remaps and no pentagon forks. Castling is modelled as a special king move.
    """
    found: dict[Square, Move] = {}
    for direction in KING_DIRECTIONS:
        target = neighbor(square, direction)
        if target is None or target in found:
            continue
        occupant = board.piece_at(target)
        if occupant is not None and occupant.team == piece.team:
            continue
        found[target] = Move(
            (square, target), captured=occupant.id if occupant else None
        )

    for destination, move in castling_moves(piece, square, board).items():
        found.setdefault(destination, move)
    return found


def castling_moves(
    piece: Piece, square: Square, board: Board
) -> dict[Square, Move]:
    """
    You are allowed to castle if

    * the king has not moved and stands on its starting square (on either surface)
    * the rook on that side has not moved and stands on its corner
    * all squares in between are empty

    NOTE: no checks are involved, there is no check on this board.
    """
    if board.has_moved(piece.id):
        return {}

    found: dict[Square, Move] = {}
    for side, rule in castling_rules(piece.team, square.mirrored).items():
        if square != rule.king_from:
            continue

        rook = board.piece_at(rule.rook_from)
        if rook is None or rook.type != PieceType.ROOK or rook.team != piece.team:
            continue
        if board.has_moved(rook.id):
            continue
        if any(board.piece_at(between) is not None for between in rule.between):
            continue

        found[rule.king_to] = Move(rule.king_path, castling_side=side)
    return found


def pawn_forward(piece: Piece, square: Square) -> Direction:
    """The stored facing, for pawns that have one. Otherwise the forward direction of the team on this surface."""
    return piece.facing or forward_direction(piece.team, square.mirrored)


def candidate_pawn_moves(
    piece: Piece, square: Square, board: Board
) -> dict[Square, Move]:
    """
    A pawn:
    - moves by a single square forward (into an empty square).
    - It can move by two in its first move (so when on its starting rank), if both squares are empty.
    - takes diagonally, beside its forward direction. Also the square an opponent pawn just skipped (en passant).

    Pawns do not fork at a pentagon: they keep their heading, and the pentagon has its own
    table of advance/capture directions.
    """
    found: dict[Square, Move] = {}
    forward = pawn_forward(piece, square)
    junction = pawn_junction(square, forward)

    # advances
    for direction in junction.advances:
        resolved = resolve_step(square, direction)
        if resolved is None:
            continue
        target, heading = resolved
        if board.piece_at(target) is not None:
            continue
        found.setdefault(
            target, _pawn_move(piece, board, (square, target), facing=heading)
        )

        if board.has_moved(piece.id) or square.rank != start_rank(forward):
            continue
        double = _double_advance(target, heading, board)
        if double is not None:
            second, second_heading = double
            found.setdefault(
                second,
                _pawn_move(
                    piece,
                    board,
                    (square, target, second),
                    facing=second_heading,
                    is_double_advance=True,
                ),
            )

    # captures
    for direction in junction.captures:
        resolved = resolve_step(square, direction)
        if resolved is None:
            continue
        target, _ = resolved
        occupant = board.piece_at(target)
        if occupant is not None:
            if occupant.team != piece.team:
                found.setdefault(
                    target,
                    _pawn_move(
                        piece,
                        board,
                        (square, target),
                        captured=occupant.id,
                        facing=forward,
                    ),
                )
            continue

        en_passant = board.en_passant
        if (
            en_passant is not None
            and en_passant.square == target
            and en_passant.team != piece.team
        ):
            found.setdefault(
                target,
                _pawn_move(
                    piece,
                    board,
                    (square, target),
                    captured=en_passant.pawn_id,
                    facing=forward,
                    is_en_passant=True,
                ),
            )
    return found


def _double_advance(
    first: Square, heading: Direction, board: Board
) -> Optional[tuple[Square, Direction]]:
    """Second step of the double advance: forward is resolved again from the square reached by the first step."""
    direction = pawn_junction(first, heading).advances[0]
    resolved = resolve_step(first, direction)
    if resolved is None:
        return None
    second, second_heading = resolved
    if board.piece_at(second) is not None:
        return None
    return second, second_heading


def _pawn_move(
    piece: Piece,
    board: Board,
    path: tuple[Square, ...],
    facing: Direction,
    captured: Optional[str] = None,
    is_en_passant: bool = False,
    is_double_advance: bool = False,
) -> Move:
    """Fill in the pawn specific parts of a move: the resulting facing and the promotion."""
    destination = path[-1]
    promote_to = None
    if not destination.is_junction and destination.rank == promotion_rank(
        piece.team, destination.mirrored
    ):
        promote_to = board.promotion_piece
    return Move(
        path,
        captured=captured,
        is_en_passant=is_en_passant,
        is_double_advance=is_double_advance,
        promote_to=promote_to,
        facing=facing,
    )


# -- STRATEGY PATTERN: MOVEMENT RULES ---
CandidateMovesFn = Callable[[Piece, Square, Board], dict[Square, Move]]
MOVEMENT_RULES: dict[PieceType, CandidateMovesFn] = {
    PieceType.PAWN: candidate_pawn_moves,
    PieceType.KNIGHT: candidate_knight_moves,
    PieceType.BISHOP: candidate_bishop_moves,
    PieceType.ROOK: candidate_rook_moves,
    PieceType.QUEEN: candidate_queen_moves,
    PieceType.KING: candidate_king_moves,
}


def generate_moves(piece: Piece, square: Square, board: Board) -> MoveResult:
    """Look up the rule for the piece type and run it."""
    movement_rule = MOVEMENT_RULES[piece.type]
    moves = movement_rule(piece, square, board)
    logger.debug(
        "%s on %s: %d destination(s)", piece.id, square.to_algebraic(), len(moves)
    )
    return MoveResult(piece_id=piece.id, origin=square, moves=moves)
