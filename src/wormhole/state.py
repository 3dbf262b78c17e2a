"""
Everything that describes a game at one point in time.

A GameState is treated as a value: the move executor deep-copies it and returns the copy,
so a state that was handed out is never changed afterwards.
"""

from dataclasses import dataclass, field
from typing import Optional, Self

from src.core.exceptions import GameStateError, InvalidNotationError
from src.core.models import GameModel, PieceModel
from src.core.shared_types import Variant
from src.wormhole.board import Board
from src.wormhole.directions import Direction
from src.wormhole.layout import TEAMS_PER_VARIANT, default_layout
from src.wormhole.pieces import Piece, PieceType, Team
from src.wormhole.square import Square


@dataclass(frozen=True)
class EnPassantTarget:
    """The square a pawn skipped over with its double advance, and the pawn that did it."""

    square: Square
    pawn_id: str
    team: Team


@dataclass
class GameState:
    board: Board
    pieces: dict[str, Piece]
    team_order: tuple[Team, ...]
    active_team: Team
    variant: Variant = Variant.TWO_TEAM
    promotion_piece: PieceType = PieceType.QUEEN
    moved: set[str] = field(default_factory=set)
    captured: list[str] = field(default_factory=list)
    en_passant: Optional[EnPassantTarget] = None
    move_log: list[str] = field(default_factory=list)

    @classmethod
    def new_game(
        cls,
        variant: Variant = Variant.TWO_TEAM,
        promotion_piece: PieceType = PieceType.QUEEN,
    ) -> Self:
        """Pieces on their starting squares, first team of the turn order to move."""
        team_order = TEAMS_PER_VARIANT[variant]
        state = cls(
            board=Board(),
            pieces={},
            team_order=team_order,
            active_team=team_order[0],
            variant=variant,
            promotion_piece=promotion_piece,
        )
        for piece, square in default_layout(variant):
            state.add_piece(piece, square)
        return state

    @classmethod
    def empty(
        cls,
        variant: Variant = Variant.TWO_TEAM,
        promotion_piece: PieceType = PieceType.QUEEN,
    ) -> Self:
        """A board without pieces. Handy to set up positions piece by piece."""
        team_order = TEAMS_PER_VARIANT[variant]
        return cls(
            board=Board(),
            pieces={},
            team_order=team_order,
            active_team=team_order[0],
            variant=variant,
            promotion_piece=promotion_piece,
        )

    # --- QUERIES (used by the movement rules) ---
    def piece_at(self, square: Square) -> Optional[Piece]:
        piece_id = self.board.piece_id(square)
        return self.pieces[piece_id] if piece_id is not None else None

    def square_of(self, piece_id: str) -> Square:
        square = self.board.square_of(piece_id)
        if square is None:
            raise GameStateError(f"Piece {piece_id!r} is not on the board.")
        return square

    def piece(self, piece_id: str) -> Piece:
        if piece_id not in self.pieces:
            raise GameStateError(f"Unknown piece {piece_id!r}.")
        return self.pieces[piece_id]

    def has_moved(self, piece_id: str) -> bool:
        return piece_id in self.moved

    def team_pieces(self, team: Team) -> list[Piece]:
        return [piece for piece in self.pieces.values() if piece.team == team]

    def next_team(self) -> Team:
        index = self.team_order.index(self.active_team)
        return self.team_order[(index + 1) % len(self.team_order)]

    # --- UPDATES (used by the move executor) ---
    def add_piece(self, piece: Piece, square: Square) -> None:
        if piece.id in self.pieces:
            raise GameStateError(f"A piece with id {piece.id!r} already exists.")
        self.board.place(piece.id, square)
        self.pieces[piece.id] = piece

    def remove_piece(self, piece_id: str) -> None:
        """Captured pieces leave the board and the registry, but their ids are remembered."""
        self.board.remove(piece_id)
        del self.pieces[piece_id]
        self.captured.append(piece_id)

    # --- CONVERSION FROM/TO THE SERVICE LAYER ---
    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a GameState from the information the Service layer actually has"""
        try:
            variant = Variant(model.variant)
            promotion_piece = PieceType[model.promotion_piece.upper()]
            team_order = tuple(Team(team) for team in model.team_order)
            active_team = Team(model.active_team)
        except (KeyError, ValueError) as err:
            raise GameStateError(f"Cannot interpret game data: {err}") from err
        if active_team not in team_order:
            raise GameStateError(
                f"Team {active_team.value} is to move, but does not take part in this game."
            )

        state = cls(
            board=Board(),
            pieces={},
            team_order=team_order,
            active_team=active_team,
            variant=variant,
            promotion_piece=promotion_piece,
            moved=set(model.moved),
            captured=list(model.captured),
            move_log=list(model.move_log),
        )
        for record in model.pieces:
            state.add_piece(_piece_from_model(record), _parse_square(record.square))

        if model.en_passant_square is not None:
            if model.en_passant_pawn not in state.pieces:
                raise GameStateError(
                    f"En passant pawn {model.en_passant_pawn!r} is not on the board."
                )
            state.en_passant = EnPassantTarget(
                square=_parse_square(model.en_passant_square),
                pawn_id=model.en_passant_pawn,
                team=state.pieces[model.en_passant_pawn].team,
            )
        return state

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            variant=self.variant.value,
            promotion_piece=self.promotion_piece.name.lower(),
            active_team=self.active_team.value,
            team_order=[team.value for team in self.team_order],
            pieces=[
                PieceModel(
                    piece_id=piece.id,
                    piece_type=piece.type.name.lower(),
                    team=piece.team.value,
                    square=self.square_of(piece.id).to_algebraic(),
                    facing=piece.facing.value if piece.facing else None,
                )
                for piece in self.pieces.values()
            ],
            moved=sorted(self.moved),
            captured=list(self.captured),
            en_passant_square=(
                self.en_passant.square.to_algebraic() if self.en_passant else None
            ),
            en_passant_pawn=self.en_passant.pawn_id if self.en_passant else None,
            move_log=list(self.move_log),
        )


def _parse_square(name: str) -> Square:
    try:
        return Square.from_algebraic(name)
    except InvalidNotationError as err:
        raise GameStateError(str(err)) from err


def _piece_from_model(record: PieceModel) -> Piece:
    try:
        return Piece(
            id=record.piece_id,
            type=PieceType[record.piece_type.upper()],
            team=Team(record.team),
            facing=Direction(record.facing) if record.facing else None,
        )
    except (KeyError, ValueError) as err:
        raise GameStateError(
            f"Cannot interpret piece {record.piece_id!r}: {err}"
        ) from err
