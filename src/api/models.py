"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidNotationError, InvalidRequestError
from src.core.shared_types import PieceType, TeamName, Variant
from src.wormhole.square import notation_to_square

PieceId = str
SquareName = str


def _validate_square_name(value: str) -> str:
    """Normalised notation ('a1', "x3'", ...), or InvalidRequestError"""
    try:
        return notation_to_square(value).to_algebraic()
    except InvalidNotationError as err:
        raise InvalidRequestError(
            f"Cannot interpret {value!r} as a valid square name."
        ) from err


# --- REQUEST MODELS ---
class NewGameRequest(BaseModel):
    variant: Variant = Variant.TWO_TEAM
    promotion_piece: Optional[PieceType] = None


class GetGameRequest(BaseModel):
    game_id: UUID


class LegalMovesRequest(BaseModel):
    game_id: UUID
    piece_id: PieceId


class MoveRequest(BaseModel):
    """The path as shown to the player: from the piece's square to the chosen destination."""

    game_id: UUID
    piece_id: PieceId
    path: list[SquareName]

    @field_validator("path")
    @classmethod
    def validate_path(cls, value: list[str]) -> list[str]:
        if len(value) < 2:
            raise InvalidRequestError(
                "A path needs at least a start and a destination square."
            )
        return [_validate_square_name(name) for name in value]


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class PieceResponse(BaseModel):
    piece_id: PieceId
    piece_type: PieceType
    team: TeamName
    square: SquareName


class GameResponse(BaseModel):
    game_id: UUID
    variant: Variant
    active_team: TeamName
    pieces: list[PieceResponse]
    en_passant_square: Optional[SquareName]
    move_history: list[str]


class DestinationModel(BaseModel):
    square: SquareName
    path: list[SquareName]
    captures: Optional[PieceId] = None
    castling: bool = False
    en_passant: bool = False
    promotion: Optional[PieceType] = None

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: str) -> str:
        return _validate_square_name(value)


class LegalMovesResponse(BaseModel):
    game_id: UUID
    piece_id: PieceId
    origin: SquareName
    destinations: list[DestinationModel]
