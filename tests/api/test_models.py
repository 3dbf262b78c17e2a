from uuid import UUID, uuid4

import pytest

from src.api.models import (
    DestinationModel,
    LegalMovesRequest,
    MoveRequest,
    NewGameRequest,
)
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Variant


@pytest.fixture
def mock_id() -> UUID:
    return uuid4()


# -- Validation - NewGameRequest --
def test_new_game_defaults() -> None:
    """Without arguments: the two team game, promotion piece left to the service's configuration."""
    request = NewGameRequest()
    assert request.variant == Variant.TWO_TEAM
    assert request.promotion_piece is None


def test_new_game_variant_from_string() -> None:
    request = NewGameRequest(variant="four_team", promotion_piece="rook")
    assert request.variant == Variant.FOUR_TEAM
    assert request.promotion_piece == "rook"


# -- Validation - MoveRequest --
def test_valid_path(mock_id: UUID) -> None:
    """Test that MoveRequest accepts a path of squares, mirrored and junction squares included."""
    path = ["d3", "d4", "d4'", "d3'"]
    request = MoveRequest(game_id=mock_id, piece_id="player1-rook-d1", path=path)
    assert request.path == path


def test_path_is_normalised(mock_id: UUID) -> None:
    """Surrounding whitespace is dropped."""
    request = MoveRequest(
        game_id=mock_id, piece_id="player1-knight-g1", path=[" g1 ", "x2\n"]
    )
    assert request.path == ["g1", "x2"]


@pytest.mark.parametrize(
    "square",
    [
        "nonsense",  # not a square at all
        "i9",  # off the board
        "x5",  # junction squares only go up to 4
        "a1''",  # a single mark for the mirrored surface
    ],
)
def test_invalid_square_in_path(mock_id: UUID, square: str) -> None:
    """Test that an exception is raised when using invalid square name."""
    with pytest.raises(InvalidRequestError):
        _ = MoveRequest(
            game_id=mock_id, piece_id="player1-pawn-e2", path=["e2", square]
        )


@pytest.mark.parametrize("path", [[], ["e2"]])
def test_path_needs_start_and_destination(mock_id: UUID, path: list[str]) -> None:
    with pytest.raises(InvalidRequestError):
        _ = MoveRequest(game_id=mock_id, piece_id="player1-pawn-e2", path=path)


def test_legal_moves_request(mock_id: UUID) -> None:
    request = LegalMovesRequest(game_id=mock_id, piece_id="player2-queen-d8")
    assert request.game_id == mock_id


# -- Validation - DestinationModel --
def test_destination_square_validated() -> None:
    destination = DestinationModel(square="c3'", path=["b3'", "c3'"])
    assert destination.square == "c3'"
    assert not destination.castling

    with pytest.raises(InvalidRequestError):
        _ = DestinationModel(square="c9", path=["c8", "c9"])
