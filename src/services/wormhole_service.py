"""
Orchestration of communication from the rendering layer to the rules engine (and the reverse direction).

Games live in memory only. Each game is a GameSession: the session's lock is held from computing the moves
a decision is based on up to committing the chosen move, so two requests on the same game cannot interleave.
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Optional, Self
from uuid import UUID, uuid4

from src.api.models import (
    DeleteGameRequest,
    DestinationModel,
    GameResponse,
    GetGameRequest,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveRequest,
    NewGameRequest,
    PieceId,
    PieceResponse,
)
from src.core.config import GameConfig, configure_logging
from src.core.exceptions import IllegalMoveError, SessionNotFoundError
from src.core.models import GameModel
from src.core.shared_types import PieceType, TeamName
from src.wormhole.game import apply_move, compute_moves, new_game
from src.wormhole.moves import MoveResult
from src.wormhole.square import Square, notation_to_square
from src.wormhole.state import GameState

logger = logging.getLogger(__name__)

TEAM_NAMES: dict[int, TeamName] = {
    1: TeamName.WHITE,
    2: TeamName.BLACK,
    3: TeamName.BROWN,
    4: TeamName.GREEN,
}


@dataclass
class GameSession:
    """One game: its current state, the moves last shown per piece, and the lock guarding both."""

    state: GameState
    last_results: dict[PieceId, MoveResult] = field(default_factory=dict)
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)


class WormholeService:
    """Orchestration of layers for wormhole chess games."""

    def __init__(self, config: Optional[GameConfig] = None) -> None:
        self.config = config or GameConfig()
        self._sessions: dict[UUID, GameSession] = {}
        self._registry_lock = threading.Lock()

    @classmethod
    def from_env(cls) -> Self:
        """Service configured from the WORMHOLE_* environment variables, logging included."""
        config = GameConfig.from_env()
        configure_logging(config.log_level)
        return cls(config)

    # -- Request handling ---
    def new_game(self, request: NewGameRequest) -> GameResponse:
        """Set up the starting position of the requested variant."""
        config = GameConfig(
            variant=request.variant,
            promotion_piece=request.promotion_piece or self.config.promotion_piece,
            log_level=self.config.log_level,
        )
        session = GameSession(state=new_game(config))
        game_id = uuid4()
        with self._registry_lock:
            self._sessions[game_id] = session
        logger.info("new %s game %s", config.variant, game_id)
        return self._create_game_response(game_id, session.state.to_model())

    def get_game(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used by the rendering layer to redraw the board / show whose turn it is.
        """
        session = self._fetch_session(request.game_id)
        with session.lock:
            model = session.state.to_model()
        return self._create_game_response(request.game_id, model)

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """Compute the moves of a piece. They are remembered as the moves the next move request has to pick from."""
        session = self._fetch_session(request.game_id)
        with session.lock:
            result = compute_moves(request.piece_id, session.state)
            session.last_results[result.piece_id] = result

        return LegalMovesResponse(
            game_id=request.game_id,
            piece_id=request.piece_id,
            origin=result.origin.to_algebraic(),
            destinations=[
                DestinationModel(
                    square=destination.to_algebraic(),
                    path=move.path_notation(),
                    captures=move.captured,
                    castling=move.castling_side is not None,
                    en_passant=move.is_en_passant,
                    promotion=(
                        PieceType(move.promote_to.name.lower())
                        if move.promote_to
                        else None
                    ),
                )
                for destination, move in result.moves.items()
            ],
        )

    def make_move(self, request: MoveRequest) -> GameResponse:
        """Make a move attempt: the destination must be one of the moves last computed for that piece."""
        session = self._fetch_session(request.game_id)
        path: list[Square] = [notation_to_square(name) for name in request.path]

        with session.lock:
            latest = session.last_results.get(request.piece_id)
            if latest is None:
                raise IllegalMoveError(
                    f"No moves were computed for {request.piece_id}. Request its legal moves first."
                )
            if latest.move_to(path[-1]) is None:
                raise IllegalMoveError(
                    f"Move not allowed: {request.piece_id} to {request.path[-1]}."
                )

            session.state = apply_move(session.state, request.piece_id, path)
            # moves computed before the commit no longer match the board
            session.last_results.clear()
            model = session.state.to_model()

        return self._create_game_response(request.game_id, model)

    def end_game(self, request: DeleteGameRequest) -> None:
        """Forget a game."""
        with self._registry_lock:
            if self._sessions.pop(request.game_id, None) is None:
                raise SessionNotFoundError(f"Game with {request.game_id=} not found.")
        logger.info("game %s ended", request.game_id)

    def list_games(self) -> list[UUID]:
        with self._registry_lock:
            return list(self._sessions.keys())

    # -- Internal helpers --
    def _create_game_response(self, game_id: UUID, model: GameModel) -> GameResponse:
        """Convert info in GameModel to a GameResponse (for game with given ID.)"""
        return GameResponse(
            game_id=game_id,
            variant=model.variant,
            active_team=TEAM_NAMES[model.active_team],
            pieces=[
                PieceResponse(
                    piece_id=piece.piece_id,
                    piece_type=piece.piece_type,
                    team=TEAM_NAMES[piece.team],
                    square=piece.square,
                )
                for piece in model.pieces
            ],
            en_passant_square=model.en_passant_square,
            move_history=model.move_log,
        )

    def _fetch_session(self, game_id: UUID) -> GameSession:
        """Attempt to find the game and raise error if it fails."""
        with self._registry_lock:
            session = self._sessions.get(game_id)
        if session is None:
            raise SessionNotFoundError(f"Game with {game_id=} not found.")
        return session
