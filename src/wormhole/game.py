"""
Entrypoint into the domain layer for the service layer.

Two operations:
* `compute_moves`: what can this piece do? (pure: the state is only read)
* `apply_move`: commit one of those moves. Returns the state after the move, the state passed in is left untouched.
"""

import logging
from copy import deepcopy
from typing import Optional, Sequence

from src.core.config import GameConfig
from src.core.exceptions import IllegalMoveError, NotYourTurnError
from src.wormhole.castling import castling_rules
from src.wormhole.moves import Move, MoveResult, generate_moves
from src.wormhole.pieces import PieceType
from src.wormhole.square import Square
from src.wormhole.state import EnPassantTarget, GameState

logger = logging.getLogger(__name__)


def new_game(config: Optional[GameConfig] = None) -> GameState:
    """Starting position for the configured variant."""
    config = config or GameConfig()
    return GameState.new_game(
        variant=config.variant,
        promotion_piece=PieceType[config.promotion_piece.name],
    )


def compute_moves(piece_id: str, state: GameState) -> MoveResult:
    """
    Moves of a single piece
    ----

    ----
    Looks up where the piece stands and runs the movement rule of its type.
    Does not care whose turn it is: the rendering layer can show the moves of any piece.
    """
    piece = state.piece(piece_id)
    square = state.square_of(piece_id)
    return generate_moves(piece, square, state)


def apply_move(
    state: GameState, piece_id: str, chosen_path: Sequence[Square]
) -> GameState:
    """
    Attempt to make a move
    -----

    1. make sure it is the turn of the piece's team
    2. recompute the moves of the piece, the chosen path must start on its square and end on one of its destinations
    3. on a copy of the state: remove the captured piece, move the piece (and the rook, when castling),
       update the pawn's facing / promote it, set or clear the en passant target
    4. pass the turn to the next team and log the move
    """
    piece = state.piece(piece_id)
    if piece.team != state.active_team:
        logger.warning(
            "rejected move of %s: team %d is to move", piece_id, state.active_team
        )
        raise NotYourTurnError(
            f"It is not your turn. Waiting for team {state.active_team.value} to make a move first."
        )

    move = _select_move(state, piece_id, chosen_path)

    new_state = deepcopy(state)
    _update_board(new_state, piece_id, move)
    _update_piece(new_state, piece_id, move)
    _update_en_passant(new_state, piece_id, move)
    _update_moves(new_state, piece_id, move)
    new_state.active_team = new_state.next_team()

    logger.info(
        "%s: %s -> %s%s",
        piece_id,
        move.from_square,
        move.to_square,
        f" (captures {move.captured})" if move.captured else "",
    )
    return new_state


# -- PRIVATE HELPERS ---
def _select_move(
    state: GameState, piece_id: str, chosen_path: Sequence[Square]
) -> Move:
    """Find the move the path refers to. Only its two ends count: the route itself is the one the rules found."""
    if len(chosen_path) < 2:
        raise IllegalMoveError(
            f"A move needs a start and a destination, got {list(map(str, chosen_path))}."
        )

    result = compute_moves(piece_id, state)
    start, destination = chosen_path[0], chosen_path[-1]
    if start != result.origin:
        logger.warning("rejected move of %s: it is not on %s", piece_id, start)
        raise IllegalMoveError(
            f"Move not allowed: {piece_id} stands on {result.origin}, not on {start}."
        )

    move = result.move_to(destination)
    if move is None:
        logger.warning("rejected move of %s to %s", piece_id, destination)
        raise IllegalMoveError(f"Move not allowed: {piece_id} to {destination}.")
    return move


def _update_board(state: GameState, piece_id: str, move: Move) -> None:
    """
    Call for the proper updates of the board's position

    Captured piece first (for en passant it does not stand on the destination), then the moving piece.
    A castling move displaces two pieces.
    """
    if move.captured is not None:
        state.remove_piece(move.captured)

    state.board.move_piece(piece_id, move.to_square)

    if move.castling_side is not None:
        piece = state.pieces[piece_id]
        rule = castling_rules(piece.team, move.from_square.mirrored)[
            move.castling_side
        ]
        rook_id = state.board.piece_id(rule.rook_from)
        state.board.move_piece(rook_id, rule.rook_to)
        state.moved.add(rook_id)


def _update_piece(state: GameState, piece_id: str, move: Move) -> None:
    state.moved.add(piece_id)
    piece = state.pieces[piece_id]
    if piece.type != PieceType.PAWN:
        return

    piece.facing = move.facing
    if move.promote_to is not None:
        piece.promote_to(move.promote_to)


def _update_en_passant(state: GameState, piece_id: str, move: Move) -> None:
    """Only the move right after the double advance can take en passant: any other move clears the target."""
    if move.is_double_advance:
        state.en_passant = EnPassantTarget(
            square=move.path[1], pawn_id=piece_id, team=state.pieces[piece_id].team
        )
    else:
        state.en_passant = None


def _update_moves(state: GameState, piece_id: str, move: Move) -> None:
    state.move_log.append(f"{piece_id}:{move.from_square}-{move.to_square}")
