"""The board keeps track of which piece stands where: nothing more"""

from dataclasses import dataclass, field
from typing import Iterable, Optional

from src.core.exceptions import GameStateError
from src.wormhole.square import Square
from src.wormhole.topology import BOARD_GRAPH


@dataclass
class Board:
    """
    Occupancy of the board: square -> id of the piece standing there.

    At most one piece per square. A piece id appears on at most one square.
    """

    position: dict[Square, str] = field(default_factory=dict)

    def piece_id(self, square: Square) -> Optional[str]:
        return self.position.get(square)

    def square_of(self, piece_id: str) -> Optional[Square]:
        return next(
            (square for square, pid in self.position.items() if pid == piece_id),
            None,
        )

    def is_empty(self, square: Square) -> bool:
        return square not in self.position

    def is_any_occupied(self, squares: Iterable[Square]) -> bool:
        return any(not self.is_empty(square) for square in squares)

    def place(self, piece_id: str, square: Square) -> None:
        if square not in BOARD_GRAPH:
            raise GameStateError(f"{square} is not a square of this board.")
        if not self.is_empty(square):
            raise GameStateError(
                f"Cannot place {piece_id} on {square}: occupied by {self.position[square]}."
            )
        if self.square_of(piece_id) is not None:
            raise GameStateError(f"{piece_id} is already on the board.")
        self.position[square] = piece_id

    def remove(self, piece_id: str) -> Square:
        square = self.square_of(piece_id)
        if square is None:
            raise GameStateError(f"{piece_id} is not on the board.")
        del self.position[square]
        return square

    def move_piece(self, piece_id: str, to_square: Square) -> None:
        """Update the position on the board (target square must be empty: remove captured pieces first)"""
        if not self.is_empty(to_square):
            raise GameStateError(
                f"Cannot move {piece_id} to {to_square}: occupied by {self.position[to_square]}."
            )
        self.remove(piece_id)
        self.place(piece_id, to_square)

    def occupied_squares(self) -> list[Square]:
        return list(self.position.keys())
