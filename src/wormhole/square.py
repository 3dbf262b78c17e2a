"""
A square on the board

(placed in its own module as multiple other modules need to import it)

Two kinds of squares exist:
* grid squares 'a1' - 'h8', present on both surfaces of the board. The copy on the mirrored (lower) surface
  is marked with a trailing prime: "a1'".
* junction nodes 'x1' - 'x4' and 'y1' - 'y4' of the inner ring. They have no file or rank, they only exist as ring nodes
  (again on both surfaces).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from src.core.exceptions import InvalidNotationError

FILES = "abcdefgh"
RANKS = "12345678"
JUNCTION_PREFIXES = "xy"
JUNCTION_INDICES = "1234"
MIRROR_MARK = "'"


@dataclass(frozen=True)
class Square:
    token: str
    mirrored: bool = False

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """
        Algebraic notation, extended with the mirror marker and the junction nodes.

        ex) 'a1' -> Square('a1'), "h8'" -> Square('h8', mirrored=True), "x3'" -> Square('x3', mirrored=True)
        """
        text = sq.strip()
        mirrored = text.endswith(MIRROR_MARK)
        token = text[:-1] if mirrored else text

        if len(token) != 2:
            raise InvalidNotationError(f"Cannot interpret {sq!r} as a square.")

        head, tail = token[0], token[1]
        is_grid = head in FILES and tail in RANKS
        is_junction = head in JUNCTION_PREFIXES and tail in JUNCTION_INDICES
        if not (is_grid or is_junction):
            raise InvalidNotationError(f"Cannot interpret {sq!r} as a square.")
        return cls(token, mirrored)

    def to_algebraic(self) -> str:
        return f"{self.token}{MIRROR_MARK if self.mirrored else ''}"

    @property
    def is_junction(self) -> bool:
        return self.token[0] in JUNCTION_PREFIXES

    @property
    def file(self) -> Optional[int]:
        """1 (a-file) - 8 (h-file). Junction nodes have no file."""
        if self.is_junction:
            return None
        return FILES.index(self.token[0]) + 1

    @property
    def rank(self) -> Optional[int]:
        if self.is_junction:
            return None
        return int(self.token[1])

    def mirror(self) -> Square:
        """The counterpart of this square on the other surface"""
        return Square(self.token, not self.mirrored)

    def on_layer(self, mirrored: bool) -> Square:
        return Square(self.token, mirrored)

    def __str__(self) -> str:
        return self.to_algebraic()


def notation_to_square(text: str) -> Square:
    """Boundary helper for the rendering layer. Raises InvalidNotationError on malformed input."""
    return Square.from_algebraic(text)


def square_to_notation(square: Square) -> str:
    return square.to_algebraic()


def grid_square(file: int, rank: int, mirrored: bool = False) -> Square:
    """(1,1) -> a1. Used to write layouts and castling rules without spelling out every name."""
    return Square(f"{FILES[file - 1]}{rank}", mirrored)
