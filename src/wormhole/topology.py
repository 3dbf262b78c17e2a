"""
Board topology: the static adjacency graph of the wormhole board.

Only the upper surface is written out below. The mirrored surface is geometrically identical (same file/rank
coordinates, same compass) so its rows are the same rows with every square mirrored. That also turns the `in` edges
of d4, e4, d5 and e5 (which point at their own mirror) into the edges leading back up through the wormhole.

Ring layout on the upper surface, seen from above (rank 1 at the bottom):

    outer ring (clockwise): d3 c3 c4 c5 c6 d6 e6 f6 f5 f4 f3 e3
    inner ring (clockwise): d4 x1 x2 x3 x4 d5 e5 y4 y3 y2 y1 e4

The corner squares of the outer ring (c3, c6, f3, f6) are pentagons: next to their four grid neighbours, their fifth
side faces the centre and leads to a junction node of the inner ring.

Missing entries are not errors: `neighbor()` returns None, which is how the edge of the board (and the edges of the
hole in the middle of it) are expressed.
"""

from types import MappingProxyType
from typing import Mapping, Optional

from src.wormhole.directions import Direction
from src.wormhole.square import Square

N, S, E, W = Direction.N, Direction.S, Direction.E, Direction.W
NE, NW, SE, SW = Direction.NE, Direction.NW, Direction.SE, Direction.SW
CW, CCW, IN, OUT = Direction.CW, Direction.CCW, Direction.IN, Direction.OUT
IDL, IDR, ODL, ODR = Direction.IDL, Direction.IDR, Direction.ODL, Direction.ODR

OUTER_RING: tuple[str, ...] = (
    "d3",
    "c3",
    "c4",
    "c5",
    "c6",
    "d6",
    "e6",
    "f6",
    "f5",
    "f4",
    "f3",
    "e3",
)
INNER_RING: tuple[str, ...] = (
    "d4",
    "x1",
    "x2",
    "x3",
    "x4",
    "d5",
    "e5",
    "y4",
    "y3",
    "y2",
    "y1",
    "e4",
)
PENTAGONS: tuple[str, ...] = ("c3", "c6", "f3", "f6")

# Inner ring squares that sit on the grid: these are where a line of travel drops through the wormhole.
THROAT_SQUARES: tuple[str, ...] = ("d4", "e4", "d5", "e5")

# fmt: off
_UPPER_SURFACE: dict[str, dict[Direction, str]] = {
    # -- rank 1 - 8, a-file to h-file --
    "a1": {N: "a2", E: "b1", NE: "b2"},
    "b1": {N: "b2", E: "c1", W: "a1", NE: "c2", NW: "a2"},
    "c1": {N: "c2", E: "d1", W: "b1", NE: "d2", NW: "b2"},
    "d1": {N: "d2", E: "e1", W: "c1", NE: "e2", NW: "c2"},
    "e1": {N: "e2", E: "f1", W: "d1", NE: "f2", NW: "d2"},
    "f1": {N: "f2", E: "g1", W: "e1", NE: "g2", NW: "e2"},
    "g1": {N: "g2", E: "h1", W: "f1", NE: "h2", NW: "f2"},
    "h1": {N: "h2", W: "g1", NW: "g2"},
    "a2": {N: "a3", S: "a1", E: "b2", NE: "b3", SE: "b1"},
    "b2": {N: "b3", S: "b1", E: "c2", W: "a2", NE: "c3", NW: "a3", SE: "c1", SW: "a1"},
    "c2": {N: "c3", S: "c1", E: "d2", W: "b2", NE: "d3", NW: "b3", SE: "d1", SW: "b1"},
    "d2": {N: "d3", S: "d1", E: "e2", W: "c2", NE: "e3", NW: "c3", SE: "e1", SW: "c1"},
    "e2": {N: "e3", S: "e1", E: "f2", W: "d2", NE: "f3", NW: "d3", SE: "f1", SW: "d1"},
    "f2": {N: "f3", S: "f1", E: "g2", W: "e2", NE: "g3", NW: "e3", SE: "g1", SW: "e1"},
    "g2": {N: "g3", S: "g1", E: "h2", W: "f2", NE: "h3", NW: "f3", SE: "h1", SW: "f1"},
    "h2": {N: "h3", S: "h1", W: "g2", NW: "g3", SW: "g1"},
    "a3": {N: "a4", S: "a2", E: "b3", NE: "b4", SE: "b2"},
    "b3": {N: "b4", S: "b2", E: "c3", W: "a3", NE: "c4", NW: "a4", SE: "c2", SW: "a2"},
    "c3": {N: "c4", S: "c2", E: "d3", W: "b3", NW: "b4", SE: "d2", SW: "b2", CW: "c4", CCW: "d3", IN: "x1", IDL: "x2", IDR: "d4"},
    "d3": {N: "d4", S: "d2", E: "e3", W: "c3", NW: "c4", SE: "e2", SW: "c2", CW: "c3", CCW: "e3", IN: "d4", OUT: "d2", IDL: "x1", IDR: "e4"},
    "e3": {N: "e4", S: "e2", E: "f3", W: "d3", NE: "f4", SE: "f2", SW: "d2", CW: "d3", CCW: "f3", IN: "e4", OUT: "e2", IDL: "d4", IDR: "y1"},
    "f3": {N: "f4", S: "f2", E: "g3", W: "e3", NE: "g4", SE: "g2", SW: "e2", CW: "e3", CCW: "f4", IN: "y1", IDL: "e4", IDR: "y2"},
    "g3": {N: "g4", S: "g2", E: "h3", W: "f3", NE: "h4", NW: "f4", SE: "h2", SW: "f2"},
    "h3": {N: "h4", S: "h2", W: "g3", NW: "g4", SW: "g2"},
    "a4": {N: "a5", S: "a3", E: "b4", NE: "b5", SE: "b3"},
    "b4": {N: "b5", S: "b3", E: "c4", W: "a4", NE: "c5", NW: "a5", SE: "c3", SW: "a3"},
    "c4": {N: "c5", S: "c3", W: "b4", NW: "b5", SE: "d3", SW: "b3", CW: "c5", CCW: "c3", OUT: "b4", IDR: "x1"},
    "d4": {S: "d3", E: "e4", CW: "x1", CCW: "e4", IN: "d4'", ODL: "c3", ODR: "e3"},
    "e4": {S: "e3", W: "d4", CW: "d4", CCW: "y1", IN: "e4'", ODL: "d3", ODR: "f3"},
    "f4": {N: "f5", S: "f3", E: "g4", NE: "g5", SE: "g3", SW: "e3", CW: "f3", CCW: "f5", OUT: "g4", IDL: "y1"},
    "g4": {N: "g5", S: "g3", E: "h4", W: "f4", NE: "h5", NW: "f5", SE: "h3", SW: "f3"},
    "h4": {N: "h5", S: "h3", W: "g4", NW: "g5", SW: "g3"},
    "a5": {N: "a6", S: "a4", E: "b5", NE: "b6", SE: "b4"},
    "b5": {N: "b6", S: "b4", E: "c5", W: "a5", NE: "c6", NW: "a6", SE: "c4", SW: "a4"},
    "c5": {N: "c6", S: "c4", W: "b5", NE: "d6", NW: "b6", SW: "b4", CW: "c6", CCW: "c4", OUT: "b5", IDL: "x4"},
    "d5": {N: "d6", E: "e5", CW: "e5", CCW: "x4", IN: "d5'", ODL: "e6", ODR: "c6"},
    "e5": {N: "e6", W: "d5", CW: "y4", CCW: "d5", IN: "e5'", ODL: "f6", ODR: "d6"},
    "f5": {N: "f6", S: "f4", E: "g5", NE: "g6", NW: "e6", SE: "g4", CW: "f4", CCW: "f6", OUT: "g5", IDR: "y4"},
    "g5": {N: "g6", S: "g4", E: "h5", W: "f5", NE: "h6", NW: "f6", SE: "h4", SW: "f4"},
    "h5": {N: "h6", S: "h4", W: "g5", NW: "g6", SW: "g4"},
    "a6": {N: "a7", S: "a5", E: "b6", NE: "b7", SE: "b5"},
    "b6": {N: "b7", S: "b5", E: "c6", W: "a6", NE: "c7", NW: "a7", SE: "c5", SW: "a5"},
    "c6": {N: "c7", S: "c5", E: "d6", W: "b6", NE: "d7", NW: "b7", SW: "b5", CW: "d6", CCW: "c5", IN: "x4", IDL: "d5", IDR: "x3"},
    "d6": {N: "d7", S: "d5", E: "e6", W: "c6", NE: "e7", NW: "c7", SW: "c5", CW: "e6", CCW: "c6", IN: "d5", OUT: "d7", IDL: "e5", IDR: "x4"},
    "e6": {N: "e7", S: "e5", E: "f6", W: "d6", NE: "f7", NW: "d7", SE: "f5", CW: "f6", CCW: "d6", IN: "e5", OUT: "e7", IDL: "y4", IDR: "d5"},
    "f6": {N: "f7", S: "f5", E: "g6", W: "e6", NE: "g7", NW: "e7", SE: "g5", CW: "f5", CCW: "e6", IN: "y4", IDL: "y3", IDR: "e5"},
    "g6": {N: "g7", S: "g5", E: "h6", W: "f6", NE: "h7", NW: "f7", SE: "h5", SW: "f5"},
    "h6": {N: "h7", S: "h5", W: "g6", NW: "g7", SW: "g5"},
    "a7": {N: "a8", S: "a6", E: "b7", NE: "b8", SE: "b6"},
    "b7": {N: "b8", S: "b6", E: "c7", W: "a7", NE: "c8", NW: "a8", SE: "c6", SW: "a6"},
    "c7": {N: "c8", S: "c6", E: "d7", W: "b7", NE: "d8", NW: "b8", SE: "d6", SW: "b6"},
    "d7": {N: "d8", S: "d6", E: "e7", W: "c7", NE: "e8", NW: "c8", SE: "e6", SW: "c6"},
    "e7": {N: "e8", S: "e6", E: "f7", W: "d7", NE: "f8", NW: "d8", SE: "f6", SW: "d6"},
    "f7": {N: "f8", S: "f6", E: "g7", W: "e7", NE: "g8", NW: "e8", SE: "g6", SW: "e6"},
    "g7": {N: "g8", S: "g6", E: "h7", W: "f7", NE: "h8", NW: "f8", SE: "h6", SW: "f6"},
    "h7": {N: "h8", S: "h6", W: "g7", NW: "g8", SW: "g6"},
    "a8": {S: "a7", E: "b8", SE: "b7"},
    "b8": {S: "b7", E: "c8", W: "a8", SE: "c7", SW: "a7"},
    "c8": {S: "c7", E: "d8", W: "b8", SE: "d7", SW: "b7"},
    "d8": {S: "d7", E: "e8", W: "c8", SE: "e7", SW: "c7"},
    "e8": {S: "e7", E: "f8", W: "d8", SE: "f7", SW: "d7"},
    "f8": {S: "f7", E: "g8", W: "e8", SE: "g7", SW: "e7"},
    "g8": {S: "g7", E: "h8", W: "f8", SE: "h7", SW: "f7"},
    "h8": {S: "h7", W: "g8", SW: "g7"},
    # -- junction nodes of the inner ring --
    "x1": {CW: "x2", CCW: "d4", OUT: "c3", ODL: "c4", ODR: "d3"},
    "x2": {CW: "x3", CCW: "x1", ODR: "c3"},
    "x3": {CW: "x4", CCW: "x2", ODL: "c6"},
    "x4": {CW: "d5", CCW: "x3", OUT: "c6", ODL: "d6", ODR: "c5"},
    "y4": {CW: "y3", CCW: "e5", OUT: "f6", ODL: "f5", ODR: "e6"},
    "y3": {CW: "y2", CCW: "y4", ODR: "f6"},
    "y2": {CW: "y1", CCW: "y3", ODL: "f3"},
    "y1": {CW: "e4", CCW: "y2", OUT: "f3", ODL: "e3", ODR: "f4"},
}
# fmt: on


def _build_graph() -> Mapping[Square, Mapping[Direction, Square]]:
    """One-time static build: the authored rows for the upper surface + their mirrored copies."""
    graph: dict[Square, Mapping[Direction, Square]] = {}
    for token, row in _UPPER_SURFACE.items():
        upper = {
            direction: Square.from_algebraic(target)
            for direction, target in row.items()
        }
        lower = {direction: target.mirror() for direction, target in upper.items()}
        graph[Square(token)] = MappingProxyType(upper)
        graph[Square(token, mirrored=True)] = MappingProxyType(lower)
    return MappingProxyType(graph)


BOARD_GRAPH: Mapping[Square, Mapping[Direction, Square]] = _build_graph()


def neighbor(square: Square, direction: Direction) -> Optional[Square]:
    """The square one step away in the given direction, None if there is no edge that way."""
    node = BOARD_GRAPH.get(square)
    if node is None:
        return None
    return node.get(direction)


def all_squares() -> list[Square]:
    return list(BOARD_GRAPH.keys())


def is_outer_ring(square: Square) -> bool:
    return square.token in OUTER_RING


def is_inner_ring(square: Square) -> bool:
    return square.token in INNER_RING


def is_pentagon(square: Square) -> bool:
    return square.token in PENTAGONS


def crosses_layer(from_square: Square, to_square: Square) -> bool:
    """True if a step between the two squares passes through the wormhole to the other surface."""
    return from_square.mirrored != to_square.mirrored
