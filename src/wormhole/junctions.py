"""
Where a plain neighbour lookup is not enough: the throat of the wormhole and the pentagon squares.

Two kinds of corrections are applied on top of the board graph:

* Direction remaps at the throat squares (d4, e4, d5, e5 and mirrors). A line of travel that reaches
  these squares still has a compass heading, but the only way onwards is through the wormhole (`in`),
  and a line coming back up through it (`out`) has to continue along the file it came from.
* Pentagon branches at c3, c6, f3, f6 (and mirrors). A pentagon has five sides, so a straight line
  that enters it has two equally straight ways out: the line forks. Pawns never fork, they have their
  own table describing how they advance and capture while standing on a pentagon.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from src.wormhole.directions import OPPOSITE, PAWN_CAPTURES, Direction
from src.wormhole.square import Square
from src.wormhole.topology import crosses_layer, is_pentagon, neighbor

D = Direction


def _with_mirrors(table: dict[str, dict]) -> Mapping[Square, Mapping]:
    """Both surfaces share the same local geometry, so every table is authored once for the upper surface."""
    expanded: dict[Square, Mapping] = {}
    for token, row in table.items():
        expanded[Square(token)] = MappingProxyType(row)
        expanded[Square(token, mirrored=True)] = MappingProxyType(row)
    return MappingProxyType(expanded)


# --- DIRECTION REMAPS ---
# Leaving a throat square outwards means heading back along the file towards the outer ring.
OUT_REMAP: Mapping[Square, Mapping[Direction, Direction]] = _with_mirrors(
    {
        "d4": {D.OUT: D.S},
        "e4": {D.OUT: D.S},
        "d5": {D.OUT: D.N},
        "e5": {D.OUT: D.N},
    }
)

# Headings that, at a throat square, mean "down the wormhole".
IN_REMAP: Mapping[Square, frozenset[Direction]] = MappingProxyType(
    {
        Square(token, mirrored): frozenset(headings)
        for token, headings in {
            "d4": {D.N},
            "e4": {D.N},
            "d5": {D.S},
            "e5": {D.S},
        }.items()
        for mirrored in (False, True)
    }
)


# --- PENTAGON BRANCHES (sliding pieces + knight legs) ---
# entry direction -> the continuations, in the order they are explored.
# Anything not listed here (cw/ccw along the ring, or a diagonal that does not touch the fifth side) continues straight.
PENTAGON_BRANCHES: Mapping[Square, Mapping[Direction, tuple[Direction, ...]]] = (
    _with_mirrors(
        {
            "c3": {
                D.N: (D.IN, D.N),
                D.S: (D.S, D.E),
                D.E: (D.E, D.IN),
                D.W: (D.N, D.W),
                D.OUT: (D.W, D.S),
                D.NE: (D.IDL, D.IDR),
                D.ODL: (D.SW,),
                D.ODR: (D.SW,),
            },
            "c6": {
                D.N: (D.E, D.N),
                D.OUT: (D.N, D.W),
                D.W: (D.W, D.S),
                D.S: (D.S, D.IN),
                D.E: (D.IN, D.E),
                D.SE: (D.IDL, D.IDR),
                D.ODL: (D.NW,),
                D.ODR: (D.NW,),
            },
            "f3": {
                D.N: (D.N, D.IN),
                D.W: (D.IN, D.W),
                D.S: (D.W, D.S),
                D.OUT: (D.S, D.E),
                D.E: (D.E, D.N),
                D.NW: (D.IDL, D.IDR),
                D.ODL: (D.SE,),
                D.ODR: (D.SE,),
            },
            "f6": {
                D.N: (D.N, D.W),
                D.W: (D.W, D.IN),
                D.S: (D.IN, D.S),
                D.E: (D.S, D.E),
                D.OUT: (D.E, D.N),
                D.SW: (D.IDL, D.IDR),
                D.ODL: (D.NE,),
                D.ODR: (D.NE,),
            },
        }
    )
)


# --- PAWN JUNCTIONS ---
@dataclass(frozen=True)
class PawnJunction:
    """How a pawn standing on a square advances and captures, given the way it is facing."""

    advances: tuple[Direction, ...]
    captures: tuple[Direction, ...]


# NOTE: only the facings a pawn can actually have on these squares are listed.
PAWN_JUNCTIONS: Mapping[Square, Mapping[Direction, PawnJunction]] = _with_mirrors(
    {
        "c3": {D.N: PawnJunction(advances=(D.N,), captures=(D.NW, D.IDR))},
        "c6": {D.S: PawnJunction(advances=(D.S,), captures=(D.SW, D.IDL))},
        "f3": {D.N: PawnJunction(advances=(D.N,), captures=(D.NE, D.IDL))},
        "f6": {D.S: PawnJunction(advances=(D.S,), captures=(D.SE, D.IDR))},
    }
)


def pawn_junction(square: Square, facing: Direction) -> PawnJunction:
    """Pawn table entry for the square, or the ordinary advance/capture directions for the facing."""
    junction = PAWN_JUNCTIONS.get(square, {}).get(facing)
    if junction is not None:
        return junction
    return PawnJunction(advances=(facing,), captures=PAWN_CAPTURES.get(facing, ()))


# --- STEP RESOLUTION ---
def resolve_step(
    square: Square, direction: Direction
) -> Optional[tuple[Square, Direction]]:
    """
    Take a single step, applying the throat remaps.

    Returns the square reached and the heading on arrival, None if there is no edge.
    NOTE: crossing to the other surface turns the heading around (what was `in` from above is `out` from below).
    """
    heading = OUT_REMAP.get(square, {}).get(direction, direction)
    if heading in IN_REMAP.get(square, frozenset()):
        heading = D.IN

    target = neighbor(square, heading)
    if target is None:
        return None

    if crosses_layer(square, target):
        heading = OPPOSITE[heading]
    return target, heading


def continuations(square: Square, direction: Direction) -> tuple[Direction, ...]:
    """The heading(s) a line continues in after arriving at `square` with the given heading."""
    if not is_pentagon(square):
        return (direction,)
    return PENTAGON_BRANCHES[square].get(direction, (direction,))


def step(square: Square, direction: Direction) -> list[tuple[Square, Direction]]:
    """
    Resolved step + pentagon fork, the unit of travel for sliding pieces and knight legs.

    Returns one (square, heading) per way the line continues: empty at the edge of the board,
    two entries when the step lands on a pentagon that forks the line.
    """
    resolved = resolve_step(square, direction)
    if resolved is None:
        return []
    target, heading = resolved
    return [(target, branch) for branch in continuations(target, heading)]
