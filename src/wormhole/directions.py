"""
The closed set of directions a piece can travel in, plus the fixed tables that relate them.

* Compass directions (N, S, E, W, NE, NW, SE, SW) are used on the flat part of both surfaces.
  NOTE: the mirrored surface uses the same compass as the upper one (same file/rank coordinates).
* Ring directions: cw/ccw travel around a ring, in/out move between the rings (and through the
  throat of the wormhole to the other surface).
* Ring diagonals combine the two: idl = inward + clockwise, idr = inward + counter-clockwise,
  odl = outward + clockwise, odr = outward + counter-clockwise.
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Direction(Enum):
    N = "N"
    S = "S"
    E = "E"
    W = "W"
    NE = "NE"
    NW = "NW"
    SE = "SE"
    SW = "SW"
    CW = "cw"
    CCW = "ccw"
    IN = "in"
    OUT = "out"
    IDL = "idl"
    IDR = "idr"
    ODL = "odl"
    ODR = "odr"

    def __str__(self) -> str:
        return self.value


D = Direction

# Rooks (and the knight's first two steps) use these.
ORTHOGONAL_DIRECTIONS: tuple[Direction, ...] = (
    D.N,
    D.S,
    D.E,
    D.W,
    D.IN,
    D.OUT,
    D.CW,
    D.CCW,
)

DIAGONAL_DIRECTIONS: tuple[Direction, ...] = (
    D.NE,
    D.NW,
    D.SE,
    D.SW,
    D.IDL,
    D.IDR,
    D.ODL,
    D.ODR,
)

# 8 planar + 4 ring + 4 ring-diagonal
KING_DIRECTIONS: tuple[Direction, ...] = (
    D.N,
    D.S,
    D.E,
    D.W,
    D.NE,
    D.NW,
    D.SE,
    D.SW,
    D.CW,
    D.CCW,
    D.IN,
    D.OUT,
    D.IDL,
    D.IDR,
    D.ODL,
    D.ODR,
)

# Applied when a step crosses from one surface to the other.
# Diagonal opposites are only there for completeness: no diagonal edge crosses surfaces.
OPPOSITE: Mapping[Direction, Direction] = MappingProxyType(
    {
        D.N: D.S,
        D.S: D.N,
        D.E: D.W,
        D.W: D.E,
        D.NE: D.SW,
        D.SW: D.NE,
        D.NW: D.SE,
        D.SE: D.NW,
        D.CW: D.CCW,
        D.CCW: D.CW,
        D.IN: D.OUT,
        D.OUT: D.IN,
        D.IDL: D.ODR,
        D.ODR: D.IDL,
        D.IDR: D.ODL,
        D.ODL: D.IDR,
    }
)

# The knight's last step. On the rings cw/ccw and in/out are each other's perpendicular axis.
PERPENDICULAR: Mapping[Direction, tuple[Direction, ...]] = MappingProxyType(
    {
        D.N: (D.E, D.W),
        D.S: (D.E, D.W),
        D.E: (D.N, D.S),
        D.W: (D.N, D.S),
        D.CW: (D.IN, D.OUT),
        D.CCW: (D.IN, D.OUT),
        D.IN: (D.CW, D.CCW),
        D.OUT: (D.CW, D.CCW),
    }
)

# The two diagonals beside a pawn's forward direction: where it captures.
PAWN_CAPTURES: Mapping[Direction, tuple[Direction, ...]] = MappingProxyType(
    {
        D.N: (D.NW, D.NE),
        D.S: (D.SW, D.SE),
        D.E: (D.NE, D.SE),
        D.W: (D.NW, D.SW),
        D.IN: (D.IDL, D.IDR),
        D.OUT: (D.ODL, D.ODR),
        D.CW: (D.IDL, D.ODL),
        D.CCW: (D.IDR, D.ODR),
    }
)
