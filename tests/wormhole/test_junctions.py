"""Unit tests for /src/wormhole/junctions.py"""

import pytest

from src.wormhole.directions import KING_DIRECTIONS, OPPOSITE, Direction
from src.wormhole.junctions import (
    IN_REMAP,
    OUT_REMAP,
    PAWN_JUNCTIONS,
    PENTAGON_BRANCHES,
    PawnJunction,
    continuations,
    pawn_junction,
    resolve_step,
    step,
)
from src.wormhole.square import Square
from src.wormhole.topology import (
    BOARD_GRAPH,
    THROAT_SQUARES,
    crosses_layer,
    is_pentagon,
    neighbor,
)

D = Direction


def sq(name: str) -> Square:
    return Square.from_algebraic(name)


def test_tables_cover_both_surfaces() -> None:
    for table in (OUT_REMAP, IN_REMAP, PENTAGON_BRANCHES, PAWN_JUNCTIONS):
        for square in table:
            assert square.mirror() in table
            assert table[square] == table[square.mirror()]


# -- STEP RESOLUTION ---
def test_plain_step() -> None:
    assert resolve_step(sq("a1"), D.N) == (sq("a2"), D.N)
    assert resolve_step(sq("a1"), D.S) is None


@pytest.mark.parametrize(
    "start, direction, expected_square, expected_heading",
    [
        ("d4", D.N, "d4'", D.OUT),
        ("e4", D.N, "e4'", D.OUT),
        ("d5", D.S, "d5'", D.OUT),
        ("e5", D.S, "e5'", D.OUT),
        ("d4'", D.N, "d4", D.OUT),
    ],
)
def test_heading_into_the_throat_crosses_surfaces(
    start: str, direction: Direction, expected_square: str, expected_heading: Direction
) -> None:
    """Arriving on the other surface, the heading is turned around: what went in comes out."""
    assert resolve_step(sq(start), direction) == (sq(expected_square), expected_heading)


@pytest.mark.parametrize(
    "start, expected_square, expected_heading",
    [
        ("d4'", "d3'", D.S),
        ("e4'", "e3'", D.S),
        ("d5'", "d6'", D.N),
        ("e5", "e6", D.N),
    ],
)
def test_coming_out_of_the_throat_continues_along_the_file(
    start: str, expected_square: str, expected_heading: Direction
) -> None:
    assert resolve_step(sq(start), D.OUT) == (sq(expected_square), expected_heading)


@pytest.mark.parametrize("name", THROAT_SQUARES)
def test_crossing_lands_on_the_mirror_heading_out(name: str) -> None:
    """A step that ends on the other surface lands on the mirror square, heading out of the throat."""
    for square in (sq(name), sq(name).mirror()):
        for direction in KING_DIRECTIONS:
            resolved = resolve_step(square, direction)
            if resolved is None:
                continue
            target, heading = resolved
            if crosses_layer(square, target):
                assert target == square.mirror()
                assert heading == OPPOSITE[D.IN]


def test_straight_line_through_the_wormhole() -> None:
    """d2 -> d3 -> d4 -> (through) d4' -> d3' -> d2'"""
    square, heading = sq("d2"), D.N
    visited = []
    for _ in range(5):
        square, heading = resolve_step(square, heading)
        visited.append(square.to_algebraic())
    assert visited == ["d3", "d4", "d4'", "d3'", "d2'"]
    assert heading == D.S


# -- PENTAGON FORKS ---
def test_line_forks_on_a_pentagon() -> None:
    assert step(sq("b3"), D.E) == [(sq("c3"), D.E), (sq("c3"), D.IN)]
    assert step(sq("c2"), D.N) == [(sq("c3"), D.IN), (sq("c3"), D.N)]


def test_non_pentagon_squares_continue_straight() -> None:
    assert continuations(sq("d3"), D.E) == (D.E,)
    assert step(sq("a1"), D.N) == [(sq("a2"), D.N)]
    assert step(sq("a1"), D.W) == []


def test_ring_travel_does_not_fork() -> None:
    assert continuations(sq("c3"), D.CW) == (D.CW,)
    assert continuations(sq("f6'"), D.CCW) == (D.CCW,)


@pytest.mark.parametrize(
    "pentagon, entry",
    [
        (pentagon, entry)
        for pentagon, branches in PENTAGON_BRANCHES.items()
        for entry in branches
    ],
)
def test_entering_a_pentagon_yields_all_listed_continuations(
    pentagon: Square, entry: Direction
) -> None:
    """Step onto the pentagon from the square it is entered from: none of the branches may get lost."""
    origin = neighbor(pentagon, OPPOSITE[entry])
    assert origin is not None
    headings = [heading for target, heading in step(origin, entry) if target == pentagon]
    assert headings == list(PENTAGON_BRANCHES[pentagon][entry])


def test_only_pentagons_fork() -> None:
    assert set(PENTAGON_BRANCHES) == {
        square for square in BOARD_GRAPH if is_pentagon(square)
    }
    for square in BOARD_GRAPH:
        if is_pentagon(square):
            continue
        for direction in KING_DIRECTIONS:
            assert continuations(square, direction) == (direction,)


# -- PAWNS ---
def test_pawn_junction_table() -> None:
    assert pawn_junction(sq("c3"), D.N) == PawnJunction(
        advances=(D.N,), captures=(D.NW, D.IDR)
    )
    assert pawn_junction(sq("f6'"), D.S) == PawnJunction(
        advances=(D.S,), captures=(D.SE, D.IDR)
    )


def test_pawn_default_directions() -> None:
    assert pawn_junction(sq("e2"), D.N) == PawnJunction(
        advances=(D.N,), captures=(D.NW, D.NE)
    )
    assert pawn_junction(sq("d4'"), D.OUT) == PawnJunction(
        advances=(D.OUT,), captures=(D.ODL, D.ODR)
    )
