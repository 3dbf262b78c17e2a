"""Unit tests for /src/wormhole/topology.py"""

import pytest

from src.wormhole.directions import KING_DIRECTIONS, OPPOSITE, Direction
from src.wormhole.square import Square
from src.wormhole.topology import (
    BOARD_GRAPH,
    INNER_RING,
    OUTER_RING,
    PENTAGONS,
    THROAT_SQUARES,
    all_squares,
    crosses_layer,
    is_inner_ring,
    is_outer_ring,
    is_pentagon,
    neighbor,
)

# in/out edges from the outer ring onto the flat board, and through the throat, have no way back along `out`
ONE_WAY = (Direction.IN, Direction.OUT)


def sq(name: str) -> Square:
    return Square.from_algebraic(name)


def test_graph_covers_both_surfaces() -> None:
    """64 grid squares + 8 junction nodes, on each surface"""
    assert len(BOARD_GRAPH) == 144
    assert len(all_squares()) == 144
    for square in list(BOARD_GRAPH):
        assert square.mirror() in BOARD_GRAPH


def test_every_edge_points_to_a_square_of_the_board() -> None:
    for square, edges in BOARD_GRAPH.items():
        for direction, target in edges.items():
            assert target in BOARD_GRAPH, f"{square} -{direction}-> {target}"


def test_edges_can_be_walked_back() -> None:
    """Apart from the one-way in/out edges, every step can be undone by stepping the opposite way."""
    for square, edges in BOARD_GRAPH.items():
        for direction, target in edges.items():
            if direction in ONE_WAY:
                continue
            assert neighbor(target, OPPOSITE[direction]) == square


def test_mirrored_surface_has_the_same_geometry() -> None:
    for square, edges in BOARD_GRAPH.items():
        if square.mirrored:
            continue
        mirrored_edges = BOARD_GRAPH[square.mirror()]
        assert set(mirrored_edges) == set(edges)
        for direction, target in edges.items():
            assert mirrored_edges[direction] == target.mirror()


@pytest.mark.parametrize("name", THROAT_SQUARES)
def test_throat_squares_lead_through_the_wormhole(name: str) -> None:
    square = sq(name)
    assert neighbor(square, Direction.IN) == square.mirror()
    assert neighbor(square.mirror(), Direction.IN) == square
    assert crosses_layer(square, neighbor(square, Direction.IN))


def test_board_edges_have_no_neighbors() -> None:
    assert neighbor(sq("a1"), Direction.S) is None
    assert neighbor(sq("a1"), Direction.W) is None
    assert neighbor(sq("h8'"), Direction.NE) is None


def test_unknown_square_has_no_neighbors() -> None:
    assert neighbor(Square("z9"), Direction.N) is None


def test_planar_diagonals_do_not_touch_the_inner_ring() -> None:
    for name in THROAT_SQUARES:
        for direction in (Direction.NE, Direction.NW, Direction.SE, Direction.SW):
            assert neighbor(sq(name), direction) is None
    assert neighbor(sq("c3"), Direction.NE) is None
    assert neighbor(sq("f6"), Direction.SW) is None


@pytest.mark.parametrize("ring", [OUTER_RING, INNER_RING])
def test_rings_are_closed_cycles(ring: tuple[str, ...]) -> None:
    """Walking clockwise visits the ring in order and comes back to the start, counter-clockwise reverses it."""
    for index, name in enumerate(ring):
        following = ring[(index + 1) % len(ring)]
        assert neighbor(sq(name), Direction.CW) == sq(following)
        assert neighbor(sq(following), Direction.CCW) == sq(name)


@pytest.mark.parametrize(
    "outer, inner",
    [
        ("d3", "d4"),
        ("e3", "e4"),
        ("d6", "d5"),
        ("e6", "e5"),
        ("c3", "x1"),
        ("c6", "x4"),
        ("f3", "y1"),
        ("f6", "y4"),
    ],
)
def test_ring_links(outer: str, inner: str) -> None:
    assert neighbor(sq(outer), Direction.IN) == sq(inner)


def test_ring_diagonals_combine_in_and_around() -> None:
    """idl = inward, then clockwise. idr = inward, then counter-clockwise."""
    assert neighbor(sq("d3"), Direction.IDL) == sq("x1")
    assert neighbor(sq("d3"), Direction.IDR) == sq("e4")
    assert neighbor(sq("x1"), Direction.ODR) == sq("d3")
    assert neighbor(sq("e4"), Direction.ODL) == sq("d3")


@pytest.mark.parametrize("name", PENTAGONS)
def test_pentagons_have_a_fifth_side(name: str) -> None:
    """Four grid neighbours plus the link into the inner ring."""
    edges = BOARD_GRAPH[sq(name)]
    for direction in (Direction.N, Direction.S, Direction.E, Direction.W, Direction.IN):
        assert direction in edges


def test_ring_membership_helpers() -> None:
    assert is_outer_ring(sq("c4"))
    assert is_outer_ring(sq("c4'"))
    assert not is_outer_ring(sq("d4"))
    assert is_inner_ring(sq("x2"))
    assert is_inner_ring(sq("e5'"))
    assert not is_inner_ring(sq("e6"))
    assert is_pentagon(sq("f3'"))
    assert not is_pentagon(sq("f4"))


def test_neighbor_is_deterministic() -> None:
    for square in BOARD_GRAPH:
        for direction in KING_DIRECTIONS:
            assert neighbor(square, direction) == neighbor(square, direction)


def test_graph_is_read_only() -> None:
    with pytest.raises(TypeError):
        BOARD_GRAPH[sq("a1")] = {}  # type: ignore[index]
    with pytest.raises(TypeError):
        BOARD_GRAPH[sq("a1")][Direction.S] = sq("a2")  # type: ignore[index]
