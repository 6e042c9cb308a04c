"""Tests for the axial/cube coordinate algebra."""

from __future__ import annotations

import itertools

import pytest

from hexfactory.grid.coordinates import (
    AXIAL_DIRECTIONS,
    CUBE_DIRECTIONS,
    CubeCoord,
    HexCoord,
    distance,
    is_valid_cube,
    neighbors,
    ring,
    spiral,
    to_axial,
    to_cube,
)

_SPAN = range(-50, 51)


def test_axial_round_trip_through_cube() -> None:
    for q, r in itertools.product(_SPAN, _SPAN):
        coord = HexCoord(q, r)
        assert to_axial(to_cube(coord)) == coord


def test_converted_cubes_satisfy_zero_sum() -> None:
    for q, r in itertools.product(_SPAN, _SPAN):
        cube = to_cube(HexCoord(q, r))
        assert cube.x + cube.y + cube.z == 0
        assert is_valid_cube(cube)


def test_cube_round_trip_through_axial() -> None:
    cube = CubeCoord(3, -5, 2)
    assert cube.to_axial().to_cube() == cube


def test_conversion_uses_fixed_formula() -> None:
    assert HexCoord(2, -3).to_cube() == CubeCoord(2, 1, -3)


def test_invalid_cube_is_detected() -> None:
    assert not CubeCoord(1, 1, 1).is_valid()
    assert not is_valid_cube(CubeCoord(0, 0, 1))


def test_equality_and_hashing() -> None:
    assert HexCoord(1, 2) == HexCoord(1, 2)
    assert HexCoord(1, 2) != HexCoord(2, 1)
    assert len({HexCoord(1, 2), HexCoord(1, 2), HexCoord(0, 0)}) == 2


def test_ordering_is_row_major() -> None:
    coords = [HexCoord(1, 1), HexCoord(-1, 1), HexCoord(5, 0), HexCoord(0, -1)]
    assert sorted(coords) == [
        HexCoord(0, -1),
        HexCoord(5, 0),
        HexCoord(-1, 1),
        HexCoord(1, 1),
    ]


def test_neighbors_follow_direction_order() -> None:
    origin = HexCoord(0, 0)
    assert neighbors(origin) == (
        HexCoord(1, 0),
        HexCoord(1, -1),
        HexCoord(0, -1),
        HexCoord(-1, 0),
        HexCoord(-1, 1),
        HexCoord(0, 1),
    )


def test_axial_and_cube_directions_agree() -> None:
    for (dq, dr), cube in zip(AXIAL_DIRECTIONS, CUBE_DIRECTIONS, strict=True):
        assert CubeCoord(*cube).to_axial() == HexCoord(dq, dr)
    origin = HexCoord(4, -2)
    assert tuple(n.to_cube() for n in origin.neighbors()) == origin.to_cube().neighbors()


@pytest.mark.parametrize("coord", [HexCoord(0, 0), HexCoord(7, -3), HexCoord(-20, 11)])
def test_six_neighbors_at_distance_one(coord: HexCoord) -> None:
    adjacent = coord.neighbors()
    assert len(adjacent) == 6
    assert len(set(adjacent)) == 6
    assert all(distance(coord, n) == 1 for n in adjacent)


def test_distance_properties() -> None:
    samples = [HexCoord(q, r) for q, r in itertools.product(range(-4, 5, 2), repeat=2)]
    for a, b in itertools.product(samples, repeat=2):
        assert distance(a, b) == distance(b, a)
        assert (distance(a, b) == 0) == (a == b)
    for a, b, c in itertools.product(samples[:9], repeat=3):
        assert distance(a, c) <= distance(a, b) + distance(b, c)


def test_distance_known_values() -> None:
    assert distance(HexCoord(0, 0), HexCoord(1, -1)) == 1
    assert distance(HexCoord(0, 0), HexCoord(3, -2)) == 3
    assert distance(HexCoord(-2, 0), HexCoord(2, -2)) == 4


def test_direction_wraps_and_addition() -> None:
    origin = HexCoord(2, 2)
    assert origin.direction(6) == origin.direction(0) == HexCoord(3, 2)
    assert origin + (1, -1) == HexCoord(3, 1)
    assert origin + HexCoord(-2, -2) == HexCoord(0, 0)


def test_ring_sizes_and_distances() -> None:
    center = HexCoord(1, -1)
    assert ring(center, 0) == (center,)
    for radius in range(1, 5):
        cells = ring(center, radius)
        assert len(cells) == 6 * radius
        assert len(set(cells)) == len(cells)
        assert all(distance(center, cell) == radius for cell in cells)


def test_ring_rejects_negative_radius() -> None:
    with pytest.raises(ValueError, match="non-negative"):
        ring(HexCoord(0, 0), -1)


def test_spiral_covers_hexagon() -> None:
    cells = list(spiral(HexCoord(0, 0), 2))
    assert len(cells) == 19
    assert cells[0] == HexCoord(0, 0)
