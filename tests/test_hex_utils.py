"""Tests for hex grid geometry."""

import math

import pytest

from spaceace.models import FractionalHex, HexCoordinate, Point
from spaceace.utils import (
    HEX_DIRECTIONS,
    get_visible_sectors,
    hex_distance,
    hex_equal,
    hex_line,
    hex_neighbors,
    hex_ring,
    hex_round,
    hex_spiral,
    hex_to_key,
    hex_to_pixel,
    hexes_within_range,
    is_discoverable,
    key_to_hex,
    pixel_to_hex,
)

ORIGIN = HexCoordinate(0, 0)
SAMPLE_HEXES = [HexCoordinate(q, r) for q in range(-4, 5) for r in range(-4, 5)]


class TestHexCoordinate:
    """Test the coordinate model."""

    def test_implicit_s(self):
        """Test that s is derived so q + r + s == 0."""
        for hex in SAMPLE_HEXES:
            assert hex.q + hex.r + hex.s == 0

    def test_hashable(self):
        """Test that equal coordinates collapse in a set."""
        assert len({HexCoordinate(1, 2), HexCoordinate(1, 2)}) == 1

    def test_hex_equal(self):
        assert hex_equal(HexCoordinate(3, -1), HexCoordinate(3, -1))
        assert not hex_equal(HexCoordinate(3, -1), HexCoordinate(-1, 3))


class TestHexDistance:
    """Test hex distance calculation."""

    def test_distance_same_hex(self):
        """Test distance from a hex to itself."""
        for hex in SAMPLE_HEXES:
            assert hex_distance(hex, hex) == 0

    def test_distance_symmetry(self):
        """Test that distance is symmetric."""
        a = HexCoordinate(2, -3)
        for b in SAMPLE_HEXES:
            assert hex_distance(a, b) == hex_distance(b, a)

    def test_distance_examples(self):
        """Test known distances along axes and diagonals."""
        assert hex_distance(ORIGIN, HexCoordinate(3, 0)) == 3
        assert hex_distance(ORIGIN, HexCoordinate(0, -4)) == 4
        assert hex_distance(ORIGIN, HexCoordinate(2, -1)) == 2
        assert hex_distance(ORIGIN, HexCoordinate(2, 1)) == 3
        assert hex_distance(HexCoordinate(-2, 0), HexCoordinate(2, 0)) == 4

    def test_triangle_inequality(self):
        """Test that no detour is shorter than the direct path."""
        a = HexCoordinate(-3, 1)
        c = HexCoordinate(2, 2)
        for b in SAMPLE_HEXES:
            assert hex_distance(a, c) <= hex_distance(a, b) + hex_distance(b, c)

    def test_distance_is_integer(self):
        assert isinstance(hex_distance(ORIGIN, HexCoordinate(3, -5)), int)


class TestNeighbors:
    """Test neighbor enumeration."""

    def test_six_unique_neighbors_at_distance_one(self):
        """Test that the origin has six distinct neighbors one step away."""
        neighbors = hex_neighbors(ORIGIN)
        assert len(neighbors) == 6
        assert len(set(neighbors)) == 6
        assert all(hex_distance(ORIGIN, n) == 1 for n in neighbors)

    def test_neighbor_order(self):
        """Test that neighbors follow the E, NE, NW, W, SW, SE order."""
        assert hex_neighbors(ORIGIN) == [
            HexCoordinate(1, 0),
            HexCoordinate(1, -1),
            HexCoordinate(0, -1),
            HexCoordinate(-1, 0),
            HexCoordinate(-1, 1),
            HexCoordinate(0, 1),
        ]

    def test_neighbors_offset_from_center(self):
        center = HexCoordinate(5, -2)
        assert hex_neighbors(center) == [
            HexCoordinate(center.q + d.q, center.r + d.r) for d in HEX_DIRECTIONS
        ]


class TestRangeRingSpiral:
    """Test area and ring enumeration."""

    @pytest.mark.parametrize("radius", [0, 1, 2, 3, 4, 7])
    def test_range_size(self, radius):
        """Test that a filled hexagon has 1 + 3r(r+1) cells, all within range."""
        cells = hexes_within_range(ORIGIN, radius)
        assert len(cells) == 1 + 3 * radius * (radius + 1)
        assert len(set(cells)) == len(cells)
        assert all(hex_distance(ORIGIN, c) <= radius for c in cells)

    def test_ring_zero_is_center(self):
        center = HexCoordinate(2, -7)
        assert hex_ring(center, 0) == [center]

    @pytest.mark.parametrize("radius", [1, 2, 3, 4, 5])
    @pytest.mark.parametrize("center", [ORIGIN, HexCoordinate(3, -2), HexCoordinate(-4, 1)])
    def test_ring_matches_annulus(self, center, radius):
        """Test that a ring equals range(r) minus range(r - 1), with no repeats."""
        ring = hex_ring(center, radius)
        annulus = set(hexes_within_range(center, radius)) - set(hexes_within_range(center, radius - 1))

        assert len(ring) == 6 * radius
        assert len(set(ring)) == len(ring)
        assert set(ring) == annulus
        assert all(hex_distance(center, h) == radius for h in ring)

    def test_ring_starts_at_northeast_corner(self):
        assert hex_ring(ORIGIN, 2)[0] == HexCoordinate(2, -2)

    def test_ring_walk_is_contiguous(self):
        """Test that consecutive ring cells (wrapping around) are neighbors."""
        ring = hex_ring(ORIGIN, 3)
        for a, b in zip(ring, ring[1:] + ring[:1]):
            assert hex_distance(a, b) == 1

    def test_spiral_order_and_coverage(self):
        """Test that the spiral is center, then each ring in increasing radius."""
        center = HexCoordinate(1, 1)
        spiral = hex_spiral(center, 3)

        assert spiral[0] == center
        assert spiral[1:7] == hex_ring(center, 1)
        assert set(spiral) == set(hexes_within_range(center, 3))
        radii = [hex_distance(center, h) for h in spiral]
        assert radii == sorted(radii)


class TestPixelConversion:
    """Test flat-top pixel projection."""

    def test_origin_projects_to_zero(self):
        assert hex_to_pixel(ORIGIN, 40) == Point(0.0, 0.0)

    def test_projection_formula(self):
        """Test x = 1.5 * size * q and y = size * (sqrt3/2 * q + sqrt3 * r)."""
        point = hex_to_pixel(HexCoordinate(2, -1), 10)
        assert point.x == pytest.approx(30.0)
        assert point.y == pytest.approx(0.0)

    @pytest.mark.parametrize("size", [1, 12.5, 40, 100])
    def test_round_trip(self, size):
        """Test that pixel_to_hex inverts hex_to_pixel for integer hexes."""
        for hex in SAMPLE_HEXES:
            assert pixel_to_hex(hex_to_pixel(hex, size), size) == hex

    def test_point_near_center_maps_to_hex(self):
        """Test that a point nudged off center still lands in the same hex."""
        center = hex_to_pixel(HexCoordinate(-2, 3), 40)
        assert pixel_to_hex(Point(center.x + 5, center.y - 7), 40) == HexCoordinate(-2, 3)


class TestHexRound:
    """Test cube rounding."""

    def test_rounding_keeps_invariant(self):
        """Test that rounding always yields a valid cube coordinate."""
        for q10 in range(-20, 21, 3):
            for r10 in range(-20, 21, 7):
                rounded = hex_round(FractionalHex(q10 / 10, r10 / 10))
                assert rounded.q + rounded.r + rounded.s == 0
                assert isinstance(rounded.q, int) and isinstance(rounded.r, int)

    def test_recomputes_component_with_largest_error(self):
        """Test points where rounding q and r alone would break the invariant.

        (0.45, 0.4) has s = -0.85; rounding each component gives (0, 0, -1),
        which does not sum to zero. q has the largest error, so it is rebuilt
        from r and s.
        """
        assert hex_round(FractionalHex(0.45, 0.4)) == HexCoordinate(1, 0)
        assert hex_round(FractionalHex(0.6, 0.3)) == HexCoordinate(1, 0)
        assert hex_round(FractionalHex(-0.2, 1.9)) == HexCoordinate(0, 2)

    def test_halves_round_up(self):
        """Test exact .5 ties: (0.5, 0.5, -1) rounds q and r up, then rebuilds r."""
        assert hex_round(FractionalHex(0.5, 0.5)) == HexCoordinate(1, 0)
        assert hex_round(FractionalHex(2.5, -1.0)) == HexCoordinate(3, -1)

    def test_integer_input_unchanged(self):
        assert hex_round(HexCoordinate(3, -4)) == HexCoordinate(3, -4)


class TestHexLine:
    """Test line drawing."""

    def test_line_to_self(self):
        assert hex_line(HexCoordinate(2, 2), HexCoordinate(2, 2)) == [HexCoordinate(2, 2)]

    def test_straight_line(self):
        assert hex_line(ORIGIN, HexCoordinate(3, 0)) == [
            HexCoordinate(0, 0),
            HexCoordinate(1, 0),
            HexCoordinate(2, 0),
            HexCoordinate(3, 0),
        ]

    def test_diagonal_midpoint_tie(self):
        """Test that the tied midpoint of (0, 0) -> (1, 1) resolves to (1, 0)."""
        assert hex_line(ORIGIN, HexCoordinate(1, 1)) == [
            HexCoordinate(0, 0),
            HexCoordinate(1, 0),
            HexCoordinate(1, 1),
        ]

    def test_line_length_and_continuity(self):
        """Test that a line has distance + 1 connected cells from start to end."""
        start, end = HexCoordinate(-3, 1), HexCoordinate(2, 2)
        line = hex_line(start, end)

        assert len(line) == hex_distance(start, end) + 1
        assert line[0] == start
        assert line[-1] == end
        for a, b in zip(line, line[1:]):
            assert hex_distance(a, b) == 1


class TestDiscoverability:
    """Test discovery and visibility predicates."""

    def test_adjacent_is_discoverable(self):
        assert is_discoverable(HexCoordinate(1, 0), [ORIGIN])

    def test_known_hex_is_discoverable(self):
        assert is_discoverable(ORIGIN, [ORIGIN])

    def test_distant_is_not_discoverable(self):
        assert not is_discoverable(HexCoordinate(2, 0), [ORIGIN])
        assert not is_discoverable(HexCoordinate(2, 0), [])

    def test_any_discovered_member_counts(self):
        discovered = [ORIGIN, HexCoordinate(3, -1)]
        assert is_discoverable(HexCoordinate(4, -1), discovered)

    def test_visible_sectors(self):
        """Test filtering coordinates by visibility range."""
        coords = [ORIGIN, HexCoordinate(1, 0), HexCoordinate(2, 0), HexCoordinate(0, -2)]
        assert get_visible_sectors(ORIGIN, coords) == [ORIGIN, HexCoordinate(1, 0)]
        assert get_visible_sectors(ORIGIN, coords, visibility_range=2) == coords


class TestKeys:
    """Test string key encoding."""

    def test_key_format(self):
        assert hex_to_key(HexCoordinate(-3, 12)) == "-3,12"

    def test_round_trip(self):
        """Test that every integer coordinate survives encode/decode."""
        for hex in SAMPLE_HEXES:
            assert key_to_hex(hex_to_key(hex)) == hex

    def test_malformed_key_gives_nan(self):
        """Test that malformed keys decode to nan components instead of raising."""
        decoded = key_to_hex("abc,2")
        assert math.isnan(decoded.q)
        assert decoded.r == 2

        missing = key_to_hex("5")
        assert missing.q == 5
        assert math.isnan(missing.r)
