"""Hex grid geometry using axial coordinates (q, r).

Based on the cube coordinate system where q + r + s = 0. Hexes are
flat-topped; ``size`` is the pixel distance from a hex center to a vertex.

Every function here is pure and total: no state is kept and nothing is
raised for well-formed input.

Direction order (used by neighbors and ring walking):
    0 = East      : (+1,  0)
    1 = Northeast : (+1, -1)
    2 = Northwest : ( 0, -1)
    3 = West      : (-1,  0)
    4 = Southwest : (-1, +1)
    5 = Southeast : ( 0, +1)
"""

import math
from collections.abc import Iterable

from ..models.hex import FractionalHex, HexCoordinate, Point
from .constants import DEFAULT_HEX_SIZE

SQRT3 = math.sqrt(3)

HEX_DIRECTIONS: list[HexCoordinate] = [
    HexCoordinate(1, 0),  # 0: East
    HexCoordinate(1, -1),  # 1: Northeast
    HexCoordinate(0, -1),  # 2: Northwest
    HexCoordinate(-1, 0),  # 3: West
    HexCoordinate(-1, 1),  # 4: Southwest
    HexCoordinate(0, 1),  # 5: Southeast
]

# Ring walk starts at the Northeast corner, so each edge is walked in the
# neighbor direction rotated by three: W, SW, SE, E, NE, NW.
RING_START_DIRECTION = 1
RING_WALK_DIRECTIONS: list[HexCoordinate] = [HEX_DIRECTIONS[(i + 3) % 6] for i in range(6)]


def hex_add(a: HexCoordinate, b: HexCoordinate) -> HexCoordinate:
    """Component-wise sum of two coordinates."""
    return HexCoordinate(a.q + b.q, a.r + b.r)


def hex_scale(hex: HexCoordinate, k: int) -> HexCoordinate:
    """Multiply a coordinate (usually a direction) by k."""
    return HexCoordinate(hex.q * k, hex.r * k)


def hex_equal(a: HexCoordinate, b: HexCoordinate) -> bool:
    return a.q == b.q and a.r == b.r


def hex_to_pixel(hex: HexCoordinate, size: float = DEFAULT_HEX_SIZE) -> Point:
    """Convert hex coordinates to the pixel position of the hex center.

    Args:
        hex: Hex coordinate
        size: Size of hex (radius from center to vertex)

    Returns:
        Pixel coordinates
    """
    x = size * (3 / 2 * hex.q)
    y = size * (SQRT3 / 2 * hex.q + SQRT3 * hex.r)
    return Point(x, y)


def pixel_to_hex(point: Point, size: float = DEFAULT_HEX_SIZE) -> HexCoordinate:
    """Convert pixel coordinates to the hex containing them.

    Args:
        point: Pixel coordinates
        size: Size of hex

    Returns:
        Hex coordinate
    """
    q = (2 / 3 * point.x) / size
    r = (-1 / 3 * point.x + SQRT3 / 3 * point.y) / size
    return hex_round(FractionalHex(q, r))


def hex_round(hex: FractionalHex | HexCoordinate) -> HexCoordinate:
    """Round fractional hex coordinates to the nearest hex.

    Rounding q and r independently can break q + r + s = 0, so all three
    cube components are rounded and the one with the largest rounding error
    is recomputed from the other two. Halves round up (toward +inf).

    Args:
        hex: Fractional hex coordinates

    Returns:
        Rounded hex coordinate
    """
    s = -hex.q - hex.r
    rounded_q = _round_half_up(hex.q)
    rounded_r = _round_half_up(hex.r)
    rounded_s = _round_half_up(s)

    q_diff = abs(rounded_q - hex.q)
    r_diff = abs(rounded_r - hex.r)
    s_diff = abs(rounded_s - s)

    if q_diff > r_diff and q_diff > s_diff:
        return HexCoordinate(-rounded_r - rounded_s, rounded_r)
    if r_diff > s_diff:
        return HexCoordinate(rounded_q, -rounded_q - rounded_s)
    return HexCoordinate(rounded_q, rounded_r)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def hex_distance(a: HexCoordinate, b: HexCoordinate) -> int:
    """Calculate the number of hex steps between two coordinates.

    Args:
        a: First hex coordinate
        b: Second hex coordinate

    Returns:
        Distance in hex units

    Examples:
        >>> hex_distance(HexCoordinate(0, 0), HexCoordinate(2, -1))
        2
    """
    dq = a.q - b.q
    dr = a.r - b.r
    return (abs(dq) + abs(dq + dr) + abs(dr)) // 2


def hex_neighbors(hex: HexCoordinate) -> list[HexCoordinate]:
    """Get the six neighbors of a hex, in HEX_DIRECTIONS order."""
    return [hex_add(hex, direction) for direction in HEX_DIRECTIONS]


def hexes_within_range(center: HexCoordinate, range_: int) -> list[HexCoordinate]:
    """Get all hex coordinates within a given range (filled hexagon).

    Args:
        center: Center hex coordinate
        range_: Range in hex units (>= 0)

    Returns:
        ``1 + 3 * range_ * (range_ + 1)`` coordinates, center included
    """
    results = []
    for q in range(-range_, range_ + 1):
        r1 = max(-range_, -q - range_)
        r2 = min(range_, -q + range_)
        for r in range(r1, r2 + 1):
            results.append(HexCoordinate(center.q + q, center.r + r))
    return results


def hex_ring(center: HexCoordinate, radius: int) -> list[HexCoordinate]:
    """Get the hexes at exactly ``radius`` steps from center.

    Starts at the corner ``radius`` steps Northeast of center and walks the
    six edges of the ring, ``radius`` steps each.

    Args:
        center: Center hex coordinate
        radius: Distance from center

    Returns:
        ``[center]`` for radius 0, otherwise ``6 * radius`` coordinates
    """
    if radius == 0:
        return [center]

    results = []
    current = hex_add(center, hex_scale(HEX_DIRECTIONS[RING_START_DIRECTION], radius))
    for direction in RING_WALK_DIRECTIONS:
        for _ in range(radius):
            results.append(current)
            current = hex_add(current, direction)
    return results


def hex_spiral(center: HexCoordinate, max_radius: int) -> list[HexCoordinate]:
    """Get center followed by rings 1..max_radius, innermost first."""
    results = [center]
    for radius in range(1, max_radius + 1):
        results.extend(hex_ring(center, radius))
    return results


def hex_line(start: HexCoordinate, end: HexCoordinate) -> list[HexCoordinate]:
    """Get the hexes on a straight line between two coordinates.

    Samples ``distance + 1`` evenly spaced points in cube space and rounds
    each one.

    Args:
        start: Start hex coordinate
        end: End hex coordinate

    Returns:
        Coordinates from start to end, both included
    """
    distance = hex_distance(start, end)
    results = []
    for i in range(distance + 1):
        t = 0.0 if distance == 0 else i / distance
        q = start.q * (1 - t) + end.q * t
        r = start.r * (1 - t) + end.r * t
        results.append(hex_round(FractionalHex(q, r)))
    return results


def is_discoverable(target: HexCoordinate, discovered: Iterable[HexCoordinate]) -> bool:
    """Check whether a sector can be discovered from known space.

    A hex is discoverable when it is within one step of any discovered hex.

    Args:
        target: Target sector coordinates
        discovered: Coordinates of discovered sectors

    Returns:
        True if the target is adjacent to (or is) a discovered hex
    """
    return any(hex_distance(target, known) <= 1 for known in discovered)


def get_visible_sectors(
    center: HexCoordinate,
    coordinates: Iterable[HexCoordinate],
    visibility_range: int = 1,
) -> list[HexCoordinate]:
    """Filter coordinates down to those visible from a position.

    Args:
        center: Current position
        coordinates: Candidate coordinates (e.g., every sector in the galaxy)
        visibility_range: How far the crew can see, in hex steps

    Returns:
        Coordinates within visibility_range of center, in input order
    """
    return [hex for hex in coordinates if hex_distance(center, hex) <= visibility_range]


def hex_to_key(hex: HexCoordinate) -> str:
    """Encode a coordinate as a ``"q,r"`` mapping key."""
    return f"{hex.q},{hex.r}"


def key_to_hex(key: str) -> HexCoordinate:
    """Decode a ``"q,r"`` key back into a coordinate.

    Malformed components decode to ``nan`` rather than raising; callers must
    validate keys that did not come from ``hex_to_key``.

    Args:
        key: String key

    Returns:
        Hex coordinate (components may be nan)
    """
    parts = key.split(",")
    q = _parse_component(parts[0])
    r = _parse_component(parts[1]) if len(parts) > 1 else math.nan
    return HexCoordinate(q, r)


def _parse_component(text: str) -> int | float:
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return math.nan
