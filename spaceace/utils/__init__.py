"""Utility functions and constants for SpaceAce."""

from .constants import (
    DEFAULT_HEX_SIZE,
    GALAXY_RING_COUNT,
    HOME_SECTOR_ASSET,
    HOME_SECTOR_ID,
    OUTER_RING_DISCOVERY_PROB,
    RNG_SEED_DEFAULT,
    ROLL_HISTORY_LIMIT,
)
from .rng import GameRNG, select_dice_source
from .hex_utils import (
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

__all__ = [
    "DEFAULT_HEX_SIZE",
    "GALAXY_RING_COUNT",
    "HOME_SECTOR_ASSET",
    "HOME_SECTOR_ID",
    "OUTER_RING_DISCOVERY_PROB",
    "RNG_SEED_DEFAULT",
    "ROLL_HISTORY_LIMIT",
    "GameRNG",
    "select_dice_source",
    "HEX_DIRECTIONS",
    "get_visible_sectors",
    "hex_distance",
    "hex_equal",
    "hex_line",
    "hex_neighbors",
    "hex_ring",
    "hex_round",
    "hex_spiral",
    "hex_to_key",
    "hex_to_pixel",
    "hexes_within_range",
    "is_discoverable",
    "key_to_hex",
    "pixel_to_hex",
]
