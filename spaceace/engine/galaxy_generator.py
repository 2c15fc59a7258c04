"""Procedural galaxy layout on concentric hex rings."""

import logging
from datetime import datetime, timezone

from ..data.sector_assets import SECTOR_ASSETS, SectorAsset
from ..models import Campaign, HexCoordinate, Sector
from ..utils import (
    GALAXY_RING_COUNT,
    HOME_SECTOR_ASSET,
    HOME_SECTOR_ID,
    OUTER_RING_DISCOVERY_PROB,
    GameRNG,
    hex_ring,
    hex_to_key,
)

logger = logging.getLogger(__name__)

HOME_COORDINATE = HexCoordinate(0, 0)


def generate_galaxy(rng: GameRNG, now: datetime | None = None) -> dict[str, Sector]:
    """Generate a galaxy of named sectors around the home sector.

    Algorithm:
    1. Place the home sector (Lanai template) at (0, 0), discovered
    2. For rings 1-4, pick ``min(ring_size, remaining_templates // radius)``
       random coordinates on the ring, thinning outer rings so there is
       empty space to navigate
    3. Give each picked coordinate an unused template drawn uniformly at
       random; no template is used twice in one galaxy
    4. Ring 1 is always discovered; rings 2-4 are discovered with
       probability 0.3 per sector
    5. Skip occupied coordinates and stop once templates run out

    Args:
        rng: Seeded random number generator
        now: Creation/discovery timestamp (defaults to current UTC time)

    Returns:
        Dictionary mapping sector ID to Sector
    """
    now = now or datetime.now(timezone.utc)
    sectors: dict[str, Sector] = {}
    occupied: set[str] = set()

    home = _build_sector(HOME_SECTOR_ID, HOME_COORDINATE, SECTOR_ASSETS[HOME_SECTOR_ASSET], now)
    home.discover(now)
    sectors[home.id] = home
    occupied.add(hex_to_key(HOME_COORDINATE))

    # Templates still available, in catalog order so the seed fully decides the draw
    pool = [key for key in SECTOR_ASSETS if key != HOME_SECTOR_ASSET]

    for radius in range(1, GALAXY_RING_COUNT + 1):
        ring = hex_ring(HOME_COORDINATE, radius)
        count = min(len(ring), len(pool) // radius)
        selected = rng.sample(ring, count)
        logger.debug(f"Ring {radius}: placing {count} of {len(ring)} sectors")

        for coordinate in selected:
            if not pool:
                break
            key = hex_to_key(coordinate)
            if key in occupied:
                continue

            asset_key = pool.pop(rng.randint(0, len(pool) - 1))
            sector = _build_sector(f"sector-{asset_key}", coordinate, SECTOR_ASSETS[asset_key], now)
            if radius == 1 or rng.random() < OUTER_RING_DISCOVERY_PROB:
                sector.discover(now)

            sectors[sector.id] = sector
            occupied.add(key)

    discovered = sum(1 for s in sectors.values() if s.is_discovered)
    logger.info(f"Generated galaxy: {len(sectors)} sectors, {discovered} discovered")
    return sectors


def initialize_galaxy(campaign: Campaign, now: datetime | None = None) -> Campaign:
    """Replace the campaign's map with a freshly generated galaxy.

    Uses the campaign RNG and places the crew in the home sector.

    Args:
        campaign: Campaign to populate
        now: Creation timestamp

    Returns:
        The same campaign, updated in place
    """
    campaign.sectors = generate_galaxy(campaign.rng, now)
    campaign.current_sector = HOME_SECTOR_ID
    return campaign


def _build_sector(sector_id: str, coordinate: HexCoordinate, asset: SectorAsset, now: datetime) -> Sector:
    """Create an undiscovered sector from a catalog template."""
    return Sector(
        id=sector_id,
        hex_q=coordinate.q,
        hex_r=coordinate.r,
        name=asset.name,
        type=asset.type,
        is_dangerous=asset.is_dangerous,
        notes=asset.description,
        created_at=now,
        updated_at=now,
    )
