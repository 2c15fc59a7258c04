"""Static game data tables."""

from .sector_assets import (
    BLANK_CARD,
    SECTOR_ASSETS,
    SectorAsset,
    get_all_sector_names,
    get_random_sector,
    get_sector_asset,
    get_sectors_by_type,
)

__all__ = [
    "BLANK_CARD",
    "SECTOR_ASSETS",
    "SectorAsset",
    "get_all_sector_names",
    "get_random_sector",
    "get_sector_asset",
    "get_sectors_by_type",
]
