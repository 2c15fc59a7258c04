"""Tests for the sector template catalog."""

from spaceace.data import (
    BLANK_CARD,
    SECTOR_ASSETS,
    get_all_sector_names,
    get_random_sector,
    get_sector_asset,
    get_sectors_by_type,
)
from spaceace.models import SectorType
from spaceace.utils import HOME_SECTOR_ASSET, GameRNG


class TestSectorAssets:
    """Test catalog contents and lookups."""

    def test_catalog_size(self):
        assert len(SECTOR_ASSETS) == 38
        assert len(get_all_sector_names()) == 38

    def test_keys_are_lowercase_names(self):
        for key, asset in SECTOR_ASSETS.items():
            assert key == asset.name.lower()

    def test_unique_names(self):
        names = [asset.name for asset in SECTOR_ASSETS.values()]
        assert len(names) == len(set(names))

    def test_home_template(self):
        home = SECTOR_ASSETS[HOME_SECTOR_ASSET]
        assert home.name == "Lanai"
        assert home.type == SectorType.CIVILIZED
        assert not home.is_dangerous

    def test_lookup_case_insensitive(self):
        assert get_sector_asset("VEGA") is SECTOR_ASSETS["vega"]
        assert get_sector_asset("vega") is SECTOR_ASSETS["vega"]
        assert get_sector_asset("Nowhere") is None

    def test_image_name(self):
        assert get_sector_asset("vega").image_name == "Vega.png"
        assert BLANK_CARD == "!Blank.png"

    def test_by_type_partitions_catalog(self):
        """Test that every template belongs to exactly one type bucket."""
        total = sum(len(get_sectors_by_type(t)) for t in SectorType)
        assert total == len(SECTOR_ASSETS)
        assert all(a.type == SectorType.FRONTIER for a in get_sectors_by_type(SectorType.FRONTIER))

    def test_every_template_described(self):
        assert all(asset.description for asset in SECTOR_ASSETS.values())

    def test_random_sector_deterministic(self):
        rng_a, rng_b = GameRNG(3), GameRNG(3)
        picks = [get_random_sector(rng_a) for _ in range(10)]
        assert picks == [get_random_sector(rng_b) for _ in range(10)]
        assert all(pick in SECTOR_ASSETS.values() for pick in picks)
