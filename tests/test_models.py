"""Tests for data models."""

from datetime import datetime, timezone

import pytest

from spaceace.models import (
    Campaign,
    DieType,
    FractionalHex,
    HexCoordinate,
    LogEntry,
    LogEntryType,
    Roll,
    RollMode,
    Sector,
    SectorType,
)
from spaceace.utils import GameRNG

T0 = datetime(2026, 1, 1, tzinfo=timezone.utc)


def make_sector(**overrides):
    fields = dict(id="s1", hex_q=1, hex_r=-1, name="Vega", type=SectorType.CIVILIZED, created_at=T0, updated_at=T0)
    fields.update(overrides)
    return Sector(**fields)


class TestHexModels:
    """Test coordinate models."""

    def test_cube_constraint(self):
        coord = HexCoordinate(2, -5)
        assert coord.q + coord.r + coord.s == 0

    def test_fractional_cube_constraint(self):
        frac = FractionalHex(0.25, 1.5)
        assert frac.s == pytest.approx(-1.75)

    def test_hashable(self):
        """Test that coordinates work as set members and compare by value."""
        assert len({HexCoordinate(1, 2), HexCoordinate(1, 2), HexCoordinate(2, 1)}) == 2

    def test_str(self):
        assert str(HexCoordinate(-1, 3)) == "(-1, 3)"


class TestSector:
    """Test Sector model."""

    def test_valid_sector(self):
        sector = make_sector()
        assert sector.coordinate == HexCoordinate(1, -1)
        assert not sector.is_discovered
        assert sector.linked_encounter_ids == []

    def test_type_coerced_from_string(self):
        assert make_sector(type="anomaly").type == SectorType.ANOMALY

    def test_invalid_type(self):
        with pytest.raises(ValueError):
            make_sector(type="wormhole")

    def test_empty_id(self):
        with pytest.raises(ValueError, match="id cannot be empty"):
            make_sector(id="")

    def test_empty_name(self):
        with pytest.raises(ValueError, match="must have a name"):
            make_sector(name="")

    def test_danger_independent_of_type(self):
        sector = make_sector(type=SectorType.CIVILIZED, is_dangerous=True)
        assert sector.is_dangerous
        assert sector.type == SectorType.CIVILIZED

    def test_discover_once(self):
        """Test that discovery sets the timestamp only the first time."""
        sector = make_sector()
        later = datetime(2026, 2, 1, tzinfo=timezone.utc)

        assert sector.discover(T0) is True
        assert sector.discover(later) is False
        assert sector.discovered_at == T0


class TestRoll:
    """Test Roll model."""

    def test_normal_roll(self):
        roll = Roll(id="r1", die_type="d20", result=15, mode="normal", timestamp=T0, modifiers=[2, 1])
        assert roll.die_type == DieType.D20
        assert roll.mode == RollMode.NORMAL
        assert roll.base_result == 12

    def test_normal_roll_rejects_dual_results(self):
        with pytest.raises(ValueError):
            Roll(id="r1", die_type=DieType.D20, result=15, mode=RollMode.NORMAL, timestamp=T0, results=[3, 15])

    @pytest.mark.parametrize("results", [None, [12], [1, 2, 3]])
    def test_advantage_requires_two_dice(self, results):
        with pytest.raises(ValueError, match="exactly two dice"):
            Roll(id="r1", die_type=DieType.D20, result=12, mode=RollMode.ADVANTAGE, timestamp=T0, results=results)

    def test_invalid_die(self):
        with pytest.raises(ValueError):
            Roll(id="r1", die_type="d12", result=3, mode=RollMode.NORMAL, timestamp=T0)

    def test_die_sides(self):
        assert DieType.D20.sides == 20
        assert DieType.D6.sides == 6


class TestLogEntry:
    """Test LogEntry model."""

    def test_type_coerced(self):
        entry = LogEntry(id="e1", timestamp=T0, type="mission_update")
        assert entry.type == LogEntryType.MISSION_UPDATE
        assert entry.data == {}

    def test_empty_id(self):
        with pytest.raises(ValueError):
            LogEntry(id="", timestamp=T0, type=LogEntryType.NOTE)


class TestCampaign:
    """Test Campaign model."""

    def test_rng_created_from_seed(self):
        """Test that the RNG is seeded from the campaign seed."""
        campaign = Campaign(seed=42)
        assert isinstance(campaign.rng, GameRNG)
        assert campaign.rng.randint(0, 1000) == GameRNG(42).randint(0, 1000)

    def test_current_sector_must_exist(self):
        with pytest.raises(ValueError, match="current_sector"):
            Campaign(seed=1, current_sector="nowhere")

    def test_current_sector_valid(self):
        sector = make_sector()
        campaign = Campaign(seed=1, sectors={sector.id: sector}, current_sector=sector.id)
        assert campaign.current_sector == "s1"

    def test_history_must_reference_rolls(self):
        with pytest.raises(ValueError, match="unknown rolls"):
            Campaign(seed=1, roll_history=["ghost"])
