"""Tests for campaign save/load."""

import json
from datetime import datetime, timezone

import pytest

from spaceace.engine import initialize_galaxy, move_to
from spaceace.engine.dice import DiceEngine
from spaceace.engine.journal import log_quick_event
from spaceace.engine.missions import create_mission, update_objective
from spaceace.engine.rolls import roll_dice
from spaceace.engine.sectors import link_mission
from spaceace.engine.sessions import start_session
from spaceace.models import Campaign, LogEntryType, RollMode
from spaceace.utils import GameRNG
from spaceace.utils.serialization import campaign_from_dict, campaign_to_dict, load_campaign, save_campaign

T0 = datetime(2026, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def campaign():
    """A campaign with a map, a move, a session, a mission, rolls and journal entries."""
    c = initialize_galaxy(Campaign(seed=42), now=T0)
    target = next(s for s in c.sectors.values() if s.id != "home-sector" and s.is_discovered)
    move_to(c, target.id, now=T0)
    link_mission(c, target.id, "mission-1", now=T0)
    start_session(c, "Opening night", now=T0)
    mission = create_mission(c, "Survey", objectives=["Scan", "Report"], related_sector_ids=[target.id], now=T0)
    update_objective(c, mission.id, mission.objectives[0].id, "in_progress", now=T0)

    engine = DiceEngine(GameRNG(7), source="test")
    roll_dice(c, engine, "d20", RollMode.ADVANTAGE, [2], note="Evasion")
    roll_dice(c, engine, "d6")
    log_quick_event(c, LogEntryType.REWARD, note="Salvage", credits=150)
    return c


class TestSerialization:
    """Test save/load round trips."""

    def test_round_trip(self, campaign, tmp_path):
        """Test that a saved campaign loads back identically."""
        path = save_campaign(campaign, str(tmp_path / "campaign.json"))
        loaded = load_campaign(str(path))

        assert loaded.seed == campaign.seed
        assert loaded.current_sector == campaign.current_sector
        assert loaded.sectors == campaign.sectors
        assert loaded.rolls == campaign.rolls
        assert loaded.roll_history == campaign.roll_history
        assert loaded.log_entries == campaign.log_entries
        assert loaded.sessions == campaign.sessions
        assert loaded.current_session == campaign.current_session
        assert loaded.missions == campaign.missions
        assert loaded.auto_log_rolls is True

    def test_rng_state_preserved(self, campaign, tmp_path):
        """Test that generation continues identically after a reload."""
        path = save_campaign(campaign, str(tmp_path / "campaign.json"))
        loaded = load_campaign(str(path))
        assert [loaded.rng.random() for _ in range(5)] == [campaign.rng.random() for _ in range(5)]

    def test_plain_json_shape(self, campaign):
        """Test that the persisted form uses plain values."""
        data = json.loads(json.dumps(campaign_to_dict(campaign)))
        home = data["sectors"]["home-sector"]

        assert data["version"] == "1.0.0"
        assert home["type"] == "civilized"
        assert home["hex_q"] == 0 and home["hex_r"] == 0
        assert home["discovered_at"] == T0.isoformat()
        assert data["roll_history"] == campaign.roll_history

    def test_undiscovered_sector_round_trip(self, campaign):
        hidden = next(s for s in campaign.sectors.values() if not s.is_discovered)
        restored = campaign_from_dict(campaign_to_dict(campaign))
        assert restored.sectors[hidden.id].discovered_at is None

    def test_relative_path_goes_to_state_dir(self, campaign, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        path = save_campaign(campaign, "relative.json")
        assert path == tmp_path / "state" / "relative.json"
        assert load_campaign("relative.json").seed == 42

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_campaign(str(tmp_path / "nope.json"))

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(ValueError, match="Invalid campaign file"):
            load_campaign(str(path))

    def test_malformed_campaign(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"sectors": {}}))
        with pytest.raises(ValueError, match="Malformed campaign file"):
            load_campaign(str(path))

    def test_dangling_current_sector_rejected(self, campaign):
        data = campaign_to_dict(campaign)
        data["current_sector"] = "deleted-sector"
        with pytest.raises(ValueError):
            campaign_from_dict(data)
