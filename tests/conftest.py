"""Shared fixtures for all tests."""

import json

import pytest
import structlog

from mercdex.config import get_settings
from mercdex.roster import CharacterRecord, RosterStore


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Keep tests off any developer .env file and the real data directory.

    Settings are cached, so the cache is cleared before and after each test.
    The CLI reconfigures structlog, so its defaults are restored afterwards.
    """
    monkeypatch.chdir(tmp_path)
    for var in ("MERCDEX_DATA_DIR", "MERCDEX_MAX_LEVEL", "MERCDEX_MAX_REBOOT", "MERCDEX_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def raw_roster():
    """Roster resource entries in the on-disk format."""
    return [
        {
            "name": "Vesper",
            "faction": "Syndicate",
            "attackType": "Ranged",
            "subclass": "Sniper",
            "description": "A patient marksman.",
            "summary": "Long-range damage.",
            "tips_and_tricks": "Stay behind cover.",
            "level_growth": {"health": [10, 20, 30], "attack": [5, 6, 7]},
            "reboot_growth": {"health": [0, 5], "crit": [1, 2]},
            "skill_1_text": "Deals {skill_1_value} damage",
            "skill_1_growth_level": [4, 8],
            "skill_1_growth_reboot": [0, 2],
            "skill_2_text": "Marks the target.",
            "skill_2_tooltip": "Lasts 6 seconds.",
        },
        {
            "name": "Anvil",
            "faction": "Peacekeeper",
            "attackType": "Melee",
            "subclass": "Bruiser",
            "level_growth": {"health": [150, 160]},
            "skill_3_text": "Blocks {skill_3_value} damage",
            "skill_3_growth_level": [100.5],
        },
        {
            "name": "bramble",
            "faction": "Freemen",
            "attackType": "Support",
            "subclass": "Medic",
        },
    ]


@pytest.fixture
def raw_filter_options():
    """Filter-option resource in the on-disk format."""
    return {
        "AttackType": ["Melee", "Ranged", "Support"],
        "Faction": ["Peacekeeper", "Freemen", "Syndicate"],
        "Subclass": ["Bruiser", "Sniper", "Medic"],
    }


@pytest.fixture
def records(raw_roster):
    """Validated records built from raw_roster."""
    return [CharacterRecord.model_validate(entry) for entry in raw_roster]


@pytest.fixture
def roster(records):
    """A RosterStore over the sample records."""
    return RosterStore.load(records)


@pytest.fixture
def vesper(roster):
    """The fully populated sample mercenary."""
    return roster.find_by_name("Vesper")


@pytest.fixture
def data_dir(tmp_path, raw_roster, raw_filter_options):
    """A data directory holding mercs.json and filters.json."""
    directory = tmp_path / "data"
    directory.mkdir()
    (directory / "mercs.json").write_text(json.dumps(raw_roster), encoding="utf-8")
    (directory / "filters.json").write_text(json.dumps(raw_filter_options), encoding="utf-8")
    return directory
