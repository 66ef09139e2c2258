import shutil
from pathlib import Path

import pytest

from backend import storage
from onepiecedle.roster import load_roster

TEST_DATA_DIR = Path("data-tests")
PRESETS_DIR = Path(__file__).parent / "presets"
ROSTER_PATH = PRESETS_DIR / "characters.json"


@pytest.fixture(autouse=True)
def clean_test_data():
    """Wipe and re-init data-tests/ before every test."""
    if TEST_DATA_DIR.exists():
        shutil.rmtree(TEST_DATA_DIR)
    storage.init_storage(TEST_DATA_DIR)
    yield
    # leave data-tests around after tests for inspection; CI can ignore it


@pytest.fixture
def roster():
    """The bundled sample roster, validated."""
    return load_roster(ROSTER_PATH).entities


def _entity(**overrides):
    from onepiecedle.models import Entity

    fields = {
        "id": "luffy",
        "name": "Monkey D. Luffy",
        "aliases": ["Luffy", "Straw Hat"],
        "image_ref": "/characters/luffy.png",
        "gender": "Male",
        "affiliation_primary": "Straw Hat Pirates",
        "devil_fruit_type": "Paramecia",
        "haki": ["O", "A", "C"],
        "bounty": 3_000_000_000,
        "height_cm": 174,
        "origin": "East Blue",
        "first_arc": "Romance Dawn",
    }
    fields.update(overrides)
    if "id" in overrides and "image_ref" not in overrides:
        fields["image_ref"] = f"/characters/{overrides['id']}.png"
    return Entity(**fields)


@pytest.fixture
def make_entity():
    """Build an Entity from Luffy's attributes with keyword overrides."""
    return _entity
