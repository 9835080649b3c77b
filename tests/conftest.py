"""Core test fixtures for DPR calculator tests."""

import json

import pytest
import yaml

from dprcalc.config import get_settings
from dprcalc.schemas.character import CharacterRecord
from dprcalc.schemas.context import CombatContext
from dprcalc.schemas.facts import SpellFact


FIREBALL_DESCRIPTION = (
    "A bright streak flashes from your pointing finger to a point you choose "
    "within range and then blossoms with a low roar into an explosion of flame. "
    "Each creature in a 20-foot-radius sphere centered on that point must make a "
    "Dexterity saving throw. A target takes 8d6 fire damage on a failed save, or "
    "half as much damage on a successful one."
)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; start every test from a clean cache."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def context() -> CombatContext:
    """Default combat context: DC 15, +7 to hit, AC 15."""
    return CombatContext()


@pytest.fixture
def fireball() -> SpellFact:
    return SpellFact(
        key="srd_fireball",
        name="Fireball",
        level=3,
        school="Evocation",
        duration="Instantaneous",
        damage_roll="8d6",
        damage_types=["fire"],
        saving_throw="dexterity",
        classes=["sorcerer", "wizard"],
        description=FIREBALL_DESCRIPTION,
        higher_level=(
            "When you cast this spell using a spell slot of 4th level or higher, the "
            "damage increases by 1d6 for each slot level above 3rd."
        ),
    )


@pytest.fixture
def fire_bolt() -> SpellFact:
    return SpellFact(
        key="fire-bolt",
        name="Fire Bolt",
        level=0,
        school="Evocation",
        duration="Instantaneous",
        damage_roll="1d10",
        damage_types=["fire"],
        attack_roll=True,
        description=(
            "You hurl a mote of fire at a creature or object within range. Make a "
            "ranged spell attack against the target."
        ),
    )


@pytest.fixture
def chaos_bolt() -> SpellFact:
    """Chaos Bolt as scraped: only the 1d6 part of the damage."""
    return SpellFact(
        key="wikidot_chaos-bolt",
        name="Chaos Bolt",
        level=1,
        school="Evocation",
        duration="Instantaneous",
        damage_roll="1d6",
        attack_roll=True,
        description=(
            "You hurl an undulating, warbling mass of chaotic energy at one creature "
            "in range. Make a ranged spell attack against the target. On a hit, the "
            "target takes 2d8 + 1d6 damage. Choose one of the d8s. The number rolled "
            "on that die determines the attack's damage type."
        ),
    )


@pytest.fixture
def shield() -> SpellFact:
    """A utility spell with no damage roll."""
    return SpellFact(
        key="shield",
        name="Shield",
        level=1,
        school="Abjuration",
        casting_time="1 reaction",
        duration="1 round",
        description="An invisible barrier of magical force appears and protects you.",
    )


@pytest.fixture
def moonbeam() -> SpellFact:
    return SpellFact(
        key="moonbeam",
        name="Moonbeam",
        level=2,
        school="Evocation",
        duration="Concentration, up to 1 minute",
        concentration=True,
        damage_roll="2d10",
        damage_types=["radiant"],
        saving_throw="constitution",
        description=(
            "A silvery beam of pale light shines down in a 5-foot-radius, 40-foot-high "
            "cylinder centered on a point within range. When a creature enters the "
            "spell's area for the first time on a turn or starts its turn there, it "
            "must make a Constitution saving throw. It takes 2d10 radiant damage on a "
            "failed save, or half as much damage on a successful one."
        ),
    )


@pytest.fixture
def fighter() -> CharacterRecord:
    return CharacterRecord(
        name="Brom",
        class_name="Fighter",
        level=5,
        attack_bonus=7,
        base_damage=10,
        feats=["GWM"],
    )


def _spell_records() -> list[dict]:
    """Spell records as the content store exports them (camelCase keys)."""
    return [
        {
            "key": "srd_fireball",
            "name": "Fireball",
            "level": 3,
            "school": "Evocation",
            "damageRoll": "8d6",
            "damageTypes": ["fire"],
            "savingThrow": "dexterity",
            "description": FIREBALL_DESCRIPTION,
            "higherLevel": "The damage increases by 1d6 for each slot level above 3rd.",
        },
        {
            "key": "fire-bolt",
            "name": "Fire Bolt",
            "level": 0,
            "school": "Evocation",
            "damageRoll": "1d10",
            "damageTypes": ["fire"],
            "attackRoll": True,
            "description": "You hurl a mote of fire at a creature or object within range.",
        },
        {
            "key": "magic-missile",
            "name": "Magic Missile",
            "level": 1,
            "school": "Evocation",
            "damageRoll": "3d4+3",
            "damageTypes": ["force"],
            "description": (
                "You create three glowing darts of magical force. Each dart hits a "
                "creature of your choice that you can see within range."
            ),
            "higherLevel": "The spell creates one more dart for each slot level above 1st.",
        },
        {
            "key": "shield",
            "name": "Shield",
            "level": 1,
            "school": "Abjuration",
            "description": "An invisible barrier of magical force appears and protects you.",
        },
    ]


@pytest.fixture
def spell_records() -> list[dict]:
    return _spell_records()


@pytest.fixture
def spells_yaml(tmp_path):
    """Spell file in YAML with a top-level ``spells`` list."""
    path = tmp_path / "spells.yaml"
    path.write_text(yaml.safe_dump({"spells": _spell_records()}), encoding="utf-8")
    return path


@pytest.fixture
def spells_json(tmp_path):
    """Spell file in JSON as a bare list."""
    path = tmp_path / "spells.json"
    path.write_text(json.dumps(_spell_records()), encoding="utf-8")
    return path


@pytest.fixture
def character_yaml(tmp_path):
    path = tmp_path / "character.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "character": {
                    "name": "Brom",
                    "class": "Fighter",
                    "level": 5,
                    "attackBonus": 7,
                    "baseDamage": 10,
                    "feats": ["GWM"],
                }
            }
        ),
        encoding="utf-8",
    )
    return path
