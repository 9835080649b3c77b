"""Combat context schemas.

The combat context is an immutable bag of attacker and target parameters.
A single default instance is built once; callers derive variants with
``with_overrides`` instead of mutating anything.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


ABILITIES = (
    "strength",
    "dexterity",
    "constitution",
    "intelligence",
    "wisdom",
    "charisma",
)

ABILITY_ABBREVIATIONS = {ability[:3]: ability for ability in ABILITIES}


def normalize_ability(name: str | None) -> str | None:
    """Map "DEX", "Dexterity", "dex save" and similar to "dexterity"."""
    if not name:
        return None
    key = name.strip().lower()[:3]
    return ABILITY_ABBREVIATIONS.get(key)


class TargetSaves(BaseModel):
    """Target saving throw bonuses for each ability."""

    model_config = ConfigDict(frozen=True)

    strength: int = 2
    dexterity: int = 3
    constitution: int = 3
    intelligence: int = 0
    wisdom: int = 1
    charisma: int = -1

    def bonus_for(self, ability: str | None) -> int:
        """Save bonus for an ability name or abbreviation (0 if unknown)."""
        normalized = normalize_ability(ability)
        if normalized is None:
            return 0
        return getattr(self, normalized)


class CombatContext(BaseModel):
    """Attacker and target parameters for one analysis."""

    model_config = ConfigDict(frozen=True)

    proficiency_bonus: int = Field(default=3, description="Caster/attacker proficiency bonus")
    ability_modifier: int = Field(
        default=4,
        description="Spellcasting or attack ability modifier",
    )
    caster_level: int = Field(default=5, ge=1, le=20, description="Character level")
    target_ac: int = Field(default=15, description="Target Armor Class")
    target_saves: TargetSaves = Field(default_factory=TargetSaves)
    expected_targets: int = Field(
        default=1,
        ge=1,
        description="Targets in an area; 1 lets the AoE estimator decide",
    )
    expected_duration: int = Field(default=1, ge=1, description="Rounds a fight lasts")
    expected_encounters: int = Field(default=4, ge=1, description="Encounters per day")
    clustered: bool = Field(
        default=False,
        description="Enemies bunched together (denser AoE coverage)",
    )

    @property
    def spell_save_dc(self) -> int:
        """8 + proficiency + ability modifier."""
        return 8 + self.proficiency_bonus + self.ability_modifier

    @property
    def attack_bonus(self) -> int:
        """Proficiency + ability modifier."""
        return self.proficiency_bonus + self.ability_modifier

    def with_overrides(self, **changes: Any) -> "CombatContext":
        """Return a copy with the given fields replaced.

        ``target_saves`` may be a partial dict; unspecified abilities keep
        their current bonus. None values are ignored so optional CLI flags
        can be passed straight through.

        Examples:
            >>> ctx = DEFAULT_CONTEXT.with_overrides(target_ac=18, target_saves={"dexterity": 5})
            >>> ctx.target_ac, ctx.target_saves.dexterity, ctx.target_saves.wisdom
            (18, 5, 1)
        """
        updates = {key: value for key, value in changes.items() if value is not None}

        saves = updates.pop("target_saves", None)
        if isinstance(saves, dict):
            merged = self.target_saves.model_dump()
            merged.update(
                {normalize_ability(name) or name: bonus for name, bonus in saves.items()}
            )
            updates["target_saves"] = TargetSaves(**merged)
        elif saves is not None:
            updates["target_saves"] = saves

        data = self.model_dump()
        data.update(updates)
        return CombatContext.model_validate(data)


DEFAULT_CONTEXT = CombatContext()
