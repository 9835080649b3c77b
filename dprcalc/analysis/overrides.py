"""Corrections for spells whose scraped damage roll is wrong or incomplete.

Overrides are looked up by the normalized record key and applied before
any generic heuristics.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DamageOverride:
    """Replacement damage formula for a specific spell.

    Attributes:
        base_damage: Correct damage notation at the spell's base level.
        slot_scaling: Dice added per slot level above the base level.
        chain_chance: Chance that a successful hit leaps to a new target.
        chain_description: Human-readable description of the chain.
    """

    base_damage: str
    slot_scaling: str | None = None
    chain_chance: float | None = None
    chain_description: str | None = None


SPECIAL_DAMAGE_FORMULAS: dict[str, DamageOverride] = {
    # Scraped as 1d6; the bolt also deals 2d8. Matching d8s (1 in 8) leap
    # to another target.
    "chaos-bolt": DamageOverride(
        base_damage="2d8+1d6",
        slot_scaling="1d6",
        chain_chance=0.125,
        chain_description="When both d8s match, leaps to another target within 30ft",
    ),
}


def find_override(normalized_key: str) -> DamageOverride | None:
    return SPECIAL_DAMAGE_FORMULAS.get(normalized_key)
