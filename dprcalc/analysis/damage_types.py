"""Damage type choice and randomness detection.

Being able to pick the damage type lets a caster route around resistances,
so the analyzer reports it alongside the numbers.
"""

import re
from dataclasses import dataclass

from dprcalc.schemas.facts import SpellFact


DAMAGE_TYPE_NAMES = (
    "acid",
    "cold",
    "fire",
    "force",
    "lightning",
    "necrotic",
    "poison",
    "psychic",
    "radiant",
    "thunder",
)

# Spells whose caster picks the damage type at cast time
DAMAGE_TYPE_CHOICE_SPELLS: dict[str, tuple[str, ...]] = {
    "chromatic-orb": ("acid", "cold", "fire", "lightning", "poison", "thunder"),
    "dragons-breath": ("acid", "cold", "fire", "lightning", "poison"),
    "elemental-bane": ("acid", "cold", "fire", "lightning"),
    "elemental-weapon": ("acid", "cold", "fire", "lightning", "thunder"),
    "glyph-of-warding": ("acid", "cold", "fire", "lightning", "thunder"),
    "spirit-shroud": ("cold", "necrotic", "radiant"),
    "flame-blade": ("fire",),  # Single type, listed so it is never guessed
}

RANDOM_DAMAGE_TYPES = ("acid", "cold", "fire", "force", "lightning", "poison", "psychic", "thunder")

_TYPE = "|".join(DAMAGE_TYPE_NAMES)
CHOOSE_PATTERN = re.compile(
    rf"you choose ({_TYPE})(?:,\s*({_TYPE}))*(?:,?\s*or\s*({_TYPE}))",
    re.IGNORECASE,
)
TYPE_WORD_PATTERN = re.compile(rf"\b({_TYPE})\b", re.IGNORECASE)


@dataclass(frozen=True)
class DamageTypeInfo:
    types: tuple[str, ...]
    has_choice: bool = False
    is_random: bool = False


def _dedupe(values: list[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(values))


def detect_damage_type_choice(fact: SpellFact) -> DamageTypeInfo:
    """Work out which damage types a spell can deal and who picks them.

    Checks, in order: the known-spell table, "you choose X, Y, or Z"
    wording, Chaos Bolt style random types, then the record's own types.

    Examples:
        >>> fact = SpellFact(name="Orb", description="You choose acid, cold, or fire.")
        >>> detect_damage_type_choice(fact).types
        ('acid', 'cold', 'fire')
    """
    known = DAMAGE_TYPE_CHOICE_SPELLS.get(fact.normalized_key)
    if known:
        return DamageTypeInfo(types=known, has_choice=True)

    desc = (fact.description or "").lower()

    match = CHOOSE_PATTERN.search(desc)
    if match:
        # Repeated groups only keep their last capture, so re-scan the span
        types = _dedupe(TYPE_WORD_PATTERN.findall(match.group(0)))
        if len(types) > 1:
            return DamageTypeInfo(types=types, has_choice=True)

    if "chaos bolt" in desc or ("determines the" in desc and "damage type" in desc):
        return DamageTypeInfo(types=RANDOM_DAMAGE_TYPES, is_random=True)

    return DamageTypeInfo(types=tuple(fact.damage_types))
