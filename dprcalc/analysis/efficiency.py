"""Slot efficiency ratings.

Spell damage is judged against two yardsticks: an at-will attack cantrip
(Fire Bolt) at the caster's level, and a typical single-target damage
figure for each spell level.
"""

from dprcalc.combat.rounding import round_damage
from dprcalc.schemas.analysis import CantripComparison, SlotEfficiency


CANTRIP_DIE_AVERAGE = 5.5  # d10
CANTRIP_HIT_RATE = 0.65
WORTH_SLOT_RATIO = 1.5

# Expected single-target damage for a spell of each level
SLOT_DAMAGE_BASELINES = {
    0: 5,
    1: 12,  # ~Magic Missile
    2: 18,  # ~Scorching Ray
    3: 28,
    4: 35,
    5: 45,
    6: 55,
    7: 65,
    8: 75,
    9: 90,
}
UNKNOWN_LEVEL_BASELINE = 10

# (minimum ratio, rating), best first
EFFICIENCY_RATINGS = (
    (1.3, "excellent"),
    (1.0, "good"),
    (0.7, "average"),
)


def cantrip_dice(caster_level: int) -> int:
    """Damage dice of a scaling cantrip at a character level."""
    if caster_level >= 17:
        return 4
    if caster_level >= 11:
        return 3
    if caster_level >= 5:
        return 2
    return 1


def compare_to_cantrip(damage: float, caster_level: int) -> CantripComparison:
    """Compare expected damage to casting Fire Bolt instead.

    Examples:
        >>> compare_to_cantrip(21.7, 5).worth_slot
        True
    """
    cantrip_damage = cantrip_dice(caster_level) * CANTRIP_DIE_AVERAGE * CANTRIP_HIT_RATE
    ratio = damage / cantrip_damage

    return CantripComparison(
        cantrip_damage=round_damage(cantrip_damage),
        ratio=round_damage(ratio),
        worth_slot=ratio > WORTH_SLOT_RATIO,
    )


def rate_slot_efficiency(damage: float, spell_level: int) -> SlotEfficiency:
    """Bucket damage against the baseline for the spell's level."""
    baseline = SLOT_DAMAGE_BASELINES.get(spell_level, UNKNOWN_LEVEL_BASELINE)
    ratio = damage / baseline

    for threshold, rating in EFFICIENCY_RATINGS:
        if ratio >= threshold:
            return SlotEfficiency(rating=rating, score=round_damage(ratio))
    return SlotEfficiency(rating="poor", score=round_damage(ratio))
